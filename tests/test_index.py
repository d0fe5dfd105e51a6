# -*- coding: utf-8 -*-
#
# This file is part of `dotedit`, a library for editing Graphviz DOT sources
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.



"""
Test the index of nodes and edges.
"""

### find dotedit
import sys
sys.path.insert(0, '.')

import pytest

from dotedit.dom import dot, index, read


def nodes_edges(text):
    """Return the (nodes, edges) tuple for the text."""
    return index.build(read.graph(text))


def check_nodes():
    """Test node declarations and attribute merging."""
    nodes, edges = nodes_edges('digraph { a [shape=box]; a -> b -> c [color=red] }')
    assert nodes == {'a': {'shape': 'box'}, 'b': {}, 'c': {}}
    assert list(nodes) == ['a', 'b', 'c']

    # later attributes update earlier ones
    nodes, edges = nodes_edges('graph { a [color=red]; a [shape=box, color=blue] }')
    assert nodes == {'a': {'color': 'blue', 'shape': 'box'}}
    assert edges == {}

    # values are unquoted, HTML values keep their brackets
    nodes, edges = nodes_edges('graph { "my node" [label="x y"]; b [label=<<i>x</i>>] }')
    assert nodes == {'my node': {'label': 'x y'}, 'b': {'label': '<<i>x</i>>'}}

    # default attributes are not applied
    nodes, edges = nodes_edges('graph { node [shape=box]; edge [color=red]; rankdir=LR; a }')
    assert nodes == {'a': {}}


def check_edges():
    """Test edge keys and attributes."""
    nodes, edges = nodes_edges('digraph { a -> b -> c [color=red] }')
    assert edges == {'a->b': {'color': 'red'}, 'b->c': {'color': 'red'}}

    nodes, edges = nodes_edges('graph { a -- b; b -- a [w=2] }')
    assert edges == {'a--b': {}, 'b--a': {'w': '2'}}

    # ports are not part of the key
    nodes, edges = nodes_edges('digraph { a:p -> b:q:n [w=1] }')
    assert nodes == {'a': {}, 'b': {}}
    assert edges == {'a->b': {'w': '1'}}

    nodes, edges = nodes_edges('graph { "my node" -- b }')
    assert list(edges) == ['my node--b']


def check_subgraphs():
    """Test nodes and edges in and to subgraphs."""
    nodes, edges = nodes_edges('digraph { a -> {b c} -> d }')
    assert list(nodes) == ['a', 'b', 'c', 'd']
    assert list(edges) == ['a->b', 'a->c', 'b->d', 'c->d']

    nodes, edges = nodes_edges('graph { subgraph s { x -- y [w=1] } z }')
    assert nodes == {'x': {}, 'y': {}, 'z': {}}
    assert edges == {'x--y': {'w': '1'}}

    # a node mentioned twice in a subgraph endpoint yields one edge
    nodes, edges = nodes_edges('digraph { a -> { b; b -> c } }')
    assert list(edges) == ['b->c', 'a->b', 'a->c']


def test_main():
    check_nodes()
    check_edges()
    check_subgraphs()

    i = index.GraphIndex(read.graph('digraph { a -> b }'))
    assert i.edgeop == '->'
    assert i.nodes == {'a': {}, 'b': {}}

    with pytest.raises(TypeError):
        index.build(dot.Graph(dot.NodeRef('x')))


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
