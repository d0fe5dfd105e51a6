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
Test the DotGraph.
"""

### find dotedit
import sys
sys.path.insert(0, '.')

import pytest

import dotedit
from dotedit import DotGraph
from dotedit.dom import read
from dotedit.dom.cursor import StructuralMismatchError
from dotedit.graph import split_edge
from dotedit.lang.dot import Dot, DotSyntaxError


def check_insert():
    """Test inserting nodes and edges."""
    g = DotGraph('digraph{ a }')
    g.insert_node('x')
    assert g.text == 'digraph{ a     x\n}'
    g.insert_edge('x', 'y')
    assert g.text == 'digraph{ a     x\n    x -> y\n}'
    assert list(g.nodes) == ['a', 'x', 'y']
    assert g.edges == {'x->y': {}}

    # ids and values are quoted when necessary, None values left out
    g = DotGraph('graph {\n}')
    g.insert_node('my node', {'label': 'a b', 'shape': 'box', 'color': None})
    assert g.text == 'graph {\n    "my node" [label="a b" shape=box]\n}'
    assert g.get_node_attributes('my node') == {'label': 'a b', 'shape': 'box'}
    g.insert_edge('my node', 'b', {'weight': 2})
    assert g.text.endswith('    "my node" -- b [weight="2"]\n}')
    assert g.get_edge_attributes('my node--b') == {'weight': '2'}

    g = DotGraph('digraph {\n}')
    g.insert_node('weird name', {'label': 'a"b'})
    assert g.text == 'digraph {\n    "weird name" [label="a\\"b"]\n}'
    g.reparse()
    assert g.get_node_attributes('weird name') == {'label': 'a"b'}

    g = DotGraph('graph {\n}')
    g.indent = '\t'
    g.insert_node('a')
    assert g.text == 'graph {\n\ta\n}'


def check_delete():
    """Test deleting nodes and edges."""
    g = DotGraph('digraph { a -> b }')
    assert g.delete_node('zzz') == 0
    assert g.text == 'digraph { a -> b }'
    assert g.delete_node('a') == 2
    assert g.text == 'digraph { b }'
    assert g.nodes == {'b': {}}
    assert g.edges == {}

    g = DotGraph('graph { a -- b -- c }')
    assert g.delete_edge('a--b') == 1
    assert g.edges == {'b--c': {}}
    assert g.delete_edge('a -- b') == 0
    assert g.delete_edge('b--c') == 1
    assert g.edges == {}
    assert set(g.nodes) == {'a', 'b', 'c'}

    # edges next to a subgraph
    g = DotGraph('digraph { a -> {b c} }')
    assert g.edges == {'a->b': {}, 'a->c': {}}
    assert g.delete_node('a') == 2
    assert g.text == 'digraph { {b c} }'
    assert set(g.nodes) == {'b', 'c'}
    assert g.edges == {}
    g = DotGraph('digraph { {b c} -> a }')
    assert g.delete_node('a') == 2
    assert g.text == 'digraph { {b c} }'

    # a split chain keeps the attributes of its edges
    g = DotGraph('digraph { a -> b -> c [color=red] }')
    assert g.delete_edge('b->c') == 1
    assert g.get_edge_attributes('a->b') == {'color': 'red'}
    assert g.get_edge_attributes('b->c') is None
    assert g.get_node_attributes('c') == {}

    # edge keys have no ports
    g = DotGraph('digraph { a:p -> b [color=red] }')
    assert g.edges == {'a->b': {'color': 'red'}}
    assert g.delete_edge('a->b') == 1
    assert g.text == 'digraph { a:p b }'
    assert g.edges == {}

    for edge in ('a', 'a->b->c', '->b', 'a--', 'a->b--c'):
        with pytest.raises(ValueError):
            g.delete_edge(edge)


def check_errors():
    """Test that a failing change keeps the current state."""
    g = DotGraph('graph { a }')
    text, tree, nodes, edges = g.text, g.tree, g.nodes, g.edges
    with pytest.raises(DotSyntaxError):
        g.insert_node('x', {'bad key': 1})
    assert g.text is text and g.tree is tree
    assert g.nodes is nodes and g.edges is edges

    # a tree that does not fit the text
    g.tree = read.graph('graph { b }')
    with pytest.raises(StructuralMismatchError):
        g.delete_node('b')
    assert g.text == 'graph { a }'
    g.reparse()
    assert g.tree.equals(read.graph('graph { a }'))

    with pytest.raises(DotSyntaxError):
        DotGraph('graph { a -> b }')
    with pytest.raises(DotSyntaxError):
        DotGraph('')


def test_main():
    check_insert()
    check_delete()
    check_errors()

    g = DotGraph('digraph {\n    a -> b  // main edge\n}')
    assert g.edgeop == '->'
    assert str(g) == 'digraph {a -> b}'
    assert repr(g) == '<DotGraph digraph (2 nodes, 1 edges)>'
    assert g.get_node_attributes('c') is None
    assert g.get_edge_attributes('b->a') is None

    assert split_edge(' a -> b ') == ['a', 'b']
    assert split_edge('a--b') == ['a', 'b']

    assert dotedit.find(filename='x.gv') == Dot.root
    assert dotedit.find('graphviz') == Dot.root


def test_load(tmp_path):
    filename = tmp_path / "test.gv"
    filename.write_text('graph {\n  a -- b\n}\n', encoding='utf-8')
    g = dotedit.load(filename)
    assert g.text == 'graph {\n  a -- b\n}\n'
    assert g.edges == {'a--b': {}}


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
