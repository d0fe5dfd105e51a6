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
Index of the nodes and edges of a DOT graph.

A :class:`GraphIndex` walks a :class:`~.dot.Graph` once and collects the
attributes of every node and every edge::

    >>> from dotedit.dom import read, index
    >>> i = index.GraphIndex(read.graph('digraph { a [shape=box]; a -> b -> c [color=red] }'))
    >>> i.nodes
    {'a': {'shape': 'box'}, 'b': {}, 'c': {}}
    >>> i.edges
    {'a->b': {'color': 'red'}, 'b->c': {'color': 'red'}}

Attribute values are strings; an HTML value keeps its angle brackets. The
attributes of an edge statement are given to every edge it defines. Default
attribute statements (``node [...]``, ``edge [...]``) are not applied.

The index is never updated, it is simply built again after the text changed.

"""


from parce.util import Dispatcher

from . import dot


def build(tree):
    """Return a tuple (nodes, edges) for the Graph ``tree``.

    Both are dictionaries mapping the name to a dictionary of attributes.

    """
    i = GraphIndex(tree)
    return i.nodes, i.edges


class GraphIndex:
    """Collects the nodes and edges of a Graph.

    The ``nodes`` attribute maps node ids to attribute dictionaries, the
    ``edges`` attribute maps edge keys like ``"a->b"`` to attribute
    dictionaries. Edge keys are written with the edge operator of the graph,
    and the endpoints in the order they appear in the text.

    """
    _statement = Dispatcher()

    def __init__(self, tree):
        self.edgeop = tree.edgeop
        self.nodes = {}
        self.edges = {}
        self.visit_statements(tree)

    def visit_statements(self, node):
        """Visit all statements of a Graph or Subgraph."""
        for statement in node:
            if not isinstance(statement, dot.STATEMENT_TYPES):
                raise TypeError("unknown statement type: {}".format(type(statement).__name__))
            self._statement(type(statement), statement)

    def add_node(self, name, attributes=()):
        """Register a node name, and update its attributes."""
        self.nodes.setdefault(name, {}).update(attributes)

    def add_edge(self, start, end, attributes=()):
        """Register an edge, and update its attributes."""
        key = start + self.edgeop + end
        self.edges.setdefault(key, {}).update(attributes)

    def endpoint_names(self, endpoint):
        """Return the list of node names an endpoint refers to.

        For a Subgraph, these are all nodes in statements inside it, in order
        of appearance.

        """
        if isinstance(endpoint, dot.NodeRef):
            return [endpoint.head]
        elif isinstance(endpoint, dot.Subgraph):
            names = []
            for n in endpoint // dot.NodeRef:
                if n.head not in names:
                    names.append(n.head)
            return names
        raise TypeError("unknown endpoint type: {}".format(type(endpoint).__name__))

    @staticmethod
    def attributes(statement):
        """Return a dictionary with the attributes of a statement."""
        return {attr.head: attr.value() for attr in statement.attributes_list()}

    @_statement(dot.NodeStatement)
    def node_statement(self, statement):
        """Add a node and its attributes."""
        self.add_node(statement.node().head, self.attributes(statement))

    @_statement(dot.EdgeStatement)
    def edge_statement(self, statement):
        """Add all nodes and edges of an edge chain.

        Subgraph endpoints are also visited as statement lists.

        """
        attributes = self.attributes(statement)
        previous = None
        for endpoint in statement.endpoints():
            if isinstance(endpoint, dot.Subgraph):
                self.visit_statements(endpoint)
            names = self.endpoint_names(endpoint)
            for name in names:
                self.add_node(name)
            if previous:
                for start in previous:
                    for end in names:
                        self.add_edge(start, end, attributes)
            previous = names

    @_statement(dot.Subgraph)
    def subgraph(self, statement):
        """Visit the statements of a Subgraph."""
        self.visit_statements(statement)

    @_statement(dot.AttrStatement)
    def attr_statement(self, statement):
        """Default attributes are not indexed."""
        pass

