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
The DotGraph, to edit a DOT text while keeping its formatting.

Example::

    >>> from dotedit import DotGraph
    >>> g = DotGraph('digraph {\\n    a -> b  // main edge\\n}')
    >>> g.insert_node('c', {'shape': 'box'})
    >>> g.insert_edge('b', 'c')
    >>> print(g.text)
    digraph {
        a -> b  // main edge
        c [shape=box]
        b -> c
    }
    >>> g.delete_node('a')
    2
    >>> print(g.text)
    digraph {
        b  // main edge
        c [shape=box]
        b -> c
    }
    >>> g.edges
    {'b->c': {}}

After every change the text is read again, so :attr:`~DotGraph.tree`,
:attr:`~DotGraph.nodes` and :attr:`~DotGraph.edges` always describe the
current text.

"""

import logging

from .dom import edit, index, read, util


logger = logging.getLogger(__name__)


def split_edge(edge):
    """Return the two node names of an edge like ``"a->b"`` or ``"a--b"``.

    Raises ValueError if the text has both edge operators, or if it does not
    split in exactly two names.

    """
    if '--' in edge and '->' in edge:
        raise ValueError("mixed edge operators: {!r}".format(edge))
    names = edge.split('->' if '->' in edge else '--')
    names = [name.strip() for name in names]
    if len(names) != 2 or not all(names):
        raise ValueError("not an edge: {!r}".format(edge))
    return names


class DotGraph:
    """A DOT text, with its tree and index of nodes and edges.

    Raises :class:`~dotedit.lang.dot.DotSyntaxError` if the text can't be
    read.

    A change is made on a copy of the text, which is read and indexed before
    it replaces the current text. If anything goes wrong, the DotGraph keeps
    the text it had.

    """
    #: The indent of inserted statements.
    indent = '    '

    #: The root lexicon to read the text with (None: ``Dot.root``).
    lexicon = None

    def __init__(self, text):
        self._commit(text)

    def __repr__(self):
        return "<{} {} ({} nodes, {} edges)>".format(
            type(self).__name__, self.tree.kind, len(self.nodes), len(self.edges))

    def __str__(self):
        return self.write()

    @property
    def text(self):
        """The current text."""
        return self._text

    @property
    def edgeop(self):
        """The edge operator of the graph, ``->`` or ``--``."""
        return self.tree.edgeop

    def _commit(self, text):
        """Read and index the text, and then make it the current text."""
        tree = read.graph(text, self.lexicon)
        nodes, edges = index.build(tree)
        self._text, self.tree, self.nodes, self.edges = text, tree, nodes, edges

    def reparse(self):
        """Read the current text again, rebuilding tree and index."""
        self._commit(self._text)

    def eraser(self):
        """Return an :class:`~.dom.edit.Eraser` for the current text."""
        return edit.Eraser(self.tree, self._text)

    def insert_node(self, name, attributes=None):
        """Add a node statement before the closing brace of the graph.

        Attributes with a None value are left out.

        """
        logger.debug("insert node %r", name)
        text = util.format_node_statement(name, attributes, self.indent)
        self._commit(self.eraser().insert_at_end(text))

    def insert_edge(self, start, end, attributes=None):
        """Add an edge statement before the closing brace of the graph.

        The edge operator is the one of the graph.

        """
        logger.debug("insert edge %r %s %r", start, self.edgeop, end)
        text = util.format_edge_statement(start, end, self.edgeop, attributes, self.indent)
        self._commit(self.eraser().insert_at_end(text))

    def delete_node(self, name):
        """Remove all occurrences of the node.

        Returns the number of removed elements: node references and the edge
        operators next to them. If 0, the text is not changed.

        """
        text, count = self.eraser().delete('node', name)
        if count:
            self._commit(text)
        logger.debug("delete node %r: %d, text length %d", name, count, len(self._text))
        return count

    def delete_edge(self, edge):
        """Remove an edge, given as ``"a->b"`` or ``"a--b"``.

        An edge in the middle of a chain splits the chain; the part before
        the split keeps a copy of the attribute list. The node names match
        regardless of ports, like the keys in :attr:`edges`. Returns the number
        of removed edge operators; if 0, the text is not changed. Raises
        ValueError if the edge can't be split in two node names.

        """
        start, end = split_edge(edge)
        text, count = self.eraser().delete('edge', start, end)
        if count:
            self._commit(text)
        logger.debug("delete edge %r: %d, text length %d", edge, count, len(self._text))
        return count

    def get_node_attributes(self, name):
        """Return the attributes dictionary of the node, or None if there is no
        such node."""
        return self.nodes.get(name)

    def get_edge_attributes(self, edge):
        """Return the attributes dictionary of the edge (e.g. ``"a->b"``), or
        None if there is no such edge."""
        return self.edges.get(edge)

    def write(self):
        """Return the canonical text of the graph (not the current text)."""
        return self.tree.write()

