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
The Eraser class, to remove nodes and edges from a DOT text, or to add text
at the end of a graph, without touching the rest of the text.

The Eraser walks a :class:`~.dot.Graph` and the text it was read from side by
side, using a :class:`~.cursor.Cursor`. Every token the tree describes is
either skipped or removed. Comments, blank lines, indentation and quoting of
everything that is not removed are kept::

    >>> from dotedit.dom import read
    >>> from dotedit.dom.edit import Eraser
    >>> text = 'digraph {\\n  a -> b -> c  // chain\\n  d\\n}'
    >>> e = Eraser(read.graph(text), text)
    >>> print(e.delete('edge', 'a', 'b')[0])
    digraph {
      a b -> c  // chain
      d
    }
    >>> print(e.delete('node', 'd')[0])
    digraph {
      a -> b -> c  // chain
    }

The Eraser never changes the tree or the text it was created with; the
results are returned, and the caller should read the new text again before
editing further.

"""

import collections
import logging

from parce.util import Dispatcher

from . import dot
from .cursor import Cursor


logger = logging.getLogger(__name__)


class Target(collections.namedtuple('Target', 'kind primary secondary')):
    """What to delete.

    ``kind`` is ``"node"`` or ``"edge"``; ``primary`` is the node name, or the
    left node of the edge, and ``secondary`` the right node of the edge. A
    Target with kind None matches nothing.

    """
    __slots__ = ()

    def is_node(self, ref):
        """Return True if the NodeRef must be removed."""
        return self.kind == 'node' and ref.head == self.primary

    def is_edge(self, left, right):
        """Return True if the two adjacent endpoints form the edge to remove.

        A name without a colon matches the node regardless of its port, a
        name with a colon must match port and compass point as well. An edge
        to or from a subgraph never matches.

        """
        return (self.kind == 'edge'
                and isinstance(left, dot.NodeRef) and isinstance(right, dot.NodeRef)
                and self._matches(left, self.primary) and self._matches(right, self.secondary))

    @staticmethod
    def _matches(ref, name):
        return (ref.key() if ':' in name else ref.head) == name


class Eraser:
    """Removes elements from, or adds text to a DOT text.

    ``tree`` is the :class:`~.dot.Graph` read from ``text``.

    """
    _statement = Dispatcher()

    def __init__(self, tree, text):
        self.tree = tree
        self.text = text

    def delete(self, kind, primary, secondary=None):
        """Remove all occurrences of a node or edge.

        ``kind`` is ``"node"`` or ``"edge"``. For a node, ``primary`` is the
        node name. For an edge, ``primary`` and ``secondary`` are the left
        and the right node; a name like ``"id:port"`` or ``"id:port:compass"``
        only matches a node reference with that port, a plain id matches any.

        Returns a tuple (text, count). The count is the number of elements
        (node references and edge operators) that were removed; if it is 0,
        the text is unchanged.

        Raises :class:`~.cursor.StructuralMismatchError` if the tree does not
        fit the text.

        """
        cursor = Cursor(self.text)
        self.walk(cursor, Target(kind, primary, secondary))
        logger.debug("delete %s %r: %d elements removed", kind, primary, cursor.deleted)
        return cursor.text, cursor.deleted

    def insert_at_end(self, text):
        """Return the text with ``text`` inserted before the closing brace of
        the graph."""
        cursor = Cursor(self.text)
        self.walk(cursor, Target(None, None, None))
        cursor.index -= 1
        cursor.insert(text)
        return cursor.text

    def walk(self, cursor, target):
        """Walk the full graph."""
        graph = self.tree
        if graph.strict:
            cursor.skip('strict', keyword=True)
        cursor.skip(graph.kind, keyword=True)
        if graph.id is not None:
            cursor.skip(graph.id)
        cursor.skip('{')
        self.walk_statements(cursor, target, graph)
        cursor.skip('}')

    def walk_statements(self, cursor, target, node):
        """Walk the statements of a Graph or Subgraph.

        The separators after a statement that was removed completely are
        removed as well.

        """
        for statement in node:
            if not isinstance(statement, dot.STATEMENT_TYPES):
                raise TypeError("unknown statement type: {}".format(type(statement).__name__))
            erased = self._statement(type(statement), cursor, target, statement)
            cursor.skip_separators(erased, semicolon=True)
        cursor.skip_previous()

    def walk_node_ref(self, cursor, ref, erase):
        """Walk a NodeRef with its port."""
        cursor.skip(ref.head, erase)
        port = ref.port()
        if port:
            cursor.skip(':', erase)
            cursor.skip(port.head, erase)
            if port.compass:
                cursor.skip(':', erase)
                cursor.skip(port.compass, erase)

    def walk_attributes(self, cursor, statement, erase):
        """Walk the attribute list(s) of a statement.

        An HTML value is matched as one literal.

        """
        for attr in statement.attributes_list():
            cursor.skip('[', erase, optional=True)
            cursor.skip(attr.head, erase, comma=True, semicolon=True)
            cursor.skip('=', erase)
            cursor.skip(attr.value(), erase)
            cursor.skip(']', erase, optional=True, comma=True, semicolon=True)
        # empty lists
        while cursor.at('['):
            cursor.skip('[', erase)
            cursor.skip(']', erase)

    @staticmethod
    def separate(cursor):
        """Insert a space if the text before and after the cursor would touch."""
        text, index = cursor.text, cursor.index
        if 0 < index < len(text) and not text[index-1].isspace() and not text[index].isspace():
            cursor.insert(' ')

    @_statement(dot.AttrStatement)
    def attr_statement(self, cursor, target, statement):
        """Default attributes are never removed."""
        if statement.keyword:
            cursor.skip(statement.head, keyword=True)
        self.walk_attributes(cursor, statement, False)
        return False

    @_statement(dot.NodeStatement)
    def node_statement(self, cursor, target, statement):
        """Remove the statement if it declares the target node."""
        erase = target.is_node(statement.node())
        self.walk_node_ref(cursor, statement.node(), erase)
        self.walk_attributes(cursor, statement, erase)
        if erase:
            cursor.deleted += 1
        return erase

    @_statement(dot.EdgeStatement)
    def edge_statement(self, cursor, target, statement):
        """Remove the target node or edge from an edge chain.

        An edge operator is removed if one of its endpoints is the node to
        remove, or if it is the edge to remove. When a node remains on both
        sides, the chain is split there.

        The attribute list stays with every part of the chain that still has
        an edge operator: a part that is split off before the end gets a copy
        of it. If the last part has no edge operator left, the list is removed,
        so it never ends up on a node. The separators after the statement are
        only removed if all its endpoints were.

        """
        edgeop = statement.edgeop
        endpoints = statement.endpoints()
        attributes = statement.attributes_list()
        erased = [isinstance(e, dot.NodeRef) and target.is_node(e) for e in endpoints]
        last_kept = max((i for i, e in enumerate(erased) if not e), default=-1)
        has_edge = False    # the current part of the chain has an edge operator
        kept = False        # an endpoint before the cursor was kept
        for i, endpoint in enumerate(endpoints):
            erase = erased[i]
            if i:
                erase_edge = erase or erased[i-1] or target.is_edge(endpoints[i-1], endpoint)
                if not erase_edge:
                    has_edge = True
                elif i <= last_kept:
                    # a kept node follows, a new part of the chain begins
                    if has_edge and attributes:
                        cursor.insert(' [{}]'.format(' '.join(attr.write() for attr in attributes)))
                    has_edge = False
                cursor.skip(edgeop, erase_edge)
                if erase_edge:
                    cursor.deleted += 1
                    if kept and not erase:
                        self.separate(cursor)
            if isinstance(endpoint, dot.Subgraph):
                self.subgraph(cursor, target, endpoint)
            else:
                self.walk_node_ref(cursor, endpoint, erase)
            if erase:
                cursor.deleted += 1
            kept = kept or not erase
        self.walk_attributes(cursor, statement, not has_edge)
        if kept and not has_edge and cursor.at(';'):
            cursor.skip_previous()
        return not kept

    @_statement(dot.Subgraph)
    def subgraph(self, cursor, target, statement):
        """Walk the statements of a subgraph, which itself is never removed."""
        cursor.skip('subgraph', optional=True, keyword=True)
        if statement.id is not None:
            cursor.skip(statement.id)
        cursor.skip('{')
        self.walk_statements(cursor, target, statement)
        cursor.skip('}')
        return False

