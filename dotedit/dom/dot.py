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
Elements describing a Graphviz DOT graph.

A graph read from text (see :mod:`~dotedit.dom.read`) looks like this::

    >>> from dotedit.dom import read
    >>> g = read.graph('digraph G { node [shape=box]; a -> b [color=red]; }')
    >>> g.dump()
    <dot.Graph digraph 'G' (2 children)>
     ├╴<dot.AttrStatement 'node' (1 child)>
     │  ╰╴<dot.Attribute 'shape' (1 child)>
     │     ╰╴<dot.Id 'box'>
     ╰╴<dot.EdgeStatement (3 children)>
        ├╴<dot.NodeRef 'a'>
        ├╴<dot.NodeRef 'b'>
        ╰╴<dot.Attribute 'color' (1 child)>
           ╰╴<dot.Id 'red'>
    >>> g.write()
    'digraph G {node [shape=box] a -> b [color=red]}'

The :meth:`~.element.Element.write` method renders the canonical, normalized
text of a tree. It is only meant for display; edits in an existing text are
performed by the :mod:`~dotedit.dom.edit` module, which keeps the formatting
of the original text.

Statements and edge endpoints are closed sets of element types, listed in
:data:`STATEMENT_TYPES` and :data:`ENDPOINT_TYPES`.

"""

import reprlib

from . import element
from .util import quote_id_if_necessary


class Id(element.TextElement):
    """An identifier value, e.g. an attribute value.

    The head value is the text without quotes. If ``html`` is True, the value
    was (and will be) written between ``<`` and ``>``.

    """
    __slots__ = ('html',)
    _attributes = ('html',)

    def __init__(self, head, *children, html=False):
        self.html = html
        super().__init__(head, *children)

    def write_head(self):
        if self.html:
            return '<{}>'.format(self.head)
        return quote_id_if_necessary(self.head)

    def value(self):
        """Return the value as stored in the graph index.

        An HTML value keeps its angle brackets, so it can be told apart from
        a normal string.

        """
        return self.write_head() if self.html else self.head


class Attribute(element.TextElement):
    """An attribute ``key=value``, the head is the key, the child the value Id."""

    def write_head(self):
        return quote_id_if_necessary(self.head) + '='

    def value(self):
        """Return the value of the Id child."""
        for n in self / Id:
            return n.value()


class Port(element.TextElement):
    """A port of a node reference, with an optional compass point."""
    __slots__ = ('compass',)
    _attributes = ('compass',)

    def __init__(self, head, *children, compass=None):
        self.compass = compass
        super().__init__(head, *children)

    def write_head(self):
        text = ':' + quote_id_if_necessary(self.head)
        if self.compass:
            text += ':' + quote_id_if_necessary(self.compass)
        return text


class NodeRef(element.TextElement):
    """A reference to a node, the head is the node id.

    There can be a :class:`Port` child.

    """
    def write_head(self):
        return quote_id_if_necessary(self.head)

    def port(self):
        """Return the Port child, if any."""
        for n in self / Port:
            return n

    def key(self):
        """Return the node id with port and compass point, colon-separated.

        This is how a node reference is compared with the names of an edge to
        delete.

        """
        key = self.head
        p = self.port()
        if p:
            key += ':' + p.head
            if p.compass:
                key += ':' + p.compass
        return key


class AttributedStatement(element.Element):
    """Base class for statements that end with an attribute list.

    The attributes are written between ``[`` and ``]``.

    """
    def attributes_list(self):
        """Return the list of Attribute children."""
        return list(self / Attribute)

    def concat(self, node, next_node):
        if isinstance(next_node, Attribute):
            return ' ' if isinstance(node, Attribute) else ' ['
        return self.space_between

    def write_tail(self):
        return ']' if self.attributes_list() else None


class AttrStatement(element.TextElement, AttributedStatement):
    """A default-attribute statement, the head is ``graph``, ``node`` or ``edge``.

    A statement ``ID = ID`` is read as an AttrStatement for ``graph``; in that
    case ``keyword`` is False, as the text contains neither the keyword nor the
    brackets. The written output always has the keyword, and the brackets
    only if there are attributes.

    """
    __slots__ = ('keyword',)
    _attributes = ('keyword',)

    def __init__(self, head, *children, keyword=True):
        self.keyword = keyword
        super().__init__(head, *children)

    @classmethod
    def check_head(cls, head):
        return head in ('graph', 'node', 'edge')

    def write_head(self):
        return self.head + (' [' if len(self) else '')

    space_between = ' '


class NodeStatement(AttributedStatement):
    """A node statement: a NodeRef child followed by Attribute children."""

    def node(self):
        """Return the NodeRef."""
        for n in self / NodeRef:
            return n


class EdgeStatement(AttributedStatement):
    """An edge statement.

    The first children are the endpoints (NodeRef or Subgraph), followed by
    Attribute children.

    """
    def endpoints(self):
        """Return the list of endpoint children (NodeRef or Subgraph)."""
        return list(self / ENDPOINT_TYPES)

    @property
    def edgeop(self):
        """The edge operator of the graph this statement is in.

        Defaults to ``--`` when the statement is not part of a Graph.

        """
        for g in self << Graph:
            return g.edgeop
        return '--'

    def concat(self, node, next_node):
        if isinstance(next_node, ENDPOINT_TYPES):
            return ' {} '.format(self.edgeop)
        return super().concat(node, next_node)


class StatementList(element.Element):
    """Base class for Graph and Subgraph: an element containing statements."""

    space_between = ' '

    def statements(self):
        """Return the list of statement children."""
        return list(self / STATEMENT_TYPES)

    def write_children(self):
        """Skip an anonymous subgraph without children directly following
        another subgraph."""
        prev = None
        for n in self:
            if not (isinstance(n, Subgraph) and n.id is None and not len(n)
                    and isinstance(prev, Subgraph)):
                yield n
            prev = n

    def write_tail(self):
        return '}'


class Subgraph(StatementList):
    """A subgraph, named or anonymous (``id`` is None)."""
    __slots__ = ('id',)
    _attributes = ('id',)

    def __init__(self, *children, id=None):
        self.id = id
        super().__init__(*children)

    def repr_head(self):
        if self.id is not None:
            return reprlib.repr(self.id)

    def write_head(self):
        if self.id is not None:
            return 'subgraph {} {{'.format(quote_id_if_necessary(self.id))
        return '{'


class Graph(StatementList):
    """The root element of a DOT graph.

    ``kind`` is ``"graph"`` or ``"digraph"``, ``strict`` a boolean and ``id``
    the graph's name, or None.

    """
    __slots__ = ('kind', 'strict', 'id')
    _attributes = ('kind', 'strict', 'id')

    def __init__(self, *children, kind='graph', strict=False, id=None):
        self.kind = kind
        self.strict = strict
        self.id = id
        super().__init__(*children)

    @property
    def edgeop(self):
        """The edge operator: ``->`` for a digraph, ``--`` for a graph."""
        return '->' if self.kind == 'digraph' else '--'

    def repr_head(self):
        head = ('strict ' if self.strict else '') + self.kind
        if self.id is not None:
            head += ' ' + reprlib.repr(self.id)
        return head

    def write_head(self):
        text = 'strict ' if self.strict else ''
        text += self.kind + ' '
        if self.id is not None:
            text += quote_id_if_necessary(self.id) + ' '
        return text + '{'


#: The element types that can appear as a statement in a Graph or Subgraph.
STATEMENT_TYPES = (NodeStatement, EdgeStatement, AttrStatement, Subgraph)

#: The element types that can appear as an endpoint in an EdgeStatement.
ENDPOINT_TYPES = (NodeRef, Subgraph)


def node(name, **attributes):
    """Convenience function to create a NodeStatement.

    For example::

        >>> node('a', shape='box').write()
        'a [shape=box]'

    """
    return NodeStatement(NodeRef(name), *attrs(attributes))


def edge(*names, **attributes):
    """Convenience function to create an EdgeStatement between node names."""
    return EdgeStatement(*map(NodeRef, names), *attrs(attributes))


def attrs(attributes):
    """Yield Attribute elements for a mapping; None values are skipped."""
    for key, value in attributes.items():
        if value is not None:
            yield Attribute(key, Id(str(value)))
