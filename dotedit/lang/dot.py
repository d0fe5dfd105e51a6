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
DOT language and transform definition.

The :class:`Dot` language definition lexes a Graphviz DOT text. The
:class:`DotTransform` transforms the parce tree to a :mod:`dotedit.dom.dot`
tree. The tokens of a graph body are read by a :class:`StatementBuilder`,
which first turns them into a flat stream of atoms, and then reads the
statements from that stream.

The DOM tree does not keep the tokens it was built from. Errors are not
recovered: everything that does not fit in the grammar raises a
:class:`DotSyntaxError`.

"""

import collections
import re

from parce import Language, lexicon, default_action
from parce.transform import Transform
import parce.action as a
from parce.util import Dispatcher

from dotedit.dom import dot


class DotSyntaxError(ValueError):
    """Raised when a DOT text can't be read.

    The ``pos`` attribute is the position in the text where the error was
    detected.

    """
    def __init__(self, message, pos=None):
        self.message = message
        self.pos = pos
        if pos is not None:
            message = "{} (at position {})".format(message, pos)
        super().__init__(message)


def parse(text):
    """Return a :class:`~dotedit.dom.dot.Graph` read from text.

    Raises :class:`DotSyntaxError` if the text is not a valid DOT graph.

    """
    from dotedit.dom import read
    return read.graph(text)


class Dot(Language):
    """Graphviz DOT language definition."""

    @lexicon(re_flags=re.IGNORECASE)
    def root(cls):
        yield r'\bstrict\b', a.Keyword
        yield r'\b(?:di)?graph\b', a.Keyword
        yield r'\{', a.Bracket.Start, cls.body
        yield from cls.common()

    @lexicon(re_flags=re.IGNORECASE)
    def body(cls):
        yield r'\}', a.Bracket.End, -1
        yield r'\{', a.Bracket.Start, cls.body
        yield r'\[', a.Bracket.Start, cls.attrs
        yield r'\b(?:node|edge|graph|subgraph)\b', a.Keyword
        yield r'->|--', a.Operator
        yield r'=', a.Operator.Assignment
        yield r'[;,]', a.Delimiter.Separator
        yield r':', a.Delimiter
        yield from cls.common()

    @lexicon
    def attrs(cls):
        yield r'\]', a.Bracket.End, -1
        yield r'=', a.Operator.Assignment
        yield r'[;,]', a.Delimiter.Separator
        yield from cls.common()

    @lexicon(consume=True)
    def dqstring(cls):
        yield r'\\"', a.String.Escape
        yield r'"', a.String, -1
        yield default_action, a.String

    @lexicon(consume=True)
    def html(cls):
        yield r'<', a.Delimiter, cls.html
        yield r'>', a.Delimiter, -1
        yield default_action, a.String

    @classmethod
    def common(cls):
        yield r'"', a.String, cls.dqstring
        yield r'<', a.Delimiter, cls.html
        yield r'/\*[\s\S]*?(?:\*/|\Z)', a.Comment
        yield r'(?://|#)[^\n]*', a.Comment
        yield r'-?(?:\.\d+|\d+(?:\.\d*)?)', a.Number
        yield r'[^\W\d]\w*', a.Name
        yield r'\S', a.Invalid


class DotTransform(Transform):
    """Transform DOT to a :class:`~dotedit.dom.dot.Graph`."""

    def root(self, items):
        """Build the Graph."""
        return StatementBuilder(items).graph()

    def body(self, items):
        """Return a tuple (statements, edgeops) for a statement list.

        The edge operator atoms are checked against the graph kind when the
        root is built.

        """
        builder = StatementBuilder(items)
        statements = builder.statements()
        return statements, builder.edgeops

    def attrs(self, items):
        """Return the list of Attribute elements in ``[`` ... ``]``."""
        return StatementBuilder(items).attributes()

    def dqstring(self, items):
        """Return the value of a double-quoted string."""
        if len(items) < 2 or items[-1] != '"':
            raise DotSyntaxError("unterminated string", items[0].pos)
        return ''.join('"' if i.action == a.String.Escape else i.text for i in items[1:-1])

    def html(self, items):
        """Return the full text of an HTML string, including the angle brackets."""
        if len(items) < 2 or items[-1] != '>':
            raise DotSyntaxError("unterminated HTML string", items[0].pos)
        return ''.join(i.text if i.is_token else i.obj for i in items)


#: A unit in the flattened stream of a context's items.
Atom = collections.namedtuple("Atom", "kind value pos")


class StatementBuilder:
    """Helper class that reads the items of a DOT context.

    The items are first converted to a list of :class:`Atom` tuples; the
    ``kind`` of an atom is one of ``"id"`` (value: a
    :class:`~dotedit.dom.dot.Id`), ``"keyword"`` (value: lower case keyword),
    ``"op"`` (an edge operator), ``"punct"`` (other delimiters), ``"attrs"``
    (value: a list of Attributes) or ``"body"`` (value: the result of
    :meth:`DotTransform.body`). Tokens without a handler, such as comments
    and the brackets that open a context, are left out.

    """
    _action = Dispatcher()
    _context = Dispatcher()

    def __init__(self, items):
        self.pos = 0
        self.atoms = list(self.read(items))
        self.index = 0
        self.edgeops = []

    def read(self, items):
        """Yield the Atoms for the items."""
        for i in items:
            if i.is_token:
                self.pos = i.pos
                atom = self._action(i.action, i)
            else:
                atom = self._context(i.name, i.obj)
            if atom:
                yield atom

    ## reading the atom stream
    def peek(self):
        """Return the current atom, or None at the end."""
        if self.index < len(self.atoms):
            return self.atoms[self.index]

    def next(self):
        """Return the current atom and advance, or None at the end."""
        atom = self.peek()
        if atom:
            self.index += 1
        return atom

    def at(self, kind, value=None):
        """Return True if the current atom has the kind (and value, if given)."""
        atom = self.peek()
        return atom is not None and atom.kind == kind and (value is None or atom.value == value)

    def error(self, message, atom=None):
        """Raise a DotSyntaxError at the atom's position."""
        raise DotSyntaxError(message, atom.pos if atom else self.pos)

    def expect_id(self):
        """Return the Id of the current atom and advance, or raise an error."""
        atom = self.next()
        if not atom or atom.kind != 'id':
            self.error("expected an identifier", atom)
        return atom.value

    ## reading the grammar
    def graph(self):
        """Read a full graph from the items of the root context."""
        strict = False
        atom = self.next()
        if atom and atom.kind == 'keyword' and atom.value == 'strict':
            strict = True
            atom = self.next()
        if not atom or atom.kind != 'keyword' or atom.value not in ('graph', 'digraph'):
            self.error("expected 'graph' or 'digraph'", atom)
        kind = atom.value
        graph_id = None
        atom = self.next()
        if atom and atom.kind == 'id':
            graph_id = atom.value.value()
            atom = self.next()
        if not atom or atom.kind != 'body':
            self.error("expected '{'", atom)
        statements, edgeops = atom.value
        if self.peek():
            self.error("unexpected text after the graph", self.peek())
        graph = dot.Graph(*statements, kind=kind, strict=strict, id=graph_id)
        for op in edgeops:
            if op.value != graph.edgeop:
                self.error("edge operator {} in {}".format(op.value, kind), op)
        return graph

    def statements(self):
        """Read statements until the closing brace."""
        result = []
        while not self.at('punct', '}'):
            if not self.peek():
                self.error("missing '}'")
            result.append(self.statement())
            if self.at('punct', ';'):
                self.index += 1
        self.index += 1
        if self.peek():
            self.error("unexpected text", self.peek())
        return result

    def statement(self):
        """Read one statement."""
        atom = self.next()
        if atom.kind == 'keyword':
            if atom.value == 'subgraph':
                return self.edge_or_endpoint(self.subgraph())
            if not self.at('attrs'):
                self.error("expected '['", self.peek())
            return dot.AttrStatement(atom.value, *self.attribute_lists())
        elif atom.kind == 'body':
            return self.edge_or_endpoint(self.anonymous_subgraph(atom))
        elif atom.kind == 'id':
            if self.at('punct', '='):
                self.index += 1
                attr = dot.Attribute(atom.value.value(), self.expect_id())
                return dot.AttrStatement('graph', attr, keyword=False)
            return self.edge_or_endpoint(self.node_ref(atom))
        self.error("unexpected {}".format(atom.value if atom.kind in ('punct', 'op') else atom.kind), atom)

    def edge_or_endpoint(self, endpoint):
        """Return an EdgeStatement if an edge operator follows the endpoint.

        Otherwise a NodeStatement is returned for a NodeRef, and the Subgraph
        itself for a Subgraph.

        """
        endpoints = [endpoint]
        while self.at('op'):
            self.edgeops.append(self.next())
            endpoints.append(self.endpoint())
        if len(endpoints) > 1:
            return dot.EdgeStatement(*endpoints, *self.attribute_lists())
        elif isinstance(endpoint, dot.NodeRef):
            return dot.NodeStatement(endpoint, *self.attribute_lists())
        return endpoint

    def endpoint(self):
        """Read the endpoint after an edge operator."""
        atom = self.next()
        if atom:
            if atom.kind == 'id':
                return self.node_ref(atom)
            elif atom.kind == 'body':
                return self.anonymous_subgraph(atom)
            elif atom.kind == 'keyword' and atom.value == 'subgraph':
                return self.subgraph()
        self.error("expected a node or subgraph", atom)

    def node_ref(self, atom):
        """Return a NodeRef for the id atom, reading a port if present."""
        ref = dot.NodeRef(atom.value.value())
        if self.at('punct', ':'):
            self.index += 1
            port = self.expect_id().value()
            compass = None
            if self.at('punct', ':'):
                self.index += 1
                compass = self.expect_id().value()
            ref.append(dot.Port(port, compass=compass))
        return ref

    def subgraph(self):
        """Read a subgraph after the ``subgraph`` keyword."""
        subgraph_id = None
        atom = self.next()
        if atom and atom.kind == 'id':
            subgraph_id = atom.value.value()
            atom = self.next()
        if not atom or atom.kind != 'body':
            self.error("expected '{'", atom)
        return self.anonymous_subgraph(atom, subgraph_id)

    def anonymous_subgraph(self, atom, subgraph_id=None):
        """Return a Subgraph for the body atom."""
        statements, edgeops = atom.value
        self.edgeops.extend(edgeops)
        return dot.Subgraph(*statements, id=subgraph_id)

    def attribute_lists(self):
        """Return the attributes of all attribute lists at the current position."""
        result = []
        while self.at('attrs'):
            result.extend(self.next().value)
        return result

    def attributes(self):
        """Read the ``key=value`` pairs of an attribute list, until ``]``."""
        result = []
        while not self.at('punct', ']'):
            if not self.peek():
                self.error("missing ']'")
            key = self.expect_id().value()
            if not self.at('punct', '='):
                self.error("expected '='", self.peek())
            self.index += 1
            result.append(dot.Attribute(key, self.expect_id()))
            if self.at('punct', ',') or self.at('punct', ';'):
                self.index += 1
        return result

    ## atoms for tokens
    @_action(a.Keyword)
    def keyword_action(self, token):
        """Called for ``Keyword``."""
        return Atom('keyword', token.text.lower(), token.pos)

    @_action(a.Name)
    def name_action(self, token):
        """Called for ``Name``."""
        return Atom('id', dot.Id(token.text), token.pos)

    @_action(a.Number)
    def number_action(self, token):
        """Called for ``Number``."""
        return Atom('id', dot.Id(token.text), token.pos)

    @_action(a.Operator)
    def operator_action(self, token):
        """Called for ``Operator`` (the edge operators)."""
        return Atom('op', token.text, token.pos)

    @_action(a.Operator.Assignment)
    @_action(a.Delimiter)
    @_action(a.Delimiter.Separator)
    @_action(a.Bracket.End)
    def delimiter_action(self, token):
        """Called for ``=`` and the delimiters."""
        return Atom('punct', token.text, token.pos)

    @_action(a.Invalid)
    def error_action(self, token):
        """Called for a character that does not belong in DOT."""
        raise DotSyntaxError("unexpected {!r}".format(token.text), token.pos)

    ## atoms for contexts
    @_context('dqstring')
    def dqstring_context(self, value):
        """Called for a double-quoted string."""
        return Atom('id', dot.Id(value), self.pos)

    @_context('html')
    def html_context(self, value):
        """Called for an HTML string."""
        return Atom('id', dot.Id(value[1:-1], html=True), self.pos)

    @_context('attrs')
    def attrs_context(self, value):
        """Called for an attribute list."""
        return Atom('attrs', value, self.pos)

    @_context('body')
    def body_context(self, value):
        """Called for a statement list in braces."""
        return Atom('body', value, self.pos)

