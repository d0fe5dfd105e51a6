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
The :class:`Cursor` finds the tokens of a DOT tree back in its text.

A Cursor has a working copy of a text and a position in it. The
:meth:`~Cursor.skip` method is called with every token a tree says must come
next; it skips whitespace and comments before the token, checks that the
token is there and then moves past it, or removes it from the text.

Three positions are maintained:

``index``
    the current position;

``skippable_index``
    the end of the last token that was matched (and not removed), or the
    start of the line after the last newline or comment that was skipped;

``erased_index``
    the position of the last removal.

When ``skippable_index <= erased_index``, everything after the last kept
token has been removed, and the whitespace that belonged to it can go as well
(see :meth:`~Cursor.skip_previous`).

A Cursor is used for one edit and then thrown away::

    >>> from dotedit.dom.cursor import Cursor
    >>> c = Cursor('digraph { a; b }')
    >>> c.skip('digraph'); c.skip('{')
    True
    True
    >>> c.skip('a', erase=True)
    True
    >>> c.text
    'digraph { ; b }'

"""


from .util import quote_id


#: Whitespace that does not end a line.
WHITESPACE = (' ', '\t', '\r')


class StructuralMismatchError(RuntimeError):
    """Raised when a token is not found where the tree says it must be.

    The ``expected`` attribute is the token, ``context`` the text at the
    position where it was expected (at most 40 characters).

    """
    def __init__(self, expected, context):
        self.expected = expected
        self.context = context
        super().__init__('Expected "{}", found: "{}..."'.format(expected, context))


class Cursor:
    """A position in a working copy of a text; see the module docstring."""
    def __init__(self, text):
        self.text = text
        self.index = 0
        self.skippable_index = 0
        self.erased_index = -1
        self.deleted = 0        # count of removed elements, maintained by the walker

    def __repr__(self):
        return "<Cursor index={} {!r}>".format(self.index, self.text[self.index:self.index+20])

    def splice(self, start, end):
        """Remove the text from start to end."""
        self.text = self.text[:start] + self.text[end:]
        self.erased_index = start

    def insert(self, text):
        """Insert text at the current position, and move past it."""
        self.text = self.text[:self.index] + text + self.text[self.index:]
        self.index += len(text)

    def matches(self, token, index, keyword=False):
        """Return True if the token is in the text at index.

        Keywords are compared case-insensitively.

        """
        if keyword:
            return self.text[index:index+len(token)].lower() == token.lower()
        return self.text.startswith(token, index)

    def at(self, token):
        """Return True if the token comes next, after the separators.

        The cursor is not moved.

        """
        index, skippable_index = self.index, self.skippable_index
        self.skip_separators()
        found = self.matches(token, self.index)
        self.index, self.skippable_index = index, skippable_index
        return found

    def skip_separators(self, erase=False, comma=False, semicolon=False, newline=True):
        """Skip whitespace and comments, and optionally commas and semicolons.

        If ``newline`` is False, a newline is not skipped.

        If ``erase`` is True, the whitespace is removed, up to the first
        newline or comment; the newline or comment itself is kept. When the
        removal reaches a newline, the blanks after the last kept token on
        that line are removed too, and if the line would be left empty, the
        preceding newline is removed as well.

        """
        index = skip_index = self.index
        previous = None

        def partially(next_index):
            """Skip (after removing the pending whitespace) up to next_index."""
            nonlocal index, skip_index, erase
            if erase:
                if (0 < self.skippable_index <= self.erased_index
                        and self.text.startswith('\n', index)
                        and not self.text[self.skippable_index:skip_index].strip(' \t')):
                    # trailing blanks of a line that lost its end
                    skip_index = self.skippable_index
                    if self.text[skip_index - 1] == '\n':
                        skip_index -= 1
                self.splice(skip_index, index)
                next_index -= index - skip_index
                erase = False
            index = skip_index = self.skippable_index = next_index

        while index != previous:
            previous = index
            if self.text[index:index+1] in WHITESPACE:
                index += 1
            if comma and self.text.startswith(',', index):
                index += 1
            if semicolon and self.text.startswith(';', index):
                index += 1
            if newline and self.text.startswith('\n', index):
                partially(index + 1)
            if self.text.startswith('/*', index):
                end = self.text.find('*/', index + 2)
                partially(len(self.text) if end == -1 else end + 2)
            if self.text.startswith('//', index):
                end = self.text.find('\n', index + 2)
                partially(len(self.text) if end == -1 else end + 1)
            if self.text.startswith('#', index):
                end = self.text.find('\n', index + 1)
                partially(len(self.text) if end == -1 else end + 1)
        if erase:
            self.splice(skip_index, index)
        else:
            self.index = index

    def skip(self, token, erase=False, optional=False, keyword=False, comma=False, semicolon=False):
        """Skip separators, then skip or remove the token.

        If the text is at a double quote, the token is quoted first. If the
        token is not found, :class:`StructuralMismatchError` is raised, unless
        ``optional`` is True. Returns whether the token was found.

        If ``erase`` is True, the token is removed, followed by the separators
        after it. ``keyword`` makes the comparison case-insensitive; ``comma``
        and ``semicolon`` are used when skipping the separators before the
        token.

        """
        self.skip_separators(comma=comma, semicolon=semicolon)
        index = start = self.index
        if self.text.startswith('"', index):
            token = quote_id(token)
        found = self.matches(token, index, keyword)
        if found:
            index += len(token)
        elif not optional:
            raise StructuralMismatchError(token, self.text[index:index+40])
        if erase:
            self.splice(start, index)
            self.skip_separators(erase=True)
        else:
            self.index = index
            if found and token:
                self.skippable_index = index
        return found

    def skip_previous(self):
        """Remove the text between the last kept token and the current position,
        if everything after that token has been removed.

        """
        if self.skippable_index <= self.erased_index:
            self.text = self.text[:self.skippable_index] + self.text[self.index:]
            self.index = self.skippable_index

