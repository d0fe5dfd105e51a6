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
Test the Cursor.
"""

### find dotedit
import sys
sys.path.insert(0, '.')

import pytest

from dotedit.dom.cursor import Cursor, StructuralMismatchError


def check_skip():
    """Test skipping and removing tokens."""
    c = Cursor('digraph { a; b }')
    assert c.skip('digraph')
    assert c.index == 7
    assert c.skip('{')
    assert c.skip('a', erase=True)
    assert c.text == 'digraph { ; b }'
    assert c.skip('b', semicolon=True)
    assert c.skip('}')
    assert c.index == len(c.text)

    # quoted ids
    c = Cursor('"my node" -> "abc" "a\\"b"')
    assert c.skip('my node')
    assert c.skip('->')
    assert c.skip('abc')
    assert c.skip('a"b')
    assert c.index == len(c.text)

    # keywords
    c = Cursor('DiGraph Graph')
    assert c.skip('digraph', keyword=True)
    with pytest.raises(StructuralMismatchError):
        c.skip('graph')

    # optional tokens
    c = Cursor('a b')
    assert not c.skip('[', optional=True)
    assert c.index == 0
    assert c.skip('a')
    assert c.skip('b')

    # commas and semicolons
    c = Cursor('a, b; c')
    c.skip('a')
    with pytest.raises(StructuralMismatchError):
        c.skip('b')
    c.skip('b', comma=True)
    c.skip('c', semicolon=True)


def check_mismatch():
    """Test the exception raised when a token is not there."""
    c = Cursor('x' * 50)
    with pytest.raises(StructuralMismatchError) as e:
        c.skip('y')
    assert e.value.expected == 'y'
    assert e.value.context == 'x' * 40
    assert str(e.value) == 'Expected "y", found: "{}..."'.format('x' * 40)


def check_separators():
    """Test skipping whitespace and comments."""
    c = Cursor('/* c */ a // x\n# y\n b')
    c.skip('a')
    assert c.index == 9
    c.skip('b')
    assert c.index == 21

    # an unterminated comment runs to the end
    c = Cursor('a /* open')
    c.skip('a')
    c.skip_separators()
    assert c.index == len(c.text)
    assert not c.skip('b', optional=True)

    c = Cursor(' \n a')
    c.skip_separators(newline=False)
    assert c.index == 1
    c.skip_separators()
    assert c.index == 3


def check_erase():
    """Test removing text, and the whitespace around it."""
    # an emptied line is removed completely
    c = Cursor('a\n  b\n}')
    c.skip('a')
    c.skip('b', erase=True)
    assert c.text == 'a\n}'
    assert c.index == 2
    assert c.skip('}')

    # comments are never removed
    c = Cursor('a\n  b // c\n}')
    c.skip('a')
    c.skip('b', erase=True)
    assert c.text == 'a\n  // c\n}'

    # blanks left at the end of a line are removed
    c = Cursor('a b\n}')
    c.skip('a')
    c.skip('b', erase=True)
    assert c.text == 'a\n}'
    assert c.index == 2

    # but not before a token on the same line
    c = Cursor('a b }')
    c.skip('a')
    c.skip('b', erase=True)
    assert c.text == 'a }'

    # the text after the last kept token
    c = Cursor('a; b')
    c.skip('a')
    c.skip_separators(semicolon=True)
    c.skip('b', erase=True)
    c.skip_previous()
    assert c.text == 'a'
    assert c.index == 1

    # nothing removed after the last kept token
    c = Cursor('a b')
    c.skip('a')
    c.skip('b')
    c.skip_previous()
    assert c.text == 'a b'
    assert c.index == 3


def test_main():
    check_skip()
    check_mismatch()
    check_separators()
    check_erase()

    # looking ahead
    c = Cursor('a  [x]')
    c.skip('a')
    assert c.at('[')
    assert not c.at('x')
    assert c.index == 1

    c = Cursor('ab')
    c.index = 1
    c.insert('X')
    assert c.text == 'aXb'
    assert c.index == 2


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
