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
Some utility functions.

Quoting identifiers, and formatting new statements for insertion in a DOT
source text.
"""


import re


#: Matches an identifier that can be written without quotes.
BARE_ID = re.compile(r'[a-zA-Z\x80-\xff_][a-zA-Z\x80-\xff_0-9]*\Z')


def quote_id(value):
    r"""Return the value between double quotes, with ``"`` escaped as ``\"``.

    For example::

        >>> quote_id('a"b')
        '"a\\"b"'

    """
    return '"{}"'.format(value.replace('"', r'\"'))


def unquote_id(text):
    r"""Return the value of a double-quoted string, undoing :func:`quote_id`.

    Only ``\"`` is an escape sequence in DOT strings, all other backslashes
    are part of the value.

    """
    return text[1:-1].replace(r'\"', '"')


def quote_id_if_necessary(value):
    """Return the value, quoted with :func:`quote_id` unless it is a valid bare
    identifier.

    For example::

        >>> quote_id_if_necessary('node_1')
        'node_1'
        >>> quote_id_if_necessary('weird name')
        '"weird name"'
        >>> quote_id_if_necessary('1.5')
        '"1.5"'

    """
    if BARE_ID.match(value):
        return value
    return quote_id(value)


def format_attributes(attributes):
    """Return a `` [key=value ...]`` string for the attributes mapping.

    Values are converted to strings and quoted if necessary. Attributes with a
    None value are skipped. Returns an empty string if no attribute remains.

    """
    if not attributes:
        return ''
    text = ' '.join('{}={}'.format(name, quote_id_if_necessary(str(value)))
                    for name, value in attributes.items() if value is not None)
    return ' [{}]'.format(text) if text else ''


def format_node_statement(name, attributes=None, indent='    '):
    """Return a line with a node statement, to be inserted in a DOT text.

    For example::

        >>> format_node_statement('a', {'shape': 'box', 'label': None})
        '    a [shape=box]\\n'

    """
    return '{}{}{}\n'.format(indent, quote_id_if_necessary(str(name)), format_attributes(attributes))


def format_edge_statement(start, end, edgeop='->', attributes=None, indent='    '):
    """Return a line with an edge statement, to be inserted in a DOT text.

    For example::

        >>> format_edge_statement('a', 'b', '--', {'color': 'red'})
        '    a -- b [color=red]\\n'

    """
    return '{}{} {} {}{}\n'.format(indent,
        quote_id_if_necessary(str(start)), edgeop,
        quote_id_if_necessary(str(end)), format_attributes(attributes))
