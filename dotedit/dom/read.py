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
Simple helper functions to easily build DOM elements reading from text.

The generated DOM nodes do not know their position in the originating text.
To edit a text while keeping its formatting, use the
:mod:`~dotedit.dom.edit` module, that walks a tree and its text side by side.

"""


from parce.transform import Transformer

from ..lang import dot


_transformer = Transformer()


def graph(text, lexicon=None):
    """Return a :class:`.dot.Graph` from the text.

    Example::

        >>> from dotedit.dom import read
        >>> g = read.graph('graph { a -- b:p:ne }')
        >>> g.dump()
        <dot.Graph graph (1 child)>
         ╰╴<dot.EdgeStatement (2 children)>
            ├╴<dot.NodeRef 'a'>
            ╰╴<dot.NodeRef 'b' (1 child)>
               ╰╴<dot.Port 'p'>
        >>> g.write()
        'graph {a -- b:p:ne}'

    The ``lexicon`` defaults to :attr:`Dot.root <dotedit.lang.dot.Dot.root>`.
    Raises :class:`~dotedit.lang.dot.DotSyntaxError` if the text is not a
    valid DOT graph.

    """
    result = _transformer.transform_text(lexicon or dot.Dot.root, text)
    if result is None:
        raise dot.DotSyntaxError("expected 'graph' or 'digraph'", 0)
    return result


def statement(text):
    """Return one statement element read from the text.

    The text is read as the body of a graph, and a copy of the first
    statement is returned, without a parent::

        >>> from dotedit.dom import read
        >>> read.statement('a [shape=box]')
        <dot.NodeStatement (2 children)>

    """
    for node in graph('graph {' + text + '\n}'):
        return node.copy()
