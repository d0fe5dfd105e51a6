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
The dotedit module.

Edit Graphviz DOT texts without losing their formatting. The main entry
point is the :class:`~dotedit.graph.DotGraph` class.

On first import, the DOT language definition is added to the registry (see
:mod:`dotedit.registry`).

"""

from .pkginfo import version, version_string
from .registry import find
from .graph import DotGraph


__all__ = ('DotGraph', 'find', 'load', 'version', 'version_string')


def load(filename, encoding=None, errors=None):
    """Convenience function to read text from ``filename`` and return a
    :class:`~dotedit.graph.DotGraph`.

    The ``encoding`` defaults to UTF-8; ``errors`` is passed to Python's
    :func:`open` function. Raises :class:`OSError` if the file can't be read,
    and :class:`~dotedit.lang.dot.DotSyntaxError` if the text is not a valid
    DOT graph.

    """
    with open(filename, encoding=encoding or 'utf-8', errors=errors) as f:
        return DotGraph(f.read())

