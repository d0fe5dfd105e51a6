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
The registry of the languages bundled with :mod:`dotedit`.

The DOT language is registered under the name "DOT" (aliases ``dot``,
``graphviz`` and ``gv``) for ``*.gv`` and ``*.dot`` files::

    >>> import dotedit
    >>> dotedit.find(filename="graph.gv")
    Dot.root

"""

__all__ = ['find', 'registry']


import parce.registry


#: The dotedit registry, consulted before the registry of parce itself.
registry = parce.registry.Registry()

registry.add("dotedit.lang.dot.Dot.root",
    name = "DOT",
    desc = "Graphviz DOT graph description",
    aliases = ["dot", "graphviz", "gv"],
    filenames = [("*.gv", 1), ("*.dot", 0.9)],
    mimetypes = [("text/vnd.graphviz", 1)],
    guesses = [(r'^\s*(?:strict\s+)?(?:di)?graph\b', 0.8)],
)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Return a root lexicon by name, or guessed from the other arguments.

    The arguments are the same as for :func:`parce.find`, which is used when
    the language is not in our own :data:`registry`.

    """
    if name:
        lexicon_name = registry.find(name)
    else:
        lexicon_name = next(iter(registry.suggest(filename, mimetype, contents)), None)
    if lexicon_name:
        return parce.registry.root_lexicon(lexicon_name)
    return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)
