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
This module defines a DOM (Document Object Model) for Graphviz DOT sources.

The DOT DOM is a simple tree structure where a graph, a statement, a node
reference or an attribute is represented by a node with possible child nodes.

This DOM is used in two ways:

1. Building a DOT graph from scratch, or reading one from text (see the
   :mod:`~dotedit.dom.read` module) and writing it back in a canonical form.

2. Editing an existing DOT text. The DOM nodes do not store their position in
   the text; the :mod:`~dotedit.dom.edit` module walks a tree and the text it
   was read from side by side, so nodes and edges can be removed from the
   text without touching the other parts of the document.

"""
