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
Meta-information about the dotedit package.

The version here must be kept in sync with the one in pyproject.toml.

"""

#: name of the package
name = "dotedit"

#: the current version
version = (0, 1, 0)

#: the current version as a string
version_string = "{}.{}.{}".format(*version)

#: short description
description = "Edit Graphviz DOT sources while keeping their formatting"

#: license
license = "GPL v3"

