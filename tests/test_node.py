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
Test the node module.
"""

import io

### find dotedit
import sys
sys.path.insert(0, '.')

from dotedit.node import Node


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M2(N2):
    pass


class M3(N3):
    pass


tree = \
N1(
    N2(
        N3(),
        M3(),
        N2(),
        M1(),
    ),
    N1(
        M2(),
    ),
)


def check_navigation():
    """Test parent, ancestors and descendants."""
    assert tree[0][2].parent is tree[0]
    assert tree.parent is None
    assert list(tree[1][0].ancestors()) == [tree[1], tree]
    assert next(tree.descendants()) is tree[0]
    assert list(tree[1].descendants()) == [tree[1][0]]
    assert sum(1 for _ in tree.descendants()) == 7


def check_edit():
    """Test that changing a tree sets the parent."""
    t = N1()
    assert t            # always True
    n = N2()
    t.append(n)
    assert n.parent is t
    t.extend([M1(), M2()])
    assert t[-1].parent is t
    assert len(t) == 3
    n.parent = None
    assert n.parent is None
    n.parent = t
    assert n.parent is t
    del n.parent
    assert n.parent is None


def check_dump():
    """Test the dump output."""
    f = io.StringIO()
    N1(N2()).dump(f)
    assert f.getvalue() == '<N1 (1 child)>\n ╰╴<N2 (0 children)>\n'
    f = io.StringIO()
    N1(N2(), N3(N1())).dump(f)
    assert f.getvalue() == (
        '<N1 (2 children)>\n'
        ' ├╴<N2 (0 children)>\n'
        ' ╰╴<N3 (1 child)>\n'
        '    ╰╴<N1 (0 children)>\n')


def test_main():
    assert next(tree//M3) is tree[0][1]
    assert len(list(tree/N2)) == 1
    assert sum(1 for _ in tree//N2) == 3     # M2 inherits from N2 :-)
    assert next(tree[1][0] << N1) is tree[1]
    assert sum(1 for _ in tree//(M1, M2, M3)) == 3
    tree2 = N1(N2(N3(), M3(), N2(), M1()), N1(M2()))
    assert tree.equals(tree2)
    assert tree2 != tree and tree2 == tree2
    tree2[0][3] = N1()
    assert not tree.equals(tree2)

    check_navigation()
    check_edit()
    check_dump()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
