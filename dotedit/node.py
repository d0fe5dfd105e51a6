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
The :class:`Node` type, a list with a parent, that the DOT parse tree is
built of (see :mod:`dotedit.dom.dot`).

Trees can be queried with operators taking a Node class, a tuple of classes
or a Node instance::

    >>> from dotedit.dom import read, dot
    >>> g = read.graph("digraph { a -> b; subgraph s { c } }")
    >>> [n.head for n in g // dot.NodeRef]
    ['a', 'b', 'c']
    >>> list(g // dot.NodeRef('b'))
    [<dot.NodeRef 'b'>]

"""

import weakref


def _no_parent():
    return None


class Node(list):
    """A list of child nodes with a weak reference to its parent.

    Appending or extending sets the parent of the added nodes. A Node is
    always true, also without children, and only compares equal to itself;
    use :meth:`equals` to compare trees.

    The query operators:

    * ``node / NodeStatement``: the children that are NodeStatements;

    * ``node // NodeRef``: all NodeRef descendants, in document order;

    * ``node << Graph``: the ancestors that are a Graph;

    When a Node instance is given, nodes of the same type for which
    :meth:`body_equals` returns True are selected.

    """
    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _no_parent
        self.extend(children)

    def __repr__(self):
        count = len(self)
        return '<{} ({} {})>'.format(type(self).__name__, count, "child" if count == 1 else "children")

    def __bool__(self):
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    @property
    def parent(self):
        """The parent Node or None."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _no_parent if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _no_parent

    def append(self, node):
        """Append a child node and set its parent."""
        list.append(self, node)
        node._parent = weakref.ref(self)

    def extend(self, nodes):
        """Append child nodes and set their parent."""
        for node in nodes:
            self.append(node)

    def ancestors(self):
        """Yield the parent, its parent, and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self):
        """Yield all nodes below this node, depth-first in document order."""
        for node in self:
            yield node
            yield from node.descendants()

    def _select(self, what, nodes):
        """Filter nodes for the query operators."""
        if isinstance(what, Node):
            def match(node):
                return type(node) is type(what) and node.body_equals(what)
        elif isinstance(what, (type, tuple)):
            def match(node):
                return isinstance(node, what)
        else:
            return NotImplemented
        return (node for node in nodes if match(node))

    def __truediv__(self, what):
        return self._select(what, self)

    def __floordiv__(self, what):
        return self._select(what, self.descendants())

    def __lshift__(self, what):
        return self._select(what, self.ancestors())

    def equals(self, other):
        """Return True if other is a tree of the same shape and contents.

        Types, child counts and :meth:`body_equals` are compared, recursively.
        Trees read from DOT texts that differ only in formatting are equal.

        """
        return (type(self) is type(other) and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def body_equals(self, other):
        """Compare what a subclass stores besides its children (default: True)."""
        return True

    def dump(self, file=None):
        """Print the tree with its structure drawn in front, to ``file``
        (default: stdout)."""
        def lines(node, lead, indent):
            yield lead + repr(node)
            for n in node:
                if n is node[-1]:
                    yield from lines(n, indent + " ╰╴", indent + "   ")
                else:
                    yield from lines(n, indent + " ├╴", indent + " │ ")

        for text in lines(self, '', ''):
            print(text, file=file)
