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
The :class:`Element` base class of the DOT tree.

An Element has an optional ``head``, written before its children, and an
optional ``tail``, written after them. :meth:`Element.write` returns the
normalized text of an element with everything below it; what goes between
two children is decided by :meth:`Element.concat`.

Elements are a pure description of the graph: they keep neither tokens nor
positions of the text they were read from. The :mod:`~dotedit.dom.edit`
module finds the text back by walking tree and text side by side.

"""

import reprlib

from ..node import Node


class ElementType(type):
    """Metaclass for Element, adding empty ``__slots__`` to classes that do
    not define them."""
    def __new__(cls, name, bases, namespace):
        namespace.setdefault('__slots__', ())
        return type.__new__(cls, name, bases, namespace)


class Element(Node, metaclass=ElementType):
    """Base class for all element types.

    Subclasses that store more than their children (and head) name those
    instance attributes in ``_attributes``, so that they are compared by
    :meth:`body_equals` and given to the constructor by :meth:`copy`.

    """
    head = None
    tail = None

    #: text written between two children
    space_between = ""

    _attributes = ()

    def __repr__(self):
        cls = type(self)
        parts = ["{}.{}".format(cls.__module__.rpartition('.')[2], cls.__name__)]
        head = self.repr_head()
        if head is not None:
            parts.append(head)
        if len(self):
            parts.append("({} {})".format(len(self), "child" if len(self) == 1 else "children"))
        return "<{}>".format(" ".join(parts))

    def attributes(self):
        """Return a dict with the values of the attributes in ``_attributes``."""
        return {name: getattr(self, name) for name in self._attributes}

    def body_equals(self, other):
        return self.attributes() == other.attributes()

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children, **self.attributes())

    def repr_head(self):
        """Return the text shown after the class name in the repr, if any."""
        return None

    def write_head(self):
        return self.head

    def write_tail(self):
        return self.tail

    def concat(self, node, next_node):
        """Return the text to write between two children (``space_between``
        by default)."""
        return self.space_between

    def write_children(self):
        """Return the children to write; all of them by default."""
        return self

    def write(self):
        """Return the text of this element and its children."""
        parts = [self.write_head() or '']
        previous = None
        for node in self.write_children():
            if previous is not None:
                parts.append(self.concat(previous, node))
            parts.append(node.write())
            previous = node
        parts.append(self.write_tail() or '')
        return ''.join(parts)


class TextElement(Element):
    """An Element with a ``head`` value, given as first constructor argument.

    :meth:`check_head` validates the value; by default it rejects an Element,
    which catches a forgotten head when building a tree by hand.

    """
    __slots__ = ('head',)

    def __init__(self, head, *children):
        if not self.check_head(head):
            raise TypeError("invalid head value for {}: {!r}".format(type(self).__name__, head))
        self.head = head
        super().__init__(*children)

    @classmethod
    def check_head(cls, head):
        return not isinstance(head, Element)

    def repr_head(self):
        if self.head is not None:
            return reprlib.repr(self.head)

    def body_equals(self, other):
        return self.head == other.head and super().body_equals(other)

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(self.head, *children, **self.attributes())
