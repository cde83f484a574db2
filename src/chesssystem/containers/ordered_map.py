"""Sorted associative container with explicit copy semantics.

Every entity in the chess system is stored in an :class:`OrderedMap`. The map
keeps its entries in a singly linked chain sorted by key, and it owns copies of
everything put into it:

- ``put`` stores copies of both the key and the value, made with the copy
  functions supplied at construction (``copy.deepcopy`` by default);
- ``get`` returns a *borrowed* reference to the stored value, so callers may
  update it in place but must not keep it past a ``remove``;
- traversals hand out *copies* of the keys.

Two ways to traverse are provided. ``cursor()`` (and ``iter(map)``) creates an
independent :class:`MapCursor` per traversal, so nested loops over one map
work. ``first()``/``next()`` share one cursor stored on the map itself; nesting
them over the same map is unsupported and gives undefined results.
"""

# Chess System
# Copyright (C) 2025  Chess System developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import copy
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

from chesssystem.exceptions import (
    MapItemDoesNotExistException,
    MapNullArgumentException,
)

K = TypeVar("K")
V = TypeVar("V")

KeyComparator = Callable[[Any, Any], int]
CopyFunction = Callable[[Any], Any]


def compare_natural(first: Any, second: Any) -> int:
    """Three-way comparison using the keys' own ordering."""
    return (first > second) - (first < second)


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: Any, value: Any, next_node: Optional["_Node"] = None):
        self.key = key
        self.value = value
        self.next = next_node


class MapCursor(Generic[K]):
    """Independent forward cursor over an :class:`OrderedMap`.

    Yields a copy of each key in ascending order. Removing the entry the
    cursor currently sits on does not break the traversal; entries inserted
    behind the cursor are not visited.
    """

    def __init__(self, ordered_map: "OrderedMap[K, Any]") -> None:
        self._map = ordered_map
        self._node: Optional[_Node] = None
        self._started = False

    def __iter__(self) -> "MapCursor[K]":
        return self

    def __next__(self) -> K:
        if not self._started:
            self._started = True
            self._node = self._map._head
        elif self._node is not None:
            self._node = self._node.next
        if self._node is None:
            raise StopIteration
        return self._map._copy_key(self._node.key)


class OrderedMap(Generic[K, V]):
    """Mapping from unique keys to values, iterated in ascending key order.

    Attributes are private; use the methods. The chain is kept strictly
    increasing by key under the supplied comparator at all times.

    Args:
        compare_keys: Three-way comparator (negative, zero, positive)
        copy_key: Function used to copy keys going in and coming out
        copy_value: Function used to copy values going in
    """

    def __init__(
        self,
        compare_keys: Optional[KeyComparator] = None,
        copy_key: Optional[CopyFunction] = None,
        copy_value: Optional[CopyFunction] = None,
    ) -> None:
        self._compare = compare_keys or compare_natural
        self._copy_key = copy_key or copy.deepcopy
        self._copy_value = copy_value or copy.deepcopy
        self._head: Optional[_Node] = None
        self._size = 0
        self._iterator: Optional[_Node] = None

    # ========== Lookup ==========

    def _find(self, key: K) -> Tuple[Optional[_Node], Optional[_Node]]:
        """Return (node before the slot for ``key``, node at or after it)."""
        previous = None
        node = self._head
        while node is not None and self._compare(node.key, key) < 0:
            previous = node
            node = node.next
        return previous, node

    def _lookup(self, key: K) -> Optional[_Node]:
        if key is None:
            raise MapNullArgumentException("Map key cannot be None")
        _, node = self._find(key)
        if node is not None and self._compare(node.key, key) == 0:
            return node
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the stored value for ``key`` (borrowed, not a copy).

        Args:
            key: Key to look up
            default: Returned when the key is absent

        Returns:
            The map's own value object, or ``default``
        """
        node = self._lookup(key)
        return node.value if node is not None else default

    def contains(self, key: K) -> bool:
        """Is ``key`` in the map?"""
        return self._lookup(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def size(self) -> int:
        """Number of entries."""
        return self._size

    def __len__(self) -> int:
        return self._size

    # ========== Mutation ==========

    def put(self, key: K, value: V) -> None:
        """Store copies of ``key`` and ``value``.

        An existing entry keeps its node and gets the new value copy;
        otherwise a node is linked in at its sorted position. Both copies are
        taken before the chain is touched, so a failing copy leaves the map
        as it was.
        """
        if key is None:
            raise MapNullArgumentException("Map key cannot be None")
        if value is None:
            raise MapNullArgumentException("Map value cannot be None")
        value_copy = self._copy_value(value)

        previous, node = self._find(key)
        if node is not None and self._compare(node.key, key) == 0:
            node.value = value_copy
            return

        new_node = _Node(self._copy_key(key), value_copy, node)
        if previous is None:
            self._head = new_node
        else:
            previous.next = new_node
        self._size += 1

    def remove(self, key: K) -> None:
        """Unlink the entry for ``key``.

        Raises:
            MapNullArgumentException: If key is None
            MapItemDoesNotExistException: If key is not in the map
        """
        if key is None:
            raise MapNullArgumentException("Map key cannot be None")
        previous, node = self._find(key)
        if node is None or self._compare(node.key, key) != 0:
            raise MapItemDoesNotExistException(key)

        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1
        if self._iterator is node:
            self._iterator = None

    def clear(self) -> None:
        """Remove every entry."""
        self._head = None
        self._size = 0
        self._iterator = None

    def copy(self) -> "OrderedMap[K, V]":
        """Return a deep clone built with this map's copy functions.

        If copying any element raises, the exception propagates and no
        partial map is returned. The original is never modified.
        """
        clone: OrderedMap[K, V] = OrderedMap(
            self._compare, self._copy_key, self._copy_value
        )
        tail: Optional[_Node] = None
        node = self._head
        while node is not None:
            new_node = _Node(self._copy_key(node.key), self._copy_value(node.value))
            if tail is None:
                clone._head = new_node
            else:
                tail.next = new_node
            tail = new_node
            node = node.next
        clone._size = self._size
        return clone

    # ========== Traversal ==========

    def first(self) -> Optional[K]:
        """Reset the shared cursor and return a copy of the smallest key.

        Returns:
            Key copy, or None for an empty map
        """
        self._iterator = self._head
        if self._iterator is None:
            return None
        return self._copy_key(self._iterator.key)

    def next(self) -> Optional[K]:
        """Advance the shared cursor and return a copy of the next key.

        Past the end this returns None and leaves the cursor on the last
        entry, so repeated calls keep returning None.
        """
        if self._iterator is None or self._iterator.next is None:
            return None
        self._iterator = self._iterator.next
        return self._copy_key(self._iterator.key)

    def cursor(self) -> MapCursor[K]:
        """Create an independent cursor for one traversal."""
        return MapCursor(self)

    def __iter__(self) -> Iterator[K]:
        return self.cursor()

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key copy, borrowed value) pairs in key order."""
        for key in self.cursor():
            yield key, self.get(key)  # type: ignore[misc]

    def values(self) -> Iterator[V]:
        """Yield borrowed values in key order."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        entries = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"OrderedMap({{{entries}}})"
