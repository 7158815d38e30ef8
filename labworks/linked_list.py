"""A doubly linked list with positions that can be moved and written through."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

OUT_OF_RANGE = "List is out of range"
ERASE_PAST_END = "Erasing past-the-end-iterator"
OUTSIDE = "Position is outside the list"
FOREIGN = "Position does not belong to this list"


class _Node:
    __slots__ = ("value", "prev", "next", "sentinel")

    def __init__(self, value: Any = None, sentinel: bool = False) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None
        self.sentinel = sentinel


class Position(Generic[T]):
    """A place in a list: an element, or the end past the last element."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: "LinkedList[T]", node: _Node) -> None:
        self._owner = owner
        self._node = node

    @property
    def value(self) -> T:
        """The element at this position."""
        if self._node.sentinel:
            raise IndexError(OUTSIDE)
        return self._node.value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._node.sentinel:
            raise IndexError(OUTSIDE)
        self._node.value = new_value

    def next(self) -> "Position[T]":
        """The following position."""
        if self._node.next is None:
            raise IndexError(OUTSIDE)
        return Position(self._owner, self._node.next)

    def prev(self) -> "Position[T]":
        """The preceding position."""
        if self._node.prev is None:
            raise IndexError(OUTSIDE)
        return Position(self._owner, self._node.prev)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))


class LinkedList(Generic[T]):
    """A doubly linked list bounded by two sentinel nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head = _Node(sentinel=True)
        self._tail = _Node(sentinel=True)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for item in items:
            self.push_back(item)

    def _node_of(self, position: Position[T]) -> _Node:
        if position._owner is not self:
            raise ValueError(FOREIGN)
        node = position._node
        if node is not self._head and node.prev is None:
            raise ValueError(FOREIGN)
        return node

    def insert(self, position: Position[T], value: T) -> Position[T]:
        """Insert value before position and return the position of the new element."""
        node = self._node_of(position)
        if node is self._head:
            raise IndexError(OUTSIDE)
        new_node = _Node(value)
        before = node.prev
        assert before is not None
        new_node.prev = before
        new_node.next = node
        before.next = new_node
        node.prev = new_node
        self._size += 1
        return Position(self, new_node)

    def erase(self, position: Position[T]) -> Position[T]:
        """Remove the element at position and return the position after it."""
        if not self._size:
            raise IndexError(OUT_OF_RANGE)
        node = self._node_of(position)
        if node.sentinel:
            raise IndexError(ERASE_PAST_END)
        before, after = node.prev, node.next
        assert before is not None and after is not None
        before.next = after
        after.prev = before
        node.prev = node.next = None
        self._size -= 1
        return Position(self, after)

    def push_back(self, value: T) -> None:
        """Append value at the end."""
        self.insert(self.end(), value)

    def push_front(self, value: T) -> None:
        """Prepend value at the beginning."""
        self.insert(self.begin(), value)

    def clear(self) -> None:
        """Remove every element."""
        node = self._head.next
        while node is not None and node is not self._tail:
            following = node.next
            node.prev = node.next = None
            node = following
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def begin(self) -> Position[T]:
        """The position of the first element, or end() when empty."""
        first = self._head.next
        assert first is not None
        return Position(self, first)

    def end(self) -> Position[T]:
        """The position past the last element."""
        return Position(self, self._tail)

    def copy(self) -> "LinkedList[T]":
        """A shallow copy of the list."""
        return LinkedList(self)

    __copy__ = copy

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None and node is not self._tail:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail.prev
        while node is not None and node is not self._head:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"