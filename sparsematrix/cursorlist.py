"""A doubly linked list with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListError(Exception):
    """Raised when a list operation's precondition is not met."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class CursorList:
    """A sequence with a cursor that can sit on one element or be undefined.

    The cursor index is -1 whenever the cursor is undefined.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None
        self._cursor: _Node | None = None
        self._length = 0
        self._index = -1
        if items is not None:
            for value in items:
                self.append(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"CursorList({list(self)!r})"

    # Access

    @property
    def index(self) -> int:
        """Position of the cursor, or -1 if it is undefined."""
        return self._index if self._cursor is not None else -1

    def front(self) -> Any:
        """Return the first element."""
        if self._front is None:
            raise ListError("front() called on an empty list")
        return self._front.value

    def back(self) -> Any:
        """Return the last element."""
        if self._back is None:
            raise ListError("back() called on an empty list")
        return self._back.value

    @property
    def current(self) -> Any:
        """The element under the cursor."""
        if self._cursor is None:
            raise ListError("current element requested with an undefined cursor")
        return self._cursor.value

    @current.setter
    def current(self, value: Any) -> None:
        if self._length == 0:
            raise ListError("cannot set the current element of an empty list")
        if self._cursor is None:
            raise ListError("cannot set the current element with an undefined cursor")
        self._cursor.value = value

    # Cursor movement

    def _undefine_cursor(self) -> None:
        self._cursor = None
        self._index = -1

    def move_front(self) -> None:
        """Place the cursor on the first element, if there is one."""
        if self._front is not None:
            self._cursor = self._front
            self._index = 0

    def move_back(self) -> None:
        """Place the cursor on the last element, if there is one."""
        if self._back is not None:
            self._cursor = self._back
            self._index = self._length - 1

    def move_prev(self) -> None:
        """Step the cursor toward the front; it falls off past the first element."""
        if self._cursor is None:
            return
        self._cursor = self._cursor.prev
        self._index = self._index - 1 if self._cursor is not None else -1

    def move_next(self) -> None:
        """Step the cursor toward the back; it falls off past the last element."""
        if self._cursor is None:
            return
        self._cursor = self._cursor.next
        self._index = self._index + 1 if self._cursor is not None else -1

    # Modification

    def clear(self) -> None:
        """Remove every element and undefine the cursor."""
        self._front = self._back = None
        self._length = 0
        self._undefine_cursor()

    def prepend(self, value: Any) -> None:
        """Insert a value before the first element."""
        node = _Node(value)
        if self._front is None:
            self._front = self._back = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node
            if self._cursor is not None:
                self._index += 1
        self._length += 1

    def append(self, value: Any) -> None:
        """Insert a value after the last element."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            node.prev = self._back
            self._back.next = node
            self._back = node
        self._length += 1

    def _require_cursor(self, operation: str) -> _Node:
        if self._length == 0:
            raise ListError(f"{operation}() called on an empty list")
        if self._cursor is None:
            raise ListError(f"{operation}() called with an undefined cursor")
        return self._cursor

    def insert_before(self, value: Any) -> None:
        """Insert a value just before the cursor element."""
        cursor = self._require_cursor("insert_before")
        if cursor.prev is None:
            self.prepend(value)
            return
        node = _Node(value)
        node.prev = cursor.prev
        node.next = cursor
        cursor.prev.next = node
        cursor.prev = node
        self._length += 1
        self._index += 1

    def insert_after(self, value: Any) -> None:
        """Insert a value just after the cursor element."""
        cursor = self._require_cursor("insert_after")
        if cursor.next is None:
            self.append(value)
            return
        node = _Node(value)
        node.prev = cursor
        node.next = cursor.next
        cursor.next.prev = node
        cursor.next = node
        self._length += 1

    def delete_front(self) -> None:
        """Remove the first element."""
        first = self._front
        if first is None:
            raise ListError("delete_front() called on an empty list")
        if self._cursor is first:
            self._undefine_cursor()
        elif self._cursor is not None:
            self._index -= 1
        self._front = first.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        self._length -= 1

    def delete_back(self) -> None:
        """Remove the last element."""
        last = self._back
        if last is None:
            raise ListError("delete_back() called on an empty list")
        if self._cursor is last:
            self._undefine_cursor()
        self._back = last.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        self._length -= 1

    def delete(self) -> None:
        """Remove the cursor element; the cursor becomes undefined."""
        cursor = self._require_cursor("delete")
        if cursor is self._front:
            self.delete_front()
        elif cursor is self._back:
            self.delete_back()
        else:
            cursor.prev.next = cursor.next
            cursor.next.prev = cursor.prev
            self._length -= 1
            self._undefine_cursor()

    def concat(self, other: CursorList) -> CursorList:
        """Return a new list holding this list's elements followed by other's."""
        result = CursorList(self)
        for value in other:
            result.append(value)
        return result