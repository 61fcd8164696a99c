"""Last-in, first-out stacks: a fixed-capacity array stack and a linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class StackEmptyError(IndexError):
    """Raised when taking from or looking at an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def push(self, value: T) -> None:
        """Put value on top; raises StackFullError when at capacity."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raises StackEmptyError when empty."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


@dataclass
class _Node(Generic[T]):
    value: T
    below: _Node[T] | None = None


class LinkedStack(Generic[T]):
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, value: T) -> None:
        """Put value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item; raises StackEmptyError when empty."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        """Remove every item."""
        self._top = None
        self._size = 0