"""First-in, first-out queues: linear, circular and built from two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from algobox.stacks import LinkedStack

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when taking from or looking at an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class BoundedQueue(Generic[T]):
    """A linear array queue of ``capacity`` slots.

    Slots freed by dequeuing are not reused until the queue drains
    completely, at which point it starts again from the first slot.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front :])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def enqueue(self, value: T) -> None:
        """Add value at the rear; raises QueueFullError when the last slot is used."""
        if len(self._slots) >= self.capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the front item; raises QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def is_empty(self) -> bool:
        return not self._slots


class CircularQueue(Generic[T]):
    """A ring-buffer queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._head = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % self.capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def enqueue(self, value: T) -> None:
        """Add value at the back; raises QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raises QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value  # type: ignore[return-value]

    def front(self) -> T:
        """The item that would be dequeued next."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._head]  # type: ignore[return-value]

    def back(self) -> T:
        """The item most recently enqueued."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[(self._head + self._count - 1) % self.capacity]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity


class TwoStackQueue(Generic[T]):
    """A queue built from two stacks: one receives items, one hands them out."""

    def __init__(self) -> None:
        self._inbox: LinkedStack[T] = LinkedStack()
        self._outbox: LinkedStack[T] = LinkedStack()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def enqueue(self, value: T) -> None:
        """Add value at the rear."""
        self._inbox.push(value)

    def dequeue(self) -> T:
        """Remove and return the oldest item; raises QueueEmptyError when empty."""
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        if self._outbox.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return self._inbox.is_empty() and self._outbox.is_empty()