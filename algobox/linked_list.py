"""Singly linked list with positional edits, search, reversal and cycle detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Node | None = None


def has_cycle(head: Node | None) -> bool:
    """Detect a loop with Floyd's tortoise-and-hare walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


class LinkedList:
    """A singly linked list addressed by 0-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"position {index} is out of range")

    def append(self, value: Any) -> None:
        """Add value at the end."""
        node = Node(value)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add value at the beginning."""
        self.head = Node(value, self.head)
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert value so that it ends up at the given 0-based position."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            self.prepend(value)
            return
        before = self._node_at(position - 1)
        before.next = Node(value, before.next)
        self._size += 1

    def delete_value(self, value: Any) -> bool:
        """Remove the first node holding value; False if there is none."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous = node
        return False

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at the given 0-based position."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            node = self.head
            self.head = node.next  # type: ignore[union-attr]
        else:
            before = self._node_at(position - 1)
            node = before.next
            before.next = node.next  # type: ignore[union-attr]
        self._size -= 1
        return node.value  # type: ignore[union-attr]

    def pop_front(self) -> Any:
        """Remove and return the first value; raises IndexError when empty."""
        if self.head is None:
            raise IndexError("list is empty")
        return self.delete_at(0)

    def pop_back(self) -> Any:
        """Remove and return the last value; raises IndexError when empty."""
        if self.head is None:
            raise IndexError("list is empty")
        return self.delete_at(self._size - 1)

    def index_of(self, value: Any) -> int:
        """0-based position of the first node holding value.

        Raises ValueError if value is not in the list.
        """
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous