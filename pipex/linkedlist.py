"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with O(1) insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert content before the first element and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content after the last element and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first element and return its content.

        When delete is given it is called with the content before it is
        returned. An empty list raises IndexError.
        """
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, calling delete on each content in order."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Build a new list of f(content) for every content.

        If f raises, the contents mapped so far are passed to delete and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result