"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["ListNode"] = None


def delete_one(node: Optional[ListNode], delete: Optional[Deleter]) -> None:
    """Release ``node``'s content with ``delete`` and detach the node.

    Nothing happens when ``delete`` or ``node`` is None.
    """
    if delete is None or node is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list whose nodes are :class:`ListNode` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[ListNode]) -> None:
        """Make ``node`` the new head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[ListNode]) -> None:
        """Link ``node`` (and anything chained after it) after the last node."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[ListNode]:
        """The final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Deleter] = None) -> None:
        """Remove every node, passing each content to ``delete`` if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.content = None
            node.next = None
            node = following

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on each content in order; None does nothing."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter) -> "LinkedList":
        """A new list holding ``f(content)`` for each content.

        If ``f`` raises part way, the contents built so far are passed to
        ``delete`` and the exception propagates.
        """
        if not callable(f) or not callable(delete):
            raise TypeError("map needs a mapping function and a delete function")
        result = LinkedList()
        tail: Optional[ListNode] = None
        try:
            for content in self:
                node = ListNode(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result