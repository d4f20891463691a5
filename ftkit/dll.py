"""A doubly linked list of integer nodes carrying index, cost and target fields."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from ftkit.chars import is_number
from ftkit.convert import atoi_checked
from ftkit.printf import format_pointer, sformat


@dataclass(eq=False)
class Node:
    """One node of a :class:`DoublyLinkedList`."""

    data: int
    cost: int = -1
    index: int = 0
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)
    target_node: Optional["Node"] = field(default=None, repr=False)


def _two_digits(value: int) -> str:
    return sformat("0%d", value) if 0 <= value <= 9 else sformat("%d", value)


def _render_node(node: Node) -> str:
    parts = [
        "------------------\n",
        sformat("|    %s |\n", format_pointer(node)),
        sformat("| i[%s]: ", _two_digits(node.index)),
        sformat("   [%s] |\n", _two_digits(node.data)),
        "|  ~~~~~~~~~~~~  |\n",
    ]
    target = node.target_node
    if target is not None:
        parts.append(sformat("| t: %s |\n", format_pointer(target)))
        parts.append(sformat("| tVal:     [%s] |\n", _two_digits(target.data)))
    else:
        parts.append("| t:       (nil) |\n")
    parts.append(sformat("| cost:     [%s] |\n", _two_digits(node.cost)))
    parts.append("==================\n\\      |  |      /\n")
    return "".join(parts)


class DoublyLinkedList:
    """A named doubly linked list that keeps its head, tail and size."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.size = 0
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None

    @classmethod
    def from_strings(cls, args: Iterable[str], name: str = "") -> "DoublyLinkedList":
        """Build a list with one node per decimal string in ``args``.

        Raises ValueError if a string is not a number or does not fit in
        a 32-bit integer.
        """
        dll = cls(name)
        for text in args:
            if not is_number(text):
                raise ValueError(f"{text!r} is not a number")
            try:
                value = atoi_checked(text)
            except OverflowError as exc:
                raise ValueError(str(exc)) from exc
            dll.append(Node(value))
        return dll

    def append(self, node: Node) -> "DoublyLinkedList":
        """Link ``node`` after the tail and give it the index ``len(self)``."""
        if node is None:
            raise TypeError("append needs a node")
        node.index = self.size
        if self.head is None:
            self.head = node
            self.tail = node
        else:
            assert self.tail is not None
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        self.size += 1
        return self

    def prepend(self, node: Node) -> "DoublyLinkedList":
        """Make ``node`` the new head, shifting every existing index up by one."""
        if node is None:
            raise TypeError("prepend needs a node")

        def shift(existing: Node) -> None:
            existing.index += 1

        self.for_each(shift)
        if self.head is None:
            self.head = node
            self.tail = node
        else:
            self.head.prev = node
            node.next = self.head
            self.head = node
        self.size += 1
        return self

    def clear(self) -> None:
        """Remove every node, leaving an empty list."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node.prev = None
            node = following
        self.head = None
        self.tail = None
        self.size = 0

    def for_each(self, f: Optional[Callable[[Node], object]]) -> None:
        """Call ``f`` on each node from head to tail; None does nothing."""
        if f is None:
            return
        for node in self:
            f(node)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __repr__(self) -> str:
        return f"DoublyLinkedList({self.name!r}, {[node.data for node in self]!r})"

    def render(self) -> str:
        """The diagram of all nodes that :meth:`print` writes."""
        parts = ["\n        NULL     \n"]
        if self.head is not None:
            parts.append("/       |  |     \\\n")
        parts.extend(_render_node(node) for node in self)
        if self.head is not None and self.tail is not None:
            parts.append("       NULL     ")
        parts.append("\n\n")
        return "".join(parts)

    def print(self) -> None:
        """Write the diagram of all nodes to standard output."""
        sys.stdout.write(self.render())