"""Singly and doubly linked lists, plus algorithms on raw chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A singly linked node. Nodes compare by identity."""

    value: Any
    next: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode:
    """A doubly linked node. Nodes compare by identity."""

    value: Any
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


def _walk(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list with head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        node = Node(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``.

        Raises ``IndexError`` if the position lies beyond the end of the list.
        """
        if position < 0:
            raise IndexError("invalid position")
        if position == 0:
            self.push_front(value)
            return
        before = self.head
        for _ in range(position - 1):
            if before is None:
                break
            before = before.next
        if before is None:
            raise IndexError("invalid position")
        node = Node(value, before.next)
        before.next = node
        if before is self.tail:
            self.tail = node

    def pop_front(self) -> Any:
        """Remove and return the first value; raise ``IndexError`` if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value; raise ``IndexError`` if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            value = self.head.value
            self.head = self.tail = None
            return value
        before = self.head
        while before.next is not None and before.next.next is not None:
            before = before.next
        last = before.next
        before.next = None
        self.tail = before
        return last.value if last is not None else None

    def search(self, key: Any) -> int | None:
        """Index of the first node holding ``key``, or ``None``."""
        for index, node in enumerate(_walk(self.head)):
            if node.value == key:
                return index
        return None

    def search_recursive(self, key: Any) -> int | None:
        """Same as :meth:`search`, found by recursing down the chain."""

        def find(node: Node | None) -> int | None:
            if node is None:
                return None
            if node.value == key:
                return 0
            rest = find(node.next)
            return None if rest is None else rest + 1

        return find(self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.tail = self.head
        self.head = reverse_nodes(self.head)

    def remove_nth_from_end(self, n: int) -> Any:
        """Remove and return the ``n``-th value counting from the end (1 is the last)."""
        size = len(self)
        if n < 1 or n > size:
            raise IndexError("position out of range")
        if n == size:
            return self.pop_front()
        before = self.head
        for _ in range(size - n - 1):
            before = before.next  # type: ignore[union-attr]
        assert before is not None and before.next is not None
        removed = before.next
        before.next = removed.next
        if removed is self.tail:
            self.tail = before
        removed.next = None
        return removed.value

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self.head))

    def __repr__(self) -> str:
        return " -> ".join([*map(str, self), "None"])


class DoublyLinkedList:
    """A doubly linked list supporting pushes and pops at the front."""

    def __init__(self) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None

    def push_front(self, value: Any) -> None:
        node = DoublyNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            self.head.prev = node
            node.next = self.head
            self.head = node

    def pop_front(self) -> Any:
        """Remove and return the first value; raise ``IndexError`` if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        node.next = None
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return " <=> ".join([*map(str, self), "None"])


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a chain of nodes holding ``values``; return its head."""
    return LinkedList(values).head


def to_values(head: Node | None) -> list[Any]:
    """Values of the chain starting at ``head``, in order."""
    return [node.value for node in _walk(head)]


def has_cycle(head: Node | None) -> bool:
    """Floyd's tortoise-and-hare cycle detection."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_cycle(head: Node | None) -> None:
    """Break the cycle in the chain, if any, by cutting the link that closes it."""
    slow = fast = head
    found = False
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            found = True
            break
    if not found or fast is None:
        return

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next  # type: ignore[assignment]
        fast.next = None
        return

    prev = fast
    while slow is not fast:
        prev = fast
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[assignment]
    prev.next = None


def split_at_mid(head: Node | None) -> Node | None:
    """Cut the chain after its first half and return the head of the second half."""
    slow = fast = head
    prev: Node | None = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    if prev is not None:
        prev.next = None
    return slow


def merge_sorted(first: Node | None, second: Node | None) -> Node | None:
    """Merge two sorted chains into a new sorted chain; ties take from ``first``."""
    merged = LinkedList()
    i, j = first, second
    while i is not None and j is not None:
        if i.value <= j.value:
            merged.push_back(i.value)
            i = i.next
        else:
            merged.push_back(j.value)
            j = j.next
    for node in (*_walk(i), *_walk(j)):
        merged.push_back(node.value)
    return merged.head


def merge_sort(head: Node | None) -> Node | None:
    """Sort a chain by merge sort; return the head of the sorted chain."""
    if head is None or head.next is None:
        return head
    right = split_at_mid(head)
    return merge_sorted(merge_sort(head), merge_sort(right))


def reverse_nodes(head: Node | None) -> Node | None:
    """Reverse a chain in place and return its new head."""
    prev: Node | None = None
    curr = head
    while curr is not None:
        nxt = curr.next
        curr.next = prev
        prev = curr
        curr = nxt
    return prev


def zigzag(head: Node | None) -> Node | None:
    """Reorder ``a1 a2 ... an`` as ``a1 an a2 an-1 ...`` in place."""
    if head is None or head.next is None:
        return head
    right = reverse_nodes(split_at_mid(head))
    left: Node | None = head
    tail = head
    while left is not None and right is not None:
        next_left = left.next
        left.next = right
        next_right = right.next
        right.next = next_left
        tail = right
        left = next_left
        right = next_right
    if right is not None:
        tail.next = right
    return head