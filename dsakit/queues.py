"""Queue containers, stacks built from queues, and queue exercises."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO queue stored in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[T | None] = [None] * capacity
        self._capacity = capacity
        self._front = 0
        self._size = 0

    def push(self, value: T) -> None:
        """Append ``value``; raise ``OverflowError`` if the queue is full."""
        if self._size == self._capacity:
            raise OverflowError("queue overflow")
        rear = (self._front + self._size) % self._capacity
        self._slots[rear] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front value; raise ``IndexError`` on underflow."""
        if self._size == 0:
            raise IndexError("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self._capacity
        return value  # type: ignore[return-value]

    def front(self) -> T:
        """Return the front value; raise ``IndexError`` if the queue is empty."""
        if self._size == 0:
            raise IndexError("queue is empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:
        return self._size


@dataclass
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedQueue(Generic[T]):
    """A FIFO queue on a singly linked list with front and back references."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._front: _Node[T] | None = None
        self._back: _Node[T] | None = None
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: T) -> None:
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node

    def dequeue(self) -> T:
        """Remove and return the front value; raise ``IndexError`` on underflow."""
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        return node.value

    def peek(self) -> T:
        """Return the front value; raise ``IndexError`` if the queue is empty."""
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None


class DequeQueue(Generic[T]):
    """A FIFO queue backed by ``collections.deque``."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(values)

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the front value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._items)


class DequeStack(Generic[T]):
    """A LIFO stack backed by ``collections.deque``."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(values)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value; raise ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from bottom to top."""
        return iter(self._items)


class TwoStackQueue(Generic[T]):
    """A FIFO queue built from an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def push(self, value: T) -> None:
        self._inbox.append(value)

    def pop(self) -> T:
        """Remove and return the oldest value; raise ``IndexError`` if empty."""
        if not self._outbox:
            if not self._inbox:
                raise IndexError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


class RecursiveStackQueue(Generic[T]):
    """A FIFO queue on one stack, dequeuing through the call stack."""

    def __init__(self) -> None:
        self._stack: list[T] = []

    def push(self, value: T) -> None:
        self._stack.append(value)

    def pop(self) -> T:
        """Remove and return the oldest value; raise ``IndexError`` if empty."""
        if not self._stack:
            raise IndexError("queue is empty")
        top = self._stack.pop()
        if not self._stack:
            return top
        item = self.pop()
        self._stack.append(top)
        return item

    def is_empty(self) -> bool:
        return not self._stack


class PushCostlyStack(Generic[T]):
    """A stack on two queues that reorders on every push."""

    def __init__(self) -> None:
        self._main: deque[T] = deque()
        self._spare: deque[T] = deque()

    def push(self, value: T) -> None:
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> T:
        """Remove and return the top value; raise ``IndexError`` if empty."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main.popleft()

    def top(self) -> T:
        """Return the top value; raise ``IndexError`` if empty."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


class PopCostlyStack(Generic[T]):
    """A stack on two queues that cycles the elements on every pop and top."""

    def __init__(self) -> None:
        self._main: deque[T] = deque()
        self._spare: deque[T] = deque()

    def push(self, value: T) -> None:
        self._main.append(value)

    def _drain_all_but_last(self) -> None:
        while len(self._main) != 1:
            self._spare.append(self._main.popleft())

    def pop(self) -> T:
        """Remove and return the top value; raise ``IndexError`` if empty."""
        if not self._main:
            raise IndexError("stack is empty")
        self._drain_all_but_last()
        value = self._main.popleft()
        self._main, self._spare = self._spare, self._main
        return value

    def top(self) -> T:
        """Return the top value; raise ``IndexError`` if empty."""
        if not self._main:
            raise IndexError("stack is empty")
        self._drain_all_but_last()
        value = self._main.popleft()
        self._spare.append(value)
        self._main, self._spare = self._spare, self._main
        return value

    def __len__(self) -> int:
        return len(self._main)


def interleave(queue: deque[T]) -> None:
    """Interleave the first half of ``queue`` with its second half, in place."""
    half: deque[T] = deque(queue.popleft() for _ in range(len(queue) // 2))
    while half:
        queue.append(half.popleft())
        if queue:
            queue.append(queue.popleft())


def first_non_repeating(text: str) -> str | None:
    """The first character of ``text`` that occurs only once, or ``None``."""
    waiting: deque[str] = deque()
    seen: Counter[str] = Counter()
    answer: str | None = None
    for ch in text:
        waiting.append(ch)
        seen[ch] += 1
        while waiting and seen[waiting[0]] > 1:
            waiting.popleft()
        answer = waiting[0] if waiting else None
    return answer


def reverse_queue(queue: deque[T]) -> None:
    """Reverse ``queue`` in place by passing it through a stack."""
    stack: list[T] = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())