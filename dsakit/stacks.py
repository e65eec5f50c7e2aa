"""Stack containers and the classic problems solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ArrayStack(Generic[T]):
    """A stack backed by a Python list."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element; raise ``IndexError`` on underflow."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element; raise ``IndexError`` if the stack is empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedStack(Generic[T]):
    """A stack whose elements are pushed onto the head of a singly linked list."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._top: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element; raise ``IndexError`` on underflow."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top element; raise ``IndexError`` if the stack is empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size


def find_celebrity(knows: Sequence[Sequence[int]]) -> int | None:
    """Return the person known by everyone who knows no one, or ``None``.

    ``knows[a][b]`` is 1 when person ``a`` knows person ``b``.
    """
    if not knows:
        return None
    candidates = list(range(len(knows)))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if knows[a][b] == 1 else a)
    celeb = candidates[0]
    for other in range(len(knows)):
        if other != celeb and (knows[celeb][other] == 1 or knows[other][celeb] == 0):
            return None
    return celeb


def has_duplicate_parentheses(expression: str) -> bool:
    """Return whether some pair of parentheses encloses nothing but another pair."""
    stack: list[str] = []
    for ch in expression:
        if ch != ")":
            stack.append(ch)
            continue
        inside = 0
        while stack and stack[-1] != "(":
            stack.pop()
            inside += 1
        if inside < 1:
            return True
        if stack:
            stack.pop()
    return False


def insert_at_bottom(stack: list[T], value: T) -> None:
    """Put ``value`` under every element of ``stack`` (top is the list's end)."""
    stack.insert(0, value)


def reverse_stack(stack: list[T]) -> None:
    """Reverse ``stack`` in place so the bottom becomes the top."""
    stack.reverse()


def next_greater(items: Sequence[int]) -> list[int | None]:
    """For each element, the first strictly greater element to its right, else ``None``."""
    result: list[int | None] = [None] * len(items)
    stack: list[int] = []
    for index in range(len(items) - 1, -1, -1):
        value = items[index]
        while stack and stack[-1] <= value:
            stack.pop()
        result[index] = stack[-1] if stack else None
        stack.append(value)
    return result


def previous_smaller(items: Sequence[int]) -> list[int | None]:
    """For each element, the nearest strictly smaller element to its left, else ``None``."""
    result: list[int | None] = []
    stack: list[int] = []
    for value in items:
        while stack and stack[-1] >= value:
            stack.pop()
        result.append(stack[-1] if stack else None)
        stack.append(value)
    return result


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing every character onto a stack and popping them."""
    stack = list(text)
    out: list[str] = []
    while stack:
        out.append(stack.pop())
    return "".join(out)


def stock_span(prices: Sequence[Any]) -> list[int]:
    """Span of each day: consecutive days up to and including it with price not above it."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(day + 1 if not stack else day - stack[-1])
        stack.append(day)
    return spans


_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_balanced(text: str) -> bool:
    """Return whether the brackets ``()[]{}`` in ``text`` nest properly."""
    stack: list[str] = []
    for ch in text:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
    return not stack