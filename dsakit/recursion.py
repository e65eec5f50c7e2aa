"""Classic recursion exercises."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def binary_strings(n: int, last_place: int = 0) -> Iterator[str]:
    """Yield binary strings of length ``n``.

    After a ``1`` (``last_place`` non-zero) either digit may follow; after a
    ``0`` only another ``0`` may follow. The ``0`` branch is yielded first.
    """

    def walk(remaining: int, prefix: str, last: int) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        yield from walk(remaining - 1, prefix + "0", 0)
        if last != 0:
            yield from walk(remaining - 1, prefix + "1", 1)

    if n < 0:
        raise ValueError("length must not be negative")
    yield from walk(n, "", last_place)


def pair_friends(n: int) -> int:
    """Number of ways ``n`` friends can stay single or pair up."""
    if n < 1:
        raise ValueError("need at least one friend")
    if n <= 2:
        return n
    before, current = 1, 2
    for k in range(3, n + 1):
        before, current = current, current + (k - 1) * before
    return current


def power(x: int, n: int) -> int:
    """``x`` to the ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    if n == 0:
        return 1
    half = power(x, n // 2)
    if n % 2 == 0:
        return half * half
    return x * half * half


def subsets(items: Sequence[T]) -> Iterator[list[T]]:
    """Yield every subset of ``items``, including each element before excluding it."""

    def walk(index: int, chosen: list[T]) -> Iterator[list[T]]:
        if index == len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1, chosen)
        chosen.pop()
        yield from walk(index + 1, chosen)

    yield from walk(0, [])


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character of ``text``."""
    seen: set[str] = set()
    kept: list[str] = []
    for ch in text:
        if ch not in seen:
            seen.add(ch)
            kept.append(ch)
    return "".join(kept)


def tiling_ways(n: int) -> int:
    """Number of ways to tile a 2 x ``n`` wall with 2 x 1 tiles."""
    if n < 0:
        raise ValueError("wall length must not be negative")
    before, current = 1, 1
    for _ in range(n - 1):
        before, current = current, current + before
    return current