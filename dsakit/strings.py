"""Character-level string routines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def to_upper(text: str) -> str:
    """Shift every character that is not already an upper-case ASCII letter up by 32 codes.

    Lower-case ASCII letters become upper case. Other characters are shifted
    the same way, wrapping within a byte; characters above code 255 are
    rejected.
    """
    out: list[str] = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(ch)
            continue
        code = ord(ch)
        if code > 0xFF:
            raise ValueError(f"character {ch!r} is outside the single-byte range")
        out.append(chr((code - 32) % 256))
    return "".join(out)


def reverse_chars(chars: Sequence[T]) -> list[T]:
    """Return the elements of ``chars`` in reverse order, swapping from both ends."""
    result = list(chars)
    start, end = 0, len(result) - 1
    while start < end:
        result[start], result[end] = result[end], result[start]
        start += 1
        end -= 1
    return result


def is_palindrome(text: Sequence[str]) -> bool:
    """Return whether ``text`` reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def is_anagram(s: str, t: str) -> bool:
    """Return whether ``t`` uses exactly the characters of ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)