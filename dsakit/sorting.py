"""Comparison and counting sorts.

Every function leaves its argument untouched and returns a new sorted list.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops after a pass with no swaps."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Selection sort: move the smallest remaining element to the front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insertion sort: shift larger elements right and drop each one into place."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def count_sort(items: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("count_sort only handles non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _merge(a: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs ``a[lo:mid+1]`` and ``a[mid+1:hi+1]`` in place."""
    left = a[lo : mid + 1]
    right = a[mid + 1 : hi + 1]
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    a[lo : hi + 1] = merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Top-down recursive merge sort."""
    result = list(items)

    def sort_range(lo: int, hi: int) -> None:
        if lo < hi:
            mid = (lo + hi) // 2
            sort_range(lo, mid)
            sort_range(mid + 1, hi)
            _merge(result, lo, mid, hi)

    sort_range(0, len(result) - 1)
    return result


def iterative_merge_sort(items: Iterable[Any]) -> list[Any]:
    """Bottom-up merge sort.

    Runs of length 2, 4, 8, ... are merged while a full run fits; a final
    merge then joins the largest merged prefix with whatever remains.
    """
    result = list(items)
    n = len(result)
    width = 2
    while width <= n:
        for lo in range(0, n - width + 1, width):
            hi = lo + width - 1
            _merge(result, lo, (lo + hi) // 2, hi)
        width *= 2
    if width // 2 < n:
        _merge(result, 0, width // 2 - 1, n - 1)
    return result


def _partition(a: list[Any], lo: int, hi: int) -> int:
    pivot = a[lo]
    i, j = lo, hi
    while True:
        i += 1
        while a[i] <= pivot:
            i += 1
        j -= 1
        while a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            break
    a[lo], a[j] = a[j], a[lo]
    return j


def quick_sort(items: Iterable[float]) -> list[float]:
    """Quick sort with the first element as pivot, for numbers.

    An infinite sentinel past the end bounds the partition scans.
    """
    result = list(items)
    n = len(result)
    result.append(math.inf)
    pending = [(0, n)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            j = _partition(result, lo, hi)
            pending.append((lo, j))
            pending.append((j + 1, hi))
    result.pop()
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps halving from ``n // 2`` down to 1."""
    result = list(items)
    n = len(result)
    gap = n // 2
    while gap >= 1:
        for i in range(gap, n):
            current = result[i]
            j = i - gap
            while j >= 0 and result[j] > current:
                result[j + gap] = result[j]
                j -= gap
            result[j + gap] = current
        gap //= 2
    return result


def sort_chars_descending(chars: Iterable[str]) -> list[str]:
    """Insertion sort of characters into descending order."""
    result = list(chars)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] < current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result