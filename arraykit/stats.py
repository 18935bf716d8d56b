"""Summary statistics and order queries over lists of numbers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from itertools import pairwise
from typing import Any

__all__ = [
    "min_max",
    "array_sum",
    "second_largest",
    "count_frequency",
    "is_sorted",
    "missing_number",
    "kth_smallest",
    "max_subarray_sum",
    "majority_element",
]


def min_max(arr: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` in a single pass. Raises ValueError if empty."""
    iterator = iter(arr)
    try:
        lowest = highest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value > highest:
            highest = value
        elif value < lowest:
            lowest = value
    return lowest, highest


def array_sum(arr: Iterable[int]) -> int:
    """Return the sum of the elements."""
    return sum(arr)


def second_largest(arr: Iterable[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none."""
    top_two = heapq.nlargest(2, set(arr))
    if len(top_two) < 2:
        return -1
    return top_two[1]


def count_frequency(arr: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    """Return ``(value, count)`` pairs in order of first appearance."""
    return list(Counter(arr).items())


def is_sorted(arr: Iterable[Any]) -> bool:
    """Return True if the elements are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(arr))


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..n`` absent from ``nums`` of length ``n``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def kth_smallest(arr: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th smallest element (1-based). Raises ValueError for bad ``k``."""
    ordered = sorted(arr)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def max_subarray_sum(arr: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm).

    Raises ValueError if the sequence is empty.
    """
    best: int | None = None
    running = 0
    for value in arr:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def majority_element(nums: Iterable[Any]) -> Any:
    """Return the Boyer-Moore majority candidate.

    It is the majority element whenever one occurs more than n/2 times.
    Raises ValueError if the sequence is empty.
    """
    candidate: Any = None
    count = 0
    seen = False
    for value in nums:
        seen = True
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if not seen:
        raise ValueError("majority_element() of an empty sequence")
    return candidate