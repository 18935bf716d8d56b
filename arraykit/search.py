"""Searches over lists: pairs, leaders, subarrays, peaks and missing positives."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain, pairwise
from typing import Any

__all__ = [
    "has_pair_with_sum",
    "leaders",
    "count_subarrays_with_sum",
    "subarrays",
    "find_peak_element",
    "first_missing_positive",
]


def has_pair_with_sum(arr: Iterable[int], target: int) -> bool:
    """Return True if two elements at different positions add up to ``target``."""
    seen: set[int] = set()
    for value in arr:
        if target - value in seen:
            return True
        seen.add(value)
    return False


def leaders(arr: Sequence[Any]) -> list[Any]:
    """Return the elements not smaller than anything to their right, in original order.

    The last element is always a leader; an empty sequence has none.
    """
    found: list[Any] = []
    for value in reversed(arr):
        if not found or value >= found[-1]:
            found.append(value)
    found.reverse()
    return found


def count_subarrays_with_sum(nums: Iterable[int], k: int) -> int:
    """Return how many non-empty contiguous subarrays sum to exactly ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = 0
    for prefix in accumulate(nums):
        total += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return total


def subarrays(arr: Sequence[Any]) -> list[list[Any]]:
    """Return every non-empty contiguous subarray, grouped by start, shortest first."""
    return [
        list(arr[start:stop])
        for start in range(len(arr))
        for stop in range(start + 1, len(arr) + 1)
    ]


def find_peak_element(nums: Sequence[Any]) -> int:
    """Return the index of an element strictly greater than its neighbours.

    The ends are checked first, then the interior from left to right.
    Returns -1 if there is no such element. Raises ValueError if empty.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("find_peak_element() of an empty sequence")
    if n == 1:
        return 0
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    triples = zip(nums, nums[1:], nums[2:])
    for index, (before, value, after) in enumerate(triples, start=1):
        if before < value and after < value:
            return index
    return -1


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate