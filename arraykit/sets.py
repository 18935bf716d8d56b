"""Set-like queries over lists: duplicates, intersection, union and multiset equality."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from itertools import chain
from typing import TypeVar

__all__ = ["find_duplicates", "intersection", "union", "check_equal"]

T = TypeVar("T", bound=Hashable)


def find_duplicates(nums: Iterable[T]) -> list[T]:
    """Return each element every time it is seen again after its first occurrence."""
    seen: set[T] = set()
    repeats: list[T] = []
    for value in nums:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def intersection(nums1: Iterable[T], nums2: Iterable[T]) -> list[T]:
    """Return the distinct values present in both, in order of first appearance in ``nums1``."""
    others = set(nums2)
    return list(dict.fromkeys(value for value in nums1 if value in others))


def union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Return the distinct values present in either, in order of first appearance."""
    return list(dict.fromkeys(chain(a, b)))


def check_equal(a: Iterable[T], b: Iterable[T]) -> bool:
    """Return True if both hold the same elements with the same multiplicities."""
    return Counter(a) == Counter(b)