"""In-place rearrangements of lists: reversal, rotation, compaction and interleaving."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = [
    "reverse_array",
    "rotate_right",
    "rotate_left",
    "remove_duplicates",
    "remove_element",
    "move_zeroes",
    "rearrange_alternately",
]


def reverse_array(arr: MutableSequence[Any]) -> None:
    """Reverse ``arr`` in place."""
    arr[:] = arr[::-1]


def rotate_right(nums: MutableSequence[Any], k: int) -> None:
    """Rotate ``nums`` in place to the right by ``k`` positions.

    Raises ValueError for an empty list.
    """
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def rotate_left(nums: MutableSequence[Any], d: int) -> None:
    """Rotate ``nums`` in place to the left by ``d`` positions.

    Raises ValueError for an empty list.
    """
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    d %= len(nums)
    if d:
        nums[:] = list(nums[d:]) + list(nums[:d])


def remove_duplicates(nums: MutableSequence[Any]) -> int:
    """Collapse runs of equal adjacent values in place and return the new length.

    For a sorted list this leaves each distinct value exactly once, in order.
    """
    kept: list[Any] = []
    for value in nums:
        if not kept or value != kept[-1]:
            kept.append(value)
    nums[:] = kept
    return len(kept)


def remove_element(nums: MutableSequence[Any], val: Any) -> int:
    """Remove every occurrence of ``val`` in place, keep order, return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def move_zeroes(nums: MutableSequence[Any]) -> None:
    """Move all zeroes to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = non_zero + zeros


def rearrange_alternately(arr: MutableSequence[Any]) -> None:
    """Rearrange ``arr`` in place as largest, smallest, second largest, second smallest, ..."""
    ordered = sorted(arr)
    interleaved = [
        value for pair in zip(reversed(ordered), ordered) for value in pair
    ]
    arr[:] = interleaved[: len(ordered)]