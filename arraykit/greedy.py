"""Greedy allocation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["candy"]


def _rising_runs(ratings: Iterable[int]) -> list[int]:
    """For each position, the length of the strictly rising run that ends there."""
    runs: list[int] = []
    previous = None
    for rating in ratings:
        if runs and rating > previous:
            runs.append(runs[-1] + 1)
        else:
            runs.append(1)
        previous = rating
    return runs


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row.

    Every child gets at least one, and a child rated higher than a neighbour
    gets more than that neighbour.
    """
    from_left = _rising_runs(ratings)
    from_right = _rising_runs(reversed(ratings))
    from_right.reverse()
    return sum(max(a, b) for a, b in zip(from_left, from_right))