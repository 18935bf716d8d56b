# arraykit

Small helpers for everyday list algorithms that need nothing outside the
standard library. They cover reversing and rotating, removing duplicates,
summary statistics, set-style operations, subarray searches and a greedy
candy distribution.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `arraykit.transform`

These functions change a mutable sequence in place.

- `reverse_array(arr)`: reverses the sequence.
- `rotate_right(nums, k)`: rotates right by `k` positions. `k` is taken modulo the length. Raises `ValueError` for an empty sequence.
- `rotate_left(nums, d)`: rotates left by `d` positions. `d` is taken modulo the length. Raises `ValueError` for an empty sequence.
- `remove_duplicates(nums)`: collapses each run of equal adjacent values to a single value and returns the new length. On a sorted list, each distinct value then appears once.
- `remove_element(nums, val)`: drops every occurrence of `val`, keeps the order of the rest and returns the new length.
- `move_zeroes(nums)`: moves the zeroes to the end and keeps the order of the other values.
- `rearrange_alternately(arr)`: orders the values as largest, smallest, second largest, second smallest, and so on.

### `arraykit.stats`

- `min_max(arr)`: returns `(minimum, maximum)`. Raises `ValueError` if the input is empty.
- `array_sum(arr)`: returns the sum of the elements.
- `second_largest(arr)`: returns the largest value strictly below the maximum, or `-1` if there is none.
- `count_frequency(arr)`: returns `(value, count)` pairs in order of first appearance.
- `is_sorted(arr)`: returns `True` if the values never decrease.
- `missing_number(nums)`: for `nums` of length `n`, returns the one number from `0..n` that it does not contain.
- `kth_smallest(arr, k)`: returns the `k`-th smallest value, counting from 1. Raises `ValueError` if `k` is out of range.
- `max_subarray_sum(arr)`: returns the largest sum of a non-empty contiguous run, using Kadane's algorithm. Raises `ValueError` if the input is empty.
- `majority_element(nums)`: returns the Boyer–Moore voting candidate. This is the majority element whenever some value occurs more than `n/2` times. Raises `ValueError` if the input is empty.

### `arraykit.sets`

- `find_duplicates(nums)`: returns a value each time it occurs again after its first occurrence.
- `intersection(nums1, nums2)`: returns the distinct values present in both, in order of first appearance in `nums1`.
- `union(a, b)`: returns the distinct values present in either, in order of first appearance.
- `check_equal(a, b)`: returns `True` if both hold the same values, each occurring the same number of times.

### `arraykit.search`

- `has_pair_with_sum(arr, target)`: returns `True` if two elements at different positions add up to `target`.
- `leaders(arr)`: returns, in their original order, the elements that are not smaller than anything to their right.
- `count_subarrays_with_sum(nums, k)`: counts the non-empty contiguous subarrays whose sum is exactly `k`.
- `subarrays(arr)`: returns every non-empty contiguous subarray. They are grouped by start position, shortest first.
- `find_peak_element(nums)`: returns the index of an element strictly greater than its neighbours. The two ends are checked first, then the interior from left to right. Returns `-1` if there is no such element and raises `ValueError` for an empty sequence.
- `first_missing_positive(nums)`: returns the smallest positive integer that does not occur.

### `arraykit.greedy`

- `candy(ratings)`: returns the fewest candies to give children standing in a row. Every child gets at least one candy, and a child rated higher than a neighbour gets more than that neighbour.

## Example

```python
from arraykit.transform import rotate_right
from arraykit.stats import max_subarray_sum
from arraykit.greedy import candy

nums = [1, 2, 3, 4, 5]
rotate_right(nums, 2)
print(nums)                                          # [4, 5, 1, 2, 3]

print(max_subarray_sum([-2, 1, -3, 4, -1, 2, 1]))    # 6
print(candy([1, 0, 2]))                              # 5
```

## Scope

arraykit is a library only. It has no command-line tool, and it does not read input from files or standard input.