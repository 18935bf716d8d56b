from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from arraykit.sets import check_equal, find_duplicates, intersection, union

int_lists = st.lists(st.integers(-20, 20), max_size=40)


def test_find_duplicates_example():
    assert find_duplicates([4, 3, 2, 7, 8, 2, 3, 1]) == [2, 3]


def test_find_duplicates_reports_every_repeat():
    assert find_duplicates([5, 5, 5]) == [5, 5]


@given(int_lists)
def test_find_duplicates_invariants(values):
    result = find_duplicates(values)
    assert len(result) == len(values) - len(set(values))
    counts = Counter(result)
    for value, count in Counter(values).items():
        assert counts[value] == count - 1


def test_intersection_example():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]


@given(int_lists, int_lists)
def test_intersection_invariants(a, b):
    result = intersection(a, b)
    assert len(result) == len(set(result))
    assert set(result) == set(a) & set(b)
    assert result == sorted(result, key=a.index)


@given(int_lists, int_lists)
def test_union_invariants(a, b):
    result = union(a, b)
    assert len(result) == len(set(result))
    assert set(result) == set(a) | set(b)
    distinct_a = len(set(a))
    assert set(result[:distinct_a]) == set(a)
    assert result[:distinct_a] == sorted(set(a), key=a.index)


def test_union_empty():
    assert union([], []) == []


@given(int_lists, st.randoms())
def test_check_equal_permutation(values, rnd):
    shuffled = list(values)
    rnd.shuffle(shuffled)
    assert check_equal(values, shuffled)


def test_check_equal_cases():
    assert check_equal([1, 2, 5, 4, 0], [2, 4, 5, 0, 1])
    assert not check_equal([1, 2, 5], [2, 4, 15])
    assert not check_equal([1, 1, 2], [1, 2, 2])
    assert not check_equal([1], [1, 1])
    assert check_equal([], [])


@given(int_lists, st.integers(-20, 20))
def test_check_equal_detects_extra_element(values, extra):
    assert not check_equal(values, values + [extra])