from collections import Counter
from itertools import permutations

import pytest

from problemset.arrays import (
    intersect,
    is_array_special,
    merge_sorted,
    min_moves_to_seat,
    min_operations_flip_three,
    num_rescue_boats,
    plus_one,
    remove_duplicates,
    remove_duplicates_keep_two,
    remove_element,
    reverse_string,
    sort_colors,
    special_array_queries,
    three_consecutive_odds,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    kept = remove_duplicates(nums)
    assert nums[:kept] == sorted(set(original))


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0


@pytest.mark.parametrize(
    "nums, val", [([0, 1, 2, 2, 3, 0, 4, 2], 2), ([3, 2, 2, 3], 3), ([1], 1), ([], 5)]
)
def test_remove_element(nums, val):
    original = list(nums)
    kept = remove_element(nums, val)
    assert sorted(nums[:kept]) == sorted(x for x in original if x != val)
    assert Counter(nums) == Counter(original)


def test_remove_duplicates_keep_two():
    nums = [0, 0, 1, 1, 1, 1, 2, 3, 3]
    original = list(nums)
    kept = remove_duplicates_keep_two(nums)
    result = nums[:kept]
    assert result == sorted(result)
    assert Counter(result) == {v: min(c, 2) for v, c in Counter(original).items()}


def test_merge_sorted():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_into_empty():
    nums1 = [0, 0]
    merge_sorted(nums1, 0, [4, 9], 2)
    assert nums1 == [4, 9]


def test_merge_sorted_nothing_to_merge():
    nums1 = [1]
    merge_sorted(nums1, 1, [], 0)
    assert nums1 == [1]


@pytest.mark.parametrize("nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [0], [1, 1], []])
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 9], [9], [9, 9], [0]])
def test_plus_one(digits):
    value = int("".join(map(str, digits)))
    result = plus_one(digits)
    assert int("".join(map(str, result))) == value + 1
    assert result is digits


def test_reverse_string():
    chars = list("hello")
    original = list(chars)
    reverse_string(chars)
    assert chars == original[::-1]


def test_intersect_worked_example():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]


def test_intersect_is_sorted_sub_multiset():
    a, b = [4, 9, 5], [9, 4, 9, 8, 4]
    result = intersect(a, b)
    assert result == sorted(result)
    assert not Counter(result) - Counter(a)
    assert not Counter(result) - Counter(b)


@pytest.mark.parametrize(
    "seats, students", [([3, 1, 5], [2, 7, 4]), ([4, 1, 5, 9], [1, 3, 2, 6]), ([2, 2, 6, 6], [1, 3, 2, 6])]
)
def test_min_moves_to_seat_matches_best_assignment(seats, students):
    best = min(
        sum(abs(s - t) for s, t in zip(order, students)) for order in permutations(seats)
    )
    assert min_moves_to_seat(seats, students) == best


def test_min_moves_to_seat_same_positions():
    assert min_moves_to_seat([1, 2, 3], [3, 1, 2]) == 0


def test_num_rescue_boats_no_pairs():
    people = [6, 6]
    assert num_rescue_boats(people, 7) == len(people)


def test_num_rescue_boats_all_pairs():
    people = [1, 2, 2, 3]
    assert num_rescue_boats(people, 10) == len(people) // 2


def test_num_rescue_boats_bounds():
    people = [3, 5, 3, 4]
    boats = num_rescue_boats(people, 5)
    assert (len(people) + 1) // 2 <= boats <= len(people)


@pytest.mark.parametrize(
    "arr, expected",
    [([2, 6, 4, 1], False), ([1, 2, 34, 3, 4, 5, 7, 23, 12], True), ([], False)],
)
def test_three_consecutive_odds(arr, expected):
    assert three_consecutive_odds(arr) is expected


@pytest.mark.parametrize(
    "nums, expected", [([1], True), ([2, 1, 4], True), ([4, 3, 1, 6], False), ([], True)]
)
def test_is_array_special(nums, expected):
    assert is_array_special(nums) is expected


def test_special_array_queries():
    assert special_array_queries([3, 4, 1, 2, 6], [[0, 4]]) == [False]
    assert special_array_queries([4, 3, 1, 6], [[0, 2], [2, 3]]) == [False, True]


def test_special_array_queries_single_element_query():
    assert special_array_queries([2, 2], [[0, 0], [1, 1]]) == [True, True]


def test_min_operations_flip_three_all_ones():
    assert min_operations_flip_three([1, 1, 1]) == 0


def test_min_operations_flip_three_impossible():
    assert min_operations_flip_three([0, 1, 1, 1]) == -1


def test_min_operations_flip_three_does_not_change_input():
    nums = [0, 1, 1, 1, 0, 0]
    original = list(nums)
    min_operations_flip_three(nums)
    assert nums == original


def test_min_operations_flip_three_too_short():
    with pytest.raises(ValueError):
        min_operations_flip_three([1])