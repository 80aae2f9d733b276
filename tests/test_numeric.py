from functools import reduce
from itertools import combinations
from operator import xor

import pytest

from problemset.numeric import (
    beautiful_subsets,
    is_ugly,
    judge_square_sum,
    kth_smallest_prime_fraction,
    longest_nice_subarray,
    min_days,
    min_patches,
    minimum_difference,
    subset_xor_sum,
    subsets,
    sum_digit_differences,
    ways_to_reach_stair,
)


@pytest.mark.parametrize("a,b,c", [(0, 0, 0), (1, 0, 0), (3, 2, 1), (0, 5, 0), (10, 4, 6)])
def test_is_ugly_products_of_small_primes(a, b, c):
    assert is_ugly(2**a * 3**b * 5**c) is True


@pytest.mark.parametrize("n", [0, -6, -1])
def test_is_ugly_rejects_non_positive(n):
    assert is_ugly(n) is False


@pytest.mark.parametrize("factor", [7, 11, 13 * 2, 7 * 30])
def test_is_ugly_rejects_other_primes(factor):
    assert is_ugly(factor) is False


@pytest.mark.parametrize("a,b", [(0, 0), (1, 2), (3, 4), (0, 46340), (123, 456)])
def test_judge_square_sum_accepts_sums_of_squares(a, b):
    assert judge_square_sum(a * a + b * b) is True


@pytest.mark.parametrize("c", [7, 15, 28, 4 * 4 * 23, -1])
def test_judge_square_sum_rejects_non_sums(c):
    assert judge_square_sum(c) is False


@pytest.mark.parametrize("nums", [[1, 3], [5, 1, 6], [3, 4, 5, 6, 7, 8], [2]])
def test_subset_xor_sum_matches_enumerated_subsets(nums):
    expected = sum(reduce(xor, subset, 0) for subset in subsets(nums))
    assert subset_xor_sum(nums) == expected


def test_subset_xor_sum_single_value_and_empty():
    assert subset_xor_sum([9]) == 9
    assert subset_xor_sum([]) == 0


def test_ways_to_reach_stair_small():
    assert ways_to_reach_stair(0) == 2
    assert ways_to_reach_stair(1) == 4
    assert ways_to_reach_stair(2) == 4


def test_ways_to_reach_stair_beyond_jump_limit():
    assert ways_to_reach_stair(2**29 + 1) == 0


def test_sum_digit_differences_example():
    assert sum_digit_differences([13, 23, 12]) == 4


def test_sum_digit_differences_equal_values():
    assert sum_digit_differences([10, 10, 10, 10]) == 0


def test_sum_digit_differences_invariants():
    pair = sum_digit_differences([123, 456])
    assert sum_digit_differences([456, 123]) == pair
    assert sum_digit_differences([123, 123, 456]) == 2 * pair


def test_sum_digit_differences_does_not_modify_input():
    nums = [13, 23, 12]
    sum_digit_differences(nums)
    assert nums == [13, 23, 12]


def test_longest_nice_subarray_distinct_bits():
    nums = [1, 2, 4, 8, 16]
    assert longest_nice_subarray(nums) == len(nums)


def test_longest_nice_subarray_repeated_value():
    assert longest_nice_subarray([3, 3, 3, 3]) == 1
    assert longest_nice_subarray([]) == 0


def test_longest_nice_subarray_example():
    assert longest_nice_subarray([3, 1, 5, 11, 13]) == 1


def test_minimum_difference_exact_value_present():
    assert minimum_difference([6, 7, 12, 3], 12) == 0


def test_minimum_difference_single_value():
    assert minimum_difference([1], 10) == abs(10 - 1)


def test_minimum_difference_example():
    assert minimum_difference([1, 2, 4, 5], 3) == 1


def test_minimum_difference_empty_raises():
    with pytest.raises(ValueError):
        minimum_difference([], 3)


def test_min_patches_already_covered():
    assert min_patches([1, 2, 4], 7) == 0


@pytest.mark.parametrize("bits", [1, 3, 10, 31])
def test_min_patches_from_nothing_doubles(bits):
    assert min_patches([], 2**bits - 1) == bits


def test_min_days_not_enough_flowers():
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1


def test_min_days_single_flower_bouquet_is_earliest_bloom():
    bloom = [7, 3, 9, 12]
    assert min_days(bloom, 1, 1) == min(bloom)
    assert min_days([1000000000, 1000000000], 1, 1) == 1000000000


def test_min_days_all_flowers_needed_is_latest_bloom():
    bloom = [7, 7, 7, 7, 12, 7]
    assert min_days(bloom, 2, 3) == max(bloom)


def test_kth_smallest_prime_fraction_only_fraction():
    assert kth_smallest_prime_fraction([1, 7], 1) == [1, 7]


def test_kth_smallest_prime_fraction_smallest():
    arr = [1, 2, 3, 5]
    assert kth_smallest_prime_fraction(arr, 1) == [arr[0], arr[-1]]


def test_kth_smallest_prime_fraction_example():
    assert kth_smallest_prime_fraction([1, 2, 3, 5], 3) == [2, 5]


def test_kth_smallest_prime_fraction_needs_two_values():
    with pytest.raises(ValueError):
        kth_smallest_prime_fraction([1], 1)


def test_subsets_order():
    assert subsets([1, 2, 3]) == [[1, 2, 3], [1, 2], [1, 3], [1], [2, 3], [2], [3], []]


def test_subsets_empty():
    assert subsets([]) == [[]]


def test_subsets_count_and_distinct():
    nums = [4, 8, 15, 16, 23]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)


def test_beautiful_subsets_example():
    assert beautiful_subsets([2, 4, 6], 2) == 4


def test_beautiful_subsets_large_k_counts_all():
    nums = [1, 3, 5, 8]
    assert beautiful_subsets(nums, 100) == 2 ** len(nums) - 1
    assert beautiful_subsets([1], 1) == 1


@pytest.mark.parametrize("nums,k", [([1, 2, 3, 4], 1), ([4, 2, 5, 9, 10, 3], 1), ([5, 5, 10], 5)])
def test_beautiful_subsets_matches_filtered_subsets(nums, k):
    expected = sum(
        1
        for subset in subsets(nums)
        if subset and all(abs(a - b) != k for a, b in combinations(subset, 2))
    )
    assert beautiful_subsets(nums, k) == expected


def test_beautiful_subsets_does_not_modify_input():
    nums = [6, 2, 4]
    beautiful_subsets(nums, 2)
    assert nums == [6, 2, 4]