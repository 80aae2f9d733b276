"""Number theory, bit manipulation and search problems."""

from __future__ import annotations

import math
from collections import Counter
from itertools import combinations, product

_MAX_JUMPS = 30
_DIGIT_POSITIONS = 9
_MAX_BLOOM_DAY = 10**9


def is_ugly(n: int) -> bool:
    """True if ``n`` is positive and has no prime factors other than 2, 3 and 5."""
    if n < 1:
        return False
    for prime in (2, 3, 5):
        while n % prime == 0:
            n //= prime
    return n == 1


def _is_square(value: int) -> bool:
    root = math.isqrt(value)
    return root * root == value


def judge_square_sum(c: int) -> bool:
    """True if ``c`` is the sum of two squares of non-negative integers."""
    if c < 0:
        return False
    return any(_is_square(c - a * a) for a in range(math.isqrt(c) + 1))


def subset_xor_sum(nums) -> int:
    """Sum of the XOR totals of every subset of ``nums``.

    Each bit set in any value is set in the XOR of exactly half the subsets.
    """
    values = list(nums)
    bit_mask = 0
    for value in values:
        bit_mask |= value
    return bit_mask * ((1 << len(values)) // 2)


def ways_to_reach_stair(k: int) -> int:
    """Ways to reach stair ``k`` from stair 1 with growing jumps and single steps down.

    After ``j`` jumps the position is ``2**j`` less the steps down taken, and
    at most ``j + 1`` steps down fit between the jumps. Up to 30 jumps are
    considered.
    """
    ways = 0
    for jumps in range(_MAX_JUMPS):
        reach = 1 << jumps
        if reach < k:
            continue
        downs = reach - k
        if downs - jumps > 1:
            break
        ways += math.comb(jumps + 1, downs)
    return ways


def sum_digit_differences(nums) -> int:
    """Over all pairs, the number of digit positions in which the two values differ.

    The values are compared in their lowest nine decimal positions.
    """
    total = 0
    values = list(nums)
    for _ in range(_DIGIT_POSITIONS):
        counts = Counter(value % 10 for value in values)
        total += sum(a * b for a, b in combinations(counts.values(), 2))
        values = [value // 10 for value in values]
    return total


def longest_nice_subarray(nums) -> int:
    """Length of the longest run whose values share no set bit pairwise."""
    used_bits = 0
    left = 0
    longest = 0
    for right, value in enumerate(nums):
        while used_bits & value:
            used_bits ^= nums[left]
            left += 1
        used_bits |= value
        longest = max(longest, right - left + 1)
    return longest


def minimum_difference(nums, k: int) -> int:
    """Smallest ``|k - AND(subarray)|`` over every non-empty subarray."""
    if not nums:
        raise ValueError("need at least one value")
    ands: set[int] = set()
    best = math.inf
    for value in nums:
        ands = {previous & value for previous in ands}
        ands.add(value)
        best = min(best, min(abs(k - candidate) for candidate in ands))
    return int(best)


def min_patches(nums, n: int) -> int:
    """Fewest numbers to add to sorted ``nums`` so every value 1..n is a subset sum."""
    patches = 0
    reach = 0
    index = 0
    while reach < n:
        if index < len(nums) and reach + 1 >= nums[index]:
            reach += nums[index]
            index += 1
        else:
            reach += reach + 1
            patches += 1
    return patches


def _bouquets_by(bloom_day, day: int, m: int, k: int) -> int:
    bouquets = 0
    run = 0
    for bloom in bloom_day:
        run = run + 1 if bloom <= day else 0
        if run == k:
            bouquets += 1
            run = 0
        if bouquets == m:
            break
    return bouquets


def min_days(bloom_day, m: int, k: int) -> int:
    """First day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    if len(bloom_day) < m * k:
        return -1
    low, high = 1, _MAX_BLOOM_DAY
    while low < high:
        mid = (low + high) // 2
        if _bouquets_by(bloom_day, mid, m, k) < m:
            low = mid + 1
        else:
            high = mid
    return low


def kth_smallest_prime_fraction(arr, k: int) -> list[int]:
    """The ``k``-th smallest fraction ``arr[i] / arr[j]`` with ``i < j``.

    ``arr`` is sorted, starts with 1 and otherwise holds primes.
    """
    n = len(arr)
    if n < 2:
        raise ValueError("need at least two values")
    low, high = 0.0, 1.0
    best = (0, 1)
    while low < high:
        mid = (low + high) / 2
        count = 0
        closest = 0.0
        for i, numerator in enumerate(arr):
            for j in range(i + 1, n):
                fraction = numerator / arr[j]
                if fraction <= mid:
                    count += n - j
                    if fraction > closest:
                        closest = fraction
                        best = (i, j)
                    break
            if count > k:
                break
        if count == k:
            break
        if count > k:
            high = mid
        else:
            low = mid
    return [arr[best[0]], arr[best[1]]]


def subsets(nums) -> list[list[int]]:
    """Every subset of ``nums``, from the whole list down to the empty one.

    The first value is kept in the first half, the second in the first half
    of each half, and so on.
    """
    values = list(nums)
    return [
        [value for value, keep in zip(values, picks) if keep]
        for picks in product((True, False), repeat=len(values))
    ]


def beautiful_subsets(nums, k: int) -> int:
    """Number of non-empty subsets with no two values differing by exactly ``k``."""
    values = sorted(nums)
    chosen: Counter[int] = Counter()

    def count_from(index: int) -> int:
        if index == len(values):
            return 1
        value = values[index]
        total = 0
        if value < k or chosen[value - k] == 0:
            chosen[value] += 1
            total += count_from(index + 1)
            chosen[value] -= 1
        return total + count_from(index + 1)

    return count_from(0) - 1