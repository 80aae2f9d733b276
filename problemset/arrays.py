"""Array and list problems."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import accumulate, pairwise


def two_sum(nums, target) -> list[int]:
    """Indices of the first pair of values adding up to ``target``, or []."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    return []


def remove_duplicates(nums) -> int:
    """Keep one copy of each value of a sorted list at its front; return the count."""
    kept = 0
    for value in nums:
        if kept == 0 or value != nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums, val) -> int:
    """Move the values other than ``val`` to the front; return how many there are."""
    start, end = 0, len(nums) - 1
    while start <= end:
        if nums[end] == val:
            end -= 1
            continue
        if nums[start] != val:
            start += 1
            continue
        nums[start], nums[end] = nums[end], nums[start]
        start += 1
        end -= 1
    return start


def remove_duplicates_keep_two(nums) -> int:
    """Keep at most two copies of each value of a sorted list; return the count."""
    kept = 0
    for value in nums:
        if kept <= 1 or value != nums[kept - 2]:
            nums[kept] = value
            kept += 1
    return kept


def merge_sorted(nums1, m, nums2, n) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if n == 0:
        return
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def sort_colors(nums) -> None:
    """Sort a list of 0, 1 and 2 in place in a single pass."""
    zero, two, check = 0, len(nums) - 1, 0
    while check <= two:
        if nums[check] == 0:
            nums[check] = nums[zero]
            nums[zero] = 0
            check += 1
            zero += 1
        elif nums[check] == 2:
            nums[check] = nums[two]
            nums[two] = 2
            two -= 1
        else:
            check += 1


def plus_one(digits) -> list[int]:
    """Add one to the number held as decimal digits; the list is changed and returned."""
    for i in reversed(range(len(digits))):
        if digits[i] < 9:
            digits[i] += 1
            return digits
        digits[i] = 0
    digits.insert(0, 1)
    return digits


def reverse_string(chars) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def intersect(nums1, nums2) -> list[int]:
    """Sorted multiset intersection of two lists."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def min_moves_to_seat(seats, students) -> int:
    """Total distance when the sorted students take the sorted seats."""
    return sum(abs(seat - student) for seat, student in zip(sorted(seats), sorted(students)))


def num_rescue_boats(people, limit) -> int:
    """Fewest boats carrying at most two people each within ``limit`` weight."""
    weights = sorted(people)
    light, heavy = 0, len(weights) - 1
    boats = 0
    while light <= heavy:
        if weights[light] + weights[heavy] <= limit:
            light += 1
        heavy -= 1
        boats += 1
    return boats


def three_consecutive_odds(arr) -> bool:
    """True if three odd values stand next to each other."""
    run = 0
    for value in arr:
        if value % 2 == 1:
            run += 1
            if run == 3:
                return True
        else:
            run = 0
    return False


def is_array_special(nums) -> bool:
    """True if every pair of neighbours differs in parity."""
    return all(a % 2 != b % 2 for a, b in pairwise(nums))


def special_array_queries(nums, queries) -> list[bool]:
    """For each ``[start, end]`` query, whether that slice is special."""
    same_parity = list(
        accumulate((a % 2 == b % 2 for a, b in pairwise(nums)), initial=0)
    )
    return [same_parity[start] == same_parity[end] for start, end in queries]


def min_operations_flip_three(nums) -> int:
    """Fewest flips of three neighbouring bits that make all bits 1, or -1."""
    if len(nums) < 2:
        raise ValueError("need at least two values")
    bits = list(nums)
    count = 0
    for i in range(len(bits) - 2):
        if bits[i] == 0:
            count += 1
            bits[i + 1] = 1 if bits[i + 1] == 0 else 0
            bits[i + 2] = 1 if bits[i + 2] == 0 else 0
    if bits[-2] == 0 or bits[-1] == 0:
        return -1
    return count