"""Problems solved by sorting, counting and greedy ordering."""

from __future__ import annotations

import heapq
from collections import Counter

MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def height_checker(heights) -> int:
    """How many positions differ from the non-decreasing order of ``heights``."""
    return sum(actual != expected for actual, expected in zip(heights, sorted(heights)))


def relative_sort_array(arr1, arr2) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``; values not in it follow, ascending.

    ``arr1`` is rearranged in place and returned.
    """
    remaining = Counter(arr1)
    ordered: list[int] = []
    for value in arr2:
        ordered.extend([value] * remaining.pop(value, 0))
    for value in sorted(remaining):
        ordered.extend([value] * remaining[value])
    arr1[:] = ordered
    return arr1


def min_increment_for_unique(nums) -> int:
    """Fewest unit increments that make every value distinct."""
    moves = 0
    next_free = None
    for value in sorted(nums):
        target = value if next_free is None else max(value, next_free)
        moves += target - value
        next_free = target + 1
    return moves


def special_array(nums) -> int:
    """The unique x with exactly x values >= x, or -1."""
    values = sorted(nums, reverse=True)
    n = len(values)
    answer = -1
    for x in range(1, n + 1):
        if values[x - 1] >= x and (x == n or values[x] < x):
            if answer != -1:
                return -1
            answer = x
    return answer


def is_n_straight_hand(hand, group_size) -> bool:
    """True if the cards split into runs of ``group_size`` consecutive values."""
    count = Counter(hand)
    for start in sorted(count):
        groups = count[start]
        if groups == 0:
            continue
        for value in range(start, start + group_size):
            if count[value] < groups:
                return False
            count[value] -= groups
    return True


def lemonade_change(bills) -> bool:
    """True if every customer paying 5, 10 or 20 can get change for a 5 drink."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if fives == 0:
                return False
            fives -= 1
            tens += 1
        elif tens > 0 and fives > 0:
            tens -= 1
            fives -= 1
        elif fives > 2:
            fives -= 3
        else:
            return False
    return True


def find_relative_ranks(score) -> list[str]:
    """Rank of each athlete by descending score; the top three get medals."""
    ranks = [""] * len(score)
    by_score = sorted(range(len(score)), key=lambda i: score[i], reverse=True)
    for place, index in enumerate(by_score):
        ranks[index] = MEDALS[place] if place < len(MEDALS) else str(place + 1)
    return ranks


def max_profit_assignment(difficulty, profit, worker) -> int:
    """Total profit when each worker takes the best job within their ability."""
    jobs = sorted(zip(profit, difficulty), key=lambda job: (-job[0], job[1]))
    workers = sorted(worker, reverse=True)
    total = 0
    job_index = 0
    worker_index = 0
    while worker_index < len(workers) and job_index < len(jobs):
        job_profit, job_difficulty = jobs[job_index]
        if workers[worker_index] >= job_difficulty:
            total += job_profit
            worker_index += 1
        else:
            job_index += 1
    return total


def maximum_happiness_sum(happiness, k) -> int:
    """Best total when picking ``k`` children, each pick lowering the rest by one."""
    total = 0
    for turn, value in enumerate(sorted(happiness, reverse=True)[:k]):
        if value - turn <= 0:
            break
        total += value - turn
    return total


def find_maximized_capital(k, w, profits, capital) -> int:
    """Capital after finishing at most ``k`` affordable projects, best profit first."""
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    next_project = 0
    for _ in range(k):
        while next_project < len(projects) and projects[next_project][0] <= w:
            heapq.heappush(available, -projects[next_project][1])
            next_project += 1
        if not available:
            break
        w -= heapq.heappop(available)
    return w