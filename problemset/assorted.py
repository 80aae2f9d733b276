"""Prefix sums, grids, scheduling and a food rating tracker."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import accumulate
from math import comb

# Lowest value the best dungeon energy starts from.
_ENERGY_FLOOR = -1001


def check_subarray_sum(nums, k) -> bool:
    """True if a run of at least two values sums to a multiple of ``k``."""
    first_seen = {0: -1}
    remainder = 0
    for i, value in enumerate(nums):
        remainder = (remainder + value) % k
        if remainder in first_seen:
            if i - first_seen[remainder] > 1:
                return True
        else:
            first_seen[remainder] = i
    return False


def subarrays_div_by_k(nums, k) -> int:
    """Number of non-empty runs whose sum is divisible by ``k``."""
    remainders = Counter(total % k for total in accumulate(nums))
    # A prefix that is itself divisible forms a run on its own.
    return remainders[0] + sum(comb(count, 2) for count in remainders.values())


def maximum_energy(energy, k) -> int:
    """Most energy gathered by starting somewhere and jumping ``k`` ahead until past the end."""
    gathered = list(energy)
    best = _ENERGY_FLOOR
    for i in reversed(range(len(gathered))):
        if i + k < len(gathered):
            gathered[i] += gathered[i + k]
        best = max(best, gathered[i])
    return best


def max_score(grid) -> int:
    """Best ``end - start`` over moves going down or right through the grid.

    The intermediate cells cancel out, so each cell is compared with the
    smallest value above or to the left of it.
    """
    rows = [list(row) for row in grid]
    best = None
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            neighbours = []
            if i:
                neighbours.append(rows[i - 1][j])
            if j:
                neighbours.append(row[j - 1])
            if not neighbours:
                continue
            smallest = min(neighbours)
            score = value - smallest
            best = score if best is None else max(best, score)
            row[j] = min(value, smallest)
    if best is None:
        raise ValueError("the grid needs at least two cells")
    return best


def count_days(days, meetings) -> int:
    """Days from 1 to ``days`` not covered by any ``[start, end]`` meeting."""
    free = 0
    next_day = 1
    for start, end in sorted(meetings):
        if end < next_day:
            continue
        if start > next_day:
            free += start - next_day
        next_day = end + 1
    return free + days - next_day + 1


def find_winning_player(skills, k) -> int:
    """Index of the first player to win ``k`` games in a row in the queue tournament."""
    champion, challenger = 0, 1
    wins = 0
    while champion < len(skills) and challenger < len(skills):
        if skills[champion] > skills[challenger]:
            challenger += 1
        else:
            champion, challenger = challenger, challenger + 1
            wins = 0
        wins += 1
        if wins == k:
            return champion
    # After one full round the strongest player keeps winning.
    return champion


def can_finish(num_courses, prerequisites) -> bool:
    """True if the prerequisite graph has no cycle."""
    edges: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        edges[course].append(required)

    done = [False] * num_courses
    on_path = [False] * num_courses
    for start in range(num_courses):
        if done[start]:
            continue
        on_path[start] = True
        stack = [(start, iter(edges[start]))]
        while stack:
            node, successors = stack[-1]
            for succ in successors:
                if on_path[succ]:
                    return False
                if not done[succ]:
                    on_path[succ] = True
                    stack.append((succ, iter(edges[succ])))
                    break
            else:
                stack.pop()
                on_path[node] = False
                done[node] = True
    return True


def largest_local(grid) -> list[list[int]]:
    """Maximum of every 3x3 window of a square grid."""
    size = len(grid)
    if size < 3:
        raise ValueError("the grid must be at least 3x3")
    return [
        [
            max(value for row in grid[i - 1:i + 2] for value in row[j - 1:j + 2])
            for j in range(1, size - 1)
        ]
        for i in range(1, size - 1)
    ]


class FoodRatings:
    """Track food ratings and report the best rated food of each cuisine."""

    def __init__(self, foods, cuisines, ratings) -> None:
        self._foods: dict[str, tuple[str, int]] = {}
        self._ranking: dict[str, list[tuple[int, str]]] = {}
        for food, cuisine, rating in zip(foods, cuisines, ratings):
            self._foods[food] = (cuisine, rating)
            heapq.heappush(self._ranking.setdefault(cuisine, []), (-rating, food))

    def change_rating(self, food, new_rating) -> None:
        """Give ``food`` a new rating."""
        cuisine, _ = self._foods[food]
        self._foods[food] = (cuisine, new_rating)
        heapq.heappush(self._ranking[cuisine], (-new_rating, food))

    def highest_rated(self, cuisine) -> str:
        """Best rated food of ``cuisine``; ties go to the smallest name."""
        ranking = self._ranking[cuisine]
        while -ranking[0][0] != self._foods[ranking[0][1]][1]:
            heapq.heappop(ranking)
        return ranking[0][1]