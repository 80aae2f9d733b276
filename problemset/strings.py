"""String problems."""

from __future__ import annotations

import heapq
from collections import Counter
from functools import reduce
from itertools import pairwise, zip_longest
from typing import Iterator


def _revisions(version: str) -> Iterator[int]:
    while version:
        head, _, version = version.partition(".")
        yield int(head)


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings revision by revision: -1, 0 or 1.

    Missing revisions count as zero; a revision that is not a number raises
    ValueError.
    """
    for first, second in zip_longest(_revisions(version1), _revisions(version2), fillvalue=0):
        if first > second:
            return 1
        if first < second:
            return -1
    return 0


def common_chars(words) -> list[str]:
    """Characters found in every word, repeated as often as in all of them, sorted."""
    if not words:
        return []
    common = reduce(lambda acc, word: acc & Counter(word), words[1:], Counter(words[0]))
    return sorted(common.elements())


def palindrome_partitions(s: str) -> list[list[str]]:
    """Every way to cut ``s`` into palindromes, shortest first pieces first."""
    n = len(s)
    is_pal = [[False] * n for _ in range(n)]
    for i in range(n):
        is_pal[i][i] = True
    for span in range(1, n):
        for i in range(n - span):
            j = i + span
            if s[i] == s[j] and (span == 1 or is_pal[i + 1][j - 1]):
                is_pal[i][j] = True

    result: list[list[str]] = []
    path: list[str] = []

    def backtrack(start: int) -> None:
        if start == n:
            result.append(list(path))
            return
        for end in range(start, n):
            if is_pal[start][end]:
                path.append(s[start:end + 1])
                backtrack(end + 1)
                path.pop()

    backtrack(0)
    return result


def append_characters(s: str, t: str) -> int:
    """How many characters must be appended to ``s`` to make ``t`` a subsequence."""
    matched = 0
    for ch in s:
        if matched == len(t):
            break
        if ch == t[matched]:
            matched += 1
    return len(t) - matched


def score_of_string(s: str) -> int:
    """Sum of absolute code-point differences between neighbouring characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def permutation_difference(s: str, t: str) -> int:
    """Sum of position differences of each character of ``t`` in ``s``."""
    position = {ch: i for i, ch in enumerate(s)}
    total = 0
    for i, ch in enumerate(t):
        if ch not in position:
            raise ValueError(f"character {ch!r} does not occur in {s!r}")
        total += abs(position[ch] - i)
    return total


def minimum_chairs(s: str) -> int:
    """Largest number of people present at once; 'E' enters, anything else leaves."""
    peak = present = 0
    for event in s:
        present += 1 if event == "E" else -1
        peak = max(peak, present)
    return peak


def clear_stars(s: str) -> str:
    """Let each '*' remove the smallest earlier character, the rightmost on ties."""
    heap: list[tuple[str, int]] = []
    removed: set[int] = set()
    for i, ch in enumerate(s):
        if ch != "*":
            heapq.heappush(heap, (ch, -i))
        else:
            if not heap:
                raise ValueError(f"star at position {i} has nothing to remove")
            removed.add(-heapq.heappop(heap)[1])
    return "".join(ch for i, ch in enumerate(s) if ch != "*" and i not in removed)


def clear_digits(s: str) -> str:
    """Let each digit delete the closest non-digit kept to its left."""
    kept: list[str] = []
    for i, ch in enumerate(s):
        if "0" <= ch <= "9":
            if not kept:
                raise ValueError(f"digit at position {i} has nothing to remove")
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome buildable from the characters of ``s``."""
    length = sum(count // 2 for count in Counter(s).values()) * 2
    return length + 1 if length != len(s) else length


class Trie:
    """A prefix tree of dictionary roots."""

    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, Trie] = {}
        self.is_end = False

    def insert(self, word: str) -> None:
        """Add ``word`` as a root."""
        node = self
        for ch in word:
            node = node.children.setdefault(ch, Trie())
        node.is_end = True

    def root_of(self, word: str) -> str:
        """The shortest stored root that prefixes ``word``, or ``word`` itself."""
        node = self
        for i, ch in enumerate(word):
            node = node.children.get(ch)
            if node is None:
                return word
            if node.is_end:
                return word[:i + 1]
        return word


def replace_words(dictionary, sentence: str) -> str:
    """Replace each space-separated word by the shortest dictionary root it starts with."""
    trie = Trie()
    for root in dictionary:
        trie.insert(root)
    return " ".join(trie.root_of(word) for word in sentence.split(" "))