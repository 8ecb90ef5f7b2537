"""Problems solved with a window that slides along a sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_ALPHABET = 26


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    best = 0
    left = 0
    window: set[str] = set()
    for right, char in enumerate(s):
        while char in window:
            window.remove(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable by changing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    best = 0
    most_frequent = 0
    left = 0
    for right, char in enumerate(s):
        counts[char] += 1
        most_frequent = max(most_frequent, counts[char])
        while (right - left + 1) - most_frequent > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _letter_index(char: str) -> int:
    if not "a" <= char <= "z":
        raise ValueError(f"character {char!r} is outside a-z")
    return ord(char) - ord("a")


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` is a substring of ``s2``.

    Both strings may hold only the letters a-z.
    """
    first = [_letter_index(char) for char in s1]
    second = [_letter_index(char) for char in s2]
    if len(first) > len(second):
        return False

    need = [0] * _ALPHABET
    have = [0] * _ALPHABET
    for a, b in zip(first, second):
        need[a] += 1
        have[b] += 1
    matches = sum(x == y for x, y in zip(need, have))

    for left, right in enumerate(range(len(first), len(second))):
        if matches == _ALPHABET:
            return True

        added = second[right]
        have[added] += 1
        if need[added] == have[added]:
            matches += 1
        elif need[added] + 1 == have[added]:
            matches -= 1

        removed = second[left]
        have[removed] -= 1
        if need[removed] == have[removed]:
            matches += 1
        elif need[removed] - 1 == have[removed]:
            matches -= 1

    return matches == _ALPHABET