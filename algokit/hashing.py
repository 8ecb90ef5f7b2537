"""Problems solved with hash maps, sets and counting."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

_SEPARATOR = "#"
_BOARD_SIZE = 9
_EMPTY_CELL = "."


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return Counter(s) == Counter(t)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, using bucket sort by count."""
    counts = Counter(nums)
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for value, count in counts.items():
        buckets[count].append(value)

    result: list[int] = []
    for bucket in reversed(buckets[1:]):
        for value in bucket:
            result.append(value)
            if len(result) == k:
                return result
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result: list[int] = []
    prefix = 1
    for value in nums:
        result.append(prefix)
        prefix *= value

    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Check that no filled cell repeats within its row, column or 3x3 box.

    ``board`` is nine rows of nine cells; ``"."`` marks an empty cell.
    """
    if len(board) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")

    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY_CELL:
                continue
            keys = (
                ("row", r, cell),
                ("col", c, cell),
                ("box", (r // 3) * 3 + c // 3, cell),
            )
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def encode(strs: Iterable[str]) -> str:
    """Join strings into one, each prefixed by its length and ``#``."""
    return "".join(f"{len(item)}{_SEPARATOR}{item}" for item in strs)


def decode(encoded: str) -> list[str]:
    """Split a string produced by :func:`encode` back into its parts."""
    result: list[str] = []
    position = 0
    while position < len(encoded):
        separator = encoded.find(_SEPARATOR, position)
        if separator == -1:
            raise ValueError(f"missing length separator at position {position}")
        length = int(encoded[position:separator])
        start = separator + 1
        end = start + length
        if length < 0 or end > len(encoded):
            raise ValueError(f"length {length} at position {position} is out of range")
        result.append(encoded[start:end])
        position = end
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        length = 1
        while start + length in values:
            length += 1
        best = max(best, length)
    return best