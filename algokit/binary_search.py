"""Problems solved by halving a sorted search space."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass, field


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] < target:
            left = mid + 1
        elif nums[mid] > target:
            right = mid - 1
        else:
            return mid
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows, read in order, are sorted."""
    if any(len(row) == 0 for row in matrix):
        raise ValueError("matrix rows must not be empty")

    top, bottom = 0, len(matrix) - 1
    while top <= bottom:
        mid = top + (bottom - top) // 2
        row = matrix[mid]
        if row[0] > target:
            bottom = mid - 1
        elif row[-1] < target:
            top = mid + 1
        else:
            return binary_search(row, target) != -1
    return False


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all piles within ``h`` hours.

    If no speed is fast enough, the size of the largest pile is returned.
    """
    best = max(piles, default=0)
    left, right = 1, best
    while left <= right:
        speed = left + (right - left) // 2
        if _hours_needed(piles, speed) <= h:
            best = speed
            right = speed - 1
        else:
            left = speed + 1
    return best


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    smallest = nums[0]
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        smallest = min(smallest, nums[mid], nums[left])
        if nums[left] <= nums[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return smallest


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if target > nums[mid] or target < nums[left]:
                left = mid + 1
            else:
                right = mid - 1
        elif target < nums[mid] or target > nums[right]:
            right = mid - 1
        else:
            left = mid + 1
    return -1


@dataclass
class _History:
    timestamps: list[int] = field(default_factory=list)
    values: list[str] = field(default_factory=list)


class TimeMap:
    """A key-value store that remembers every value a key held over time.

    Timestamps for a key are expected to be set in increasing order.
    """

    def __init__(self) -> None:
        self._store: dict[str, _History] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record that ``key`` held ``value`` from ``timestamp`` on."""
        history = self._store.setdefault(key, _History())
        history.timestamps.append(timestamp)
        history.values.append(value)

    def get(self, key: str, timestamp: int) -> str:
        """Return the value ``key`` held at ``timestamp``, or ``""`` if none."""
        history = self._store.get(key)
        if history is None:
            return ""
        position = bisect_right(history.timestamps, timestamp)
        return history.values[position - 1] if position else ""