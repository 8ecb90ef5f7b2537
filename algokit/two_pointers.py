"""Problems solved by walking two indices towards each other."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char.isalnum()]
    return cleaned == cleaned[::-1]


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two entries of sorted ``numbers`` summing to ``target``.

    When no such pair exists the result is ``[0, 0]``.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return [left + 1, right + 1]
    return [0, 0]


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triplet of values that sums to zero, in ascending order."""
    values = sorted(nums)
    result: list[list[int]] = []
    for index, first in enumerate(values):
        if index > 0 and first == values[index - 1]:
            continue
        left, right = index + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                result.append([first, values[left], values[right]])
                left += 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
    return result


def max_area(height: Sequence[int]) -> int:
    """Return the most water two vertical lines can hold between them."""
    best = 0
    left, right = 0, len(height) - 1
    while left <= right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best