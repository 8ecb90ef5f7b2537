"""Problems solved with a last-in, first-out stack."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_valid_parentheses(s: str) -> bool:
    """Return True if every closing bracket closes the most recent open one."""
    stack: list[str] = []
    for char in s:
        opening = _BRACKET_PAIRS.get(char)
        if opening is None:
            stack.append(char)
        elif not stack or stack.pop() != opening:
            return False
    return not stack


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove the top element and return it."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic written in reverse Polish notation.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for token in tokens:
        if _INTEGER.fullmatch(token):
            stack.append(int(token))
            continue
        operation = _OPERATORS.get(token)
        if operation is None:
            raise ValueError(f"unknown token {token!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(operation(a, b))
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""
    result: list[str] = []
    current: list[str] = []

    def backtrack(opened: int, closed: int) -> None:
        if opened == n and closed == n:
            result.append("".join(current))
            return
        if opened < n:
            current.append("(")
            backtrack(opened + 1, closed)
            current.pop()
        if closed < opened:
            current.append(")")
            backtrack(opened, closed + 1)
            current.pop()

    backtrack(0, 0)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one (0 if none)."""
    result = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperature > temperatures[waiting[-1]]:
            earlier = waiting.pop()
            result[earlier] = day - earlier
        waiting.append(day)
    return result


def _arrival_time(distance: int, speed: int) -> float:
    if speed == 0:
        return math.nan if distance == 0 else math.copysign(math.inf, distance)
    return distance / speed


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``."""
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    cars = sorted(zip(position, speed), key=lambda car: car[0], reverse=True)
    fleets: list[float] = []
    for start, velocity in cars:
        fleets.append(_arrival_time(target - start, velocity))
        if len(fleets) >= 2 and fleets[-1] <= fleets[-2]:
            fleets.pop()
    return len(fleets)