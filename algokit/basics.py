"""Small warm-up problems on lists, strings and numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, chain, pairwise, zip_longest
from math import prod

_MORSE = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---",
    "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-",
    "..-", "...-", ".--", "-..-", "-.--", "--..",
)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Return, for each kid, whether the extra candies make them a top holder."""
    most = max(candies, default=0)
    most = max(most, 0)
    return [count + extra_candies >= most for count in candies]


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave ``nums[:n]`` with ``nums[n:2n]``."""
    if n < 0 or len(nums) < 2 * n:
        raise ValueError(f"need at least {2 * n} numbers, got {len(nums)}")
    return list(chain.from_iterable(zip(nums[:n], nums[n : 2 * n])))


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose character appears among the jewels."""
    jewel_set = set(jewels)
    return sum(stone in jewel_set for stone in stones)


def _to_morse(word: str) -> str:
    try:
        return "".join(_MORSE[ord(char) - ord("a")] for char in word if _check_letter(char))
    except IndexError:  # pragma: no cover - guarded by _check_letter
        raise ValueError(f"word {word!r} has a character outside a-z") from None


def _check_letter(char: str) -> bool:
    if not "a" <= char <= "z":
        raise ValueError(f"character {char!r} is outside a-z")
    return True


def unique_morse_representations(words: Iterable[str]) -> int:
    """Count the distinct Morse transcriptions among lower-case words."""
    return len({_to_morse(word) for word in words})


def defang_ip_addr(address: str) -> str:
    """Replace every ``.`` with ``[.]``."""
    return address.replace(".", "[.]")


def _digits(n: int) -> list[int]:
    """Decimal digits of ``n``, carrying the sign of ``n``."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    digits = []
    while n:
        n, digit = divmod(n, 10)
        digits.append(sign * digit)
    return digits


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum."""
    digits = _digits(n)
    return prod(digits) - sum(digits)


def score_of_string(s: str) -> int:
    """Sum of absolute differences between adjacent bytes of ``s``."""
    return sum(abs(a - b) for a, b in pairwise(s.encode("utf-8")))


def merge_alternately(word1: str, word2: str) -> str:
    """Merge two words letter by letter, appending whatever is left over."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))