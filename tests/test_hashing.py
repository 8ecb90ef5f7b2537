import math
import random

import pytest

from algokit.hashing import (
    contains_duplicate,
    decode,
    encode,
    group_anagrams,
    is_anagram,
    is_valid_sudoku,
    longest_consecutive,
    product_except_self,
    top_k_frequent,
    two_sum,
)

SAMPLE_BOARD = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
]


@pytest.mark.parametrize(
    "nums, target",
    [([3, 3], 6), ([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([-5, 10, 1, 20], 15)],
)
def test_two_sum_finds_valid_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_pair_is_empty():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 4]) is False
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([]) is False


def test_is_anagram():
    assert is_anagram("rats", "sart") is True
    assert is_anagram("rat", "car") is False
    assert is_anagram("ab", "abb") is False
    assert is_anagram("", "") is True


def test_group_anagrams_example():
    groups = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    normalised = sorted(sorted(group) for group in groups)
    assert normalised == [["ate", "eat", "tea"], ["bat"], ["nat", "tan"]]


def test_group_anagrams_invariants():
    words = ["listen", "silent", "enlist", "google", "gogole", "cat", "act", "dog"]
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    keys = [sorted(group[0]) for group in groups]
    for group, key in zip(groups, keys):
        assert all(sorted(word) == key for word in group)
    assert len({"".join(k) for k in keys}) == len(groups)


def test_top_k_frequent_example():
    assert sorted(top_k_frequent([1, 1, 1, 2, 2, 3], 2)) == [1, 2]


def test_top_k_frequent_all_distinct_values():
    nums = [1, 2]
    assert sorted(top_k_frequent(nums, 2)) == nums


def test_top_k_frequent_most_common_first():
    nums = [7] * 5 + [8] * 3 + [9]
    assert top_k_frequent(nums, 1) == [7]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [2, -3, 5, 7], [-1, -1, 2]])
def test_product_except_self_without_zero(nums):
    result = product_except_self(nums)
    total = math.prod(nums)
    assert len(result) == len(nums)
    assert all(value * num == total for value, num in zip(result, nums))


def test_product_except_self_with_one_zero():
    nums = [-1, 1, 0, -3, 3]
    result = product_except_self(nums)
    assert result[:2] == [0, 0]
    assert result[3:] == [0, 0]
    assert result[2] == math.prod(nums[:2] + nums[3:])


def test_valid_sudoku():
    assert is_valid_sudoku(SAMPLE_BOARD) is True


def test_sudoku_duplicate_in_box():
    board = [row[:] for row in SAMPLE_BOARD]
    board[0][0] = "8"
    assert is_valid_sudoku(board) is False


def test_sudoku_duplicate_in_row():
    board = [row[:] for row in SAMPLE_BOARD]
    board[0][8] = "5"
    assert is_valid_sudoku(board) is False


def test_sudoku_accepts_rows_as_strings():
    board = ["".join(row) for row in SAMPLE_BOARD]
    assert is_valid_sudoku(board) is True


def test_sudoku_wrong_shape():
    with pytest.raises(ValueError):
        is_valid_sudoku(SAMPLE_BOARD[:8])


def test_encode_format():
    assert encode(["neet"]) == "4#neet"


@pytest.mark.parametrize(
    "strs",
    [
        ["neet", "code", "love", "you"],
        [],
        [""],
        ["#", "12#ab", "", "x" * 15],
        ["привет", "日本"],
    ],
)
def test_encode_decode_round_trip(strs):
    assert decode(encode(strs)) == strs


def test_decode_missing_separator():
    with pytest.raises(ValueError):
        decode("4neet")


def test_decode_length_past_end():
    with pytest.raises(ValueError):
        decode("9#abc")


def test_longest_consecutive_shuffled_run():
    run = list(range(10, 20))
    nums = run + [100, 200]
    random.Random(1).shuffle(nums)
    assert longest_consecutive(nums) == len(run)


def test_longest_consecutive_with_duplicates_and_empty():
    assert longest_consecutive(list(range(5)) * 2) == len(range(5))
    assert longest_consecutive([]) == 0