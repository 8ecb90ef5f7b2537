import pytest

from algokit.basics import (
    defang_ip_addr,
    kids_with_candies,
    merge_alternately,
    num_jewels_in_stones,
    running_sum,
    score_of_string,
    shuffle,
    subtract_product_and_sum,
    unique_morse_representations,
)


def test_kids_with_candies_large_extra_makes_everyone_top():
    candies = [12, 1, 12]
    assert all(kids_with_candies(candies, 1000))
    assert len(kids_with_candies(candies, 1000)) == len(candies)


def test_kids_with_candies_no_extra_only_maximum():
    candies = [3, 9, 4, 1]
    result = kids_with_candies(candies, 0)
    assert result.count(True) == 1
    assert result.index(True) == candies.index(max(candies))


def test_kids_with_candies_empty():
    assert kids_with_candies([], 5) == []


@pytest.mark.parametrize("nums, n", [([1, 1, 2, 2], 2), ([2, 5, 1, 3, 4, 7], 3), ([], 0)])
def test_shuffle_interleaves(nums, n):
    result = shuffle(nums, n)
    assert len(result) == 2 * n
    assert result[0::2] == nums[:n]
    assert result[1::2] == nums[n : 2 * n]


def test_shuffle_too_short():
    with pytest.raises(ValueError):
        shuffle([1, 2, 3], 2)


def test_running_sum_invariants():
    nums = [1, 2, 3, 4, -7, 10]
    result = running_sum(nums)
    assert len(result) == len(nums)
    assert result[-1] == sum(nums)
    assert [result[0]] + [b - a for a, b in zip(result, result[1:])] == nums


def test_running_sum_empty():
    assert running_sum([]) == []


def test_num_jewels_is_case_sensitive():
    assert num_jewels_in_stones("z", "ZZ") == 0


def test_num_jewels_all_stones_are_jewels():
    stones = "aAAaA"
    assert num_jewels_in_stones("aA", stones) == len(stones)


def test_num_jewels_counts_only_jewels():
    assert num_jewels_in_stones("a", "bab") == "bab".count("a")


def test_unique_morse_example():
    assert unique_morse_representations(["gin", "zen", "gig", "msg"]) == 2


def test_unique_morse_identical_words():
    assert unique_morse_representations(["abc", "abc", "abc"]) == 1
    assert unique_morse_representations([]) == 0


def test_unique_morse_rejects_non_letters():
    with pytest.raises(ValueError):
        unique_morse_representations(["Abc"])


def test_defang_ip_addr():
    assert defang_ip_addr("255.100.50.0") == "255[.]100[.]50[.]0"


def test_defang_without_dots_is_unchanged():
    assert defang_ip_addr("localhost") == "localhost"


def test_subtract_product_and_sum_example():
    assert subtract_product_and_sum(4421) == 21


@pytest.mark.parametrize("digit", range(1, 10))
def test_subtract_product_and_sum_single_digit(digit):
    assert subtract_product_and_sum(digit) == 0


def test_subtract_product_and_sum_digit_order_irrelevant():
    assert subtract_product_and_sum(1234) == subtract_product_and_sum(4321)


def test_score_of_string_properties():
    assert score_of_string("aaaa") == 0
    assert score_of_string("az") == ord("z") - ord("a")
    assert score_of_string("zaz") == score_of_string("zaz"[::-1])
    assert score_of_string("") == 0


def test_merge_alternately_equal_length():
    result = merge_alternately("ace", "bdf")
    assert result[0::2] == "ace"
    assert result[1::2] == "bdf"


def test_merge_alternately_leftover_appended():
    word1, word2 = "ab", "pqrs"
    result = merge_alternately(word1, word2)
    assert len(result) == len(word1) + len(word2)
    assert result.endswith(word2[len(word1):])
    assert result[: 2 * len(word1)][0::2] == word1


def test_merge_alternately_with_empty():
    assert merge_alternately("hello", "") == "hello"
    assert merge_alternately("", "world") == "world"