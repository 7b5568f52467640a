import random

import pytest

from algosuite.arrays import (
    MOD,
    can_jump,
    find_duplicates,
    find_lhs,
    h_index,
    h_index_sorted,
    longest_mountain,
    max_area,
    max_profit,
    maximum_gap,
    min_moves,
    num_subseq,
    rob,
    trap,
)


def _random_list(seed, size, low=0, high=50):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def test_max_area_worked_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_area_two_lines_uses_shorter():
    assert max_area([3, 7]) == 3


@pytest.mark.parametrize("heights", [[], [5]])
def test_max_area_needs_two_lines(heights):
    assert max_area(heights) == 0


@pytest.mark.parametrize("seed", range(5))
def test_max_area_bounds(seed):
    heights = _random_list(seed, 40)
    result = max_area(heights)
    assert result <= (len(heights) - 1) * max(heights)
    assert result >= (len(heights) - 1) * min(heights[0], heights[-1])


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_rising_prices():
    prices = list(range(3, 20))
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_num_subseq_all_subsets_when_target_large():
    nums = [3, 1, 4, 1, 5]
    assert num_subseq(nums, 1000) == 2 ** len(nums) - 1


def test_num_subseq_none_when_target_small():
    assert num_subseq([5, 6, 7], 9) == 0


def test_num_subseq_reduced_modulo():
    nums = [1] * 100
    result = num_subseq(nums, 2)
    assert result == (2**100 - 1) % MOD
    assert result < MOD


def test_num_subseq_order_independent_and_input_untouched():
    nums = _random_list(3, 30, 1, 20)
    original = list(nums)
    shuffled = list(nums)
    random.Random(9).shuffle(shuffled)
    assert num_subseq(nums, 21) == num_subseq(shuffled, 21)
    assert nums == original


def test_maximum_gap_even_spacing():
    nums = list(range(0, 50, 7))
    random.Random(1).shuffle(nums)
    assert maximum_gap(nums) == 7


@pytest.mark.parametrize("nums", [[], [4]])
def test_maximum_gap_short(nums):
    assert maximum_gap(nums) == 0


def test_maximum_gap_pair():
    assert maximum_gap([10, 3]) == 10 - 3


@pytest.mark.parametrize("nums", [[5], [2, 9]])
def test_rob_short_lists_take_max(nums):
    assert rob(nums) == max(nums)


def test_rob_empty_raises():
    with pytest.raises(ValueError):
        rob([])


@pytest.mark.parametrize("seed", range(5))
def test_rob_bounds_and_symmetry(seed):
    nums = _random_list(seed, 15)
    result = rob(nums)
    assert max(nums) <= result <= sum(nums)
    assert result == rob(list(reversed(nums)))


def test_h_index_all_equal():
    assert h_index([6] * 6) == 6
    assert h_index_sorted([6] * 6) == 6


def test_h_index_empty_and_zero():
    assert h_index([]) == 0
    assert h_index_sorted([]) == 0
    assert h_index([0, 0, 0]) == 0


@pytest.mark.parametrize("seed", range(6))
def test_h_index_definition_and_agreement(seed):
    citations = _random_list(seed, 20, 0, 30)
    h = h_index(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1
    assert h_index_sorted(sorted(citations)) == h


def test_trap_single_valley():
    assert trap([2, 0, 2]) == 2


@pytest.mark.parametrize("heights", [[1, 2, 3, 4], [4, 3, 2, 1], [7]])
def test_trap_monotonic_holds_nothing(heights):
    assert trap(heights) == 0


@pytest.mark.parametrize("seed", range(5))
def test_trap_mirror_invariant(seed):
    heights = _random_list(seed, 25, 0, 10)
    result = trap(heights)
    assert result == trap(list(reversed(heights)))
    assert 0 <= result <= len(heights) * max(heights)


def test_trap_empty_raises():
    with pytest.raises(ValueError):
        trap([])


def test_find_duplicates():
    assert sorted(find_duplicates([4, 3, 2, 7, 8, 2, 3, 1])) == [2, 3]


def test_find_duplicates_none():
    assert find_duplicates([1, 2, 3]) == []


def test_min_moves_equal():
    assert min_moves([4, 4, 4, 4]) == 0


def test_min_moves_pair():
    assert min_moves([0, 13]) == 13


def test_min_moves_shift_invariant():
    nums = _random_list(2, 10)
    assert min_moves(nums) == min_moves([n + 100 for n in nums])


def test_min_moves_empty():
    assert min_moves([]) == 0


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([2, 3, 1, 1, 4], True),
        ([3, 2, 1, 0, 4], False),
        ([0], True),
        ([0, 1], False),
        ([], False),
    ],
)
def test_can_jump(nums, expected):
    assert can_jump(nums) is expected


def test_find_lhs_worked_example():
    assert find_lhs([1, 3, 2, 2, 5, 2, 3, 7]) == 5


def test_find_lhs_no_neighbours():
    assert find_lhs([1, 1, 1, 1]) == 0


def test_find_lhs_whole_list():
    nums = [1, 2] * 3
    assert find_lhs(nums) == len(nums)


def test_longest_mountain_whole():
    arr = [1, 2, 3, 2, 1]
    assert longest_mountain(arr) == len(arr)


def test_longest_mountain_embedded():
    mountain = [1, 2, 3, 2, 1]
    assert longest_mountain([5, 5] + mountain + [9, 9]) == len(mountain)


@pytest.mark.parametrize("arr", [[2, 2, 2], [1, 2], [], [1, 2, 3, 4]])
def test_longest_mountain_absent(arr):
    assert longest_mountain(arr) == 0