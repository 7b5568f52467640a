"""Array puzzles solved with two pointers, greedy scans and counting."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, takewhile

MOD = 10**9 + 7


def max_area(heights: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] <= heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, never negative."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def num_subseq(nums: Sequence[int], target: int) -> int:
    """Count non-empty subsequences whose min plus max is at most ``target``."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    total = 0
    while left <= right:
        if ordered[left] + ordered[right] <= target:
            total = (total + pow(2, right - left, MOD)) % MOD
            left += 1
        else:
            right -= 1
    return total


def maximum_gap(nums: Sequence[int]) -> int:
    """Largest difference between neighbours once the values are sorted."""
    ordered = sorted(nums)
    return max((b - a for a, b in zip(ordered, ordered[1:])), default=0)


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values taken with no two neighbours both taken."""
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) <= 2:
        return max(nums)
    skip, take = nums[-1], max(nums[-1], nums[-2])
    for value in reversed(nums[:-2]):
        skip, take = take, max(value + skip, take)
    return take


def h_index(citations: Sequence[int]) -> int:
    """Largest h such that h papers have at least h citations each."""
    ranked = enumerate(sorted(citations, reverse=True), start=1)
    return sum(1 for _ in takewhile(lambda pair: pair[1] >= pair[0], ranked))


def h_index_sorted(citations: Sequence[int]) -> int:
    """H-index of citations already sorted in ascending order, by binary search."""
    n = len(citations)
    first = bisect_left(range(n), True, key=lambda i: citations[i] >= n - i)
    return n - first


def trap(heights: Sequence[int]) -> int:
    """Units of rain water trapped by the elevation map."""
    if not heights:
        raise ValueError("heights must not be empty")
    peak = max(range(len(heights)), key=heights.__getitem__)

    def _side(bars: Sequence[int]) -> int:
        return sum(top - bar for top, bar in zip(accumulate(bars, max), bars))

    return _side(heights[:peak]) + _side(heights[:peak:-1])


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Values that occur more than once, in order of first appearance."""
    return [value for value, count in Counter(nums).items() if count > 1]


def min_moves(nums: Sequence[int]) -> int:
    """Moves needed to make all values equal, raising all but one by one per move."""
    if not nums:
        return 0
    return sum(nums) - min(nums) * len(nums)


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable when each value is a maximum jump."""
    if len(nums) == 1:
        return True
    last = len(nums) - 1
    reach = 0
    for index, step in enumerate(nums):
        reach = max(reach, index + step)
        if index + step >= last:
            return True
        if step == 0 and index + step == reach:
            return False
    return False


def find_lhs(nums: Sequence[int]) -> int:
    """Length of the longest subsequence whose max and min differ by exactly one."""
    counts = Counter(nums)
    return max(
        (counts[value] + counts[value + 1] for value in counts if value + 1 in counts),
        default=0,
    )


def longest_mountain(arr: Sequence[int]) -> int:
    """Length of the longest strictly rising then strictly falling run."""
    best = 0
    for peak in range(1, len(arr) - 1):
        if not (arr[peak] > arr[peak - 1] and arr[peak] > arr[peak + 1]):
            continue
        left = peak - 1
        while left > 0 and arr[left] > arr[left - 1]:
            left -= 1
        right = peak + 1
        while right < len(arr) - 1 and arr[right] > arr[right + 1]:
            right += 1
        best = max(best, right - left + 1)
    return best