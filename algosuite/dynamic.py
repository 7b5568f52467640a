"""Dynamic programming over stones, subsets and sign assignments."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def can_cross(stones: Sequence[int]) -> bool:
    """Whether the frog reaches the last stone, each jump differing from the last by at most one."""
    if not stones:
        raise ValueError("stones must not be empty")
    arrivals: dict[int, set[int]] = {position: set() for position in stones}
    arrivals[stones[0]].add(0)
    for position in stones:
        for last in arrivals[position]:
            for step in (last - 1, last, last + 1):
                if step > 0 and position + step in arrivals:
                    arrivals[position + step].add(step)
    return bool(arrivals[stones[-1]])


def can_partition(nums: Sequence[int]) -> bool:
    """Whether the values split into two groups of equal sum."""
    if not nums:
        return False
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Number of ways to sign each value so the signed sum equals ``target``."""
    ways: Counter[int] = Counter({0: 1})
    for value in nums:
        step: Counter[int] = Counter()
        for total, count in ways.items():
            step[total + value] += count
            step[total - value] += count
        ways = step
    return ways[target]