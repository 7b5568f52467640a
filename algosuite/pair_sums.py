"""Counting cross pairs with a given sum while one side changes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


class FindSumPairs:
    """Counts pairs (a from the first list, b from the second) with a + b equal to a total."""

    def __init__(self, nums1: Iterable[int], nums2: Iterable[int]) -> None:
        self._nums1 = list(nums1)
        self._nums2 = list(nums2)
        self._freq: Counter[int] = Counter(self._nums2)

    def add(self, index: int, val: int) -> None:
        """Add ``val`` to the element at ``index`` of the second list."""
        old = self._nums2[index]
        self._freq[old] -= 1
        self._nums2[index] = old + val
        self._freq[old + val] += 1

    def count(self, tot: int) -> int:
        """Number of pairs whose values sum to ``tot``."""
        return sum(self._freq[tot - value] for value in self._nums1)