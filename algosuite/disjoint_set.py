"""Union-find with path compression and union by size."""

from __future__ import annotations

from collections.abc import Collection, Sequence

_COLUMN_OFFSET = 10001
_NODE_COUNT = 20002


class DisjointSet:
    """A partition of the integers 0..n-1 into disjoint sets."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside the set")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if they were already one set."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        return True


def remove_stones(stones: Collection[Sequence[int]]) -> int:
    """Most stones removable when each removed stone shares a row or column with another."""
    sets = DisjointSet(_NODE_COUNT)
    used: set[int] = set()
    for row, col in stones:
        col_node = col + _COLUMN_OFFSET
        sets.union(row, col_node)
        used.update((row, col_node))
    components = sum(1 for node in used if sets.find(node) == node)
    return len(stones) - components