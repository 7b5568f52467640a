"""Searches over two-dimensional grids: flood fills, BFS and Dijkstra."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any

Cell = tuple[int, int]

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_EIGHT = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))


def _neighbours(
    r: int, c: int, rows: int, cols: int, steps: Sequence[Cell] = _ORTHOGONAL
) -> Iterator[Cell]:
    for dr, dc in steps:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _regions(grid: Sequence[Sequence[Any]], is_member: Callable[[Any], bool]) -> Iterator[list[Cell]]:
    """Orthogonally connected groups of member cells, in row-major order of discovery."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[Cell] = set()
    for r, line in enumerate(grid):
        for c, cell in enumerate(line):
            if (r, c) in seen or not is_member(cell):
                continue
            seen.add((r, c))
            region = [(r, c)]
            queue = deque(region)
            while queue:
                cr, cc = queue.popleft()
                for nr, nc in _neighbours(cr, cc, rows, cols):
                    if (nr, nc) not in seen and is_member(grid[nr][nc]):
                        seen.add((nr, nc))
                        region.append((nr, nc))
                        queue.append((nr, nc))
            yield region


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-way path of zeros from corner to corner, or -1."""
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if grid[0][0] == 1 or grid[n - 1][n - 1] == 1:
        return -1
    if n == 1:
        return 1
    goal = (n - 1, n - 1)
    seen = {(0, 0)}
    queue: deque[tuple[Cell, int]] = deque([((0, 0), 1)])
    while queue:
        (r, c), length = queue.popleft()
        for nr, nc in _neighbours(r, c, n, n, _ALL_EIGHT):
            if (nr, nc) in seen or grid[nr][nc] != 0:
                continue
            if (nr, nc) == goal:
                return length + 1
            seen.add((nr, nc))
            queue.append(((nr, nc), length + 1))
    return -1


def solve_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """A copy of the board with every 'O' region not touching the edge turned to 'X'."""
    result = [list(row) for row in board]
    rows = len(result)
    cols = len(result[0]) if rows else 0
    for region in list(_regions(result, lambda cell: cell == "O")):
        if any(r in (0, rows - 1) or c in (0, cols - 1) for r, c in region):
            continue
        for r, c in region:
            result[r][c] = "X"
    return result


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of orthogonally connected groups of '1' cells."""
    return sum(1 for _ in _regions(grid, lambda cell: cell == "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest orthogonally connected group of 1 cells."""
    return max((len(region) for region in _regions(grid, lambda cell: cell == 1)), default=0)


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Smallest possible largest height step on a path from top-left to bottom-right."""
    if not heights or not heights[0]:
        raise ValueError("heights must not be empty")
    rows, cols = len(heights), len(heights[0])
    effort: dict[Cell, int] = {(0, 0): 0}
    heap: list[tuple[int, int, int]] = [(0, 0, 0)]
    while heap:
        current, r, c = heapq.heappop(heap)
        if current > effort[(r, c)]:
            continue
        for nr, nc in _neighbours(r, c, rows, cols):
            step = max(current, abs(heights[r][c] - heights[nr][nc]))
            if step < effort.get((nr, nc), float("inf")):
                effort[(nr, nc)] = step
                heapq.heappush(heap, (step, nr, nc))
    return effort[(rows - 1, cols - 1)]