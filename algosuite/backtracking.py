"""Exhaustive search puzzles: combinations, subsets, parentheses, queens and paths."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations, compress, product

PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Every word the digits can spell on a phone keypad, in keypad order."""
    if not digits:
        return []
    letters = (PHONE_LETTERS.get(digit, "") for digit in digits)
    return ["".join(word) for word in product(*letters)]


def generate_parentheses(n: int) -> list[str]:
    """All well-formed strings of ``n`` pairs of parentheses, opening first."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened > n or closed > opened:
            return
        if len(prefix) == 2 * n:
            yield prefix
            return
        yield from build(prefix + "(", opened + 1, closed)
        yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of candidates, each usable any number of times, summing to ``target``."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    if not pool:
        return []

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining < 0:
            return
        if remaining == 0:
            yield chosen
            return
        for index, value in enumerate(pool[start:], start):
            yield from search(index, remaining - value, [*chosen, value])

    return list(search(0, target, []))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations using each candidate at most once, summing to ``target``."""
    pool = sorted(candidates)

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        previous: int | None = None
        for index, value in enumerate(pool[start:], start):
            if value == previous:
                continue
            if value > remaining:
                break
            previous = value
            yield from search(index + 1, remaining - value, [*chosen, value])

    return list(search(0, target, []))


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, drawn as rows of 'Q' and '.'."""

    def safe(queens: tuple[int, ...], row: int) -> bool:
        col = len(queens)
        return all(
            row != other and abs(row - other) != col - other_col
            for other_col, other in enumerate(queens)
        )

    def search(queens: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        if len(queens) == n:
            yield queens
            return
        for row in range(n):
            if safe(queens, row):
                yield from search((*queens, row))

    def draw(queens: tuple[int, ...]) -> list[str]:
        return [
            "".join("Q" if queen_row == row else "." for queen_row in queens)
            for row in range(n)
        ]

    return [draw(queens) for queens in search(())]


def combine(n: int, k: int) -> list[list[int]]:
    """All ``k``-element combinations of 1..n in lexicographic order."""
    if k < 0:
        return []
    return [list(chosen) for chosen in combinations(range(1, n + 1), k)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, each choice leaving an element out before taking it."""
    values = list(nums)
    return [
        list(compress(values, flags))
        for flags in product((False, True), repeat=len(values))
    ]


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """All paths from node 0 to the last node of a directed acyclic graph."""
    if not graph:
        raise ValueError("graph must have at least one node")
    target = len(graph) - 1

    def walk(path: list[int]) -> Iterator[list[int]]:
        node = path[-1]
        if node == target:
            yield path
            return
        for neighbour in graph[node]:
            yield from walk([*path, neighbour])

    return list(walk([0]))