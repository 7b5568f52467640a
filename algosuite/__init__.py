"""Classic algorithm solutions for arrays, strings, grids, graphs, backtracking and dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "disjoint_set",
    "dynamic",
    "graphs",
    "grids",
    "linked_list",
    "pair_sums",
    "strings",
]