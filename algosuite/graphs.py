"""Graph searches: word ladders, shortest paths, topological order and two-colouring."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from string import ascii_lowercase

_GENES = "ACGT"


def _ladder(begin: str, end: str, words: Iterable[str], alphabet: str, first_step: int) -> int | None:
    """Steps of the shortest one-letter-change chain from ``begin`` to ``end``, or None."""
    remaining = set(words)
    remaining.discard(begin)
    queue: deque[tuple[str, int]] = deque([(begin, first_step)])
    while queue:
        word, step = queue.popleft()
        if word == end:
            return step
        for index, original in enumerate(word):
            for letter in alphabet:
                if letter == original:
                    continue
                candidate = word[:index] + letter + word[index + 1 :]
                if candidate in remaining:
                    remaining.discard(candidate)
                    queue.append((candidate, step + 1))
    return None


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Words in the shortest transformation sequence, counting both ends; 0 if none."""
    found = _ladder(begin_word, end_word, word_list, ascii_lowercase, 1)
    return 0 if found is None else found


def min_mutation(start: str, end: str, bank: Iterable[str]) -> int:
    """Fewest single-gene mutations from ``start`` to ``end`` through the bank, or -1."""
    found = _ladder(start, end, bank, _GENES, 0)
    return -1 if found is None else found


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start: int,
    end: int,
) -> float:
    """Highest success probability of a path from ``start`` to ``end``; 0.0 if unreachable."""
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for (a, b), prob in zip(edges, succ_prob):
        adjacency[a].append((b, prob))
        adjacency[b].append((a, prob))
    best = [0.0] * n
    best[start] = 1.0
    heap: list[tuple[float, int]] = [(-1.0, start)]
    while heap:
        negative, node = heapq.heappop(heap)
        if -negative < best[node]:
            continue
        for neighbour, prob in adjacency[node]:
            candidate = best[node] * prob
            if candidate > best[neighbour]:
                best[neighbour] = candidate
                heapq.heappush(heap, (-candidate, neighbour))
    return best[end]


def _topological(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Kahn's order of the courses that can be taken; shorter than n when there is a cycle."""
    dependents: list[list[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for course, required in prerequisites:
        dependents[required].append(course)
        in_degree[course] += 1
    queue = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for course in dependents[node]:
            in_degree[course] -= 1
            if in_degree[course] == 0:
                queue.append(course)
    return order


def can_finish(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all ``n`` courses can be taken given [course, prerequisite] pairs."""
    return len(_topological(n, prerequisites)) == n


def find_order(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take all ``n`` courses, or an empty list if impossible."""
    order = _topological(n, prerequisites)
    return order if len(order) == n else []


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from node ``k`` to reach all nodes 1..n, or -1."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for source, target, delay in times:
        adjacency[source].append((target, delay))
    arrival: dict[int, int] = {k: 0}
    heap: list[tuple[int, int]] = [(0, k)]
    while heap:
        current, node = heapq.heappop(heap)
        if current > arrival[node]:
            continue
        for target, delay in adjacency[node]:
            candidate = current + delay
            if target not in arrival or candidate < arrival[target]:
                arrival[target] = candidate
                heapq.heappush(heap, (candidate, target))
    if any(node not in arrival for node in range(1, n + 1)):
        return -1
    return max(arrival[node] for node in range(1, n + 1))


def _two_colourable(adjacency: Sequence[Sequence[int]], nodes: Iterable[int]) -> bool:
    colour: dict[int, bool] = {}
    for origin in nodes:
        if origin in colour:
            continue
        colour[origin] = True
        queue = deque([origin])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in colour:
                    colour[neighbour] = not colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Whether the undirected graph, given as adjacency lists, splits into two sides."""
    return _two_colourable(graph, range(len(graph)))


def possible_bipartition(n: int, dislikes: Iterable[Sequence[int]]) -> bool:
    """Whether people 1..n split into two groups with no disliking pair in one group."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in dislikes:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return _two_colourable(adjacency, range(1, n + 1))


def find_cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    routes: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for source, target, price in flights:
        routes[source].append((target, price))
    cheapest: dict[int, int] = {src: 0}
    queue: deque[tuple[int, int, int]] = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for target, price in routes[node]:
            candidate = cost + price
            if target not in cheapest or candidate < cheapest[target]:
                cheapest[target] = candidate
                queue.append((stops + 1, target, candidate))
    return cheapest.get(dst, -1)


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether every room can be entered starting from room 0 and collecting keys."""
    visited = {0}
    stack = [0]
    while stack:
        room = stack.pop()
        for key in rooms[room]:
            if key not in visited:
                visited.add(key)
                stack.append(key)
    return len(visited) == len(rooms)