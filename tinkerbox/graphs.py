"""Shortest paths, breadth-first search and a queue keyed by name."""

from __future__ import annotations

import argparse
import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass

_COST_CEILING = 100


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    source: Hashable
    target: Hashable
    weight: float


DEFAULT_EDGES = (
    Edge(1, 2, 5),
    Edge(1, 3, 3),
    Edge(3, 4, 1),
    Edge(4, 6, 2),
    Edge(2, 4, 3),
    Edge(2, 6, 2),
)

DEFAULT_GRAPH = {
    "start": [("a", 5), ("b", 2)],
    "a": [("fin", 2)],
    "b": [("a", 1), ("fin", 4)],
    "fin": [],
}

DEFAULT_COSTS = {"a": 6, "b": 2, "fin": math.inf}

DEFAULT_PEOPLE = {
    "you": ["Alice", "Tom"],
    "Alice": ["Magie"],
    "Tom": ["Daniel", "Clara"],
    "Clara": ["Alice", "Ken"],
    "Magie": ["you"],
    "Daniel": [],
    "Ken": [],
}


def bellman_ford(edges: Iterable[Edge], start: Hashable) -> dict[Hashable, float]:
    """Return the distance from ``start`` to every node named by ``edges``.

    Unreachable nodes get ``math.inf``.
    """
    edges = list(edges)
    distance: dict[Hashable, float] = {start: 0}
    for edge in edges:
        distance.setdefault(edge.source, math.inf)
        distance.setdefault(edge.target, math.inf)
    for _ in range(len(edges)):
        changed = False
        for edge in edges:
            candidate = distance[edge.source] + edge.weight
            if candidate < distance[edge.target]:
                distance[edge.target] = candidate
                changed = True
        if not changed:
            break
    return distance


def find_lowest_cost(costs: Mapping[str, float], processed) -> str | None:
    """Return the cheapest node not yet processed, or None.

    Nodes are visited in sorted order; infinite costs and costs of 100 or
    more are never picked.
    """
    best = None
    lowest = _COST_CEILING
    for node in sorted(costs):
        cost = costs[node]
        if node in processed or math.isinf(cost):
            continue
        if cost < lowest:
            best, lowest = node, cost
    return best


def dijkstra(
    graph: Mapping[str, Sequence[tuple[str, float]]], costs: Mapping[str, float]
) -> dict[str, float]:
    """Relax ``costs`` over ``graph`` and return the final cost table."""
    costs = dict(costs)
    processed: set[str] = set()
    node = find_lowest_cost(costs, processed)
    while node is not None:
        cost = costs[node]
        for neighbour, weight in graph.get(node, ()):
            new_cost = cost + weight
            if costs.get(neighbour, math.inf) > new_cost:
                costs[neighbour] = new_cost
        processed.add(node)
        node = find_lowest_cost(costs, processed)
    return costs


def breadth_first_search(
    people: Mapping[str, Sequence[str]], start: str, target: str
) -> list[str] | None:
    """Search outward from ``start``'s contacts for ``target``.

    Returns the names checked, in order, ending with ``target``; None if
    ``target`` is never reached. A name missing from ``people`` raises
    KeyError.
    """
    queue = deque(people[start])
    checked: list[str] = []
    seen: set[str] = set()
    while queue:
        person = queue.popleft()
        if person in seen:
            continue
        checked.append(person)
        if person == target:
            return checked
        queue.extend(people[person])
        seen.add(person)
    return None


class KeyedQueue:
    """Lists of names kept under keys and handed out in key order."""

    def __init__(self) -> None:
        self._entries: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def enqueue(self, key: str, value: Iterable[str]) -> None:
        """Store ``value`` under ``key``, replacing what was there."""
        self._entries[key] = list(value)

    def dequeue(self) -> tuple[str, list[str]]:
        """Remove and return the entry with the smallest key."""
        if not self._entries:
            raise IndexError("dequeue from an empty queue")
        key = min(self._entries)
        return key, self._entries.pop(key)

    def items(self) -> list[tuple[str, list[str]]]:
        """Return all entries in key order."""
        return [(key, list(self._entries[key])) for key in sorted(self._entries)]


def _show_bellman_ford() -> None:
    start = 1
    distance = bellman_ford(DEFAULT_EDGES, start)
    last = DEFAULT_EDGES[-1].target
    print(f"shortest path {start} -> {last}: {distance[last]}")
    for edge in DEFAULT_EDGES:
        print(f"{edge.source} -> {edge.target} [{distance[edge.target]}]")


def _show_dijkstra() -> None:
    costs = dijkstra(DEFAULT_GRAPH, DEFAULT_COSTS)
    for node in sorted(costs):
        print(f"node: {node}, cost: {costs[node]:.0f}")
    print(f"ANSWER: {costs['fin']:.0f}")


def _show_search() -> None:
    seller = "Ken"
    checked = breadth_first_search(DEFAULT_PEOPLE, "you", seller)
    for name in checked or _all_checked(DEFAULT_PEOPLE, "you"):
        print(f"check for {name}...", end="")
    if checked is not None:
        print(f"{seller} is a seller")
    else:
        print()


def _all_checked(people: Mapping[str, Sequence[str]], start: str) -> list[str]:
    seen: list[str] = []
    queue = deque(people[start])
    while queue:
        person = queue.popleft()
        if person not in seen:
            seen.append(person)
            queue.extend(people[person])
    return seen


def _show_queue() -> None:
    queue = KeyedQueue()
    queue.enqueue("you", ["Tom", "Magie", "Marie"])
    queue.enqueue("Tom", ["Clarie", "Daniel"])
    for key, names in queue.items():
        for name in names:
            print(f"{key} : {name}")


_DEMOS = {
    "bellman-ford": _show_bellman_ford,
    "dijkstra": _show_dijkstra,
    "bfs": _show_search,
    "queue": _show_queue,
}


def main(argv=None) -> int:
    """Run one of the graph demonstrations, or all of them."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-graphs", description="Graph algorithm demonstrations."
    )
    parser.add_argument("demo", nargs="?", choices=[*_DEMOS, "all"], default="all")
    args = parser.parse_args(argv)
    demos = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in demos:
        demo()
    return 0