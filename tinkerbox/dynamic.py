"""Dynamic-programming and greedy exercises."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_DAY_END = 24


@dataclass(frozen=True)
class Item:
    """Something that can go into a knapsack."""

    weight: int
    value: int


@dataclass(frozen=True)
class Lesson:
    """A named lesson occupying ``start`` to ``end``."""

    name: str
    start: float
    end: float


DEFAULT_SQUARE = ((4, 3, 7), (9, 2, 5), (1, 2, 6))

DEFAULT_SCHEDULE = (
    Lesson("art", 9, 10),
    Lesson("eng", 4.30, 10.30),
    Lesson("math", 10, 11),
    Lesson("cs", 10.30, 11.30),
    Lesson("music", 11, 12),
)


def edit_distance_grid(word1: str, word2: str) -> list[list[int]]:
    """Return the full edit-distance table between two words."""
    grid = [[0] * (len(word2) + 1) for _ in range(len(word1) + 1)]
    grid[0] = list(range(len(word2) + 1))
    for i, row in enumerate(grid):
        row[0] = i
    for i, a in enumerate(word1, 1):
        for j, b in enumerate(word2, 1):
            if a == b:
                grid[i][j] = grid[i - 1][j - 1]
            else:
                grid[i][j] = min(grid[i][j - 1], grid[i - 1][j], grid[i - 1][j - 1]) + 1
    return grid


def edit_distance(word1: str, word2: str) -> int:
    """Return the number of inserts, removals and changes between words."""
    if not word2:
        return len(word1)
    if not word1:
        return len(word2)
    return edit_distance_grid(word1, word2)[-1][-1]


def knapsack(capacity: int, items: Iterable[Item]) -> int:
    """Return the best total value that fits within ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for item in items:
        if item.weight < 0:
            raise ValueError("item weight must not be negative")
        for room in range(capacity, item.weight - 1, -1):
            best[room] = max(best[room], best[room - item.weight] + item.value)
    return best[capacity]


def min_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Cheapest sum from the top-left to the bottom-right moving right or down."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    previous = list(itertools.accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for above, cell in zip(previous, row):
            current.append(cell + (min(above, current[-1]) if current else above))
        previous = current
    return previous[-1]


def common_characters(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[-1]))
        previous = current
    return previous[-1]


def schedule_lessons(lessons: Iterable[Lesson]) -> list[Lesson]:
    """Greedily pick non-overlapping lessons, starting with the earliest end."""
    lessons = list(lessons)
    candidates = [lesson for lesson in lessons if lesson.end < _DAY_END]
    if not candidates:
        raise ValueError("no lesson ends within the day")
    current = min(candidates, key=lambda lesson: lesson.end)
    chosen = [current]
    names = {current.name}
    for lesson in lessons:
        if lesson.name in names:
            continue
        if lesson.start >= current.end:
            current = lesson
            chosen.append(lesson)
            names.add(lesson.name)
    return chosen


def _read_knapsack(stream) -> tuple[int, list[Item]]:
    tokens = [int(token) for token in stream.read().split()]
    if len(tokens) < 2:
        raise ValueError("expected capacity and item count")
    capacity, count, *rest = tokens
    if len(rest) < 2 * count:
        raise ValueError("not enough weight/value pairs")
    items = [Item(weight, value) for weight, value in zip(rest[0:2 * count:2], rest[1:2 * count:2])]
    return capacity, items


def main(argv=None) -> int:
    """Run one of the dynamic-programming demos (min cost path by default)."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-dynamic", description="Dynamic programming demos."
    )
    sub = parser.add_subparsers(dest="command")
    cmd = sub.add_parser("edit")
    cmd.add_argument("word1")
    cmd.add_argument("word2")
    sub.add_parser("knapsack", help="read 'capacity count' then pairs from stdin")
    sub.add_parser("path")
    cmd = sub.add_parser("common")
    cmd.add_argument("first")
    cmd.add_argument("second")
    sub.add_parser("schedule")
    args = parser.parse_args(argv)
    command = args.command or "path"

    if command == "edit":
        for row in edit_distance_grid(args.word1, args.word2):
            print(" ".join(str(cell) for cell in row))
        distance = edit_distance(args.word1, args.word2)
        print(f"DISTANCE from {args.word1} -> {args.word2}: {distance}")
    elif command == "knapsack":
        capacity, items = _read_knapsack(sys.stdin)
        print(knapsack(capacity, items))
    elif command == "common":
        print(f"{common_characters(args.first, args.second)} chs are same")
    elif command == "schedule":
        for lesson in schedule_lessons(DEFAULT_SCHEDULE):
            print(f"{lesson.name}: {lesson.start:.2f}:{lesson.end:.2f}")
    else:
        print(min_cost_path(DEFAULT_SQUARE))
    return 0