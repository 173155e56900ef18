"""Small recursive algorithms: factorials, gcd, subsets and permutations."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce

DEFAULT_FRUITS = ("tomato", "avocado", "banana")
DEFAULT_VEGETABLES = ("tomato", "beans", "carrots")


def factorial(x: int) -> int:
    """Return ``x!`` for a positive integer."""
    if x < 1:
        raise ValueError("factorial needs a positive integer")
    return math.prod(range(1, x + 1))


def find_max(values: Iterable):
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("find_max of an empty sequence")
    return reduce(lambda best, value: value if value > best else best, items)


def recursive_sum(values: Iterable):
    """Return the sum of the values."""
    return sum(values)


def gcd(x: int, y: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if x < 0 or y < 0:
        raise ValueError("gcd needs non-negative integers")
    while x > 0:
        x, y = y % x, x
    return y


def gcd_steps(a: int, b: int) -> tuple[int, list[tuple[int, int, int]]]:
    """Return the gcd and each ``(dividend, divisor, remainder)`` step."""
    if a < 0 or b < 0:
        raise ValueError("gcd needs non-negative integers")
    larger, smaller = max(a, b), min(a, b)
    steps = []
    while smaller > 0:
        remainder = larger % smaller
        steps.append((larger, smaller, remainder))
        larger, smaller = smaller, remainder
    return larger, steps


def square_plot(x: int, y: int) -> tuple[int, int]:
    """Shrink an ``x`` by ``y`` plot until one side divides the other."""
    if x <= 0 or y <= 0:
        raise ValueError("plot sides must be positive")
    while True:
        if y > x:
            x, y = y, x
        if x % y == 0:
            return x // 2, y
        x %= y


def _subsets(items: Sequence, chosen: list, start: int) -> Iterator[list]:
    yield list(chosen)
    for index in range(start, len(items)):
        chosen.append(items[index])
        yield from _subsets(items, chosen, index + 1)
        chosen.pop()


def subsets(items: Iterable) -> list[list]:
    """Return every subset, each keeping the input order."""
    return list(_subsets(list(items), [], 0))


def _permutations(items: list, index: int) -> Iterator[list]:
    if index >= len(items):
        yield list(items)
        return
    for i in range(index, len(items)):
        items[index], items[i] = items[i], items[index]
        yield from _permutations(items, index + 1)
        items[index], items[i] = items[i], items[index]


def permutations(items: Iterable) -> list[list]:
    """Return every ordering, generated by successive swaps."""
    return list(_permutations(list(items), 0))


def set_operations(first: Iterable, second: Iterable) -> dict[str, list]:
    """Return the sorted intersection, difference and union of two sets."""
    a, b = set(first), set(second)
    return {
        "intersection": sorted(a & b),
        "difference": sorted(a - b),
        "union": sorted(a | b),
    }


def _print_labelled(values: Iterable, label: str) -> None:
    for value in values:
        print(f"{label}: {value}")
    print()


def main(argv=None) -> int:
    """Run one of the recursion demonstrations (gcd by default)."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-recursion", description="Recursive algorithm demos."
    )
    parser.set_defaults(a=1785, b=546)
    sub = parser.add_subparsers(dest="command")
    cmd = sub.add_parser("factorial")
    cmd.add_argument("x", type=int)
    cmd = sub.add_parser("max")
    cmd.add_argument("values", type=int, nargs="+")
    cmd = sub.add_parser("sum")
    cmd.add_argument("values", type=int, nargs="*")
    cmd = sub.add_parser("gcd")
    cmd.add_argument("a", type=int, nargs="?", default=1785)
    cmd.add_argument("b", type=int, nargs="?", default=546)
    cmd = sub.add_parser("square")
    cmd.add_argument("x", type=int)
    cmd.add_argument("y", type=int)
    for name in ("subsets", "permutations"):
        cmd = sub.add_parser(name)
        cmd.add_argument("items", type=int, nargs="*", default=[0, 1, 2])
    sub.add_parser("sets")
    args = parser.parse_args(argv)
    command = args.command or "gcd"

    if command == "factorial":
        print(f"x:{args.x}, {args.x}!:{factorial(args.x)}")
    elif command == "max":
        print(f"MAX: {find_max(args.values)}")
    elif command == "sum":
        print(f"SUM: {recursive_sum(args.values)}")
    elif command == "gcd":
        result, steps = gcd_steps(args.a, args.b)
        for dividend, divisor, remainder in steps:
            print(f"{dividend}/{divisor}={remainder}")
        print(f"GCD OF {args.a} AND {args.b}: {result}")
    elif command == "square":
        width, height = square_plot(args.x, args.y)
        print(f"{width}x{height}")
    elif command == "subsets":
        for subset in subsets(args.items):
            print("{" + "".join(f" {value} " for value in subset) + "}")
    elif command == "permutations":
        for permutation in permutations(args.items):
            print(" ".join(str(value) for value in permutation))
    else:
        _print_labelled(sorted(DEFAULT_FRUITS), "fruits")
        _print_labelled(sorted(DEFAULT_VEGETABLES), "vegetables")
        ops = set_operations(DEFAULT_FRUITS, DEFAULT_VEGETABLES)
        _print_labelled(ops["intersection"], "intersection of fruits")
        _print_labelled(ops["difference"], "difference")
        _print_labelled(ops["union"], "union")
    return 0