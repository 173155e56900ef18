"""Sorting routines and binary search."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, MutableSequence, Sequence

DEFAULT_NUMBERS = (3241, 23, 3, 43, 2, 34, 3, 53, 2, 134)


def merge_sort(values: Iterable) -> list:
    """Return a new, stably sorted list."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def quick_sort(values: Iterable) -> list:
    """Return a new sorted list, pivoting on the first element."""
    items = list(values)
    if len(items) < 2:
        return items
    pivot, *rest = items
    smaller = [value for value in rest if not value > pivot]
    greater = [value for value in rest if value > pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(greater)


def selection_sort(values: Iterable) -> list:
    """Return a new sorted list built by repeatedly taking the smallest."""
    remaining = list(values)
    result = []
    while remaining:
        index = min(range(len(remaining)), key=remaining.__getitem__)
        result.append(remaining.pop(index))
    return result


def selection_sort_in_place(values: MutableSequence) -> None:
    """Sort ``values`` in place by swapping each minimum forward."""
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]


def binary_search(target, nums: Sequence) -> int:
    """Return the position of ``target`` in sorted ``nums``.

    When ``target`` is absent the last probed position is returned.
    """
    if not nums:
        raise ValueError("cannot search an empty sequence")
    low, high = 0, len(nums) - 1
    mid = 0
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] < target:
            low = mid + 1
        elif nums[mid] > target:
            high = mid - 1
        else:
            return mid
    return mid


def binary_search_recursive(target, nums: Sequence, high=None, low=0) -> int:
    """Search the half-open window ``[low, high)`` of ``nums``; -1 if absent."""
    if high is None:
        high = len(nums) - 1
    mid = (high + low) // 2
    if high <= low:
        return -1
    if nums[mid] == target:
        return mid
    if nums[mid] > target:
        return binary_search_recursive(target, nums, mid, low)
    if mid == low:
        # The window can no longer shrink from the left.
        return -1
    return binary_search_recursive(target, nums, high, mid)


_METHODS = {
    "merge": merge_sort,
    "quick": quick_sort,
    "selection": selection_sort,
}


def main(argv=None) -> int:
    """Sort numbers, or look one up with binary search."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-sort", description="Sort numbers or search them."
    )
    parser.add_argument("numbers", type=int, nargs="*")
    parser.add_argument("--method", choices=sorted(_METHODS), default="quick")
    parser.add_argument("--find", type=int, help="search for this number")
    args = parser.parse_args(argv)

    if args.find is not None:
        nums = sorted(args.numbers) if args.numbers else list(range(1, 11))
        position = binary_search_recursive(args.find, nums)
        print(f"the {args.find} element is in {position} position")
        return 0

    numbers = args.numbers or list(DEFAULT_NUMBERS)
    print("\t".join(str(n) for n in _METHODS[args.method](numbers)))
    return 0