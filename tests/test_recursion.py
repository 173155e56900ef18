import itertools
import math

import pytest

from tinkerbox.recursion import (
    factorial,
    find_max,
    gcd,
    gcd_steps,
    main,
    permutations,
    recursive_sum,
    set_operations,
    square_plot,
    subsets,
)


@pytest.mark.parametrize("x", [1, 2, 5, 10, 20])
def test_factorial_matches_math(x):
    assert factorial(x) == math.factorial(x)


@pytest.mark.parametrize("x", [0, -3])
def test_factorial_rejects_non_positive(x):
    with pytest.raises(ValueError):
        factorial(x)


def test_find_max():
    values = [99952, 4283, 531]
    assert find_max(values) == max(values)
    assert find_max([531, 4283]) == 4283
    assert find_max([7]) == 7


def test_find_max_empty_raises():
    with pytest.raises(ValueError):
        find_max([])


def test_recursive_sum():
    values = [4, -2, 10, 7]
    assert recursive_sum(values) == sum(values)
    assert recursive_sum([]) == 0


@pytest.mark.parametrize("x,y", [(1785, 546), (546, 1785), (12, 18), (7, 13), (0, 9), (9, 0), (1, 1)])
def test_gcd_matches_math(x, y):
    assert gcd(x, y) == math.gcd(x, y)


def test_gcd_negative_raises():
    with pytest.raises(ValueError):
        gcd(-4, 6)


def test_gcd_steps():
    result, steps = gcd_steps(1785, 546)
    assert result == math.gcd(1785, 546)
    assert steps[0][:2] == (1785, 546)
    assert steps[-1][2] == 0
    for dividend, divisor, remainder in steps:
        assert dividend % divisor == remainder
    assert gcd_steps(546, 1785) == (result, steps)


def test_square_plot_value():
    assert square_plot(1680, 640) == (80, 80)


def test_square_plot_symmetric_and_invalid():
    assert square_plot(1680, 640) == square_plot(640, 1680)
    with pytest.raises(ValueError):
        square_plot(0, 5)


def test_subsets_order():
    assert subsets([0, 1, 2]) == [[], [0], [0, 1], [0, 1, 2], [0, 2], [1], [1, 2], [2]]


@pytest.mark.parametrize("items", [[], [4], [1, 2, 3, 4]])
def test_subsets_cover_all_combinations(items):
    result = subsets(items)
    assert len(result) == 2 ** len(items)
    expected = {c for r in range(len(items) + 1) for c in itertools.combinations(items, r)}
    assert {tuple(s) for s in result} == expected


def test_permutations_order():
    assert permutations([0, 1, 2]) == [
        [0, 1, 2], [0, 2, 1], [1, 0, 2], [1, 2, 0], [2, 1, 0], [2, 0, 1]
    ]


def test_permutations_cover_all():
    items = [1, 2, 3, 4]
    result = permutations(items)
    assert result[0] == items
    assert len(result) == math.factorial(len(items))
    assert {tuple(p) for p in result} == set(itertools.permutations(items))


def test_set_operations():
    fruits = {"tomato", "avocado", "banana"}
    vegetables = {"tomato", "beans", "carrots"}
    ops = set_operations(fruits, vegetables)
    assert ops["intersection"] == ["tomato"]
    assert ops["difference"] == ["avocado", "banana"]
    assert ops["union"] == sorted(fruits | vegetables)


def test_main_default_is_gcd(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"GCD OF 1785 AND 546: {math.gcd(1785, 546)}" in out


def test_main_factorial(capsys):
    main(["factorial", "5"])
    assert capsys.readouterr().out.strip() == f"x:5, 5!:{math.factorial(5)}"