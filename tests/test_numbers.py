import math

import pytest

from algoshelf.numbers import (
    factorial,
    fibonacci_binet,
    fibonacci_binet_const,
    fibonacci_fast,
    fibonacci_iterative,
    fibonacci_matrix,
    fibonacci_memo,
    fibonacci_mod,
    fibonacci_naive,
    is_armstrong,
    minimum,
    parity_report,
    pisano_period,
)


def test_iterative_starts_and_recurrence():
    assert fibonacci_iterative(0) == 0
    assert fibonacci_iterative(1) == 1
    for n in range(2, 60):
        assert fibonacci_iterative(n) == fibonacci_iterative(n - 1) + fibonacci_iterative(n - 2)


@pytest.mark.parametrize("function", [fibonacci_fast, fibonacci_memo, fibonacci_matrix])
def test_exact_methods_agree(function):
    for n in range(0, 120):
        assert function(n) == fibonacci_iterative(n)


def test_naive_agrees_on_small_values():
    for n in range(0, 20):
        assert fibonacci_naive(n) == fibonacci_iterative(n)


def test_binet_const_is_exact_in_double_range():
    for n in range(0, 60):
        assert fibonacci_binet_const(n) == fibonacci_iterative(n)


def test_binet_truncation_undershoots_by_at_most_one():
    for n in range(0, 60):
        exact = fibonacci_iterative(n)
        assert exact - 1 <= fibonacci_binet(n) <= exact


@pytest.mark.parametrize(
    "function",
    [
        fibonacci_naive,
        fibonacci_fast,
        fibonacci_memo,
        fibonacci_binet,
        fibonacci_binet_const,
        fibonacci_iterative,
        fibonacci_matrix,
    ],
)
def test_negative_index_rejected(function):
    with pytest.raises(ValueError):
        function(-1)


def test_fibonacci_mod_samples():
    assert fibonacci_mod(1, 239) == 1
    assert fibonacci_mod(2816213588, 30524) == 10249


def test_fibonacci_mod_matches_direct_computation():
    for m in (2, 3, 7, 10, 97):
        for n in range(0, 80):
            assert fibonacci_mod(n, m) == fibonacci_iterative(n) % m


def test_pisano_period_restarts_sequence():
    for m in (2, 5, 10, 1000):
        period = pisano_period(m)
        assert fibonacci_iterative(period) % m == 0
        assert fibonacci_iterative(period + 1) % m == 1


def test_pisano_rejects_small_modulus():
    with pytest.raises(ValueError):
        pisano_period(1)


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [10, 154, 1634, -153])
def test_not_armstrong_numbers(n):
    assert is_armstrong(n) is False


def test_factorial_matches_math():
    for n in range(0, 25):
        assert factorial(n) == math.factorial(n)


def test_factorial_of_negative_is_one():
    assert factorial(-4) == 1


def test_minimum():
    assert minimum(12, 67, 6, 7, 100) == 6
    assert minimum(42) == 42


def test_minimum_needs_values():
    with pytest.raises(ValueError):
        minimum()


def test_parity_report_odd():
    assert parity_report(5) == f"Entered number is odd!\nFactorial n = {factorial(5)}"


def test_parity_report_even():
    lines = parity_report(6).split("\n")
    assert lines[0] == "Entered number is even!"
    series = lines[1].removeprefix("nth Fibonacci series= ")
    assert [int(token) for token in series.split()] == [fibonacci_iterative(i) for i in range(6)]