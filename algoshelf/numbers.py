"""Number sequences and small arithmetic routines: Fibonacci, factorial and friends."""

from __future__ import annotations

import math

_SQRT5 = math.sqrt(5)
_PHI = (1 + _SQRT5) / 2
_INVERSE_SQRT5 = 0.44721359549995793928183473374626
_PHI_CONST = 1.6180339887498948482045868343656

_Matrix = tuple[tuple[int, int], tuple[int, int]]

_memo: list[int] = [0, 1]


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_naive(n: int) -> int:
    """The ``n``-th Fibonacci number by plain recursion (exponential time)."""
    _require_non_negative(n)
    if n <= 1:
        return n
    return fibonacci_naive(n - 1) + fibonacci_naive(n - 2)


def fibonacci_fast(n: int) -> int:
    """The ``n``-th Fibonacci number, building the whole table bottom-up."""
    _require_non_negative(n)
    table = [0, 1]
    for index in range(2, n + 1):
        table.append(table[index - 1] + table[index - 2])
    return table[n]


def fibonacci_memo(n: int) -> int:
    """The ``n``-th Fibonacci number from a table kept between calls."""
    _require_non_negative(n)
    while len(_memo) <= n:
        _memo.append(_memo[-1] + _memo[-2])
    return _memo[n]


def fibonacci_binet(n: int) -> int:
    """``phi ** n / sqrt(5)`` truncated towards zero.

    Truncation rather than rounding means the result can fall one short
    of the true Fibonacci number.
    """
    _require_non_negative(n)
    return int(_PHI**n / _SQRT5)


def fibonacci_binet_const(n: int) -> int:
    """The ``n``-th Fibonacci number from Binet's formula, rounded.

    Exact only while double precision suffices (roughly ``n <= 70``).
    """
    _require_non_negative(n)
    return int(_PHI_CONST**n * _INVERSE_SQRT5 + 0.5)


def fibonacci_iterative(n: int) -> int:
    """The ``n``-th Fibonacci number keeping only the last two terms."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def _multiply(a: _Matrix, b: _Matrix) -> _Matrix:
    return (
        (a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]),
        (a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]),
    )


def _power(base: _Matrix, exponent: int) -> _Matrix:
    result: _Matrix = ((1, 0), (0, 1))
    while exponent:
        if exponent & 1:
            result = _multiply(result, base)
        base = _multiply(base, base)
        exponent >>= 1
    return result


def fibonacci_matrix(n: int) -> int:
    """The ``n``-th Fibonacci number as the corner of ``[[1, 1], [1, 0]] ** (n - 1)``."""
    _require_non_negative(n)
    if n == 0:
        return 0
    return _power(((1, 1), (1, 0)), n - 1)[0][0]


def pisano_period(m: int) -> int:
    """Length of the period of the Fibonacci numbers modulo ``m`` (``m >= 2``)."""
    if m < 2:
        raise ValueError("modulus must be at least 2")
    previous, current = 0, 1
    for step in range(m * m):
        previous, current = current, (previous + current) % m
        if previous == 0 and current == 1:
            return step + 1
    raise ArithmeticError(f"no Pisano period found for {m}")


def fibonacci_mod(n: int, m: int) -> int:
    """The ``n``-th Fibonacci number modulo ``m``, for very large ``n``."""
    _require_non_negative(n)
    remainder = n % pisano_period(m)
    previous, current = 0, 1
    for _ in range(remainder):
        previous, current = current, (previous + current) % m
    return previous % m


def is_armstrong(n: int) -> bool:
    """True when ``n`` equals the sum of the cubes of its decimal digits."""
    total = 0
    remaining = n
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        total += digit**3
    return total == n


def factorial(n: int) -> int:
    """``n!``; every ``n`` of 1 or less gives 1."""
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def minimum(*args):
    """The smallest of the arguments; at least one is needed."""
    if not args:
        raise ValueError("minimum needs at least one value")
    smallest = args[0]
    for value in args[1:]:
        if value < smallest:
            smallest = value
    return smallest


def parity_report(n: int) -> str:
    """Describe the parity of ``n`` and follow it with a matching computation.

    An even number is followed by its first ``n`` Fibonacci numbers, an
    odd one by its factorial.
    """
    if n % 2 == 0:
        series = " ".join(str(fibonacci_iterative(i)) for i in range(max(n, 0)))
        return f"Entered number is even!\nnth Fibonacci series= {series}"
    return f"Entered number is odd!\nFactorial n = {factorial(n)}"