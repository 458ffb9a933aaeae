"""Assorted small problems: matrices, geometry, calendars, rotations and more."""

from __future__ import annotations

from collections.abc import Sequence

_MAGIC_SQUARES: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((8, 1, 6), (3, 5, 7), (4, 9, 2)),
    ((6, 1, 8), (7, 5, 3), (2, 9, 4)),
    ((4, 9, 2), (3, 5, 7), (8, 1, 6)),
    ((2, 9, 4), (7, 5, 3), (6, 1, 8)),
    ((8, 3, 4), (1, 5, 9), (6, 7, 2)),
    ((4, 3, 8), (9, 5, 1), (2, 7, 6)),
    ((6, 7, 2), (1, 5, 9), (8, 3, 4)),
    ((2, 7, 6), (9, 5, 1), (4, 3, 8)),
)


class BadLengthError(ValueError):
    """Raised when a username is too short; ``length`` holds its length."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Too short: {length}")
        self.length = length


def matrix_multiply(a: Sequence[Sequence], b: Sequence[Sequence]) -> list[list]:
    """The matrix product ``a`` times ``b``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must match rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def circles_orthogonal(x1: int, y1: int, x2: int, y2: int, r1: int, r2: int) -> bool:
    """True when the two circles meet at right angles."""
    distance_squared = (x1 - x2) ** 2 + (y1 - y2) ** 2
    return distance_squared == r1 * r1 + r2 * r2


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to ``a`` and ``b``."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise ZeroDivisionError("denominator can not be 0")
        return a / b
    raise ValueError(f"unknown operation {operator!r}; expected one of + - * /")


def concatenate(original: str, addition: str) -> str:
    """``original`` followed by ``addition``."""
    return f"{original}{addition}"


def day_of_programmer(year: int) -> str:
    """Date of the 256th day of ``year`` in the Russian calendar, as ``dd.mm.yyyy``.

    Julian leap rules apply before 1918, Gregorian after, and 1918 itself
    lost thirteen days in February.
    """
    if year == 1918:
        return "26.09.1918"
    julian_leap = year < 1918 and year % 4 == 0
    gregorian_leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    if julian_leap or gregorian_leap:
        return f"12.09.{year}"
    return f"13.09.{year}"


def magic_square_cost(grid: Sequence[Sequence[int]]) -> int:
    """Least total change needed to turn a 3x3 grid into a magic square."""
    if len(grid) != 3 or any(len(row) != 3 for row in grid):
        raise ValueError("grid must be 3x3")
    return min(
        sum(abs(x - y) for row, magic_row in zip(grid, square) for x, y in zip(row, magic_row))
        for square in _MAGIC_SQUARES
    )


def check_username(username: str) -> bool:
    """True unless the name contains ``ww``; raises ``BadLengthError`` below 5 characters."""
    if len(username) < 5:
        raise BadLengthError(len(username))
    return "ww" not in username


def left_rotate(values: Sequence, d: int) -> list:
    """``values`` rotated ``d`` places to the left."""
    items = list(values)
    if not items:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def rotation_queries(values: Sequence, k: int, queries: Sequence[int]) -> list:
    """Rotate ``values`` ``k`` places to the right, then read off the queried indices."""
    items = list(values)
    if items:
        shift = k % len(items)
        if shift:
            items = items[-shift:] + items[:-shift]
    return [items[index] for index in queries]


def fractional_knapsack(
    capacity: float, weights: Sequence[float], values: Sequence[float]
) -> float:
    """Greatest value that fits in ``capacity`` when items may be taken in part."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = sorted(
        ((value / weight, weight) for weight, value in zip(weights, values) if weight > 0),
        key=lambda item: item[0],
        reverse=True,
    )
    total = 0.0
    for ratio, weight in items:
        if capacity <= 0:
            break
        taken = min(capacity, weight)
        total += taken * ratio
        capacity -= taken
    return total


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Every way to place ``n`` non-attacking queens on an ``n`` x ``n`` board.

    A solution gives, for each column from left to right, the row of its
    queen. Solutions come in the order a column-by-column search that
    tries rows top to bottom finds them.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[tuple[int, ...]] = []
    rows: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(column: int) -> None:
        if column == n:
            solutions.append(tuple(rows))
            return
        for row in range(n):
            if (
                row in used_rows
                or row - column in used_diagonals
                or row + column in used_antidiagonals
            ):
                continue
            rows.append(row)
            used_rows.add(row)
            used_diagonals.add(row - column)
            used_antidiagonals.add(row + column)
            place(column + 1)
            rows.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - column)
            used_antidiagonals.discard(row + column)

    place(0)
    return solutions