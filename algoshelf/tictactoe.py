"""Two-player tic-tac-toe on a numbered 3x3 board."""

from __future__ import annotations

import argparse
import enum
import sys

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

_MARKS = {1: "X", 2: "O"}


class Outcome(enum.Enum):
    """State of a game: still running, won by the last mover, or drawn."""

    IN_PROGRESS = -1
    DRAW = 0
    WIN = 1


class InvalidMoveError(ValueError):
    """Raised for a move onto a taken or non-existent square."""


class TicTacToe:
    """A game of tic-tac-toe; squares are numbered 1 to 9, row by row."""

    def __init__(self) -> None:
        self._squares = [str(number) for number in range(1, 10)]
        self._player = 1
        self._winner: int | None = None

    @property
    def squares(self) -> tuple[str, ...]:
        """The nine squares, each a mark or its own number."""
        return tuple(self._squares)

    @property
    def current_player(self) -> int:
        """The player (1 or 2) whose turn it is."""
        return self._player

    @property
    def winner(self) -> int | None:
        """The winning player, or ``None`` while nobody has won."""
        return self._winner

    def play(self, position: int) -> Outcome:
        """Put the current player's mark on ``position`` and return the outcome.

        Raises ``InvalidMoveError`` when the square is taken, out of range,
        or the game is already over; the turn then stays with the same player.
        """
        if self.outcome() is not Outcome.IN_PROGRESS:
            raise InvalidMoveError("the game is over")
        if not isinstance(position, int) or not 1 <= position <= 9:
            raise InvalidMoveError(f"no square {position!r}")
        index = position - 1
        if self._squares[index] != str(position):
            raise InvalidMoveError(f"square {position} is taken")
        self._squares[index] = _MARKS[self._player]
        result = self.outcome()
        if result is Outcome.WIN:
            self._winner = self._player
        else:
            self._player = 2 if self._player == 1 else 1
        return result

    def outcome(self) -> Outcome:
        """Whether the game is won, drawn or still in progress."""
        squares = self._squares
        if any(squares[a] == squares[b] == squares[c] for a, b, c in _LINES):
            return Outcome.WIN
        if all(square in _MARKS.values() for square in squares):
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def render(self) -> str:
        """The board as text, with a title and the players' marks."""
        s = self._squares
        spacer = "     |     |     \n"
        divider = "_____|_____|_____\n"

        def row(start: int) -> str:
            return f"  {s[start]}  |  {s[start + 1]}  |  {s[start + 2]}\n"

        return (
            "\n\n\tTic Tac Toe\n\n"
            "Player 1 (X)  -  Player 2 (O)\n\n\n"
            + spacer
            + row(0)
            + divider
            + spacer
            + row(3)
            + divider
            + spacer
            + row(6)
            + spacer
            + "\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Play a game on the terminal, reading square numbers from standard input."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe for two players.")
    parser.parse_args(argv)

    game = TicTacToe()
    while game.outcome() is Outcome.IN_PROGRESS:
        sys.stdout.write(game.render())
        try:
            line = input(f"Player {game.current_player}, enter a number:  ")
        except EOFError:
            return 1
        try:
            game.play(int(line.strip()))
        except (ValueError, InvalidMoveError):
            sys.stdout.write("Invalid move \n")
    sys.stdout.write(game.render())
    if game.outcome() is Outcome.WIN:
        sys.stdout.write(f"==>\aPlayer {game.winner} win \n")
    else:
        sys.stdout.write("==>\aGame draw\n")
    return 0