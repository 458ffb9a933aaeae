"""Professors and students read from whitespace-separated tokens."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _take(tokens: Iterator[str], count: int) -> list[str]:
    taken = []
    for _ in range(count):
        try:
            taken.append(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None
    return taken


@dataclass(frozen=True)
class Person(ABC):
    """Someone with a name, an age and a score."""

    name: str
    age: int
    score: int

    def describe(self) -> str:
        """Name, age and score separated by spaces."""
        return f"{self.name} {self.age} {self.score}"

    @classmethod
    @abstractmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Person:
        """Read one person from ``tokens``."""


@dataclass(frozen=True)
class Professor(Person):
    """A professor, whose score is the number of publications."""

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Professor:
        """Read name, age and publication count."""
        name, age, score = _take(iter(tokens), 3)
        return cls(name, int(age), int(score))


@dataclass(frozen=True)
class Student(Person):
    """A student, whose score is the total of six marks."""

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Student:
        """Read name, age and six marks; the score is their sum."""
        stream = iter(tokens)
        name, age = _take(stream, 2)
        marks = _take(stream, 6)
        return cls(name, int(age), sum(int(mark) for mark in marks))


def read_people(tokens: Iterable[str]) -> list[Person]:
    """Read a count, then that many people each preceded by a type code.

    Code ``1`` means a professor; any other code a student.
    """
    stream = iter(tokens)
    (count,) = _take(stream, 1)
    people: list[Person] = []
    for _ in range(int(count)):
        (kind,) = _take(stream, 1)
        factory = Professor if int(kind) == 1 else Student
        people.append(factory.from_tokens(stream))
    return people


def report(people: Iterable[Person]) -> str:
    """One line per person, ending in an id numbered separately for each kind."""
    counters: dict[type, int] = {}
    lines = []
    for person in people:
        kind = type(person)
        counters[kind] = counters.get(kind, 0) + 1
        lines.append(f"{person.describe()} {counters[kind]}\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read people from standard input and print the report."""
    parser = argparse.ArgumentParser(description="List professors and students.")
    parser.parse_args(argv)
    try:
        people = read_people(sys.stdin.read().split())
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    sys.stdout.write(report(people))
    return 0