"""CPU scheduling: first come first served, shortest remaining time, round robin."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from statistics import fmean


@dataclass(frozen=True)
class Process:
    """A process to schedule: identifier, arrival time and burst time."""

    pid: int
    arrival: int
    burst: int


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time it completed."""

    pid: int
    arrival: int
    burst: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run, processes ordered by arrival."""

    processes: tuple[ScheduledProcess, ...]

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return fmean(process.turnaround for process in self.processes)

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return fmean(process.waiting for process in self.processes)


def _by_arrival(processes: Iterable[Process]) -> list[Process]:
    ordered = sorted(processes, key=lambda process: process.arrival)
    if not ordered:
        raise ValueError("at least one process is needed")
    for process in ordered:
        if process.burst <= 0:
            raise ValueError(f"process {process.pid} needs a positive burst time")
        if process.arrival < 0:
            raise ValueError(f"process {process.pid} has a negative arrival time")
    return ordered


def _schedule(ordered: list[Process], completions: list[int]) -> Schedule:
    return Schedule(
        tuple(
            ScheduledProcess(process.pid, process.arrival, process.burst, completion)
            for process, completion in zip(ordered, completions)
        )
    )


def first_come_first_served(processes: Iterable[Process]) -> Schedule:
    """Run processes to completion in order of arrival."""
    ordered = _by_arrival(processes)
    completions = []
    clock = ordered[0].arrival
    for process in ordered:
        clock = max(clock, process.arrival) + process.burst
        completions.append(clock)
    return _schedule(ordered, completions)


def shortest_remaining_time_first(processes: Iterable[Process]) -> Schedule:
    """Preemptive shortest-job-first, deciding again after every time unit.

    Among arrived processes with equal remaining time the earliest
    arrival runs.
    """
    ordered = _by_arrival(processes)
    remaining = [process.burst for process in ordered]
    completions = [0] * len(ordered)
    finished = 0
    clock = ordered[0].arrival
    while finished < len(ordered):
        ready = [
            index
            for index, process in enumerate(ordered)
            if process.arrival <= clock and remaining[index] > 0
        ]
        clock += 1
        if not ready:
            continue
        chosen = min(ready, key=remaining.__getitem__)
        remaining[chosen] -= 1
        if remaining[chosen] == 0:
            completions[chosen] = clock
            finished += 1
    return _schedule(ordered, completions)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Time-sliced scheduling with a fixed ``quantum``.

    Processes that arrive during a slice join the queue before the
    process whose slice just ended.
    """
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    ordered = _by_arrival(processes)
    remaining = [process.burst for process in ordered]
    completions = [0] * len(ordered)
    queue: deque[int] = deque()
    admitted = 0
    clock = ordered[0].arrival

    def admit_arrived() -> None:
        nonlocal admitted
        while admitted < len(ordered) and ordered[admitted].arrival <= clock:
            queue.append(admitted)
            admitted += 1

    admit_arrived()
    finished = 0
    while finished < len(ordered):
        if not queue:
            clock = ordered[admitted].arrival
            admit_arrived()
        current = queue.popleft()
        run = min(quantum, remaining[current])
        remaining[current] -= run
        clock += run
        admit_arrived()
        if remaining[current]:
            queue.append(current)
        else:
            completions[current] = clock
            finished += 1
    return _schedule(ordered, completions)