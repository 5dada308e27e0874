"""Scoring and ranking problems: taxes, grades, experiments and winners."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def income_tax(salary: float) -> float | None:
    """Return the income tax owed, or None when the salary is exempt."""
    if salary <= 2000.00:
        return None
    if salary <= 3000.00:
        return (salary - 2000.00) * 0.08
    if salary <= 4500.00:
        return (salary - 3000.00) * 0.18 + 1000.00 * 0.08
    return (salary - 4500.00) * 0.28 + 1500.00 * 0.18 + 1000.00 * 0.08


@dataclass(frozen=True)
class ExperimentSummary:
    """Totals of laboratory animals used, by species."""

    total: int
    rabbits: int
    rats: int
    frogs: int

    def _share(self, count: int) -> float:
        return count / self.total * 100.0

    @property
    def rabbit_percentage(self) -> float:
        return self._share(self.rabbits)

    @property
    def rat_percentage(self) -> float:
        return self._share(self.rats)

    @property
    def frog_percentage(self) -> float:
        return self._share(self.frogs)


def summarize_experiments(records: Iterable[tuple[int, str]]) -> ExperimentSummary:
    """Total (amount, kind) records, kind being 'C', 'R' or 'S'."""
    totals = {"C": 0, "R": 0, "S": 0}
    total = 0
    for amount, kind in records:
        total += amount
        if kind in totals:
            totals[kind] += amount
    return ExperimentSummary(total, totals["C"], totals["R"], totals["S"])


def is_valid_grade(grade: float) -> bool:
    """Return True when the grade lies between 0 and 10 inclusive."""
    return 0.0 <= grade <= 10.0


def average_grade(first: float, second: float) -> float:
    """Return the mean of two grades; raise ValueError if either is invalid."""
    for grade in (first, second):
        if not is_valid_grade(grade):
            raise ValueError("nota invalida")
    return (first + second) / 2.0


def average_positive(values: Iterable[float]) -> float:
    """Return the mean of the leading positive values, stopping at the first non-positive."""
    total = 0.0
    count = 0
    for value in values:
        if value <= 0.0:
            break
        total += value
        count += 1
    if count == 0:
        raise ValueError("no positive values to average")
    return total / count


def slug_level(speeds: Iterable[int]) -> int:
    """Return the level 1, 2 or 3 from the fastest speed."""
    fastest = max(speeds, default=-1)
    if fastest < 10:
        return 1
    if fastest < 20:
        return 2
    return 3


def first_minimum_position(values: Iterable[int]) -> int:
    """Return the 1-based position of the first smallest value."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return items.index(min(items)) + 1


def game_winner(x: int, y: int) -> str:
    """Return who wins the game for the pair (x, y)."""
    rafael = 9 * x * x + y * y
    beto = 2 * x * x + 25 * y * y
    carlos = -100 * x + y * y * y
    if rafael > beto and rafael > carlos:
        return "Rafael"
    if beto > rafael and beto > carlos:
        return "Beto"
    return "Carlos"


def fastest_runner(otavio: float, bruno: float, ian: float) -> str:
    """Return the runner with the strictly smallest time, or 'Empate'."""
    if otavio < bruno and otavio < ian:
        return "Otavio"
    if bruno < otavio and bruno < ian:
        return "Bruno"
    if ian < otavio and ian < bruno:
        return "Ian"
    return "Empate"


def property_category(p: int, r: int) -> str:
    """Return the category 'A', 'B' or 'C' for two 0/1 flags."""
    if p == 1 and r == 1:
        return "A"
    if p == 1 and r == 0:
        return "B"
    if p == 0 and r in (0, 1):
        return "C"
    raise ValueError(f"flags must be 0 or 1, got {p}, {r}")


def can_finish_today(available: int, first: int, second: int) -> bool:
    """Return True when both tasks fit within the available time."""
    return first + second <= available