"""Command-line runner that feeds judge-style input to the problem solvers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator

from judgekit.scoring import average_grade, is_valid_grade, summarize_experiments
from judgekit.sequences import signed_total

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CHAR = re.compile(r"\s*(\S)")

_PROMPT = "novo calculo (1-sim 2-nao)"


class _Scanner:
    """Reads whitespace-separated numbers and characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str]) -> str | None:
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group(1)

    def integer(self) -> int | None:
        token = self._take(_INT)
        return None if token is None else int(token)

    def number(self) -> float | None:
        token = self._take(_FLOAT)
        return None if token is None else float(token)

    def char(self) -> str | None:
        return self._take(_CHAR)

    def pairs(self, count: int) -> Iterator[tuple[int, str]]:
        """Yield up to count (integer, character) pairs."""
        for _ in range(count):
            amount = self.integer()
            sign = self.char()
            if amount is None or sign is None:
                return
            yield amount, sign


def _lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _grade_session(scan: _Scanner) -> str:
    out: list[str] = []
    choice = 1
    while choice == 1:
        first = scan.number()
        second = scan.number()
        if first is None or second is None:
            break
        while not is_valid_grade(first):
            out.append("nota invalida")
            first = scan.number()
            if first is None:
                return _lines(out)
        while not is_valid_grade(second):
            out.append("nota invalida")
            second = scan.number()
            if second is None:
                return _lines(out)
        out.append(f"media = {average_grade(first, second):.2f}")
        out.append(_PROMPT)
        while True:
            answer = scan.integer()
            if answer is None:
                return _lines(out)
            if 1 <= answer <= 2:
                choice = answer
                break
            out.append(_PROMPT)
    return _lines(out)


def _experiments(scan: _Scanner) -> str:
    count = scan.integer()
    if count is None:
        raise ValueError("missing number of experiments")
    summary = summarize_experiments(scan.pairs(count))
    if summary.total == 0:
        raise ValueError("no animals were used")
    return _lines(
        [
            f"Total: {summary.total} cobaias",
            f"Total de coelhos: {summary.rabbits}",
            f"Total de ratos: {summary.rats}",
            f"Total de sapos: {summary.frogs}",
            f"Percentual de coelhos: {summary.rabbit_percentage:.2f} %",
            f"Percentual de ratos: {summary.rat_percentage:.2f} %",
            f"Percentual de sapos: {summary.frog_percentage:.2f} %",
        ]
    )


def _signed_totals(scan: _Scanner) -> str:
    results: list[str] = []
    while (count := scan.integer()) is not None and count != 0:
        results.append(str(signed_total(scan.pairs(count))))
    return "".join(results)


PROBLEMS: dict[str, Callable[[_Scanner], str]] = {
    "1094": _experiments,
    "1118": _grade_session,
    "3065": _signed_totals,
}


def run(problem: str | int, text: str) -> str:
    """Solve the given problem for the input text and return its output."""
    try:
        solver = PROBLEMS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return solver(_Scanner(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="judgekit", description=__doc__)
    parser.add_argument("problem", choices=sorted(PROBLEMS), help="problem number")
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0