"""Calibration equations with missing operators."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

_NUMBER_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_MAX_BINARY_OPERATORS = 64


def _parse_number(token: str) -> int:
    if _NUMBER_RE.fullmatch(token) is None:
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


class Operator(Enum):
    """An operator that combines the running total with the next value."""

    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "||"

    def apply(self, left: int, right: int) -> int:
        """Combine two values with this operator."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.MULTIPLY:
            return left * right
        return int(f"{left}{right}")


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should produce it."""

    answer: int
    values: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Equation:
        """Parse a line of the form ``answer: v1 v2 ...``."""
        parts = line.split(":")
        if len(parts) != 2:
            raise ValueError('wrong number of splits on ":"')
        answer, rest = parts
        values = tuple(
            _parse_number(token.strip())
            for token in rest.split(" ")
            if token.strip()
        )
        return cls(_parse_number(answer), values)

    def evaluate(self, operators: Sequence[Operator]) -> int:
        """Apply the operators left to right; stops early once the answer is exceeded."""
        if not self.values:
            raise ValueError("line is empty, no values")
        result = self.values[0]
        for operator, value in zip(operators, self.values[1:]):
            result = operator.apply(result, value)
            if result > self.answer:
                break
        return result

    def is_solvable(self, operators: Iterable[Operator]) -> bool:
        """Whether some choice of the given operators produces the answer."""
        if not self.values:
            raise ValueError("line is empty, no values")
        choices = tuple(operators)
        return any(
            self.evaluate(combo) == self.answer
            for combo in itertools.product(choices, repeat=len(self.values) - 1)
        )


def _equations(text: str) -> list[Equation]:
    return [Equation.parse(line.strip()) for line in text.splitlines()]


def part_one(text: str) -> int:
    """Sum the answers reachable with addition and multiplication."""
    total = 0
    for equation in _equations(text):
        if not equation.values:
            raise ValueError("line is empty, no values")
        if len(equation.values) - 1 > _MAX_BINARY_OPERATORS:
            raise ValueError(f"too many values, line len = {len(equation.values)}")
        if equation.is_solvable((Operator.ADD, Operator.MULTIPLY)):
            total += equation.answer
    return total


def part_two(text: str) -> int:
    """Sum the answers reachable with addition, multiplication and concatenation."""
    operators = (Operator.ADD, Operator.MULTIPLY, Operator.CONCAT)
    return sum(
        equation.answer
        for equation in _equations(text)
        if equation.is_solvable(operators)
    )