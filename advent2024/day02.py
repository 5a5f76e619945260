"""Reactor safety reports."""

from __future__ import annotations

import re
from collections.abc import Sequence

_NUMBER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_reports(text: str) -> list[list[int]]:
    """Read one report of whitespace-separated levels per non-empty line."""
    reports = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        levels = []
        for token in re.split(r"\s+", line):
            if _NUMBER_RE.fullmatch(token) is None:
                raise ValueError(f"invalid level: {token!r}")
            levels.append(int(token))
        reports.append(levels)
    return reports


def is_safe(report: Sequence[int]) -> bool:
    """Levels all rise or all fall, by steps of 1 to 3."""
    deltas = [b - a for a, b in zip(report, report[1:])]
    if any(d > 0 for d in deltas) and any(d < 0 for d in deltas):
        return False
    return all(1 <= abs(d) <= 3 for d in deltas)


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """Safe as is, or safe once a single level is removed."""
    if is_safe(report):
        return True
    return any(
        is_safe([*report[:i], *report[i + 1 :]]) for i in range(len(report))
    )


def part_one(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in parse_reports(text) if is_safe(report))


def part_two(text: str) -> int:
    """Number of reports that are safe with the dampener."""
    return sum(1 for report in parse_reports(text) if is_safe_with_dampener(report))