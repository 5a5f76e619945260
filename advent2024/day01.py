"""Reconciling two lists of location IDs."""

from __future__ import annotations

import re
from collections import Counter

_LINE_RE = re.compile(r"(\d+)\s+(\d+)", re.ASCII)


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Read the left and right columns; blank lines are skipped."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE_RE.fullmatch(line)
        if match is None:
            raise ValueError(f"bad line: {line}")
        left.append(int(match[1]))
        right.append(int(match[2]))
    return left, right


def part_one(text: str) -> int:
    """Total distance between the sorted lists."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(x * counts[x] for x in left)