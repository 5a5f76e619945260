"""Recovering multiplication instructions from corrupted memory."""

from __future__ import annotations

import re

_MUL_RE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")


def _memory(text: str) -> str:
    return "".join(line.strip() for line in text.splitlines())


def part_one(text: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(int(a) * int(b) for a, b in _MUL_RE.findall(_memory(text)))


def part_two(text: str) -> int:
    """As part one, but ``don't()`` disables and ``do()`` re-enables later instructions."""
    memory = _memory(text)
    enabled = True
    total = 0
    for position in range(len(memory)):
        if memory.startswith("do()", position):
            enabled = True
        elif memory.startswith("don't()", position):
            enabled = False
        elif enabled:
            match = _MUL_RE.match(memory, position)
            if match is not None:
                total += int(match[1]) * int(match[2])
    return total