"""Stones that change every time you blink."""

from __future__ import annotations

from collections import Counter


def parse_stones(text: str) -> list[int]:
    """Read the single line of space-separated stone numbers."""
    lines = [line.strip() for line in text.splitlines()]
    if len(lines) != 1:
        raise ValueError("expected a single line of input")
    stones = []
    for token in lines[0].split(" "):
        if not (token.isascii() and token.isdigit()):
            raise ValueError(f"invalid stone: {token!r}")
        stones.append(int(token))
    return stones


def blink(stone: int) -> tuple[int, ...]:
    """The stones that one stone becomes after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_stones(text: str, blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    counts = Counter(parse_stones(text))
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for result in blink(stone):
                following[result] += count
        counts = following
    return sum(counts.values())


def part_one(text: str) -> int:
    """Stones after 25 blinks."""
    return count_stones(text, 25)


def part_two(text: str) -> int:
    """Stones after 75 blinks."""
    return count_stones(text, 75)