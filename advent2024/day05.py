"""Page ordering rules for safety manual updates."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_RULE_RE = re.compile(r"(\d+)\|(\d+)", re.ASCII)
_SEQUENCE_RE = re.compile(r"(\d+)(?:,(\d+))*", re.ASCII)


@dataclass(frozen=True)
class Rule:
    """Page ``left`` must come before page ``right``."""

    left: int
    right: int


class Rules:
    """A set of ordering rules, indexed for quick lookups."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self.rules: list[Rule] = list(rules)
        self._by_left: dict[int, list[Rule]] = defaultdict(list)
        for rule in self.rules:
            self._by_left[rule.left].append(rule)
        self._pairs = {(rule.left, rule.right) for rule in self.rules}

    def restricted_to(self, numbers: Iterable[int]) -> Rules:
        """Return the rules whose two pages are both among ``numbers``."""
        allowed = set(numbers)
        return Rules(
            rule for rule in self.rules if rule.left in allowed and rule.right in allowed
        )

    def check(self, left: int, right: int) -> bool:
        """Whether a rule says ``left`` comes before ``right``."""
        return (left, right) in self._pairs

    def choices(self, left: int) -> tuple[Rule, ...]:
        """The rules that start at page ``left``, in input order."""
        return tuple(self._by_left.get(left, ()))


def parse_manual(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Split the input into its rules and its page sequences."""
    lines = iter(line.strip() for line in text.splitlines())

    rules: list[Rule] = []
    for line in lines:
        match = _RULE_RE.fullmatch(line)
        if match is None:
            break
        rules.append(Rule(int(match[1]), int(match[2])))

    sequences: list[list[int]] = []
    for line in lines:
        if _SEQUENCE_RE.fullmatch(line) is None:
            break
        sequences.append([int(number.strip()) for number in line.split(",")])

    remainder = list(lines)
    if remainder:
        raise ValueError(f"unmatched line at end of input: {remainder!r}")
    return rules, sequences


def is_sequence_valid(sequence: Sequence[int], rules: Rules) -> bool:
    """Whether every page has a rule placing it before every later page."""
    return all(
        rules.check(value, other)
        for i, value in enumerate(sequence)
        for other in sequence[i + 1 :]
    )


def is_ordered(sequence: Sequence[int], rules: Rules) -> bool:
    """Whether each neighbouring pair of pages is backed by a rule."""
    return all(rules.check(left, right) for left, right in zip(sequence, sequence[1:]))


def find_ordering(numbers: Sequence[int], rules: Rules) -> list[int] | None:
    """Search for an ordering of ``numbers`` where each neighbouring pair follows a rule."""
    rules = rules.restricted_to(numbers)

    to_visit: list[tuple[int | None, int]] = [(None, number) for number in numbers]
    current: list[tuple[int | None, int]] = []
    sequence: list[int] = []
    visited: set[int] = set()

    while to_visit:
        prev, following = to_visit.pop()
        if prev is None:
            # a fresh root: start over
            current.clear()
            sequence.clear()
            visited.clear()
        else:
            # unwind until the head of the attempt is the page this step extends
            while current and current[-1][1] != prev:
                current.pop()
                visited.discard(sequence.pop())

        current.append((prev, following))
        sequence.append(following)
        visited.add(following)

        if len(current) == len(numbers):
            if is_ordered(sequence, rules):
                return list(sequence)
            current.pop()
            visited.discard(sequence.pop())
            continue

        for rule in rules.choices(following):
            if rule.right not in visited:
                to_visit.append((rule.left, rule.right))
    return None


def _middle(sequence: Sequence[int]) -> int:
    return sequence[len(sequence) // 2]


def part_one(text: str) -> int:
    """Sum the middle pages of the correctly ordered updates."""
    rule_list, sequences = parse_manual(text)
    rules = Rules(rule_list)
    return sum(_middle(seq) for seq in sequences if is_sequence_valid(seq, rules))


def part_two(text: str) -> int:
    """Reorder the incorrectly ordered updates and sum their middle pages."""
    rule_list, sequences = parse_manual(text)
    rules = Rules(rule_list)
    total = 0
    for seq in sequences:
        if is_ordered(seq, rules):
            continue
        ordering = find_ordering(seq, rules)
        if ordering is None:
            raise ValueError("failed to find a valid ordering for at least one sequence")
        total += _middle(ordering)
    return total