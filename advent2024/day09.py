"""Disk map compaction and filesystem checksums."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass
class DiskFile:
    """A file on disk: its id, first block and length in blocks."""

    index: int
    position: int
    length: int


@dataclass
class Gap:
    """A run of free blocks."""

    position: int
    length: int


def _digit(char: str) -> int:
    if char not in _DIGITS or len(char) != 1:
        raise ValueError(f"invalid digit: {char!r}")
    return int(char)


def parse_disk_map(text: str) -> tuple[list[DiskFile], list[Gap]]:
    """Read the dense disk map into its files and the gaps between them."""
    digits = "".join(line.strip() for line in text.splitlines()).strip()
    if not digits:
        raise ValueError("empty disk map")
    if len(digits) % 2 == 0:
        raise ValueError("disk map must end with a file length")

    files = [DiskFile(0, 0, _digit(digits[0]))]
    gaps: list[Gap] = []
    position = files[0].length
    for index, start in enumerate(range(1, len(digits), 2), start=1):
        gap = _digit(digits[start])
        gaps.append(Gap(position, gap))
        position += gap
        size = _digit(digits[start + 1])
        files.append(DiskFile(index, position, size))
        position += size
    return files, gaps


def part_one(text: str) -> int:
    """Move single blocks from the end into the leftmost free space; return the checksum."""
    files, gaps = parse_disk_map(text)
    end = files[-1].position + files[-1].length
    blocks: list[int | None] = [None] * end
    for f in files:
        blocks[f.position : f.position + f.length] = [f.index] * f.length
    if not blocks:
        return 0

    front, back = 0, len(blocks) - 1
    while front < back:
        if blocks[front] is not None:
            front += 1
        elif blocks[back] is None:
            back -= 1
        else:
            blocks[front], blocks[back] = blocks[back], None

    checksum = 0
    for position, block in enumerate(blocks):
        if block is None:
            break
        checksum += position * block
    return checksum


def part_two(text: str) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits; return the checksum."""
    files, gaps = parse_disk_map(text)
    for f in reversed(files):
        gap = next(
            (g for g in gaps if g.position < f.position and g.length >= f.length), None
        )
        if gap is None:
            continue
        f.position = gap.position
        if gap.length > f.length:
            gap.position += f.length
        gap.length -= f.length

    return sum(
        block * f.index for f in files for block in range(f.position, f.position + f.length)
    )