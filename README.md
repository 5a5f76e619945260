# advent2024

Solutions to the first twelve days of the 2024 Advent of Code puzzles.

Each day has its own module, from `advent2024.day01` to
`advent2024.day12`. Every module provides `part_one(text)` and
`part_two(text)`. Each function takes the puzzle input as a string and
returns the answer as an integer.

```python
from pathlib import Path

from advent2024 import day01, day06

text = Path("day01.txt").read_text()
print(day01.part_one(text), day01.part_two(text))

print(day06.part_two(Path("day06.txt").read_text()))
```

Some modules also expose the parts the solutions use:

- `day02.is_safe` and `day02.is_safe_with_dampener` check a single report.
- `day04.WordGrid` searches a letter grid for words and crossed `MAS` patterns.
- `day05.Rules`, `day05.is_sequence_valid` and `day05.find_ordering` handle page ordering rules.
- `day06.Lab` simulates the guard's patrol. `Lab.find_path()` reports whether the patrol loops.
- `day07.Equation` and `day07.Operator` test calibration equations against a chosen set of operators.
- `day08.AntennaMap` groups antennas by frequency and yields the pairs that share one.
- `day09.parse_disk_map` returns the files and free gaps of a disk map.
- `day10.TopoMap` gives a trailhead's `score` and its `rating`.
- `day11.count_stones(text, blinks)` counts stones after any number of blinks.
- `day12.Garden` finds plant regions and gives `fence_price()` and `bulk_price()`.

Malformed input raises `ValueError`. Examples are grid rows of uneven
length, unknown characters and lines that do not match the expected
format.

## What it does not do

The package is a library only. It has no command-line program, and it
does not find or read puzzle input files; the caller reads the input
and passes it in as text. Only days 1 to 12 are covered.

## Tests

```
pip install -e .[test]
pytest
```