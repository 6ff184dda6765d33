# adventpuzzles

Solvers for a set of daily programming puzzles. Each day lives in its own
module, `adventpuzzles.dayNN`. Every solver takes the puzzle input as an
iterable of lines, without trailing newlines, and returns the answer.
The package needs nothing outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Read your input, split it into lines and pass them to the solver for that day:

```python
from pathlib import Path

from adventpuzzles import day01, day11, day14, day18, day21

lines = Path("input.txt").read_text().splitlines()

day01.total_distance(lines)           # part 1
day01.similarity_score(lines)         # part 2

day11.stone_count(lines, 25)          # stones after 25 blinks
day14.robot_safety_factor(lines, (101, 103))
day18.min_steps_to_exit(lines, 1024, (70, 70))
day21.complexity_sum(lines, 3)
```

## What each day offers

| Module  | Part 1                          | Part 2                            |
|---------|---------------------------------|-----------------------------------|
| day01   | `total_distance`                | `similarity_score`                |
| day02   | `count_safe`                    | `count_safe_with_dampener`        |
| day03   | `multiply_sum`                  | `enabled_multiply_sum`            |
| day04   | `xmas_count`                    | `x_mas_count`                     |
| day05   | `correct_middle_sum`            | `corrected_middle_sum`            |
| day06   | `visited_tile_count`            | `loop_position_count`             |
| day07   | `calibration_sum`               | `calibration_sum_with_concat`     |
| day08   | `antinode_count`                | `harmonic_antinode_count`         |
| day09   | `compact_blocks_checksum`       | `compact_files_checksum`          |
| day10   | `trailhead_score_sum`           | `trailhead_rating_sum`            |
| day11   | `stone_count(lines, 25)`        | `stone_count(lines, 75)`          |
| day12   | `fence_price`                   | `bulk_fence_price`                |
| day13   | `token_cost`                    | `corrected_token_cost`            |
| day14   | `robot_safety_factor`           | `time_till_easter_egg`            |
| day15   | `warehouse_box_sum`             | `wide_warehouse_box_sum`          |
| day16   | `lowest_score`                  | `best_path_tile_count`            |
| day17   | `program_output`                | `lowest_self_replicating_a`       |
| day18   | `min_steps_to_exit`             | `first_blocking_byte`             |
| day19   | `possible_design_count`         | `total_arrangement_count`         |
| day21   | `complexity_sum(lines, 3)`      | `complexity_sum(lines, 26)`       |

Several days also expose their building blocks, for example
`day04.WordGrid`, `day05.PageOrder`, `day06.Grid`, `day07.Equation`,
`day10.HikingMap`, `day13.ClawMachine`, `day15.Warehouse`, `day16.Maze`,
`day17.Computer` and `day19.TowelDesigns`. `Warehouse.render()` and
`Maze.render()` return a text picture of the current state as a string.

A few notes on return values:

- `day18.min_steps_to_exit` returns `None` when the exit cannot be reached.
- `day18.first_blocking_byte` returns the input line (`"x,y"`) of the first
  byte that cuts off the exit.
- `day17.program_output` returns the printed values joined with commas.
- `day14.time_till_easter_egg(lines, size, output=None)` steps the robots one
  second at a time and returns the first second at which their safety factor
  drops below 170,000,000, or 0 if that does not happen within 9,999 seconds.
  When a text stream is passed as `output`, a picture of the robots and the
  safety factor is written to it after each second.

Invalid input raises `ValueError`.

## What it does not do

There is no command-line program and no input reading: you load the puzzle
input yourself and call the functions. Only the days listed above are solved.