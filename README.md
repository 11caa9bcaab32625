# advent2015

Solvers for days 12 to 25 of the 2015 holiday puzzle calendar. Each day
has its own module in the `advent2015` package. Every module exposes the
functions that make up its solution and a `main` entry point that prints
the answers.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

Installing the package adds one command per day. Commands that read a
puzzle input take its path as an optional positional argument, defaulting
to `./data/input.txt`.

| Command             | Module                       | Arguments and options                                        |
|---------------------|------------------------------|--------------------------------------------------------------|
| `advent2015-day12`  | `day12_abacus`               | `[input]`                                                    |
| `advent2015-day13`  | `day13_dinner_table`         | `[input]`                                                    |
| `advent2015-day14`  | `day14_reindeer`             | `[input] [--time 2503]`                                      |
| `advent2015-day15`  | `day15_cookies`              | `[input]`                                                    |
| `advent2015-day16`  | `day16_aunt_sue`             | `[input] [--reading ./data/p1_aunt.txt]`                     |
| `advent2015-day17`  | `day17_containers`           | `[input] [--volume 150]`                                     |
| `advent2015-day18`  | `day18_lights`               | `[input] [--steps 100]`                                      |
| `advent2015-day19`  | `day19_medicine`             | `[input]`                                                    |
| `advent2015-day20`  | `day20_presents`             | `[presents]` (default 34000000)                              |
| `advent2015-day21`  | `day21_rpg`                  | `[shop]` (default `./data/shop.txt`) `[--boss-hp 100] [--boss-damage 8] [--boss-armour 2]` |
| `advent2015-day22`  | `day22_wizard`               | `[--boss-hp 51] [--boss-damage 9]`                           |
| `advent2015-day23`  | `day23_turing_lock`          | `[input]`                                                    |
| `advent2015-day24`  | `day24_balance`              | `[input]`                                                    |
| `advent2015-day25`  | `day25_snow`                 | `[--row 2981] [--col 3075]`                                  |

Each command prints `Part 1 = ...` and, except for days 12 and 25,
`Part 2 = ...`.

## Using the library

The solving functions can be called directly:

```python
from advent2015.day14_reindeer import Reindeer, dist_travelled
from advent2015.day25_snow import find_val_at_coord, place_in_order

comet = Reindeer(speed=14, run_time=10, rest_time=127)
print(dist_travelled(comet, 1000))            # 1120

print(place_in_order(3, 4))                   # 18
print(find_val_at_coord(20151125, 6, 6))      # 27995004
```

Functions whose names start with `read_` load a day's puzzle input from a
file path; the others work on the values those functions return. Where no
answer exists, functions raise `ValueError` or `LookupError` rather than
returning a sentinel.

A few points worth knowing:

- `day18_lights` represents a grid as a list of rows of booleans;
  `count_lit` counts the lights that are on.
- `day19_medicine.count_chem_build` undoes replacements at random until it
  reaches `e`; pass a seeded `random.Random` as `rng` for repeatable runs.
- `day22_wizard.find_lowest_mana_to_win` takes the boss's hit points and
  damage, defaulting to 51 and 9.
- `day23_turing_lock.Comm.parse` turns one line such as `jio a, +2` into an
  instruction; `Computer.read_comms` loads a program and
  `Computer.execute_comms` runs it.

## What the package does not do

Day 12 answers only the first part: `sum_all_nums` adds every number in
the document. There is no function that skips objects holding the value
`"red"`, so the command prints no second part for that day.