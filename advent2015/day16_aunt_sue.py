"""Work out which Aunt Sue sent the gift from what is known about each aunt."""

from __future__ import annotations

import argparse
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

_COMPOUND_RE = re.compile(r"([a-z]+): (\d+)")

# Under the retroencabulator rules these readings are lower or upper bounds.
_GREATER_THAN = frozenset({"cats", "trees"})
_FEWER_THAN = frozenset({"pomeranians", "goldfish"})


def read_aunt_data(data_file: str | Path) -> list[dict[str, int]]:
    """Read one mapping of compound to count for each non-blank line."""
    aunts = []
    with open(data_file) as handle:
        for line in handle:
            if not line.strip():
                continue
            aunts.append({name: int(value) for name, value in _COMPOUND_RE.findall(line)})
    return aunts


def could_aunt_match(
    true_aunt: Mapping[str, int], posib_aunt: Mapping[str, int], retro: bool
) -> bool:
    """Whether every remembered compound of ``posib_aunt`` agrees with the reading."""
    for compound, value in posib_aunt.items():
        if compound not in true_aunt:
            continue
        reading = true_aunt[compound]
        if retro and compound in _GREATER_THAN:
            if reading >= value:
                return False
        elif retro and compound in _FEWER_THAN:
            if reading <= value:
                return False
        elif reading != value:
            return False
    return True


def find_true_aunt_index(
    true_aunt: Mapping[str, int], aunt_data: Sequence[Mapping[str, int]], retro: bool
) -> int:
    """One-based number of the first aunt that could have sent the gift."""
    for number, aunt in enumerate(aunt_data, start=1):
        if could_aunt_match(true_aunt, aunt, retro):
            return number
    raise LookupError("Valid aunt not found")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Identify the Aunt Sue who sent the gift.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    parser.add_argument("--reading", default="./data/p1_aunt.txt")
    args = parser.parse_args(argv)

    true_aunt = read_aunt_data(args.reading)[0]
    all_aunts = read_aunt_data(args.input)
    print(f"Part 1 = {find_true_aunt_index(true_aunt, all_aunts, False)}")
    print(f"Part 2 = {find_true_aunt_index(true_aunt, all_aunts, True)}")


if __name__ == "__main__":
    main()