"""Calibrate and run the molecule replacement machine."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from pathlib import Path

Replacement = tuple[str, str]

_SEPARATOR = " => "
_TARGET_MOLECULE = "e"


def read_molc_replacements(datafile: str | Path) -> tuple[list[Replacement], str]:
    """Read the replacement rules and the molecule that follows them."""
    replacements: list[Replacement] = []
    chem = ""
    with open(datafile) as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line:
                continue
            if _SEPARATOR in line:
                before, after = line.split(_SEPARATOR, 1)
                replacements.append((before, after))
            else:
                chem = line
    return replacements, chem


def _find_all(haystack: str, needle: str) -> Iterator[int]:
    """Start index of every, possibly overlapping, occurrence of ``needle``."""
    start = haystack.find(needle)
    while start != -1:
        yield start
        start = haystack.find(needle, start + 1)


def cnt_distinct_chems(molc_reps: Sequence[Replacement], chem: str) -> int:
    """Number of distinct molecules reachable with exactly one replacement."""
    found = {
        chem[:pos] + after + chem[pos + len(before):]
        for before, after in molc_reps
        for pos in _find_all(chem, before)
    }
    return len(found)


def count_chem_build(
    molc_reps: Sequence[Replacement],
    start_chem: str,
    rng: random.Random | None = None,
) -> int:
    """Steps needed to build ``start_chem`` from a single electron.

    Replacements are undone at random until the electron is reached; a dead
    end starts the search again from the full molecule.
    """
    rng = rng or random.Random()

    while True:
        chem = start_chem
        steps = 0
        while True:
            steps += 1
            options = [
                (before, after, positions)
                for before, after in molc_reps
                if (positions := list(_find_all(chem, after)))
            ]
            if not options:
                if steps == 1:
                    raise ValueError(f"No replacement can reduce the molecule {start_chem!r}")
                break

            before, after, positions = rng.choice(options)
            pos = rng.choice(positions)
            chem = chem[:pos] + before + chem[pos + len(after):]

            if chem == _TARGET_MOLECULE:
                return steps


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Calibrate the medicine machine.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    reps, chem = read_molc_replacements(args.input)
    print(f"Part 1 = {cnt_distinct_chems(reps, chem)}")
    print(f"Part 2 = {count_chem_build(reps, chem)}")


if __name__ == "__main__":
    main()