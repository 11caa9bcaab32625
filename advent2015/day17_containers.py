"""Count the ways containers can be combined to hold an exact volume."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path


def read_container_sizes(container_file: str | Path) -> list[int]:
    """Read one container capacity per line."""
    text = Path(container_file).read_text()
    return [int(line) for line in text.splitlines() if line.strip()]


def does_comb_fit(cont_comb: Iterable[int], eggnog_vol: int) -> bool:
    """Whether the containers together hold exactly the given volume."""
    return sum(cont_comb) == eggnog_vol


def count_cont_combs(containers: Sequence[int], eggnog_vol: int, min_size: bool) -> int:
    """Count exactly-fitting container combinations.

    With ``min_size`` only combinations using the fewest containers are counted.
    """
    valid_by_size = [
        sum(1 for comb in combinations(containers, size) if does_comb_fit(comb, eggnog_vol))
        for size in range(1, len(containers) + 1)
    ]

    if not min_size:
        return sum(valid_by_size)
    for count in valid_by_size:
        if count:
            return count
    raise ValueError("No valid combination size found")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count eggnog container combinations.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    parser.add_argument("--volume", type=int, default=150)
    args = parser.parse_args(argv)

    conts = read_container_sizes(args.input)
    print(f"Part 1 = {count_cont_combs(conts, args.volume, False)}")
    print(f"Part 2 = {count_cont_combs(conts, args.volume, True)}")


if __name__ == "__main__":
    main()