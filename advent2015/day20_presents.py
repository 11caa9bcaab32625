"""Simulate elves delivering presents along a street of houses."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import islice

_HOUSES_PER_ELF = 50


def deliver_presents(num_pres: int, limit: bool) -> list[int]:
    """Presents received by each house index below ``num_pres // 10``.

    With ``limit`` elves deliver eleven presents per number and stop early;
    otherwise they deliver ten per number to every house they visit.
    """
    num_houses = num_pres // 10
    houses = [0] * num_houses
    per_elf = 11 if limit else 10

    for elf in range(1, num_houses):
        visits = range(0, num_houses, elf)
        if limit:
            visits = islice(visits, _HOUSES_PER_ELF + 1)
        for house in visits:
            houses[house] += elf * per_elf
    return houses


def find_lowest_house(house_presents: Sequence[int], num_pres: int) -> int:
    """Lowest house number that received at least ``num_pres`` presents."""
    for house in range(1, num_pres // 10):
        if house_presents[house] >= num_pres:
            return house
    raise LookupError("House not found")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the first house with enough presents.")
    parser.add_argument("presents", nargs="?", type=int, default=34000000)
    args = parser.parse_args(argv)

    houses_part1 = deliver_presents(args.presents, False)
    houses_part2 = deliver_presents(args.presents, True)
    print(f"Part 1 = {find_lowest_house(houses_part1, args.presents)}")
    print(f"Part 2 = {find_lowest_house(houses_part2, args.presents)}")


if __name__ == "__main__":
    main()