"""Generate the weather machine's copy-protection code."""

from __future__ import annotations

import argparse

FIRST_CODE = 20151125
_MULTIPLIER = 252533
_MODULUS = 33554393


def next_num(prev_num: int) -> int:
    """The code that follows ``prev_num``."""
    return (prev_num * _MULTIPLIER) % _MODULUS


def place_in_order(row: int, col: int) -> int:
    """Number of codes generated before the one at ``(row, col)``."""
    side = row + col - 1
    return side * (side + 1) // 2 - row


def find_val_at_coord(start_num: int, row: int, col: int) -> int:
    """Code at ``(row, col)`` when the sheet starts with ``start_num``."""
    steps = place_in_order(row, col)
    return start_num * pow(_MULTIPLIER, steps, _MODULUS) % _MODULUS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the weather machine code.")
    parser.add_argument("--row", type=int, default=2981)
    parser.add_argument("--col", type=int, default=3075)
    args = parser.parse_args(argv)

    print(f"Part 1 = {find_val_at_coord(FIRST_CODE, args.row, args.col)}")


if __name__ == "__main__":
    main()