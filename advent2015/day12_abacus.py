"""Sum every number found in an accounting JSON document."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_NUMBER_RE = re.compile(r"-?\d+")


def read_account_data(filepath: str | Path) -> str:
    """Read the whole document as one string with surrounding whitespace removed."""
    return Path(filepath).read_text().strip()


def sum_all_nums(acc_data: str) -> int:
    """Return the sum of every integer that appears in the text."""
    return sum(int(match) for match in _NUMBER_RE.findall(acc_data))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum the numbers in an accounts document.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    acc_data = read_account_data(args.input)
    print(f"Part 1 = {sum_all_nums(acc_data)}")


if __name__ == "__main__":
    main()