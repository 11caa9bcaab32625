"""Find the seating arrangement around a circular table with the most happiness."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from enum import Enum
from itertools import permutations
from pathlib import Path

_RELATIONSHIP_RE = re.compile(
    r"([a-zA-Z]+) would ([a-zA-Z]+) (\d+) happiness units by sitting next to ([a-zA-Z]+)"
)


class FeelingChange(Enum):
    GAIN = "gain"
    LOSE = "lose"


@dataclass(frozen=True)
class Relationship:
    start: int
    feel: FeelingChange
    mag: int
    end: int

    @property
    def change(self) -> int:
        """Signed change in happiness for the starting guest."""
        return self.mag if self.feel is FeelingChange.GAIN else -self.mag


def read_guest_prefs(data_file: str | Path) -> dict[tuple[int, int], Relationship]:
    """Read the preference file, numbering guests in order of first appearance."""
    guest_lookup: dict[str, int] = {}
    prefs: dict[tuple[int, int], Relationship] = {}

    with open(data_file) as handle:
        for line in handle:
            if not line.strip():
                continue
            caps = _RELATIONSHIP_RE.search(line)
            if caps is None:
                raise ValueError(f"Malformed preference line: {line.strip()!r}")
            name_1, feeling, magnitude, name_2 = caps.groups()
            try:
                feel = FeelingChange(feeling)
            except ValueError:
                raise ValueError(f"Unknown feeling: {feeling!r}") from None

            for name in (name_1, name_2):
                guest_lookup.setdefault(name, len(guest_lookup))

            g1, g2 = guest_lookup[name_1], guest_lookup[name_2]
            prefs[(g1, g2)] = Relationship(start=g1, feel=feel, mag=int(magnitude), end=g2)
    return prefs


def score_seating_arrange(
    guest_order: list[int] | tuple[int, ...],
    guest_prefs: dict[tuple[int, int], Relationship],
) -> int:
    """Total happiness change of a circular seating order."""
    score = 0
    neighbours = zip(guest_order, [*guest_order[1:], *guest_order[:1]])
    for guest_1, guest_2 in neighbours:
        rel_1_2 = guest_prefs.get((guest_1, guest_2))
        rel_2_1 = guest_prefs.get((guest_2, guest_1))
        if rel_1_2 is None or rel_2_1 is None:
            continue
        score += rel_1_2.change + rel_2_1.change
    return score


def find_maximum_happy(
    guest_prefs: dict[tuple[int, int], Relationship], add_my_seat: bool
) -> int:
    """Best happiness over every seating order, optionally with one extra neutral guest."""
    max_guest = max(first for first, _ in guest_prefs)
    num_guests = max_guest + 2 if add_my_seat else max_guest + 1

    best = 0
    for order in permutations(range(num_guests)):
        best = max(best, score_seating_arrange(order, guest_prefs))
    return best


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Optimise the dinner table seating.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    guest_prefs = read_guest_prefs(args.input)
    print(f"Part 1 = {find_maximum_happy(guest_prefs, False)}")
    print(f"Part 2 = {find_maximum_happy(guest_prefs, True)}")


if __name__ == "__main__":
    main()