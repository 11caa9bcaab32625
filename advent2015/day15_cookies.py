"""Find the best-scoring cookie recipe from a list of ingredients."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

_INT_RE = re.compile(r"-?\d+")
_SCORED_PROPERTIES = ("capacity", "durability", "flavor", "texture")
_TARGET_CALORIES = 500


@dataclass(frozen=True)
class Cookie:
    capacity: int
    durability: int
    flavor: int
    texture: int
    calories: int


def read_cookie_data(file_path: str | Path) -> list[Cookie]:
    """Read the per-teaspoon properties of each ingredient."""
    data = []
    with open(file_path) as handle:
        for line in handle:
            nums = [int(n) for n in _INT_RE.findall(line)]
            if not nums:
                continue
            if len(nums) < 5:
                raise ValueError(f"Malformed ingredient line: {line.strip()!r}")
            data.append(Cookie(*nums[:5]))
    return data


def score_cookie_comb(data: Sequence[Cookie], weights: Sequence[int]) -> int:
    """Score a recipe: product of the non-negative property totals, calories excluded."""
    totals = (
        sum(weight * getattr(ingredient, prop) for ingredient, weight in zip(data, weights))
        for prop in _SCORED_PROPERTIES
    )
    return math.prod(max(total, 0) for total in totals)


def cookie_calories(data: Sequence[Cookie], weights: Sequence[int]) -> int:
    """Total calories of a recipe."""
    return sum(weight * ingredient.calories for ingredient, weight in zip(data, weights))


def _weightings(total: int, count: int) -> Iterator[tuple[int, ...]]:
    """Every way of splitting ``total`` teaspoons across ``count`` ingredients."""
    if count == 0:
        if total == 0:
            yield ()
        return
    if count == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _weightings(total - first, count - 1):
            yield (first, *rest)


def highest_cookie_score(ingr_data: Sequence[Cookie], total_weight: int, cal_cnt: bool) -> int:
    """Best score over all recipes using exactly ``total_weight`` teaspoons.

    With ``cal_cnt`` only recipes of exactly 500 calories are considered.
    """
    high_score = 0
    for weights in _weightings(total_weight, len(ingr_data)):
        if cal_cnt and cookie_calories(ingr_data, weights) != _TARGET_CALORIES:
            continue
        high_score = max(high_score, score_cookie_comb(ingr_data, weights))
    return high_score


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the best cookie recipe.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    data = read_cookie_data(args.input)
    print(f"Part 1 = {highest_cookie_score(data, 100, False)}")
    print(f"Part 2 = {highest_cookie_score(data, 100, True)}")


if __name__ == "__main__":
    main()