"""Balance the sleigh by splitting packages into groups of equal weight."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator, Sequence
from itertools import combinations
from pathlib import Path


def read_box_weights(file_path: str | Path) -> list[int]:
    """Read one package weight per line."""
    text = Path(file_path).read_text()
    return [int(line) for line in text.splitlines() if line.strip()]


def qe_calc(grouping: Sequence[Sequence[int]]) -> int:
    """Quantum entanglement of a grouping: product of the first group's weights."""
    return math.prod(grouping[0])


def _subsets_with_sum(
    weights: Sequence[int], target: int, start: int = 0
) -> Iterator[tuple[int, ...]]:
    """Index tuples of subsets of ``weights[start:]`` adding up to ``target``."""
    if target == 0:
        yield ()
        return
    for index in range(start, len(weights)):
        weight = weights[index]
        if weight <= target:
            for rest in _subsets_with_sum(weights, target - weight, index + 1):
                yield (index, *rest)


def _can_split(weights: tuple[int, ...], parts: int, target: int) -> bool:
    """Whether ``weights`` can be divided into ``parts`` groups each weighing ``target``."""
    if parts == 0:
        return not weights
    if parts == 1:
        return bool(weights) and sum(weights) == target
    if not weights:
        return False
    first, rest = weights[0], weights[1:]
    if first > target:
        return False
    for chosen in _subsets_with_sum(rest, target - first):
        picked = set(chosen)
        remaining = tuple(w for i, w in enumerate(rest) if i not in picked)
        if _can_split(remaining, parts - 1, target):
            return True
    return False


def find_ideal_config_qe(boxes: Sequence[int], groups: int) -> int:
    """Smallest entanglement of a first group of the fewest packages in a valid split."""
    if groups < 1 or groups > len(boxes):
        raise ValueError(f"Cannot split {len(boxes)} packages into {groups} groups")
    group_weight = sum(boxes) // groups

    for size in range(1, len(boxes) - groups + 2):
        best: int | None = None
        for chosen in combinations(enumerate(boxes), size):
            if sum(weight for _, weight in chosen) != group_weight:
                continue
            qe = math.prod(weight for _, weight in chosen)
            if best is not None and qe >= best:
                continue
            picked = {index for index, _ in chosen}
            rest = tuple(w for i, w in enumerate(boxes) if i not in picked)
            if _can_split(rest, groups - 1, group_weight):
                best = qe
        if best is not None:
            return best
    raise LookupError("No balanced configuration exists")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Balance the sleigh.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    boxes = read_box_weights(args.input)
    print(f"Part 1 = {find_ideal_config_qe(boxes, 3)}")
    print(f"Part 2 = {find_ideal_config_qe(boxes, 4)}")


if __name__ == "__main__":
    main()