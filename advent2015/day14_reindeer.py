"""Race reindeer that alternate between flying and resting."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_UINT_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Reindeer:
    speed: int
    run_time: int
    rest_time: int


def read_reindeer_data(data_file: str | Path) -> list[Reindeer]:
    """Read speed, flying time and rest time for each reindeer."""
    data = []
    with open(data_file) as handle:
        for line in handle:
            nums = [int(n) for n in _UINT_RE.findall(line)]
            if not nums:
                continue
            if len(nums) < 3:
                raise ValueError(f"Malformed reindeer line: {line.strip()!r}")
            data.append(Reindeer(speed=nums[0], run_time=nums[1], rest_time=nums[2]))
    return data


def dist_travelled(rein: Reindeer, curr_race_time: int) -> int:
    """Distance covered by a reindeer after the given number of seconds."""
    cycle = rein.run_time + rein.rest_time
    comp_cycles, rem_time = divmod(curr_race_time, cycle)
    return (comp_cycles * rein.run_time + min(rem_time, rein.run_time)) * rein.speed


def winning_dist(competitors: list[Reindeer], race_time: int) -> int:
    """Distance of the reindeer furthest ahead at the end of the race."""
    return max((dist_travelled(rein, race_time) for rein in competitors), default=0)


def winning_score(competitors: list[Reindeer], race_time: int) -> int:
    """Points of the winner when every leader scores one point per second."""
    scores = [0] * len(competitors)
    for second in range(1, race_time + 1):
        dists = [dist_travelled(rein, second) for rein in competitors]
        lead = max(dists)
        scores = [score + (dist == lead) for score, dist in zip(scores, dists)]
    return max(scores)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the reindeer race.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    parser.add_argument("--time", type=int, default=2503)
    args = parser.parse_args(argv)

    data = read_reindeer_data(args.input)
    print(f"Part 1 = {winning_dist(data, args.time)}")
    print(f"Part 2 = {winning_score(data, args.time)}")


if __name__ == "__main__":
    main()