"""Animate a grid of lights following Game-of-Life style rules."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

Grid = list[list[bool]]

_OFFSETS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0))


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def read_light_grid(light_file: str | Path) -> Grid:
    """Read a grid where '#' is on and '.' is off; other characters are ignored."""
    cells: list[bool] = []
    line_count = 0
    with open(light_file) as handle:
        for line in handle:
            line_count += 1
            cells.extend(char == "#" for char in line if char in ".#")

    if line_count == 0 or len(cells) % line_count:
        raise ValueError("Light grid is not rectangular")
    width = len(cells) // line_count
    return [cells[row * width : (row + 1) * width] for row in range(line_count)]


def find_adj_lights(light: Point, grid_size: Sequence[int]) -> list[Point]:
    """Neighbours of a light that lie within a grid of the given (rows, columns)."""
    rows, cols = grid_size[0], grid_size[1]
    return [
        Point(light.x + dx, light.y + dy)
        for dx, dy in _OFFSETS
        if 0 <= light.x + dx < cols and 0 <= light.y + dy < rows
    ]


def _shape(light_grid: Sequence[Sequence[bool]]) -> tuple[int, int]:
    return len(light_grid), len(light_grid[0]) if light_grid else 0


def count_on_adj_lights(light_grid: Sequence[Sequence[bool]], light: Point) -> int:
    """Number of neighbouring lights that are on."""
    return sum(
        light_grid[adj.x][adj.y] for adj in find_adj_lights(light, _shape(light_grid))
    )


def new_light_state(light_grid: Sequence[Sequence[bool]], light: Point) -> bool:
    """State of a light after one step."""
    num_adj = count_on_adj_lights(light_grid, light)
    if light_grid[light.x][light.y]:
        return num_adj in (2, 3)
    return num_adj == 3


def _light_corners(grid: Grid) -> None:
    for row in (0, -1):
        for col in (0, -1):
            grid[row][col] = True


def incre_light_grid(
    light_grid: Sequence[Sequence[bool]], steps: int, corners: bool
) -> Grid:
    """Grid after the given number of steps; ``corners`` keeps the four corners lit."""
    grid = [list(row) for row in light_grid]
    rows, cols = _shape(grid)
    if corners:
        _light_corners(grid)

    for _ in range(steps):
        grid = [[new_light_state(grid, Point(x, y)) for y in range(cols)] for x in range(rows)]
        if corners:
            _light_corners(grid)
    return grid


def count_lit(light_grid: Sequence[Sequence[bool]]) -> int:
    """Number of lights that are on."""
    return sum(sum(row) for row in light_grid)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Animate the light grid.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    parser.add_argument("--steps", type=int, default=100)
    args = parser.parse_args(argv)

    start_grid = read_light_grid(args.input)
    print(f"Part 1 = {count_lit(incre_light_grid(start_grid, args.steps, False))}")
    print(f"Part 2 = {count_lit(incre_light_grid(start_grid, args.steps, True))}")


if __name__ == "__main__":
    main()