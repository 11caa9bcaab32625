import pytest

from advent2015.day18_lights import (
    Point,
    count_lit,
    count_on_adj_lights,
    find_adj_lights,
    incre_light_grid,
    new_light_state,
    read_light_grid,
)

T, F = True, False

EXAMPLES = {
    1: ".#.#.#\n...##.\n#....#\n..#...\n#.#..#\n####..\n",
    2: "..##..\n..##.#\n...##.\n......\n#.....\n#.##..\n",
    3: "..###.\n......\n..###.\n......\n.#....\n.#....\n",
    4: "...#..\n......\n...#..\n..##..\n......\n......\n",
    5: "......\n......\n..##..\n..##..\n......\n......\n",
    6: "##.#.#\n...##.\n#....#\n..#...\n#.#..#\n####.#\n",
    7: "#.##.#\n####.#\n...##.\n......\n#...#.\n#.####\n",
    8: "#..#.#\n#....#\n.#.##.\n...##.\n.#..##\n##.###\n",
    9: "#...##\n####.#\n..##.#\n......\n##....\n####.#\n",
    10: "#.####\n#....#\n...#..\n.##...\n#.....\n#.#..#\n",
    11: "##.###\n.##..#\n.##...\n.##...\n#.#...\n##...#\n",
}


@pytest.fixture
def load(tmp_path):
    def _load(number):
        path = tmp_path / f"example_{number:02d}.txt"
        path.write_text(EXAMPLES[number])
        return read_light_grid(path)

    return _load


def test_read_light_grid_ex01(load):
    assert load(1) == [
        [F, T, F, T, F, T],
        [F, F, F, T, T, F],
        [T, F, F, F, F, T],
        [F, F, T, F, F, F],
        [T, F, T, F, F, T],
        [T, T, T, T, F, F],
    ]


def test_read_light_grid_ex05(load):
    assert load(5) == [
        [F, F, F, F, F, F],
        [F, F, F, F, F, F],
        [F, F, T, T, F, F],
        [F, F, T, T, F, F],
        [F, F, F, F, F, F],
        [F, F, F, F, F, F],
    ]


def test_read_light_grid_ex11(load):
    assert load(11) == [
        [T, T, F, T, T, T],
        [F, T, T, F, F, T],
        [F, T, T, F, F, F],
        [F, T, T, F, F, F],
        [T, F, T, F, F, F],
        [T, T, F, F, F, T],
    ]


def test_read_light_grid_not_rectangular(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("##.\n#.\n")
    with pytest.raises(ValueError):
        read_light_grid(path)


@pytest.mark.parametrize(
    ("light", "expected"),
    [
        ((0, 0), {(0, 1), (1, 0), (1, 1)}),
        ((0, 1), {(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)}),
        ((0, 2), {(0, 1), (1, 1), (1, 2)}),
        ((1, 0), {(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)}),
        ((1, 1), {(0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)}),
        ((1, 2), {(0, 1), (0, 2), (1, 1), (2, 1), (2, 2)}),
        ((2, 0), {(1, 0), (1, 1), (2, 1)}),
        ((2, 1), {(1, 0), (1, 1), (1, 2), (2, 0), (2, 2)}),
        ((2, 2), {(1, 1), (1, 2), (2, 1)}),
    ],
)
def test_find_adj_lights(light, expected):
    found = find_adj_lights(Point(*light), (3, 3))
    assert len(found) == len(expected)
    assert set(found) == {Point(x, y) for x, y in expected}


def test_count_on_adj_lights():
    grid = [[T, T, F], [T, T, F], [F, F, F]]
    assert count_on_adj_lights(grid, Point(2, 2)) == 1
    assert count_on_adj_lights(grid, Point(0, 0)) == 3


@pytest.mark.parametrize(
    ("grid", "light", "expected"),
    [
        ([[T, T, F], [T, T, F], [F, F, F]], (1, 0), True),
        ([[T, F, F], [F, T, F], [F, T, F]], (1, 0), True),
        ([[T, T, F], [F, F, T], [F, F, F]], (0, 1), True),
        ([[F, F, T], [F, T, F], [F, T, T]], (1, 2), False),
        ([[F, F, F], [F, T, F], [F, F, F]], (0, 0), False),
        ([[F, F, F], [F, F, T], [F, F, T]], (2, 2), False),
    ],
)
def test_new_light_state(grid, light, expected):
    assert new_light_state(grid, Point(*light)) is expected


@pytest.mark.parametrize(
    ("start", "end", "steps"),
    [(1, 5, 4), (1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 5, 1)],
)
def test_incre_light_grid(load, start, end, steps):
    assert incre_light_grid(load(start), steps, False) == load(end)


@pytest.mark.parametrize(
    ("start", "end", "steps"),
    [(6, 11, 5), (6, 7, 1), (7, 8, 1), (8, 9, 1), (9, 10, 1), (10, 11, 1)],
)
def test_incre_light_grid_corners(load, start, end, steps):
    assert incre_light_grid(load(start), steps, True) == load(end)


def test_incre_light_grid_does_not_modify_input(load):
    start = load(1)
    incre_light_grid(start, 2, True)
    assert start == load(1)


def test_count_lit(load):
    assert count_lit(incre_light_grid(load(1), 4, False)) == 4
    assert count_lit(incre_light_grid(load(6), 5, True)) == 17