import pytest

from advent2015.day25_snow import find_val_at_coord, next_num, place_in_order


@pytest.mark.parametrize(
    ("prev", "expected"),
    [
        (20151125, 31916031),
        (31916031, 18749137),
        (18749137, 16080970),
        (16080970, 21629792),
        (21629792, 17289845),
    ],
)
def test_next_num(prev, expected):
    assert next_num(prev) == expected


@pytest.mark.parametrize(
    ("row", "col", "expected"),
    [(6, 1, 15), (1, 6, 20), (3, 4, 18), (5, 2, 16), (2, 5, 19)],
)
def test_place_in_order(row, col, expected):
    assert place_in_order(row, col) == expected


@pytest.mark.parametrize(
    ("row", "col", "expected"),
    [
        (6, 6, 27995004),
        (6, 1, 33071741),
        (3, 4, 7981243),
        (5, 2, 17552253),
        (1, 6, 33511524),
    ],
)
def test_find_val_at_coord(row, col, expected):
    assert find_val_at_coord(20151125, row, col) == expected


def test_first_cell_is_start():
    assert find_val_at_coord(20151125, 1, 1) == 20151125


def test_consecutive_cells_follow_next_num():
    assert find_val_at_coord(20151125, 2, 1) == next_num(find_val_at_coord(20151125, 1, 1))