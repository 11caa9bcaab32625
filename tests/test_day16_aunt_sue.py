import pytest

from advent2015.day16_aunt_sue import (
    could_aunt_match,
    find_true_aunt_index,
    read_aunt_data,
)

READING = (
    "children: 3, cats: 7, samoyeds: 2, pomeranians: 3, akitas: 0, "
    "vizslas: 0, goldfish: 5, trees: 3, cars: 2, perfumes: 1\n"
)

EXAMPLE_AUNTS = """\
Sue 1: children: 1, vizslas: 7, cars: 8
Sue 2: children: 5, akitas: 10, perfumes: 10
Sue 3: pomeranians: 4, vizslas: 1, cars: 5
Sue 4: children: 8, goldfish: 5, perfumes: 3
Sue 5: akitas: 0, vizslas: 0, perfumes: 1
Sue 6: akitas: 1, vizslas: 0, perfumes: 2
Sue 7: goldfish: 10, cars: 4, perfumes: 8
Sue 8: children: 2, cats: 1, perfumes: 7
Sue 9: pomeranians: 3, goldfish: 10, trees: 10
Sue 10: pomeranians: 4, akitas: 7, trees: 8
"""


@pytest.fixture
def true_aunt(tmp_path):
    path = tmp_path / "p1_aunt.txt"
    path.write_text(READING)
    return read_aunt_data(path)[0]


@pytest.fixture
def example_aunts(tmp_path):
    path = tmp_path / "p1_example_aunts.txt"
    path.write_text(EXAMPLE_AUNTS)
    return read_aunt_data(path)


def test_read_reading(tmp_path):
    path = tmp_path / "p1_aunt.txt"
    path.write_text(READING)
    assert read_aunt_data(path) == [
        {
            "children": 3,
            "cats": 7,
            "samoyeds": 2,
            "pomeranians": 3,
            "akitas": 0,
            "vizslas": 0,
            "goldfish": 5,
            "trees": 3,
            "cars": 2,
            "perfumes": 1,
        }
    ]


def test_read_example_aunts(example_aunts):
    assert example_aunts == [
        {"children": 1, "vizslas": 7, "cars": 8},
        {"children": 5, "akitas": 10, "perfumes": 10},
        {"pomeranians": 4, "vizslas": 1, "cars": 5},
        {"children": 8, "goldfish": 5, "perfumes": 3},
        {"akitas": 0, "vizslas": 0, "perfumes": 1},
        {"akitas": 1, "vizslas": 0, "perfumes": 2},
        {"goldfish": 10, "cars": 4, "perfumes": 8},
        {"children": 2, "cats": 1, "perfumes": 7},
        {"pomeranians": 3, "goldfish": 10, "trees": 10},
        {"pomeranians": 4, "akitas": 7, "trees": 8},
    ]


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (0, False),
        (1, False),
        (2, False),
        (3, False),
        (4, True),
        (5, False),
        (6, False),
        (7, False),
        (8, False),
        (9, False),
    ],
)
def test_could_aunt_match(true_aunt, example_aunts, index, expected):
    assert could_aunt_match(true_aunt, example_aunts[index], False) is expected


def test_find_true_aunt_index(true_aunt, example_aunts):
    assert find_true_aunt_index(true_aunt, example_aunts, False) == 5


def test_find_true_aunt_index_not_found(true_aunt):
    with pytest.raises(LookupError):
        find_true_aunt_index(true_aunt, [{"cats": 1}, {"cars": 9}], False)


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ({"akitas": 0, "trees": 3, "pomeranians": 3}, False),
        ({"cats": 7, "akitas": 0, "trees": 3, "pomeranians": 3, "goldfish": 5}, False),
        ({"cats": 5, "akitas": 0, "trees": 1, "pomeranians": 5, "goldfish": 7}, False),
        ({"cats": 9, "akitas": 0, "trees": 9, "pomeranians": 2, "goldfish": 4}, True),
        ({"trees": 4}, True),
    ],
)
def test_could_aunt_match_retro(true_aunt, candidate, expected):
    assert could_aunt_match(true_aunt, candidate, True) is expected


def test_retro_changes_answer(true_aunt):
    aunts = [{"cats": 7}, {"cats": 8}]
    assert find_true_aunt_index(true_aunt, aunts, False) == 1
    assert find_true_aunt_index(true_aunt, aunts, True) == 2