import random

import pytest

from buglife.board import Board, parse_bug_line
from buglife.bugs import Bishop, Crawler, Direction, Hopper
from buglife.position import Position


def make_board(*bugs):
    board = Board(25, 25, rng=random.Random(0))
    board.bugs.extend(bugs)
    return board


def crawler(bug_id, x, y, direction, size, alive=True):
    return Crawler(bug_id, Position(x, y), direction, size, alive=alive,
                   rng=random.Random(1))


def test_parse_crawler_line():
    bug = parse_bug_line("Crawler C1 5 6 N 10 true", random.Random(0))
    assert isinstance(bug, Crawler)
    assert bug.id == "C1"
    assert bug.position == Position(5, 6)
    assert bug.direction is Direction.NORTH
    assert bug.size == 10
    assert bug.alive is True
    assert bug.path == [Position(5, 6)]


def test_parse_bishop_dead():
    bug = parse_bug_line("Bishop B7 2 3 SW 4 false", random.Random(0))
    assert isinstance(bug, Bishop)
    assert bug.direction is Direction.SOUTH_WEST
    assert bug.alive is False


def test_parse_hopper_has_hop_length():
    bug = parse_bug_line("Hopper H2 1 1 E 8 true 3", random.Random(0))
    assert isinstance(bug, Hopper)
    assert bug.hop_length == 3
    assert bug.size == 8


@pytest.mark.parametrize(
    "line",
    [
        "Spider X 1 1 N 3 true",
        "Crawler C1 a 1 N 3 true",
        "Crawler C1 1 1 N 3 yes",
        "Crawler C1 1 1 N",
        "Hopper H1 1 1 N 3 true",
        "Hopper H1 1 1 N 3 true far",
    ],
)
def test_parse_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_bug_line(line, random.Random(0))


def test_parse_rejects_bad_direction():
    with pytest.raises(ValueError, match="Invalid direction string: Q"):
        parse_bug_line("Crawler C1 1 1 Q 3 true", random.Random(0))


def test_load_bugs_collects_rejected_lines(tmp_path):
    data = tmp_path / "bugs.txt"
    data.write_text(
        "Crawler C1 5 5 N 10 true\n"
        "Spider S1 1 1 N 2 true\n"
        "\n"
        "Hopper H1 2 2 E 4 true 2\n"
    )
    board = Board(25, 25)
    rejected = board.load_bugs(data)
    assert rejected == ["Spider S1 1 1 N 2 true"]
    assert [bug.id for bug in board.bugs] == ["C1", "H1"]


def test_load_missing_file_raises(tmp_path):
    board = Board(25, 25)
    with pytest.raises(FileNotFoundError):
        board.load_bugs(tmp_path / "absent.txt")


def test_bug_lines():
    board = make_board(
        crawler("C1", 5, 5, Direction.NORTH, 10),
        Bishop("B1", Position(3, 3), Direction.NORTH_EAST, 4, alive=False),
    )
    assert board.bug_lines() == [
        "C1 Crawler (5,5) 10 North Alive",
        "B1 Bishop (3,3) 4 NorthEast Dead",
    ]


def test_describe_bug_found_and_missing():
    board = make_board(crawler("C1", 5, 5, Direction.WEST, 10))
    assert board.describe_bug("C1") == "C1 (5,5) 10 West Alive"
    assert board.describe_bug("Z9") == "bug Z9 not found"


def test_describe_bug_omits_diagonal_direction():
    board = make_board(Bishop("B1", Position(3, 3), Direction.SOUTH_EAST, 4))
    assert board.describe_bug("B1") == "B1 (3,3) 4  Alive"


def test_tap_biggest_eats_others():
    big = crawler("A", 2, 5, Direction.EAST, 10)
    small = crawler("B", 4, 5, Direction.WEST, 5)
    board = make_board(big, small)
    board.tap()
    assert big.position == small.position
    assert big.alive
    assert not small.alive
    assert small.killer_id == "A"


def test_tap_tie_goes_to_first_bug():
    first = crawler("A", 2, 5, Direction.EAST, 7)
    second = crawler("B", 4, 5, Direction.WEST, 7)
    board = make_board(first, second)
    board.tap()
    assert first.alive
    assert second.killer_id == "A"


def test_tap_leaves_dead_bugs_still():
    dead = crawler("D", 5, 5, Direction.NORTH, 3, alive=False)
    live = crawler("L", 1, 1, Direction.SOUTH, 3)
    board = make_board(dead, live)
    board.tap()
    assert dead.path == [Position(5, 5)]
    assert len(live.path) == 2
    assert live.path[-1] == live.position


def test_path_lines_after_fight():
    big = crawler("A", 2, 5, Direction.EAST, 10)
    small = crawler("B", 4, 5, Direction.WEST, 5)
    loaded_dead = crawler("C", 7, 7, Direction.NORTH, 1, alive=False)
    board = make_board(big, small, loaded_dead)
    board.tap()
    lines = board.path_lines()
    assert lines[1] == "B Path: (4,5),(3,5) Eaten by A"
    assert lines[0].startswith("A Path: (2,5),")
    assert lines[0].endswith(" Still alive")
    assert lines[2] == "C Path: (7,7) Dead"


def test_save_paths_matches_path_lines(tmp_path):
    board = make_board(crawler("A", 2, 5, Direction.EAST, 10))
    board.tap()
    target = tmp_path / "history.out"
    board.save_paths(target)
    assert target.read_text().splitlines() == board.path_lines()


def test_cell_lines_sorted_and_mark_dead():
    board = make_board(
        crawler("X", 4, 1, Direction.NORTH, 2),
        crawler("Y", 1, 1, Direction.NORTH, 2),
        crawler("Z", 1, 1, Direction.NORTH, 2, alive=False),
    )
    assert board.cell_lines() == [
        "Cell (1,1): Y  Z (Dead)  ",
        "Cell (4,1): X  ",
    ]