import numpy as np
import pytest

from noughts.core import LINES, Board, Cell, empty_indices, is_full, legal_mask, winner, winning_line


def test_lines_are_rows_columns_then_diagonals():
    assert LINES == ((0, 1, 2), (3, 4, 5), (6, 7, 8), (0, 3, 6), (1, 4, 7), (2, 5, 8), (0, 4, 8), (2, 4, 6))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("XXX/OO./...", Cell.X),
        ("O.X/OX./O..", Cell.O),
        ("X.O/.XO/..X", Cell.X),
        ("X.O/XO./O..", Cell.O),
    ],
)
def test_winner_detects_rows_columns_and_diagonals(text, expected):
    assert winner(Board.from_string(text)) == expected


def test_no_winner_on_open_board():
    board = Board.from_string("XO./.X./..O")
    assert winner(board) is None
    assert winning_line(board) is None
    assert not is_full(board)


def test_full_board_without_line_is_a_draw():
    board = Board.from_string("XOX/XOO/OXX")
    assert is_full(board)
    assert winner(board) is None


def test_winning_line_reports_first_match():
    board = Board.from_string("OOO/XX./X..")
    assert winning_line(board) == (0, 1, 2)


def test_empty_indices_ascending():
    board = Board.from_string("X.O/.X./O..")
    assert empty_indices(board) == [1, 3, 5, 7, 8]
    assert empty_indices(Board.empty()) == list(range(9))


def test_place_returns_new_board():
    board = Board.empty()
    after = board.place(4, Cell.O)

    assert board[4] == Cell.EMPTY
    assert after[4] == Cell.O
    assert after != board


def test_place_rejects_occupied_cell():
    board = Board.empty().place(0, Cell.X)
    with pytest.raises(ValueError):
        board.place(0, Cell.O)
    with pytest.raises(ValueError):
        board.place(9, Cell.O)


def test_board_requires_nine_valid_cells():
    with pytest.raises(ValueError):
        Board.from_cells([0] * 8)
    with pytest.raises(ValueError):
        Board.from_cells([0] * 8 + [3])
    with pytest.raises(ValueError):
        Board.from_cells([1.7] + [0] * 8)
    with pytest.raises(ValueError):
        Board.from_cells([0] * 7 + [2.9, 0])
    with pytest.raises(ValueError):
        Board.from_string("XOZ......")


def test_board_to_numpy_and_str():
    board = Board.from_string("X.O/.X./..O")
    np.testing.assert_array_equal(board.to_numpy(), np.array([1, 0, 2, 0, 1, 0, 0, 0, 2], dtype=np.int8))
    assert str(board) == "X.O\n.X.\n..O"


def test_cell_opponent():
    assert Cell.X.opponent() == Cell.O
    assert Cell.O.opponent() == Cell.X
    with pytest.raises(ValueError):
        Cell.EMPTY.opponent()


def test_board_accepts_numpy_integers():
    board = Board.from_cells(np.array([1, 0, 2, 0, 0, 0, 0, 0, 0], dtype=np.int8))
    assert board[0] == Cell.X
    assert board[2] == Cell.O


def test_legal_mask_marks_empty_cells():
    board = Board.from_string("X.O/.X./..O")
    np.testing.assert_array_equal(legal_mask(board), np.array([0, 1, 0, 1, 0, 1, 1, 1, 0], dtype=np.int8))
    assert legal_mask(Board.from_string("XOX/XOO/OXX")).sum() == 0
