import pytest

from cookie4.utils import Cell, GameState, WIN_LINES, PLAYABLE_COLS, PLAYABLE_ROWS


def fill_line(board, line, cell):
    for row, col in line:
        board.set(row, col, cell)


def test_there_are_ten_lines_in_scan_order():
    assert len(WIN_LINES) == 10
    assert WIN_LINES[0] == ((0, 1), (0, 2), (0, 3), (0, 4))
    assert WIN_LINES[3] == ((3, 1), (3, 2), (3, 3), (3, 4))
    assert WIN_LINES[4] == ((0, 1), (1, 1), (2, 1), (3, 1))
    assert WIN_LINES[7] == ((0, 4), (1, 4), (2, 4), (3, 4))
    assert WIN_LINES[8] == ((0, 1), (1, 2), (2, 3), (3, 4))
    assert WIN_LINES[9] == ((3, 1), (2, 2), (1, 3), (0, 4))


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("cell", [Cell.COOKIE, Cell.MILK])
def test_each_line_wins(board, line, cell):
    fill_line(board, line, cell)
    assert board.check_winner() == cell
    assert board.winning_line == line
    assert board.finished is True
    assert board.render().endswith(f"{cell.label} wins!\n")


def test_mixed_or_incomplete_lines_do_not_win(board):
    board.set(3, 1, Cell.COOKIE)
    board.set(3, 2, Cell.COOKIE)
    board.set(3, 3, Cell.COOKIE)
    board.set(3, 4, Cell.MILK)
    board.set(2, 1, Cell.COOKIE)
    board.set(1, 1, Cell.COOKIE)
    assert board.check_winner() is None
    assert board.finished is False
    assert board.state == GameState.IN_PROGRESS


def test_detection_is_idempotent(board):
    fill_line(board, WIN_LINES[5], Cell.MILK)
    assert board.check_winner() == Cell.MILK

    # A later cookie line does not replace the recorded winner
    fill_line(board, WIN_LINES[1], Cell.COOKIE)
    assert board.check_winner() == Cell.MILK
    assert board.check_winner() == Cell.MILK
    assert board.winning_line == WIN_LINES[5]


def test_earlier_row_wins_tie(board):
    fill_line(board, WIN_LINES[2], Cell.COOKIE)
    fill_line(board, WIN_LINES[0], Cell.MILK)
    assert board.check_winner() == Cell.MILK
    assert board.winning_line == WIN_LINES[0]


def test_earlier_column_wins_tie(board):
    fill_line(board, WIN_LINES[6], Cell.MILK)
    fill_line(board, WIN_LINES[4], Cell.COOKIE)
    assert board.check_winner() == Cell.COOKIE
    assert board.winning_line == WIN_LINES[4]


def test_rows_are_scanned_before_columns_and_diagonals(board):
    for row in PLAYABLE_ROWS:
        for col in PLAYABLE_COLS:
            board.set(row, col, Cell.COOKIE)
    assert board.check_winner() == Cell.COOKIE
    assert board.winning_line == WIN_LINES[0]


def test_ascending_diagonal_from_play_sequence(board):
    moves = [
        ("cookie", 1), ("milk", 2), ("cookie", 2), ("milk", 3), ("milk", 3),
        ("cookie", 3), ("milk", 4), ("milk", 4), ("milk", 4),
    ]
    for team, column in moves:
        board.place(team, column)
        board.check_winner()
        assert board.winner is None

    board.place("cookie", 4)
    assert board.winner is None  # placement alone never checks
    board.check_winner()

    assert board.render() == (
        "⬜⬛⬛⬛🍪⬜\n"
        "⬜⬛⬛🍪🥛⬜\n"
        "⬜⬛🍪🥛🥛⬜\n"
        "⬜🍪🥛🥛🥛⬜\n"
        "⬜⬜⬜⬜⬜⬜\n"
        "Cookie wins!\n"
    )
    assert board.winning_line == WIN_LINES[9]
