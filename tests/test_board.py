import pytest

from heuristic_tic_tac_toe.board import (
    POSITIONS,
    WINNING_LINES,
    Board,
    Square,
    cell_to_position,
    opponent,
    position_to_cell,
)
from heuristic_tic_tac_toe.exception import InvalidPositionError


def make_board(x: tuple[int, ...] = (), o: tuple[int, ...] = ()) -> Board:
    board = Board()
    for position in x:
        board.mark(position, "X")
    for position in o:
        board.mark(position, "O")
    return board


class TestSquare:
    def test_mark_and_clear(self) -> None:
        square = Square()
        assert square.is_empty()

        square.mark("O")
        assert square.piece == "O"

        square.clear()
        assert square.is_empty()

    def test_cannot_mark_twice(self) -> None:
        square = Square("X")
        with pytest.raises(InvalidPositionError, match="Square occupied"):
            square.mark("O")
        assert square.piece == "X"


class TestBoard:
    """Test board state, open positions and win detection."""

    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert board.open_positions() == POSITIONS
        assert board.winner() is None
        assert not board.is_full()
        assert board.rows() == [[None] * 3 for _ in range(3)]

    def test_open_positions_shrink_with_each_mark(self) -> None:
        board = Board()
        marked: list[int] = []
        for n, position in enumerate((5, 1, 9, 3, 7, 2, 8, 4, 6), start=1):
            board.mark(position, "X" if n % 2 else "O")
            marked.append(position)
            open_positions = board.open_positions()
            assert len(open_positions) == 9 - n
            assert not set(marked) & set(open_positions)
            assert list(open_positions) == sorted(open_positions)

    def test_mark_occupied_position(self) -> None:
        board = make_board(x=(1,))
        with pytest.raises(InvalidPositionError, match="Position 1 is not open"):
            board.mark(1, "O")
        assert board.piece_at(1) == "X"
        assert board.open_positions() == (2, 3, 4, 5, 6, 7, 8, 9)

    @pytest.mark.parametrize("position", [0, 10, -1, "5", 5.0, True, None])
    def test_mark_not_a_position(self, position: object) -> None:
        board = Board()
        with pytest.raises(InvalidPositionError, match="Not a board position"):
            board.mark(position, "X")  # type: ignore[arg-type]
        assert board.open_positions() == POSITIONS

    def test_open_positions_is_a_snapshot(self) -> None:
        board = Board()
        snapshot = board.open_positions()
        board.mark(4, "X")
        assert 4 in snapshot
        assert 4 not in board.open_positions()

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_winning_line(self, line: tuple[int, int, int]) -> None:
        board = Board()
        for position in line[:2]:
            board.mark(position, "O")
        assert board.winner() is None
        board.mark(line[2], "O")
        assert board.winner() == "O"

    def test_mixed_line_does_not_win(self) -> None:
        board = make_board(x=(1, 2), o=(3,))
        assert board.winner() is None

    def test_first_complete_line_wins(self) -> None:
        # Not reachable in alternating play, but must be deterministic.
        board = make_board(x=(4, 5, 6), o=(1, 2, 3))
        assert board.winner() == "O"

    def test_full_board_without_winner(self) -> None:
        board = make_board(x=(1, 3, 4, 8, 9), o=(2, 5, 6, 7))
        assert board.is_full()
        assert board.open_positions() == ()
        assert board.winner() is None

    def test_full_board_with_winner(self) -> None:
        board = make_board(x=(1, 2, 3, 5, 8), o=(4, 6, 7, 9))
        assert board.is_full()
        assert board.winner() == "X"

    def test_reset_matches_fresh_board(self) -> None:
        board = make_board(x=(1, 2, 3), o=(4, 5))
        squares = [board.square(position) for position in POSITIONS]

        board.reset()
        board.reset()

        fresh = Board()
        assert board.open_positions() == fresh.open_positions()
        assert board.winner() is None
        assert board.rows() == fresh.rows()
        # The same squares are reused, not reallocated.
        assert all(board.square(p) is s for p, s in zip(POSITIONS, squares, strict=True))

    def test_positions_of(self) -> None:
        board = make_board(x=(1, 9), o=(5,))
        assert board.positions_of("X") == (1, 9)
        assert board.positions_of("O") == (5,)


class TestHelpers:
    def test_opponent(self) -> None:
        assert opponent("X") == "O"
        assert opponent("O") == "X"

    @pytest.mark.parametrize(
        ("position", "cell"),
        [(1, (0, 0)), (3, (0, 2)), (5, (1, 1)), (7, (2, 0)), (9, (2, 2))],
    )
    def test_position_cell_conversion(self, position: int, cell: tuple[int, int]) -> None:
        assert position_to_cell(position) == cell
        assert cell_to_position(*cell) == position
