from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from heuristic_tic_tac_toe.exception import InvalidPositionError

BOARD_SIZE: Final = 3
Piece: TypeAlias = Literal["X", "O"]
Line: TypeAlias = tuple[int, int, int]

POSITIONS: Final = tuple(range(1, BOARD_SIZE * BOARD_SIZE + 1))
CENTER: Final = 5
CORNERS: Final = (1, 3, 7, 9)

# Scan order matters: winner() and the computer's win/block search report the first match.
WINNING_LINES: Final[tuple[Line, ...]] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (7, 5, 3),
)


@dataclass(frozen=True, slots=True)
class Move:
    piece: Piece
    position: int


@dataclass(slots=True)
class Square:
    piece: Piece | None = None

    def is_empty(self) -> bool:
        return self.piece is None

    def mark(self, piece: Piece) -> None:
        if self.piece is not None:
            raise InvalidPositionError("Square occupied.")
        self.piece = piece

    def clear(self) -> None:
        self.piece = None


def opponent(piece: Piece) -> Piece:
    return "O" if piece == "X" else "X"


def position_to_cell(position: int) -> tuple[int, int]:
    """Convert a 1-based position into a 0-based (row, col) pair."""
    return divmod(position - 1, BOARD_SIZE)


def cell_to_position(row: int, col: int) -> int:
    return row * BOARD_SIZE + col + 1


class Board:
    def __init__(self) -> None:
        self._squares: dict[int, Square] = {position: Square() for position in POSITIONS}
        self._open_positions: list[int] = list(POSITIONS)

    def square(self, position: int) -> Square:
        self._check_position(position)
        return self._squares[position]

    def piece_at(self, position: int) -> Piece | None:
        return self.square(position).piece

    def rows(self) -> list[list[Piece | None]]:
        return [
            [self._squares[cell_to_position(r, c)].piece for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)
        ]

    def open_positions(self) -> tuple[int, ...]:
        return tuple(self._open_positions)

    def positions_of(self, piece: Piece) -> tuple[int, ...]:
        return tuple(position for position, square in self._squares.items() if square.piece == piece)

    def mark(self, position: int, piece: Piece) -> None:
        self._check_position(position)
        if position not in self._open_positions:
            msg = f"Position {position} is not open."
            raise InvalidPositionError(msg)

        self._squares[position].mark(piece)
        self._open_positions.remove(position)

    def winner(self) -> Piece | None:
        for line in WINNING_LINES:
            first = self._squares[line[0]].piece
            if first is not None and all(self._squares[position].piece == first for position in line[1:]):
                return first
        return None

    def is_full(self) -> bool:
        return not self._open_positions

    def reset(self) -> None:
        for square in self._squares.values():
            square.clear()
        self._open_positions = list(POSITIONS)

    def _check_position(self, position: int) -> None:
        # bool is an int subclass, but True is not a board position.
        if isinstance(position, bool) or not isinstance(position, int) or position not in self._squares:
            msg = f"Not a board position: {position!r}."
            raise InvalidPositionError(msg)
