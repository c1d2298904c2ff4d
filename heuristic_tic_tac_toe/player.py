from abc import ABC, abstractmethod
from collections.abc import Sequence

from heuristic_tic_tac_toe.board import Piece
from heuristic_tic_tac_toe.exception import ContractViolationError


class Player(ABC):
    def __init__(self, name: str) -> None:
        self._name = name
        self._piece: Piece | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r}, piece={self._piece!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def piece(self) -> Piece:
        if self._piece is None:
            msg = f"No piece assigned to player {self._name}."
            raise ContractViolationError(msg)
        return self._piece

    def assign_piece(self, piece: Piece) -> None:
        """Give the player its piece for the game about to start."""
        self._piece = piece

    def choose_position(self, open_positions: Sequence[int]) -> int:
        if not open_positions:
            msg = f"Player {self._name} asked to move, but no positions are open."
            raise ContractViolationError(msg)
        return self._choose_position(open_positions)

    @abstractmethod
    def _choose_position(self, open_positions: Sequence[int]) -> int:
        pass
