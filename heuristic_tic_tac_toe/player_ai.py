import logging
import random
import time
from abc import ABC
from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

from heuristic_tic_tac_toe.board import CENTER, CORNERS, POSITIONS, WINNING_LINES, Board, Piece, opponent
from heuristic_tic_tac_toe.player import Player

logger = logging.getLogger(__name__)

OPENING_POSITION = 1


class Difficulty(StrEnum):
    EASY = "easy"
    HARD = "hard"


class AiPlayer(Player, ABC):
    difficulty: ClassVar[Difficulty]

    def __init__(
        self,
        name: str,
        board: Board,
        *,
        rng: random.Random | None = None,
        think_delay: float = 0.0,
    ) -> None:
        super().__init__(name)
        self._board = board
        self._rng = rng if rng is not None else random.Random()  # noqa: S311
        self._think_delay = think_delay

    def choose_position(self, open_positions: Sequence[int]) -> int:
        position = super().choose_position(open_positions)
        if self._think_delay > 0:
            time.sleep(self._think_delay)
        return position

    def _random_position(self, open_positions: Sequence[int]) -> int:
        return self._rng.choice(list(open_positions))


class RandomAiPlayer(AiPlayer):
    difficulty = Difficulty.EASY

    def _choose_position(self, open_positions: Sequence[int]) -> int:
        return self._random_position(open_positions)


class HardAiPlayer(AiPlayer):
    """Rule-based opponent.

    Rules are tried in order and the first one that yields a position wins:
    opening corner, center reply, win now, block now, weighted corner preference,
    random. Cheap, and deliberately beatable.
    """

    difficulty = Difficulty.HARD

    def _choose_position(self, open_positions: Sequence[int]) -> int:
        own = self.piece
        rival = opponent(own)

        if len(open_positions) == len(POSITIONS):
            logger.debug("%s opens at %d", self.name, OPENING_POSITION)
            return OPENING_POSITION

        if len(open_positions) == len(POSITIONS) - 1 and CENTER in open_positions:
            logger.debug("%s takes the center", self.name)
            return CENTER

        position = self._completing_position(own, open_positions)
        if position is not None:
            logger.debug("%s wins at %d", self.name, position)
            return position

        position = self._completing_position(rival, open_positions)
        if position is not None:
            logger.debug("%s blocks at %d", self.name, position)
            return position

        position = self._weighted_position(rival, open_positions)
        if position is not None:
            logger.debug("%s prefers %d", self.name, position)
            return position

        return self._random_position(open_positions)

    def _completing_position(self, piece: Piece, open_positions: Sequence[int]) -> int | None:
        """Return the open square of the first line where `piece` holds the other two."""
        for line in WINNING_LINES:
            pieces = [self._board.piece_at(position) for position in line]
            if pieces.count(piece) != 2:
                continue
            for position in line:
                if position in open_positions:
                    return position
        return None

    def _weighted_position(self, rival: Piece, open_positions: Sequence[int]) -> int | None:
        # Lines the rival has not touched are still winnable for us.
        potential_lines = [
            line for line in WINNING_LINES if all(self._board.piece_at(position) != rival for position in line)
        ]

        weights = []
        for candidate in open_positions:
            weight = 0
            if candidate in CORNERS:
                for line in potential_lines:
                    if candidate in line and CENTER not in line:
                        weight += 1
            weights.append(weight)

        best = max(weights)
        if best <= 0:
            return None
        return open_positions[weights.index(best)]


def create_ai_player(
    difficulty: Difficulty,
    name: str,
    board: Board,
    *,
    rng: random.Random | None = None,
    think_delay: float = 0.0,
) -> AiPlayer:
    match difficulty:
        case Difficulty.EASY:
            return RandomAiPlayer(name, board, rng=rng, think_delay=think_delay)
        case Difficulty.HARD:
            return HardAiPlayer(name, board, rng=rng, think_delay=think_delay)
        case _:
            msg = f"Unknown difficulty: {difficulty}"
            raise ValueError(msg)
