from abc import ABC, abstractmethod
from collections.abc import Sequence

from heuristic_tic_tac_toe.board import Move, Piece
from heuristic_tic_tac_toe.game_engine import GameEngine
from heuristic_tic_tac_toe.player import Player


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._last_move: Move | None = None
        self._game_engine.add_new_game_cb(self.on_new_game)
        self._game_engine.add_move_cb(self.on_move)
        self._game_engine.add_result_cb(self.on_result)
        self._game_engine.add_on_error_cb(self.on_error)

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def on_new_game(self) -> None:
        if not self._running:
            return
        self._last_move = None
        self._render_board()

    def on_move(self, move: Move) -> None:
        if not self._running:
            return
        self._last_move = move
        self._render_board()

    def on_result(self, winner: Piece | None) -> None:
        if not self._running:
            return
        if winner is not None:
            player = self._game_engine.player_with(winner)
            self._show_end_message(f"Winner: {player.name} ({winner})")
        else:
            self._show_end_message("It's a draw")

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        self._on_input_error(exception)

    def score_lines(self) -> list[str]:
        return [f"{player.name}: {self._game_engine.score(player)}" for player in self._game_engine.players]

    @abstractmethod
    def request_move(self, player: Player, open_positions: Sequence[int]) -> object:
        """Block until the human `player` picks a position. The raw answer is validated by the caller."""

    @abstractmethod
    def ask_play_again(self) -> bool:
        pass

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
