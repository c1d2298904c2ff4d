# ruff: noqa: T201

from collections.abc import Sequence
from typing import Final

from heuristic_tic_tac_toe.board import BOARD_SIZE, cell_to_position
from heuristic_tic_tac_toe.exception import SessionAbortedError
from heuristic_tic_tac_toe.player import Player
from heuristic_tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    TITLE: Final = "-------Tic Tac Toe-------"
    YES: Final = ("y", "yes")
    NO: Final = ("n", "no")

    def start(self) -> None:
        super().start()
        print("Welcome to Tic Tac Toe!", flush=True)

    def stop(self) -> None:
        if self._running:
            print("Thanks for playing Tic Tac Toe!", flush=True)
        super().stop()

    def request_move(self, player: Player, open_positions: Sequence[int]) -> object:
        choices = ", ".join(str(position) for position in open_positions)
        return self._read(f"{player.name} ({player.piece}), choose a square ({choices}): ")

    def ask_play_again(self) -> bool:
        while True:
            answer = self._read("Play again? (y/n): ").strip().lower()
            if answer in self.YES:
                return True
            if answer in self.NO:
                return False
            print("Invalid entry, please try again", flush=True)

    def _read(self, prompt: str) -> str:
        try:
            input_str = input(prompt)
        except (KeyboardInterrupt, EOFError) as e:
            raise SessionAbortedError("Input closed") from e

        if input_str.strip() == "exit":
            raise SessionAbortedError("Player quit")
        return input_str

    def _render_board(self) -> None:
        board = self._game_engine.board

        def _cell_value(row: int, col: int) -> str:
            position = cell_to_position(row, col)
            piece = board.piece_at(position)
            return piece if piece is not None else str(position)

        rows = []
        for r in range(BOARD_SIZE):
            row = " | ".join(_cell_value(r, c) for c in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)

        print(f"\n{self.TITLE}", flush=True)
        if self._last_move is not None:
            mover = self._game_engine.player_with(self._last_move.piece)
            print(f"{mover.name} chose position {self._last_move.position}", flush=True)
        print(f"\n{output}\n", flush=True)

    def _show_end_message(self, message: str) -> None:
        print(message, flush=True)
        print("Score: " + ", ".join(self.score_lines()), flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
