from collections.abc import Sequence
from typing import Final

import pygame

from heuristic_tic_tac_toe.board import BOARD_SIZE, cell_to_position, position_to_cell
from heuristic_tic_tac_toe.exception import SessionAbortedError
from heuristic_tic_tac_toe.game_engine import GameEngine
from heuristic_tic_tac_toe.player import Player
from heuristic_tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    STATUS_HEIGHT: Final = 40
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)
    HINT_COLOR: Final = (80, 80, 80)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._title = self.TITLE
        self._status = ""
        self._end_message = ""

    def start(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 48)
        self._status_font = pygame.font.SysFont(None, 28)
        self._hint_font = pygame.font.SysFont(None, 24)
        self._clock = pygame.time.Clock()

        super().start()
        self._render()

    def stop(self) -> None:
        if self._running:
            pygame.quit()
        super().stop()

    def request_move(self, player: Player, open_positions: Sequence[int]) -> object:
        self._title = f"{self.TITLE} - {player.name} ({player.piece})"
        try:
            while True:
                self._clock.tick(self.FPS)
                for event in pygame.event.get():
                    match event.type:
                        case pygame.QUIT:
                            raise SessionAbortedError("Window closed")
                        case pygame.MOUSEBUTTONDOWN:
                            position = self._position_at(event.pos)
                            if position is not None:
                                return position
                self._render()
        finally:
            self._title = self.TITLE

    def ask_play_again(self) -> bool:
        self._status = "Click to play again, close the window to quit"
        while True:
            self._clock.tick(self.FPS)
            for event in pygame.event.get():
                match event.type:
                    case pygame.QUIT:
                        return False
                    case pygame.MOUSEBUTTONDOWN:
                        self._end_message = ""
                        self._status = ""
                        return True
            self._render()

    def _position_at(self, pos: tuple[int, int]) -> int | None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return None
        return cell_to_position(row, col)

    def _render_board(self) -> None:
        self._status = "  ".join(self.score_lines())
        self._render()
        # Keep the window responsive while computer players move.
        pygame.event.pump()

    def _show_end_message(self, message: str) -> None:
        self._end_message = message
        self._status = "  ".join(self.score_lines())
        self._render()
        pygame.event.pump()

    def _on_input_error(self, exception: Exception) -> None:
        self._status = str(exception)

    def _render(self) -> None:
        pygame.display.set_caption(self._title)
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        self._draw_end_message()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        board = self._game_engine.board
        for position in range(1, BOARD_SIZE * BOARD_SIZE + 1):
            row, col = position_to_cell(position)
            center = (col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2)
            piece = board.piece_at(position)
            if piece is None:
                text = self._hint_font.render(str(position), True, self.HINT_COLOR)  # noqa: FBT003
            else:
                color = self.X_COLOR if piece == "X" else self.O_COLOR
                text = self._font.render(piece, True, color)  # noqa: FBT003
            self._screen.blit(text, text.get_rect(center=center))

    def _draw_status(self) -> None:
        if not self._status:
            return
        text = self._status_font.render(self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        rect = text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE + self.STATUS_HEIGHT // 2))
        self._screen.blit(text, rect)

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        rect = text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2))
        self._screen.blit(text, rect)
