import logging
from collections.abc import Callable
from enum import StrEnum

from heuristic_tic_tac_toe.board import Board, Move, Piece
from heuristic_tic_tac_toe.exception import ContractViolationError, InvalidPositionError
from heuristic_tic_tac_toe.player import Player

logger = logging.getLogger(__name__)

FIRST_PIECE: Piece = "X"
SECOND_PIECE: Piece = "O"


class GameState(StrEnum):
    NOT_STARTED = "not_started"
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAWN = "drawn"


class GameEngine:
    def __init__(self, board: Board | None = None, *, max_score: int | None = None) -> None:
        if max_score is not None and max_score < 1:
            raise ValueError("max_score must be positive")
        self._board = board if board is not None else Board()
        self._max_score = max_score
        self._players: tuple[Player, Player] | None = None
        self._turn_order: list[Player] = []
        self._scores: dict[Player, int] = {}
        self._games_started = 0
        self._state = GameState.NOT_STARTED
        self._winner: Piece | None = None

        self._new_game_cbs: list[Callable[[], None]] = []
        self._move_cbs: list[Callable[[Move], None]] = []
        self._result_cbs: list[Callable[[Piece | None], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def winner(self) -> Piece | None:
        return self._winner

    @property
    def games_started(self) -> int:
        return self._games_started

    @property
    def max_score(self) -> int | None:
        return self._max_score

    @property
    def players(self) -> tuple[Player, Player]:
        if self._players is None:
            raise ContractViolationError("Players not set.")
        return self._players

    @property
    def current_player(self) -> Player:
        if not self._turn_order:
            raise ContractViolationError("No game started.")
        return self._turn_order[0]

    @property
    def scores(self) -> dict[str, int]:
        return {player.name: self.score(player) for player in self.players}

    @property
    def session_winner(self) -> Player | None:
        if self._max_score is None or self._players is None:
            return None
        for player in self._players:
            if self.score(player) >= self._max_score:
                return player
        return None

    def score(self, player: Player) -> int:
        return self._scores.get(player, 0)

    def player_with(self, piece: Piece) -> Player:
        for player in self.players:
            if player.piece == piece:
                return player
        msg = f"No player holds piece {piece}."
        raise ContractViolationError(msg)

    def set_players(self, player1: Player, player2: Player) -> None:
        if player1 is player2:
            raise ContractViolationError("A player cannot play against itself.")
        self._players = (player1, player2)
        self._scores = {player1: 0, player2: 0}

    def add_new_game_cb(self, callback: Callable[[], None]) -> None:
        self._new_game_cbs.append(callback)

    def add_move_cb(self, callback: Callable[[Move], None]) -> None:
        self._move_cbs.append(callback)

    def add_result_cb(self, callback: Callable[[Piece | None], None]) -> None:
        self._result_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def new_game(self) -> None:
        """Reset the board and start the next game, alternating who moves first."""
        player1, player2 = self.players
        self._board.reset()
        self._turn_order = [player1, player2] if self._games_started % 2 == 0 else [player2, player1]
        self._turn_order[0].assign_piece(FIRST_PIECE)
        self._turn_order[1].assign_piece(SECOND_PIECE)
        self._games_started += 1
        self._winner = None
        self._state = GameState.AWAITING_MOVE
        logger.info("Game %d: %s moves first", self._games_started, self._turn_order[0].name)
        self._notify(self._new_game_cbs)

    def tick(self) -> GameState:
        """Play one turn of the current game.

        Asks the active player for a position and applies it. A rejected position
        is reported to the error callbacks and the same player keeps the turn.
        Does nothing once the game is over.
        """
        if self._state is not GameState.AWAITING_MOVE:
            return self._state

        player = self.current_player
        position = player.choose_position(self._board.open_positions())
        try:
            self._board.mark(position, player.piece)
        except InvalidPositionError as e:
            logger.warning("%s chose an invalid position: %s", player.name, e)
            self._notify(self._on_error_cbs, e)
            return self._state

        move = Move(player.piece, position)
        logger.debug("%s (%s) marked %d", player.name, player.piece, position)
        self._notify(self._move_cbs, move)

        winner = self._board.winner()
        if winner is not None:
            self._finish(GameState.WON, winner)
        elif self._board.is_full():
            self._finish(GameState.DRAWN, None)
        else:
            self._turn_order.reverse()
        return self._state

    def play_game(self) -> Piece | None:
        """Play the current game to the end, starting a new one if none is in progress."""
        if self._state is not GameState.AWAITING_MOVE:
            self.new_game()
        while self._state is GameState.AWAITING_MOVE:
            self.tick()
        return self._winner

    def play_session(self, play_again: Callable[[], bool]) -> Player | None:
        """Play games until someone reaches the max score or `play_again` says no.

        Returns the player that reached the max score, if any.
        """
        while True:
            self.new_game()
            self.play_game()

            session_winner = self.session_winner
            if session_winner is not None:
                logger.info("%s reached %d points", session_winner.name, self._max_score)
                return session_winner
            if not play_again():
                logger.info("Session ended after %d games", self._games_started)
                return None

    def _finish(self, state: GameState, winner: Piece | None) -> None:
        self._state = state
        self._winner = winner
        if winner is not None:
            player = self.player_with(winner)
            self._scores[player] += 1
            logger.info("%s (%s) won game %d", player.name, winner, self._games_started)
        else:
            logger.info("Game %d was a draw", self._games_started)
        self._notify(self._result_cbs, winner)

    def _notify(self, callbacks: list[Callable[..., None]], *args: object) -> None:
        for callback in list(callbacks):
            try:
                callback(*args)
            except Exception:
                # Observers must not break the game.
                logger.exception("Observer %r failed", callback)
