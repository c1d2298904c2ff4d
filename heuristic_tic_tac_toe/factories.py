"""Factory functions for creating game components.

Provides factories for creating:
- Players (local human, easy AI, hard AI)
- UIs (terminal, pygame)
- A game engine wired to its players and UI
"""

import random

from heuristic_tic_tac_toe.board import Board
from heuristic_tic_tac_toe.config import GameConfig, PlayerType, UiType
from heuristic_tic_tac_toe.game_engine import GameEngine
from heuristic_tic_tac_toe.names import NameRegistry
from heuristic_tic_tac_toe.player import Player
from heuristic_tic_tac_toe.player_ai import Difficulty, create_ai_player
from heuristic_tic_tac_toe.player_local import LocalPlayer
from heuristic_tic_tac_toe.ui import Ui

# ============================================================================
# Player Factories
# ============================================================================


def create_player(  # noqa: PLR0913
    player_type: PlayerType,
    board: Board,
    ui: Ui,
    names: NameRegistry,
    *,
    name: str | None = None,
    default_name: str = "Player",
    rng: random.Random | None = None,
    think_delay: float = 0.0,
) -> Player:
    match player_type:
        case "human":
            human_player = LocalPlayer(names.claim(name if name is not None else default_name))
            human_player.set_request_move_cb(ui.request_move)
            human_player.add_input_error_cb(ui.on_error)
            return human_player
        case "easy-ai" | "hard-ai":
            difficulty = Difficulty.EASY if player_type == "easy-ai" else Difficulty.HARD
            ai_name = names.claim(name) if name is not None else names.claim_random(rng=rng)
            return create_ai_player(difficulty, ai_name, board, rng=rng, think_delay=think_delay)
        case _:
            msg = f"Unknown player type: {player_type}. Choose from 'human', 'easy-ai', 'hard-ai'."
            raise ValueError(msg)


def create_players(config: GameConfig, board: Board, ui: Ui, names: NameRegistry) -> tuple[Player, Player]:
    rng = random.Random(config.seed)  # noqa: S311
    player1 = create_player(
        config.player1,
        board,
        ui,
        names,
        name=config.name1,
        default_name="Player 1",
        rng=rng,
        think_delay=config.think_delay,
    )
    player2 = create_player(
        config.player2,
        board,
        ui,
        names,
        name=config.name2,
        default_name="Player 2",
        rng=rng,
        think_delay=config.think_delay,
    )
    return player1, player2


# ============================================================================
# UI Factories
# ============================================================================


def create_ui(ui_type: UiType, game_engine: GameEngine) -> Ui:
    match ui_type:
        case "terminal":
            from heuristic_tic_tac_toe.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi(game_engine)
        case "pygame":
            # pygame is only imported when its window is asked for.
            from heuristic_tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case _:
            msg = f"Unknown UI: {ui_type}. Choose from 'terminal', 'pygame'."
            raise ValueError(msg)


# ============================================================================
# GameEngine Factories
# ============================================================================


def create_game(config: GameConfig) -> tuple[GameEngine, Ui]:
    game_engine = GameEngine(Board(), max_score=config.max_score)
    ui = create_ui(config.ui, game_engine)
    players = create_players(config, game_engine.board, ui, NameRegistry())
    game_engine.set_players(*players)
    return game_engine, ui
