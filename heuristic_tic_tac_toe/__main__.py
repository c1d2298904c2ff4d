import argparse
import logging
import sys

from heuristic_tic_tac_toe.config import LOG_LEVELS, PLAYER_TYPES, UI_TYPES, GameConfig
from heuristic_tic_tac_toe.exception import SessionAbortedError
from heuristic_tic_tac_toe.factories import create_game

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser, args = _parse_args(argv)

    try:
        config = GameConfig(
            player1=args.player1,
            player2=args.player2,
            name1=args.name1,
            name2=args.name2,
            max_score=args.max_score,
            seed=args.seed,
            think_delay=args.think_delay,
            ui=args.ui,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        game_engine, ui = create_game(config)
    except ValueError as e:
        parser.error(str(e))

    ui.start()
    try:
        session_winner = game_engine.play_session(ui.ask_play_again)
    except SessionAbortedError as e:
        logger.info("Session aborted: %s", e)
        return 0
    finally:
        ui.stop()

    if session_winner is not None:
        logger.info("Session won by %s", session_winner.name)
    logger.info("Final score: %s", game_engine.scores)
    return 0


def _parse_args(argv: list[str] | None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="heuristic-tic-tac-toe")

    parser.add_argument("--player1", choices=PLAYER_TYPES, default="human")
    parser.add_argument("--player2", choices=PLAYER_TYPES, default="hard-ai")
    parser.add_argument("--name1")
    parser.add_argument("--name2")

    parser.add_argument("--max-score", type=int, help="end the session when a player reaches this many wins")
    parser.add_argument("--seed", type=int, help="seed for the computer players' random choices")
    parser.add_argument("--think-delay", type=float, default=0.0, help="seconds a computer waits before moving")

    parser.add_argument("--ui", choices=UI_TYPES, default="terminal")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", type=str.upper)

    args = parser.parse_args(argv)
    return parser, args


if __name__ == "__main__":
    sys.exit(main())
