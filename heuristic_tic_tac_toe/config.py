from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

PlayerType: TypeAlias = Literal["human", "easy-ai", "hard-ai"]
UiType: TypeAlias = Literal["terminal", "pygame"]

PLAYER_TYPES: Final[tuple[PlayerType, ...]] = ("human", "easy-ai", "hard-ai")
UI_TYPES: Final[tuple[UiType, ...]] = ("terminal", "pygame")
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class GameConfig:
    player1: PlayerType = "human"
    player2: PlayerType = "hard-ai"
    name1: str | None = None
    name2: str | None = None
    max_score: int | None = None
    seed: int | None = None
    think_delay: float = 0.0
    ui: UiType = "terminal"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for player_type in (self.player1, self.player2):
            if player_type not in PLAYER_TYPES:
                msg = f"Unknown player type: {player_type}. Choose from {', '.join(PLAYER_TYPES)}."
                raise ValueError(msg)
        if self.ui not in UI_TYPES:
            msg = f"Unknown UI: {self.ui}. Choose from {', '.join(UI_TYPES)}."
            raise ValueError(msg)
        if self.max_score is not None and self.max_score < 1:
            raise ValueError("max_score must be positive")
        if self.think_delay < 0:
            raise ValueError("think_delay cannot be negative")
        if self.log_level.upper() not in LOG_LEVELS:
            msg = f"Unknown log level: {self.log_level}"
            raise ValueError(msg)
