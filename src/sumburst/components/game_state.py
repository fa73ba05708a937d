"""Game state resource describing the active phase of play."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GamePhase(Enum):
    """High-level phases that drive which systems run."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class PlayMode(Enum):
    """Rule set for the current round."""
    CLASSIC = "classic"
    TIME = "time"

    @classmethod
    def parse(cls, value: "PlayMode | str") -> "PlayMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown play mode '{value}'") from None


@dataclass
class GameState:
    """Singleton component storing the current phase and pause flag."""
    phase: GamePhase = GamePhase.MENU
    paused: bool = False
    input_guard_press_id: Optional[int] = None
