from dataclasses import dataclass

from sumburst.components.game_state import PlayMode


@dataclass(slots=True)
class RoundState:
    """Target, score and timer of the round in progress."""
    mode: PlayMode = PlayMode.CLASSIC
    target: int = 0
    score: int = 0
    level: int = 1
    time_left: int = 0


@dataclass(slots=True)
class HighScore:
    """Best score of the process lifetime; survives restarts, not relaunches."""
    best: int = 0
