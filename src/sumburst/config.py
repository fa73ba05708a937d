"""Gameplay configuration grouped into a single injectable value."""
from __future__ import annotations

from dataclasses import dataclass

from sumburst.constants import (
    GRID_COLS,
    GRID_ROWS,
    INITIAL_ROWS,
    LEVEL_SCORE_STEP,
    MAX_TILE_VALUE,
    MIN_TILE_VALUE,
    TARGET_BASE_MAX,
    TARGET_BASE_MIN,
    TIME_LIMIT,
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Grid dimensions and round rules.

    Defaults mirror ``sumburst.constants``; tests shrink the board or shorten
    the timer by passing their own instance to ``GridEngine``.
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    initial_rows: int = INITIAL_ROWS
    min_value: int = MIN_TILE_VALUE
    max_value: int = MAX_TILE_VALUE
    target_min: int = TARGET_BASE_MIN
    target_max: int = TARGET_BASE_MAX
    time_limit: int = TIME_LIMIT
    level_step: int = LEVEL_SCORE_STEP

    def __post_init__(self) -> None:
        if self.rows < 2:
            raise ValueError(f"rows must be at least 2, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be positive, got {self.cols}")
        if not 0 <= self.initial_rows < self.rows:
            raise ValueError(
                f"initial_rows must be in [0, {self.rows - 1}], got {self.initial_rows}"
            )
        if not 1 <= self.min_value <= self.max_value:
            raise ValueError(
                f"tile value range [{self.min_value}, {self.max_value}] is invalid"
            )
        if not 1 <= self.target_min <= self.target_max:
            raise ValueError(
                f"target range [{self.target_min}, {self.target_max}] is invalid"
            )
        if self.time_limit < 1:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if self.level_step < 1:
            raise ValueError(f"level_step must be positive, got {self.level_step}")

    @property
    def top_row(self) -> int:
        return 0

    @property
    def bottom_row(self) -> int:
        return self.rows - 1
