"""Immutable view of a round, consumed by the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from sumburst.components.game_state import GamePhase, PlayMode
from sumburst.systems.board_ops import board_dimensions, sum_values, tile_map, tile_value
from sumburst.utils.game_state import get_game_state, get_high_score, get_round_state, get_selection


@dataclass(frozen=True, slots=True)
class TileView:
    tile_id: int
    value: int
    row: int
    col: int
    selected: bool = False


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    rows: int
    cols: int
    grid: Tuple[Tuple[Optional[TileView], ...], ...]
    selection: Tuple[int, ...]
    current_sum: int
    target: int
    score: int
    level: int
    mode: PlayMode
    time_left: int
    phase: GamePhase
    paused: bool
    high_score: int

    def tile_at(self, row: int, col: int) -> Optional[TileView]:
        return self.grid[row][col]

    def tiles(self) -> Tuple[TileView, ...]:
        return tuple(tile for row in self.grid for tile in row if tile is not None)

    @property
    def over_target(self) -> bool:
        return self.current_sum > self.target

    @property
    def in_danger(self) -> bool:
        """The row below the top is occupied, so the next insertion ends the game."""
        return self.rows > 1 and any(tile is not None for tile in self.grid[1])


def build_snapshot(world: World) -> GridSnapshot:
    rows, cols = board_dimensions(world)
    state = get_game_state(world)
    round_state = get_round_state(world)
    selection = get_selection(world)
    selected = set(selection.tile_ids)
    occupied = tile_map(world)
    grid = tuple(
        tuple(
            TileView(
                tile_id=occupied[(row, col)],
                value=tile_value(world, occupied[(row, col)]),
                row=row,
                col=col,
                selected=occupied[(row, col)] in selected,
            )
            if (row, col) in occupied
            else None
            for col in range(cols)
        )
        for row in range(rows)
    )
    return GridSnapshot(
        rows=rows,
        cols=cols,
        grid=grid,
        selection=tuple(selection.tile_ids),
        current_sum=sum_values(world, selection.tile_ids),
        target=round_state.target,
        score=round_state.score,
        level=round_state.level,
        mode=round_state.mode,
        time_left=round_state.time_left,
        phase=state.phase,
        paused=state.paused,
        high_score=get_high_score(world).best,
    )
