"""Random tile and target generation.

Every helper takes the random source explicitly so tests can feed seeded or
scripted generators.
"""
from __future__ import annotations

import random
from typing import List

from esper import World

from sumburst.components.board_position import BoardPosition
from sumburst.components.tile import NumberTile
from sumburst.constants import (
    GRID_COLS,
    MAX_TILE_VALUE,
    MIN_TILE_VALUE,
    TARGET_BASE_MAX,
    TARGET_BASE_MIN,
)


def roll_tile_value(
    rng: random.Random,
    *,
    min_value: int = MIN_TILE_VALUE,
    max_value: int = MAX_TILE_VALUE,
) -> int:
    return rng.randint(min_value, max_value)


def roll_row_values(
    rng: random.Random,
    cols: int = GRID_COLS,
    *,
    min_value: int = MIN_TILE_VALUE,
    max_value: int = MAX_TILE_VALUE,
) -> List[int]:
    return [roll_tile_value(rng, min_value=min_value, max_value=max_value) for _ in range(cols)]


def spawn_tile(world: World, row: int, col: int, value: int) -> int:
    """Create a tile entity at (row, col) and return its id."""
    return world.create_entity(NumberTile(value=value), BoardPosition(row=row, col=col))


def create_row(
    world: World,
    row: int,
    rng: random.Random,
    cols: int = GRID_COLS,
    *,
    min_value: int = MIN_TILE_VALUE,
    max_value: int = MAX_TILE_VALUE,
) -> List[int]:
    """Spawn a full row of freshly identified tiles and return their ids, left to right.

    The world only serves as the id source; the cells are not checked for
    occupants, callers make room first.
    """
    values = roll_row_values(rng, cols, min_value=min_value, max_value=max_value)
    return [spawn_tile(world, row, col, value) for col, value in enumerate(values)]


def generate_target(
    level: int,
    rng: random.Random,
    *,
    base_min: int = TARGET_BASE_MIN,
    base_max: int = TARGET_BASE_MAX,
) -> int:
    # Not checked against the sums reachable on the current board.
    return rng.randint(base_min, base_max) + level // 2
