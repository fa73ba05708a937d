from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from esper import World

from sumburst.components.board import Board
from sumburst.components.board_position import BoardPosition
from sumburst.components.tile import NumberTile

Position = Tuple[int, int]


@dataclass(slots=True)
class GravityMove:
    tile_id: int
    source: Position
    target: Position


def board_dimensions(world: World) -> Tuple[int, int]:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    raise RuntimeError("Board definition not found")


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def is_tile(world: World, tile_id: int) -> bool:
    if not world.entity_exists(tile_id):
        return False
    return world.has_component(tile_id, NumberTile) and world.has_component(tile_id, BoardPosition)


def tile_value(world: World, tile_id: int) -> int:
    return world.component_for_entity(tile_id, NumberTile).value


def tile_position(world: World, tile_id: int) -> Position:
    position = world.component_for_entity(tile_id, BoardPosition)
    return position.row, position.col


def tile_ids(world: World) -> List[int]:
    return [entity for entity, _ in world.get_components(NumberTile, BoardPosition)]


def tile_map(world: World) -> Dict[Position, int]:
    """Return mapping of occupied positions to tile ids."""
    return {
        (position.row, position.col): entity
        for entity, (_, position) in world.get_components(NumberTile, BoardPosition)
    }


def value_map(world: World) -> Dict[Position, int]:
    """Return mapping of occupied positions to tile values."""
    return {
        (position.row, position.col): tile.value
        for _, (tile, position) in world.get_components(NumberTile, BoardPosition)
    }


def sum_values(world: World, ids: Iterable[int]) -> int:
    total = 0
    for tile_id in ids:
        if is_tile(world, tile_id):
            total += tile_value(world, tile_id)
    return total


def total_value(world: World) -> int:
    return sum(tile.value for _, tile in world.get_component(NumberTile))


def column_sums(world: World) -> List[int]:
    _, cols = board_dimensions(world)
    sums = [0] * cols
    for (_, col), value in value_map(world).items():
        sums[col] += value
    return sums


def row_occupied(world: World, row: int) -> bool:
    return any(position.row == row for _, position in world.get_component(BoardPosition))


def remove_tiles(world: World, ids: Iterable[int]) -> List[Tuple[int, Position]]:
    """Delete the given tiles and return (id, position) for each one removed."""
    removed: List[Tuple[int, Position]] = []
    for tile_id in ids:
        if not is_tile(world, tile_id):
            continue
        removed.append((tile_id, tile_position(world, tile_id)))
        world.delete_entity(tile_id, immediate=True)
    return removed


def clear_tiles(world: World) -> int:
    ids = tile_ids(world)
    for tile_id in ids:
        world.delete_entity(tile_id, immediate=True)
    return len(ids)


def compute_gravity_moves(world: World) -> List[GravityMove]:
    """Plan the fall of every tile to the lowest open cells of its column.

    Tiles keep their relative vertical order: each column is stable-sorted by
    original row, bottom first, and packed against the bottom row.
    """
    rows, cols = board_dimensions(world)
    columns: List[List[Tuple[int, int]]] = [[] for _ in range(cols)]
    for (row, col), tile_id in tile_map(world).items():
        columns[col].append((row, tile_id))
    moves: List[GravityMove] = []
    for col, entries in enumerate(columns):
        entries.sort(key=lambda entry: entry[0], reverse=True)
        for depth, (row, tile_id) in enumerate(entries):
            target_row = rows - 1 - depth
            if target_row != row:
                moves.append(GravityMove(tile_id=tile_id, source=(row, col), target=(target_row, col)))
    return moves


def apply_gravity_moves(world: World, moves: List[GravityMove]) -> None:
    for move in moves:
        position = world.component_for_entity(move.tile_id, BoardPosition)
        position.row, position.col = move.target


def apply_gravity(world: World) -> List[GravityMove]:
    moves = compute_gravity_moves(world)
    if moves:
        apply_gravity_moves(world, moves)
    return moves


def is_settled(world: World) -> bool:
    """True when no column has an empty cell beneath a filled one."""
    rows, cols = board_dimensions(world)
    occupied = set(tile_map(world))
    for col in range(cols):
        seen_gap = False
        for row in range(rows - 1, -1, -1):
            if (row, col) in occupied:
                if seen_gap:
                    return False
            else:
                seen_gap = True
    return True


def shift_rows_up(world: World) -> List[int]:
    """Move every tile one row up; tiles already in row 0 are deleted.

    Returns the ids of the deleted tiles.
    """
    dropped: List[int] = []
    for entity, position in list(world.get_component(BoardPosition)):
        if position.row <= 0:
            dropped.append(entity)
        else:
            position.row -= 1
    for entity in dropped:
        world.delete_entity(entity, immediate=True)
    return dropped
