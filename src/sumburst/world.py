import random

from esper import World
from sumburst.components.board import Board
from sumburst.components.game_state import GamePhase, GameState
from sumburst.components.round_state import HighScore, RoundState
from sumburst.components.selection import Selection
from sumburst.config import GameConfig


def create_world(
    config: GameConfig | None = None,
    *,
    initial_phase: GamePhase = GamePhase.MENU,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the round resources and an empty board.

    The returned world is private to its caller; nothing here is module level.
    """
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    # Single state entity holding the round resources.
    world.create_entity(
        GameState(phase=initial_phase),
        RoundState(time_left=config.time_limit),
        Selection(),
        HighScore(),
    )
    world.create_entity(Board(rows=config.rows, cols=config.cols))
    return world
