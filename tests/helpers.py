from __future__ import annotations

import random
from typing import Any, Dict, List, Mapping, Tuple

from sumburst.components.game_state import PlayMode
from sumburst.config import GameConfig
from sumburst.engine import GridEngine
from sumburst.events.bus import EventBus
from sumburst.factories.tiles import spawn_tile
from sumburst.systems.board_ops import clear_tiles
from sumburst.utils.game_state import get_round_state

Position = Tuple[int, int]


class DummyWindow:
    def __init__(self, width=540, height=860):
        self.width = width
        self.height = height


class EventRecorder:
    """Collects payloads of the named events in emission order."""

    def __init__(self, bus: EventBus, *names: str):
        self.events: List[Tuple[str, Dict[str, Any]]] = []
        for name in names:
            bus.subscribe(name, self._handler(name))

    def _handler(self, name: str):
        def handler(sender, **payload):
            self.events.append((name, payload))
        return handler

    def of(self, name: str) -> List[Dict[str, Any]]:
        return [payload for event, payload in self.events if event == name]

    def count(self, name: str) -> int:
        return len(self.of(name))


def make_engine(
    mode: PlayMode | str | None = None,
    *,
    seed: int = 7,
    config: GameConfig | None = None,
    bus: EventBus | None = None,
) -> GridEngine:
    engine = GridEngine(bus or EventBus(), config, rng=random.Random(seed))
    if mode is not None:
        engine.start_game(mode)
    return engine


def layout_grid(engine: GridEngine, cells: Mapping[Position, int]) -> Dict[Position, int]:
    """Replace every tile on the board with the given values; return ids by position."""
    clear_tiles(engine.world)
    return {
        (row, col): spawn_tile(engine.world, row, col, value)
        for (row, col), value in cells.items()
    }


def set_target(engine: GridEngine, target: int) -> None:
    get_round_state(engine.world).target = target
