from __future__ import annotations

from esper import World

from sumburst.components.game_state import GamePhase, GameState
from sumburst.components.round_state import HighScore, RoundState
from sumburst.components.selection import Selection
from sumburst.events.bus import EVENT_PHASE_CHANGED, EventBus


def _sanitize_press_id(value: int | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState resource not found")


def get_round_state(world: World) -> RoundState:
    for _, state in world.get_component(RoundState):
        return state
    raise RuntimeError("RoundState resource not found")


def get_selection(world: World) -> Selection:
    for _, selection in world.get_component(Selection):
        return selection
    raise RuntimeError("Selection resource not found")


def get_high_score(world: World) -> HighScore:
    for _, high_score in world.get_component(HighScore):
        return high_score
    raise RuntimeError("HighScore resource not found")


def set_game_phase(
    world: World,
    event_bus: EventBus,
    phase: GamePhase,
    *,
    input_guard_press_id: int | None = None,
) -> bool:
    """Update the global phase and emit a change event when it differs."""

    guard_id = _sanitize_press_id(input_guard_press_id)
    state = get_game_state(world)
    previous_phase = state.phase
    changed = previous_phase != phase
    if changed:
        state.phase = phase
    if changed or guard_id is not None:
        state.input_guard_press_id = guard_id
        event_bus.emit(
            EVENT_PHASE_CHANGED,
            previous_phase=previous_phase,
            new_phase=phase,
            input_guard_press_id=guard_id,
        )
    return changed
