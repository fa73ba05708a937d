from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (frame delta, seconds)
EVENT_TIMER_CHANGED = "timer_changed"              # payload: time_left=int, reason=str


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"  # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, press_id
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_TILE_CLICK = "tile_click"            # payload: row, col
EVENT_HUD_BUTTON = "hud_button"            # payload: action=str ("pause"|"home")


# ============================================================================
# SELECTION & BOARD
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: tile_id, row, col, value
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: tile_id, row, col, value
EVENT_SELECTION_CLEARED = "selection_cleared"      # payload: tile_ids=list[int], reason=str
EVENT_MATCH_CLEARED = "match_cleared"              # payload: tile_ids, positions=[(r,c),...], total=int, award=int
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=[{"tile_id","from","to"}]
EVENT_ROW_INSERTED = "row_inserted"                # payload: tile_ids=list[int], dropped=list[int], reason=str


# ============================================================================
# ROUND PROGRESS
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int
EVENT_TARGET_CHANGED = "target_changed"    # payload: target=int
EVENT_LEVEL_UP = "level_up"                # payload: level=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"            # payload: mode=PlayMode
EVENT_PHASE_CHANGED = "phase_changed"          # payload: previous_phase=GamePhase|None, new_phase=GamePhase
EVENT_PAUSE_CHANGED = "pause_changed"          # payload: paused=bool
EVENT_GAME_OVER = "game_over"                  # payload: score=int, high_score=int, new_record=bool


# ============================================================================
# MENU & UI
# ============================================================================
EVENT_MENU_MODE_SELECTED = "menu_mode_selected"    # payload: mode=PlayMode, press_id=int|None
EVENT_GAME_OVER_CHOICE = "game_over_choice"        # payload: action=str ("restart"|"menu")
