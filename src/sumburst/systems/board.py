from __future__ import annotations

from sumburst.engine import GridEngine
from sumburst.events.bus import EVENT_MOUSE_PRESS, EVENT_TILE_CLICK, EventBus

# Arcade reports the right mouse button as 4.
MOUSE_BUTTON_RIGHT = 4


class BoardSystem:
    """Turns cell clicks into selection toggles on the engine."""

    def __init__(self, engine: GridEngine, event_bus: EventBus):
        self.engine = engine
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        tile_id = self.engine.tile_at(row, col)
        if tile_id is None:
            return
        self.engine.toggle_selection(tile_id)

    def on_mouse_press(self, sender, **kwargs):
        # Right-click drops the whole selection.
        if kwargs.get('button') != MOUSE_BUTTON_RIGHT:
            return
        self.engine.clear_selection(reason='right_click')
