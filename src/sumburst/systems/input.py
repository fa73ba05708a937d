from sumburst.components.game_state import GamePhase
from sumburst.events.bus import (
    EventBus,
    EVENT_HUD_BUTTON,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
)
from sumburst.systems.board_ops import board_dimensions
from sumburst.ui.layout import compute_board_geometry, hud_button_at
from sumburst.utils.game_state import get_game_state

MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Maps left clicks during play to HUD buttons or board cells."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return
        # The press that started the round must not also pick a tile.
        press_id = kwargs.get('press_id')
        if press_id is not None and press_id == state.input_guard_press_id:
            return

        action = hud_button_at(self.window.width, self.window.height, x, y)
        if action is not None:
            self.event_bus.emit(EVENT_HUD_BUTTON, action=action)
            return

        geometry = compute_board_geometry(self.window.width, self.window.height, *board_dimensions(self.world))
        cell = geometry.cell_at(x, y)
        if cell is None:
            return
        if state.paused:
            # Clicking the paused board resumes play.
            self.event_bus.emit(EVENT_HUD_BUTTON, action='pause')
            return
        row, col = cell
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

