"""Input handling for the ECS-driven main menu."""
from esper import World

from sumburst.components.game_state import GamePhase, PlayMode
from sumburst.constants import KEY_ENTER, KEY_T
from sumburst.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MENU_MODE_SELECTED,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from sumburst.menu.components import MenuAction, MenuButton, MenuTag
from sumburst.utils.game_state import get_game_state

_ACTION_MODES = {
    MenuAction.CLASSIC: PlayMode.CLASSIC,
    MenuAction.TIME_ATTACK: PlayMode.TIME,
}


class MenuInputSystem:
    """Processes input events while the game is in the menu phase."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        press_id = payload.get("press_id")
        try:
            press_id_int = int(press_id) if press_id is not None else None
        except (TypeError, ValueError):
            press_id_int = None
        self.handle_mouse_press(float(x), float(y), int(button), press_id_int)

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self.handle_key_press(int(symbol), int(payload.get("modifiers") or 0))

    def handle_mouse_press(
        self,
        x: float,
        y: float,
        button: int,
        press_id: int | None = None,
    ) -> None:
        """Start a game when a mode button is clicked."""
        if not self._in_menu():
            return
        for ent, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled or not self.world.has_component(ent, MenuTag):
                continue
            if menu_button.contains(x, y):
                self._activate_action(menu_button.action, press_id=press_id)
                return

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        """Enter starts classic mode, T starts time attack."""
        if not self._in_menu():
            return
        if symbol == KEY_ENTER:
            self._activate_action(MenuAction.CLASSIC)
        elif symbol == KEY_T:
            self._activate_action(MenuAction.TIME_ATTACK)

    def _activate_action(self, action: MenuAction, *, press_id: int | None = None) -> None:
        mode = _ACTION_MODES.get(action)
        if mode is None:
            return
        self._event_bus.emit(EVENT_MENU_MODE_SELECTED, mode=mode, press_id=press_id)

    def _in_menu(self) -> bool:
        return get_game_state(self.world).phase == GamePhase.MENU
