from __future__ import annotations

from typing import Callable

from esper import World

from sumburst.components.game_state import GamePhase
from sumburst.constants import KEY_ENTER, KEY_ESCAPE, WINDOW_HEIGHT, WINDOW_WIDTH
from sumburst.events.bus import (
    EVENT_GAME_OVER,
    EVENT_GAME_OVER_CHOICE,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PHASE_CHANGED,
    EventBus,
)
from sumburst.menu.components import GameOverTag, MenuAction, MenuButton
from sumburst.menu.factory import clear_game_over, spawn_game_over
from sumburst.utils.game_state import get_game_state

_CHOICES = {
    MenuAction.RESTART: "restart",
    MenuAction.MAIN_MENU: "menu",
}


class GameOverSystem:
    """Shows the result card when a round ends and reports the player's choice."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        screen_size_provider: Callable[[], tuple[float, float]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._screen_size_provider = screen_size_provider or (lambda: (float(WINDOW_WIDTH), float(WINDOW_HEIGHT)))
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)
        self.event_bus.subscribe(EVENT_PHASE_CHANGED, self._on_phase_changed)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self._on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self._on_key_press)

    def _on_game_over(self, sender, **payload) -> None:
        clear_game_over(self.world)
        width, height = self._screen_size_provider()
        spawn_game_over(
            self.world,
            width,
            height,
            score=int(payload.get("score", 0)),
            high_score=int(payload.get("high_score", 0)),
            new_record=bool(payload.get("new_record", False)),
        )

    def _on_phase_changed(self, sender, **payload) -> None:
        if payload.get("new_phase") != GamePhase.GAME_OVER:
            clear_game_over(self.world)

    def _on_mouse_press(self, sender, **payload) -> None:
        if not self._active():
            return
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None or payload.get("button") != 1:
            return
        for ent, button in self.world.get_component(MenuButton):
            if not self.world.has_component(ent, GameOverTag):
                continue
            if button.enabled and button.contains(float(x), float(y)):
                self._choose(button.action, press_id=payload.get("press_id"))
                return

    def _on_key_press(self, sender, **payload) -> None:
        if not self._active():
            return
        symbol = payload.get("symbol")
        if symbol == KEY_ENTER:
            self._choose(MenuAction.RESTART)
        elif symbol == KEY_ESCAPE:
            self._choose(MenuAction.MAIN_MENU)

    def _choose(self, action: MenuAction, *, press_id: int | None = None) -> None:
        choice = _CHOICES.get(action)
        if choice is None:
            return
        self.event_bus.emit(EVENT_GAME_OVER_CHOICE, action=choice, press_id=press_id)

    def _active(self) -> bool:
        return get_game_state(self.world).phase == GamePhase.GAME_OVER
