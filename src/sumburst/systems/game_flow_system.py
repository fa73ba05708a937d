"""High-level coordinator for phase transitions."""
from __future__ import annotations

import logging
from typing import Callable

from sumburst.components.game_state import GamePhase, PlayMode
from sumburst.constants import KEY_ESCAPE, KEY_P, KEY_SPACE, WINDOW_HEIGHT, WINDOW_WIDTH
from sumburst.engine import GridEngine
from sumburst.events.bus import (
    EVENT_GAME_OVER_CHOICE,
    EVENT_HUD_BUTTON,
    EVENT_KEY_PRESS,
    EVENT_MENU_MODE_SELECTED,
    EVENT_PHASE_CHANGED,
    EventBus,
)
from sumburst.menu.factory import clear_menu, spawn_main_menu

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Routes menu, HUD and game-over choices to the engine."""

    def __init__(
        self,
        engine: GridEngine,
        event_bus: EventBus,
        *,
        screen_size_provider: Callable[[], tuple[float, float]] | None = None,
    ) -> None:
        self.engine = engine
        self.world = engine.world
        self.event_bus = event_bus
        self._screen_size_provider = screen_size_provider or (lambda: (float(WINDOW_WIDTH), float(WINDOW_HEIGHT)))

        self.event_bus.subscribe(EVENT_MENU_MODE_SELECTED, self._on_mode_selected)
        self.event_bus.subscribe(EVENT_HUD_BUTTON, self._on_hud_button)
        self.event_bus.subscribe(EVENT_GAME_OVER_CHOICE, self._on_game_over_choice)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self._on_key_press)
        self.event_bus.subscribe(EVENT_PHASE_CHANGED, self._on_phase_changed)

        if self.engine.phase == GamePhase.MENU:
            self._show_menu()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_mode_selected(self, sender, **payload) -> None:
        if self.engine.phase != GamePhase.MENU:
            return
        mode = PlayMode.parse(payload.get("mode", PlayMode.CLASSIC))
        self._start(mode, press_id=payload.get("press_id"))

    def _on_hud_button(self, sender, **payload) -> None:
        if self.engine.phase != GamePhase.PLAYING:
            return
        action = payload.get("action")
        if action == "pause":
            self.engine.toggle_pause()
        elif action == "home":
            self.engine.return_to_menu()

    def _on_game_over_choice(self, sender, **payload) -> None:
        if self.engine.phase != GamePhase.GAME_OVER:
            return
        action = payload.get("action")
        if action == "restart":
            self._start(self.engine.mode, press_id=payload.get("press_id"))
        elif action == "menu":
            self.engine.return_to_menu()

    def _on_key_press(self, sender, **payload) -> None:
        if self.engine.phase != GamePhase.PLAYING:
            return
        symbol = payload.get("symbol")
        if symbol in (KEY_P, KEY_SPACE, KEY_ESCAPE):
            self.engine.toggle_pause()

    def _on_phase_changed(self, sender, **payload) -> None:
        new_phase = payload.get("new_phase")
        if new_phase == GamePhase.MENU:
            self._show_menu()
        else:
            clear_menu(self.world)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _start(self, mode: PlayMode, *, press_id: int | None = None) -> None:
        logger.debug("Starting %s round from %s", mode.value, self.engine.phase.value)
        self.engine.start_game(mode, press_id=press_id)

    def _show_menu(self) -> None:
        clear_menu(self.world)
        width, height = self._screen_size_provider()
        spawn_main_menu(self.world, width, height, best_score=self.engine.high_score)
