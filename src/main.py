"""Entry point for the Sumburst number puzzle.

Sets up the engine, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, run, set_background_color

from sumburst.components.game_state import GamePhase, PlayMode
from sumburst.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from sumburst.engine import GridEngine
from sumburst.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_TICK,
    EventBus,
)
from sumburst.menu.input_system import MenuInputSystem
from sumburst.menu.render_system import MenuRenderSystem
from sumburst.rendering.palette import PAPER
from sumburst.systems.board import BoardSystem
from sumburst.systems.game_flow_system import GameFlowSystem
from sumburst.systems.game_over_system import GameOverSystem
from sumburst.systems.input import InputSystem
from sumburst.systems.mouse_throttle_system import MouseThrottleSystem
from sumburst.systems.render import RenderSystem
from sumburst.systems.round_timer_system import RoundTimerSystem

logger = logging.getLogger(__name__)


class SumburstWindow(Window):
    def __init__(self, *, rng: random.Random | None = None, fullscreen: bool = False):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.engine = GridEngine(self.event_bus, rng=rng)
        self.world = self.engine.world
        screen_size = lambda: (float(self.width), float(self.height))

        # Input systems
        self.mouse_throttle_system = MouseThrottleSystem(self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)

        # Round systems
        self.board_system = BoardSystem(self.engine, self.event_bus)
        self.round_timer_system = RoundTimerSystem(self.engine, self.event_bus)
        self.game_over_system = GameOverSystem(self.world, self.event_bus, screen_size_provider=screen_size)
        self.game_flow_system = GameFlowSystem(self.engine, self.event_bus, screen_size_provider=screen_size)

        # Rendering systems
        self.menu_render_system = MenuRenderSystem(self.world, self)
        self.render_system = RenderSystem(self.engine, self)

        set_background_color(PAPER)
        if fullscreen:
            self.set_fullscreen(True)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        if self.engine.phase == GamePhase.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Select numbers that add up to the target.")
    parser.add_argument("--mode", choices=[mode.value for mode in PlayMode], default=None,
                        help="skip the menu and start a round in this mode")
    parser.add_argument("--seed", type=int, default=None, help="seed for tile and target generation")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--fullscreen", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    window = SumburstWindow(rng=rng, fullscreen=args.fullscreen)
    if args.mode is not None:
        logger.info("Starting directly in %s mode", args.mode)
        window.engine.start_game(args.mode)
    run()

if __name__ == "__main__":
    main()
