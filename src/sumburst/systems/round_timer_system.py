from __future__ import annotations

from sumburst.components.game_state import PlayMode
from sumburst.engine import GridEngine
from sumburst.events.bus import (
    EVENT_GAME_STARTED,
    EVENT_PAUSE_CHANGED,
    EVENT_PHASE_CHANGED,
    EVENT_TICK,
    EventBus,
)

SECOND = 1.0


class RoundTimerSystem:
    """Feeds whole seconds of frame time into the time-mode countdown.

    Partial seconds are discarded whenever the countdown stops: on pause, on
    any phase change and when a new game starts.
    """

    def __init__(self, engine: GridEngine, event_bus: EventBus):
        self.engine = engine
        self.event_bus = event_bus
        self.elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_PAUSE_CHANGED, self._reset)
        self.event_bus.subscribe(EVENT_PHASE_CHANGED, self._reset)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self._reset)

    def running(self) -> bool:
        return self.engine.is_active() and self.engine.mode == PlayMode.TIME

    def on_tick(self, sender, **kwargs):
        if not self.running():
            self.elapsed = 0.0
            return
        try:
            dt = float(kwargs.get('dt', 0.0))
        except (TypeError, ValueError):
            return
        if dt <= 0.0:
            return
        self.elapsed += dt
        while self.elapsed >= SECOND and self.running():
            self.elapsed -= SECOND
            self.engine.tick()

    def _reset(self, sender, **kwargs):
        self.elapsed = 0.0
