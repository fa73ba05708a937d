from sumburst.events.bus import EVENT_MOUSE_PRESS, EVENT_MOUSE_PRESS_RAW, EventBus
from sumburst.systems.mouse_throttle_system import MouseThrottleSystem
from sumburst.utils.input_throttle import MouseThrottle
from tests.helpers import EventRecorder


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_repeat_on_same_spot_is_dropped():
    clock = FakeClock()
    throttle = MouseThrottle(clock=clock)
    assert throttle.allow(10, 10, 1)
    clock.now += 0.05
    assert not throttle.allow(12, 11, 1)
    clock.now += 0.2
    assert throttle.allow(12, 11, 1)


def test_fast_press_elsewhere_or_other_button_allowed():
    clock = FakeClock()
    throttle = MouseThrottle(clock=clock)
    assert throttle.allow(10, 10, 1)
    assert throttle.allow(80, 10, 1)
    assert throttle.allow(80, 10, 4)
    assert throttle.last_sequence == 3


def test_block_rejects_until_elapsed():
    clock = FakeClock()
    throttle = MouseThrottle(clock=clock)
    throttle.block(0.2)
    assert not throttle.allow(10, 10, 1)
    clock.now += 0.25
    assert throttle.allow(10, 10, 1)


def test_reset_lifts_block():
    clock = FakeClock()
    throttle = MouseThrottle(clock=clock)
    throttle.block(5.0)
    throttle.reset()
    assert throttle.allow(10, 10, 1)


def test_system_forwards_presses_with_sequence_ids():
    clock = FakeClock()
    bus = EventBus()
    MouseThrottleSystem(bus, throttle=MouseThrottle(clock=clock))
    recorder = EventRecorder(bus, EVENT_MOUSE_PRESS)

    bus.emit(EVENT_MOUSE_PRESS_RAW, x="15", y=20, button=1, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=15, y=20, button=1, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=None, y=20, button=1)
    clock.now += 1.0
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=15, y=20, button=1, modifiers=0)

    presses = recorder.of(EVENT_MOUSE_PRESS)
    assert [p["press_id"] for p in presses] == [1, 2]
    assert presses[0]["x"] == 15.0
