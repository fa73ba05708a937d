from sumburst.events.bus import EVENT_ROW_INSERTED, EVENT_TICK
from sumburst.systems.round_timer_system import RoundTimerSystem
from tests.helpers import EventRecorder, make_engine


def build(mode="time"):
    engine = make_engine(mode)
    system = RoundTimerSystem(engine, engine.event_bus)
    recorder = EventRecorder(engine.event_bus, EVENT_ROW_INSERTED)
    return engine, system, recorder


def test_ten_seconds_insert_exactly_one_row():
    engine, _, recorder = build()
    for _ in range(10):
        engine.event_bus.emit(EVENT_TICK, dt=1.0)

    assert recorder.count(EVENT_ROW_INSERTED) == 1
    assert recorder.of(EVENT_ROW_INSERTED)[0]["reason"] == "timer"
    assert engine.time_left == 10


def test_partial_frames_accumulate_into_seconds():
    engine, system, _ = build()
    for _ in range(5):
        engine.event_bus.emit(EVENT_TICK, dt=0.25)

    assert engine.time_left == 9
    assert system.elapsed == 0.25


def test_large_frame_ticks_several_seconds():
    engine, _, _ = build()
    engine.event_bus.emit(EVENT_TICK, dt=3.5)
    assert engine.time_left == 7


def test_pause_stops_countdown_and_drops_partial_second():
    engine, system, _ = build()
    engine.event_bus.emit(EVENT_TICK, dt=0.75)
    engine.set_paused(True)
    assert system.elapsed == 0.0

    engine.event_bus.emit(EVENT_TICK, dt=5.0)
    assert engine.time_left == 10

    engine.set_paused(False)
    engine.event_bus.emit(EVENT_TICK, dt=0.5)
    assert engine.time_left == 10


def test_classic_mode_ignores_frames():
    engine, system, recorder = build("classic")
    for _ in range(20):
        engine.event_bus.emit(EVENT_TICK, dt=1.0)
    assert recorder.count(EVENT_ROW_INSERTED) == 0
    assert system.elapsed == 0.0


def test_menu_ignores_frames():
    engine, system, _ = build(None)
    engine.event_bus.emit(EVENT_TICK, dt=2.0)
    assert engine.time_left == 10
    assert system.elapsed == 0.0


def test_bad_dt_is_ignored():
    engine, _, _ = build()
    engine.event_bus.emit(EVENT_TICK, dt="soon")
    engine.event_bus.emit(EVENT_TICK, dt=-1.0)
    engine.event_bus.emit(EVENT_TICK)
    assert engine.time_left == 10


def test_engine_tick_counts_down_then_inserts_row():
    engine = make_engine("time")
    recorder = EventRecorder(engine.event_bus, EVENT_ROW_INSERTED)

    results = [engine.tick() for _ in range(10)]

    assert results == [False] * 9 + [True]
    assert recorder.count(EVENT_ROW_INSERTED) == 1
    assert engine.time_left == 10


def test_engine_tick_is_noop_in_classic():
    engine = make_engine("classic")
    assert engine.tick() is False
    assert engine.time_left == 10
