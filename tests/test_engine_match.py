from sumburst.components.game_state import PlayMode
from sumburst.events.bus import (
    EVENT_GRAVITY_APPLIED,
    EVENT_LEVEL_UP,
    EVENT_MATCH_CLEARED,
    EVENT_ROW_INSERTED,
    EVENT_SCORE_CHANGED,
    EVENT_TARGET_CHANGED,
)
from sumburst.systems.board_ops import is_settled, is_tile, row_occupied, tile_ids, tile_position
from sumburst.utils.game_state import get_round_state
from tests.helpers import EventRecorder, layout_grid, make_engine, set_target


def test_three_plus_seven_hits_ten():
    engine = make_engine("classic")
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 3, (9, 1): 7, (9, 2): 1})
    recorder = EventRecorder(engine.event_bus, EVENT_MATCH_CLEARED, EVENT_SCORE_CHANGED)

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert engine.score == 20
    assert not is_tile(engine.world, ids[(9, 0)])
    assert not is_tile(engine.world, ids[(9, 1)])
    assert engine.selected_ids == []
    match = recorder.of(EVENT_MATCH_CLEARED)[0]
    assert match["award"] == 20
    assert match["total"] == 10
    assert sorted(match["positions"]) == [(9, 0), (9, 1)]
    assert recorder.of(EVENT_SCORE_CHANGED)[-1] == {"score": 20, "delta": 20}


def test_award_is_target_times_count():
    engine = make_engine("time")
    set_target(engine, 12)
    ids = layout_grid(engine, {(9, 0): 2, (9, 1): 3, (9, 2): 4, (9, 3): 3, (9, 4): 9})

    for pos in [(9, 0), (9, 1), (9, 2), (9, 3)]:
        engine.toggle_selection(ids[pos])

    assert engine.score == 48
    assert [tile for tile in tile_ids(engine.world)] == [ids[(9, 4)]]


def test_classic_match_inserts_row_after_gravity():
    engine = make_engine("classic")
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 3, (9, 1): 7, (8, 1): 5, (9, 2): 1})
    recorder = EventRecorder(engine.event_bus, EVENT_ROW_INSERTED)

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    # (8,1) fell into (9,1), then the new row pushed everything up one.
    assert tile_position(engine.world, ids[(8, 1)]) == (8, 1)
    assert tile_position(engine.world, ids[(9, 2)]) == (8, 2)
    inserted = recorder.of(EVENT_ROW_INSERTED)
    assert len(inserted) == 1
    assert inserted[0]["reason"] == "match"
    assert [tile_position(engine.world, t) for t in inserted[0]["tile_ids"]] == [(9, c) for c in range(6)]


def test_time_match_resets_timer_without_row():
    engine = make_engine("time")
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 3, (9, 1): 7, (8, 1): 5})
    recorder = EventRecorder(engine.event_bus, EVENT_ROW_INSERTED)
    engine.tick()
    engine.tick()
    assert engine.time_left == 8

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert engine.time_left == 10
    assert recorder.count(EVENT_ROW_INSERTED) == 0
    assert tile_position(engine.world, ids[(8, 1)]) == (9, 1)
    assert len(tile_ids(engine.world)) == 1


def test_gravity_settles_and_keeps_column_order():
    engine = make_engine("time")
    set_target(engine, 17)
    ids = layout_grid(engine, {(6, 1): 1, (7, 1): 9, (8, 1): 4, (9, 1): 8, (9, 0): 2})
    recorder = EventRecorder(engine.event_bus, EVENT_GRAVITY_APPLIED)

    engine.toggle_selection(ids[(7, 1)])
    engine.toggle_selection(ids[(9, 1)])

    assert tile_position(engine.world, ids[(8, 1)]) == (9, 1)
    assert tile_position(engine.world, ids[(6, 1)]) == (8, 1)
    assert tile_position(engine.world, ids[(9, 0)]) == (9, 0)
    assert is_settled(engine.world)
    moves = recorder.of(EVENT_GRAVITY_APPLIED)[0]["moves"]
    assert {move["tile_id"] for move in moves} == {ids[(8, 1)], ids[(6, 1)]}


def test_match_rolls_new_target():
    engine = make_engine("time", seed=3)
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 5, (9, 1): 5})
    recorder = EventRecorder(engine.event_bus, EVENT_TARGET_CHANGED)

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert len(recorder.of(EVENT_TARGET_CHANGED)) == 1
    assert 10 <= engine.target <= 19
    assert recorder.of(EVENT_TARGET_CHANGED)[0]["target"] == engine.target


def test_level_rises_when_score_crosses_step():
    engine = make_engine("time")
    get_round_state(engine.world).score = 490
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 4, (9, 1): 6})
    recorder = EventRecorder(engine.event_bus, EVENT_LEVEL_UP)

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert engine.score == 510
    assert engine.level == 2
    assert recorder.of(EVENT_LEVEL_UP) == [{"level": 2}]


def test_level_stays_below_step():
    engine = make_engine("time")
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 4, (9, 1): 6})

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert engine.level == 1


def test_classic_match_can_end_the_game():
    engine = make_engine("classic")
    set_target(engine, 10)
    ids = layout_grid(engine, {(9, 0): 3, (9, 1): 7, (1, 5): 2, (2, 5): 2, (3, 5): 2,
                               (4, 5): 2, (5, 5): 2, (6, 5): 2, (7, 5): 2, (8, 5): 2, (9, 5): 2})

    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(9, 1)])

    assert engine.score == 20
    assert row_occupied(engine.world, 0)
    assert engine.phase.value == "gameover"
    assert engine.high_score == 20
    assert engine.mode == PlayMode.CLASSIC
