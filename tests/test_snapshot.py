from sumburst.components.game_state import GamePhase, PlayMode
from tests.helpers import layout_grid, make_engine, set_target


def test_snapshot_reflects_round():
    engine = make_engine("time")
    set_target(engine, 15)
    ids = layout_grid(engine, {(9, 0): 4, (9, 1): 6, (8, 1): 2})
    engine.toggle_selection(ids[(9, 0)])
    engine.toggle_selection(ids[(8, 1)])

    snapshot = engine.snapshot()

    assert (snapshot.rows, snapshot.cols) == (10, 6)
    assert snapshot.mode == PlayMode.TIME
    assert snapshot.phase == GamePhase.PLAYING
    assert snapshot.target == 15
    assert snapshot.current_sum == 6
    assert snapshot.selection == (ids[(9, 0)], ids[(8, 1)])
    assert not snapshot.over_target
    assert snapshot.tile_at(9, 1).value == 6
    assert snapshot.tile_at(9, 1).selected is False
    assert snapshot.tile_at(9, 0).selected is True
    assert snapshot.tile_at(0, 0) is None
    assert len(snapshot.tiles()) == 3


def test_snapshot_is_detached_from_engine():
    engine = make_engine("classic")
    snapshot = engine.snapshot()
    engine.insert_row()
    assert len(snapshot.tiles()) == 24
    assert len(engine.snapshot().tiles()) == 30


def test_danger_flag_tracks_second_row():
    engine = make_engine("classic")
    assert not engine.snapshot().in_danger
    layout_grid(engine, {(1, 4): 3})
    assert engine.snapshot().in_danger
