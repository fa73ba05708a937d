"""Round state machine for the sum-matching grid."""
from __future__ import annotations

import logging
import random
from enum import Enum

from esper import World

from sumburst.components.game_state import GamePhase, PlayMode
from sumburst.config import GameConfig
from sumburst.events.bus import (
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_GRAVITY_APPLIED,
    EVENT_LEVEL_UP,
    EVENT_MATCH_CLEARED,
    EVENT_PAUSE_CHANGED,
    EVENT_ROW_INSERTED,
    EVENT_SCORE_CHANGED,
    EVENT_SELECTION_CLEARED,
    EVENT_TARGET_CHANGED,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EVENT_TIMER_CHANGED,
    EventBus,
)
from sumburst.factories.tiles import create_row, generate_target
from sumburst.snapshot import GridSnapshot, build_snapshot
from sumburst.systems.board_ops import (
    apply_gravity,
    clear_tiles,
    get_entity_at,
    is_tile,
    remove_tiles,
    row_occupied,
    shift_rows_up,
    sum_values,
    tile_position,
    tile_value,
)
from sumburst.utils.game_state import (
    get_game_state,
    get_high_score,
    get_round_state,
    get_selection,
    set_game_phase,
)
from sumburst.world import create_world

logger = logging.getLogger(__name__)


class SelectionOutcome(Enum):
    MATCHED = "matched"
    OVERFLOW = "overflow"
    PENDING = "pending"
    IGNORED = "ignored"


class GridEngine:
    """Owns one board and its round state; every mutation goes through here.

    The engine keeps its resources in a private esper ``World`` and announces
    each transition on ``event_bus``. Gameplay calls made in the wrong phase,
    while paused, or with unknown tile ids are no-ops.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        world: World | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.world = world or create_world(self.config, rng=self.rng)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return get_game_state(self.world).phase

    @property
    def paused(self) -> bool:
        return get_game_state(self.world).paused

    @property
    def mode(self) -> PlayMode:
        return get_round_state(self.world).mode

    @property
    def target(self) -> int:
        return get_round_state(self.world).target

    @property
    def score(self) -> int:
        return get_round_state(self.world).score

    @property
    def level(self) -> int:
        return get_round_state(self.world).level

    @property
    def time_left(self) -> int:
        return get_round_state(self.world).time_left

    @property
    def high_score(self) -> int:
        return get_high_score(self.world).best

    @property
    def selected_ids(self) -> list[int]:
        return list(get_selection(self.world).tile_ids)

    @property
    def current_sum(self) -> int:
        return sum_values(self.world, get_selection(self.world).tile_ids)

    def is_active(self) -> bool:
        """True while a round is running and not paused."""
        state = get_game_state(self.world)
        return state.phase == GamePhase.PLAYING and not state.paused

    def tile_at(self, row: int, col: int) -> int | None:
        return get_entity_at(self.world, row, col)

    def snapshot(self) -> GridSnapshot:
        return build_snapshot(self.world)

    # ------------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------------

    def start_game(self, mode: PlayMode | str = PlayMode.CLASSIC, *, press_id: int | None = None) -> None:
        mode = PlayMode.parse(mode)
        cfg = self.config
        clear_tiles(self.world)
        for row in range(cfg.rows - cfg.initial_rows, cfg.rows):
            self._spawn_row(row)

        round_state = get_round_state(self.world)
        round_state.mode = mode
        round_state.score = 0
        round_state.level = 1
        round_state.time_left = cfg.time_limit
        round_state.target = self._roll_target(round_state.level)
        get_selection(self.world).clear()
        get_game_state(self.world).paused = False

        logger.info("Starting %s game, target %d", mode.value, round_state.target)
        set_game_phase(self.world, self.event_bus, GamePhase.PLAYING, input_guard_press_id=press_id)
        self.event_bus.emit(EVENT_GAME_STARTED, mode=mode)
        self.event_bus.emit(EVENT_TARGET_CHANGED, target=round_state.target)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=0)
        self.event_bus.emit(EVENT_TIMER_CHANGED, time_left=round_state.time_left, reason="start")

    def set_paused(self, paused: bool) -> bool:
        """Pause or resume the running round; return True if the flag changed."""
        state = get_game_state(self.world)
        if state.phase != GamePhase.PLAYING:
            return False
        paused = bool(paused)
        if state.paused == paused:
            return False
        state.paused = paused
        logger.debug("Paused" if paused else "Resumed")
        self.event_bus.emit(EVENT_PAUSE_CHANGED, paused=paused)
        return True

    def toggle_pause(self) -> bool:
        return self.set_paused(not self.paused)

    def return_to_menu(self) -> None:
        state = get_game_state(self.world)
        self._clear_selection(reason="menu")
        if state.paused:
            state.paused = False
            self.event_bus.emit(EVENT_PAUSE_CHANGED, paused=False)
        set_game_phase(self.world, self.event_bus, GamePhase.MENU)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_selection(self, tile_id: int) -> bool:
        """Select or deselect a tile, then evaluate the selection.

        Returns False without touching anything when the round is not active
        or the id is not a tile on the board.
        """
        if not self.is_active() or not is_tile(self.world, tile_id):
            return False
        now_selected = get_selection(self.world).toggle(tile_id)
        row, col = tile_position(self.world, tile_id)
        self.event_bus.emit(
            EVENT_TILE_SELECTED if now_selected else EVENT_TILE_DESELECTED,
            tile_id=tile_id,
            row=row,
            col=col,
            value=tile_value(self.world, tile_id),
        )
        self.evaluate_selection()
        return True

    def evaluate_selection(self) -> SelectionOutcome:
        if not self.is_active():
            return SelectionOutcome.IGNORED
        round_state = get_round_state(self.world)
        selection = get_selection(self.world)
        total = sum_values(self.world, selection.tile_ids)
        if total == round_state.target and round_state.target > 0:
            self._resolve_match(total)
            return SelectionOutcome.MATCHED
        if total > round_state.target:
            logger.debug("Selection sum %d overshoots target %d", total, round_state.target)
            self._clear_selection(reason="overflow")
            return SelectionOutcome.OVERFLOW
        return SelectionOutcome.PENDING

    def _resolve_match(self, total: int) -> None:
        round_state = get_round_state(self.world)
        selection = get_selection(self.world)
        cleared_ids = selection.clear()
        award = round_state.target * len(cleared_ids)

        round_state.score += award
        removed = remove_tiles(self.world, cleared_ids)
        moves = apply_gravity(self.world)
        logger.debug(
            "Matched %d tiles for target %d, +%d (score %d)",
            len(removed), round_state.target, award, round_state.score,
        )
        self.event_bus.emit(
            EVENT_MATCH_CLEARED,
            tile_ids=[tile_id for tile_id, _ in removed],
            positions=[position for _, position in removed],
            total=total,
            award=award,
        )
        self.event_bus.emit(
            EVENT_GRAVITY_APPLIED,
            moves=[{"tile_id": m.tile_id, "from": m.source, "to": m.target} for m in moves],
        )
        self.event_bus.emit(EVENT_SELECTION_CLEARED, tile_ids=cleared_ids, reason="match")
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=round_state.score, delta=award)

        # The next target is rolled from the level this match was played at.
        round_state.target = self._roll_target(round_state.level)
        self.event_bus.emit(EVENT_TARGET_CHANGED, target=round_state.target)

        if round_state.mode == PlayMode.CLASSIC:
            self.insert_row(reason="match")
        else:
            self._reset_timer(reason="match")

        leveled = False
        while round_state.score >= round_state.level * self.config.level_step:
            round_state.level += 1
            leveled = True
        if leveled:
            logger.info("Level up: %d", round_state.level)
            self.event_bus.emit(EVENT_LEVEL_UP, level=round_state.level)

    def clear_selection(self, *, reason: str = "player") -> bool:
        if not self.is_active():
            return False
        had_selection = bool(get_selection(self.world).tile_ids)
        self._clear_selection(reason=reason)
        return had_selection

    def _clear_selection(self, *, reason: str) -> None:
        cleared = get_selection(self.world).clear()
        if cleared:
            self.event_bus.emit(EVENT_SELECTION_CLEARED, tile_ids=cleared, reason=reason)

    # ------------------------------------------------------------------
    # Rows, timer and game over
    # ------------------------------------------------------------------

    def insert_row(self, *, reason: str = "manual") -> list[int]:
        """Push every tile up one row and add a fresh bottom row.

        Returns the ids of the new tiles. Tiles pushed past the top are
        deleted and end the game.
        """
        if get_game_state(self.world).phase != GamePhase.PLAYING:
            return []
        dropped = shift_rows_up(self.world)
        selection = get_selection(self.world)
        if dropped:
            selection.tile_ids[:] = [tile_id for tile_id in selection.tile_ids if tile_id not in dropped]
        new_ids = self._spawn_row(self.config.bottom_row)
        logger.debug("Inserted row (%s), %d tiles dropped", reason, len(dropped))
        self.event_bus.emit(EVENT_ROW_INSERTED, tile_ids=new_ids, dropped=dropped, reason=reason)
        if get_round_state(self.world).mode == PlayMode.TIME:
            self._reset_timer(reason="row_inserted")
        self.check_game_over(overflowed=bool(dropped))
        return new_ids

    def check_game_over(self, *, overflowed: bool = False) -> bool:
        """Enter the game-over phase when the top row is occupied.

        Returns True when the game is over, whether it ended now or earlier.
        """
        state = get_game_state(self.world)
        if state.phase == GamePhase.GAME_OVER:
            return True
        if state.phase != GamePhase.PLAYING:
            return False
        if not overflowed and not row_occupied(self.world, self.config.top_row):
            return False

        round_state = get_round_state(self.world)
        high_score = get_high_score(self.world)
        new_record = round_state.score > high_score.best
        if new_record:
            high_score.best = round_state.score
        self._clear_selection(reason="game_over")
        state.paused = False
        logger.info("Game over with score %d (best %d)", round_state.score, high_score.best)
        set_game_phase(self.world, self.event_bus, GamePhase.GAME_OVER)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            score=round_state.score,
            high_score=high_score.best,
            new_record=new_record,
        )
        return True

    def tick(self) -> bool:
        """Advance the time-mode countdown by one second.

        Returns True when the countdown expired and a row was inserted.
        """
        if not self.is_active():
            return False
        round_state = get_round_state(self.world)
        if round_state.mode != PlayMode.TIME:
            return False
        round_state.time_left -= 1
        if round_state.time_left <= 0:
            self.insert_row(reason="timer")
            return True
        self.event_bus.emit(EVENT_TIMER_CHANGED, time_left=round_state.time_left, reason="tick")
        return False

    def _reset_timer(self, *, reason: str) -> None:
        round_state = get_round_state(self.world)
        round_state.time_left = self.config.time_limit
        self.event_bus.emit(EVENT_TIMER_CHANGED, time_left=round_state.time_left, reason=reason)

    def _spawn_row(self, row: int) -> list[int]:
        cfg = self.config
        return create_row(
            self.world,
            row,
            self.rng,
            cfg.cols,
            min_value=cfg.min_value,
            max_value=cfg.max_value,
        )

    def _roll_target(self, level: int) -> int:
        return generate_target(
            level,
            self.rng,
            base_min=self.config.target_min,
            base_max=self.config.target_max,
        )
