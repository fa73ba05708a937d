from __future__ import annotations

from typing import TYPE_CHECKING

from sumburst.components.game_state import PlayMode
from sumburst.rendering.palette import ALERT, CARD, INK, MUTED
from sumburst.ui.layout import hud_button_rects

if TYPE_CHECKING:
    from sumburst.snapshot import GridSnapshot
    from sumburst.ui.layout import BoardGeometry

# Seconds at which the countdown turns red.
TIMER_WARNING = 3


class HudRenderer:
    """Score, target box, running sum, level or timer, and the two HUD buttons."""

    def render(self, arcade, snapshot: GridSnapshot, geometry: BoardGeometry, width: int, height: int) -> None:
        buttons = hud_button_rects(width, height)
        for action, (left, bottom, w, h) in buttons.items():
            arcade.draw_lbwh_rectangle_filled(left, bottom, w, h, CARD)
            arcade.draw_lbwh_rectangle_outline(left, bottom, w, h, INK, border_width=2)
            if action == "home":
                glyph = "H"
            elif snapshot.paused:
                glyph = ">"
            else:
                glyph = "II"
            arcade.draw_text(glyph, left + w / 2, bottom + h / 2, INK, 18, anchor_x="center", anchor_y="center", bold=True)

        home_left, home_bottom, home_w, home_h = buttons["home"]
        text_x = home_left + home_w + 14
        arcade.draw_text("SCORE", text_x, home_bottom + home_h - 10, MUTED, 10, anchor_y="center", bold=True)
        arcade.draw_text(str(snapshot.score), text_x, home_bottom + 12, INK, 22, anchor_y="center", bold=True)

        pause_left, pause_bottom, _, pause_h = buttons["pause"]
        right_x = pause_left - 14
        if snapshot.mode == PlayMode.TIME:
            caption = "TIME"
            value = str(snapshot.time_left)
            value_color = ALERT if snapshot.time_left <= TIMER_WARNING else INK
        else:
            caption = "LEVEL"
            value = str(snapshot.level)
            value_color = INK
        arcade.draw_text(caption, right_x, pause_bottom + pause_h - 10, MUTED, 10, anchor_x="right", anchor_y="center", bold=True)
        arcade.draw_text(value, right_x, pause_bottom + 12, value_color, 22, anchor_x="right", anchor_y="center", bold=True)

        box = 84
        center_x = width / 2
        box_bottom = geometry.top + 36
        arcade.draw_text("TARGET", center_x, box_bottom + box + 12, MUTED, 10, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_lbwh_rectangle_filled(center_x - box / 2, box_bottom, box, box, CARD)
        arcade.draw_lbwh_rectangle_outline(center_x - box / 2, box_bottom, box, box, INK, border_width=4)
        arcade.draw_text(str(snapshot.target), center_x, box_bottom + box / 2, INK, 40, anchor_x="center", anchor_y="center", bold=True)
        if snapshot.selection:
            sum_color = ALERT if snapshot.over_target else INK
            arcade.draw_text(f"SUM: {snapshot.current_sum}", center_x, box_bottom - 16, sum_color, 12, anchor_x="center", anchor_y="center", bold=True)
