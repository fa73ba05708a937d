from __future__ import annotations

from esper import World

from sumburst.menu.components import GameOverPanel, GameOverTag, MenuButton
from sumburst.rendering.palette import CARD, INK, MUTED, SHADE, TROPHY, draw_button


class GameOverRenderer:
    """Draws the result card spawned by GameOverSystem."""

    def __init__(self, world: World):
        self.world = world

    def render(self, arcade, width: int, height: int) -> None:
        panels = list(self.world.get_component(GameOverPanel))
        if not panels:
            return
        arcade.draw_lbwh_rectangle_filled(0, 0, width, height, SHADE)
        _, panel = panels[0]
        left = panel.x - panel.width / 2
        bottom = panel.y - panel.height / 2
        top = bottom + panel.height
        arcade.draw_lbwh_rectangle_filled(left, bottom, panel.width, panel.height, CARD)
        arcade.draw_lbwh_rectangle_outline(left, bottom, panel.width, panel.height, INK, border_width=3)
        arcade.draw_text("GAME OVER", panel.x, top - 40, INK, 30, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("SCORE", panel.x - 70, top - 90, MUTED, 10, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(str(panel.score), panel.x - 70, top - 116, INK, 24, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("BEST", panel.x + 70, top - 90, MUTED, 10, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(str(panel.high_score), panel.x + 70, top - 116, INK, 24, anchor_x="center", anchor_y="center", bold=True)
        if panel.new_record:
            arcade.draw_text("NEW RECORD!", panel.x, top - 150, TROPHY, 14, anchor_x="center", anchor_y="center", bold=True)
        for ent, button in self.world.get_component(MenuButton):
            if self.world.has_component(ent, GameOverTag):
                draw_button(arcade, button)
