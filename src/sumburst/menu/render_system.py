"""Rendering system responsible for drawing the main menu."""
import arcade
from esper import World
from sumburst.components.game_state import GamePhase
from sumburst.menu.components import MenuBackground, MenuButton, MenuLabel, MenuTag
from sumburst.rendering.palette import INK, PAPER, draw_button
from sumburst.utils.game_state import get_game_state


class MenuRenderSystem:
    """Renders menu entities when the game is in the menu phase."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        if get_game_state(self.world).phase != GamePhase.MENU:
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(
                0,
                self.window.width,
                0,
                self.window.height,
                background.color,
            )

        for _, label in self.world.get_component(MenuLabel):
            arcade.draw_text(
                label.text,
                label.x,
                label.y,
                INK,
                label.size,
                anchor_x="center",
                anchor_y="center",
                bold=label.bold,
            )

        for ent, button in self.world.get_component(MenuButton):
            if not self.world.has_component(ent, MenuTag):
                continue
            draw_button(arcade, button)
