from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sumburst.menu.components import MenuButton

PAPER = (228, 227, 224)
CARD = (255, 255, 255)
INK = (0, 0, 0)
MUTED = (110, 110, 110)
ALERT = (220, 38, 38)
DANGER_BAND = (220, 38, 38, 70)
SHADE = (0, 0, 0, 150)
GRID_LINE = (0, 0, 0, 16)
TROPHY = (245, 158, 11)


def draw_button(arcade, button: MenuButton) -> None:
    """Filled buttons are black with white text, the others outlined."""
    left = button.x - button.width / 2
    bottom = button.y - button.height / 2
    if button.filled:
        fill_color, text_color = INK, CARD
    else:
        fill_color, text_color = PAPER, INK
    if not button.enabled:
        text_color = MUTED
    arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
    arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, INK, border_width=3)
    arcade.draw_text(
        button.label,
        button.x,
        button.y,
        text_color,
        20,
        anchor_x="center",
        anchor_y="center",
        bold=True,
    )
