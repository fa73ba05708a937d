from __future__ import annotations

from typing import TYPE_CHECKING

from sumburst.rendering.palette import CARD, DANGER_BAND, GRID_LINE, INK, SHADE

if TYPE_CHECKING:
    from sumburst.snapshot import GridSnapshot
    from sumburst.ui.layout import BoardGeometry


class BoardRenderer:
    """Draws the grid frame, tiles, danger band and pause overlay."""

    def __init__(self, padding: int = 6):
        self._padding = padding

    def render(self, arcade, snapshot: GridSnapshot, geometry: BoardGeometry) -> None:
        left = geometry.start_x
        bottom = geometry.start_y
        arcade.draw_lbwh_rectangle_filled(left, bottom, geometry.width, geometry.height, CARD)
        for col in range(1, geometry.cols):
            x = left + col * geometry.tile_size
            arcade.draw_line(x, bottom, x, geometry.top, GRID_LINE, 1)
        for row in range(1, geometry.rows):
            y = bottom + row * geometry.tile_size
            arcade.draw_line(left, y, left + geometry.width, y, GRID_LINE, 1)

        if snapshot.in_danger:
            band_bottom = geometry.top - geometry.tile_size
            arcade.draw_lbwh_rectangle_filled(left, band_bottom, geometry.width, geometry.tile_size, DANGER_BAND)

        size = max(geometry.tile_size - self._padding, 4)
        for tile in snapshot.tiles():
            cx, cy = geometry.cell_center(tile.row, tile.col)
            if tile.selected:
                fill_color, text_color = INK, CARD
                # Selected tiles are nudged up and to the right.
                cx += 2
                cy += 2
            else:
                fill_color, text_color = CARD, INK
            arcade.draw_lbwh_rectangle_filled(cx - size / 2, cy - size / 2, size, size, fill_color)
            arcade.draw_lbwh_rectangle_outline(cx - size / 2, cy - size / 2, size, size, INK, border_width=2)
            arcade.draw_text(
                str(tile.value),
                cx,
                cy,
                text_color,
                int(size * 0.45),
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        arcade.draw_lbwh_rectangle_outline(left, bottom, geometry.width, geometry.height, INK, border_width=4)

        if snapshot.paused:
            arcade.draw_lbwh_rectangle_filled(left, bottom, geometry.width, geometry.height, SHADE)
            center_x = left + geometry.width / 2
            center_y = bottom + geometry.height / 2
            arcade.draw_text("PAUSED", center_x, center_y + 20, CARD, 36, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text("click to resume", center_x, center_y - 24, CARD, 14, anchor_x="center", anchor_y="center")
