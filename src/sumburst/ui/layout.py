from dataclasses import dataclass
from typing import Optional, Tuple

from sumburst.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_COLS,
    GRID_ROWS,
    HUD_BUTTON_MARGIN,
    HUD_BUTTON_SIZE,
    HUD_HEIGHT,
)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    tile_size: int
    start_x: float
    start_y: float
    rows: int
    cols: int

    @property
    def width(self) -> float:
        return self.cols * self.tile_size

    @property
    def height(self) -> float:
        return self.rows * self.tile_size

    @property
    def top(self) -> float:
        return self.start_y + self.height

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        # Row 0 is drawn at the top; arcade's y axis grows upwards.
        x = self.start_x + col * self.tile_size + self.tile_size / 2
        y = self.start_y + (self.rows - 1 - row) * self.tile_size + self.tile_size / 2
        return x, y

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        if x < self.start_x or x >= self.start_x + self.width:
            return None
        if y < self.start_y or y >= self.top:
            return None
        col = int((x - self.start_x) // self.tile_size)
        row = self.rows - 1 - int((y - self.start_y) // self.tile_size)
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row, col
        return None


def compute_board_geometry(
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> BoardGeometry:
    """Return board placement shared by RenderSystem and InputSystem.

    The board is centred horizontally and sits on the bottom margin; the HUD
    band above it is excluded from the height budget.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    return BoardGeometry(tile_size=tile_size, start_x=start_x, start_y=BOTTOM_MARGIN, rows=rows, cols=cols)


def hud_button_rects(window_width: int, window_height: int) -> dict[str, Tuple[float, float, float, float]]:
    """Return (left, bottom, width, height) of the home and pause buttons."""
    size = HUD_BUTTON_SIZE
    bottom = window_height - HUD_BUTTON_MARGIN - size
    return {
        "home": (HUD_BUTTON_MARGIN, bottom, size, size),
        "pause": (window_width - HUD_BUTTON_MARGIN - size, bottom, size, size),
    }


def hud_button_at(window_width: int, window_height: int, x: float, y: float) -> Optional[str]:
    for action, (left, bottom, width, height) in hud_button_rects(window_width, window_height).items():
        if left <= x <= left + width and bottom <= y <= bottom + height:
            return action
    return None
