import pytest

from sumburst.ui.layout import compute_board_geometry, hud_button_at, hud_button_rects


def test_default_window_geometry():
    geometry = compute_board_geometry(540, 860)
    assert geometry.tile_size == 54
    assert geometry.start_x == 108
    assert geometry.start_y == 40
    assert geometry.top == 40 + 10 * 54


def test_row_zero_is_drawn_at_the_top():
    geometry = compute_board_geometry(540, 860)
    _, top_y = geometry.cell_center(0, 0)
    _, bottom_y = geometry.cell_center(9, 0)
    assert top_y > bottom_y


@pytest.mark.parametrize("row,col", [(0, 0), (9, 5), (4, 2)])
def test_cell_at_inverts_cell_center(row, col):
    geometry = compute_board_geometry(540, 860)
    assert geometry.cell_at(*geometry.cell_center(row, col)) == (row, col)


def test_cell_at_outside_board():
    geometry = compute_board_geometry(540, 860)
    assert geometry.cell_at(0, 0) is None
    assert geometry.cell_at(geometry.start_x + geometry.width, 100) is None
    assert geometry.cell_at(200, geometry.top) is None


def test_tiny_window_keeps_minimum_tile():
    geometry = compute_board_geometry(60, 200)
    assert geometry.tile_size == 20


def test_hud_buttons_sit_in_top_corners():
    rects = hud_button_rects(540, 860)
    assert rects["home"][0] < rects["pause"][0]
    assert hud_button_at(540, 860, 40, 820) == "home"
    assert hud_button_at(540, 860, 500, 820) == "pause"
    assert hud_button_at(540, 860, 270, 820) is None
