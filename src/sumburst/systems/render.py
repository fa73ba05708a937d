from sumburst.components.game_state import GamePhase
from sumburst.engine import GridEngine
from sumburst.rendering.board_renderer import BoardRenderer
from sumburst.rendering.game_over_renderer import GameOverRenderer
from sumburst.rendering.hud_renderer import HudRenderer
from sumburst.constants import TILE_PADDING
from sumburst.ui.layout import BoardGeometry, compute_board_geometry


class RenderSystem:
    """Draws the round from the engine snapshot; the menu has its own system."""

    def __init__(self, engine: GridEngine, window):
        self.engine = engine
        self.window = window
        self._geometry: BoardGeometry | None = None
        self._last_window_size = (self.window.width, self.window.height)
        self._board_renderer = BoardRenderer(padding=TILE_PADDING)
        self._hud_renderer = HudRenderer()
        self._game_over_renderer = GameOverRenderer(engine.world)

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._geometry = None

    @property
    def geometry(self) -> BoardGeometry:
        if (self.window.width, self.window.height) != self._last_window_size:
            self._last_window_size = (self.window.width, self.window.height)
            self._geometry = None
        if self._geometry is None:
            config = self.engine.config
            self._geometry = compute_board_geometry(self.window.width, self.window.height, config.rows, config.cols)
        return self._geometry

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        if self.engine.phase == GamePhase.MENU:
            return
        snapshot = self.engine.snapshot()
        geometry = self.geometry
        self._hud_renderer.render(arcade, snapshot, geometry, self.window.width, self.window.height)
        self._board_renderer.render(arcade, snapshot, geometry)
        if snapshot.phase == GamePhase.GAME_OVER:
            self._game_over_renderer.render(arcade, self.window.width, self.window.height)
