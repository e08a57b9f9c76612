import logging

from esper import World

from nonogram.rendering.board_renderer import BoardRenderer
from nonogram.rendering.context import RenderContext, build_render_context
from nonogram.rendering.hint_renderer import HintRenderer
from nonogram.ui.layout import BoardGeometry, compute_board_geometry
from nonogram.utils.puzzle import get_board, get_style

logger = logging.getLogger(__name__)


class RenderSystem:
    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self._last_window_size = (self.window.width, self.window.height)
        self._geometry = self._compute_geometry()
        self._headless_logged = False
        self._board_renderer = BoardRenderer()
        self._hint_renderer = HintRenderer()

    @property
    def geometry(self) -> BoardGeometry:
        return self._geometry

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._geometry = self._compute_geometry()

    def _compute_geometry(self) -> BoardGeometry:
        width, height = self._last_window_size
        style = get_style(self.world)
        return compute_board_geometry(
            width,
            height,
            get_board(self.world).width,
            label_pad=style.label_pad,
            canvas_pad=style.canvas_pad,
        )

    def process(self):
        """Repaint the whole board; called from the window's ``on_draw``."""
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but keep the layout cache current.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)
        ctx = build_render_context(
            self.world,
            canvas_width=self.window.width,
            canvas_height=self.window.height,
            geometry=self._geometry,
        )
        if headless:
            if not self._headless_logged:
                logger.warning("No active window; skipping nonogram draw calls")
                self._headless_logged = True
            return
        self.render(arcade, ctx)

    def render(self, arcade, ctx: RenderContext) -> None:
        self._board_renderer.render(arcade, ctx)
        self._hint_renderer.render(arcade, ctx)
