from __future__ import annotations

from typing import TYPE_CHECKING

from nonogram.components.cell_state import CellState
from nonogram.ui.layout import cell_to_pixel

if TYPE_CHECKING:
    from nonogram.rendering.context import RenderContext


class BoardRenderer:
    """Draws the background, the marked cells, the grid lines and the outline."""

    def render(self, arcade, ctx: RenderContext) -> None:
        self._draw_background(arcade, ctx)
        self._draw_cells(arcade, ctx)
        self._draw_grid(arcade, ctx)

    def _draw_background(self, arcade, ctx: RenderContext) -> None:
        arcade.draw_lrbt_rectangle_filled(0, ctx.canvas_width, 0, ctx.canvas_height, ctx.style.background)

    def _draw_cells(self, arcade, ctx: RenderContext) -> None:
        board = ctx.board
        s = ctx.geometry.cell_size
        for x in range(board.width):
            for y in range(board.width):
                state = board.state_at(x, y)
                if state is CellState.EMPTY:
                    continue
                left, top = cell_to_pixel(ctx.geometry, x, y)
                if state is CellState.FILLED:
                    arcade.draw_lbwh_rectangle_filled(*ctx.screen_rect(left, top, s, s), ctx.style.cell_fill)
                elif state is CellState.CROSSED_OUT:
                    self._draw_cross(arcade, ctx, left, top)
                else:
                    raise ValueError(f"Unhandled cell state: {state!r}")

    def _draw_cross(self, arcade, ctx: RenderContext, left: float, top: float) -> None:
        s = ctx.geometry.cell_size
        pad = ctx.style.cross_padding(s)
        color = ctx.style.cross_color
        width = ctx.style.cross_width
        arcade.draw_line(
            left + pad, ctx.screen_y(top + pad),
            left + s - pad, ctx.screen_y(top + s - pad),
            color, width,
        )
        arcade.draw_line(
            left + s - pad, ctx.screen_y(top + pad),
            left + pad, ctx.screen_y(top + s - pad),
            color, width,
        )

    def _draw_grid(self, arcade, ctx: RenderContext) -> None:
        g = ctx.geometry
        style = ctx.style
        # Interior lines only; the outline covers the outer edges.
        for i in range(1, g.grid_width):
            at = g.inner_start + g.cell_size * i
            # Vertical
            arcade.draw_line(
                at, ctx.screen_y(g.inner_start),
                at, ctx.screen_y(g.inner_end),
                style.grid_line_color, style.grid_line_width,
            )
            # Horizontal
            arcade.draw_line(
                g.inner_start, ctx.screen_y(at),
                g.inner_end, ctx.screen_y(at),
                style.grid_line_color, style.grid_line_width,
            )
        arcade.draw_lbwh_rectangle_outline(
            *ctx.screen_rect(g.inner_start, g.inner_start, g.inner_size, g.inner_size),
            style.outline_color,
            border_width=style.outline_width,
        )
