from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from nonogram.ui.layout import label_offset
from nonogram.utils.hints import line_hints

if TYPE_CHECKING:
    from nonogram.rendering.context import RenderContext


class HintRenderer:
    """Draws the hint numbers in the bands above and left of the board."""

    def render(self, arcade, ctx: RenderContext) -> None:
        width = ctx.solution.width
        for x in range(width):
            self._draw_line_labels(arcade, ctx, True, x, line_hints(ctx.solution, x, True))
        for y in range(width):
            self._draw_line_labels(arcade, ctx, False, y, line_hints(ctx.solution, y, False))

    def label_positions(self, ctx: RenderContext, is_column: bool, index: int, count: int) -> List[tuple[float, float]]:
        """Canvas centres of the ``count`` labels for one column or row."""
        g = ctx.geometry
        along = g.inner_start + (index + 0.5) * g.cell_size
        positions = []
        for i in range(count):
            across = label_offset(i, count, g.max_label_slots, g.label_pad)
            positions.append((along, across) if is_column else (across, along))
        return positions

    def _draw_line_labels(self, arcade, ctx: RenderContext, is_column: bool, index: int, numbers: Sequence[int]) -> None:
        style = ctx.style
        positions = self.label_positions(ctx, is_column, index, len(numbers))
        for number, (cx, cy) in zip(numbers, positions):
            arcade.draw_text(
                str(number),
                cx,
                ctx.screen_y(cy),
                style.number_color,
                style.label_font_size(str(number)),
                font_name=style.font_name,
                anchor_x="center",
                anchor_y="center",
            )
