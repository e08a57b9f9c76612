from dataclasses import dataclass
from typing import Tuple

from nonogram.constants import (
    BACKGROUND_FILL,
    CANVAS_PAD,
    CELL_CROSS_FILL,
    CELL_CROSS_WIDTH,
    CELL_FILL,
    CROSS_REL_SIZE,
    DIGIT_WIDTH_EM,
    GRID_LINE_FILL,
    GRID_LINE_WIDTH,
    INNER_OUTLINE,
    INNER_OUTLINE_WIDTH,
    NUMBER_FILL,
    NUMBER_FONT_NAME,
    NUMBER_FONT_SIZE,
    NUMBER_PAD,
    POINTS_TO_PIXELS,
)

Color = Tuple[int, int, int]


@dataclass(slots=True)
class BoardStyle:
    """Colours and spacing used when drawing the board and its hints."""
    background: Color = BACKGROUND_FILL
    cell_fill: Color = CELL_FILL
    cross_color: Color = CELL_CROSS_FILL
    cross_width: float = CELL_CROSS_WIDTH
    cross_rel_size: float = CROSS_REL_SIZE
    grid_line_color: Color = GRID_LINE_FILL
    grid_line_width: float = GRID_LINE_WIDTH
    outline_color: Color = INNER_OUTLINE
    outline_width: float = INNER_OUTLINE_WIDTH
    number_color: Color = NUMBER_FILL
    font_size: float = NUMBER_FONT_SIZE
    font_name: Tuple[str, ...] = NUMBER_FONT_NAME
    label_pad: int = NUMBER_PAD
    canvas_pad: int = CANVAS_PAD

    def cross_padding(self, cell_size: float) -> float:
        return ((1.0 - self.cross_rel_size) * cell_size) / 2.0

    def label_font_size(self, text: str) -> float:
        """Font size for a hint, shrunk so its estimated width fits one label slot."""
        width = len(text) * DIGIT_WIDTH_EM * self.font_size * POINTS_TO_PIXELS
        if width <= self.label_pad:
            return self.font_size
        return self.font_size * self.label_pad / width
