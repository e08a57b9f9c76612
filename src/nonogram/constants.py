DEFAULT_GRID_WIDTH = 5
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Nonogram"

# Padding around the drawing area within the canvas.
CANVAS_PAD = 10
# Space reserved per hint number inside the label bands.
NUMBER_PAD = 18

# Size of the cross relative to a cell.
CROSS_REL_SIZE = 0.75

# Colours and line styles.
BACKGROUND_FILL = (255, 255, 255)   # #ffffff
CELL_FILL = (17, 17, 17)            # #111111
CELL_CROSS_FILL = (34, 34, 34)      # #222222
CELL_CROSS_WIDTH = 6
GRID_LINE_FILL = (216, 216, 216)    # #d8d8d8
GRID_LINE_WIDTH = 1
INNER_OUTLINE = (102, 102, 102)     # #666666
INNER_OUTLINE_WIDTH = 1
NUMBER_FILL = (0, 0, 0)

# 15px serif at 96 dpi.
NUMBER_FONT_SIZE = 11
NUMBER_FONT_NAME = ("Times New Roman", "Liberation Serif", "serif")

# Demonstration board: every cell filled except these linear indices.
DEMO_BLANK_INDICES = (0, 2, 7, 9, 12, 17, 21, 23)

# Rough digit advance in em, and the 96 dpi point-to-pixel factor, used to
# shrink hints that would not fit in one NUMBER_PAD slot.
DIGIT_WIDTH_EM = 0.6
POINTS_TO_PIXELS = 96 / 72
