import math

from esper import World

from nonogram.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_CELL_CLICK
from nonogram.ui.layout import compute_board_geometry, pixel_to_cell
from nonogram.utils.puzzle import get_board, get_style

LEFT_BUTTON = 1


class InputSystem:
    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', LEFT_BUTTON)
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        cell = self.cell_at_point(x, y)
        if cell is None:
            return
        cell_x, cell_y = cell
        self.event_bus.emit(EVENT_CELL_CLICK, x=cell_x, y=cell_y)

    def cell_at_point(self, x: float, y: float):
        """Return the cell under a window point, or None when outside the grid.

        Window pixel rows count up from the bottom; canvas row ``height - 1 - y``
        is the same row counted down from the top.
        """
        canvas_x = math.floor(x)
        canvas_y = math.floor(self.window.height - 1 - y)
        board = get_board(self.world)
        style = get_style(self.world)
        geometry = compute_board_geometry(
            self.window.width,
            self.window.height,
            board.width,
            label_pad=style.label_pad,
            canvas_pad=style.canvas_pad,
        )
        return pixel_to_cell(geometry, canvas_x, canvas_y)
