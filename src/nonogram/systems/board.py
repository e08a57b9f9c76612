import logging

from esper import World

from nonogram.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_CELL_CHANGED
from nonogram.utils.puzzle import get_board

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns mutation of the player's board: each cell click advances one cell."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        board = get_board(self.world)
        if not board.in_bounds(x, y):
            return
        previous = board.state_at(x, y)
        state = board.advance(x, y)
        logger.debug("Cell (%d, %d) %s -> %s", x, y, previous.name, state.name)
        self.event_bus.emit(EVENT_CELL_CHANGED, x=x, y=y, previous=previous, state=state)
