"""Arcade window that hosts the nonogram board.

Sets up the ECS world, event bus and systems, and forwards window events.
"""
import logging

import arcade

from nonogram.components.solution import Solution
from nonogram.constants import BACKGROUND_FILL, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from nonogram.events.bus import EventBus, EVENT_MOUSE_PRESS
from nonogram.systems.board import BoardSystem
from nonogram.systems.input import InputSystem
from nonogram.systems.render import RenderSystem
from nonogram.world import create_world

logger = logging.getLogger(__name__)


class NonogramWindow(arcade.Window):
    def __init__(self, solution: Solution | None = None, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT):
        super().__init__(width, height, WINDOW_TITLE, resizable=True)
        logger.info("Initializing nonogram game")
        self.event_bus = EventBus()
        self.world = create_world(solution)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.background_color = BACKGROUND_FILL

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main(solution: Solution | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        NonogramWindow(solution)
    except Exception:
        # No display or GL context: stay inert rather than crash.
        logger.exception("Failed to create nonogram window")
        return 1
    logger.info("Started nonogram game")
    arcade.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
