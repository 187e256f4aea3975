"""Entry point for the Lights Out puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, color
from lightsout.cli import parse_config
from lightsout.config import GameConfig
from lightsout.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from lightsout.world import create_world
from lightsout.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_MOUSE_PRESS
from lightsout.systems.board import BoardSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.render import RenderSystem

logger = logging.getLogger(__name__)


class LightsOutWindow(Window):
    def __init__(self, config: GameConfig):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, config)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.background_color = color.BLACK

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main(argv=None):
    config, log_level = parse_config(argv)
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Lights Out with %s", config)
    window = LightsOutWindow(config)
    run()


if __name__ == "__main__":
    main()
