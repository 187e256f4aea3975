from __future__ import annotations

import random

from esper import World

from lightsout.config import GameConfig
from lightsout.events.bus import EventBus
from lightsout.systems.board import BoardSystem
from lightsout.world import create_world


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def start_game(
    rows: int = 5,
    cols: int = 5,
    chance: float = 1.0,
    seed: int = 0,
) -> tuple[EventBus, World, BoardSystem]:
    """Create a bus, world and board system for a fresh session."""

    bus = EventBus()
    config = GameConfig(rows=rows, cols=cols, chance_light_starts_on=chance)
    world = create_world(bus, config, rng=random.Random(seed))
    board_system = BoardSystem(world, bus)
    return bus, world, board_system
