import random

from esper import World
from lightsout.config import GameConfig
from lightsout.events.bus import EventBus
from lightsout.components.cell_focus import CellFocus
from lightsout.components.game_state import GameState, GameMode


def create_world(
    event_bus: EventBus,
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world with the session singletons registered.

    The random source lives on the world so every system seeds from the same
    injectable generator. A seeded config is used when no ``rng`` is given.
    """
    world = World()
    cfg = config or GameConfig()
    setattr(world, "config", cfg)
    setattr(world, "random", rng or random.Random(cfg.seed))

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=GameMode.PLAYING))
    world.add_component(state_entity, CellFocus())
    return world
