"""Game state resource describing the active session."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session states; WON is terminal until a new game starts."""
    PLAYING = auto()
    WON = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and move count."""
    mode: GameMode = GameMode.PLAYING
    moves: int = 0
