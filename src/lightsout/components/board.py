from dataclasses import dataclass

from lightsout.grid import Grid

@dataclass(slots=True)
class Board:
    """Singleton holding the current grid snapshot.

    ``grid`` is replaced wholesale on every move; it is never mutated.
    """
    rows: int
    cols: int
    grid: Grid
