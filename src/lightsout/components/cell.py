from dataclasses import dataclass

@dataclass(slots=True)
class Cell:
    """Per-cell view state mirrored from the board grid.

    Cells hold no game logic; BoardSystem rewrites ``lit`` after every move.
    """
    lit: bool = False

    @property
    def pressed(self) -> bool:
        """Accessible pressed-state, which tracks the lit flag."""
        return self.lit
