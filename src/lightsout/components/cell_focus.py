from dataclasses import dataclass

@dataclass(slots=True)
class CellFocus:
    """Keyboard focus position on the board."""
    row: int = 0
    col: int = 0
