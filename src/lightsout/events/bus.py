from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere keep receiving events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_FOCUS_MOVED = "focus_moved"          # payload: row, col


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"      # payload: row, col, flipped=list[Coord], lit=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: none
EVENT_GAME_STARTED = "game_started"            # payload: rows=int, cols=int, lit=int
EVENT_GAME_WON = "game_won"                    # payload: moves=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
