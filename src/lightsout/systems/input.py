from lightsout.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_FOCUS_MOVED,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.constants import (
    KEY_DOWN, KEY_ENTER, KEY_LEFT, KEY_N, KEY_NUM_ENTER, KEY_R, KEY_RIGHT, KEY_SPACE, KEY_UP,
    MOUSE_BUTTON_LEFT,
)
from lightsout.ui.layout import cell_at_point
from lightsout.components.board import Board
from lightsout.components.cell_focus import CellFocus
from lightsout.components.game_state import GameMode
from lightsout.utils.game_state import get_game_state

FOCUS_STEPS = {
    KEY_UP: (-1, 0),
    KEY_DOWN: (1, 0),
    KEY_LEFT: (0, -1),
    KEY_RIGHT: (0, 1),
}
ACTIVATE_KEYS = (KEY_ENTER, KEY_NUM_ENTER, KEY_SPACE)
NEW_GAME_KEYS = (KEY_N, KEY_R)


class InputSystem:
    """Translates pointer and keyboard input into cell clicks.

    Keyboard activation of the focused cell emits the same ``cell_click`` as
    a pointer press on it.
    """

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button activates cells.
        if button != MOUSE_BUTTON_LEFT:
            return
        if not self._playing():
            return
        board = self._board()
        if board is None:
            return
        coord = cell_at_point(x, y, self.window.width, self.window.height, board.rows, board.cols)
        if coord is None:
            return
        focus = self._focus()
        if focus is not None:
            focus.row, focus.col = coord.row, coord.col
        self.event_bus.emit(EVENT_CELL_CLICK, row=coord.row, col=coord.col)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        if symbol in NEW_GAME_KEYS:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        if not self._playing():
            return
        focus = self._focus()
        board = self._board()
        if focus is None or board is None:
            return
        if symbol in FOCUS_STEPS:
            dr, dc = FOCUS_STEPS[symbol]
            focus.row = min(max(focus.row + dr, 0), board.rows - 1)
            focus.col = min(max(focus.col + dc, 0), board.cols - 1)
            self.event_bus.emit(EVENT_FOCUS_MOVED, row=focus.row, col=focus.col)
        elif symbol in ACTIVATE_KEYS:
            self.event_bus.emit(EVENT_CELL_CLICK, row=focus.row, col=focus.col)

    def _playing(self) -> bool:
        state = get_game_state(self.world)
        if state is None:
            return True
        return state.mode == GameMode.PLAYING

    def _board(self) -> Board | None:
        for _, board in self.world.get_component(Board):
            return board
        return None

    def _focus(self) -> CellFocus | None:
        for _, focus in self.world.get_component(CellFocus):
            return focus
        return None
