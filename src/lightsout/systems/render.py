from lightsout.events.bus import EventBus
from lightsout.components.board import Board
from lightsout.components.cell_focus import CellFocus
from lightsout.components.game_state import GameMode
from lightsout.constants import CELL_PADDING, HINT_TEXT_COLOR, WIN_TEXT_COLOR
from lightsout.rendering.board_renderer import BoardRenderer
from lightsout.ui.layout import compute_board_geometry
from lightsout.utils.game_state import get_game_state
from esper import World

WIN_MESSAGE = "You Win!"
NEW_GAME_HINT = "Press N for a new game"


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._board_renderer = BoardRenderer(self.world, padding=CELL_PADDING)

    @property
    def last_cell_layout(self):
        return self._board_renderer.last_cell_layout

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.WON:
            # Terminal screen: no cells are drawn, so none can be clicked.
            self._board_renderer.last_cell_layout = {}
            if not headless:
                self._draw_win_message(arcade)
            return

        board = self._board()
        if board is None:
            return
        cell_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        self._board_renderer.render(
            arcade,
            board.rows,
            cell_size,
            start_x,
            start_y,
            self._focus(),
            headless=headless,
        )

    def _draw_win_message(self, arcade):
        center_x = self.window.width / 2
        center_y = self.window.height / 2
        arcade.draw_text(
            WIN_MESSAGE,
            center_x,
            center_y + 20,
            WIN_TEXT_COLOR,
            48,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        arcade.draw_text(
            NEW_GAME_HINT,
            center_x,
            center_y - 40,
            HINT_TEXT_COLOR,
            18,
            anchor_x="center",
            anchor_y="center",
        )

    def _board(self):
        for _, board in self.world.get_component(Board):
            return board
        return None

    def _focus(self):
        for _, focus in self.world.get_component(CellFocus):
            return focus
        return None
