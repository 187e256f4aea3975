import logging
from typing import Optional

from esper import World
from lightsout.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_CLICK,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.components.board import Board
from lightsout.components.board_position import BoardPosition
from lightsout.components.cell import Cell
from lightsout.components.cell_focus import CellFocus
from lightsout.components.game_state import GameMode
from lightsout.grid import Grid, count_lit, create_grid, flip_around, flip_targets, format_grid, has_won, in_bounds
from lightsout.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and applies the flip rule to cell clicks."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        config = world.config
        self.board_entity = self.world.create_entity()
        self.world.add_component(
            self.board_entity,
            Board(rows=config.rows, cols=config.cols, grid=()),
        )
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.start_new_game()

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def grid(self) -> Grid:
        return self.board.grid

    def cell_lit(self, row: int, col: int) -> bool:
        return self.board.grid[row][col]

    def start_new_game(self):
        config = self.world.config
        board = self.board
        board.rows = config.rows
        board.cols = config.cols
        board.grid = create_grid(config.rows, config.cols, config.chance_light_starts_on, self.world.random)
        self._rebuild_cells()
        state = get_game_state(self.world)
        if state is not None:
            state.moves = 0
        for _, focus in self.world.get_component(CellFocus):
            focus.row = 0
            focus.col = 0
        # A seeded board can already be dark (e.g. chance 0); that session is won on arrival.
        set_game_mode(self.world, self.event_bus, GameMode.WON if has_won(board.grid) else GameMode.PLAYING)
        lit = count_lit(board.grid)
        logger.info("New game: %dx%d board with %d lit cells", board.rows, board.cols, lit)
        self.event_bus.emit(EVENT_GAME_STARTED, rows=board.rows, cols=board.cols, lit=lit)

    def on_new_game_request(self, sender, **kwargs):
        self.start_new_game()

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        # Coordinates must be real ints; floats, strings and bools are malformed.
        if type(row) is not int or type(col) is not int:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.WON:
            return
        board = self.board
        if not in_bounds(board.rows, board.cols, row, col):
            return
        board.grid = flip_around(board.grid, row, col)
        flipped = flip_targets(board.rows, board.cols, row, col)
        self._sync_cells()
        if state is not None:
            state.moves += 1
        lit = count_lit(board.grid)
        logger.debug("Flip at (%d, %d), %d lit\n%s", row, col, lit, format_grid(board.grid))
        self.event_bus.emit(EVENT_BOARD_CHANGED, row=row, col=col, flipped=flipped, lit=lit)
        if has_won(board.grid):
            moves = state.moves if state is not None else 0
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            logger.info("Board cleared in %d moves", moves)
            self.event_bus.emit(EVENT_GAME_WON, moves=moves)

    def _rebuild_cells(self):
        for ent, _ in list(self.world.get_component(BoardPosition)):
            self.world.delete_entity(ent, immediate=True)
        board = self.board
        for r in range(board.rows):
            for c in range(board.cols):
                self.world.create_entity(
                    BoardPosition(row=r, col=c),
                    Cell(lit=board.grid[r][c]),
                )

    def _sync_cells(self):
        grid = self.board.grid
        for _, (pos, cell) in self.world.get_components(BoardPosition, Cell):
            cell.lit = grid[pos.row][pos.col]

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        for ent, pos in self.world.get_component(BoardPosition):
            if pos.row == row and pos.col == col:
                return self.world.component_for_entity(ent, Cell)
        return None
