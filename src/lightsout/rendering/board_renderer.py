from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lightsout.components.board_position import BoardPosition
from lightsout.components.cell import Cell
from lightsout.constants import CELL_OUTLINE_COLOR, FOCUS_OUTLINE_COLOR, LIT_COLOR, UNLIT_COLOR
from lightsout.ui.layout import cell_origin

if TYPE_CHECKING:
    from esper import World
    from lightsout.components.cell_focus import CellFocus


class BoardRenderer:
    def __init__(self, world: World, padding: int = 4):
        self.world = world
        self._padding = padding
        self.last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}

    def render(
        self,
        arcade,
        rows: int,
        cell_size: int,
        start_x: float,
        start_y: float,
        focus: CellFocus | None,
        headless: bool,
    ) -> None:
        """Draw each cell; in headless mode only the layout cache is rebuilt."""
        self.last_cell_layout = {}
        draw_size = max(cell_size - self._padding, 4)
        inset = (cell_size - draw_size) / 2
        for ent, (pos, cell) in self.world.get_components(BoardPosition, Cell):
            left, bottom = cell_origin(pos.row, pos.col, rows, cell_size, start_x, start_y)
            left += inset
            bottom += inset
            focused = focus is not None and (focus.row, focus.col) == (pos.row, pos.col)
            self.last_cell_layout[(pos.row, pos.col)] = {
                "entity": ent,
                "left": left,
                "bottom": bottom,
                "size": draw_size,
                "lit": cell.lit,
                "pressed": cell.pressed,
                "focused": focused,
            }
            if headless:
                continue
            color = LIT_COLOR if cell.lit else UNLIT_COLOR
            arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, color)
            outline = FOCUS_OUTLINE_COLOR if focused else CELL_OUTLINE_COLOR
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                draw_size,
                draw_size,
                outline,
                border_width=3 if focused else 1,
            )
