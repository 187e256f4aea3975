from lightsout.constants import BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, MIN_CELL_SIZE
from lightsout.grid import Coord

def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (cell_size, start_x, start_y) for a board centred in the window.

    Shared by RenderSystem and InputSystem so clicks map onto drawn cells.
    ``start_y`` is the bottom edge of the board (arcade's y axis points up).
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = window_height * BOARD_MAX_HEIGHT_PCT
    cell_by_w = max_board_w / cols
    cell_by_h = max_board_h / rows
    cell_size = int(min(cell_by_w, cell_by_h))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    start_x = (window_width - cols * cell_size) / 2
    start_y = (window_height - rows * cell_size) / 2
    return cell_size, start_x, start_y


def cell_origin(row: int, col: int, rows: int, cell_size: int, start_x: float, start_y: float):
    """Bottom-left corner of a cell; row 0 is drawn at the top of the board."""
    left = start_x + col * cell_size
    bottom = start_y + (rows - 1 - row) * cell_size
    return left, bottom


def cell_at_point(
    x: float,
    y: float,
    window_width: int,
    window_height: int,
    rows: int,
    cols: int,
) -> Coord | None:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    if x < start_x or x >= start_x + cols * cell_size:
        return None
    if y < start_y or y >= start_y + rows * cell_size:
        return None
    col = int((x - start_x) // cell_size)
    row_from_bottom = int((y - start_y) // cell_size)
    row = rows - 1 - row_from_bottom
    if 0 <= row < rows and 0 <= col < cols:
        return Coord(row, col)
    return None
