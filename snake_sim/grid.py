"""Cell <-> world-space mapping and box overlap."""

import math

from .models import Box, BoardConfig, Cell, DEFAULT_BOARD


def inner_left(board: BoardConfig = DEFAULT_BOARD) -> float:
    return -board.width * board.cell_size / 2


def inner_top(board: BoardConfig = DEFAULT_BOARD) -> float:
    return board.height * board.cell_size / 2


def cell_to_world(col: int, row: int, board: BoardConfig = DEFAULT_BOARD) -> tuple[float, float]:
    """Center of a cell in world space. The board is centered on the origin and y grows upward."""
    x = inner_left(board) + (col + 0.5) * board.cell_size
    y = inner_top(board) - (row + 0.5) * board.cell_size
    return x, y


def world_to_cell(position: tuple[float, float], board: BoardConfig = DEFAULT_BOARD) -> Cell:
    x, y = position
    col = math.floor((x - inner_left(board)) / board.cell_size)
    row = math.floor((inner_top(board) - y) / board.cell_size)
    return col, row


def cell_box(cell: Cell, board: BoardConfig = DEFAULT_BOARD) -> Box:
    x, y = cell_to_world(cell[0], cell[1], board)
    return Box(x, y, board.body_size, board.body_size)


def boxes_overlap(a: Box, b: Box) -> bool:
    # Touching edges do not count.
    return (
        abs(a.x - b.x) * 2 < a.w + b.w
        and abs(a.y - b.y) * 2 < a.h + b.h
    )


def build_border_walls(board: BoardConfig = DEFAULT_BOARD) -> list[Box]:
    half_t = board.wall_thickness / 2
    left = inner_left(board) - half_t
    right = -left
    top = inner_top(board) + half_t
    bottom = -top
    arena_w = right - left
    arena_h = top - bottom
    return [
        Box(left, 0.0, board.wall_thickness, arena_h + board.wall_thickness),
        Box(right, 0.0, board.wall_thickness, arena_h + board.wall_thickness),
        Box(0.0, bottom, arena_w + board.wall_thickness, board.wall_thickness),
        Box(0.0, top, arena_w + board.wall_thickness, board.wall_thickness),
    ]
