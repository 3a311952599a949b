"""Food placement."""

import logging
from typing import Optional

from .models import BoardConfig, Cell, SessionContext, DEFAULT_BOARD

logger = logging.getLogger(__name__)


def spawn_food(ctx: SessionContext, board: BoardConfig = DEFAULT_BOARD) -> Optional[Cell]:
    """Place food on a random free cell if none exists and the board has room.

    Returns the new food cell, or None when nothing was spawned.
    """
    if ctx.food is not None:
        return None
    if ctx.snake.occupied_count() >= board.cell_count:
        return None

    while True:
        cell = (ctx.rng.randrange(board.width), ctx.rng.randrange(board.height))
        if not ctx.snake.is_occupied(cell):
            break

    ctx.food = cell
    logger.debug("Spawned food at %s", cell)
    return cell
