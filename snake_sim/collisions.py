"""Head collision checks against walls, the snake's own body and food."""

import logging

from .grid import build_border_walls, cell_box, boxes_overlap
from .models import (
    BoardConfig, Collider, ColliderKind, CollisionReport, SessionContext, DEFAULT_BOARD,
)

logger = logging.getLogger(__name__)


def wall_colliders(board: BoardConfig = DEFAULT_BOARD) -> list[Collider]:
    return [Collider(ColliderKind.WALL, box) for box in build_border_walls(board)]


def gather_colliders(ctx: SessionContext, walls: list[Collider],
                     board: BoardConfig = DEFAULT_BOARD) -> list[Collider]:
    colliders = list(walls)
    for segment in ctx.snake.segments[1:]:
        colliders.append(Collider(ColliderKind.BODY, cell_box(segment, board), segment))
    if ctx.food is not None:
        colliders.append(Collider(ColliderKind.FOOD, cell_box(ctx.food, board), ctx.food))
    return colliders


def check_for_collisions(ctx: SessionContext, walls: list[Collider],
                         board: BoardConfig = DEFAULT_BOARD) -> CollisionReport:
    """Test the head against every collider and apply the outcomes.

    Every collider is evaluated on its own, so a head that overlaps food and a
    wall (or its body) in the same tick both scores and dies.
    """
    report = CollisionReport()
    snake = ctx.snake
    head_box = cell_box(snake.head(), board)

    for collider in gather_colliders(ctx, walls, board):
        if not boxes_overlap(head_box, collider.box):
            continue
        report.hits.append(collider.kind)
        if collider.kind == ColliderKind.FOOD:
            ctx.score += 1
            ctx.food = None
            ctx.pending_growth += 1
            report.ate_food = True
        else:
            snake.halt()
            report.fatal = True

    if report.hits:
        logger.debug("Head %s hit %s", snake.head(), [k.value for k in report.hits])
    return report
