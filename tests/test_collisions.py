"""Tests for head collision checks."""

from snake_sim.collisions import check_for_collisions, gather_colliders, wall_colliders
from snake_sim.models import ColliderKind

WALLS = wall_colliders()


class TestColliders:
    def test_head_is_not_a_collider(self, make_ctx):
        ctx = make_ctx(segments=[(5, 5), (4, 5), (3, 5)], food=(9, 9))
        colliders = gather_colliders(ctx, WALLS)
        body = [c.cell for c in colliders if c.kind == ColliderKind.BODY]
        assert body == [(4, 5), (3, 5)]
        assert [c.cell for c in colliders if c.kind == ColliderKind.FOOD] == [(9, 9)]
        assert len([c for c in colliders if c.kind == ColliderKind.WALL]) == 4


class TestCheckForCollisions:
    def test_no_collision(self, make_ctx):
        ctx = make_ctx(segments=[(5, 5), (4, 5)], food=(9, 9))
        report = check_for_collisions(ctx, WALLS)
        assert report.hits == []
        assert not report.ate_food
        assert not report.fatal
        assert ctx.score == 0
        assert ctx.food == (9, 9)

    def test_eating_food(self, make_ctx):
        """Food scores a point, disappears and queues one growth event."""
        ctx = make_ctx(segments=[(2, 0), (1, 0)], food=(2, 0))
        report = check_for_collisions(ctx, WALLS)
        assert report.ate_food
        assert not report.fatal
        assert ctx.score == 1
        assert ctx.food is None
        assert ctx.pending_growth == 1
        assert ctx.snake.alive

    def test_wall_is_fatal(self, make_ctx):
        ctx = make_ctx(segments=[(30, 0), (29, 0)])
        report = check_for_collisions(ctx, WALLS)
        assert report.fatal
        assert report.cause == "wall"
        assert not ctx.snake.alive
        assert ctx.snake.velocity == (0, 0)

    def test_own_body_is_fatal(self, make_ctx):
        ctx = make_ctx(segments=[(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)])
        report = check_for_collisions(ctx, WALLS)
        assert report.hits == [ColliderKind.BODY]
        assert report.cause == "body"
        assert not ctx.snake.alive

    def test_food_and_wall_in_same_tick_both_apply(self, make_ctx):
        """Colliders are evaluated independently, so the snake eats and dies."""
        ctx = make_ctx(segments=[(30, 0), (29, 0)], food=(30, 0))
        report = check_for_collisions(ctx, WALLS)
        assert report.ate_food
        assert report.fatal
        assert report.hits == [ColliderKind.WALL, ColliderKind.FOOD]
        assert ctx.score == 1
        assert ctx.pending_growth == 1
