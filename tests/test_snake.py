"""Tests for the snake body and movement."""

import pytest

from snake_sim.snake import Snake


def occupied(snake):
    return {cell for cell, taken in snake.occupancy.items() if taken}


class TestSpawn:
    def test_spawn_layout(self):
        """A new snake is two segments long, head ahead of the tail, facing away from it."""
        snake = Snake.spawn()
        assert snake.segments == [(1, 0), (0, 0)]
        assert snake.head() == (1, 0)
        assert snake.direction == "right"
        assert snake.velocity == (1, 0)
        assert occupied(snake) == {(1, 0), (0, 0)}


class TestAdvance:
    def test_first_tick_moves_right(self):
        """Every segment takes the place of the one in front of it."""
        snake = Snake.spawn()
        assert snake.advance() == (2, 0)
        assert snake.segments == [(2, 0), (1, 0)]
        assert snake.tail_position == (0, 0)

    def test_vacated_cell_is_freed(self):
        snake = Snake.spawn()
        snake.advance()
        assert not snake.is_occupied((0, 0))
        assert occupied(snake) == {(2, 0), (1, 0)}

    def test_turn(self):
        snake = Snake.spawn()
        snake.change_direction("down")
        assert snake.advance() == (1, 1)
        assert snake.direction == "down"

    def test_reversal_is_ignored(self):
        """Turning straight back into the neck keeps the previous direction."""
        snake = Snake.spawn()
        snake.change_direction("left")
        assert snake.advance() == (2, 0)
        assert snake.direction == "right"

    def test_last_buffered_direction_wins(self):
        snake = Snake.spawn()
        snake.change_direction("up")
        snake.change_direction("down")
        assert snake.advance() == (1, 1)

    def test_unknown_direction_rejected(self):
        snake = Snake.spawn()
        with pytest.raises(ValueError):
            snake.change_direction("sideways")
        assert snake.next_direction == "right"

    def test_halted_snake_does_not_move(self):
        snake = Snake.spawn()
        snake.halt()
        assert snake.advance() is None
        assert snake.segments == [(1, 0), (0, 0)]
        assert snake.velocity == (0, 0)

    def test_head_entering_vacated_tail_cell_stays_occupied(self):
        """Chasing the tail around a 2x2 square keeps the head cell marked."""
        segments = [(1, 1), (1, 0), (0, 0), (0, 1)]
        snake = Snake(
            segments=list(segments),
            occupancy={cell: True for cell in segments},
            direction="down",
            next_direction="down",
        )
        snake.change_direction("left")
        assert snake.advance() == (0, 1)
        assert snake.segments == [(0, 1), (1, 1), (1, 0), (0, 0)]
        assert occupied(snake) == set(snake.segments)


class TestGrow:
    def test_grow_reuses_vacated_tail_cell(self):
        snake = Snake.spawn()
        snake.advance()
        assert snake.grow() == (0, 0)
        assert snake.segments == [(2, 0), (1, 0), (0, 0)]
        assert occupied(snake) == set(snake.segments)

    def test_occupancy_matches_body_while_moving_and_growing(self):
        snake = Snake.spawn()
        moves = ["right", "down", "down", "left", "down", "right", "right", "up"]
        for i, move in enumerate(moves):
            snake.change_direction(move)
            snake.advance()
            if i % 2 == 0:
                snake.grow()
            assert occupied(snake) == set(snake.segments)
        assert len(snake.segments) == 2 + 4
