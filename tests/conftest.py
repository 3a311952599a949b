import random

import pytest

from snake_sim.models import Difficulty, SessionContext
from snake_sim.snake import Snake


@pytest.fixture
def make_ctx():
    def _make(segments=None, direction="right", food=None, difficulty=Difficulty.SIMPLE, seed=0):
        if segments is None:
            snake = Snake.spawn()
        else:
            snake = Snake(
                segments=list(segments),
                occupancy={cell: True for cell in segments},
                direction=direction,
                next_direction=direction,
                tail_position=segments[-1],
            )
        return SessionContext(
            difficulty=difficulty,
            snake=snake,
            tick_interval=1.0,
            rng=random.Random(seed),
            food=food,
        )
    return _make
