"""Fixed-step tick scheduling on top of a variable frame rate."""

from .game import GameState
from .models import TickResult


class TickScheduler:
    """Accumulates frame time and runs as many fixed ticks as it covers.

    Each tick consumes the interval that is in force when it starts, so a
    speed-up computed by one tick already applies to the next one.
    """

    def __init__(self, game: GameState):
        self.game = game
        self.accumulator = 0.0

    def step(self, elapsed: float) -> list[TickResult]:
        results = []
        if self.game.started:
            self.accumulator += elapsed
            while self.game.started and self.accumulator >= self.game.tick_interval:
                self.accumulator -= self.game.tick_interval
                results.append(self.game.tick())
        if not self.game.started:
            self.accumulator = 0.0

        self.game.frame()
        return results
