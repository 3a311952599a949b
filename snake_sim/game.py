"""Core game state and logic."""

import logging
import random
from typing import Callable, Optional

from .collisions import check_for_collisions, wall_colliders
from .food import spawn_food
from .models import (
    BoardConfig, Difficulty, GameOver, SessionContext, SessionPhase, TickResult,
    DEFAULT_BOARD,
)
from .snake import Snake
from .speed import tick_interval

logger = logging.getLogger(__name__)

MENU_TICK_INTERVAL = 1.0


class GameState:
    def __init__(self, board: BoardConfig = DEFAULT_BOARD, seed: Optional[int] = None):
        self.board = board
        self.walls = wall_colliders(board)
        self.phase = SessionPhase.MENU
        self.difficulty = Difficulty.SIMPLE
        self.session: Optional[SessionContext] = None
        self.rng = random.Random(seed)
        self.next_phase: Optional[SessionPhase] = None
        self.last_game_over: Optional[GameOver] = None
        self.events: list[dict] = []
        self.scoreboard = 0
        self._game_over_listeners: list[Callable[[GameOver], None]] = []

    @property
    def started(self) -> bool:
        return self.phase == SessionPhase.IN_GAME

    @property
    def tick_interval(self) -> float:
        if self.session is None:
            return MENU_TICK_INTERVAL
        return self.session.tick_interval

    def add_game_over_listener(self, callback: Callable[[GameOver], None]):
        self._game_over_listeners.append(callback)

    def select_difficulty(self, difficulty: Difficulty) -> bool:
        """Menu selection: start a fresh session at ``difficulty``.

        Returns False (and changes nothing) if a session is already running.
        """
        if self.phase != SessionPhase.MENU:
            return False
        self.difficulty = difficulty
        self.start_game()
        return True

    def start_game(self):
        self.session = SessionContext(
            difficulty=self.difficulty,
            snake=Snake.spawn(),
            tick_interval=tick_interval(0, self.difficulty),
            rng=self.rng,
        )
        self.scoreboard = 0
        self.events.clear()
        self.next_phase = None
        self.phase = SessionPhase.IN_GAME
        logger.info("Session started (difficulty=%s)", self.difficulty.value)
        spawn_food(self.session, self.board)

    def change_direction(self, direction: str) -> bool:
        if self.session is None:
            return False
        self.session.snake.change_direction(direction)
        return True

    def frame(self):
        """Variable-rate pass: keep a food item on the board."""
        if self.session is None:
            return None
        food = spawn_food(self.session, self.board)
        if food is not None:
            self.events.append({"type": "food_spawned", "cell": food})
        return food

    def tick(self) -> Optional[TickResult]:
        if self.phase != SessionPhase.IN_GAME:
            return None

        ctx = self.session
        ctx.ticks += 1
        self.events.clear()

        head = ctx.snake.advance()
        report = check_for_collisions(ctx, self.walls, self.board)
        if report.ate_food:
            self.events.append({"type": "food_eaten", "cell": head, "score": ctx.score})
        if report.fatal:
            self.next_phase = SessionPhase.MENU

        self.scoreboard = ctx.score
        ctx.tick_interval = tick_interval(ctx.score, ctx.difficulty)

        grew = 0
        while ctx.pending_growth > 0:
            ctx.snake.grow()
            ctx.pending_growth -= 1
            grew += 1

        result = TickResult(
            head=head,
            collisions=report,
            score=ctx.score,
            tick_interval=ctx.tick_interval,
            velocity=ctx.snake.velocity,
            grew=grew,
            game_over=report.fatal,
        )
        logger.debug("Tick %d: head=%s score=%d interval=%.3f",
                     ctx.ticks, head, ctx.score, ctx.tick_interval)

        if self.next_phase == SessionPhase.MENU:
            self.end_game(report.cause)
        return result

    def end_game(self, cause: Optional[str] = None):
        ctx = self.session
        game_over = GameOver(
            score=ctx.score,
            difficulty=ctx.difficulty,
            cause=cause,
            length=len(ctx.snake.segments),
        )
        self.session = None
        self.next_phase = None
        self.phase = SessionPhase.MENU
        self.last_game_over = game_over
        self.events.append({"type": "game_over", "score": game_over.score, "cause": cause})
        logger.info("Game over (score=%d, cause=%s)", game_over.score, cause)
        for listener in self._game_over_listeners:
            listener(game_over)

    def snapshot(self) -> dict:
        """Read-only projection for rendering and the UI."""
        ctx = self.session
        return {
            "phase": self.phase.value,
            "difficulty": self.difficulty.value,
            "score": self.scoreboard,
            "segments": list(ctx.snake.segments) if ctx else [],
            "food": ctx.food if ctx else None,
            "direction": ctx.snake.direction if ctx else None,
            "alive": ctx.snake.alive if ctx else False,
            "tick_interval": self.tick_interval,
            "events": list(self.events),
        }
