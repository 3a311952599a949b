"""Data models."""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .constants import (
    GRID_W, GRID_H, CELL_SIZE, BODY_SIZE, WALL_THICKNESS, BASE_RATES,
)

if TYPE_CHECKING:
    from .snake import Snake

Cell = tuple[int, int]


class SessionPhase(Enum):
    MENU = "menu"
    IN_GAME = "in_game"


class Difficulty(Enum):
    SIMPLE = "simple"
    REGULAR = "regular"
    HARD = "hard"

    @property
    def base_rate(self) -> float:
        return BASE_RATES[self.value]


class ColliderKind(Enum):
    WALL = "wall"
    BODY = "body"
    FOOD = "food"


@dataclass(frozen=True)
class BoardConfig:
    width: int = GRID_W
    height: int = GRID_H
    cell_size: float = CELL_SIZE
    body_size: float = BODY_SIZE
    wall_thickness: float = WALL_THICKNESS

    @property
    def cell_count(self) -> int:
        return self.width * self.height


DEFAULT_BOARD = BoardConfig()


@dataclass(frozen=True)
class Box:
    """Axis-aligned box given by its center and full extents."""
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class Collider:
    kind: ColliderKind
    box: Box
    cell: Optional[Cell] = None


@dataclass
class CollisionReport:
    hits: list = field(default_factory=list)
    ate_food: bool = False
    fatal: bool = False

    @property
    def cause(self) -> Optional[str]:
        for kind in self.hits:
            if kind != ColliderKind.FOOD:
                return kind.value
        return None


@dataclass
class SessionContext:
    difficulty: Difficulty
    snake: "Snake"
    tick_interval: float
    rng: random.Random
    score: int = 0
    food: Optional[Cell] = None
    pending_growth: int = 0
    ticks: int = 0


@dataclass
class TickResult:
    head: Optional[Cell]
    collisions: CollisionReport
    score: int
    tick_interval: float
    velocity: Cell = (0, 0)
    grew: int = 0
    game_over: bool = False


@dataclass
class GameOver:
    score: int
    difficulty: Difficulty
    cause: Optional[str]
    length: int
