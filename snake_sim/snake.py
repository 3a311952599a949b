"""Snake body, occupancy map and per-tick movement."""

from dataclasses import dataclass, field
from typing import Optional

from .constants import DIRECTIONS, OPPOSITES, START_HEAD, START_TAIL, START_DIRECTION
from .models import Cell


@dataclass
class Snake:
    segments: list = field(default_factory=list)
    occupancy: dict = field(default_factory=dict)
    direction: str = START_DIRECTION
    next_direction: str = START_DIRECTION
    tail_position: Optional[Cell] = None
    alive: bool = True

    @classmethod
    def spawn(cls, head: Cell = START_HEAD, tail: Cell = START_TAIL,
              direction: str = START_DIRECTION) -> "Snake":
        snake = cls(segments=[head, tail], direction=direction, next_direction=direction)
        snake.occupancy = {head: True, tail: True}
        snake.tail_position = tail
        return snake

    def head(self) -> Cell:
        return self.segments[0]

    @property
    def velocity(self) -> Cell:
        if not self.alive:
            return 0, 0
        return DIRECTIONS[self.direction]

    def is_occupied(self, cell: Cell) -> bool:
        return self.occupancy.get(cell, False)

    def occupied_count(self) -> int:
        return sum(1 for taken in self.occupancy.values() if taken)

    def change_direction(self, direction: str):
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        self.next_direction = direction

    def halt(self):
        self.alive = False

    def advance(self) -> Optional[Cell]:
        """Move one cell in the applied direction and return the new head.

        A reversal straight into the neck is ignored for the tick; the previous
        direction is kept instead. The cell given up by the tail is stored in
        ``tail_position`` so a growth event can put a segment back there.
        """
        if not self.alive:
            return None

        if OPPOSITES[self.next_direction] != self.direction:
            self.direction = self.next_direction

        dx, dy = DIRECTIONS[self.direction]
        hx, hy = self.segments[0]
        new_head = (hx + dx, hy + dy)
        self.occupancy[new_head] = True

        self.segments.insert(0, new_head)
        vacated = self.segments.pop()
        self.tail_position = vacated

        # Chasing its own tail: the head now sits on the vacated cell.
        if vacated != new_head:
            self.occupancy[vacated] = False
        return new_head

    def grow(self) -> Cell:
        self.segments.append(self.tail_position)
        self.occupancy[self.tail_position] = True
        return self.tail_position
