"""Game constants."""

GRID_W, GRID_H = 30, 20
CELL_SIZE = 30.0
BODY_SIZE = 25.0
WALL_THICKNESS = 10.0

FRAME_RATE = 60
LOG_BASE = 600
MIN_TICK_INTERVAL = 0.01

START_HEAD = (1, 0)
START_TAIL = (0, 0)
START_DIRECTION = "right"

# Cell deltas; row 0 is the top row.
DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

BASE_RATES = {
    "simple": 2.0,
    "regular": 20.0,
    "hard": 200.0,
}
