"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket

from .game import GameState
from .models import Difficulty, GameOver

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def broadcast(self, message: str):
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_text(message)
            except Exception:
                logger.warning("Dropping connection after failed send", exc_info=True)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)


def build_welcome_msg(game: GameState) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [game.board.width, game.board.height],
        "difficulties": [d.value for d in Difficulty],
    })


def build_menu_msg(game: GameState) -> str:
    last = game.last_game_over
    return json.dumps({
        "type": "menu_state",
        "difficulty": game.difficulty.value,
        "difficulties": [d.value for d in Difficulty],
        "last_score": last.score if last else None,
    })


def build_game_start_msg(game: GameState) -> str:
    return json.dumps({
        "type": "game_start",
        "difficulty": game.difficulty.value,
        "grid": [game.board.width, game.board.height],
        "tick_interval": game.tick_interval,
    })


def build_state_msg(game: GameState) -> str:
    return json.dumps({"type": "state", **game.snapshot()})


def build_game_over_msg(game_over: GameOver) -> str:
    return json.dumps({
        "type": "game_over",
        "score": game_over.score,
        "difficulty": game_over.difficulty.value,
        "cause": game_over.cause,
        "length": game_over.length,
    })
