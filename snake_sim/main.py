"""FastAPI application: WebSocket endpoint and game loop."""

import asyncio
import json
import logging
import os

from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .constants import DIRECTIONS, FRAME_RATE
from .game import GameState
from .models import Difficulty, GameOver
from .scheduler import TickScheduler
from .connection_manager import (
    ConnectionManager, build_welcome_msg, build_menu_msg, build_game_start_msg,
    build_state_msg, build_game_over_msg,
)

logger = logging.getLogger(__name__)

DIFFICULTIES = {d.value: d for d in Difficulty}


@asynccontextmanager
async def lifespan(app: FastAPI):
    task = asyncio.create_task(game_loop())
    yield
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task


app = FastAPI(lifespan=lifespan)
game = GameState()
scheduler = TickScheduler(game)
manager = ConnectionManager()
outbox: list[str] = []


def queue_game_over(game_over: GameOver):
    outbox.append(build_game_over_msg(game_over))
    outbox.append(build_menu_msg(game))


game.add_game_over_listener(queue_game_over)


@app.get("/")
async def index():
    return {"name": "snake_sim", "phase": game.phase.value}


async def handle_message(msg: dict):
    kind = msg.get("type")
    if kind == "select_difficulty":
        difficulty = DIFFICULTIES.get(msg.get("difficulty"))
        if difficulty is None:
            logger.warning("Ignoring unknown difficulty %r", msg.get("difficulty"))
            return
        if game.select_difficulty(difficulty):
            await manager.broadcast(build_game_start_msg(game))
            await manager.broadcast(build_state_msg(game))
    elif kind == "input":
        d = msg.get("direction")
        if d in DIRECTIONS:
            game.change_direction(d)
        else:
            logger.warning("Ignoring unknown direction %r", d)
    else:
        logger.warning("Ignoring message of type %r", kind)


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await manager.connect(ws)
    try:
        await ws.send_text(build_welcome_msg(game))
        if game.started:
            await ws.send_text(build_game_start_msg(game))
            await ws.send_text(build_state_msg(game))
        else:
            await ws.send_text(build_menu_msg(game))
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.warning("Ignoring non-text frame")
                continue
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed message: %.80s", raw)
                continue
            if not isinstance(msg, dict):
                logger.warning("Ignoring non-object message")
                continue
            await handle_message(msg)
    except WebSocketDisconnect:
        logger.info("Client disconnected")
    finally:
        manager.disconnect(ws)


async def flush_outbox():
    while outbox:
        await manager.broadcast(outbox.pop(0))


async def run_frame(elapsed: float):
    """One pass of the host loop: advance the scheduler, then push updates."""
    results = scheduler.step(elapsed)
    if results:
        await manager.broadcast(build_state_msg(game))
    await flush_outbox()
    return results


async def game_loop():
    loop = asyncio.get_running_loop()
    last = loop.time()
    while True:
        now = loop.time()
        try:
            await run_frame(now - last)
        except Exception:
            logger.exception("Game loop frame failed")
        last = now

        await asyncio.sleep(1 / FRAME_RATE)


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("SNAKE_HOST", "0.0.0.0")
    port = int(os.environ.get("SNAKE_PORT", "8765"))
    logger.info("Snake server starting on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
