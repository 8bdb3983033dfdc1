"""FastAPI application: config route, WebSocket endpoint, per-connection game loop."""

import json
import logging

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .constants import (
    GRID_SIZE, BASE_TICK_MS, MIN_TICK_MS, MAX_SPEED_LEVEL, FOODS_PER_SEASON,
    SEASONS, DIRECTIONS, KEY_BINDINGS, RESTART_KEYS, START_KEYS,
    HOST, PORT, LOG_LEVEL,
)
from .connection_manager import ConnectionManager, build_state_msg, build_game_over_msg
from .models import GameState, Status
from .session import GameSession

logger = logging.getLogger(__name__)

app = FastAPI(title="Season Snake")
manager = ConnectionManager()


@app.get("/api/config")
async def game_config():
    return {
        "grid": GRID_SIZE,
        "seasons": SEASONS,
        "foods_per_season": FOODS_PER_SEASON,
        "tick_ms": {"base": BASE_TICK_MS, "min": MIN_TICK_MS},
        "max_speed_level": MAX_SPEED_LEVEL,
        "directions": list(DIRECTIONS),
        "keys": {
            "directions": KEY_BINDINGS,
            "restart": sorted(RESTART_KEYS),
            "start": sorted(START_KEYS),
        },
    }


def parse_message(raw: str):
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed message: %.80r", raw)
        return None
    if not isinstance(msg, dict):
        logger.warning("Ignoring non-object message: %.80r", raw)
        return None
    return msg


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await manager.connect(ws)

    async def push_update(state: GameState):
        await manager.send_personal(ws, build_state_msg(state))
        if state.status == Status.GAMEOVER:
            await manager.send_personal(ws, build_game_over_msg(state))

    session = GameSession(on_update=push_update)
    try:
        await manager.send_personal(ws, build_state_msg(session.state))
        while True:
            msg = parse_message(await ws.receive_text())
            if msg is None:
                continue
            kind = msg.get("type")
            if kind in ("start", "restart"):
                session.start()
            elif kind == "stop":
                session.stop()
            elif kind == "input":
                d = msg.get("direction")
                if isinstance(d, str):
                    session.queue_direction(d)
            elif kind == "key":
                key = msg.get("key")
                if isinstance(key, str):
                    session.handle_key(key)
            else:
                continue
            await manager.send_personal(ws, build_state_msg(session.state))
    except WebSocketDisconnect:
        logger.info("Client disconnected")
    finally:
        session.stop()
        manager.disconnect(ws)


def main():
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Snake server starting on http://%s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
