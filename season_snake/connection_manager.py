"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket, WebSocketDisconnect

from .game import tick_interval_ms
from .levels import season_name
from .models import GameState

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def send_personal(self, ws: WebSocket, message: str) -> bool:
        """Send to one socket; a failed send drops the connection."""
        if ws not in self.connections:
            return False
        try:
            await ws.send_text(message)
        except (WebSocketDisconnect, RuntimeError, OSError) as exc:
            logger.debug("Dropping connection after failed send: %s", exc)
            self.connections.discard(ws)
            return False
        return True


def points_to_list(points) -> list[list[int]]:
    return [[x, y] for x, y in points]


def state_to_dict(state: GameState) -> dict:
    return {
        "snake": points_to_list(state.snake),
        "direction": state.direction,
        "food": list(state.food.pos) if state.food.pos is not None else None,
        "food_color": state.food.color,
        "food_dynamic": state.food.dynamic,
        "score": state.score,
        "foods_eaten": state.foods_eaten,
        "season": state.season_index,
        "season_name": season_name(state.season_index),
        "obstacles": points_to_list(sorted(state.obstacles)),
        "speed_level": state.speed_level,
        "tick_ms": tick_interval_ms(state.speed_level),
        "snake_color": state.snake_color,
        "snake_dynamic": state.snake_dynamic,
        "status": state.status.value,
    }


def build_state_msg(state: GameState) -> str:
    return json.dumps({"type": "state", **state_to_dict(state)})


def build_game_over_msg(state: GameState) -> str:
    return json.dumps({"type": "game_over", "score": state.score})
