"""Single-player session: owns one game state and its tick timer."""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from .constants import RESTART_KEYS, START_KEYS
from . import game
from .models import GameState, RandomSource, Status

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[GameState], Awaitable[None]]


class GameSession:
    def __init__(self, rng: RandomSource = random, on_update: Optional[UpdateCallback] = None):
        self.rng = rng
        self.on_update = on_update
        self.state = game.initial_state(rng)
        self.interval_ms = game.tick_interval_ms(self.state.speed_level)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> GameState:
        """Start a fresh game, replacing whatever was in progress.

        Must be called from inside a running event loop.
        """
        self.stop()
        self.state = game.start_game(game.initial_state(self.rng))
        self.interval_ms = game.tick_interval_ms(self.state.speed_level)
        self._task = asyncio.get_running_loop().create_task(self._run())
        self._task.add_done_callback(_log_task_failure)
        logger.info("Game started (%d obstacles)", len(self.state.obstacles))
        return self.state

    def stop(self):
        task, self._task = self._task, None
        if task is not None and not task.done() and task is not _current_task():
            task.cancel()

    def queue_direction(self, direction: str) -> GameState:
        self.state = game.queue_direction(self.state, direction)
        return self.state

    def handle_key(self, key: str) -> GameState:
        direction = game.direction_for_key(key)
        lowered = key.lower()
        if direction is not None:
            return self.queue_direction(direction)
        if lowered in RESTART_KEYS:
            return self.start()
        if lowered in START_KEYS and not self.running:
            return self.start()
        return self.state

    def tick(self) -> GameState:
        previous = self.state
        self.state = game.step(previous, rng=self.rng)

        if self.state.speed_level != previous.speed_level:
            self.interval_ms = game.tick_interval_ms(self.state.speed_level)
            logger.debug("Speed level %d, tick every %d ms", self.state.speed_level, self.interval_ms)

        if self.state.status == Status.GAMEOVER and previous.status != Status.GAMEOVER:
            logger.info("Game over with score %d", self.state.score)
            self.stop()
        return self.state

    def _owns_timer(self) -> bool:
        return self._task is not None and self._task is _current_task()

    async def _run(self):
        # a restart hands the timer to a new task
        while self._owns_timer() and self.state.status == Status.RUNNING:
            await asyncio.sleep(self.interval_ms / 1000)
            if not self._owns_timer():
                break
            state = self.tick()
            if self.on_update is not None:
                await self.on_update(state)


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


def _log_task_failure(task: asyncio.Task):
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Tick loop failed", exc_info=exc)
