"""Core game state and logic."""

import logging
import random
from dataclasses import replace
from typing import Optional

from .constants import (
    GRID_SIZE, BASE_TICK_MS, MIN_TICK_MS, SPEED_STEP_SCORE, MAX_SPEED_LEVEL,
    FOODS_PER_SEASON, DIRECTIONS, OPPOSITES, KEY_BINDINGS, DEFAULT_SNAKE_COLOR,
)
from .food import make_food
from .grid import in_bounds
from .levels import generate_obstacles, next_season, season_name
from .models import GameState, RandomSource, Status

logger = logging.getLogger(__name__)


def speed_level(score: int) -> int:
    return min(1 + score // SPEED_STEP_SCORE, MAX_SPEED_LEVEL)


def tick_interval_ms(level: int) -> int:
    step_ms = (BASE_TICK_MS - MIN_TICK_MS) / (MAX_SPEED_LEVEL - 1)
    return round(BASE_TICK_MS - step_ms * (level - 1))


def is_opposite(a: Optional[str], b: Optional[str]) -> bool:
    if not a or not b:
        return False
    return OPPOSITES.get(a) == b


def direction_for_key(key: str) -> Optional[str]:
    return KEY_BINDINGS.get(key.lower())


def initial_state(rng: RandomSource = random) -> GameState:
    start = (GRID_SIZE // 2, GRID_SIZE // 2)
    snake = (start, (start[0] - 1, start[1]))
    season_index = 0
    obstacles = generate_obstacles(snake, season_index, rng)
    food = make_food(snake, obstacles, season_index, rng)
    return GameState(
        snake=snake,
        direction="right",
        next_direction="right",
        food=food,
        score=0,
        foods_eaten=0,
        season_index=season_index,
        obstacles=obstacles,
        speed_level=speed_level(0),
        snake_color=DEFAULT_SNAKE_COLOR,
        snake_dynamic=False,
        status=Status.READY,
    )


def start_game(state: GameState) -> GameState:
    if state.status != Status.READY:
        return state
    return replace(state, status=Status.RUNNING)


def queue_direction(state: GameState, requested: str) -> GameState:
    """Queue the direction for the next tick.

    Ignored unless the game is running, the direction is known, and it does
    not reverse the direction the snake is currently moving in.
    """
    if state.status != Status.RUNNING:
        return state
    if requested not in DIRECTIONS:
        return state
    if is_opposite(state.direction, requested):
        return state
    return replace(state, next_direction=requested)


def step(
    state: GameState, direction: Optional[str] = None, rng: RandomSource = random
) -> GameState:
    """Advance the game by one tick.

    Collisions end the game without moving the snake. Eating grows the snake
    by one, every ``FOODS_PER_SEASON`` foods rolls the season over and
    rebuilds the obstacles, and a new food is placed afterwards so it is
    always reachable under the new layout.
    """
    if state.status != Status.RUNNING:
        return state
    if direction is not None:
        state = queue_direction(state, direction)

    direction = state.next_direction
    dx, dy = DIRECTIONS[direction]
    hx, hy = state.head()
    new_head = (hx + dx, hy + dy)

    # Wall, then self (tail excluded), then obstacles
    if not in_bounds(new_head):
        return replace(state, status=Status.GAMEOVER)
    if new_head in state.snake[:-1]:
        return replace(state, status=Status.GAMEOVER)
    if new_head in state.obstacles:
        return replace(state, status=Status.GAMEOVER)

    snake = (new_head,) + state.snake
    food = state.food
    score = state.score
    foods_eaten = state.foods_eaten
    season_index = state.season_index
    obstacles = state.obstacles
    snake_color = state.snake_color
    snake_dynamic = state.snake_dynamic

    if food.pos is not None and new_head == food.pos:
        score += 1
        foods_eaten += 1
        if foods_eaten % FOODS_PER_SEASON == 0:
            season_index = next_season(season_index)
            obstacles = generate_obstacles(snake, season_index, rng)
            logger.debug("Season changed to %s", season_name(season_index))
        if state.food.dynamic:
            snake_dynamic = True
        else:
            snake_dynamic = False
            snake_color = state.food.color or snake_color
        food = make_food(snake, obstacles, season_index, rng)
    else:
        snake = snake[:-1]

    return replace(
        state,
        snake=snake,
        direction=direction,
        next_direction=direction,
        food=food,
        score=score,
        foods_eaten=foods_eaten,
        season_index=season_index,
        obstacles=obstacles,
        speed_level=speed_level(score),
        snake_color=snake_color,
        snake_dynamic=snake_dynamic,
    )
