"""Data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from .constants import DEFAULT_SNAKE_COLOR

Point = tuple[int, int]


class RandomSource(Protocol):
    def random(self) -> float: ...


class Status(Enum):
    READY = "ready"
    RUNNING = "running"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class Food:
    pos: Optional[Point] = None
    color: Optional[str] = None
    dynamic: bool = False


@dataclass(frozen=True)
class GameState:
    snake: tuple[Point, ...]  # head first
    direction: str = "right"
    next_direction: str = "right"
    food: Food = field(default_factory=Food)
    score: int = 0
    foods_eaten: int = 0
    season_index: int = 0
    obstacles: frozenset = frozenset()
    speed_level: int = 1
    snake_color: str = DEFAULT_SNAKE_COLOR
    snake_dynamic: bool = False
    status: Status = Status.READY

    def head(self) -> Point:
        return self.snake[0]

    def tail(self) -> Point:
        return self.snake[-1]
