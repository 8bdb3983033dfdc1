"""Board geometry and reachability search."""

from collections import deque
from typing import Iterable, Sequence, TypeVar

from .constants import GRID_SIZE
from .models import Point, RandomSource

T = TypeVar("T")


def to_index(point: Point) -> int:
    x, y = point
    return y * GRID_SIZE + x


def from_index(index: int) -> Point:
    return (index % GRID_SIZE, index // GRID_SIZE)


def in_bounds(point: Point) -> bool:
    x, y = point
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def neighbors(point: Point) -> list[Point]:
    x, y = point
    options = [(x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)]
    return [cell for cell in options if in_bounds(cell)]


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Uniformly pick one element using a ``random() -> [0, 1)`` source."""
    return options[int(rng.random() * len(options))]


def reachable_cells(snake: Sequence[Point], obstacles: Iterable[Point]) -> list[Point]:
    """Cells reachable from the snake head, in BFS discovery order.

    Every segment but the tail blocks movement, since the tail vacates its
    cell on the next tick. The head itself is not included.
    """
    blocked = set(snake[:-1])
    blocked.update(obstacles)

    head = snake[0]
    visited = {head}
    queue = deque([head])
    reachable = []

    while queue:
        current = queue.popleft()
        for cell in neighbors(current):
            if cell in blocked or cell in visited:
                continue
            visited.add(cell)
            queue.append(cell)
            reachable.append(cell)

    return reachable
