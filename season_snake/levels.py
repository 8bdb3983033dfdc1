"""Season definitions and obstacle generation."""

import logging
import random
from typing import Sequence

from .constants import (
    GRID_SIZE, SEASONS, BASE_OBSTACLES, OBSTACLES_PER_SEASON, MAX_CLUSTER,
)
from .grid import neighbors, pick
from .models import Point, RandomSource

logger = logging.getLogger(__name__)


def season_name(season_index: int) -> str:
    return SEASONS[season_index % len(SEASONS)]["name"]


def season_colors(season_index: int) -> list[str]:
    return SEASONS[season_index % len(SEASONS)]["colors"]


def next_season(season_index: int) -> int:
    return (season_index + 1) % len(SEASONS)


def obstacle_target(season_index: int) -> int:
    return BASE_OBSTACLES + season_index * OBSTACLES_PER_SEASON


def generate_obstacles(
    snake: Sequence[Point], season_index: int, rng: RandomSource = random
) -> frozenset:
    """Scatter small clusters of stone blocks for a season.

    Each cluster starts on a random free cell and grows up to
    ``MAX_CLUSTER`` cells by stepping from the most recently placed block to
    a random in-bounds neighbour. Clusters may wall off parts of the board.
    """
    target = obstacle_target(season_index)
    occupied = set(snake)
    placed: list[Point] = []
    blocks: set[Point] = set()

    def add_cell(cell: Point) -> bool:
        if cell in occupied or cell in blocks:
            return False
        blocks.add(cell)
        placed.append(cell)
        return True

    while len(placed) < target:
        origin = (int(rng.random() * GRID_SIZE), int(rng.random() * GRID_SIZE))
        if not add_cell(origin):
            continue

        cluster_size = min(MAX_CLUSTER, target - len(placed) + 1)
        for _ in range(1, cluster_size):
            options = neighbors(placed[-1])
            if not options:
                break
            add_cell(pick(rng, options))

    logger.debug("Generated %d obstacles for %s", len(blocks), season_name(season_index))
    return frozenset(blocks)
