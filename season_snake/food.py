"""Food placement."""

import logging
import random
from typing import Iterable, Sequence

from .constants import DYNAMIC_FOOD_CHANCE
from .grid import pick, reachable_cells
from .levels import season_colors
from .models import Food, Point, RandomSource

logger = logging.getLogger(__name__)


def place_food(
    snake: Sequence[Point], obstacles: Iterable[Point], rng: RandomSource = random
):
    occupied = set(snake)
    candidates = [cell for cell in reachable_cells(snake, obstacles) if cell not in occupied]
    if not candidates:
        logger.debug("No reachable cell left for food")
        return None
    return pick(rng, candidates)


def random_food_color(season_index: int, rng: RandomSource = random) -> str:
    return pick(rng, season_colors(season_index))


def make_food(
    snake: Sequence[Point],
    obstacles: Iterable[Point],
    season_index: int,
    rng: RandomSource = random,
) -> Food:
    """Place the next food on a reachable cell and roll its colour.

    One in five foods is dynamic (rainbow) and carries no colour. ``pos`` is
    None when the head is boxed in.
    """
    pos = place_food(snake, obstacles, rng)
    dynamic = rng.random() < DYNAMIC_FOOD_CHANCE
    return Food(
        pos=pos,
        dynamic=dynamic,
        color=None if dynamic else random_food_color(season_index, rng),
    )
