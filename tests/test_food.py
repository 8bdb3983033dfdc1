import random

from season_snake.constants import SEASONS
from season_snake.food import make_food, place_food
from season_snake.game import initial_state

SNAKE = [(8, 8), (7, 8)]


def test_static_food_takes_season_color(scripted):
    food = make_food(SNAKE, set(), 2, scripted([0.0, 0.5, 0.99]))
    assert food.pos == (9, 8)  # first cell found by the search
    assert not food.dynamic
    assert food.color == SEASONS[2]["colors"][-1]


def test_dynamic_food_has_no_color(scripted):
    food = make_food(SNAKE, set(), 0, scripted([0.0, 0.1]))
    assert food.dynamic
    assert food.color is None


def test_enclosed_head_leaves_no_food(scripted):
    snake = [(0, 0), (1, 0), (2, 0)]
    food = make_food(snake, {(0, 1)}, 0, scripted([0.9, 0.0]))
    assert food.pos is None
    assert not food.dynamic
    assert food.color == SEASONS[0]["colors"][0]


def test_food_never_lands_on_vacating_tail():
    snake = [(0, 0), (0, 1)]
    obstacles = {(1, 0), (1, 1), (0, 2)}
    # the tail is the only reachable cell
    assert place_food(snake, obstacles, random.Random(0)) is None


def test_initial_food_is_free_and_reachable():
    for seed in range(50):
        state = initial_state(random.Random(seed))
        pos = state.food.pos
        assert pos is not None
        assert pos not in state.snake
        assert pos not in state.obstacles


def test_food_stays_in_head_region_of_split_board():
    from season_snake.constants import GRID_SIZE
    from season_snake.grid import reachable_cells

    snake = [(2, 2), (1, 2)]
    wall = {(x, 4) for x in range(GRID_SIZE)}
    region = reachable_cells(snake, wall)
    for seed in range(40):
        food = make_food(snake, wall, 1, random.Random(seed))
        assert food.pos in region
        assert food.pos[1] < 4
