"""Game constants."""

import os

GRID_SIZE = 16
BASE_TICK_MS = 220
MIN_TICK_MS = 110
SPEED_STEP_SCORE = 4
MAX_SPEED_LEVEL = 6
FOODS_PER_SEASON = 5
DYNAMIC_FOOD_CHANCE = 0.2
BASE_OBSTACLES = 3
OBSTACLES_PER_SEASON = 2
MAX_CLUSTER = 3

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

SEASONS = [
    {"name": "Spring", "colors": ["#8ccf7a", "#c9e27c", "#f2d27a"]},
    {"name": "Summer", "colors": ["#8fcf6a", "#d9c262", "#f2b55a"]},
    {"name": "Autumn", "colors": ["#d8894a", "#c75d3a", "#f0a55b"]},
    {"name": "Winter", "colors": ["#9dc9e9", "#b8dff2", "#e9f3f7"]},
]

DEFAULT_SNAKE_COLOR = "linear-gradient(135deg, #3b6238, #55824e)"

KEY_BINDINGS = {
    "arrowup": "up", "w": "up",
    "arrowdown": "down", "s": "down",
    "arrowleft": "left", "a": "left",
    "arrowright": "right", "d": "right",
}
RESTART_KEYS = {"r"}
START_KEYS = {" ", "enter"}

HOST = os.environ.get("SNAKE_HOST", "0.0.0.0")
PORT = int(os.environ.get("SNAKE_PORT", "8765"))
LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "INFO").upper()
