"""Game constants."""

GRID_DIMENSION = 20
TICK_INTERVAL_MS = 100
SCORE_INCREMENT = 10

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

START_DIRECTION = "right"

HOST = "0.0.0.0"
PORT = 8765
HIGH_SCORE_FILE = "snake_high_score.json"
LOG_LEVEL = "INFO"
