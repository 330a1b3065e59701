"""Shared enumerations, board geometry and the random helper."""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from pathlib import Path

DEFAULT_ASSET_DIR = Path("../assets")

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

LAWN_GRID_WIDTH = 80
LAWN_GRID_HEIGHT = 100

FIRST_ROW_CENTER = 75
FIRST_COL_CENTER = 75
GAME_ROWS = 5
GAME_COLS = 9

SEED_WIDTH = 50
SEED_HEIGHT = 70

MAX_LAYERS = 7

MS_PER_FRAME = 33

_rng = random.Random()


def rand_int(low: int, high: int) -> int:
    """Return a random integer in [low, high], inclusive; the bounds may come in either order."""
    if high < low:
        low, high = high, low
    return _rng.randint(low, high)


class LevelStatus(Enum):
    ONGOING = "ongoing"
    LOSING = "losing"


class KeyCode(Enum):
    NONE = 0
    ENTER = 1
    QUIT = 2


class ImageID(IntEnum):
    NONE = 0
    BACKGROUND = 1
    SUN = 2
    SHOVEL = 3
    COOLDOWN_MASK = 4
    SUNFLOWER = 10
    PEASHOOTER = 11
    WALLNUT = 12
    CHERRY_BOMB = 13
    REPEATER = 14
    WALLNUT_CRACKED = 15
    RED_REPEATER = 16
    SEED_SUNFLOWER = 20
    SEED_PEASHOOTER = 21
    SEED_WALLNUT = 22
    SEED_CHERRY_BOMB = 23
    SEED_REPEATER = 24
    SEED_RED_REPEATER = 25
    REGULAR_ZOMBIE = 30
    BUCKET_HEAD_ZOMBIE = 31
    POLE_VAULTING_ZOMBIE = 32
    PEA = 40
    EXPLOSION = 41
    RED_PEA = 42
    ZOMBIES_WON = 100


class AnimID(IntEnum):
    NO_ANIMATION = 0
    IDLE = 1
    WALK = 2
    EAT = 3
    RUN = 4
    JUMP = 5


class LayerID(IntEnum):
    SUN = 0
    ZOMBIES = 1
    PROJECTILES = 2
    PLANTS = 3
    COOLDOWN_MASK = 4
    UI = 5
    BACKGROUND = 6


class CursorID(Enum):
    NONE = 0
    SUNFLOWER = 1
    PEASHOOTER = 2
    WALLNUT = 3
    CHERRY_BOMB = 4
    REPEATER = 5
    SHOVEL = 6