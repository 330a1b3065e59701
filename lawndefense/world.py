"""The lawn: every live game object, the sun bank, waves and collisions."""

from __future__ import annotations

from itertools import combinations

from .constants import (
    FIRST_COL_CENTER,
    FIRST_ROW_CENTER,
    GAME_COLS,
    GAME_ROWS,
    LAWN_GRID_HEIGHT,
    LAWN_GRID_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    CursorID,
    ImageID,
    LevelStatus,
    rand_int,
)
from .framework import TextBase, WorldBase
from .objects import (
    PLANT_FACTORIES,
    Background,
    BucketHeadZombie,
    CooldownMask,
    Explosion,
    GameObject,
    Pea,
    PlantingSpot,
    Seed,
    Shovel,
    Sun,
    Zombie,
)

_SEED_PACKETS = (
    (ImageID.SEED_SUNFLOWER, 130, CursorID.SUNFLOWER, 50),
    (ImageID.SEED_PEASHOOTER, 190, CursorID.PEASHOOTER, 100),
    (ImageID.SEED_WALLNUT, 250, CursorID.WALLNUT, 50),
    (ImageID.SEED_CHERRY_BOMB, 310, CursorID.CHERRY_BOMB, 150),
    (ImageID.SEED_REPEATER, 370, CursorID.REPEATER, 200),
)

_STARTING_SUN = 50


def collides(left: GameObject, right: GameObject) -> bool:
    """Tell whether a zombie and a non-zombie overlap."""
    if left.is_zombie == right.is_zombie:
        return False
    overlap_x = abs(left.x - right.x) < (left.width + right.width) // 2
    overlap_y = abs(left.y - right.y) < (left.height + right.height) // 2
    return overlap_x and overlap_y


class GameWorld(WorldBase):
    """Owns the level's objects and runs one tick of the game at a time."""

    def __init__(self):
        self.objects: list[GameObject] = []
        self.cursor: CursorID = CursorID.NONE
        self.cursor_cost = 0
        self.sun = _STARTING_SUN
        self.wave = 0
        self.last_wave_tick = 0
        self.tick = 0
        self.display_sun: TextBase | None = None
        self.display_wave: TextBase | None = None

    def init(self) -> None:
        """Lay out the background, lawn cells, seed packets, shovel and counters."""
        self.objects.append(Background())
        self.display_sun = TextBase(60, WINDOW_HEIGHT - 80, str(self.sun))
        self.display_wave = TextBase(WINDOW_WIDTH - 160, 8, f"Wave: {self.wave}")

        for col in range(GAME_COLS):
            for row in range(GAME_ROWS):
                self.objects.append(
                    PlantingSpot(
                        FIRST_COL_CENTER + LAWN_GRID_WIDTH * col,
                        FIRST_ROW_CENTER + LAWN_GRID_HEIGHT * row,
                        self,
                    )
                )

        for image_id, x, cursor_id, cost in _SEED_PACKETS:
            self.objects.append(Seed(image_id, x, WINDOW_HEIGHT - 44, self, cursor_id, cost))

        self.objects.append(Shovel(self))

    def _wave_due(self) -> bool:
        if self.wave == 0 and self.last_wave_tick >= 1200:
            return True
        if self.wave <= 22 and self.last_wave_tick >= 600 - 20 * self.wave:
            return True
        return self.wave >= 23 and self.last_wave_tick >= 150

    def update(self) -> LevelStatus:
        """Advance one tick: drop sun, send waves, move, fight and sweep the dead."""
        self.tick += 1
        self.last_wave_tick += 1

        if (self.tick - 180) % 300 == 0:
            self.create_sun(rand_int(75, WINDOW_WIDTH - 75), WINDOW_HEIGHT - 1, rand_int(63, 263), 0, -2, 0)

        if self._wave_due():
            self.wave += 1
            self.last_wave_tick = 0
            if self.display_wave is not None:
                self.display_wave.text = f"Wave: {self.wave}"
            for _ in range((15 + self.wave) // 10):
                self.create_zombie(
                    rand_int(WINDOW_WIDTH - 40, WINDOW_WIDTH - 1),
                    rand_int(1, GAME_ROWS) * LAWN_GRID_HEIGHT,
                )

        # Objects created during this pass are updated in the same tick.
        for obj in self.objects:
            obj.update()

        for first, second in combinations(self.objects, 2):
            if collides(first, second):
                first.attacked(second.attack(first))
                second.attacked(first.attack(second))

        kept: list[GameObject] = []
        for index, obj in enumerate(self.objects):
            if obj.x < 0:
                self.objects = kept + self.objects[index:]
                if self.display_wave is not None:
                    self.display_wave.set_color(1, 1, 1)
                    self.display_wave.text = str(self.wave)
                    self.display_wave.move_to(330, 50)
                return LevelStatus.LOSING
            if obj.is_dead:
                obj.destroy()
            else:
                kept.append(obj)
        self.objects = kept

        if self.display_sun is not None:
            self.display_sun.text = str(self.sun)
        return LevelStatus.ONGOING

    def clean_up(self) -> None:
        """Remove every object and text and reset the level state."""
        while self.objects:
            self.objects.pop().destroy()
        for text in (self.display_sun, self.display_wave):
            if text is not None:
                text.destroy()
        self.display_sun = None
        self.display_wave = None
        self.cursor = CursorID.NONE
        self.cursor_cost = 0
        self.sun = _STARTING_SUN
        self.wave = 0
        self.last_wave_tick = 0
        self.tick = 0

    def create_plant(self, x: int, y: int) -> None:
        """Plant the selected seed at a lawn cell and clear the cursor."""
        factory = PLANT_FACTORIES.get(self.cursor)
        if factory is None:
            raise ValueError(f"no plant selected: cursor is {self.cursor.name}")
        self.objects.append(factory(x, y, self))
        self.cursor = CursorID.NONE

    def set_cursor(self, cursor_id: CursorID, cost: int) -> None:
        self.cursor = cursor_id
        self.cursor_cost = cost

    def create_cooldown_mask(self, x: int, y: int, whole_time: int) -> None:
        self.objects.append(CooldownMask(x, y, self, whole_time))

    def create_sun(self, x, y, end_time, x_speed, y_speed, acceleration) -> None:
        self.objects.append(Sun(x, y, self, end_time, x_speed, y_speed, acceleration))

    def create_pea(self, x: int, y: int) -> None:
        self.objects.append(Pea(x, y, self))

    def create_explosion(self, x: int, y: int) -> None:
        self.objects.append(Explosion(x, y, self))

    def create_zombie(self, x: int, y: int) -> None:
        """Spawn a zombie; bucket heads grow more likely after wave 8."""
        regular_weight = 20
        bucket_weight = 2 * max(self.wave - 8, 0)
        if rand_int(0, regular_weight + bucket_weight) < regular_weight:
            self.objects.append(Zombie(x, y, self))
        else:
            self.objects.append(BucketHeadZombie(x, y, self))

    def charge(self) -> None:
        """Settle the pending cursor cost against the sun bank."""
        self.sun -= self.cursor_cost
        self.cursor_cost = 0

    def has_zombie_ahead(self, x: int, y: int) -> bool:
        """Tell whether a zombie stands at or right of ``x`` in the plant's row."""
        row_y = y - FIRST_ROW_CENTER + LAWN_GRID_HEIGHT
        return any(obj.is_zombie and obj.x >= x and obj.y == row_y for obj in self.objects)