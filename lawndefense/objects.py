"""Game objects on the lawn: plants, zombies, projectiles and UI widgets."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from .constants import (
    LAWN_GRID_HEIGHT,
    LAWN_GRID_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AnimID,
    CursorID,
    ImageID,
    LayerID,
    rand_int,
)
from .framework import ObjectBase

if TYPE_CHECKING:
    from .world import GameWorld


class GameObject(ObjectBase):
    """An object taking part in the game: it can die, attack and be attacked."""

    is_zombie: bool = False
    is_plant: bool = False

    def __init__(self, image_id, x, y, layer, width, height, anim_id):
        super().__init__(image_id, x, y, layer, width, height, anim_id)
        self.is_dead = False

    def update(self) -> None:
        """Do nothing by default."""

    def on_click(self) -> None:
        """Ignore clicks by default."""

    def attack(self, other: GameObject) -> int:
        """Return the damage this object deals to ``other`` on contact."""
        return 0

    def attacked(self, damage: int) -> None:
        """Take ``damage``; ignored by default."""


class Background(GameObject):
    """The lawn picture filling the whole window."""

    def __init__(self):
        super().__init__(
            ImageID.BACKGROUND,
            WINDOW_WIDTH // 2,
            WINDOW_HEIGHT // 2,
            LayerID.BACKGROUND,
            WINDOW_WIDTH,
            WINDOW_HEIGHT,
            AnimID.NO_ANIMATION,
        )


class Plant(GameObject):
    """A plant on the lawn; planting it pays for the selected seed."""

    is_plant = True

    def __init__(self, image_id, x, y, world, hp):
        super().__init__(image_id, x, y, LayerID.PLANTS, 60, 80, AnimID.IDLE)
        self.world: GameWorld = world
        self.hp = hp
        world.charge()

    def on_click(self) -> None:
        """Dig the plant up when the shovel is held."""
        if self.world.cursor == CursorID.SHOVEL:
            self.world.set_cursor(CursorID.NONE, 0)
            self.is_dead = True

    def attacked(self, damage: int) -> None:
        self.hp -= damage

    @abstractmethod
    def create_cooldown_mask(self) -> None:
        """Cover this plant's seed packet while it recharges."""


class Sunflower(Plant):
    """Produces a sun every 300 ticks."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.SUNFLOWER, x, y, world, 300)
        self.sun_time = rand_int(0, 240)
        self.create_cooldown_mask()

    def create_cooldown_mask(self) -> None:
        self.world.create_cooldown_mask(130, WINDOW_HEIGHT - 44, 240)

    def update(self) -> None:
        if self.hp <= 0:
            self.is_dead = True
            return
        self.sun_time += 1
        if self.sun_time >= 300:
            self.world.create_sun(self.x, self.y, 12, -1, 4, -1)
            self.sun_time = 0


class Peashooter(Plant):
    """Shoots a pea every 30 ticks while a zombie is ahead in its row."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.PEASHOOTER, x, y, world, 300)
        self.time = 0
        self.create_cooldown_mask()

    def create_cooldown_mask(self) -> None:
        self.world.create_cooldown_mask(190, WINDOW_HEIGHT - 44, 240)

    def update(self) -> None:
        if self.hp <= 0:
            self.is_dead = True
            return
        self.time += 1
        if self.time >= 30 and self.world.has_zombie_ahead(self.x, self.y):
            self.world.create_pea(self.x + 30, self.y + 20)
            self.time = 0


class Repeater(Plant):
    """Like a peashooter, but follows each shot with a second pea 5 ticks later."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.REPEATER, x, y, world, 300)
        self.time = 0
        self.shot_first = False
        self.create_cooldown_mask()

    def create_cooldown_mask(self) -> None:
        self.world.create_cooldown_mask(370, WINDOW_HEIGHT - 44, 240)

    def update(self) -> None:
        if self.hp <= 0:
            self.is_dead = True
            return
        self.time += 1
        if self.time >= 30 and self.world.has_zombie_ahead(self.x, self.y):
            self.world.create_pea(self.x + 30, self.y + 20)
            self.time = 0
            self.shot_first = True
        if self.time == 5 and self.shot_first:
            self.world.create_pea(self.x + 30, self.y + 20)
            self.shot_first = False


class Wallnut(Plant):
    """A tough blocker that shows cracks once badly damaged."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.WALLNUT, x, y, world, 4000)
        self.create_cooldown_mask()

    def create_cooldown_mask(self) -> None:
        self.world.create_cooldown_mask(250, WINDOW_HEIGHT - 44, 900)

    def update(self) -> None:
        if self.hp <= 0:
            self.is_dead = True
        elif self.hp <= 1333:
            self.change_image(ImageID.WALLNUT_CRACKED)


class CherryBomb(Plant):
    """Explodes 15 ticks after being planted."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.CHERRY_BOMB, x, y, world, 4000)
        self.time = 0
        self.create_cooldown_mask()

    def create_cooldown_mask(self) -> None:
        self.world.create_cooldown_mask(310, WINDOW_HEIGHT - 44, 1200)

    def update(self) -> None:
        self.time += 1
        if self.time == 15:
            self.is_dead = True
            self.world.create_explosion(self.x, self.y)


class PlantingSpot(GameObject):
    """An invisible lawn cell that plants the selected seed when clicked."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.NONE, x, y, LayerID.UI, 60, 80, AnimID.NO_ANIMATION)
        self.world: GameWorld = world

    def on_click(self) -> None:
        if self.world.cursor in (CursorID.NONE, CursorID.SHOVEL):
            return
        self.world.create_plant(self.x, self.y)


class Seed(GameObject):
    """A seed packet that selects a plant type when enough sun is banked."""

    def __init__(self, image_id, x, y, world, cursor_id, cost):
        super().__init__(image_id, x, y, LayerID.UI, 50, 70, AnimID.NO_ANIMATION)
        self.world: GameWorld = world
        self.cursor_id: CursorID = cursor_id
        self.cost = cost

    def on_click(self) -> None:
        if self.world.cursor == self.cursor_id:
            self.world.set_cursor(CursorID.NONE, 0)
        elif self.world.sun >= self.cost:
            self.world.set_cursor(self.cursor_id, self.cost)


class Shovel(GameObject):
    """Picks up or puts down the shovel."""

    def __init__(self, world):
        super().__init__(
            ImageID.SHOVEL, 600, WINDOW_HEIGHT - 40, LayerID.UI, 50, 50, AnimID.NO_ANIMATION
        )
        self.world: GameWorld = world

    def on_click(self) -> None:
        if self.world.cursor == CursorID.SHOVEL:
            self.world.set_cursor(CursorID.NONE, 0)
        elif self.world.cursor == CursorID.NONE:
            self.world.set_cursor(CursorID.SHOVEL, 0)


class CooldownMask(GameObject):
    """Covers a seed packet for ``whole_time`` ticks."""

    def __init__(self, x, y, world, whole_time):
        super().__init__(
            ImageID.COOLDOWN_MASK, x, y, LayerID.COOLDOWN_MASK, 50, 70, AnimID.NO_ANIMATION
        )
        self.world: GameWorld = world
        self.begin_time = 0
        self.whole_time = whole_time

    def update(self) -> None:
        self.begin_time += 1
        if self.begin_time >= self.whole_time:
            self.is_dead = True


class Sun(GameObject):
    """A falling sun; it stops after ``end_time`` ticks and fades 300 ticks later."""

    def __init__(self, x, y, world, end_time, x_speed, y_speed, acceleration):
        super().__init__(ImageID.SUN, x, y, LayerID.SUN, 80, 80, AnimID.IDLE)
        self.world: GameWorld = world
        self.is_active = True
        self.time = 0
        self.end_time = end_time
        self.x_speed = x_speed
        self.y_speed = y_speed
        self.acceleration = acceleration

    def update(self) -> None:
        if self.is_active:
            self.move_to(self.x + self.x_speed, self.y + self.y_speed)
            self.y_speed += self.acceleration
        self.time += 1
        if self.is_active and self.time >= self.end_time:
            self.is_active = False
            self.time = 0
        elif self.time == 300:
            self.is_dead = True

    def on_click(self) -> None:
        """Collect the sun, adding 25 to the bank."""
        self.is_dead = True
        self.world.cursor_cost = -25
        self.world.charge()


class Zombie(GameObject):
    """Walks left one pixel per tick and eats the plants it touches."""

    is_zombie = True

    def __init__(self, x, y, world):
        super().__init__(ImageID.REGULAR_ZOMBIE, x, y, LayerID.ZOMBIES, 20, 50, AnimID.WALK)
        self.world: GameWorld = world
        self.hp = 200
        self.is_eating = False
        self.was_eating = False

    def regular_update(self) -> None:
        """Die, walk or eat depending on health and what was hit last tick."""
        if self.hp <= 0 and not self.is_dead:
            self.is_dead = True
            return
        if self.is_eating:
            if not self.was_eating:
                self.play_animation(AnimID.EAT)
        else:
            if self.was_eating:
                self.play_animation(AnimID.WALK)
            self.move_to(self.x - 1, self.y)
        self.was_eating = self.is_eating
        self.is_eating = False

    def update(self) -> None:
        self.regular_update()

    def attack(self, other: GameObject) -> int:
        if not other.is_plant:
            return 0
        self.is_eating = True
        return 3

    def attacked(self, damage: int) -> None:
        self.hp -= damage


class BucketHeadZombie(Zombie):
    """A zombie with a bucket that falls off once health drops to 200."""

    def __init__(self, x, y, world):
        super().__init__(x, y, world)
        self.has_bucket = True
        self.change_image(ImageID.BUCKET_HEAD_ZOMBIE)
        self.hp = 1300

    def update(self) -> None:
        self.regular_update()
        if self.has_bucket and self.hp <= 200:
            self.has_bucket = False
            self.change_image(ImageID.REGULAR_ZOMBIE)


class Pea(GameObject):
    """A projectile flying right 8 pixels per tick."""

    def __init__(self, x, y, world):
        super().__init__(ImageID.PEA, x, y, LayerID.PROJECTILES, 28, 28, AnimID.NO_ANIMATION)
        self.world: GameWorld = world

    def update(self) -> None:
        if self.x >= WINDOW_WIDTH:
            self.is_dead = True
        else:
            self.move_to(self.x + 8, self.y)

    def attack(self, other: GameObject) -> int:
        """Hit a zombie once for 20 damage, then vanish."""
        if not other.is_zombie or self.is_dead:
            return 0
        self.is_dead = True
        return 20

    def attacked(self, damage: int) -> None:
        """Peas take no damage."""


class Explosion(GameObject):
    """A 3x3-cell blast that lasts 3 ticks and destroys every zombie it covers."""

    def __init__(self, x, y, world):
        super().__init__(
            ImageID.EXPLOSION,
            x,
            y,
            LayerID.PROJECTILES,
            3 * LAWN_GRID_WIDTH,
            3 * LAWN_GRID_HEIGHT,
            AnimID.NO_ANIMATION,
        )
        self.world: GameWorld = world
        self.time = 0

    def update(self) -> None:
        self.time += 1
        if self.time >= 3:
            self.is_dead = True

    def attack(self, other: GameObject) -> int:
        return 10000 if other.is_zombie else 0


PLANT_FACTORIES: dict[CursorID, type[Plant]] = {
    CursorID.SUNFLOWER: Sunflower,
    CursorID.PEASHOOTER: Peashooter,
    CursorID.REPEATER: Repeater,
    CursorID.WALLNUT: Wallnut,
    CursorID.CHERRY_BOMB: CherryBomb,
}