import pytest

from lawndefense.constants import GAME_COLS, GAME_ROWS, CursorID, LayerID, LevelStatus
from lawndefense.framework import objects_in_layer
from lawndefense.objects import (
    CooldownMask,
    Pea,
    Peashooter,
    PlantingSpot,
    Seed,
    Shovel,
    Sun,
    Zombie,
)
from lawndefense.world import GameWorld, collides


@pytest.fixture
def world():
    game = GameWorld()
    game.init()
    yield game
    game.clean_up()


def _count(world, kind):
    return sum(isinstance(obj, kind) for obj in world.objects)


def test_init_lays_out_lawn(world):
    assert _count(world, PlantingSpot) == GAME_ROWS * GAME_COLS
    assert _count(world, Seed) == 5
    assert _count(world, Shovel) == 1
    assert world.display_sun.text == "50"
    assert world.display_wave.text == "Wave: 0"


def test_charge_settles_cost(world):
    world.cursor_cost = 30
    world.charge()
    assert world.sun == 50 - 30
    assert world.cursor_cost == 0


def test_create_plant_pays_and_clears_cursor(world):
    world.sun = 200
    world.set_cursor(CursorID.PEASHOOTER, 100)
    world.create_plant(75, 75)
    assert world.sun == 100
    assert world.cursor == CursorID.NONE
    assert _count(world, Peashooter) == 1
    assert _count(world, CooldownMask) == 1


def test_create_plant_without_selection_raises(world):
    with pytest.raises(ValueError):
        world.create_plant(75, 75)


def test_collides_only_between_zombie_and_other(world):
    zombie = Zombie(400, 300, world)
    other_zombie = Zombie(400, 300, world)
    pea = Pea(400, 300, world)
    far_pea = Pea(100, 300, world)
    world.objects.extend([zombie, other_zombie, pea, far_pea])
    assert collides(zombie, pea)
    assert collides(pea, zombie)
    assert not collides(zombie, other_zombie)
    assert not collides(zombie, far_pea)


def test_has_zombie_ahead_matches_row(world):
    world.objects.append(Zombie(500, 100, world))
    assert world.has_zombie_ahead(75, 75)
    assert not world.has_zombie_ahead(600, 75)
    assert not world.has_zombie_ahead(75, 175)


def test_update_removes_dead_objects(world):
    world.create_pea(800, 300)
    pea = world.objects[-1]
    assert world.update() == LevelStatus.ONGOING
    assert pea.is_dead
    assert pea not in world.objects
    assert pea not in objects_in_layer(LayerID.PROJECTILES)


def test_pea_hits_zombie(world):
    zombie = Zombie(405, 300, world)
    world.objects.append(zombie)
    world.create_pea(400, 300)
    pea = world.objects[-1]
    world.update()
    assert zombie.hp == 200 - 20
    assert pea not in world.objects


def test_zombie_reaching_house_loses(world):
    world.objects.append(Zombie(0, 300, world))
    assert world.update() == LevelStatus.LOSING
    assert world.display_wave.text == str(world.wave)
    assert (world.display_wave.x, world.display_wave.y) == (330, 50)


def test_first_wave_spawns_after_delay(world):
    world.last_wave_tick = 1199
    world.update()
    assert world.wave == 1
    assert world.last_wave_tick == 0
    assert world.display_wave.text == "Wave: 1"
    assert _count(world, Zombie) == (15 + 1) // 10


def test_sun_falls_at_tick_180(world):
    world.tick = 179
    world.update()
    assert _count(world, Sun) == 1


def test_sun_does_not_fall_early(world):
    world.update()
    assert _count(world, Sun) == 0


def test_clean_up_resets_state(world):
    world.sun = 500
    world.wave = 4
    world.set_cursor(CursorID.SHOVEL, 0)
    world.clean_up()
    assert world.objects == []
    assert world.sun == 50
    assert world.wave == 0
    assert world.cursor == CursorID.NONE
    assert world.display_sun is None
    assert objects_in_layer(LayerID.UI) == []
    assert objects_in_layer(LayerID.BACKGROUND) == []