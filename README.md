# lawndefense

A small real-time lawn defense game. Zombies walk in from the right edge of
a lawn with 5 rows and 9 columns. You spend sun to plant defenders in their
path. If any zombie walks off the left edge, you lose.

## Installing

```
pip install .
```

This installs the game and pygame, which opens the window and draws it.

## Playing

```
lawndefense
```

The game loads its images from `../assets`, which is resolved from the
current directory. Use `--assets` to point it at another directory:

```
lawndefense --assets path/to/assets
```

If an image fails to load, the game prints `[ERROR] Error loading asset ...`
and leaves out every object that uses that image.

Controls:

- **Enter** starts the game from the title screen. After you lose, Enter starts a new game.
- **Esc** or closing the window quits.
- **Left click** does everything else:
  - Click a seed packet along the top to select a plant. You need enough sun
    for it. Clicking the selected packet again clears the selection.
  - Click a lawn tile to plant your selection there. The cost is taken from
    your sun.
  - Click the shovel, then a plant, to dig the plant up. Click the shovel
    again to put it down.
  - Click a sun to collect 25 sun.

You start with 50 sun. A sun falls from the sky every 300 frames, and each
sunflower makes one every 300 frames. A sun that is not collected disappears
after a while.

| Plant       | Cost | Recharge (frames) | What it does                                             |
|-------------|------|-------------------|----------------------------------------------------------|
| Sunflower   | 50   | 240               | Makes a sun every 300 frames                             |
| Peashooter  | 100  | 240               | Shoots a pea every 30 frames while a zombie is in its row |
| Wall-nut    | 50   | 900               | Blocks zombies, with 4000 health; looks cracked when low |
| Cherry Bomb | 150  | 1200              | Explodes after 15 frames and destroys zombies in a 3x3 area |
| Repeater    | 200  | 240               | Like a peashooter, but fires a second pea 5 frames later |

Each pea deals 20 damage. A zombie has 200 health and deals 3 damage per
frame to a plant it touches. A bucket-head zombie has 1300 health and loses
its bucket when its health falls to 200.

The first wave arrives after 1200 frames. Later waves come sooner, down to
one every 150 frames from wave 23. Waves get larger as they go on, and
bucket-head zombies become more common after wave 8. When you lose, the
screen shows how many waves you survived.

The game runs at about 30 frames per second.

## Using it as a library

The game rules do not need a window:

- `lawndefense.world.GameWorld` holds the lawn. `init()` lays out the
  level, `update()` advances one frame and returns a
  `lawndefense.constants.LevelStatus`, and `clean_up()` resets it.
  `lawndefense.world.collides` is the overlap test used for combat.
- `lawndefense.objects` holds the plants, zombies, peas, explosions, suns,
  seed packets, shovel and cooldown masks.
- `lawndefense.framework` keeps track of every drawable object and on-screen
  text. `click_at(x, y)` delivers a click in game coordinates, with the
  origin at the bottom left.
- `lawndefense.sprites.SpriteManager` describes the sprite sheets and loads
  them with pygame.
- `lawndefense.manager.GameManager` connects a world to the pygame display
  and keyboard, and `lawndefense.manager.main` is the `lawndefense` command.

## What it does not do

There is no sound, no pause key, no saved games and no high-score table.
Some images are described for a pole-vaulting zombie, but no such zombie
ever appears in the game.

## Running the tests

```
pip install .[test]
pytest
```