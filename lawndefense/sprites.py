"""Sprite sheet descriptions and texture loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .constants import DEFAULT_ASSET_DIR, AnimID, ImageID  # noqa: E402


@dataclass
class SpriteInfo:
    """Layout of one sprite sheet and its loaded image."""

    filename: Path
    total_width: int
    total_height: int
    sprite_width: int
    sprite_height: int
    cols: int = 1
    frames: int = 1
    texture: Any = None


def encode_anim(image_id: ImageID, anim_id: AnimID) -> int:
    """Key a sprite sheet by its image and animation."""
    return int(image_id) * 1000 + int(anim_id)


_SHEETS = (
    (ImageID.BACKGROUND, AnimID.NO_ANIMATION, "background.png", 800, 600, 800, 600, 1, 1),
    (ImageID.SUN, AnimID.IDLE, "sun_spritesheet.png", 512, 512, 80, 80, 6, 12),
    (ImageID.SHOVEL, AnimID.NO_ANIMATION, "shovel.png", 80, 80, 80, 80, 1, 1),
    (ImageID.COOLDOWN_MASK, AnimID.NO_ANIMATION, "seedpacket_cooldown.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_SUNFLOWER, AnimID.NO_ANIMATION, "seedpacket_sunflower.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_PEASHOOTER, AnimID.NO_ANIMATION, "seedpacket_peashooter.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_WALLNUT, AnimID.NO_ANIMATION, "seedpacket_wallnut.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_CHERRY_BOMB, AnimID.NO_ANIMATION, "seedpacket_cherry_bomb.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_REPEATER, AnimID.NO_ANIMATION, "seedpacket_repeater.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SEED_RED_REPEATER, AnimID.NO_ANIMATION, "seedpacket_red_repeater.png", 50, 70, 50, 70, 1, 1),
    (ImageID.SUNFLOWER, AnimID.IDLE, "sunflower_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageID.PEASHOOTER, AnimID.IDLE, "peashooter_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageID.WALLNUT, AnimID.IDLE, "wallnut_spritesheet.png", 512, 512, 80, 80, 6, 32),
    (ImageID.CHERRY_BOMB, AnimID.IDLE, "cherry_bomb_spritesheet.png", 512, 512, 120, 120, 4, 14),
    (ImageID.REPEATER, AnimID.IDLE, "repeater_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageID.WALLNUT_CRACKED, AnimID.IDLE, "wallnut_cracked_spritesheet.png", 512, 512, 80, 80, 6, 32),
    (ImageID.REGULAR_ZOMBIE, AnimID.WALK, "zombie_walk_spritesheet.png", 1024, 1024, 100, 139, 10, 46),
    (ImageID.REGULAR_ZOMBIE, AnimID.EAT, "zombie_eat_spritesheet.png", 1024, 1024, 100, 139, 10, 39),
    (ImageID.BUCKET_HEAD_ZOMBIE, AnimID.WALK, "bucket_head_walk_spritesheet.png", 1024, 1024, 100, 139, 10, 46),
    (ImageID.BUCKET_HEAD_ZOMBIE, AnimID.EAT, "bucket_head_eat_spritesheet.png", 1024, 1024, 100, 139, 10, 39),
    (ImageID.POLE_VAULTING_ZOMBIE, AnimID.WALK, "pole_vaulter_walk_spritesheet.png", 1024, 1024, 100, 180, 10, 44),
    (ImageID.POLE_VAULTING_ZOMBIE, AnimID.EAT, "pole_vaulter_eat_spritesheet.png", 1024, 1024, 100, 180, 10, 27),
    (ImageID.POLE_VAULTING_ZOMBIE, AnimID.RUN, "pole_vaulter_run_spritesheet.png", 2048, 2048, 300, 180, 6, 36),
    (ImageID.POLE_VAULTING_ZOMBIE, AnimID.JUMP, "pole_vaulter_jump_spritesheet.png", 2048, 2048, 500, 180, 4, 42),
    (ImageID.PEA, AnimID.NO_ANIMATION, "pea.png", 28, 28, 28, 28, 1, 1),
    (ImageID.EXPLOSION, AnimID.NO_ANIMATION, "explosion.png", 240, 227, 240, 227, 1, 1),
    (ImageID.ZOMBIES_WON, AnimID.NO_ANIMATION, "ZombiesWon.jpg", 564, 468, 564, 468, 1, 1),
)


class SpriteManager:
    """Knows every sprite sheet and holds the images loaded for them."""

    def __init__(self, asset_dir=DEFAULT_ASSET_DIR):
        self.asset_dir = Path(asset_dir)
        self._infos: dict[int, SpriteInfo] = {
            encode_anim(image, anim): SpriteInfo(self.asset_dir / name, tw, th, sw, sh, cols, frames)
            for image, anim, name, tw, th, sw, sh, cols, frames in _SHEETS
        }
        self._missing = SpriteInfo(self.asset_dir, 0, 0, 0, 0)
        self.load_sprites()

    def load_sprites(self) -> bool:
        """Load every sheet's image, reporting the ones that fail to load."""
        for info in self._infos.values():
            try:
                info.texture = pygame.image.load(str(info.filename))
            except (pygame.error, OSError):
                info.texture = None
                print(f"[ERROR] Error loading asset {info.filename}")
        return True

    def sprite_info(self, image_id: ImageID, anim_id: AnimID) -> SpriteInfo:
        """Return the sheet for an image and animation, or an empty one with no texture."""
        return self._infos.get(encode_anim(image_id, anim_id), self._missing)