"""The game loop: window, input, state machine and drawing."""

from __future__ import annotations

import argparse
from enum import Enum, auto
from typing import Protocol

from .constants import (
    DEFAULT_ASSET_DIR,
    MS_PER_FRAME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AnimID,
    ImageID,
    KeyCode,
    LevelStatus,
)
from .framework import ObjectBase, WorldBase, click_at, display_all_objects, display_all_texts
from .sprites import SpriteInfo, SpriteManager, pygame

_WINDOW_TITLE = "PvZ"
_LOSING_MESSAGE = "You survived [      ] waves! Press Enter to restart."
_TEXT_SIZE = 24
_SUBTITLE_SIZE = 18


class _SpriteSource(Protocol):
    def sprite_info(self, image_id: ImageID, anim_id: AnimID) -> SpriteInfo: ...


class GameState(Enum):
    TITLE = auto()
    ANIMATING = auto()
    PROMPTING = auto()
    GAMEOVER = auto()


def to_key_code(key: str | int) -> KeyCode:
    """Map a typed character (or its code) to a game key."""
    char = chr(key) if isinstance(key, int) else key
    if char == "\x1b":
        return KeyCode.QUIT
    if char == "\r":
        return KeyCode.ENTER
    return KeyCode.NONE


def _to_rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return tuple(round(min(max(c, 0.0), 1.0) * 255) for c in (r, g, b))  # type: ignore[return-value]


class GameManager:
    """Drives a world through the title, play and restart screens."""

    def __init__(self, world: WorldBase, sprites: _SpriteSource):
        self.world = world
        self.sprites = sprites
        self.state = GameState.TITLE
        self.paused = False
        self.running = True
        self.screen = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        self._pressed: dict[KeyCode, bool] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    # Input -----------------------------------------------------------------

    def key_down(self, key: str | int) -> None:
        """Record a key press; repeats of a held key are ignored."""
        code = to_key_code(key)
        if code is not KeyCode.NONE and code not in self._pressed:
            self._pressed[code] = True

    def key_up(self, key: str | int) -> None:
        """Record a key release."""
        code = to_key_code(key)
        if code is not KeyCode.NONE:
            self._pressed.pop(code, None)

    def is_pressed(self, key: KeyCode) -> bool:
        """Tell whether a key is held."""
        return key in self._pressed

    def pop_key_down(self, key: KeyCode) -> bool:
        """Tell whether a key went down since the last call, consuming the press."""
        if self._pressed.get(key):
            self._pressed[key] = False
            return True
        return False

    def mouse_down(self, x: int, y: int) -> ObjectBase | None:
        """Click at game coordinates (origin bottom left); return the object hit."""
        return click_at(x, y)

    # State machine ---------------------------------------------------------

    def update(self) -> None:
        """Run one frame of the current screen."""
        if self.paused:
            return
        if self.is_pressed(KeyCode.QUIT):
            self.running = False
            return
        if self.state is GameState.TITLE:
            self._prompt("PvZ", "Press Enter to start")
            if self.is_pressed(KeyCode.ENTER):
                self._start_level()
        elif self.state is GameState.ANIMATING:
            status = self.world.update()
            self.display()
            if status is LevelStatus.LOSING:
                self._show_zombies_won()
                self.world.clean_up()
                self.state = GameState.PROMPTING
        elif self.state is GameState.PROMPTING:
            if self.is_pressed(KeyCode.ENTER):
                self._start_level()
        elif self.state is GameState.GAMEOVER:
            if self.is_pressed(KeyCode.ENTER):
                self.running = False

    def _start_level(self) -> None:
        self.world.init()
        self.state = GameState.ANIMATING
        self.display()

    # Drawing ---------------------------------------------------------------

    def draw_object(self, image_id: ImageID, anim_id: AnimID, x: float, y: float, frame: int) -> int:
        """Draw one frame of an object centred at game coordinates; return its next frame."""
        info = self.sprites.sprite_info(image_id, anim_id)
        if info.texture is None:
            return 0
        if image_id == ImageID.POLE_VAULTING_ZOMBIE:
            # The pole vaulter sheets are too short; lift it to line up with the row.
            y += 20
        row, col = divmod(frame, info.cols)
        area = pygame.Rect(
            col * info.sprite_width, row * info.sprite_height, info.sprite_width, info.sprite_height
        )
        left = round(x - info.sprite_width / 2)
        top = round(WINDOW_HEIGHT - y - info.sprite_height / 2)
        self.screen.blit(info.texture, (left, top), area)
        return (frame + 1) % info.frames

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _draw_text(self, x, y, text, r, g, b, centering, size=_TEXT_SIZE) -> None:
        rendered = self._font(size).render(text, True, _to_rgb(r, g, b))
        left = x - rendered.get_width() / 2 if centering else x
        top = WINDOW_HEIGHT - y - rendered.get_height()
        self.screen.blit(rendered, (round(left), round(top)))

    def display(self) -> None:
        """Draw every object, back layer first, then every text."""
        self.screen.fill((0, 0, 0))
        display_all_objects(self.draw_object)
        display_all_texts(self._draw_text)

    def _prompt(self, title: str, subtitle: str) -> None:
        self.screen.fill((0, 0, 0))
        center_x = WINDOW_WIDTH // 2
        self._draw_text(center_x, round(WINDOW_HEIGHT * 0.625), title, 1.0, 1.0, 0.5, True)
        self._draw_text(center_x, round(WINDOW_HEIGHT * 0.4), subtitle, 1.0, 1.0, 1.0, True, _SUBTITLE_SIZE)

    def _show_zombies_won(self) -> None:
        self.screen.fill((0, 0, 0))
        self.draw_object(
            ImageID.ZOMBIES_WON, AnimID.NO_ANIMATION, WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + 50, 0
        )
        display_all_texts(self._draw_text)
        self._draw_text(WINDOW_WIDTH // 2, 50, _LOSING_MESSAGE, 1.0, 1.0, 1.0, True)

    # Main loop -------------------------------------------------------------

    def play(self) -> None:
        """Open the window and run until the player quits."""
        pygame.init()
        try:
            window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(_WINDOW_TITLE)
            self.screen = window
            clock = pygame.time.Clock()
            fps = 1000 / MS_PER_FRAME
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.key_down(event.key)
                    elif event.type == pygame.KEYUP:
                        self.key_up(event.key)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        mx, my = event.pos
                        self.mouse_down(mx, WINDOW_HEIGHT - my)
                if not self.running:
                    break
                self.update()
                pygame.display.flip()
                clock.tick(fps)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Start the game."""
    from .world import GameWorld

    parser = argparse.ArgumentParser(description="Defend the lawn against waves of zombies.")
    parser.add_argument(
        "--assets", default=str(DEFAULT_ASSET_DIR), help="directory holding the sprite images"
    )
    args = parser.parse_args(argv)
    manager = GameManager(GameWorld(), SpriteManager(args.assets))
    manager.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())