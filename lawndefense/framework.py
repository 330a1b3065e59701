"""Drawable objects, on-screen texts and the world interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from .constants import MAX_LAYERS, AnimID, ImageID, LayerID, LevelStatus

_layers: list[dict["ObjectBase", None]] = [{} for _ in range(MAX_LAYERS)]
_texts: dict["TextBase", None] = {}


def _bucket(layer: LayerID) -> dict["ObjectBase", None]:
    index = int(layer)
    return _layers[index] if 0 <= index < MAX_LAYERS else _layers[0]


class ObjectBase(ABC):
    """A drawable, clickable object registered in one display layer."""

    def __init__(self, image_id, x, y, layer, width, height, anim_id):
        self.image_id: ImageID = image_id
        self.x: int = x
        self.y: int = y
        self._layer: LayerID = layer
        self.width: int = width
        self.height: int = height
        self.anim_id: AnimID = anim_id
        self.current_frame: int = 0
        _bucket(layer)[self] = None

    @property
    def layer(self) -> LayerID:
        return self._layer

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def change_image(self, image_id: ImageID) -> None:
        self.image_id = image_id

    def play_animation(self, anim_id: AnimID) -> None:
        """Switch animation and restart it from the first frame."""
        self.anim_id = anim_id
        self.current_frame = 0

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one tick."""

    @abstractmethod
    def on_click(self) -> None:
        """React to a mouse click on the object."""

    def destroy(self) -> None:
        """Remove the object from its layer; safe to call more than once."""
        _bucket(self._layer).pop(self, None)


def objects_in_layer(layer: LayerID) -> list[ObjectBase]:
    """Return the objects currently registered in a layer."""
    return list(_bucket(layer))


def display_all_objects(
    draw: Callable[[ImageID, AnimID, int, int, int], int],
) -> None:
    """Draw every object from the back layer to the front one.

    ``draw`` receives the image, animation, position and current frame and
    returns the frame to show next.
    """
    for index in range(MAX_LAYERS - 1, -1, -1):
        for obj in list(_layers[index]):
            obj.current_frame = draw(obj.image_id, obj.anim_id, obj.x, obj.y, obj.current_frame)


def click_at(x: int, y: int) -> ObjectBase | None:
    """Deliver a click to the front-most object under the point and return it."""
    for index in range(MAX_LAYERS):
        for obj in list(_layers[index]):
            if abs(x - obj.x) <= obj.width // 2 and abs(y - obj.y) <= obj.height // 2:
                obj.on_click()
                return obj
    return None


class TextBase:
    """A line of text drawn on screen at a fixed position."""

    def __init__(self, x, y, text="", color_r=0.0, color_g=0.0, color_b=0.0, centering=True):
        self.x: int = x
        self.y: int = y
        self.text: str = text
        self.color: tuple[float, float, float] = (color_r, color_g, color_b)
        self.centering: bool = centering
        _texts[self] = None

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_color(self, r: float, g: float, b: float) -> None:
        """Set the colour; each component is in [0, 1]."""
        self.color = (r, g, b)

    def destroy(self) -> None:
        """Stop drawing the text; safe to call more than once."""
        _texts.pop(self, None)


def display_all_texts(
    draw: Callable[[int, int, str, float, float, float, bool], None],
) -> None:
    """Call ``draw(x, y, text, r, g, b, centering)`` for every live text."""
    for text in list(_texts):
        r, g, b = text.color
        draw(text.x, text.y, text.text, r, g, b, text.centering)


class WorldBase(ABC):
    """The game world driven by the game manager."""

    @abstractmethod
    def init(self) -> None:
        """Set up a new level."""

    @abstractmethod
    def update(self) -> LevelStatus:
        """Advance one tick and report the level status."""

    @abstractmethod
    def clean_up(self) -> None:
        """Tear the level down."""