import pytest

from lawndefense.constants import AnimID, ImageID, LayerID, LevelStatus
from lawndefense.framework import (
    ObjectBase,
    TextBase,
    WorldBase,
    click_at,
    display_all_objects,
    display_all_texts,
    objects_in_layer,
)


class Dummy(ObjectBase):
    def __init__(self, *args):
        super().__init__(*args)
        self.clicks = 0
        self.updates = 0

    def update(self):
        self.updates += 1

    def on_click(self):
        self.clicks += 1


@pytest.fixture
def make_obj():
    created = []

    def factory(x=100, y=100, layer=LayerID.PLANTS, width=60, height=80,
                image=ImageID.PEASHOOTER, anim=AnimID.IDLE):
        obj = Dummy(image, x, y, layer, width, height, anim)
        created.append(obj)
        return obj

    yield factory
    for obj in created:
        obj.destroy()


@pytest.fixture
def make_text():
    created = []

    def factory(*args, **kwargs):
        text = TextBase(*args, **kwargs)
        created.append(text)
        return text

    yield factory
    for text in created:
        text.destroy()


def test_object_registers_in_its_layer(make_obj):
    obj = make_obj(layer=LayerID.ZOMBIES)
    assert obj in objects_in_layer(LayerID.ZOMBIES)
    assert obj not in objects_in_layer(LayerID.PLANTS)


def test_destroy_removes_object_and_is_idempotent(make_obj):
    obj = make_obj(layer=LayerID.UI)
    obj.destroy()
    obj.destroy()
    assert obj not in objects_in_layer(LayerID.UI)


def test_move_to_and_change_image(make_obj):
    obj = make_obj()
    obj.move_to(7, 9)
    obj.change_image(ImageID.WALLNUT_CRACKED)
    assert (obj.x, obj.y) == (7, 9)
    assert obj.image_id is ImageID.WALLNUT_CRACKED
    assert click_at(7, 9) is obj
    assert obj.clicks == 1


def test_display_sets_frame_and_play_animation_resets(make_obj):
    obj = make_obj()
    display_all_objects(lambda image, anim, x, y, frame: frame + 5)
    assert obj.current_frame == 5
    assert obj in objects_in_layer(LayerID.PLANTS)
    obj.play_animation(AnimID.EAT)
    assert obj.anim_id is AnimID.EAT
    assert obj.current_frame == 0


def test_display_draws_back_layers_first(make_obj):
    front = make_obj(layer=LayerID.SUN, image=ImageID.SUN)
    back = make_obj(layer=LayerID.BACKGROUND, image=ImageID.BACKGROUND)
    order = []

    def draw(image, anim, x, y, frame):
        order.append(image)
        return frame + 1

    display_all_objects(draw)
    assert order.index(back.image_id) < order.index(front.image_id)
    assert back.current_frame == 1
    assert front.current_frame == 1
    assert back in objects_in_layer(LayerID.BACKGROUND)
    assert front in objects_in_layer(LayerID.SUN)


def test_display_passes_object_state(make_obj):
    obj = make_obj(x=11, y=22, image=ImageID.PEA, anim=AnimID.NO_ANIMATION,
                   layer=LayerID.PROJECTILES)
    calls = []

    def draw(*args):
        calls.append(args)
        return 3

    display_all_objects(draw)
    assert (ImageID.PEA, AnimID.NO_ANIMATION, 11, 22, 0) in calls
    assert obj.current_frame == 3
    assert obj in objects_in_layer(LayerID.PROJECTILES)


def test_click_at_hits_object_inside_half_extents(make_obj):
    obj = make_obj(x=100, y=100, width=60, height=80)
    assert click_at(100 + 30, 100 - 40) is obj
    assert obj.clicks == 1


def test_click_outside_hits_nothing(make_obj):
    obj = make_obj(x=100, y=100, width=60, height=80)
    assert click_at(100 + 31, 100) is None
    assert obj.clicks == 0


def test_click_prefers_lower_layer_and_stops(make_obj):
    background = make_obj(x=400, y=300, layer=LayerID.BACKGROUND, width=800, height=600)
    sun = make_obj(x=400, y=300, layer=LayerID.SUN, width=80, height=80)
    assert click_at(400, 300) is sun
    assert sun.clicks == 1
    assert background.clicks == 0


def test_object_base_is_abstract():
    with pytest.raises(TypeError):
        ObjectBase(ImageID.NONE, 0, 0, LayerID.UI, 1, 1, AnimID.NO_ANIMATION)


def test_text_defaults_and_display(make_text):
    text = make_text(60, 520, "50")
    calls = []
    display_all_texts(lambda *args: calls.append(args))
    assert (60, 520, "50", 0.0, 0.0, 0.0, True) in calls
    assert text.text == "50"


def test_text_move_color_and_text_change(make_text):
    text = make_text(1, 2, "Wave: 0", 0.5, 0.5, 0.5, False)
    text.move_to(330, 50)
    text.set_color(1, 1, 1)
    text.text = "3"
    calls = []
    display_all_texts(lambda *args: calls.append(args))
    assert (330, 50, "3", 1, 1, 1, False) in calls


def test_destroyed_text_is_not_displayed(make_text):
    gone = TextBase(5, 5, "gone")
    kept = make_text(6, 6, "kept")
    gone.destroy()
    calls = []
    display_all_texts(lambda *args: calls.append(args))
    assert all(call[2] != "gone" for call in calls)
    assert (6, 6, "kept", 0.0, 0.0, 0.0, True) in calls
    assert gone.text == "gone"
    assert kept.text == "kept"


def test_world_base_is_abstract_and_subclassable():
    with pytest.raises(TypeError):
        WorldBase()

    class World(WorldBase):
        def __init__(self):
            self.started = False

        def init(self):
            self.started = True

        def update(self):
            return LevelStatus.ONGOING

        def clean_up(self):
            self.started = False

    world = World()
    world.init()
    assert world.started is True
    assert world.update() is LevelStatus.ONGOING
    world.clean_up()
    assert world.started is False