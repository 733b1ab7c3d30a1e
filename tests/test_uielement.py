from pathlib import Path
from types import SimpleNamespace

import pygame
import pytest

from cartengine.assets import AssetManager
from cartengine.clock import Clock
from cartengine.properties import Color, Rectangle, TextProperties, UIProperties, Vector2
from cartengine.text import Text
from cartengine.uielement import UIElement
from cartengine.world import World

PANEL = Color(200, 30, 40, 255)
DEFAULT_FONT = str(Path(pygame.__file__).parent / pygame.font.get_default_font())


@pytest.fixture
def assets(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    pygame.font.init()
    image = pygame.Surface((4, 4))
    image.fill((255, 0, 0))
    texture = tmp_path / "tex.png"
    pygame.image.save(image, str(texture))
    AssetManager.release()
    yield SimpleNamespace(texture=str(texture))
    AssetManager.release()
    pygame.display.quit()


@pytest.fixture
def surface():
    return pygame.Surface((200, 200))


@pytest.fixture
def world(surface):
    app = SimpleNamespace(surface=surface, window_size=Vector2(200, 200))
    return World(app, clock=Clock(timer=lambda: 0.0))


class Recorder(UIElement):
    def __init__(self, world, element_id):
        super().__init__(world, element_id)
        self.updates = 0

    def update(self, delta_time):
        super().update(delta_time)
        self.updates += 1


def test_init_clears_pending_update_on_children(world):
    parent = UIElement(world, "parent")
    child = UIElement(world, "child")
    parent.add_ui_element(child)
    assert child.pending_update
    parent.init()
    assert not parent.pending_update
    assert not child.pending_update


def test_properties_without_pivot_place_element_at_location(world):
    props = UIProperties(size=Vector2(20, 10), location=Vector2(30, 40), color=PANEL)
    element = UIElement(world, "panel")
    element.set_ui_properties(props)
    assert element.calculated_location == props.location
    assert element.bounds == Rectangle(30, 40, 20, 10)
    assert element.color == PANEL


def test_pivot_shifts_calculated_location(world):
    element = UIElement(world, "panel")
    element.set_ui_properties(UIProperties(location=Vector2(50, 60), pivot=Vector2(5, 8)))
    assert element.calculated_location + element.pivot == element.location


def test_set_location_keeps_child_offsets(world):
    parent = UIElement(world, "parent")
    child = UIElement(world, "child")
    child.set_location(Vector2(5, 7))
    parent.add_ui_element(child)
    before = child.location - parent.location
    parent.set_location(Vector2(40, 25))
    assert child.location - parent.location == before
    assert parent.location == Vector2(40, 25)


def test_visibility_active_and_scale_propagate(world):
    parent = UIElement(world, "parent")
    child = UIElement(world, "child")
    parent.add_ui_element(child)
    parent.set_visible(True)
    parent.set_active(False)
    parent.set_scale(2.5)
    assert child.visible and parent.visible
    assert not child.active
    assert child.scale == 2.5


def test_update_skips_inactive_children(world):
    parent = UIElement(world, "parent")
    on, off = Recorder(world, "on"), Recorder(world, "off")
    parent.add_ui_element(on)
    parent.add_ui_element(off)
    off.set_active(False)
    parent.update(0.1)
    assert (on.updates, off.updates) == (1, 0)


def test_inactive_parent_updates_nothing(world):
    parent = UIElement(world, "parent")
    child = Recorder(world, "child")
    parent.add_ui_element(child)
    parent.active = False
    parent.update(0.1)
    assert child.updates == 0


def test_add_text_spawns_text_relative_to_parent(world, assets):
    parent = UIElement(world, "parent")
    parent.set_location(Vector2(100, 80))
    props = TextProperties(
        size=Vector2(60, 20), location=Vector2(10, -5), font=DEFAULT_FONT, font_size=12, text="hi"
    )
    text = parent.add_text("caption", props)
    assert isinstance(text, Text)
    assert text.location == parent.location + props.location
    assert props.location == Vector2(10, -5)
    assert text.visible
    assert text in world.actors
    assert parent.children == [text]


def test_add_text_with_element_adds_it(world):
    parent = UIElement(world, "parent")
    child = UIElement(world, "child")
    parent.add_text(child)
    parent.add_button(UIElement(world, "button"))
    assert parent.children[0] is child
    assert len(parent.children) == 2


def test_init_loads_texture_at_element_size(world, assets):
    element = UIElement(world, "panel", Vector2(30, 12))
    element.set_texture(assets.texture)
    element.init()
    assert (element.texture_asset.width, element.texture_asset.height) == (30, 12)


def test_draw_fills_background(world, surface):
    element = UIElement(world, "panel")
    element.set_ui_properties(UIProperties(size=Vector2(20, 10), location=Vector2(30, 40), color=PANEL))
    element.set_visible(True)
    element.draw(0.0)
    assert tuple(surface.get_at((35, 45)))[:3] == PANEL.as_tuple()[:3]
    assert tuple(surface.get_at((60, 60)))[:3] == (0, 0, 0)


def test_invisible_element_draws_nothing(world, surface):
    element = UIElement(world, "panel")
    element.set_ui_properties(UIProperties(size=Vector2(20, 10), location=Vector2(30, 40), color=PANEL))
    element.draw(0.0)
    assert element.visible is False
    assert tuple(surface.get_at((35, 45)))[:3] == (0, 0, 0)


def test_draw_blits_texture_over_background(world, surface, assets):
    element = UIElement(world, "panel")
    element.set_ui_properties(
        UIProperties(size=Vector2(20, 10), location=Vector2(30, 40), color=PANEL, texture=assets.texture)
    )
    element.init()
    element.set_visible(True)
    element.draw(0.0)
    assert element.texture_asset.width == 20
    assert tuple(surface.get_at((35, 45)))[:3] == (255, 0, 0)


def test_set_size_updates_bounds(world):
    element = UIElement(world, "panel")
    element.set_size(Vector2(15, 25))
    assert element.bounds == Rectangle(0, 0, 15, 25)


def test_destroy_marks_children(world):
    parent = UIElement(world, "parent")
    child = UIElement(world, "child")
    parent.add_ui_element(child)
    parent.destroy()
    assert parent.is_pending_destroy and child.is_pending_destroy