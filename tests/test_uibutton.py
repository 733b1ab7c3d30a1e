from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pygame
import pytest

from cartengine.assets import AssetManager
from cartengine.clock import Clock
from cartengine.properties import (
    BLACK,
    BLUE,
    DARKGRAY,
    GRAY,
    WHITE,
    Align,
    ButtonTextProperties,
    Vector2,
)
from cartengine.uibutton import UIButton
from cartengine.world import World

DEFAULT_FONT = str(Path(pygame.__file__).parent / pygame.font.get_default_font())


class Listener:
    def __init__(self):
        self.clicks = 0

    def on_click(self):
        self.clicks += 1


@pytest.fixture
def assets():
    pygame.font.init()
    AssetManager.release()
    yield
    AssetManager.release()


@pytest.fixture
def surface():
    return pygame.Surface((200, 200))


@pytest.fixture
def world(surface):
    app = SimpleNamespace(surface=surface, window_size=Vector2(200, 200))
    return World(app, clock=Clock(timer=lambda: 0.0))


def make_button(world, text="X", selectable=False):
    button = world.spawn_actor(UIButton, "btn", Vector2(40, 20))
    button.set_text_properties(
        ButtonTextProperties(
            size=Vector2(40, 20), location=Vector2(100, 100), default_color=GRAY,
            over_color=DARKGRAY, down_color=BLUE, text_color=BLACK, hover_color=WHITE,
            align=Align.CENTER, font=DEFAULT_FONT, font_size=10, text=text, is_selectable=selectable,
        )
    )
    button.set_visible(True)
    button.init()
    return button


def frame(button, position, down):
    with patch("pygame.mouse.get_pos", return_value=position), patch(
        "pygame.mouse.get_pressed", return_value=(down, False, False)
    ):
        button.update(0.016)


def test_center_alignment_centres_button_on_location(world, assets):
    button = make_button(world)
    assert button.calculated_location + button.size * 0.5 == button.location
    assert button.test_mouse_over(button.location)
    assert not button.test_mouse_over(Vector2(0, 0))


def test_properties_apply_default_colours(world, assets):
    button = make_button(world)
    assert button.color == GRAY
    assert button.text_color == BLACK
    assert button.text_hover_color == WHITE


def test_caption_is_centred_when_it_fits(world, assets):
    button = make_button(world)
    centre = button.calculated_location + button.size * 0.5
    assert button.font_location + button.text_size * 0.5 == centre


def test_wide_caption_is_pinned_to_corner(world, assets):
    button = make_button(world, text="ABCDEFGHIJ")
    assert button.font_location == button.calculated_location


def test_set_location_moves_caption_along(world, assets):
    button = make_button(world)
    offset = button.font_location - button.calculated_location
    button.set_location(Vector2(60, 50))
    assert button.calculated_location + button.size * 0.5 == Vector2(60, 50)
    assert button.font_location - button.calculated_location == offset


def test_click_inside_broadcasts(world, assets):
    button = make_button(world)
    listener = Listener()
    button.on_button_clicked.bind_action(listener, listener.on_click)
    frame(button, (100, 100), True)
    assert button.color == BLUE
    frame(button, (100, 100), False)
    assert listener.clicks == 1
    assert button.color == GRAY


def test_press_inside_release_outside_does_not_click(world, assets):
    button = make_button(world)
    listener = Listener()
    button.on_button_clicked.bind_action(listener, listener.on_click)
    frame(button, (100, 100), True)
    frame(button, (5, 5), False)
    assert listener.clicks == 0
    assert not button.touch


def test_press_outside_release_inside_clicks(world, assets):
    button = make_button(world)
    listener = Listener()
    button.on_button_clicked.bind_action(listener, listener.on_click)
    frame(button, (5, 5), True)
    frame(button, (100, 100), False)
    assert listener.clicks == 1


def test_hover_and_leave_swap_colours(world, assets):
    button = make_button(world)
    frame(button, (100, 100), False)
    assert (button.color, button.text_color, button.is_mouse_over) == (DARKGRAY, WHITE, True)
    frame(button, (5, 5), False)
    assert (button.color, button.text_color, button.is_mouse_over) == (GRAY, BLACK, False)


def test_mouse_out_without_hover_keeps_colour(world, assets):
    button = make_button(world)
    button.color = BLUE
    button.mouse_out()
    assert button.color == BLUE


def test_invisible_button_ignores_input(world, assets):
    button = make_button(world)
    button.set_visible(False)
    listener = Listener()
    button.on_button_clicked.bind_action(listener, listener.on_click)
    frame(button, (100, 100), True)
    frame(button, (100, 100), False)
    assert listener.clicks == 0
    assert not button.is_button_down


def test_selectable_button_selects_and_deactivation_clears(world, assets):
    button = make_button(world, selectable=True)
    button.button_down()
    assert button.is_selected and button.is_button_down
    button.set_active(False)
    assert not button.is_selected


def test_plain_button_is_not_selected_on_press(world, assets):
    button = make_button(world)
    button.button_down()
    assert not button.is_selected


def test_draw_selected_outline(world, surface, assets):
    button = make_button(world, text="")
    button.set_selected(True)
    button.draw(0.0)
    corner = button.calculated_location
    outline = tuple(surface.get_at((int(corner.x) - 5, int(corner.y) - 5)))[:3]
    assert outline == GRAY.as_tuple()[:3]