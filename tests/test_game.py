import shutil
from pathlib import Path

import pygame
import pytest

from cartengine.assets import AssetManager
from cartengine.clock import Clock
from cartengine.game import FONT_NAME, Game, GameplayHUD
from cartengine.properties import Align, AppState, Vector2

DEFAULT_FONT = str(Path(pygame.__file__).parent / pygame.font.get_default_font())


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    asset_dir = tmp_path / "assets"
    font_file = asset_dir / FONT_NAME
    font_file.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(DEFAULT_FONT, font_file)
    logo = pygame.Surface((8, 4))
    logo.fill((255, 255, 255))
    pygame.image.save(logo, str(asset_dir / "cartengine.png"))
    pygame.font.init()
    AssetManager.release()
    Clock.release()
    g = Game(800, 600, "Puzzle Maker")
    yield g
    pygame.quit()
    AssetManager.release()
    Clock.release()


def actor_ids(game):
    return [actor.id for actor in game.current_world.actors]


def actor(game, actor_id):
    return next(a for a in game.current_world.actors if a.id == actor_id)


def test_update_before_init_does_nothing():
    g = Game(800, 600, "Puzzle Maker")
    g.update(0.1)
    assert g.assets_loaded is False
    assert g.current_world is None


def test_init_builds_title_world(game):
    game.init()
    assert game.assets_loaded is True
    assert game.app_state == AppState.TITLE
    assert actor_ids(game) == ["welcome", "welcomeid"]
    assert isinstance(game.current_world.hud, GameplayHUD)
    assert game.current_world.hud.id == "hud-main"


def test_app_scale_uses_shorter_side(game):
    game.init()
    assert game.app_scale == 0.75
    assert game.font_size == 18


def test_welcome_text_is_placed_relative_to_panel(game):
    game.init()
    panel = actor(game, "welcome")
    text = actor(game, "welcomeid")
    assert text.location == panel.location + Vector2(71.0, -50.0)
    assert text.text == "Welcome to"
    assert text.align == Align.CENTER
    assert panel.children == [text]
    assert panel.visible is True and text.visible is True


def test_assets_are_loaded_from_asset_directory(game):
    game.init()
    assert AssetManager.get().root_directory.name == "assets"
    game.update(0.0)
    assert game.gameplay_hud.exit_button.text_size.y > 0


def test_first_update_creates_exit_button(game):
    game.init()
    game.update(0.0)
    assert game.gameplay_hud.has_init is True
    button = actor(game, "exitbtn")
    assert button is game.gameplay_hud.exit_button
    assert button.text == "X"
    assert button.align == Align.CENTER
    assert button.location == Vector2(game.window_size.x - 25.0, 12.0)


def test_exit_button_click_quits(game):
    game.init()
    game.update(0.0)
    assert game.exit is False
    game.gameplay_hud.exit_button.button_up()
    assert game.exit is True


def test_hud_quit_and_restart(game):
    game.init()
    game.gameplay_hud.restart_button_clicked()
    assert game.exit is False
    game.gameplay_hud.quit_button_clicked()
    assert game.exit is True


def test_mouse_press_and_release_during_play(game, monkeypatch):
    game.init()
    game.app_state = AppState.GAME
    pressed = [False]
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (10, 300))
    monkeypatch.setattr(pygame.mouse, "get_pressed", lambda *a, **k: (pressed[0], False, False))
    game.update(0.0)
    assert game.touch is False
    pressed[0] = True
    game.update(0.0)
    assert game.touch is True
    pressed[0] = False
    game.update(0.0)
    assert game.touch is False


def test_mouse_ignored_outside_play(game, monkeypatch):
    game.init()
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (10, 300))
    monkeypatch.setattr(pygame.mouse, "get_pressed", lambda *a, **k: (True, False, False))
    game.update(0.0)
    assert game.touch is False


def test_run_after_quit_unloads_world(game):
    game.init()
    game.update(0.0)
    world = game.current_world
    game.quit()
    game.run()
    assert world.actors
    assert all(a.is_pending_destroy for a in world.actors)
    assert game.surface is None