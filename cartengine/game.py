"""The game application: a title world with a welcome panel and a HUD."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from .application import Application
from .assets import AssetManager
from .hud import HUD
from .objects import Delegate
from .properties import (
    BLACK,
    BLANK,
    BLUE,
    DARKGRAY,
    GRAY,
    Align,
    AppState,
    ButtonTextProperties,
    Color,
    TextProperties,
    UIProperties,
    Vector2,
)
from .uibutton import UIButton
from .uielement import UIElement
from .world import World

FONT_NAME = "fonts/framd.ttf"
ASSET_DIRECTORY = "assets"


class GameplayHUD(HUD):
    """The in-game HUD with an exit button in the top-right corner."""

    def __init__(self, world: Any, hud_id: str) -> None:
        super().__init__(world, hud_id)
        self.on_restart_btn_clicked = Delegate()
        self.on_quit_btn_clicked = Delegate()
        self.exit_button: Optional[UIButton] = None

    def init(self) -> None:
        screen = self.world.app_window_size
        properties = ButtonTextProperties(
            font=FONT_NAME,
            font_size=12.0,
            default_color=GRAY,
            color=GRAY,
            over_color=DARKGRAY,
            text="X",
            align=Align.CENTER,
            size=Vector2(20.0, 20.0),
            location=Vector2(screen.x - 25.0, 12.0),
            text_color=BLACK,
        )
        button = self.world.spawn_actor(UIButton, "exitbtn", properties.size)
        button.set_text_properties(properties)
        button.set_visible(True)
        button.set_active(True)
        button.init()
        button.on_button_clicked.bind_action(self, self.quit_button_clicked)
        self.exit_button = button
        super().init()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

    def draw(self, delta_time: float) -> None:
        super().draw(delta_time)

    def restart_button_clicked(self) -> None:
        super().restart_button_clicked()

    def quit_button_clicked(self) -> None:
        super().quit_button_clicked()


class Game(Application):
    """Sets up the title world and tracks mouse presses during play."""

    def __init__(self, width: int, height: int, title: str) -> None:
        super().__init__(width, height, title)
        self.app_state = AppState.TITLE
        self.assets_loaded = False
        self.game_over = False
        self.touch = False
        self.app_scale = 1.0
        self.font_size = 24
        self.gameplay_hud: Optional[GameplayHUD] = None
        self._was_down = False

    def init(self) -> None:
        """Open the window and build the title world and its HUD."""
        super().init()
        AssetManager.get().set_asset_root_directory(ASSET_DIRECTORY)
        world = self.load_world(World)
        world.init()

        if self.width < self.height:
            self.app_scale = self.width / self.height
        else:
            self.app_scale = self.height / self.width
        self.font_size = int(24 * self.app_scale)

        welcome = world.spawn_actor(UIElement, "welcome")
        welcome.init()
        welcome.set_ui_properties(
            UIProperties(
                color=Color(255, 0, 0, 0),
                location=Vector2(self.width / 2 - 171.0, self.height / 2 - 50.0),
                size=Vector2(342.0, 100.0),
                rotation=0.0,
                scale=1.0,
                pivot=Vector2(),
                texture="cartengine.png",
            )
        )
        welcome.add_text(
            "welcomeid",
            TextProperties(
                color=BLUE,
                align=Align.CENTER,
                font=FONT_NAME,
                font_size=30.0,
                text="Welcome to",
                size=Vector2(200.0, 50.0),
                location=Vector2(71.0, -50.0),
                text_background=BLANK,
            ),
        )
        welcome.set_visible(True)
        welcome.set_active(True)

        self.gameplay_hud = world.spawn_hud(GameplayHUD, "hud-main")
        self.assets_loaded = True

    def begin_play(self) -> None:
        super().begin_play()

    def run(self) -> None:
        super().run()

    def update(self, delta_time: float) -> None:
        """Update the world; during play, track presses that miss the HUD."""
        if not self.assets_loaded:
            return
        super().update(delta_time)
        if self.app_state != AppState.GAME or self.game_over:
            return
        x, y = pygame.mouse.get_pos()
        down = bool(pygame.mouse.get_pressed()[0])
        pressed = down and not self._was_down
        released = self._was_down and not down
        self._was_down = down
        if self.gameplay_hud is not None and self.gameplay_hud.is_mouse_over_ui(
            Vector2(float(x), float(y))
        ):
            return
        if pressed:
            self.touch = True
        if released and self.touch:
            self.touch = False

    def draw(self, delta_time: float) -> None:
        super().draw(delta_time)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game and run it until the window is closed."""
    game = Game(800, 600, "Puzzle Maker")
    game.init()
    game.begin_play()
    game.run()
    return 0