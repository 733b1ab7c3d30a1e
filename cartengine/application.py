"""The application window and its main loop."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

import pygame

from .assets import AssetManager
from .clock import Clock
from .properties import RAYWHITE, Vector2

W = TypeVar("W")


class Application:
    """Opens a window and runs the current world until asked to quit."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.exit = False
        self.target_frame_rate = 60
        self.current_world: Any = None
        self.hud: Any = None
        self.surface: Optional[pygame.Surface] = None
        self._frame_clock: Optional[pygame.time.Clock] = None

    @property
    def window_size(self) -> Vector2:
        if self.surface is None:
            return Vector2(float(self.width), float(self.height))
        width, height = self.surface.get_size()
        return Vector2(float(width), float(height))

    def init(self) -> None:
        """Open the window."""
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)
        self._frame_clock = pygame.time.Clock()

    def begin_play(self) -> None:
        """Hook called once before the main loop starts."""

    def run(self) -> None:
        """Run frames until quit, then release the world, assets and window."""
        if self.surface is None or self._frame_clock is None:
            raise RuntimeError("init() must be called before run()")
        clock = Clock.get()
        clock.reset()
        while not self.exit:
            self.surface.fill(RAYWHITE.as_tuple())
            clock.tick()
            delta_time = clock.delta_time
            self.update(delta_time)
            self.draw(delta_time)
            pygame.display.flip()
            self._frame_clock.tick(self.target_frame_rate)
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                self.exit = True

        Clock.release()
        if self.current_world is not None:
            self.current_world.unload()
        assets = AssetManager.get()
        assets.clean_cycle()
        assets.unload()
        AssetManager.release()
        self.surface = None
        self._frame_clock = None
        pygame.quit()

    def load_world(self, world_type: type[W]) -> W:
        """Create a world of ``world_type`` and make it current."""
        world = world_type(self)
        self.current_world = world
        return world

    def quit(self) -> None:
        """Leave the main loop after the current frame."""
        self.exit = True

    def update(self, delta_time: float) -> None:
        self.current_world.update(delta_time)

    def draw(self, delta_time: float) -> None:
        self.current_world.draw(delta_time)