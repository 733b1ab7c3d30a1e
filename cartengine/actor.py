"""Objects that live in a world and have a place on screen."""

from __future__ import annotations

from typing import Any

from .objects import Object
from .properties import WHITE, Color, Vector2


class Actor(Object):
    """An object with a location, scale, rotation, colour and visibility."""

    def __init__(self, world: Any, actor_id: str) -> None:
        super().__init__(actor_id)
        self.world = world
        self.width = 0
        self.height = 0
        self.scale = 1.0
        self.rotation = 0.0
        self.location = Vector2()
        self.calculated_location = Vector2()
        self.visible = False
        self.active = True
        self.color = WHITE

    @property
    def window_size(self) -> Vector2:
        return self.world.app_window_size

    def set_location(self, location: Vector2) -> None:
        self.location = location
        self.calculated_location = location

    def set_scale(self, scale: float) -> None:
        self.scale = scale

    def set_rotation(self, rotation: float) -> None:
        self.rotation = rotation

    def set_visible(self, flag: bool) -> None:
        self.visible = flag

    def set_active(self, flag: bool) -> None:
        self.active = flag

    def set_color(self, color: Color) -> None:
        self.color = color

    def update(self, delta_time: float) -> None:
        """Advance the actor by one frame; plain actors do nothing."""

    def draw(self, delta_time: float) -> None:
        """Render the actor; plain actors have nothing to draw."""