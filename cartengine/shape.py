"""Filled rectangles and circles."""

from __future__ import annotations

import math
from typing import Any, Callable

import pygame

from .properties import Color, ShapeType, Vector2
from .uielement import UIElement


def _paint(surface: Any, color: Color, painter: Callable[[Any, tuple], None]) -> None:
    """Run ``painter`` on ``surface``, blending through a layer when translucent."""
    if color.a == 0:
        return
    if color.a == 255:
        painter(surface, (color.r, color.g, color.b))
        return
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    painter(layer, color.as_tuple())
    surface.blit(layer, (0, 0))


class Shape(UIElement):
    """A rectangle centred and rotated on its location, or a circle around it."""

    def __init__(
        self,
        world: Any,
        shape_id: str,
        location: Vector2,
        width: int,
        height: int,
        color: Color,
        shape: ShapeType,
    ) -> None:
        super().__init__(world, shape_id)
        self.shape_type = ShapeType(shape)
        self.location = location
        self.width = width
        self.height = height
        self.color = color

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

    def draw(self, delta_time: float) -> None:
        """Draw the shape; shapes draw whether or not they are visible."""
        surface = self.world.surface
        if surface is None:
            return
        if self.shape_type == ShapeType.RECTANGLE:
            self._draw_rectangle(surface)
        elif self.shape_type == ShapeType.CIRCLE:
            self._draw_circle(surface)

    def _draw_rectangle(self, surface: Any) -> None:
        width = self.width * self.scale
        height = self.height * self.scale
        if width <= 0 or height <= 0:
            return
        radians = math.radians(self.rotation)
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        half_w, half_h = width / 2, height / 2
        corners = [
            (
                self.location.x + dx * cos_r - dy * sin_r,
                self.location.y + dx * sin_r + dy * cos_r,
            )
            for dx, dy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h))
        ]
        _paint(surface, self.color, lambda target, rgba: pygame.draw.polygon(target, rgba, corners))

    def _draw_circle(self, surface: Any) -> None:
        radius = self.width * self.scale
        if radius <= 0:
            return
        centre = (int(self.location.x), int(self.location.y))
        _paint(surface, self.color, lambda target, rgba: pygame.draw.circle(target, rgba, centre, radius))