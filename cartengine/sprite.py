"""Actors drawn from an image file."""

from __future__ import annotations

import math
from typing import Any

import pygame

from .actor import Actor
from .assets import AssetManager, Texture
from .properties import WHITE, Color, Rectangle, Vector2


def _render(texture: Texture, scale: float, rotation: float, color: Color):
    """Return the image to blit and its offset from the draw location."""
    width = round(texture.width * scale)
    height = round(texture.height * scale)
    if width <= 0 or height <= 0:
        return None, (0.0, 0.0)
    image = pygame.transform.scale(texture.surface, (width, height))
    if color != WHITE:
        image.fill(color.as_tuple(), special_flags=pygame.BLEND_RGBA_MULT)
    if rotation % 360 == 0:
        return image, (0.0, 0.0)
    image = pygame.transform.rotate(image, -rotation)
    radians = math.radians(rotation)
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    corners = [(0, 0), (width, 0), (width, height), (0, height)]
    xs = [x * cos_r - y * sin_r for x, y in corners]
    ys = [x * sin_r + y * cos_r for x, y in corners]
    return image, (min(xs), min(ys))


class Sprite(Actor):
    """An image stretched to a fixed size, rotated about its top-left corner."""

    def __init__(
        self,
        world: Any,
        sprite_id: str,
        size: Rectangle,
        path: str,
        location: Vector2,
    ) -> None:
        super().__init__(world, sprite_id)
        self.size = size
        self.texture_path = path
        self.location = location

    def update(self, delta_time: float) -> None:
        """Sprites do not change on their own."""

    def draw(self, delta_time: float) -> None:
        """Blit the texture onto the world's surface."""
        surface = self.world.surface
        if surface is None:
            return
        texture = AssetManager.get().load_texture_asset(self.texture_path)
        if texture is None:
            return
        texture.width = int(self.size.width)
        texture.height = int(self.size.height)
        image, (dx, dy) = _render(texture, self.scale, self.rotation, self.color)
        if image is None:
            return
        surface.blit(image, (round(self.location.x + dx), round(self.location.y + dy)))