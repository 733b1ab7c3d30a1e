"""UI elements: coloured or textured panels that hold child elements."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

import pygame

from .actor import Actor
from .assets import AssetManager, Texture
from .properties import WHITE, Color, Rectangle, TextProperties, UIProperties, Vector2


def _fill_rect(surface: Any, x: float, y: float, width: float, height: float, color: Color) -> None:
    """Fill an axis-aligned rectangle, blending by the colour's alpha."""
    x, y, width, height = int(x), int(y), int(width), int(height)
    if width <= 0 or height <= 0 or color.a == 0:
        return
    if color.a == 255:
        surface.fill((color.r, color.g, color.b), pygame.Rect(x, y, width, height))
        return
    layer = pygame.Surface((width, height), pygame.SRCALPHA)
    layer.fill(color.as_tuple())
    surface.blit(layer, (x, y))


def _blit_texture(surface: Any, texture: Texture, position: Vector2, tint: Color = WHITE) -> None:
    """Blit ``texture`` stretched to its current width and height."""
    if texture.width <= 0 or texture.height <= 0:
        return
    image = pygame.transform.scale(texture.surface, (texture.width, texture.height))
    if tint != WHITE:
        image.fill(tint.as_tuple(), special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(image, (round(position.x), round(position.y)))


class UIElement(Actor):
    """A rectangle with a background colour or texture and child elements."""

    def __init__(self, world: Any, element_id: str, size: Optional[Vector2] = None) -> None:
        super().__init__(world, element_id)
        self.size = size if size is not None else Vector2()
        self.pivot = Vector2()
        self.texture = ""
        self.texture_asset: Optional[Texture] = None
        self.raw_location = Vector2()
        self.pending_update = True
        self.children: list[UIElement] = []

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(
            self.location.x,
            self.location.y,
            self.size.x * self.scale,
            self.size.y * self.scale,
        )

    def init(self) -> None:
        """Load the background texture, initialise children and lay out."""
        if self.texture:
            self.texture_asset = AssetManager.get().load_texture_asset(self.texture)
            if self.texture_asset is not None:
                self.texture_asset.width = int(self.size.x)
                self.texture_asset.height = int(self.size.y)
        for child in self.children:
            child.init()
        self.update_location()
        self.pending_update = False

    def update(self, delta_time: float) -> None:
        """Update the active children while this element is active."""
        if not self.active:
            return
        for child in list(self.children):
            if child.active:
                child.update(delta_time)

    def draw(self, delta_time: float) -> None:
        """Draw the background, then the children, while visible."""
        if not self.visible:
            return
        self.draw_bg_color()
        if self.texture:
            self.draw_bg_texture()
        for child in self.children:
            child.draw(delta_time)

    def set_ui_properties(self, properties: UIProperties) -> None:
        self.location = properties.location
        self.calculated_location = properties.location
        self.scale = properties.scale
        self.color = properties.color
        self.texture = properties.texture
        self.size = properties.size
        self.pivot = properties.pivot
        self.update_location()

    def set_size(self, size: Vector2) -> None:
        self.size = size
        self.update_location()

    def set_scale(self, scale: float) -> None:
        super().set_scale(scale)
        for child in self.children:
            child.set_scale(scale)
        self.update_location()

    def set_active(self, flag: bool) -> None:
        super().set_active(flag)
        for child in self.children:
            child.set_active(flag)

    def set_location(self, location: Vector2) -> None:
        """Move the element and shift every child by the same offset."""
        offset = location - self.location
        super().set_location(location)
        for child in self.children:
            child.set_location(child.location + offset)
        self.update_location()

    def set_visible(self, flag: bool) -> None:
        for child in self.children:
            child.set_visible(flag)
        super().set_visible(flag)

    def destroy(self) -> None:
        """Mark this element and its children for removal."""
        super().destroy()
        for child in self.children:
            child.destroy()

    def draw_bg_color(self) -> None:
        surface = self.world.surface
        if surface is None:
            return
        _fill_rect(
            surface,
            self.calculated_location.x,
            self.calculated_location.y,
            self.size.x * self.scale,
            self.size.y * self.scale,
            self.color,
        )

    def draw_bg_texture(self) -> None:
        surface = self.world.surface
        if surface is None:
            return
        texture = AssetManager.get().load_texture_asset(self.texture)
        if texture is None:
            return
        texture.width = int(self.size.x * self.scale)
        texture.height = int(self.size.y * self.scale)
        _blit_texture(surface, texture, self.calculated_location)

    def set_texture(self, texture: str) -> None:
        self.texture = texture

    def add_text(self, text: Any, properties: Optional[TextProperties] = None) -> "UIElement":
        """Add a text child.

        With ``properties``, ``text`` is the id of a new text element spawned
        in the world and placed relative to this element; without, ``text``
        is an existing element that is added as it is.
        """
        if properties is None:
            self.add_ui_element(text)
            return text
        from .text import Text

        element = self.world.spawn_actor(Text, text, properties.size)
        placed = replace(properties, location=self.location + properties.location)
        element.set_text_properties(placed)
        element.init()
        element.set_visible(True)
        self.add_ui_element(element)
        return element

    def add_button(self, button: "UIElement") -> None:
        self.add_ui_element(button)

    def add_ui_element(self, element: "UIElement") -> None:
        self.children.append(element)

    def update_location(self) -> None:
        """Place the drawn rectangle so that the pivot sits on the location."""
        self.raw_location = self.location * self.scale
        self.calculated_location = self.location - self.pivot * self.scale