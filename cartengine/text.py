"""Single-line text labels."""

from __future__ import annotations

from typing import Any, Optional

from .assets import AssetManager, FontAsset
from .properties import BLANK, Align, Color, TextProperties, Vector2
from .uielement import UIElement, _fill_rect


def _require_font(path: str, size: int) -> FontAsset:
    font = AssetManager.get().load_font_asset(path, size)
    if font is None:
        raise FileNotFoundError(f"font {path!r} could not be loaded")
    return font


def _measure(font: FontAsset, text: str, spacing: float) -> Vector2:
    """Width and height of ``text`` with ``spacing`` pixels between glyphs."""
    if not text:
        return Vector2(0.0, float(font.size))
    width = font.font.size(text)[0] + spacing * (len(text) - 1)
    return Vector2(float(width), float(font.size))


def _draw_text(
    surface: Any,
    path: str,
    text: str,
    position: Vector2,
    font_size: float,
    spacing: float,
    color: Color,
) -> None:
    """Render ``text`` glyph by glyph starting at ``position``."""
    if not text or color.a == 0:
        return
    font: Optional[FontAsset] = AssetManager.get().load_font_asset(path, max(1, round(font_size)))
    if font is None:
        return
    rgb = (color.r, color.g, color.b)
    x = position.x
    y = round(position.y)
    for char in text:
        glyph = font.font.render(char, True, rgb)
        if color.a < 255:
            glyph.set_alpha(color.a)
        surface.blit(glyph, (round(x), y))
        x += font.font.size(char)[0] + spacing


class Text(UIElement):
    """A line of text aligned inside a rectangle over an optional background."""

    def __init__(self, world: Any, text_id: str, size: Vector2) -> None:
        super().__init__(world, text_id, size)
        self.text = ""
        self.font = ""
        self.font_size = 0
        self.align = Align.LEFT
        self.text_size = Vector2()
        self.margin = 5
        self.background = BLANK

    def set_text_properties(self, properties: TextProperties) -> None:
        self.font = properties.font
        self.text = properties.text
        self.font_size = int(properties.font_size)
        self.align = properties.align
        self.color = properties.color
        self.location = properties.location
        self.background = properties.text_background
        self.update_location()

    def init(self) -> None:
        """Measure the text and lay it out; raise if the font cannot be loaded."""
        font = _require_font(self.font, self.font_size)
        self.text_size = _measure(font, self.text, 1.0)
        self.update_location()
        self.pending_update = False

    def draw(self, delta_time: float) -> None:
        if not self.visible:
            return
        surface = self.world.surface
        if surface is None:
            return
        _fill_rect(surface, self.location.x, self.location.y, self.size.x, self.size.y, self.background)
        _draw_text(
            surface,
            self.font,
            self.text,
            self.calculated_location,
            self.font_size * self.scale,
            1.0,
            self.color,
        )

    def update_location(self) -> None:
        """Align the text horizontally and centre it vertically in the box."""
        box_w = self.size.x * self.scale
        box_h = self.size.y * self.scale
        text_w = self.text_size.x * self.scale
        text_h = self.text_size.y * self.scale
        y = self.location.y + box_h / 2 - text_h / 2
        if self.align == Align.CENTER:
            x = self.location.x + box_w / 2 - text_w / 2
        elif self.align == Align.RIGHT:
            x = self.location.x + box_w - text_w
        else:
            x = self.location.x
        self.calculated_location = Vector2(x, y)