"""Text drawn inside a rectangle, with optional word wrapping and selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import pygame

from .assets import FontAsset
from .properties import Color, Rectangle, Vector2
from .uielement import _fill_rect

_MEASURE = 0
_DRAW = 1


@dataclass(frozen=True)
class PlacedGlyph:
    """A character that was drawn, where, and whether it was selected."""

    index: int
    char: str
    position: Vector2
    selected: bool


def _blit_glyph(
    surface: Any, font: FontAsset, char: str, position: Vector2, font_size: float, color: Color
) -> None:
    if color.a == 0:
        return
    image = font.font.render(char, True, (color.r, color.g, color.b))
    if font_size != font.size:
        factor = font_size / font.size
        width, height = image.get_size()
        image = pygame.transform.scale(
            image, (max(1, round(width * factor)), max(1, round(height * factor)))
        )
    if color.a < 255:
        image.set_alpha(color.a)
    surface.blit(image, (round(position.x), round(position.y)))


def draw_text_boxed(
    surface: Optional[Any],
    font: FontAsset,
    text: str,
    rec: Rectangle,
    font_size: float,
    spacing: float,
    word_wrap: bool,
    tint: Color,
    select_start: int,
    select_length: int,
    select_tint: Color,
    select_back_tint: Color,
) -> list[PlacedGlyph]:
    """Draw ``text`` inside ``rec`` and return the glyphs that were placed.

    With ``word_wrap`` lines break at the last space that fits; without it
    they break at the glyph that would overflow. Drawing stops at the bottom
    of ``rec``. With ``surface`` None only the layout is computed.
    """
    if font.size <= 0:
        raise ValueError("font has no base size")
    scale = font_size / font.size
    line_advance = (font.size + font.size // 2) * scale
    length = len(text)
    placed: list[PlacedGlyph] = []

    offset_x = 0.0
    offset_y = 0.0
    state = _MEASURE if word_wrap else _DRAW
    start_line = -1
    end_line = -1
    last_k = -1

    i = 0
    k = 0
    while i < length:
        char = text[i]
        glyph_width = 0.0
        if char != "\n":
            glyph_width = font.font.size(char)[0] * scale
            if i + 1 < length:
                glyph_width += spacing

        if state == _MEASURE:
            if char in " \t\n":
                end_line = i
            if offset_x + glyph_width > rec.width:
                end_line = i if end_line < 1 else end_line
                if i == end_line:
                    end_line -= 1
                if start_line + 1 == end_line:
                    end_line = i - 1
                state = _DRAW
            elif i + 1 == length:
                end_line = i
                state = _DRAW
            elif char == "\n":
                state = _DRAW

            if state == _DRAW:
                offset_x = 0.0
                i = start_line
                glyph_width = 0.0
                last_k, k = k - 1, last_k
        else:
            if char == "\n":
                if not word_wrap:
                    offset_y += line_advance
                    offset_x = 0.0
            else:
                if not word_wrap and offset_x + glyph_width > rec.width:
                    offset_y += line_advance
                    offset_x = 0.0

                if offset_y + font.size * scale > rec.height:
                    break

                selected = select_start >= 0 and select_start <= k < select_start + select_length
                if selected and surface is not None:
                    _fill_rect(
                        surface,
                        rec.x + offset_x - 1,
                        rec.y + offset_y,
                        glyph_width,
                        font.size * scale,
                        select_back_tint,
                    )

                if char not in " \t":
                    position = Vector2(rec.x + offset_x, rec.y + offset_y)
                    if surface is not None:
                        _blit_glyph(
                            surface, font, char, position, font_size,
                            select_tint if selected else tint,
                        )
                    placed.append(PlacedGlyph(i, char, position, selected))

            if word_wrap and i == end_line:
                offset_y += line_advance
                offset_x = 0.0
                start_line = end_line
                end_line = -1
                glyph_width = 0.0
                select_start += last_k - k
                k = last_k
                state = _MEASURE

        if offset_x != 0 or char != " ":
            offset_x += glyph_width
        i += 1
        k += 1

    return placed