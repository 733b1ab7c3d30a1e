"""Clickable buttons with an optional caption."""

from __future__ import annotations

from typing import Any

import pygame

from .objects import Delegate
from .properties import BLANK, Align, ButtonProperties, ButtonTextProperties, Color, Rectangle, Vector2
from .text import _draw_text, _measure, _require_font
from .uielement import UIElement, _fill_rect


def _set_cursor(cursor: int) -> None:
    if not pygame.display.get_init():
        return
    try:
        pygame.mouse.set_cursor(cursor)
    except pygame.error:
        pass


class UIButton(UIElement):
    """A button that changes colour on hover and press and reports clicks."""

    def __init__(self, world: Any, button_id: str, size: Vector2) -> None:
        super().__init__(world, button_id, size)
        self.touch = False
        self.touch_count = 0
        self.margin = 0
        self.text_size = Vector2()
        self.font_location = Vector2()
        self.mouse_location = Vector2()
        self.font = ""
        self.text = ""
        self.align = Align.LEFT
        self.font_size = 0.0
        self.default_text_color = BLANK
        self.text_color = BLANK
        self.text_hover_color = BLANK
        self.default_color = BLANK
        self.down_color = BLANK
        self.hover_color = BLANK
        self.is_button_down = False
        self.is_mouse_over = False
        self.is_selected = False
        self.is_selectable = False
        self.on_button_clicked = Delegate()
        self._was_down = False

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(
            self.calculated_location.x, self.calculated_location.y, self.size.x, self.size.y
        )

    def init(self) -> None:
        """Lay out the button and measure its caption."""
        self.update_location()
        if self.text:
            font = _require_font(self.font, int(self.font_size))
            self.text_size = _measure(font, self.text, 2.0)
            self.update_text_location()
        self.pending_update = False

    def set_scale(self, scale: float) -> None:
        super().set_scale(scale)
        self.update_location()
        self.update_text_location()

    def set_button_properties(self, properties: ButtonProperties) -> None:
        self.color = properties.default_color
        self.default_color = properties.default_color
        self.hover_color = properties.over_color
        self.down_color = properties.down_color
        self.text_color = properties.text_color
        self.is_selectable = properties.is_selectable

    def set_text_properties(self, properties: ButtonTextProperties) -> None:
        self.set_ui_properties(properties)
        self.set_button_properties(properties)
        self.font = properties.font
        self.text = properties.text
        self.font_size = properties.font_size
        self.align = properties.align
        self.text_color = properties.text_color
        self.default_text_color = properties.text_color
        self.text_hover_color = properties.hover_color

    def update(self, delta_time: float) -> None:
        """Poll the left mouse button and fire hover, press and click events."""
        if not self.visible or not self.active:
            return
        x, y = pygame.mouse.get_pos()
        position = Vector2(float(x), float(y))
        down = bool(pygame.mouse.get_pressed()[0])
        pressed = down and not self._was_down
        released = self._was_down and not down
        self._was_down = down
        self.mouse_location = position

        if not down and not self.touch:
            if self.test_mouse_over(position):
                self.mouse_hovered()
            else:
                self.mouse_out()

        if pressed:
            if self.touch:
                return
            if self.test_mouse_over(position):
                self.button_down()
            self.touch = True

        if released:
            if not self.touch:
                return
            if self.test_mouse_over(position):
                self.button_up()
            self.touch = False

    def draw(self, delta_time: float) -> None:
        if not self.visible:
            return
        super().draw(delta_time)
        surface = self.world.surface
        if surface is None:
            return
        if self.is_selected:
            _fill_rect(
                surface,
                self.calculated_location.x - 10.0,
                self.calculated_location.y - 10.0,
                self.size.x + 20.0,
                self.size.y + 20.0,
                self.color,
            )
        if self.text:
            ink = Color(self.text_color.r, self.text_color.g, self.text_color.b, self.color.a)
            _draw_text(
                surface,
                self.font,
                self.text,
                self.font_location,
                self.font_size * self.scale,
                2 * self.scale,
                ink,
            )

    def set_selected(self, flag: bool) -> None:
        self.is_selected = flag

    def set_active(self, flag: bool) -> None:
        super().set_active(flag)
        if not flag:
            self.is_selected = False

    def update_location(self) -> None:
        """Place the button relative to its location according to its alignment."""
        self.raw_location = self.location
        width = self.size.x * self.scale
        height = self.size.y * self.scale
        y = self.location.y - height / 2
        if self.align == Align.CENTER:
            x = self.location.x - width / 2
        elif self.align == Align.RIGHT:
            x = self.location.x - width
        else:
            x = self.location.x
        self.calculated_location = Vector2(x, y)

    def set_location(self, location: Vector2) -> None:
        super().set_location(location)
        self.update_text_location()

    def update_text_location(self) -> None:
        """Centre the caption in the button when it fits, else pin it top-left."""
        if not self.text:
            return
        if self.text_size.x < self.size.x:
            margin_x = (self.size.x * self.scale - self.text_size.x * self.scale) * 0.5
            margin_y = (self.size.y * self.scale - self.text_size.y * self.scale) * 0.5
            self.font_location = Vector2(
                self.calculated_location.x + margin_x, self.calculated_location.y + margin_y
            )
        else:
            self.font_location = self.calculated_location

    def test_mouse_over(self, point: Vector2) -> bool:
        return self.bounds.contains(point)

    def button_up(self) -> None:
        self.is_button_down = False
        self.color = self.default_color
        self.on_button_clicked.broadcast()

    def button_down(self) -> None:
        self.is_button_down = True
        self.color = self.down_color
        if self.is_selectable:
            self.is_selected = True

    def mouse_hovered(self) -> None:
        self.color = self.hover_color
        self.text_color = self.text_hover_color
        self.is_mouse_over = True
        _set_cursor(pygame.SYSTEM_CURSOR_ARROW)

    def mouse_out(self) -> None:
        if self.is_mouse_over:
            self.color = self.default_color
            self.text_color = self.default_text_color
            self.is_mouse_over = False
            _set_cursor(pygame.SYSTEM_CURSOR_ARROW)