"""Heads-up display: the UI layer a world draws over its actors."""

from __future__ import annotations

from typing import Any

from .properties import Vector2
from .uielement import UIElement


class HUD(UIElement):
    """A UI element that is initialised once, lazily, by its world."""

    def __init__(self, world: Any, hud_id: str) -> None:
        super().__init__(world, hud_id)
        self._already_init = False

    @property
    def has_init(self) -> bool:
        return self._already_init

    def native_init(self) -> None:
        """Run ``init`` the first time only."""
        if not self._already_init:
            self._already_init = True
            self.init()

    def init(self) -> None:
        self._already_init = True

    def is_mouse_over_ui(self, point: Vector2) -> bool:
        """True if ``point`` lies over any visible child element."""
        return any(child.bounds.contains(point) and child.visible for child in self.children)

    def update(self, delta_time: float) -> None:
        """The HUD itself does not advance its children."""

    def draw(self, delta_time: float) -> None:
        """The HUD itself draws nothing; its elements are drawn by the world."""

    def restart_button_clicked(self) -> None:
        """Hook for a restart button; the base HUD ignores it."""

    def quit_button_clicked(self) -> None:
        """Ask the owning application to quit."""
        self.world.app.quit()