"""A world owns the actors and the HUD of one scene."""

from __future__ import annotations

import sys
from typing import Any, Optional, TypeVar

from .actor import Actor
from .clock import Clock
from .objects import Object
from .properties import Vector2

GARBAGE_LIMIT = 5000
"""Approximate bytes of destroyed actors that force a clean cycle."""

A = TypeVar("A", bound=Actor)
H = TypeVar("H")


class World(Object):
    """Updates and draws its actors and releases destroyed ones periodically."""

    def __init__(self, app: Any, clock: Optional[Clock] = None) -> None:
        super().__init__()
        self.app = app
        self._clock = clock
        self.actors: list[Actor] = []
        self.pending_actors: list[Actor] = []
        self.hud: Any = None
        self.clean_cycle_interval = 5.0
        self._clean_cycle_start = 0.0

    @property
    def clock(self) -> Clock:
        return self._clock if self._clock is not None else Clock.get()

    @property
    def app_window_size(self) -> Vector2:
        return self.app.window_size

    @property
    def surface(self) -> Any:
        return self.app.surface

    def init(self) -> None:
        """Start the clean-cycle timer."""
        self._clean_cycle_start = self.clock.elapsed_time

    def update(self, delta_time: float) -> None:
        """Update every actor, then the HUD; move destroyed actors aside."""
        for actor in list(self.actors):
            actor.update(delta_time)
        survivors = []
        for actor in self.actors:
            if actor.is_pending_destroy:
                self.pending_actors.append(actor)
            else:
                survivors.append(actor)
        self.actors = survivors

        elapsed = self.clock.elapsed_time - self._clean_cycle_start
        if self.pending_size() >= GARBAGE_LIMIT or elapsed >= self.clean_cycle_interval:
            self.clean_cycle()
            self._clean_cycle_start = self.clock.elapsed_time

        if self.hud is not None:
            if not self.hud.has_init:
                self.hud.native_init()
            self.hud.update(delta_time)

    def draw(self, delta_time: float) -> None:
        """Draw every actor, then the HUD."""
        for actor in self.actors:
            actor.draw(delta_time)
        if self.hud is not None:
            if not self.hud.has_init:
                self.hud.native_init()
            self.hud.draw(delta_time)

    def pending_size(self) -> int:
        """Approximate memory, in bytes, held by actors waiting to be released."""
        return sum(
            sys.getsizeof(actor) + sys.getsizeof(vars(actor))
            for actor in self.pending_actors
        )

    def clean_cycle(self) -> None:
        """Release the destroyed actors."""
        self.pending_actors = [a for a in self.pending_actors if not a.is_pending_destroy]

    def unload(self) -> None:
        """Mark every actor for destruction."""
        for actor in self.actors:
            actor.destroy()

    def spawn_actor(self, actor_type: type[A], *args: Any) -> A:
        """Create an actor of ``actor_type`` in this world and keep it."""
        actor = actor_type(self, *args)
        self.actors.append(actor)
        return actor

    def spawn_hud(self, hud_type: type[H], *args: Any) -> H:
        """Create the world's HUD, replacing any previous one."""
        hud = hud_type(self, *args)
        self.hud = hud
        return hud