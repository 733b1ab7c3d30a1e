"""Base engine object and weakly bound multicast delegates."""

from __future__ import annotations

import functools
import inspect
import weakref
from typing import Any, Callable, Optional

_Resolver = Callable[[], Optional[Callable[..., Any]]]


class Delegate:
    """A list of callbacks bound to objects that it does not keep alive."""

    def __init__(self) -> None:
        self._callbacks: list[_Resolver] = []

    def bind_action(self, obj: object, callback: Callable[..., Any]) -> None:
        """Bind ``callback`` to ``obj``.

        ``callback`` is either a method bound to ``obj`` or a function that
        takes ``obj`` as its first argument.
        """
        owner = weakref.ref(obj)
        if inspect.ismethod(callback):
            method = weakref.WeakMethod(callback)

            def resolve() -> Optional[Callable[..., Any]]:
                return method() if owner() is not None else None

        else:

            def resolve() -> Optional[Callable[..., Any]]:
                target = owner()
                if target is None:
                    return None
                return functools.partial(callback, target)

        self._callbacks.append(resolve)

    def broadcast(self, *args: Any) -> None:
        """Call every callback whose object is alive; drop the others."""
        dead: list[_Resolver] = []
        for resolve in list(self._callbacks):
            action = resolve()
            if action is None:
                dead.append(resolve)
                continue
            action(*args)
        if dead:
            self._callbacks = [r for r in self._callbacks if r not in dead]

    def __len__(self) -> int:
        return len(self._callbacks)


class Object:
    """An identified engine object that can be flagged for destruction."""

    def __init__(self, object_id: str = "") -> None:
        self.id = object_id
        self.on_destroy = Delegate()
        self._pending_destroy = False

    @property
    def is_pending_destroy(self) -> bool:
        return self._pending_destroy

    def destroy(self) -> None:
        """Mark the object for removal on the next clean cycle."""
        self._pending_destroy = True