"""Cached loading of textures and fonts."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, ClassVar, Optional

import pygame

SurfaceLoader = Callable[[str], Optional[Any]]
FontLoader = Callable[[str, int], Optional[Any]]


@dataclass(eq=False)
class Texture:
    """A loaded image and the size it is drawn at."""

    surface: Any
    width: int
    height: int


@dataclass(eq=False)
class FontAsset:
    """A loaded font at one point size."""

    font: Any
    size: int


def _load_surface(path: str) -> Optional[Any]:
    try:
        return pygame.image.load(path)
    except (OSError, pygame.error):
        return None


def _load_font(path: str, size: int) -> Optional[Any]:
    try:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(path, size)
    except (OSError, pygame.error):
        return None


def _drop_unshared(cache: dict) -> None:
    """Remove the entries that nothing outside ``cache`` still refers to."""
    for key in list(cache):
        ref = weakref.ref(cache.pop(key))
        value = ref()
        if value is not None:
            cache[key] = value


class AssetManager:
    """Loads each texture and font once and hands out the shared copy."""

    _instance: ClassVar[Optional["AssetManager"]] = None

    def __init__(
        self,
        texture_loader: SurfaceLoader = _load_surface,
        font_loader: FontLoader = _load_font,
    ) -> None:
        self._texture_loader = texture_loader
        self._font_loader = font_loader
        self.root_directory: Optional[Path] = None
        self._textures: dict[str, Texture] = {}
        self._fonts: dict[str, FontAsset] = {}

    @classmethod
    def get(cls) -> "AssetManager":
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def release(cls) -> None:
        """Drop the shared manager."""
        cls._instance = None

    def set_asset_root_directory(self, directory: str | Path) -> None:
        """Resolve later asset paths relative to ``directory``."""
        self.root_directory = Path(directory)

    def _resolve(self, path: str) -> str:
        if self.root_directory is None:
            return path
        return str(self.root_directory / path)

    def load_texture_asset(self, path: str) -> Optional[Texture]:
        """Return the texture at ``path``, or None if it cannot be loaded."""
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        surface = self._texture_loader(self._resolve(path))
        if surface is None:
            return None
        width, height = surface.get_size()
        texture = Texture(surface, width, height)
        self._textures[path] = texture
        return texture

    def load_font_asset(self, path: str, font_size: int) -> Optional[FontAsset]:
        """Return the font at ``path`` in ``font_size``, or None if it cannot be loaded."""
        key = f"{path}{font_size}"
        cached = self._fonts.get(key)
        if cached is not None:
            return cached
        font = self._font_loader(self._resolve(path), font_size)
        if font is None:
            return None
        asset = FontAsset(font, font_size)
        self._fonts[key] = asset
        return asset

    def clean_cycle(self) -> None:
        """Forget the assets that only the cache still holds."""
        _drop_unshared(self._textures)
        _drop_unshared(self._fonts)

    def unload(self) -> None:
        """Forget every cached asset."""
        self._textures.clear()
        self._fonts.clear()