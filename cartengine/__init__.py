"""A small 2D game framework on pygame: worlds, actors, UI widgets, asset caching and easing curves."""

__version__ = "1.0.0"