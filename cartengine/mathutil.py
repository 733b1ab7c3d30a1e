"""Vector, colour and interpolation helpers."""

from __future__ import annotations

import math
import random
from typing import overload

from .properties import Color, Vector2


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def rotation_to_vector(rotation: float) -> Vector2:
    """Unit vector pointing at ``rotation`` degrees."""
    radians = degrees_to_radians(rotation)
    return Vector2(math.cos(radians), math.sin(radians))


def vector_length(vector: Vector2) -> float:
    return abs(math.sqrt(vector.x * vector.x + vector.y * vector.y))


def scale_vector(vector: Vector2, amount: float) -> Vector2:
    return Vector2(vector.x * amount, vector.y * amount)


def normalize(vector: Vector2) -> Vector2:
    """Unit vector in the direction of ``vector``; the zero vector stays zero."""
    length = vector_length(vector)
    if length == 0.0:
        return Vector2()
    return scale_vector(vector, 1.0 / length)


def direction(begin: Vector2, end: Vector2) -> Vector2:
    return Vector2(end.x - begin.x, end.y - begin.y)


def dot(v1: Vector2, v2: Vector2) -> float:
    """Dot product of the two vectors after normalising them."""
    n1 = normalize(v1)
    n2 = normalize(v2)
    return n1.x * n2.x + n1.y * n2.y


def vector_to_rotation(vec1: Vector2, vec2: Vector2) -> float:
    """Angle in degrees between two vectors; NaN where it is undefined."""
    denominator = vector_length(vec1) * vector_length(vec2)
    if denominator == 0.0:
        return math.nan
    ratio = dot(vec1, vec2) / denominator
    if not -1.0 <= ratio <= 1.0:
        return math.nan
    return radians_to_degrees(math.acos(ratio))


def lerp_float(a: float, b: float, alpha: float) -> float:
    """Interpolate with ``alpha`` clamped to [0, 1]."""
    alpha = min(max(alpha, 0.0), 1.0)
    return a + (b - a) * alpha


def lerp_char(a: int, b: int, alpha: int) -> int:
    """Interpolate two byte values; ``alpha`` is a byte that is capped at 1."""
    alpha = min(int(alpha) & 0xFF, 1)
    return (a + (b - a) * alpha) & 0xFF


def lerp_color(a: Color, b: Color, alpha: float) -> Color:
    """Per-channel byte interpolation; ``alpha`` is truncated to a whole number."""
    step = int(alpha)
    return Color(
        lerp_char(a.r, b.r, step),
        lerp_char(a.g, b.g, step),
        lerp_char(a.b, b.b, step),
        lerp_char(a.a, b.a, step),
    )


def lerp_vector(a: Vector2, b: Vector2, alpha: float) -> Vector2:
    return Vector2(lerp_float(a.x, b.x, alpha), lerp_float(a.y, b.y, alpha))


@overload
def lerp(a: float, b: float, t: float) -> float: ...


@overload
def lerp(a: Vector2, b: Vector2, t: float) -> Vector2: ...


def lerp(a, b, t):
    """Unclamped linear interpolation of numbers or vectors."""
    if isinstance(a, Vector2):
        return Vector2(lerp(a.x, b.x, t), lerp(a.y, b.y, t))
    return a + t * (b - a)


def _to_byte(value: float) -> int:
    return int(value) & 0xFF


def lerp_rgba(a: Color, b: Color, t: float, alpha: bool) -> Color:
    """Unclamped colour interpolation; the alpha channel follows only if ``alpha``."""
    a_channel = lerp(a.a, b.a, t) if alpha else a.a
    return Color(
        _to_byte(lerp(a.r, b.r, t)),
        _to_byte(lerp(a.g, b.g, t)),
        _to_byte(lerp(a.b, b.b, t)),
        _to_byte(a_channel),
    )


def random_range(minimum: float, maximum: float) -> float:
    return random.uniform(minimum, maximum)


def random_color(col1: Color, col2: Color) -> Color:
    """Colour whose channels each lie between those of the two given colours."""
    return Color(
        _to_byte(random_range(col1.r, col2.r)),
        _to_byte(random_range(col1.g, col2.g)),
        _to_byte(random_range(col1.b, col2.b)),
        _to_byte(random_range(col1.a, col2.a)),
    )


def random_unit_vector() -> Vector2:
    """Random vector with each component drawn from [-1, 1]."""
    return Vector2(random_range(-1, 1), random_range(-1, 1))