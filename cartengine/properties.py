"""Value types, enumerations and property records shared by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .easing import Easing


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Vector2) -> bool:
        """True if ``point`` lies inside; the right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


BLANK = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255, 255)
RAYWHITE = Color(245, 245, 245, 255)
BLACK = Color(0, 0, 0, 255)
GRAY = Color(130, 130, 130, 255)
DARKGRAY = Color(80, 80, 80, 255)
BLUE = Color(0, 121, 241, 255)


class UIType(IntEnum):
    BUTTON = 0
    TEXT = 1
    LABEL = 2


class Align(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class ParticleScalingMode(IntEnum):
    LOCAL = 0
    GLOBAL = 1


class ParticleEmitterShape(IntEnum):
    CONE = 0
    CIRCLE = 1
    BOX = 2
    LINE = 3


class ShapeType(IntEnum):
    NONE = 0
    CIRCLE = 1
    RECTANGLE = 2
    LINE = 3
    CIRCLE_LINE = 4


class AppState(IntEnum):
    TITLE = 0
    LEVEL_SELECTION = 1
    GAME = 2


class GameState(IntEnum):
    STAGE1 = 0
    STAGE2 = 1


@dataclass
class UIProperties:
    """Layout and look of a UI element."""

    size: Vector2 = Vector2()
    location: Vector2 = Vector2()
    pivot: Vector2 = Vector2()
    color: Color = BLANK
    scale: float = 1.0
    rotation: float = 0.0
    texture: str = ""


@dataclass
class TextProperties(UIProperties):
    """A UI element that shows a line of text."""

    font: str = ""
    text: str = ""
    font_size: float = 0.0
    align: Align = Align.LEFT
    text_background: Color = BLANK


@dataclass
class ButtonProperties(UIProperties):
    """Colours and behaviour of a button."""

    default_color: Color = BLANK
    over_color: Color = BLANK
    down_color: Color = BLANK
    text_color: Color = BLANK
    align: Align = Align.LEFT
    is_selectable: bool = False


@dataclass
class ButtonTextProperties(ButtonProperties):
    """A button with a caption."""

    font: str = ""
    text: str = ""
    font_size: float = 0.0
    align: Align = Align.LEFT
    color: Color = BLANK
    hover_color: Color = BLANK


@dataclass
class TransformAnimData:
    offset: Vector2 = Vector2()
    scale: float = 0.0
    rotate: float = 0.0
    color: Color = WHITE
    offset_active: bool = True
    rotate_active: bool = True
    scale_active: bool = True
    color_active: bool = True


@dataclass
class ParticleProperties:
    id: str = ""
    lifetime: float = 0.0
    texture_path: str = ""
    angular_velocity: float = 0.0
    speed: float = 0.0
    start_scale: float = 0.0
    end_scale: float = 0.0
    start_rotation: float = 0.0
    end_rotation: float = 0.0
    size: Vector2 = Vector2()
    start_location: Vector2 = Vector2()
    velocity: Vector2 = Vector2()
    color: Color = BLANK
    start_color: Color = BLANK
    end_color: Color = BLANK
    easing: Easing = Easing.EASE_IN_SINE
    gravity: float = 0.0
    burst_count: int = 0
    color_over_time: bool = False
    scale_over_time: bool = False
    burst_on_start: bool = False


@dataclass
class ParticleSystemProperties:
    texture_paths: list[str] = field(default_factory=list)
    max_particles: int = 0
    delay: float = 0.0
    particle: ParticleProperties = field(default_factory=ParticleProperties)
    shape: ParticleEmitterShape = ParticleEmitterShape.CONE
    location_offset: Rectangle = Rectangle()
    min_size: Vector2 = Vector2()
    max_size: Vector2 = Vector2()
    start_scale: float = 0.0
    end_scale: float = 0.0
    min_velocity: Vector2 = Vector2()
    max_velocity: Vector2 = Vector2()
    min_lifetime: float = 0.0
    max_lifetime: float = 0.0
    color: Color = BLANK
    start_color: Color = BLANK
    end_color: Color = BLANK
    max_angular_velocity: float = 0.0
    min_angular_velocity: float = 0.0
    easing: Easing = Easing.EASE_IN_SINE
    gravity: float = 0.0
    colors_pool: list[Color] = field(default_factory=list)
    burst_count: int = 0
    randomize_speed: bool = False
    randomize_size: bool = False
    randomize_color: bool = False
    looping: bool = False
    burst_mode: bool = False
    color_over_time: bool = False
    scale_over_time: bool = False
    burst_on_start: bool = False


@dataclass
class EmitterBox:
    rect: Rectangle = Rectangle()


@dataclass
class EmitterCircle:
    radius: float = 0.0
    arc: float = 0.0
    thickness: float = 0.0


@dataclass
class EmitterLine:
    length: float = 0.0
    angle: float = 0.0


@dataclass
class DebugData:
    start: Vector2 = Vector2()
    end: Vector2 = Vector2()
    shape: ParticleEmitterShape = ParticleEmitterShape.CONE
    radius: float = 0.0
    line_width: float = 0.0
    color: Color = BLANK


@dataclass
class ButtonRect:
    scale: float = 0.0
    loc: Vector2 = Vector2()
    width: int = 0
    height: int = 0
    texture: str = ""
    texture_color: Color = BLANK
    text: str = ""
    text_color: Color = BLANK
    text_size: Vector2 = Vector2()
    font_size: float = 0.0