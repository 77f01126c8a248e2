"""Vectors, colours, rectangles and shapes shared by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import ClassVar, Iterator

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
PI = math.pi


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector:
        return Vector(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Return the same colour with a different alpha channel."""
        return replace(self, a=alpha)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.MAGENTA = Color(255, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        inter_left = max(min(self.left, self.right), min(other.left, other.right))
        inter_top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        inter_right = min(max(self.left, self.right), max(other.left, other.right))
        inter_bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return inter_left < inter_right and inter_top < inter_bottom


class Shape:
    """A filled polygon placed in the world by position, origin and scale."""

    def __init__(self, fill_color: Color = Color.WHITE) -> None:
        self.position = Vector()
        self.origin = Vector()
        self.scale = Vector(1.0, 1.0)
        self.fill_color = fill_color

    def points(self) -> list[Vector]:
        """The outline in local coordinates."""
        raise NotImplementedError

    def move(self, offset: Vector) -> None:
        self.position = self.position + offset

    def local_bounds(self) -> Rect:
        pts = self.points()
        if not pts:
            return Rect(0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def _to_world(self, point: Vector) -> Vector:
        local = point - self.origin
        return self.position + Vector(local.x * self.scale.x, local.y * self.scale.y)

    def global_bounds(self) -> Rect:
        """The bounding box of the shape in world coordinates."""
        local = self.local_bounds()
        corners = [
            self._to_world(Vector(local.left, local.top)),
            self._to_world(Vector(local.right, local.top)),
            self._to_world(Vector(local.left, local.bottom)),
            self._to_world(Vector(local.right, local.bottom)),
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class CircleShape(Shape):
    """A regular polygon approximating a circle; few points give triangles, hexagons..."""

    def __init__(self, radius: float = 0.0, point_count: int = 30,
                 fill_color: Color = Color.WHITE) -> None:
        super().__init__(fill_color)
        if point_count < 0:
            raise ValueError("point_count must not be negative")
        self.radius = radius
        self.point_count = point_count

    def points(self) -> list[Vector]:
        step = 2 * math.pi / self.point_count if self.point_count else 0.0
        result = []
        for index in range(self.point_count):
            theta = index * step - math.pi / 2
            result.append(Vector(self.radius + math.cos(theta) * self.radius,
                                 self.radius + math.sin(theta) * self.radius))
        return result


class RectangleShape(Shape):
    """An axis-aligned rectangle of the given size."""

    def __init__(self, size: Vector = Vector(), fill_color: Color = Color.WHITE) -> None:
        super().__init__(fill_color)
        self.size = size

    def points(self) -> list[Vector]:
        w, h = self.size
        return [Vector(0.0, 0.0), Vector(w, 0.0), Vector(w, h), Vector(0.0, h)]


class RobotType(Enum):
    TYPE1 = auto()
    TYPE2 = auto()
    TYPE3 = auto()


class EnemyType(Enum):
    TRIANGLE = auto()
    HEXAGON = auto()
    PENTAGON = auto()


class PropType(Enum):
    BASIC = auto()
    RARE = auto()
    LEGENDARY = auto()


class GameStateType(Enum):
    MAIN_MENU = auto()
    CHARACTER_SELECTION = auto()
    IN_GAME = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    LEVEL_COMPLETED = auto()


def distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def angle(source: Vector, target: Vector) -> float:
    """Angle in radians of the direction from source to target."""
    return math.atan2(target.y - source.y, target.x - source.x)


def normalize(vector: Vector) -> Vector:
    """Unit vector in the same direction, or the zero vector for zero input."""
    length = vector.length
    if length == 0:
        return Vector(0.0, 0.0)
    return Vector(vector.x / length, vector.y / length)


def is_collision(shape1: Shape, shape2: Shape) -> bool:
    """True if the bounding boxes of the two shapes overlap."""
    return shape1.global_bounds().intersects(shape2.global_bounds())