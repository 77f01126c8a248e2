"""Hostile shapes that chase the player and fire bullet patterns."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from enum import Enum, auto

from shapeshooter.bullet import Bullet
from shapeshooter.geometry import CircleShape, Color, EnemyType, Shape, Vector, normalize

CHARGE_FRAMES = 30
DASH_FRAMES = 40
CHARGE_CHANCE = 200


def color_for_level(level: int) -> Color:
    """Fill colour used for enemies of the given level."""
    if level <= 5:
        return Color.RED
    if level <= 10:
        return Color.MAGENTA
    return Color.WHITE


def _polygon(radius: float, sides: int, level: int) -> CircleShape:
    shape = CircleShape(radius, sides, fill_color=color_for_level(level))
    shape.origin = Vector(radius, radius)
    return shape


class Enemy(ABC):
    """Common state of every enemy: shape, health, speed and reward."""

    def __init__(self, enemy_type: EnemyType, level: int, shape: Shape) -> None:
        self.enemy_type = enemy_type
        self.level = level
        self.shape = shape
        self.health = 1 + level
        self.speed = 2.0 + level * 0.2
        self.attack_cooldown = 60.0
        self.last_attack_time = 0.0
        self.points = 10 + level * 5

    @property
    def position(self) -> Vector:
        return self.shape.position

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def update(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        """Advance one frame; plain enemies have no per-frame behaviour."""

    @abstractmethod
    def attack(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        """Fire this enemy's pattern, appending new bullets to ``bullets``."""

    def take_damage(self, damage: int) -> None:
        self.health -= damage

    def _bullet(self, direction: Vector, speed: float, damage: float) -> Bullet:
        return Bullet(self.shape.position, direction, speed, damage,
                      self.shape.fill_color, True)


class TriangleEnemy(Enemy):
    """A triangle that occasionally charges up and dashes."""

    class State(Enum):
        IDLE = auto()
        CHARGING = auto()
        DASHING = auto()

    def __init__(self, level: int, rng: random.Random | None = None) -> None:
        super().__init__(EnemyType.TRIANGLE, level, _polygon(15, 3, level))
        self.health = 3 + level * 2
        self.speed = 1.5 + level * 0.1
        self.attack_cooldown = 120 - level * 5
        self.points = 15 + level * 5
        self.state = TriangleEnemy.State.IDLE
        self.charge_time = 0
        self.dash_speed = 8.0
        self.dash_duration = 0
        self.dash_direction = Vector()
        self._rng = rng if rng is not None else random.Random()

    def update(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        if self.state is TriangleEnemy.State.IDLE:
            self._idle(player_pos, bullets)
        elif self.state is TriangleEnemy.State.CHARGING:
            self._charging()
        else:
            self._dashing()

    def _idle(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        super().update(player_pos, bullets)
        if self._rng.randrange(CHARGE_CHANCE) == 0:
            self.state = TriangleEnemy.State.CHARGING
            self.charge_time = 0

    def _charging(self) -> None:
        self.charge_time += 1
        grow = 1.0 + self.charge_time * 0.01
        self.shape.scale = Vector(grow, grow)
        if self.charge_time >= CHARGE_FRAMES:
            self.state = TriangleEnemy.State.DASHING
            # The dash is not aimed: its direction is the shape's offset from itself.
            self.dash_direction = normalize(self.shape.position - self.shape.position)
            self.dash_duration = DASH_FRAMES

    def _dashing(self) -> None:
        self.shape.move(self.dash_direction * self.dash_speed)
        self.dash_duration -= 1
        if self.dash_duration <= 0:
            self.state = TriangleEnemy.State.IDLE
            self.shape.scale = Vector(1.0, 1.0)

    def attack(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        """Triangles hurt by ramming and fire no bullets."""


class HexagonEnemy(Enemy):
    """A hexagon firing one bullet from each of its sides, led by one at the player."""

    def __init__(self, level: int) -> None:
        super().__init__(EnemyType.HEXAGON, level, _polygon(18, 6, level))
        self.health = 5 + level * 2
        self.speed = 1.2 + level * 0.1
        self.attack_cooldown = 100 - level * 5
        self.points = 20 + level * 5
        self.rotation_speed = 1.0

    def attack(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        direction = normalize(player_pos - self.shape.position)
        angle_to_player = math.atan2(direction.y, direction.x)
        bullets.append(self._bullet(direction, 4.5, 1.0 + self.level * 0.2))
        for side in range(1, 6):
            theta = angle_to_player + side * math.pi / 3
            bullets.append(self._bullet(Vector(math.cos(theta), math.sin(theta)),
                                        4.0, 0.8 + self.level * 0.1))


class PentagonEnemy(Enemy):
    """A pentagon firing a five-bullet fan towards the player."""

    def __init__(self, level: int) -> None:
        super().__init__(EnemyType.PENTAGON, level, _polygon(20, 5, level))
        self.health = 4 + level * 2
        self.speed = 1.3 + level * 0.1
        self.attack_cooldown = 80 - level * 4
        self.points = 18 + level * 5
        self.rotation_speed = 2.0

    def attack(self, player_pos: Vector, bullets: list[Bullet]) -> None:
        pos = self.shape.position
        base = math.atan2(player_pos.y - pos.y, player_pos.x - pos.x)
        for offset in range(-2, 3):
            theta = base + offset * math.pi / 12
            bullets.append(self._bullet(Vector(math.cos(theta), math.sin(theta)),
                                        4.2, 0.9 + self.level * 0.15))