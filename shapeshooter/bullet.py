"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from shapeshooter.geometry import CircleShape, Color, Vector

BULLET_RADIUS = 5.0
ARENA_WIDTH = 800
ARENA_HEIGHT = 600
OFFSCREEN_MARGIN = 10


class Bullet:
    """A small round projectile moving at a constant velocity."""

    def __init__(self, position: Vector, direction: Vector, speed: float, damage: float,
                 color: Color, is_enemy_bullet: bool, split_count: int = 0) -> None:
        self.damage = damage
        self.is_enemy_bullet = is_enemy_bullet
        self.split_count = split_count
        self.velocity = direction * speed
        self.shape = CircleShape(BULLET_RADIUS, fill_color=color)
        self.shape.origin = Vector(BULLET_RADIUS, BULLET_RADIUS)
        self.shape.position = position

    @property
    def position(self) -> Vector:
        return self.shape.position

    def update(self) -> None:
        """Advance the bullet by one frame."""
        self.shape.move(self.velocity)

    def is_out_of_bounds(self) -> bool:
        """True once the bullet has left the arena by more than the margin."""
        x, y = self.shape.position
        return (x < -OFFSCREEN_MARGIN or x > ARENA_WIDTH + OFFSCREEN_MARGIN
                or y < -OFFSCREEN_MARGIN or y > ARENA_HEIGHT + OFFSCREEN_MARGIN)