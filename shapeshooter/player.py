"""The player's robot: movement, shooting, damage and power-ups."""

from __future__ import annotations

import random

from shapeshooter.bullet import ARENA_HEIGHT, ARENA_WIDTH, Bullet
from shapeshooter.geometry import Color, PropType, RectangleShape, RobotType, Vector, normalize

HALF_SIZE = 15
FRAMES_PER_SECOND = 60
HIT_INVINCIBILITY = 60
LEGENDARY_INVINCIBILITY = 180
UNLIMITED_ENERGY_FRAMES = 600
UNLIMITED_SPLIT = 10

_STATS = {
    # colour, health, speed, fire rate (seconds), damage
    RobotType.TYPE1: (Color.GREEN, 5, 6.0, 0.15, 0.8),
    RobotType.TYPE2: (Color.YELLOW, 3, 4.0, 0.5, 1.0),
    RobotType.TYPE3: (Color.BLUE, 2, 5.0, 0.7, 2.5),
}

_BULLET_SPEED = {RobotType.TYPE1: 6.0, RobotType.TYPE3: 7.0}


class Player:
    """A square robot controlled by the player."""

    def __init__(self, robot_type: RobotType, rng: random.Random | None = None) -> None:
        color, health, speed, fire_rate, damage = _STATS[robot_type]
        self.robot_type = robot_type
        self.health = health
        self.max_health = health
        self.speed = speed
        self.fire_rate = fire_rate
        self.damage = damage
        self.last_shot_time = 0
        self.split_bullets_count = 0
        self.damage_multiplier = 1.0
        self.has_unlimited_energy = False
        self.unlimited_energy_timer = 0
        self.is_invincible = False
        self.invincibility_timer = 0
        self.shape = RectangleShape(Vector(2 * HALF_SIZE, 2 * HALF_SIZE), fill_color=color)
        self.shape.origin = Vector(HALF_SIZE, HALF_SIZE)
        self._rng = rng if rng is not None else random.Random()

    @property
    def position(self) -> Vector:
        return self.shape.position

    @position.setter
    def position(self, value: Vector) -> None:
        self.shape.position = value

    @property
    def display_color(self) -> Color:
        """Colour to draw with: half transparent on alternate beats while invincible."""
        if self.is_invincible and int(self.invincibility_timer) % 10 < 5:
            return self.shape.fill_color.with_alpha(128)
        return self.shape.fill_color

    def update(self, mouse_pos: Vector, bullets: list[Bullet]) -> None:
        """Advance the timed effects by one frame."""
        if self.is_invincible:
            self.invincibility_timer -= 1
            if self.invincibility_timer <= 0:
                self.is_invincible = False
        if self.has_unlimited_energy:
            self.unlimited_energy_timer -= 1
            if self.unlimited_energy_timer <= 0:
                self.has_unlimited_energy = False
                if self.robot_type is RobotType.TYPE3:
                    self.fire_rate = _STATS[RobotType.TYPE3][3]

    def move(self, direction: Vector) -> None:
        """Move by ``direction`` times speed, each axis only if it stays in the arena."""
        target = self.position + direction * self.speed
        x, y = self.position
        if HALF_SIZE <= target.x <= ARENA_WIDTH - HALF_SIZE:
            x = target.x
        if HALF_SIZE <= target.y <= ARENA_HEIGHT - HALF_SIZE:
            y = target.y
        self.position = Vector(x, y)

    def shoot(self, target: Vector, bullets: list[Bullet]) -> None:
        """Fire towards ``target`` unless the weapon is still cooling down."""
        if self.last_shot_time > 0 and not self.has_unlimited_energy:
            return
        direction = normalize(target - self.position)
        speed = _BULLET_SPEED.get(self.robot_type)
        if speed is not None:
            bullets.append(Bullet(self.position, direction, speed,
                                  self.damage * self.damage_multiplier,
                                  self.shape.fill_color, False, self.split_bullets_count))
        self.last_shot_time = int(self.fire_rate * FRAMES_PER_SECOND)

    def take_damage(self, damage: int) -> None:
        """Lose health unless invincible; surviving a hit grants brief invincibility."""
        if self.is_invincible:
            return
        self.health = max(self.health - damage, 0)
        if self.health > 0:
            self.is_invincible = True
            self.invincibility_timer = HIT_INVINCIBILITY

    def collect_prop(self, prop_type: PropType) -> None:
        """Apply the effect of a collected power-up."""
        if prop_type is PropType.BASIC:
            if self._rng.randrange(3) == 0:
                self.split_bullets_count += 1
            elif self._rng.randrange(2) == 0:
                self.damage_multiplier += 0.3
            else:
                self.health = min(self.health + 1, self.max_health)
        elif prop_type is PropType.RARE:
            if self._rng.randrange(3) == 0:
                self.split_bullets_count = UNLIMITED_SPLIT
            elif self._rng.randrange(2) == 0:
                self.max_health += 3
                self.health = self.max_health
            else:
                self.damage *= 2.0
        elif prop_type is PropType.LEGENDARY:
            if self.robot_type is RobotType.TYPE1:
                self.is_invincible = True
                self.invincibility_timer = LEGENDARY_INVINCIBILITY
            elif self.robot_type is RobotType.TYPE2:
                self.split_bullets_count += 5
            else:
                self.has_unlimited_energy = True
                self.unlimited_energy_timer = UNLIMITED_ENERGY_FRAMES
                self.fire_rate = 0.05