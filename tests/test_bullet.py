import pytest

from shapeshooter.bullet import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BULLET_RADIUS,
    OFFSCREEN_MARGIN,
    Bullet,
)
from shapeshooter.geometry import Color, Vector


def _bullet(x, y, direction=Vector(1.0, 0.0), speed=6.0, **kwargs):
    return Bullet(Vector(x, y), direction, speed, 1.0, Color.GREEN, False, **kwargs)


def test_construction_sets_attributes():
    bullet = Bullet(Vector(10.0, 20.0), Vector(0.0, 1.0), 4.5, 1.2, Color.RED, True)
    assert bullet.position == Vector(10.0, 20.0)
    assert bullet.damage == 1.2
    assert bullet.is_enemy_bullet is True
    assert bullet.split_count == 0
    assert bullet.shape.fill_color == Color.RED
    assert bullet.shape.radius == BULLET_RADIUS


def test_split_count_is_kept():
    assert _bullet(0.0, 0.0, split_count=3).split_count == 3


def test_velocity_is_direction_times_speed():
    bullet = _bullet(0.0, 0.0, direction=Vector(0.6, 0.8), speed=7.0)
    assert bullet.velocity.x == pytest.approx(0.6 * 7.0)
    assert bullet.velocity.y == pytest.approx(0.8 * 7.0)


def test_update_moves_by_velocity_each_frame():
    bullet = _bullet(100.0, 100.0, direction=Vector(0.0, -1.0), speed=3.0)
    start = bullet.position
    for _ in range(4):
        bullet.update()
    assert bullet.position.x == pytest.approx(start.x)
    assert bullet.position.y == pytest.approx(start.y + 4 * bullet.velocity.y)


def test_bounds_centered_on_position():
    bullet = _bullet(200.0, 150.0)
    bounds = bullet.shape.global_bounds()
    assert bounds.left + bounds.width / 2 == pytest.approx(200.0)
    assert bounds.height <= 2 * BULLET_RADIUS + 1e-9


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (ARENA_WIDTH / 2, ARENA_HEIGHT / 2, False),
        (-OFFSCREEN_MARGIN, 0.0, False),
        (-OFFSCREEN_MARGIN - 1, 0.0, True),
        (ARENA_WIDTH + OFFSCREEN_MARGIN, 0.0, False),
        (ARENA_WIDTH + OFFSCREEN_MARGIN + 1, 0.0, True),
        (0.0, -OFFSCREEN_MARGIN - 1, True),
        (0.0, ARENA_HEIGHT + OFFSCREEN_MARGIN, False),
        (0.0, ARENA_HEIGHT + OFFSCREEN_MARGIN + 1, True),
    ],
)
def test_is_out_of_bounds(x, y, expected):
    assert _bullet(x, y).is_out_of_bounds() is expected


def test_bullet_eventually_leaves_arena():
    bullet = _bullet(ARENA_WIDTH / 2, ARENA_HEIGHT / 2, speed=6.0)
    frames = 0
    while not bullet.is_out_of_bounds():
        bullet.update()
        frames += 1
    assert bullet.position.x > ARENA_WIDTH + OFFSCREEN_MARGIN
    assert frames > 0