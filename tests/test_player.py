import pytest

from shapeshooter.geometry import Color, PropType, RobotType, Vector
from shapeshooter.player import Player


class ScriptedRandom:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.mark.parametrize(
    "robot, color, health, speed, fire_rate, damage",
    [
        (RobotType.TYPE1, Color.GREEN, 5, 6.0, 0.15, 0.8),
        (RobotType.TYPE2, Color.YELLOW, 3, 4.0, 0.5, 1.0),
        (RobotType.TYPE3, Color.BLUE, 2, 5.0, 0.7, 2.5),
    ],
)
def test_initial_stats(robot, color, health, speed, fire_rate, damage):
    player = Player(robot)
    assert player.shape.fill_color == color
    assert player.health == health
    assert player.max_health == health
    assert player.speed == speed
    assert player.fire_rate == pytest.approx(fire_rate)
    assert player.damage == pytest.approx(damage)


def test_move_inside_arena():
    player = Player(RobotType.TYPE1)
    player.position = Vector(100, 100)
    player.move(Vector(1, 0))
    assert player.position.x == pytest.approx(100 + player.speed)
    assert player.position.y == pytest.approx(100)


def test_move_blocked_per_axis_at_edge():
    player = Player(RobotType.TYPE2)
    player.position = Vector(15, 100)
    player.move(Vector(-1, 1))
    assert player.position.x == 15
    assert player.position.y == pytest.approx(100 + player.speed)


def test_shoot_type1_creates_bullet_and_cools_down():
    player = Player(RobotType.TYPE1)
    player.position = Vector(100, 100)
    bullets = []
    player.shoot(Vector(200, 100), bullets)
    assert len(bullets) == 1
    bullet = bullets[0]
    assert not bullet.is_enemy_bullet
    assert bullet.damage == pytest.approx(0.8)
    assert bullet.velocity.x == pytest.approx(6.0)
    assert bullet.position == Vector(100, 100)
    player.shoot(Vector(200, 100), bullets)
    assert len(bullets) == 1


def test_shoot_type2_fires_nothing():
    player = Player(RobotType.TYPE2)
    bullets = []
    player.shoot(Vector(50, 50), bullets)
    assert bullets == []
    assert player.last_shot_time > 0


def test_take_damage_grants_invincibility():
    player = Player(RobotType.TYPE1)
    player.take_damage(1)
    assert player.health == player.max_health - 1
    assert player.is_invincible
    player.take_damage(1)
    assert player.health == player.max_health - 1
    assert player.display_color.a == 128 or player.display_color.a == 255


def test_fatal_damage_clamps_to_zero():
    player = Player(RobotType.TYPE3)
    player.take_damage(5)
    assert player.health == 0
    assert not player.is_invincible


def test_invincibility_wears_off():
    player = Player(RobotType.TYPE1)
    player.take_damage(1)
    for _ in range(59):
        player.update(Vector(), [])
    assert player.is_invincible
    player.update(Vector(), [])
    assert not player.is_invincible
    assert player.display_color == player.shape.fill_color


def test_display_color_blinks_while_invincible():
    player = Player(RobotType.TYPE1)
    player.take_damage(1)
    alphas = set()
    for _ in range(10):
        alphas.add(player.display_color.a)
        player.update(Vector(), [])
    assert alphas == {128, 255}


def test_basic_prop_split():
    player = Player(RobotType.TYPE1, rng=ScriptedRandom([0]))
    player.collect_prop(PropType.BASIC)
    assert player.split_bullets_count == 1


def test_basic_prop_damage_boost():
    player = Player(RobotType.TYPE1, rng=ScriptedRandom([1, 0]))
    player.collect_prop(PropType.BASIC)
    assert player.damage_multiplier == pytest.approx(1.0 + 0.3)


def test_basic_prop_heal_is_capped():
    player = Player(RobotType.TYPE2, rng=ScriptedRandom([1, 1, 1, 1]))
    player.take_damage(1)
    player.collect_prop(PropType.BASIC)
    assert player.health == player.max_health
    player.collect_prop(PropType.BASIC)
    assert player.health == player.max_health


def test_rare_prop_effects():
    split = Player(RobotType.TYPE1, rng=ScriptedRandom([0]))
    split.collect_prop(PropType.RARE)
    assert split.split_bullets_count == 10

    tough = Player(RobotType.TYPE1, rng=ScriptedRandom([1, 0]))
    before = tough.max_health
    tough.collect_prop(PropType.RARE)
    assert tough.max_health == before + 3
    assert tough.health == tough.max_health

    strong = Player(RobotType.TYPE3, rng=ScriptedRandom([1, 1]))
    base = strong.damage
    strong.collect_prop(PropType.RARE)
    assert strong.damage == pytest.approx(base * 2.0)


def test_legendary_type1_invincible():
    player = Player(RobotType.TYPE1)
    player.collect_prop(PropType.LEGENDARY)
    assert player.is_invincible
    assert player.invincibility_timer == 180


def test_legendary_type2_split():
    player = Player(RobotType.TYPE2)
    player.collect_prop(PropType.LEGENDARY)
    assert player.split_bullets_count == 5


def test_legendary_type3_unlimited_energy():
    player = Player(RobotType.TYPE3)
    player.collect_prop(PropType.LEGENDARY)
    assert player.fire_rate == pytest.approx(0.05)
    bullets = []
    player.shoot(Vector(10, 0), bullets)
    player.shoot(Vector(10, 0), bullets)
    assert len(bullets) == 2
    for _ in range(600):
        player.update(Vector(), bullets)
    assert not player.has_unlimited_energy
    assert player.fire_rate == pytest.approx(0.7)
    player.shoot(Vector(10, 0), bullets)
    assert len(bullets) == 2