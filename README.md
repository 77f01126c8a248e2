# shapeshooter

Building blocks for a 2D arcade shooter made of simple shapes: robot players
that fire bullets, triangle, pentagon and hexagon enemies with their own bullet
patterns, and props that grant upgrades. The package also ships a small chase
game that runs in a window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The chase game

```
shapeshooter-roguelike
```

This opens an 800×600 window titled "2D Pixel Roguelike" (pygame is needed).
Move the green square 5 pixels per key press with **W**, **A**, **S** and
**D**. Two red squares start at the top of the screen and move 2 pixels per
frame towards you. Close the window to quit. There is no scoring and nothing
happens when a red square reaches you.

By default the frame rate is uncapped; `--fps N` limits it to `N` frames per
second:

```
shapeshooter-roguelike --fps 60
```

The same game is available in code as `shapeshooter.roguelike.Game`:
`handle_key("w")` moves the walker and returns whether the key was one of
W/A/S/D, `update()` advances every chaser by one frame, and `run()` opens the
window.

## The shooter pieces

- `shapeshooter.geometry`: `Vector` (immutable, with `+`, `-`, `*`, `/` and
  `length`), `Color` (RGBA, with `with_alpha`), `Rect` (with `intersects`),
  `CircleShape` (a regular polygon of `point_count` sides) and
  `RectangleShape`; the `RobotType`, `EnemyType`, `PropType` and
  `GameStateType` enums; and the helpers `distance`, `angle`, `normalize` and
  `is_collision` (bounding-box overlap of two shapes).
- `shapeshooter.bullet`: `Bullet`, which moves by its velocity on each
  `update()` and reports `is_out_of_bounds()` once it is more than 10 pixels
  outside an 800×600 arena.
- `shapeshooter.prop`: `Prop`, a collectable that lives 300 frames, blinks for
  its last 100 and then sets `alive` to `False`.
- `shapeshooter.enemy`: `TriangleEnemy`, `HexagonEnemy` and `PentagonEnemy`,
  whose health, speed, cooldown and points grow with the level. `attack()`
  appends bullets to a list: the hexagon fires one bullet at the player and one
  from each other side, the pentagon a five-bullet fan, the triangle none (it
  charges up and dashes from `update()` instead). `color_for_level` gives the
  enemy colour for a level.
- `shapeshooter.player`: `Player`, a robot of one of three types that can
  `move` (kept inside the arena), `shoot`, `take_damage` (followed by a short
  invincibility) and `collect_prop`. `update()` counts down invincibility and
  unlimited-energy effects.

Random choices (the triangle's charge, prop effects) use a `random.Random`
that can be passed in as `rng` to make them repeatable.

```python
from shapeshooter.geometry import Vector, RobotType, PropType
from shapeshooter.player import Player
from shapeshooter.enemy import HexagonEnemy

bullets = []
player = Player(RobotType.TYPE1)
player.shoot(Vector(400, 0), bullets)
player.collect_prop(PropType.LEGENDARY)

enemy = HexagonEnemy(level=2)
enemy.attack(Vector(400, 400), bullets)
print(len(bullets))  # 7
```

## What is not included

The shooter pieces are not assembled into a playable game. There is no window,
main menu, character selection, pause screen, level progression or game loop
for them; `GameStateType` only names those states. Nothing decides when
enemies attack, when props drop or what happens on collision, and enemies
other than a dashing triangle do not move on their own. Bullet `split_count`
and the enemies' `rotation_speed` are stored but have no effect. Writing the
loop that ties these pieces together is left to you.