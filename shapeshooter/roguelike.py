"""A minimal chase game: a walker steered with WASD and chasers homing in on it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from shapeshooter.geometry import Color, RectangleShape, Vector

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "2D Pixel Roguelike"
TILE_SIZE = 32
STEP = 5
CHASER_SPEED = 2.0
START_POSITION = Vector(400, 300)
CHASER_STARTS = (Vector(100, 100), Vector(700, 100))

KEY_STEPS: dict[str, tuple[float, float]] = {
    "w": (0, -STEP),
    "s": (0, STEP),
    "a": (-STEP, 0),
    "d": (STEP, 0),
}


class Walker:
    """The player's square, moved directly by key presses."""

    def __init__(self) -> None:
        self.shape = RectangleShape(Vector(TILE_SIZE, TILE_SIZE), fill_color=Color.GREEN)
        self.shape.position = START_POSITION

    @property
    def position(self) -> Vector:
        return self.shape.position

    def move(self, dx: float, dy: float) -> None:
        self.shape.move(Vector(dx, dy))


class Chaser:
    """An enemy square that steps towards the walker at a fixed speed."""

    def __init__(self, x: float, y: float) -> None:
        self.shape = RectangleShape(Vector(TILE_SIZE, TILE_SIZE), fill_color=Color.RED)
        self.shape.position = Vector(x, y)

    @property
    def position(self) -> Vector:
        return self.shape.position

    def move_towards(self, walker: Walker) -> None:
        """Step towards the walker; stay put when already on top of it."""
        direction = walker.position - self.position
        length = direction.length
        if length > 0:
            self.shape.move(direction / length * CHASER_SPEED)


class Game:
    """Game state plus the window loop that drives it."""

    def __init__(self) -> None:
        self.walker = Walker()
        self.chasers = [Chaser(start.x, start.y) for start in CHASER_STARTS]
        self.frame_limit: Optional[int] = None

    def handle_key(self, key: str) -> bool:
        """Apply a key press by name; return whether the key did anything."""
        step = KEY_STEPS.get(key.lower())
        if step is None:
            return False
        self.walker.move(*step)
        return True

    def update(self) -> None:
        """Advance every chaser by one frame."""
        for chaser in self.chasers:
            chaser.move_towards(self.walker)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(pygame.key.name(event.key))
                if not running:
                    break
                self.update()
                self._render(pygame, screen)
                if self.frame_limit:
                    clock.tick(self.frame_limit)
        finally:
            pygame.quit()

    def _render(self, pygame, screen) -> None:
        screen.fill((0, 0, 0))
        for shape in [self.walker.shape, *(c.shape for c in self.chasers)]:
            bounds = shape.global_bounds()
            colour = shape.fill_color
            pygame.draw.rect(
                screen,
                (colour.r, colour.g, colour.b),
                pygame.Rect(round(bounds.left), round(bounds.top),
                            round(bounds.width), round(bounds.height)),
            )
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dodge the chasing squares.")
    parser.add_argument("--fps", type=int, default=None,
                        help="cap the frame rate (default: uncapped)")
    args = parser.parse_args(argv)
    game = Game()
    game.frame_limit = args.fps
    game.run()
    return 0