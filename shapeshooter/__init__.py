"""Shape-shooter game pieces (geometry, bullets, props, enemies, players) and a chase game."""

__version__ = "0.1.0"
__all__ = ["bullet", "enemy", "geometry", "player", "prop", "roguelike"]