"""Power-up items dropped into the arena."""

from __future__ import annotations

from shapeshooter.geometry import CircleShape, Color, PropType, Vector

PROP_RADIUS = 10.0
PROP_LIFETIME = 300
BLINK_THRESHOLD = 100

PROP_COLORS: dict[PropType, Color] = {
    PropType.BASIC: Color(135, 206, 250),
    PropType.RARE: Color(147, 112, 219),
    PropType.LEGENDARY: Color(255, 215, 0),
}


class Prop:
    """A collectible item that blinks near the end of its life and then vanishes."""

    def __init__(self, position: Vector, prop_type: PropType) -> None:
        self.prop_type = prop_type
        self.lifetime = PROP_LIFETIME
        self.alive = True
        self.shape = CircleShape(PROP_RADIUS, fill_color=PROP_COLORS[prop_type])
        self.shape.origin = Vector(PROP_RADIUS, PROP_RADIUS)
        self.shape.position = position

    def update(self) -> None:
        """Advance one frame: blink when nearly expired and count down."""
        if self.lifetime < BLINK_THRESHOLD:
            alpha = 128 if int(self.lifetime) % 10 < 5 else 255
            self.shape.fill_color = self.shape.fill_color.with_alpha(alpha)
        self.lifetime -= 1
        if self.lifetime <= 0:
            self.alive = False