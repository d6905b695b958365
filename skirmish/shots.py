"""Projectiles: fireballs fly straight, arrows arc up to a peak and fall."""

from __future__ import annotations

from .core import (
    EV_ARROW_TYPE,
    GD_ARROW_TYPE,
    GROUND,
    SCREEN_WIDTH,
    SKY,
    Direction,
)
from .sprites import Sprite

_ARC_HEIGHT = 150.0
_FALLING = (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)


class Shot(Sprite):
    """A projectile travelling one pixel per step toward its target."""

    def __init__(self, kind, sx, sy, target_x, target_y):
        super().__init__(kind, sx, sy)
        self.strength = 0
        self.init_x = sx
        self.init_y = sy
        self.target_x = target_x
        self.target_y = target_y
        self.slope = 0.0
        self.intercept = 0.0
        self.nadir = 0.0
        self.hor_dir = False
        self.vert_dir = False

        if self.is_arrow:
            self.nadir = self.start.y - _ARC_HEIGHT

        if self.init_x == self.target_x:
            self.vert_dir = True
            return
        if self.init_y == self.target_y:
            self.hor_dir = True
            return

        aim_y = self.nadir if self.is_arrow else self.target_y
        self.slope = (aim_y - self.init_y) / (self.target_x - self.init_x)
        self.intercept = self.init_y - self.slope * self.init_x

    @property
    def is_arrow(self):
        return self.kind in (EV_ARROW_TYPE, GD_ARROW_TYPE)

    def _start_falling(self):
        self.init_x = self.start.x
        self.init_y = self.start.y

        if self.init_x < self.target_x:
            self.dir = Direction.DOWN_RIGHT
        else:
            self.dir = Direction.DOWN_LEFT

        self.vert_dir = self.init_x == self.target_x
        self.hor_dir = self.init_y == self.target_y

        if not self.vert_dir:
            self.slope = (self.target_y - self.init_y) / (self.target_x - self.init_x)
            self.intercept = self.init_y - self.slope * self.init_x

    def move(self):
        """Advance one step; return False when the shot can go no further."""
        if self.is_arrow and self.start.y <= self.nadir and self.dir not in _FALLING:
            self._start_falling()

        if self.vert_dir:
            if self.target_y < self.init_y:
                if self.start.y - 1.0 > SKY:
                    self.start.y -= 1.0
                    self.set_edges()
                    return True
                return False
            if self.target_y > self.init_y:
                if self.end.y + 1.0 < GROUND:
                    self.start.y += 1.0
                    self.set_edges()
                    return True
                return False

        if self.hor_dir:
            if self.target_x < self.init_x:
                if self.start.x - 1.0 > 0:
                    self.start.x -= 1.0
                    self.set_edges()
                    return True
                return False
            if self.target_x > self.init_x:
                if self.end.x + 1.0 < SCREEN_WIDTH:
                    self.start.x += 1.0
                    self.set_edges()
                    return True
                return False

        if self.target_x < self.init_x:
            if self.start.x - 1.0 > 0:
                self.start.x -= 1.0
                self.start.y = self.start.x * self.slope + self.intercept
                self.set_edges()
                return True
            return False
        if self.target_x > self.init_x:
            if self.end.x + 1.0 < SCREEN_WIDTH:
                self.start.x += 1.0
                self.start.y = self.start.x * self.slope + self.intercept
                self.set_edges()
                return True
            return False

        return False


def create_shot(kind, sx, sy, to_x, to_y):
    """Create a projectile of the given kind aimed at (to_x, to_y)."""
    return Shot(kind, sx, sy, to_x, to_y)