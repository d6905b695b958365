"""Shared constants, directions, states, points, random numbers and boxes."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import MutableSequence

SCREEN_WIDTH = 1000.0
SCREEN_HEIGHT = 800.0

SKY = 50.0
GROUND = 750.0

NO_TYPE = 0

FIELD1_TYPE = 1
FIELD2_TYPE = 2
FIELD3_TYPE = 3
FIELD4_TYPE = 4
FIELD5_TYPE = 5
INTRO_TYPE = 6

FIREBALL_TYPE = 7

EV_ARCHER_TYPE = 8
EV_ARROW_TYPE = 9
EV_COYOTE_TYPE = 10
EV_DRAGON_TYPE = 11
EV_HYDRA_TYPE = 12
EV_MAGE_TYPE = 13
EV_MINOTAUR_TYPE = 14
EV_WARRIOR_TYPE = 15

GD_ARCHER_TYPE = 16
GD_ARROW_TYPE = 17
GD_HORSE_TYPE = 18
GD_DRAGON_TYPE = 19
GD_HYDRA_TYPE = 20
GD_UNICORN_TYPE = 21
GD_MINOTAUR_TYPE = 22
GD_WARRIOR_TYPE = 23


class Direction(Enum):
    """Heading of a sprite on the battlefield."""

    STOP = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    UP_LEFT = 5
    UP_RIGHT = 6
    DOWN_LEFT = 7
    DOWN_RIGHT = 8


class State(Enum):
    """What a creature is doing this turn."""

    MOVE = 0
    ATTACK = 1
    HEAL = 2
    FLEE = 3
    STOP = 4
    SHOOT = 5
    NEXT_TURN = 6


@dataclass
class Point:
    """A point on the playing field."""

    x: float = 0.0
    y: float = 0.0


class RandomInt:
    """Callable source of uniformly distributed integers in a closed range."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def __call__(self, low, high):
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return self._rng.randint(low, high)


def distance(start, target):
    """Euclidean distance between two points."""
    return math.hypot(target.x - start.x, target.y - start.y)


def sort_by_distance(points: MutableSequence[Point], target: Point) -> bool:
    """Sort points in place, nearest to target first.

    Returns False without touching the sequence when it holds fewer than
    two points.
    """
    if len(points) < 2:
        return False
    ordered = sorted(points, key=lambda point: distance(point, target))
    for position, point in enumerate(ordered):
        points[position] = point
    return True


class Box:
    """An axis-aligned rectangle that keeps its edges, radii and centre in step."""

    def __init__(self, sx=1.0, sy=1.0, width=1.0, height=1.0):
        self.start = Point(sx, sy)
        self.end = Point()
        self.center = Point()
        self.x_radius = 0.0
        self.y_radius = 0.0
        self._width = width
        self._height = height
        self.set_edges()

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def _update_x(self):
        self.end.x = self.start.x + self._width
        self.x_radius = (self.end.x - self.start.x) / 2
        self.center.x = self.start.x + self.x_radius

    def _update_y(self):
        self.end.y = self.start.y + self._height
        self.y_radius = (self.end.y - self.start.y) / 2
        self.center.y = self.start.y + self.y_radius

    def set_edges(self):
        """Recompute end, radii and centre from the start point and size."""
        self._update_x()
        self._update_y()

    def resize(self, width, height):
        """Change both dimensions, keeping the start point."""
        self._width = width
        self._height = height
        self.set_edges()

    def set_width(self, width):
        """Change the width only; the vertical geometry is left as it is."""
        self._width = width
        self._update_x()

    def set_height(self, height):
        """Change the height only; the horizontal geometry is left as it is."""
        self._height = height
        self._update_y()

    def __repr__(self):
        return (
            f"{type(self).__name__}(sx={self.start.x}, sy={self.start.y}, "
            f"width={self._width}, height={self._height})"
        )