"""Creatures on the battlefield: their stats, movement, healing and turn logic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .core import (
    EV_ARCHER_TYPE,
    EV_COYOTE_TYPE,
    EV_DRAGON_TYPE,
    EV_HYDRA_TYPE,
    EV_MAGE_TYPE,
    EV_MINOTAUR_TYPE,
    EV_WARRIOR_TYPE,
    GD_ARCHER_TYPE,
    GD_DRAGON_TYPE,
    GD_HORSE_TYPE,
    GD_HYDRA_TYPE,
    GD_MINOTAUR_TYPE,
    GD_UNICORN_TYPE,
    GD_WARRIOR_TYPE,
    GROUND,
    SCREEN_WIDTH,
    SKY,
    Direction,
    Point,
    RandomInt,
    State,
    sort_by_distance,
)
from .sprites import Sprite


@dataclass(frozen=True)
class CreatureSpec:
    """Fighting statistics of one kind of creature."""

    move_points: int
    heal_delay: int
    max_lives: int
    strength: int


CREATURE_SPECS = {
    EV_ARCHER_TYPE: CreatureSpec(150, 2, 80, 40),
    EV_COYOTE_TYPE: CreatureSpec(200, 3, 100, 50),
    EV_DRAGON_TYPE: CreatureSpec(250, 4, 150, 80),
    EV_HYDRA_TYPE: CreatureSpec(150, 3, 120, 50),
    EV_MAGE_TYPE: CreatureSpec(100, 3, 50, 40),
    EV_MINOTAUR_TYPE: CreatureSpec(250, 5, 120, 65),
    EV_WARRIOR_TYPE: CreatureSpec(250, 2, 90, 30),
    GD_ARCHER_TYPE: CreatureSpec(100, 2, 80, 45),
    GD_HORSE_TYPE: CreatureSpec(250, 4, 90, 40),
    GD_DRAGON_TYPE: CreatureSpec(200, 4, 150, 85),
    GD_HYDRA_TYPE: CreatureSpec(150, 3, 120, 50),
    GD_UNICORN_TYPE: CreatureSpec(250, 3, 100, 45),
    GD_MINOTAUR_TYPE: CreatureSpec(250, 3, 100, 70),
    GD_WARRIOR_TYPE: CreatureSpec(200, 2, 100, 35),
}

EVIL_KINDS = frozenset(
    {
        EV_ARCHER_TYPE,
        EV_COYOTE_TYPE,
        EV_DRAGON_TYPE,
        EV_HYDRA_TYPE,
        EV_WARRIOR_TYPE,
        EV_MAGE_TYPE,
        EV_MINOTAUR_TYPE,
    }
)
HERO_KINDS = frozenset(
    {
        GD_ARCHER_TYPE,
        GD_UNICORN_TYPE,
        GD_DRAGON_TYPE,
        GD_HYDRA_TYPE,
        GD_WARRIOR_TYPE,
        GD_HORSE_TYPE,
        GD_MINOTAUR_TYPE,
    }
)
RANGED_KINDS = frozenset({EV_ARCHER_TYPE, GD_ARCHER_TYPE, EV_MAGE_TYPE})

_HEAL_BASE = 40
_HEAL_SPREAD = 20
_HEAL_COST = 10
_BOUNCE = 10.0


class Creature(Sprite, ABC):
    """A fighting sprite with move points, lives and a turn state."""

    def __init__(self, kind, sx, sy, rng=None):
        super().__init__(kind, sx, sy)
        self._rng = rng if rng is not None else RandomInt()

        self.hor_dir = False
        self.vert_dir = False
        self.move_sx = 0.0
        self.move_sy = 0.0
        self.move_ex = 0.0
        self.move_ey = 0.0
        self.slope = 0.0
        self.intercept = 0.0

        spec = CREATURE_SPECS.get(kind, CreatureSpec(0, 0, 0, 0))
        self.move_points = spec.move_points
        self.heal_delay = spec.heal_delay
        self._max_lives = spec.max_lives
        self.strength = spec.strength
        self.lives = spec.max_lives
        self._max_move_points = spec.move_points
        self.state = State.STOP

    @property
    def max_lives(self):
        return self._max_lives

    @property
    def max_move_points(self):
        return self._max_move_points

    def _set_path(self, to_x, to_y):
        self.move_sx = self.start.x
        self.move_sy = self.start.y
        self.move_ex = to_x
        self.move_ey = to_y

        # Once a path is found to be straight, the flag stays set.
        if self.move_sx == self.move_ex:
            self.vert_dir = True
            return
        if self.move_sy == self.move_ey:
            self.hor_dir = True
            return

        self.slope = (self.move_ey - self.move_sy) / (self.move_ex - self.move_sx)
        self.intercept = self.move_sy - self.slope * self.move_sx

    def _step(self, dx=0.0, dy=0.0):
        self.start.x += dx
        self.start.y += dy
        self.set_edges()
        self.move_points -= 1
        return True

    def _halt(self):
        self.move_points = 0
        return False

    def _step_on_line(self, dx):
        self.start.x += dx
        self.start.y = self.start.x * self.slope + self.intercept
        self.set_edges()
        self.move_points -= 1
        return True

    def _bounce_back(self):
        if self.start.y < SKY:
            self.start.y += _BOUNCE
            self.set_edges()
        if self.end.y > GROUND:
            self.start.y -= _BOUNCE
            self.set_edges()
        return self._halt()

    def _reached_diagonal_target(self):
        return (self.move_ey > self.move_sy and self.end.y >= self.move_ey) or (
            self.move_ey < self.move_sy and self.start.y <= self.move_ey
        )

    def _in_air_band(self):
        return self.start.y >= SKY and self.end.y <= GROUND

    def move(self, to_x, to_y):
        """Take one step toward (to_x, to_y); return True if the creature moved."""
        if self.move_points <= 0:
            self.state = State.NEXT_TURN
            return False

        self._set_path(to_x, to_y)

        if self.vert_dir:
            if self.move_ey < self.move_sy:
                if self.start.y <= self.move_ey:
                    return self._halt()
                if self.start.y - 1.0 >= SKY:
                    return self._step(dy=-1.0)
                self.start.y += _BOUNCE
                self.set_edges()
                return self._halt()
            if self.move_ey > self.move_sy:
                if self.end.y >= self.move_ey:
                    return self._halt()
                if self.end.y + 1.0 <= GROUND:
                    return self._step(dy=1.0)
                self.start.y -= _BOUNCE
                self.set_edges()
                return self._halt()
        elif self.hor_dir:
            if self.move_ex < self.move_sx:
                if self.start.x <= self.move_ex:
                    return self._halt()
                if self.start.x - 1.0 >= 0:
                    return self._step(dx=-1.0)
                return self._halt()
            if self.move_ex > self.move_sx:
                if self.end.x >= self.move_ex:
                    return False
                if self.end.x + 1.0 <= SCREEN_WIDTH:
                    return self._step(dx=1.0)
        elif self.move_ex < self.move_sx:
            if self.start.x <= self.move_ex and self._reached_diagonal_target():
                return self._halt()
            if self.start.x - 1.0 > 0 and self._in_air_band():
                return self._step_on_line(-1.0)
            return self._bounce_back()
        elif self.move_ex > self.move_sx:
            if self.end.x >= self.move_ex and self._reached_diagonal_target():
                return self._halt()
            if self.end.x + 1.0 < SCREEN_WIDTH and self._in_air_band():
                return self._step_on_line(1.0)
            return self._bounce_back()

        if self.move_points <= 0:
            self.state = State.NEXT_TURN
        return False

    def attack(self):
        """Strike, ending the turn; return the damage dealt."""
        self.state = State.NEXT_TURN
        return self.strength

    def heal(self):
        """Count down the heal delay; when it runs out, restore lives."""
        self.heal_delay -= 1
        if self.heal_delay <= 0:
            spec = CREATURE_SPECS.get(self.kind)
            if spec is not None:
                self.heal_delay = spec.heal_delay
            if self.lives + _HEAL_BASE + self._rng(0, _HEAL_SPREAD) <= self._max_lives:
                self.lives = _HEAL_BASE + self._rng(0, _HEAL_SPREAD)
            else:
                self.lives = self._max_lives
        self.state = State.NEXT_TURN

    def _start_new_turn(self):
        self.move_points = self._max_move_points
        self.state = State.NEXT_TURN
        return self.state

    @abstractmethod
    def next_move(self, enemies):
        """Decide what to do this turn, given the positions of the enemies."""


class Evil(Creature):
    """A creature of the dark side, driven by the computer."""

    def __init__(self, kind, sx, sy, rng=None):
        super().__init__(kind, sx, sy, rng)
        self.dir = Direction.LEFT

    def next_move(self, enemies):
        """Choose between healing, attacking, shooting and moving.

        The enemies are sorted in place, nearest to this creature first.
        """
        if self.move_points <= 0 or self.state is State.NEXT_TURN:
            return self._start_new_turn()

        wants_heal = self.lives < self._max_lives // 2 and self._rng(0, 5) == 1
        if wants_heal or (self.state is State.HEAL and self.lives < self._max_lives):
            self.heal()
            self.state = State.HEAL
            self.move_points -= _HEAL_COST
            if self.lives >= self._max_lives:
                self.state = State.STOP
            return self.state

        self.state = State.NEXT_TURN
        sort_by_distance(enemies, self.center)

        nearest = enemies[0] if len(enemies) else Point()
        melee = (
            self.start.x <= nearest.x <= self.end.x
            and self.start.y <= nearest.y <= self.end.y
        )

        if melee:
            if self.move_points > 0:
                self.state = State.ATTACK
                self.move_points = 0
            return self.state

        if self.kind in RANGED_KINDS:
            if self.move_points > 0:
                self.state = State.SHOOT
                self.move_points -= self._max_move_points
            return self.state

        self.state = State.MOVE
        return self.state


class Hero(Creature):
    """A creature of the player's side."""

    def __init__(self, kind, sx, sy, rng=None):
        super().__init__(kind, sx, sy, rng)
        self.dir = Direction.RIGHT

    def next_move(self, enemies):
        """Suggest healing when badly hurt, otherwise wait for orders."""
        if self.move_points <= 0:
            return self._start_new_turn()

        if self.lives < self._max_lives // 2:
            self.state = State.HEAL
            return self.state

        self.state = State.STOP
        return self.state


def create_creature(kind, sx, sy, rng=None):
    """Create an Evil or a Hero of the given kind at (sx, sy)."""
    if kind in EVIL_KINDS:
        return Evil(kind, sx, sy, rng)
    if kind in HERO_KINDS:
        return Hero(kind, sx, sy, rng)
    raise ValueError(f"not a creature kind: {kind}")