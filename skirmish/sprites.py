"""Animated sprites: size and animation timing for every kind of object."""

from __future__ import annotations

from dataclasses import dataclass

from .core import (
    EV_ARCHER_TYPE,
    EV_ARROW_TYPE,
    EV_COYOTE_TYPE,
    EV_DRAGON_TYPE,
    EV_HYDRA_TYPE,
    EV_MAGE_TYPE,
    EV_MINOTAUR_TYPE,
    EV_WARRIOR_TYPE,
    FIELD1_TYPE,
    FIELD2_TYPE,
    FIELD3_TYPE,
    FIELD4_TYPE,
    FIELD5_TYPE,
    FIREBALL_TYPE,
    GD_ARCHER_TYPE,
    GD_ARROW_TYPE,
    GD_DRAGON_TYPE,
    GD_HORSE_TYPE,
    GD_HYDRA_TYPE,
    GD_MINOTAUR_TYPE,
    GD_UNICORN_TYPE,
    GD_WARRIOR_TYPE,
    INTRO_TYPE,
    Box,
    Direction,
)


@dataclass(frozen=True)
class SpriteSpec:
    """Size and animation timing of one kind of sprite."""

    width: float
    height: float
    max_frames: int
    frame_delay: int

    @property
    def animated(self):
        return self.max_frames > 0


SPRITE_SPECS = {
    FIELD1_TYPE: SpriteSpec(1000.0, 750.0, 16, 5),
    FIELD2_TYPE: SpriteSpec(1000.0, 750.0, 18, 4),
    FIELD3_TYPE: SpriteSpec(1000.0, 750.0, 12, 6),
    FIELD4_TYPE: SpriteSpec(1000.0, 750.0, 20, 4),
    FIELD5_TYPE: SpriteSpec(1000.0, 750.0, 8, 9),
    INTRO_TYPE: SpriteSpec(1000.0, 800.0, 8, 9),
    FIREBALL_TYPE: SpriteSpec(20.0, 12.0, 4, 18),
    EV_ARCHER_TYPE: SpriteSpec(80.0, 80.0, 6, 12),
    EV_COYOTE_TYPE: SpriteSpec(100.0, 51.0, 26, 3),
    EV_DRAGON_TYPE: SpriteSpec(200.0, 120.0, 21, 4),
    EV_HYDRA_TYPE: SpriteSpec(100.0, 75.0, 12, 6),
    EV_MAGE_TYPE: SpriteSpec(70.0, 70.0, 6, 12),
    EV_MINOTAUR_TYPE: SpriteSpec(78.0, 100.0, 7, 10),
    EV_WARRIOR_TYPE: SpriteSpec(80.0, 59.0, 8, 12),
    GD_ARCHER_TYPE: SpriteSpec(80.0, 57.0, 42, 2),
    GD_HORSE_TYPE: SpriteSpec(100.0, 94.0, 44, 2),
    GD_DRAGON_TYPE: SpriteSpec(180.0, 126.0, 7, 10),
    GD_HYDRA_TYPE: SpriteSpec(100.0, 57.0, 60, 1),
    GD_UNICORN_TYPE: SpriteSpec(110.0, 96.0, 20, 4),
    GD_MINOTAUR_TYPE: SpriteSpec(78.0, 100.0, 7, 10),
    GD_WARRIOR_TYPE: SpriteSpec(78.0, 90.0, 8, 12),
    EV_ARROW_TYPE: SpriteSpec(26.0, 26.0, 0, 0),
    GD_ARROW_TYPE: SpriteSpec(26.0, 26.0, 0, 0),
}


class Sprite(Box):
    """A box of a given kind that cycles through animation frames."""

    def __init__(self, kind, sx, sy):
        spec = SPRITE_SPECS.get(kind)
        if spec is None:
            super().__init__(sx, sy, 1.0, 1.0)
            self.max_frames = 0
            self.frame_delay = 0
        else:
            super().__init__(sx, sy, spec.width, spec.height)
            self.max_frames = spec.max_frames
            self.frame_delay = spec.frame_delay
        self._kind = kind
        self.frame = 0
        self.dir = Direction.STOP

    @property
    def kind(self):
        return self._kind

    def next_frame(self):
        """Advance the animation clock by one tick and return the current frame."""
        self.frame_delay -= 1
        if self.frame_delay <= 0:
            spec = SPRITE_SPECS.get(self._kind)
            if spec is not None and spec.animated:
                self.frame_delay = spec.frame_delay
            self.frame += 1
            if self.frame >= self.max_frames:
                self.frame = 0
        return self.frame

    def change_type(self, kind):
        """Turn the sprite into another kind, restarting its animation.

        Kinds without animation keep the current size and timing.
        """
        self._kind = kind
        self.frame = 0
        spec = SPRITE_SPECS.get(kind)
        if spec is not None and spec.animated:
            self.resize(spec.width, spec.height)
            self.max_frames = spec.max_frames
            self.frame_delay = spec.frame_delay