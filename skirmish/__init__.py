"""Rules for a turn-based fantasy skirmish: boxes, sprites, shots and creatures."""

__version__ = "0.1.0"
__all__ = ["core", "grouper", "sprites", "shots", "creatures"]