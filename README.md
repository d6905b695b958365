# skirmish

The rules for a turn-based fantasy battle game. The package tracks where things are on the
field and how they animate. It moves creatures and projectiles one step at a time and
decides what a creature does on its turn. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `skirmish.core`

- Constants for the field. `SCREEN_WIDTH` is 1000 and `SCREEN_HEIGHT` is 800. The sky line
  `SKY` is at 50 and the ground line `GROUND` is at 750.
- Kind numbers for every object:
  - `FIELD1_TYPE` … `FIELD5_TYPE` and `INTRO_TYPE`;
  - `FIREBALL_TYPE`;
  - the evil side's `EV_*_TYPE` kinds: archer, arrow, coyote, dragon, hydra, mage, minotaur and warrior;
  - the good side's `GD_*_TYPE` kinds: archer, arrow, horse, dragon, hydra, unicorn, minotaur and warrior.
- `Direction` and `State` are the enumerations for a heading and for a creature's turn state.
- `Point` is a dataclass with `x` and `y`.
- `RandomInt(seed=None)` is a callable. `rng(low, high)` returns an integer in the closed
  range. It raises `ValueError` when `low > high`.
- `distance(start, target)` gives the Euclidean distance between two points.
- `sort_by_distance(points, target)` sorts a mutable sequence of points in place, nearest
  first. It returns `False` and leaves the sequence alone when it holds fewer than two points.
- `Box(sx, sy, width, height)` is a rectangle. It has `start`, `end`, `center`, `x_radius`
  and `y_radius`, plus read-only `width` and `height`.
  - `set_edges()` recomputes the derived values after `start` has been moved.
  - `resize()`, `set_width()` and `set_height()` change the size.

### `skirmish.grouper`

- `Grouper(capacity=1)` is an ordered collection. Its capacity grows one slot at a time.
  - It supports `append`, `replace_first`, `insert`, `erase`, `first`, `last`, indexing, `len()` and iteration.
  - `insert` at the last position replaces that element.
  - `erase` refuses to remove the only remaining element.
  - Out-of-range access raises `IndexError`.
- `sort_values(bag)` sorts a bag of plain numbers or strings ascending, in place.
  - It returns `False` if the bag holds anything else.
  - Bags of two or fewer elements are left untouched.

### `skirmish.sprites`

- `SpriteSpec` holds the width, height, frame count and frame delay of one kind.
  `SPRITE_SPECS` maps each kind to its spec.
- `Sprite(kind, sx, sy)` is a `Box` with an animation.
  - `next_frame()` advances the clock by one tick and returns the current frame.
  - `change_type(kind)` switches the sprite to another kind and restarts its animation.

### `skirmish.shots`

- `Shot(kind, sx, sy, target_x, target_y)` is a projectile that moves one pixel per `move()`.
  - Fireballs fly in a straight line toward the target.
  - Arrows rise along a line to a peak 150 above their starting point, then fall toward the target.
  - `move()` returns `False` when the shot reaches the edge of the field and can go no further.
- `create_shot(kind, sx, sy, to_x, to_y)` builds a `Shot`.

### `skirmish.creatures`

- `CreatureSpec` and `CREATURE_SPECS` give each kind's move points, heal delay, maximum
  lives and strength.
- `Creature` is the abstract base. It provides:
  - `move(to_x, to_y)`, which takes one step and spends one move point;
  - `attack()`, which ends the turn and returns the creature's strength;
  - `heal()`, which counts down the heal delay and then restores lives;
  - the abstract `next_move(enemies)`.
- `Evil` is driven by the computer. `next_move` does the following:
  - It may choose to heal when lives are low.
  - Otherwise it sorts `enemies` in place, nearest first.
  - It then answers `State.ATTACK` when the nearest enemy is inside its box.
  - Failing that, archers and mages answer `State.SHOOT` and all other kinds answer `State.MOVE`.
- `Hero` belongs to the player. `next_move` answers `State.HEAL` when lives are below half.
  Otherwise it answers `State.STOP`.
- `create_creature(kind, sx, sy, rng=None)` returns an `Evil` or a `Hero`. It raises
  `ValueError` for a kind that is not a creature. Pass a `RandomInt` as `rng` for
  repeatable healing decisions.

## Example

```python
from skirmish.core import EV_DRAGON_TYPE, FIREBALL_TYPE, Point, RandomInt, State
from skirmish.creatures import create_creature
from skirmish.grouper import Grouper
from skirmish.shots import create_shot

rng = RandomInt(seed=42)
dragon = create_creature(EV_DRAGON_TYPE, 600.0, 300.0, rng)

enemies = Grouper(1)
enemies.append(Point(100.0, 300.0))

state = dragon.next_move(enemies)
if state is State.MOVE:
    while dragon.move(100.0, 300.0):
        pass

fireball = create_shot(FIREBALL_TYPE, 600.0, 300.0, 100.0, 300.0)
while fireball.move():
    pass
```

## What the package does not do

The package has no drawing, input handling, sound or game loop. It has no command to run.
It does not load or save games. The calling program renders the sprites and calls
`next_move`, `move`, `attack` and `next_frame` as its turns and frames require.