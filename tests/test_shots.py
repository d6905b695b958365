import pytest

from skirmish.core import EV_ARROW_TYPE, FIREBALL_TYPE, GD_ARROW_TYPE, Direction
from skirmish.shots import Shot, create_shot


def test_factory_builds_shot_of_kind():
    shot = create_shot(FIREBALL_TYPE, 100.0, 200.0, 300.0, 400.0)
    assert isinstance(shot, Shot)
    assert shot.kind == FIREBALL_TYPE
    assert shot.strength == 0


def test_horizontal_fireball_moves_right():
    shot = create_shot(FIREBALL_TYPE, 100.0, 200.0, 500.0, 200.0)
    assert shot.move() is True
    assert shot.start.x == 101.0
    assert shot.start.y == 200.0
    assert shot.end.x == shot.start.x + shot.width


def test_horizontal_fireball_moves_left():
    shot = create_shot(FIREBALL_TYPE, 100.0, 200.0, 10.0, 200.0)
    assert shot.move() is True
    assert shot.start.x == 99.0


def test_vertical_fireball_moves_down_and_up():
    down = create_shot(FIREBALL_TYPE, 100.0, 200.0, 100.0, 400.0)
    assert down.move() is True
    assert down.start.y == 201.0
    up = create_shot(FIREBALL_TYPE, 100.0, 200.0, 100.0, 100.0)
    assert up.move() is True
    assert up.start.y == 199.0


def test_diagonal_fireball_follows_line():
    shot = create_shot(FIREBALL_TYPE, 100.0, 100.0, 200.0, 200.0)
    for _ in range(10):
        assert shot.move() is True
        assert shot.start.y == pytest.approx(shot.start.x)


def test_shot_stops_at_left_edge():
    shot = create_shot(FIREBALL_TYPE, 2.0, 200.0, 0.0, 200.0)
    assert shot.move() is True
    assert shot.move() is False
    assert shot.start.x == 1.0


def test_shot_at_target_does_not_move():
    shot = create_shot(FIREBALL_TYPE, 100.0, 100.0, 100.0, 100.0)
    assert shot.move() is False
    assert (shot.start.x, shot.start.y) == (100.0, 100.0)


def test_arrow_nadir_above_start():
    shot = create_shot(EV_ARROW_TYPE, 100.0, 400.0, 400.0, 600.0)
    assert shot.nadir < shot.start.y
    assert shot.move() is True
    assert shot.start.y < 400.0


@pytest.mark.parametrize("kind", [EV_ARROW_TYPE, GD_ARROW_TYPE])
def test_arrow_rises_then_falls(kind):
    shot = create_shot(kind, 100.0, 400.0, 400.0, 600.0)
    lowest = shot.start.y
    for _ in range(1000):
        if shot.dir in (Direction.DOWN_LEFT, Direction.DOWN_RIGHT):
            break
        assert shot.move() is True
        lowest = min(lowest, shot.start.y)
    assert shot.dir in (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)
    assert lowest <= shot.nadir + 1e-6
    before = shot.start.y
    shot.move()
    assert shot.start.y > before