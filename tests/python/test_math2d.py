from __future__ import annotations

from pygame.math import Vector2
from pytest import approx

from flocking.sim.utils.math2d import mean, safe_normalize, seek


def test_safe_normalize_zero_vector_returns_zero():
    result = safe_normalize(Vector2())
    assert result == Vector2(0.0, 0.0)


def test_safe_normalize_preserves_direction():
    result = safe_normalize(Vector2(3.0, 4.0))
    assert result.x == approx(0.6)
    assert result.y == approx(0.8)
    assert result.length() == approx(1.0)


def test_seek_is_speed_scaled_and_does_not_alias_inputs():
    position = Vector2(0.0, 0.0)
    target = Vector2(100.0, 0.0)
    force = seek(position, target, 0.1)
    assert force.x == approx(0.1)
    assert force.y == approx(0.0)
    assert position == Vector2(0.0, 0.0)
    assert target == Vector2(100.0, 0.0)


def test_seek_onto_own_position_is_zero():
    assert seek(Vector2(5.0, 5.0), Vector2(5.0, 5.0), 0.1) == Vector2()


def test_mean_of_empty_list_is_zero():
    assert mean([]) == Vector2()
    assert mean([Vector2(1.0, 2.0), Vector2(3.0, 6.0)]) == Vector2(2.0, 4.0)
