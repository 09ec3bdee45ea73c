import random

import pytest

from engine2d.game_random import random_inside_unit_circle, random_range


def test_random_range_stays_in_half_open_interval():
    rng = random.Random(1234)
    for _ in range(500):
        value = random_range(-3.0, 5.0, rng)
        assert -3.0 <= value < 5.0


def test_random_range_is_deterministic_for_seed():
    a = [random_range(0.0, 10.0, random.Random(7)) for _ in range(3)]
    b = [random_range(0.0, 10.0, random.Random(7)) for _ in range(3)]
    assert a == b


def test_random_range_degenerate_interval():
    assert random_range(2.5, 2.5, random.Random(0)) == 2.5


def test_random_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        random_range(5.0, 1.0)


def test_random_range_without_rng_uses_default():
    value = random_range(1.0, 2.0)
    assert 1.0 <= value < 2.0


def test_points_are_inside_unit_circle():
    rng = random.Random(99)
    for _ in range(500):
        point = random_inside_unit_circle(rng)
        assert point.magnitude() <= 1.0 + 1e-9


def test_points_cover_all_quadrants():
    rng = random.Random(5)
    points = [random_inside_unit_circle(rng) for _ in range(400)]
    quadrants = {(p.x >= 0, p.y >= 0) for p in points}
    assert len(quadrants) == 4


def test_unit_circle_is_deterministic_for_seed():
    first_rng = random.Random(3)
    second_rng = random.Random(3)
    first_sequence = [random_inside_unit_circle(first_rng) for _ in range(5)]
    second_sequence = [random_inside_unit_circle(second_rng) for _ in range(5)]
    assert [(p.x, p.y) for p in first_sequence] == [(p.x, p.y) for p in second_sequence]
    assert len({(p.x, p.y) for p in first_sequence}) == 5
    assert all(p.magnitude() <= 1.0 + 1e-9 for p in first_sequence)