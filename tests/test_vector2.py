import pytest

from engine2d.vector2 import Vector2


def test_int_components_become_floats():
    v = Vector2(3, 4)
    assert isinstance(v.x, float)
    assert v == Vector2(3.0, 4.0)


def test_direction_constants():
    assert Vector2.up() == Vector2(0.0, 1.0)
    assert Vector2.down() == -Vector2.up()
    assert Vector2.left() == -Vector2.right()
    assert Vector2.one() == Vector2.up() + Vector2.right()
    assert Vector2.zero() == Vector2()


def test_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 7.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vector2(1.5, -2.5)
    assert 2 * v == v * 2
    assert 2.0 * v == v + v


def test_division_inverts_multiplication():
    v = Vector2(3.0, -6.0)
    assert (v * 4) / 4 == v


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0) / 0


def test_multiplying_by_vector_is_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) * Vector2(1.0, 1.0)


def test_dot_with_self_is_sqr_magnitude():
    v = Vector2(2.5, -1.25)
    assert v.dot(v) == pytest.approx(v.sqr_magnitude())
    assert v.magnitude() ** 2 == pytest.approx(v.sqr_magnitude())


def test_perpendicular_dot_is_zero():
    assert Vector2.up().dot(Vector2.right()) == 0.0


def test_normalize_has_unit_length_and_same_direction():
    v = Vector2(3.0, -7.0)
    n = v.normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert (n * v.magnitude()).x == pytest.approx(v.x)
    assert (n * v.magnitude()).y == pytest.approx(v.y)


def test_normalize_tiny_vector_gives_zero():
    assert Vector2(1e-9, 0.0).normalize() == Vector2.zero()


def test_is_zero():
    assert Vector2.zero().is_zero()
    assert not Vector2.one().is_zero()
    # the threshold is signed, so negative components also pass
    assert Vector2(-5.0, -5.0).is_zero()


def test_lerp_endpoints_and_midpoint():
    start = Vector2(-2.0, 4.0)
    end = Vector2(6.0, 0.0)
    assert Vector2.lerp(start, end, 0.0) == start
    assert Vector2.lerp(start, end, 1.0) == end
    mid = Vector2.lerp(start, end, 0.5)
    assert mid == (start + end) / 2


def test_str_format():
    assert str(Vector2(1, 2)) == "1, 2"
    assert str(Vector2(0.5, -1.5)) == "0.5, -1.5"


def test_vectors_are_hashable():
    assert len({Vector2(1, 2), Vector2(1.0, 2.0)}) == 1