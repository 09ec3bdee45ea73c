import pytest

from engine2d.collision import AABBCollider, CollisionInfo
from engine2d.game_object import GameObject
from engine2d.rigidbody import PhysicsType, Rigidbody2D
from engine2d.vector2 import Vector2


def _body(gravity=False, drag=0.0):
    obj = GameObject()
    rb = obj.add_component(Rigidbody2D)
    rb.use_gravity = gravity
    rb.drag = drag
    return rb


def _collider(rb_or_obj):
    obj = rb_or_obj.owner if isinstance(rb_or_obj, Rigidbody2D) else rb_or_obj
    col = obj.add_component(AABBCollider)
    col.set_size(1, 1, 1.0)
    return col


def test_defaults():
    rb = Rigidbody2D()
    assert rb.physics_type is PhysicsType.DYNAMIC
    assert rb.mass == 1.0
    assert rb.use_gravity is True
    assert rb.velocity == Vector2.zero()


def test_gravity_added_without_time_scaling():
    rb = _body(gravity=True)
    rb.integrate([], 0.5)
    assert rb.velocity == Rigidbody2D.gravity
    assert rb.owner.transform.position == Rigidbody2D.gravity * 0.5


def test_force_accelerates_and_resets():
    rb = _body()
    rb.apply_force(Vector2(3.0, 0.0))
    rb.integrate([], 1.0)
    assert rb.velocity.x > 0
    assert rb.acceleration == Vector2.zero()
    assert rb.owner.transform.position == rb.velocity * 1.0


def test_impulse_round_trip_with_mass():
    rb = _body()
    rb.set_mass(2.0)
    rb.apply_impulse(Vector2(4.0, -6.0))
    assert rb.velocity * rb.mass == Vector2(4.0, -6.0)


def test_zero_mass_becomes_static():
    rb = _body(gravity=True)
    rb.set_mass(0.0)
    assert rb.mass == 0.0
    assert rb.physics_type is PhysicsType.STATIC
    assert rb.use_gravity is False
    rb.apply_impulse(Vector2(5.0, 5.0))
    rb.apply_force(Vector2(5.0, 5.0))
    assert rb.velocity == Vector2.zero()
    assert rb.acceleration == Vector2.zero()


def test_static_body_does_not_move():
    rb = _body(gravity=True)
    rb.physics_type = PhysicsType.STATIC
    rb.velocity = Vector2(1.0, 1.0)
    rb.integrate([], 1.0)
    assert rb.owner.transform.position == Vector2.zero()


def test_drag_slows_down():
    rb = _body(drag=0.5)
    rb.velocity = Vector2(2.0, 0.0)
    rb.integrate([], 0.1)
    assert 0 < rb.velocity.x < 2.0


def test_fixed_update_substeps_cover_whole_time():
    rb = _body()
    rb.velocity = Vector2(1.0, 0.0)
    rb.fixed_update([], 0.05)
    assert rb.owner.transform.position.x == pytest.approx(0.05)


def test_fixed_update_with_no_time_does_nothing():
    rb = _body(gravity=True)
    rb.fixed_update([], 0.0)
    assert rb.velocity == Vector2.zero()


def test_response_removes_incoming_normal_velocity():
    rb = _body()
    rb.velocity = Vector2(0.0, -5.0)
    info = CollisionInfo(None, None, Vector2(0.0, 1.0), 0.0)
    response = rb.calculate_collision_response(info)
    assert (rb.velocity + response).dot(info.normal) == pytest.approx(0.0)


def test_response_with_restitution_reflects():
    rb = _body()
    rb.restitution = 1.0
    rb.velocity = Vector2(0.0, -5.0)
    info = CollisionInfo(None, None, Vector2(0.0, 1.0), 0.0)
    after = rb.velocity + rb.calculate_collision_response(info)
    assert after.dot(info.normal) == pytest.approx(-rb.velocity.dot(info.normal))


def test_response_zero_when_separating():
    rb = _body()
    rb.velocity = Vector2(0.0, 5.0)
    info = CollisionInfo(None, None, Vector2(0.0, 1.0), 0.0)
    assert rb.calculate_collision_response(info) == Vector2.zero()


def test_resting_contact_cancels_gravity():
    rb = _body(gravity=True)
    ground = _collider(GameObject())
    info = CollisionInfo(_collider(rb), ground, Vector2(0.0, 1.0), 0.0)
    rb.integrate([info], 0.1)
    assert rb.velocity == Vector2.zero()
    assert rb.owner.transform.position == Vector2.zero()


def test_trigger_contact_is_ignored():
    rb = _body(gravity=True)
    ground = _collider(GameObject())
    ground.is_trigger = True
    info = CollisionInfo(_collider(rb), ground, Vector2(0.0, 1.0), 0.0)
    rb.integrate([info], 0.1)
    assert rb.velocity == Rigidbody2D.gravity


def test_fixed_update_ignores_other_owners_contacts():
    rb = _body(gravity=True)
    other_a = _collider(GameObject())
    other_b = _collider(GameObject())
    info = CollisionInfo(other_a, other_b, Vector2(0.0, 1.0), 0.0)
    rb.fixed_update([info], 0.016)
    assert rb.velocity == Rigidbody2D.gravity


def test_lighter_body_is_pushed():
    a = _body()
    b = _body()
    b.set_mass(2.0)
    info = CollisionInfo(_collider(a), _collider(b), Vector2(1.0, 0.0), 0.5)
    a.integrate([info], 0.01)
    assert a.velocity.x > 0
    assert a.velocity.y == 0
    assert b.velocity == Vector2.zero()


def test_heavier_body_pushes_other():
    a = _body()
    a.set_mass(3.0)
    b = _body()
    info = CollisionInfo(_collider(a), _collider(b), Vector2(1.0, 0.0), 0.5)
    a.integrate([info], 0.01)
    assert b.velocity.x < 0
    assert b.velocity.y == 0
    assert a.velocity == Vector2.zero()


def test_push_impulse_uses_normalized_direction():
    a = _body()
    target = _body()
    a.push_impulse(target, Vector2(3.0, 4.0), 0.5)
    direction = target.velocity.normalize()
    assert direction.x == pytest.approx(0.6)
    assert direction.y == pytest.approx(0.8)


def test_push_impulse_ignores_non_positive_depth():
    a = _body()
    target = _body()
    a.push_impulse(target, Vector2(1.0, 0.0), 0.0)
    assert target.velocity == Vector2.zero()


def test_push_force_sets_target_acceleration():
    a = _body()
    target = _body()
    a.push_force(target, Vector2(0.0, 2.0), 1.0, 1.0)
    assert target.acceleration.x == 0
    assert target.acceleration.y > 0
    a.push_force(target, Vector2(0.0, 2.0), 1.0, 0.0)
    assert target.acceleration.y == pytest.approx(2.0)


def test_integrate_without_owner_raises():
    rb = Rigidbody2D()
    rb.use_gravity = False
    with pytest.raises(RuntimeError):
        rb.integrate([], 0.1)