# engine2d

engine2d is the core of a small component-based 2D game engine. It is pure
Python and has no dependencies.

## Modules

- `engine2d.vector2`: `Vector2` is an immutable 2D vector of floats.
  - It supports `+`, `-`, unary `-`, and `*` and `/` by a number.
  - Its methods are `dot`, `magnitude`, `sqr_magnitude`, `normalize` (a near-zero vector normalizes to zero), `is_zero` and the static `lerp`.
  - Constructors for the common vectors are `zero()`, `one()`, `up()`, `down()`, `left()` and `right()`.
  - `str()` gives `"x, y"`.
- `engine2d.easing`: the easing curves, such as `ease_in_sine` and `ease_out_bounce`. Each takes a progress value from 0 to 1.
  - Every curve is also reachable through the `EasingEffect` enum, either with `ease(effect, x)` or with `easing_function(effect)`.
  - The mapping itself is the dict `EASING_FUNCTIONS`.
  - An unknown effect raises `ValueError`.
  - `ease_in_out_cubic` gives the same curve as `ease_in_out_sine`.
- `engine2d.game_random`:
  - `random_range(low, high, rng=None)` returns a uniform float in `[low, high)`. It raises `ValueError` if `low > high`.
  - `random_inside_unit_circle(rng=None)` returns a uniformly distributed point inside the unit circle.
  - Pass a `random.Random` as `rng` to get results you can reproduce.
- `engine2d.components`:
  - `BaseObject` gets its identity from an instance id. It is falsy until `assign_instance_id()` is called.
  - `Component` has the lifecycle hooks `on_create`, `on_start` and `on_destroy`. It also has `add_listener(event, callback)`, which lets you observe those hooks.
  - `ActiveComponent` adds an `active` flag.
  - `MonoBehavior` adds update hooks and collision and trigger hooks.
  - `StatComponent` holds one integer `value`. `setter()` returns a callback that sets that value.
- `engine2d.transform`:
  - `Matrix3x2` is an affine matrix. `a @ b` applies `a` first, then `b`. It provides `identity`, `scale`, `rotation` (in degrees, about an optional centre) and `translation`, plus `inverted`, `determinant` and `transform_point`.
  - `Transform` holds position, rotation, scale and an optional parent. It builds local and world matrices, and their inverses, with dirty tracking.
  - `calculate_final_matrix(camera)` combines the render, world, camera-inverse and screen-coordinate matrices.
- `engine2d.game_object`: `GameObject` always owns a `Transform`.
  - `add_component(SomeType)` creates the component, assigns its id and calls `on_create`. It also queues the component for `process_start_queue()`.
  - `get_component(SomeType)` looks up a component by exact type.
  - `remove_component` and `destroy` take components off the object.
  - The optional `on_attach` and `on_detach` callbacks are told about every component that is added or removed.
- `engine2d.camera`:
  - A `Camera` has a priority and a local transform, which is created in `on_start`.
  - `CameraManager` keeps its cameras sorted so that the lowest priority value is the `active_camera`. Its `update()` re-sorts after a priority changes.
- `engine2d.collision`:
  - `AABBCollider` finds box-box contacts. `CircleCollider` finds circle-circle contacts.
  - A contact is returned as a `CollisionInfo` with a push-out `normal` and a `penetration_depth`.
  - `fixed_update(others)` collects the contacts with every collider on other objects.
- `engine2d.rigidbody`: `Rigidbody2D` integrates gravity, drag, ground friction, bounce and friction at contacts, and push-apart impulses.
  - `PhysicsType` is one of `DYNAMIC`, `KINEMATIC` or `STATIC`.
  - `fixed_update(collisions, delta_time)` sub-steps the integration in steps of at most 0.016 s.
  - A mass of about zero or below makes the body static.
- `engine2d.input`:
  - `KeyboardState` tracks held, just-pressed and just-released keys from snapshots of 256 key states. Bit `0x8000` means held.
  - `MouseState` processes `MouseMessage` events into position, per-frame deltas, wheel delta and button state.
- `engine2d.trail`: `Trail` records `TrailStamp`s along a path while `is_draw` is on.
  - Gaps wider than `min_distance` are filled by interpolation.
  - The front of the trail is trimmed once it grows past `max_trail_count`.
  - When drawing stops, the trail is copied to `cached_trails` and then removed a few stamps per `update()`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from engine2d.vector2 import Vector2
from engine2d.easing import EasingEffect, ease
from engine2d.game_object import GameObject
from engine2d.collision import AABBCollider

v = (Vector2(3.0, 4.0) + Vector2.one()) * 2
print(v, Vector2(3.0, 4.0).magnitude())    # 8, 10 5.0

print(ease(EasingEffect.OUT_BOUNCE, 0.5))  # 0.765625

a = GameObject("a")
b = GameObject("b")
box_a = a.add_component(AABBCollider)
box_b = b.add_component(AABBCollider)
box_a.set_size(10, 10, 1.0)
box_b.set_size(10, 10, 1.0)
b.transform.set_position(6, 0)

info = box_a.check_collision(box_b)
if info is not None:
    print(info.normal, info.penetration_depth)  # -1, 0 4.0
```

## What it does not do

The package does not draw anything. It does not open a window, play sound, or
manage scenes, and it runs no game loop. Frame timing, key states and mouse
events come from your own loop:

- `Rigidbody2D.fixed_update` takes the frame's `delta_time`.
- `KeyboardState.update` takes the key states.
- `MouseState.process_message` takes each mouse event.

Nothing registers components with systems automatically. Use the `on_attach`
and `on_detach` hooks of `GameObject` for that.