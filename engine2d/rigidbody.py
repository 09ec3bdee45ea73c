"""Simple rigid-body physics for game objects."""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import ClassVar, Iterable

from engine2d.collision import CollisionInfo
from engine2d.components import Component
from engine2d.transform import Transform
from engine2d.vector2 import Vector2

logger = logging.getLogger(__name__)


class PhysicsType(IntEnum):
    DYNAMIC = 0
    KINEMATIC = 1
    STATIC = 2


class Rigidbody2D(Component):
    """Moves its owner by velocity, with gravity, drag and contact response.

    A mass at or below ``MIN_MASS`` turns the body static.
    """

    gravity: ClassVar[Vector2] = Vector2(0.0, -9.81)
    MIN_MASS: ClassVar[float] = 0.0001
    MAX_STEP: ClassVar[float] = 0.016
    PUSH_FACTOR: ClassVar[float] = 40.0
    GROUND_FRICTION: ClassVar[float] = 10.0

    def __init__(self) -> None:
        super().__init__()
        self.velocity = Vector2(0.0, 0.0)
        self.acceleration = Vector2(0.0, 0.0)
        self.restitution = 0.0
        self.friction = 0.5
        self.drag = 0.5
        self._mass = 1.0
        self.use_gravity = True
        self.physics_type = PhysicsType.DYNAMIC

    @property
    def mass(self) -> float:
        return self._mass

    def _owner_transform(self) -> Transform:
        if self.owner is None:
            raise RuntimeError("rigidbody is not attached to a game object")
        return self.owner.transform

    def fixed_update(self, collisions: Iterable[CollisionInfo], delta_time: float) -> None:
        """Integrate over ``delta_time`` in sub-steps of at most ``MAX_STEP``.

        Only contacts whose ``a`` side belongs to this body's owner are used.
        """
        own = [info for info in collisions if info.a.owner is self.owner]
        steps = math.ceil(delta_time / self.MAX_STEP)
        if steps <= 0:
            return
        sub_dt = delta_time / steps
        for _ in range(steps):
            self.integrate(own, sub_dt)

    def integrate(self, collisions: Iterable[CollisionInfo], delta_time: float) -> None:
        """Advance the body by one step of ``delta_time``."""
        if self.physics_type is PhysicsType.STATIC:
            return

        dynamic = self.physics_type is PhysicsType.DYNAMIC
        gravity = self.gravity if dynamic and self.use_gravity else Vector2.zero()
        grounded = False

        for info in collisions:
            if info.a.is_trigger or info.b.is_trigger:
                continue
            normal = info.normal
            if normal.y > 0.7:
                grounded = True

            if self.use_gravity:
                # Remove the part of gravity that pushes into the surface.
                g_dot_n = gravity.dot(normal)
                if g_dot_n < 0:
                    gravity = gravity - normal * g_dot_n

            if dynamic:
                self.velocity = self.velocity + self.calculate_collision_response(info)

            other_owner = info.b.owner
            other = other_owner.get_component(Rigidbody2D) if other_owner is not None else None
            if other is None or other.physics_type is not PhysicsType.DYNAMIC:
                continue
            if self._mass < other._mass:
                if self.physics_type is not PhysicsType.KINEMATIC:
                    self.push_impulse(self, normal, info.penetration_depth)
            else:
                self.push_impulse(other, -normal, info.penetration_depth)

        self.velocity = self.velocity + gravity

        if dynamic:
            self.velocity = self.velocity + self.acceleration * delta_time
            self.velocity = self.velocity - self.velocity * self.drag * delta_time
            if grounded:
                vx = self.velocity.x - self.velocity.x * self.GROUND_FRICTION * delta_time
                if abs(vx) < 0.001:
                    vx = 0.0
                self.velocity = Vector2(vx, self.velocity.y)

        self._owner_transform().translate(self.velocity * delta_time)
        self.acceleration = Vector2.zero()

    def apply_force(self, force: Vector2) -> None:
        """Add ``force / mass`` to this step's acceleration."""
        if self._mass <= self.MIN_MASS:
            return
        self.acceleration = self.acceleration + force / self._mass

    def apply_impulse(self, impulse: Vector2) -> None:
        """Change velocity by ``impulse / mass`` at once."""
        if self._mass <= self.MIN_MASS:
            return
        self.velocity = self.velocity + impulse / self._mass

    def set_mass(self, value: float) -> None:
        self._mass = float(value)
        if self._mass <= self.MIN_MASS:
            self._mass = 0.0
            self.physics_type = PhysicsType.STATIC
            self.use_gravity = False
            owner_name = self.owner.name if self.owner is not None else ""
            logger.warning("%s -> mass set to 0; converted to a static body", owner_name)

    def calculate_collision_response(self, info: CollisionInfo) -> Vector2:
        """Velocity change from bouncing and friction against a contact."""
        normal = info.normal
        v_dot_n = self.velocity.dot(normal)
        if v_dot_n >= 0:
            return Vector2.zero()
        vn = normal * v_dot_n
        bounce = -(1 + self.restitution) * vn
        tangent = (self.velocity - vn).normalize()
        v_dot_t = self.velocity.dot(tangent)
        rub = -self.friction * v_dot_t * tangent
        return rub + bounce

    def push_force(self, target: Rigidbody2D, direction: Vector2, depth: float, time: float) -> None:
        """Push ``target`` with the force that covers ``depth`` in ``time``."""
        if time <= 0.0 or depth <= 0.0:
            return
        accel = (2.0 * depth) / (time * time)
        target.apply_force(direction.normalize() * accel * self._mass)

    def push_impulse(self, target: Rigidbody2D, direction: Vector2, depth: float) -> None:
        """Push ``target`` with an impulse proportional to ``depth``."""
        if depth <= 0.0:
            return
        target.apply_impulse(direction.normalize() * depth * self.PUSH_FACTOR)