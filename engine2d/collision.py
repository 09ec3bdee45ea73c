"""Collider components and the collision information they produce."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Iterable, NamedTuple

from engine2d.components import Component
from engine2d.transform import Transform
from engine2d.vector2 import Vector2


class ColliderType(IntEnum):
    CIRCLE = 0
    AABB = 1


@dataclass
class CollisionInfo:
    """One detected contact: ``normal`` pushes ``a`` out of ``b``."""

    a: CollisionComponent
    b: CollisionComponent
    normal: Vector2 = field(default_factory=Vector2.zero)
    penetration_depth: float = 0.0


class Rect(NamedTuple):
    left: float
    top: float
    right: float
    bottom: float


class CollisionComponent(Component, ABC):
    """Base for colliders placed at their owner's transform position."""

    collider_type: ClassVar[ColliderType]

    def __init__(self) -> None:
        super().__init__()
        self.is_trigger = False

    def _owner_transform(self) -> Transform:
        if self.owner is None:
            raise RuntimeError("collider is not attached to a game object")
        return self.owner.transform

    def center(self) -> Vector2:
        pos = self._owner_transform().position
        return Vector2(pos.x, pos.y)

    @abstractmethod
    def check_collision(self, other: CollisionComponent) -> CollisionInfo | None:
        """Contact with ``other``, or None when they do not touch."""

    def fixed_update(self, others: Iterable[CollisionComponent]) -> list[CollisionInfo]:
        """Contacts with every collider in ``others`` not on the same owner."""
        contacts = []
        for other in others:
            if not isinstance(other, CollisionComponent) or other.owner is self.owner:
                continue
            info = self.check_collision(other)
            if info is not None:
                contacts.append(info)
        return contacts


class AABBCollider(CollisionComponent):
    """Axis-aligned box collider sized by width, height and a scale factor."""

    collider_type = ColliderType.AABB

    def __init__(self) -> None:
        super().__init__()
        self.width = 0.0
        self.height = 0.0
        self.size = 1.0

    def set_size(self, width: float, height: float, scale: float = 1.0) -> None:
        self.width = float(width)
        self.height = float(height)
        self.size = float(scale)

    def get_bounds(self) -> Rect:
        """Box extents relative to the centre.

        In unity coordinates the box is centred on the position; otherwise
        its top-left corner sits on the position.
        """
        w = self.width * self.size
        h = self.height * self.size
        if self._owner_transform().is_unity_coords:
            return Rect(-w * 0.5, h * 0.5, w * 0.5, -h * 0.5)
        return Rect(0.0, 0.0, w, h)

    def check_collision(self, other: CollisionComponent) -> CollisionInfo | None:
        if other.collider_type is ColliderType.AABB and isinstance(other, AABBCollider):
            return self._check_with_aabb(other)
        return None

    def _check_with_aabb(self, other: AABBCollider) -> CollisionInfo | None:
        a_center, b_center = self.center(), other.center()
        a_rect, b_rect = self.get_bounds(), other.get_bounds()

        a_min_x, a_max_x = a_center.x + a_rect.left, a_center.x + a_rect.right
        a_min_y, a_max_y = a_center.y + a_rect.bottom, a_center.y + a_rect.top
        b_min_x, b_max_x = b_center.x + b_rect.left, b_center.x + b_rect.right
        b_min_y, b_max_y = b_center.y + b_rect.bottom, b_center.y + b_rect.top

        colliding = (
            a_min_x < b_max_x
            and a_max_x > b_min_x
            and a_min_y < b_max_y
            and a_max_y > b_min_y
        )
        if not colliding:
            return None

        overlap_x = min(a_max_x, b_max_x) - max(a_min_x, b_min_x)
        overlap_y = min(a_max_y, b_max_y) - max(a_min_y, b_min_y)
        delta = b_center - a_center

        # The axis with the smaller overlap is the one to resolve along.
        if overlap_x < overlap_y:
            normal = Vector2(-1.0, 0.0) if delta.x > 0 else Vector2(1.0, 0.0)
            depth = overlap_x
        else:
            normal = Vector2(0.0, -1.0) if delta.y > 0 else Vector2(0.0, 1.0)
            depth = overlap_y
        return CollisionInfo(self, other, normal, depth)


class CircleCollider(CollisionComponent):
    """Circle collider; only circle-circle contacts are detected."""

    collider_type = ColliderType.CIRCLE

    def __init__(self) -> None:
        super().__init__()
        self.radius = 1.0

    def check_collision(self, other: CollisionComponent) -> CollisionInfo | None:
        if other.collider_type is ColliderType.CIRCLE and isinstance(other, CircleCollider):
            return self._check_with_circle(other)
        return None

    def _check_with_circle(self, other: CircleCollider) -> CollisionInfo | None:
        a_center, b_center = self.center(), other.center()
        reach = self.radius + other.radius
        if (b_center - a_center).sqr_magnitude() > reach * reach:
            return None
        normal = (a_center - b_center).normalize()
        return CollisionInfo(self, other, normal, 1.0)