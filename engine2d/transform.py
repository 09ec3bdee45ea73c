"""Affine 3x2 matrices and the Transform component."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from engine2d.components import Component
from engine2d.vector2 import FLT_EPSILON, Vector2

if TYPE_CHECKING:
    from engine2d.camera import Camera


@dataclass(frozen=True)
class Matrix3x2:
    """Row-vector affine matrix: a point maps as (x, y, 1) times the matrix.

    ``a @ b`` applies ``a`` first, then ``b``.
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> Matrix3x2:
        return cls()

    @classmethod
    def scale(cls, sx: float, sy: float) -> Matrix3x2:
        return cls(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @classmethod
    def rotation(cls, degrees: float, center: Vector2 | None = None) -> Matrix3x2:
        """Rotation by ``degrees`` about ``center`` (the origin by default)."""
        cx, cy = (center.x, center.y) if center is not None else (0.0, 0.0)
        theta = math.radians(degrees)
        c, s = math.cos(theta), math.sin(theta)
        return cls(c, s, -s, c, cx - cx * c + cy * s, cy - cx * s - cy * c)

    @classmethod
    def translation(cls, dx: float, dy: float) -> Matrix3x2:
        return cls(1.0, 0.0, 0.0, 1.0, dx, dy)

    def __matmul__(self, other: Matrix3x2) -> Matrix3x2:
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        a, b = self, other
        return Matrix3x2(
            a.m11 * b.m11 + a.m12 * b.m21,
            a.m11 * b.m12 + a.m12 * b.m22,
            a.m21 * b.m11 + a.m22 * b.m21,
            a.m21 * b.m12 + a.m22 * b.m22,
            a.dx * b.m11 + a.dy * b.m21 + b.dx,
            a.dx * b.m12 + a.dy * b.m22 + b.dy,
        )

    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    def inverted(self) -> Matrix3x2:
        """The inverse matrix; raises ValueError if it is singular."""
        det = self.determinant()
        if det == 0.0:
            raise ValueError("matrix is not invertible")
        return Matrix3x2(
            self.m22 / det,
            -self.m12 / det,
            -self.m21 / det,
            self.m11 / det,
            (self.m21 * self.dy - self.m22 * self.dx) / det,
            (self.m12 * self.dx - self.m11 * self.dy) / det,
        )

    def transform_point(self, x: float, y: float) -> Vector2:
        return Vector2(
            x * self.m11 + y * self.m21 + self.dx,
            x * self.m12 + y * self.m22 + self.dy,
        )


def _invert_or_identity(matrix: Matrix3x2) -> Matrix3x2:
    try:
        return matrix.inverted()
    except ValueError:
        return Matrix3x2.identity()


class Transform(Component):
    """Position, rotation (degrees) and scale, with an optional parent.

    With ``is_unity_coords`` set, the origin is the screen centre and y
    points up; otherwise the origin is the top-left corner and y points down.
    """

    def __init__(self) -> None:
        super().__init__()
        self.parent: Transform | None = None
        self.is_unity_coords = True
        self.screen_size: tuple[int, int] = (0, 0)
        self._position = Vector2(0.0, 0.0)
        self._rotation = 0.0
        self._scale = Vector2(1.0, 1.0)
        self._dirty = True
        self._cached = Matrix3x2.identity()
        self._offset = Vector2(0.0, 0.0)
        self.unity_coord_matrix = Matrix3x2.identity()
        self.normal_render_matrix = Matrix3x2.scale(1.0, 1.0) @ Matrix3x2.translation(0.0, 0.0)
        self.unity_render_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(0.0, 0.0)
        self._final = Matrix3x2(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def scale(self) -> Vector2:
        return self._scale

    @property
    def offset(self) -> Vector2:
        return self._offset

    @property
    def final_matrix(self) -> Matrix3x2:
        return self._final

    def on_start(self) -> None:
        width, height = self.screen_size
        self.unity_coord_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(
            float(width // 2), float(height // 2)
        )

    def set_position(self, x: float, y: float) -> None:
        if abs(self._position.x - x) > FLT_EPSILON or abs(self._position.y - y) > FLT_EPSILON:
            self._position = Vector2(x, y)
            self._dirty = True

    def set_rotation(self, degrees: float) -> None:
        if abs(self._rotation - degrees) > FLT_EPSILON:
            self._rotation = float(degrees)
            self._dirty = True

    def set_scale(self, sx: float, sy: float) -> None:
        if abs(self._scale.x - sx) > FLT_EPSILON or abs(self._scale.y - sy) > FLT_EPSILON:
            self._scale = Vector2(sx, sy)
            self._dirty = True

    def set_offset(self, x: float, y: float) -> None:
        self._offset = Vector2(x, y)
        self.normal_render_matrix = Matrix3x2.scale(1.0, 1.0) @ Matrix3x2.translation(x, -y)
        self.unity_render_matrix = Matrix3x2.scale(1.0, -1.0) @ Matrix3x2.translation(x, y)

    def translate(self, delta: Vector2) -> None:
        self._position = self._position + delta
        self._dirty = True

    def reset_dirty(self) -> None:
        self._dirty = False

    def is_dirty(self, camera: Camera | None = None) -> bool:
        """Whether this transform, a parent or the camera's transform changed."""
        if self._dirty:
            return True
        if self.parent is not None and self.parent.is_dirty(camera):
            return True
        if camera is not None and camera.transform is not None:
            return camera.transform.is_dirty()
        return False

    def calculate_final_matrix(self, camera: Camera | None = None) -> Matrix3x2:
        """Recompute the render matrix if anything is dirty and return it."""
        cam_inverse = camera.get_invert_matrix() if camera is not None else Matrix3x2.identity()
        if self.is_dirty(camera):
            if self.is_unity_coords:
                self._final = (
                    self.unity_render_matrix
                    @ self.to_world_matrix()
                    @ cam_inverse
                    @ self.unity_coord_matrix
                )
            else:
                self._final = self.normal_render_matrix @ self.to_world_matrix() @ cam_inverse
        return self._final

    def to_local_matrix(self) -> Matrix3x2:
        if self._dirty:
            self._cached = (
                Matrix3x2.scale(self._scale.x, self._scale.y)
                @ Matrix3x2.rotation(self._rotation)
                @ Matrix3x2.translation(self._position.x, self._position.y)
            )
        return self._cached

    def to_local_invert_matrix(self) -> Matrix3x2:
        return _invert_or_identity(self.to_local_matrix())

    def to_world_matrix(self) -> Matrix3x2:
        if self.parent is None:
            return self.to_local_matrix()
        return self.to_local_matrix() @ self.parent.to_world_matrix()

    def to_world_invert_matrix(self) -> Matrix3x2:
        return _invert_or_identity(self.to_world_matrix())

    def reset(self) -> None:
        """Zero position and rotation, unit scale."""
        self.set_position(0.0, 0.0)
        self.set_rotation(0.0)
        self.set_scale(1.0, 1.0)