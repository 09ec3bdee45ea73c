"""Cameras and the manager that picks the active one."""

from __future__ import annotations

from engine2d.components import Component
from engine2d.transform import Matrix3x2, Transform

DEFAULT_PRIORITY = 10


class Camera(Component):
    """A view into the world attached to a game object.

    The view is the owner's world matrix followed by the camera's own local
    transform, which is created when the camera starts.
    """

    def __init__(self) -> None:
        super().__init__()
        self.is_main_camera = False
        self._priority = DEFAULT_PRIORITY
        self._priority_changed = False
        self._local: Transform | None = None

    @property
    def transform(self) -> Transform | None:
        return self._local

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = value
        self._priority_changed = True

    @property
    def priority_changed(self) -> bool:
        return self._priority_changed

    def reset_priority_changed(self) -> None:
        self._priority_changed = False

    def on_start(self) -> None:
        self._local = Transform()

    def get_matrix(self) -> Matrix3x2:
        if self.owner is None:
            return Matrix3x2.identity()
        attached = self.owner.transform.to_world_matrix()
        local = self._local.to_world_matrix() if self._local is not None else Matrix3x2.identity()
        return attached @ local

    def get_invert_matrix(self) -> Matrix3x2:
        """Inverse of the view matrix; a singular matrix is returned unchanged."""
        matrix = self.get_matrix()
        try:
            return matrix.inverted()
        except ValueError:
            return matrix


class CameraManager:
    """Keeps cameras ordered by priority; the lowest priority value is active."""

    def __init__(self) -> None:
        self._cameras: list[Camera] = []

    @property
    def active_camera(self) -> Camera | None:
        return self._cameras[0] if self._cameras else None

    @property
    def cameras(self) -> tuple[Camera, ...]:
        return tuple(self._cameras)

    def register(self, camera: Camera) -> None:
        self._cameras.append(camera)
        self._sort()

    def update(self) -> None:
        """Re-sort if any camera's priority changed since the last update."""
        if any(cam.priority_changed for cam in self._cameras):
            self._sort()
            for cam in self._cameras:
                cam.reset_priority_changed()

    def clear_all(self) -> None:
        self._cameras.clear()

    def __len__(self) -> int:
        return len(self._cameras)

    def _sort(self) -> None:
        self._cameras.sort(key=lambda cam: cam.priority)