"""A trail of stamps that follows a moving point."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, replace

from engine2d.vector2 import Vector2

_ANGLE_THRESHOLD_SQ = 25.0


@dataclass
class TrailStamp:
    """One point of a trail; ``angle`` is in radians."""

    position: Vector2
    angle: float = 0.0
    timestamp: float = 0.0
    is_active: bool = True


class Trail:
    """Records stamps along a path while drawing is switched on.

    Stamps are at least ``min_distance`` apart; gaps are filled by
    interpolation. When drawing stops, the current stamps are copied to
    ``cached_trails`` and then removed a few at a time on each ``update``.
    """

    def __init__(self) -> None:
        self.is_draw = False
        self.was_draw = False
        self.is_out_from_box = True
        self.is_new_cached = False
        self.is_fading_out = False
        self.min_distance = 5.0
        self.life_time = 0.3
        self.max_trail_count = 100
        self.cached_trails: deque[TrailStamp] = deque()
        self._trails: deque[TrailStamp] = deque()

    @property
    def stamps(self) -> tuple[TrailStamp, ...]:
        return tuple(self._trails)

    def __len__(self) -> int:
        return len(self._trails)

    def was_just_released(self) -> bool:
        return self.was_draw and not self.is_draw

    def was_just_pressed(self) -> bool:
        return not self.was_draw and self.is_draw

    def update(self) -> None:
        """Handle the end of drawing and drop expired stamps from the front."""
        if self.was_just_released():
            self.cached_trails = deque(replace(stamp) for stamp in self._trails)
            self.is_new_cached = True
            for stamp in self._trails:
                stamp.is_active = False

        if self._trails:
            inactive = 0
            for stamp in self._trails:
                if stamp.is_active:
                    break
                inactive += 1

            delete_count = inactive // 10
            if delete_count < 3 and inactive > 0:
                delete_count = 3
            elif delete_count > inactive:
                delete_count = inactive

            removed = 0
            while self._trails and removed < delete_count and not self._trails[0].is_active:
                self._trails.popleft()
                removed += 1

        self.was_draw = self.is_draw

    def clear(self) -> None:
        self._trails.clear()

    def add_stamp(self, x: float, y: float) -> None:
        """Extend the trail towards (x, y) if drawing is on and it moved far enough."""
        if not self.is_draw:
            return
        pos = Vector2(x, y)
        if not self._trails:
            self._trails.append(TrailStamp(pos, 0.0))
            return

        last = self._trails[-1]
        if not last.is_active:
            self._trails.append(TrailStamp(pos, 0.0))
            return

        delta = pos - last.position
        dist = delta.magnitude()
        if dist < self.min_distance:
            return

        steps = int(dist / self.min_distance)
        for i in range(1, steps + 1):
            interp = last.position + delta * (i / steps)
            angle = self.get_angle(last.position, interp, self._trails[-1].angle)
            self._trails.append(TrailStamp(interp, angle))
            if len(self._trails) == 2:
                self._trails[0].angle = angle

        if self.is_out_from_box:
            over = max(len(self._trails) - self.max_trail_count, 0)
            delete_count = over // 10
            if delete_count < 1:
                delete_count = 1
            elif delete_count > over:
                delete_count = over
            for _ in range(delete_count):
                if not self._trails:
                    break
                self._trails.popleft()

    @staticmethod
    def get_angle(prev: Vector2, current: Vector2, prev_angle: float) -> float:
        """Heading from ``prev`` to ``current``; keeps ``prev_angle`` for short moves."""
        dx = current.x - prev.x
        dy = current.y - prev.y
        if dx * dx + dy * dy < _ANGLE_THRESHOLD_SQ:
            return prev_angle
        return math.atan2(dy, dx)