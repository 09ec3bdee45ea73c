"""Base object, component hierarchy and simple stat component."""

from __future__ import annotations

import itertools
from collections import defaultdict
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterator

if TYPE_CHECKING:
    from engine2d.game_object import GameObject

INVALID_ID = 0xFFFFFFFFFFFFFFFF


class BaseObject:
    """Root of every engine object; identity is the instance id."""

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._instance_id = INVALID_ID

    @property
    def instance_id(self) -> int:
        return self._instance_id

    def assign_instance_id(self) -> int:
        """Give the object a fresh id unless it already has one."""
        if self._instance_id == INVALID_ID:
            self._instance_id = next(BaseObject._ids)
        return self._instance_id

    def __bool__(self) -> bool:
        return self._instance_id != INVALID_ID

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseObject):
            return NotImplemented
        return self._instance_id == other._instance_id

    def __hash__(self) -> int:
        return hash(self._instance_id)


class Component(BaseObject):
    """Something that can be attached to a game object.

    Every lifecycle hook notifies the callbacks registered for it with
    ``add_listener``; subclasses override the hooks to add behaviour.
    """

    def __init__(self) -> None:
        super().__init__()
        self.owner: GameObject | None = None
        self._created = False
        self._started = False
        self._listeners: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    @property
    def created(self) -> bool:
        return self._created

    @property
    def started(self) -> bool:
        return self._started

    def add_listener(self, event: str, callback: Callable[..., Any]) -> None:
        """Call ``callback`` whenever the hook named ``event`` runs."""
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in list(self._listeners.get(event, ())):
            callback(*args)

    def on_create(self) -> None:
        """Called as soon as the component is attached."""
        self._emit("create")

    def on_start(self) -> None:
        """Called once before the component's first update."""
        self._emit("start")

    def on_destroy(self) -> None:
        """Called when the owning object is torn down."""
        self._emit("destroy")

    def mark_created(self) -> None:
        self._created = True

    def mark_started(self) -> None:
        self._started = True


class ActiveComponent(Component):
    """A component that can be switched on and off."""

    def __init__(self) -> None:
        super().__init__()
        self.active = True


class MonoBehavior(ActiveComponent):
    """User-defined behaviour with update and collision hooks."""

    def on_update(self) -> None:
        self._emit("update")

    def on_fixed_update(self) -> None:
        self._emit("fixed_update")

    def on_collider_enter(self, collider: Any) -> None:
        self._emit("collider_enter", collider)

    def on_collider_stay(self, collider: Any) -> None:
        self._emit("collider_stay", collider)

    def on_collider_exit(self, collider: Any) -> None:
        self._emit("collider_exit", collider)

    def on_trigger_enter(self, collider: Any) -> None:
        self._emit("trigger_enter", collider)

    def on_trigger_stay(self, collider: Any) -> None:
        self._emit("trigger_stay", collider)

    def on_trigger_exit(self, collider: Any) -> None:
        self._emit("trigger_exit", collider)


class StatComponent(Component):
    """Holds a single integer stat."""

    def __init__(self) -> None:
        super().__init__()
        self.value = 0

    def set_value(self, value: int) -> None:
        self.value = value

    def setter(self) -> Callable[[int], None]:
        """A callable that updates this stat, suitable as a callback."""
        return self.set_value