"""Game objects: containers of components."""

from __future__ import annotations

from collections import deque
from typing import Callable, TypeVar

from engine2d.components import BaseObject, Component, MonoBehavior
from engine2d.transform import Transform

C = TypeVar("C", bound=Component)
ComponentHook = Callable[[Component], None]


class GameObject(BaseObject):
    """Owns components; always has a Transform.

    ``on_attach`` and ``on_detach`` are told about every component that is
    added or removed, so that systems can register and unregister it.
    """

    def __init__(
        self,
        name: str = "",
        on_attach: ComponentHook | None = None,
        on_detach: ComponentHook | None = None,
    ) -> None:
        super().__init__(name)
        self._on_attach = on_attach
        self._on_detach = on_detach
        self._monobehaviors: list[MonoBehavior] = []
        self._components: list[Component] = []
        self._start_queue: deque[Component] = deque()
        self._should_remove = False
        self._active_in_scene = True
        self._transform = self.add_component(Transform)

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def monobehaviors(self) -> tuple[MonoBehavior, ...]:
        return tuple(self._monobehaviors)

    @property
    def is_marked_for_removal(self) -> bool:
        return self._should_remove

    @property
    def is_active_in_scene(self) -> bool:
        return self._active_in_scene

    def add_component(self, component_type: type[C]) -> C:
        """Create, attach and initialise a component of the given type."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component type")
        comp = component_type()
        comp.owner = self
        comp.assign_instance_id()
        self._attach(comp)
        return comp

    def get_component(self, component_type: type[C]) -> C | None:
        """First component of exactly this type, or None."""
        if component_type is MonoBehavior and self._monobehaviors:
            return self._monobehaviors[0]  # type: ignore[return-value]
        return next((c for c in self._components if type(c) is component_type), None)  # type: ignore[return-value]

    def process_start_queue(self) -> None:
        while self._start_queue:
            comp = self._start_queue.popleft()
            comp.on_start()
            comp.mark_started()

    def destroy(self) -> None:
        """Destroy every component and detach it."""
        for comp in self._components:
            comp.on_destroy()
            self._notify(self._on_detach, comp)
        self._components.clear()
        for mb in self._monobehaviors:
            mb.on_destroy()
            self._notify(self._on_detach, mb)
        self._monobehaviors.clear()

    def remove_component(self, component: Component) -> None:
        kept = []
        for comp in self._components:
            if comp is component:
                self._notify(self._on_detach, comp)
            else:
                kept.append(comp)
        self._components = kept

    def mark_for_removal(self) -> None:
        self._should_remove = True

    def mark_setup_complete(self) -> None:
        self._active_in_scene = False

    def _attach(self, comp: Component) -> None:
        if not comp:
            raise ValueError(f"[ {comp.name} ] is INVALID")
        if isinstance(comp, MonoBehavior):
            self._monobehaviors.append(comp)
        else:
            self._components.append(comp)
        self._notify(self._on_attach, comp)
        comp.on_create()
        comp.mark_created()
        self._start_queue.append(comp)

    @staticmethod
    def _notify(hook: ComponentHook | None, comp: Component) -> None:
        if hook is not None:
            hook(comp)