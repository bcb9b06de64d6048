"""Game objects: containers of components."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Component, Drawable, InstanceId, Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """An entity made of components; every object has a transform and an id."""

    def __init__(self) -> None:
        self._components: list[Component] = []
        self.drawable: Drawable | None = None
        self.queued_for_removal = False
        self.transform: Transform = self.add_component(Transform)
        self.instance_id: InstanceId = self.add_component(InstanceId)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def _reversed_components(self) -> list[Component]:
        return list(reversed(self._components))

    def awake(self) -> None:
        for component in self._reversed_components():
            component.awake()

    def start(self) -> None:
        for component in self._reversed_components():
            component.start()

    def update(self, delta_time: float) -> None:
        for component in self._reversed_components():
            component.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for component in self._reversed_components():
            component.late_update(delta_time)

    def draw(self, window: Any) -> None:
        if self.drawable is not None:
            self.drawable.draw(window)

    def add_component(self, component_type: type[C]) -> C:
        """Attach a component of this type, or return the one already attached."""
        existing = self.get_component(component_type)
        if existing is not None:
            return existing
        component = component_type(self)
        self._components.append(component)
        if isinstance(component, Drawable):
            self.drawable = component
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component that is an instance of the type, or None."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )

    def queue_for_removal(self) -> None:
        self.queued_for_removal = True