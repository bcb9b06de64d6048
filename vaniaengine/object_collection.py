"""The set of live game objects and the systems that serve them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .collidable_system import CollidableSystem
from .drawable_system import DrawableSystem


class ObjectCollection:
    """Owns game objects; new ones join at the next ``process_new_objects``."""

    def __init__(self) -> None:
        self._objects: list[Any] = []
        self._new_objects: list[Any] = []
        self.drawables = DrawableSystem()
        self.collidables = CollidableSystem()

    @property
    def objects(self) -> tuple[Any, ...]:
        """The live objects."""
        return tuple(self._objects)

    @property
    def pending(self) -> tuple[Any, ...]:
        """Objects added but not yet brought to life."""
        return tuple(self._new_objects)

    def add(self, obj: Any) -> None:
        self._new_objects.append(obj)

    def extend(self, objects: Iterable[Any]) -> None:
        self._new_objects.extend(objects)

    def update(self, delta_time: float) -> None:
        for obj in self._objects:
            obj.update(delta_time)
        self.collidables.update()

    def late_update(self, delta_time: float) -> None:
        for obj in self._objects:
            obj.late_update(delta_time)

    def draw(self, window: Any) -> None:
        self.drawables.draw(window)

    def process_new_objects(self) -> None:
        """Wake and start pending objects, then make them live."""
        if not self._new_objects:
            return
        for obj in self._new_objects:
            obj.awake()
        for obj in self._new_objects:
            obj.start()
        self._objects.extend(self._new_objects)
        self.drawables.add(self._new_objects)
        self.collidables.add(self._new_objects)
        self._new_objects.clear()

    def process_removals(self) -> None:
        """Drop objects queued for removal from the collection and its systems."""
        remaining = [obj for obj in self._objects if not obj.queued_for_removal]
        if len(remaining) != len(self._objects):
            self._objects = remaining
            self.drawables.process_removals()
            self.collidables.process_removals()