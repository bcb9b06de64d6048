"""Draws objects in order of their drawable's sort order."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class DrawableSystem:
    """Keeps the drawable objects, sorted by sort order, and draws them."""

    def __init__(self) -> None:
        self._drawables: list[Any] = []

    @property
    def drawables(self) -> tuple[Any, ...]:
        """The tracked objects in drawing order."""
        return tuple(self._drawables)

    def add(self, objects: Iterable[Any]) -> None:
        """Track the objects that have a drawable, then re-sort."""
        self._drawables.extend(obj for obj in objects if obj.drawable is not None)
        self._drawables.sort(key=lambda obj: obj.drawable.sort_order)

    def process_removals(self) -> None:
        """Stop tracking objects queued for removal."""
        self._drawables = [
            obj for obj in self._drawables if not obj.queued_for_removal
        ]

    def draw(self, window: Any) -> None:
        for obj in self._drawables:
            obj.draw(window)