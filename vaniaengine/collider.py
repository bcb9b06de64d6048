"""Collider components and overlap resolution."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .component import Component
from .geometry import Rect


class CollisionLayer(IntEnum):
    DEFAULT = 1
    PLAYER = 2
    TILE = 3


@dataclass
class Manifold:
    """Result of an intersection test."""

    colliding: bool = False
    other: Rect | None = None


class Collider(Component, ABC):
    """A component that can test for and resolve overlaps with others."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.layer = CollisionLayer.DEFAULT

    @abstractmethod
    def intersects(self, other: Collider) -> Manifold:
        """Test this collider against another."""

    @abstractmethod
    def resolve_overlap(self, manifold: Manifold) -> None:
        """Move the owner out of the overlap described by the manifold."""


class BoxCollider(Collider):
    """An axis-aligned box centred on the owner's position."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self._aabb = Rect()
        self.offset: tuple[float, float] = (0.0, 0.0)

    def set_collidable(self, rect: Rect) -> None:
        self._aabb = dataclasses.replace(rect)
        self._follow_owner()

    def collidable(self) -> Rect:
        """Return the box, moved to the owner's current position."""
        self._follow_owner()
        return self._aabb

    def _follow_owner(self) -> None:
        x, y = self.owner.transform.position
        self._aabb.left = x - self._aabb.width / 2 + self.offset[0]
        self._aabb.top = y - self._aabb.height / 2 + self.offset[1]

    def intersects(self, other: Collider) -> Manifold:
        if isinstance(other, BoxCollider):
            mine = self.collidable()
            theirs = other.collidable()
            if mine.intersects(theirs):
                return Manifold(True, theirs)
        return Manifold()

    def resolve_overlap(self, manifold: Manifold) -> None:
        """Push the owner out along the axis of greatest centre separation."""
        transform = self.owner.transform
        if transform.is_static or manifold.other is None:
            return
        mine = self.collidable()
        theirs = manifold.other
        x_diff = mine.center[0] - theirs.center[0]
        y_diff = mine.center[1] - theirs.center[1]

        if abs(x_diff) > abs(y_diff):
            if x_diff > 0:
                resolve = theirs.right - mine.left
            else:
                resolve = -(mine.right - theirs.left)
            transform.add_position(resolve, 0)
        else:
            if y_diff > 0:
                resolve = theirs.bottom - mine.top
            else:
                resolve = -(mine.bottom - theirs.top)
            transform.add_position(0, resolve)