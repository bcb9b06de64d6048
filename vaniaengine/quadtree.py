"""A region quadtree of box colliders for broad-phase collision queries."""

from __future__ import annotations

from .collider import BoxCollider
from .geometry import Rect

_THIS_TREE = -1
_CHILD_NE = 0
_CHILD_NW = 1
_CHILD_SW = 2
_CHILD_SE = 3

DEFAULT_BOUNDS = Rect(0.0, 0.0, 1920.0, 1080.0)


class QuadTree:
    """Stores colliders by the quadrant of space their boxes fall into.

    A collider whose box does not fit wholly inside one child quadrant stays
    in the node itself.
    """

    def __init__(
        self,
        max_objects: int = 5,
        max_levels: int = 5,
        level: int = 0,
        bounds: Rect | None = None,
        parent: QuadTree | None = None,
    ) -> None:
        self.max_objects = max_objects
        self.max_levels = max_levels
        self.level = level
        self._bounds = Rect(
            *(
                (bounds.left, bounds.top, bounds.width, bounds.height)
                if bounds is not None
                else (
                    DEFAULT_BOUNDS.left,
                    DEFAULT_BOUNDS.top,
                    DEFAULT_BOUNDS.width,
                    DEFAULT_BOUNDS.height,
                )
            )
        )
        self.parent = parent
        self._children: list[QuadTree] | None = None
        self._objects: list[BoxCollider] = []

    @property
    def bounds(self) -> Rect:
        """The area covered by this node."""
        return self._bounds

    @property
    def children(self) -> tuple[QuadTree, ...]:
        """The four child nodes (NE, NW, SW, SE), or nothing if not split."""
        return tuple(self._children) if self._children is not None else ()

    @property
    def objects(self) -> tuple[BoxCollider, ...]:
        """The colliders stored in this node itself."""
        return tuple(self._objects)

    def insert(self, collider: BoxCollider) -> None:
        """Add a collider to the tree."""
        if self._children is not None:
            index = self._child_index(collider.collidable())
            if index != _THIS_TREE:
                self._children[index].insert(collider)
                return

        self._objects.append(collider)

        if (
            len(self._objects) > self.max_objects
            and self.level > self.max_levels
            and self._children is None
        ):
            self._split()
            kept: list[BoxCollider] = []
            for obj in self._objects:
                index = self._child_index(obj.collidable())
                if index != _THIS_TREE:
                    self._children[index].insert(obj)
                else:
                    kept.append(obj)
            self._objects = kept

    def remove(self, collider: BoxCollider) -> None:
        """Remove the collider belonging to the same object, if stored."""
        index = self._child_index(collider.collidable())
        if index == _THIS_TREE or self._children is None:
            wanted = collider.owner.instance_id.id
            for position, obj in enumerate(self._objects):
                if obj.owner.instance_id.id == wanted:
                    del self._objects[position]
                    break
        else:
            self._children[index].remove(collider)

    def clear(self) -> None:
        """Remove every collider and every child node."""
        self._objects.clear()
        if self._children is not None:
            for child in self._children:
                child.clear()
            self._children = None

    def search(self, area: Rect) -> list[BoxCollider]:
        """Return the colliders whose boxes intersect ``area``."""
        candidates: list[BoxCollider] = []
        self._collect(area, candidates)
        return [c for c in candidates if area.intersects(c.collidable())]

    def _collect(self, area: Rect, found: list[BoxCollider]) -> None:
        found.extend(self._objects)
        if self._children is None:
            return
        index = self._child_index(area)
        if index == _THIS_TREE:
            for child in self._children:
                if child.bounds.intersects(area):
                    child._collect(area, found)
        else:
            self._children[index]._collect(area, found)

    def _child_index(self, box: Rect) -> int:
        vertical = self._bounds.left + self._bounds.width * 0.5
        horizontal = self._bounds.top + self._bounds.height * 0.5

        north = box.top < horizontal and box.height + box.top < horizontal
        south = box.top > horizontal
        west = box.left < vertical and box.left + box.width < vertical
        east = box.left > vertical

        if east:
            if north:
                return _CHILD_NE
            if south:
                return _CHILD_SE
        elif west:
            if north:
                return _CHILD_NW
            if south:
                return _CHILD_SW
        return _THIS_TREE

    def _split(self) -> None:
        width = int(self._bounds.width / 2)
        height = int(self._bounds.height / 2)
        left, top = self._bounds.left, self._bounds.top
        level = self.level + 1

        def child(x: float, y: float) -> QuadTree:
            return QuadTree(
                self.max_objects, self.max_levels, level, Rect(x, y, width, height), self
            )

        self._children = [
            child(left + width, top),
            child(left, top),
            child(left, top + height),
            child(left + width, top + height),
        ]