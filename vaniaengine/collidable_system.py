"""Broad- and narrow-phase collision handling between layers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .bitmask import BitMask
from .collider import BoxCollider, CollisionLayer
from .quadtree import QuadTree


def _default_layer_rules() -> dict[CollisionLayer, BitMask]:
    default = BitMask()
    default.set_bit(CollisionLayer.DEFAULT)

    player = BitMask()
    player.set_bit(CollisionLayer.DEFAULT)
    player.set_bit(CollisionLayer.TILE)

    return {
        CollisionLayer.DEFAULT: default,
        CollisionLayer.TILE: BitMask(0),
        CollisionLayer.PLAYER: player,
    }


class CollidableSystem:
    """Tracks box colliders by layer and pushes moving ones out of overlaps."""

    def __init__(self) -> None:
        self.collision_layers: dict[CollisionLayer, BitMask] = _default_layer_rules()
        self._collidables: dict[CollisionLayer, list[BoxCollider]] = {}
        self._tree = QuadTree()

    @property
    def collidables(self) -> dict[CollisionLayer, tuple[BoxCollider, ...]]:
        """The tracked colliders, grouped by the layer they had when added."""
        return {layer: tuple(items) for layer, items in self._collidables.items()}

    def add(self, objects: Iterable[Any]) -> None:
        """Track the box colliders of the given objects."""
        for obj in objects:
            collider = obj.get_component(BoxCollider)
            if collider is not None:
                self._collidables.setdefault(collider.layer, []).append(collider)

    def process_removals(self) -> None:
        """Stop tracking colliders whose owners are queued for removal."""
        for layer, items in self._collidables.items():
            self._collidables[layer] = [
                c for c in items if not c.owner.queued_for_removal
            ]

    def update(self) -> None:
        """Rebuild the spatial index and resolve collisions."""
        self._tree.clear()
        for layer in sorted(self._collidables):
            for collider in self._collidables[layer]:
                self._tree.insert(collider)
        self._resolve()

    def _resolve(self) -> None:
        for layer in sorted(self._collidables):
            rules = self.collision_layers.get(layer, BitMask())
            if rules.bits == 0:
                continue
            for collidable in self._collidables[layer]:
                if collidable.owner.transform.is_static:
                    continue
                own_id = collidable.owner.instance_id.id
                for other in self._tree.search(collidable.collidable()):
                    if other.owner.instance_id.id == own_id:
                        continue
                    mask = self.collision_layers.get(collidable.layer, BitMask())
                    if not mask.get_bit(other.layer):
                        continue
                    manifold = collidable.intersects(other)
                    if manifold.colliding:
                        collidable.resolve_overlap(manifold)