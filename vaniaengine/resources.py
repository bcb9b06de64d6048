"""Loading resources once and handing them out by id."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Generic, TypeVar

import pygame

T = TypeVar("T")


def load_texture(path: str) -> pygame.Surface:
    """Load an image file; raise OSError if it cannot be read."""
    try:
        return pygame.image.load(path)
    except pygame.error as exc:
        raise OSError(f"cannot load texture {path!r}: {exc}") from exc


class ResourceAllocator(Generic[T]):
    """Caches resources by file path and identifies them by integer id.

    ``loader`` turns a path into a resource and raises OSError on failure.
    """

    def __init__(self, loader: Callable[[str], T] = load_texture) -> None:
        self._loader = loader
        self._ids = itertools.count()
        self._resources: dict[str, tuple[int, T]] = {}

    def add(self, path: str) -> int:
        """Load ``path`` if needed and return its id."""
        if path in self._resources:
            return self._resources[path][0]
        resource = self._loader(path)
        resource_id = next(self._ids)
        self._resources[path] = (resource_id, resource)
        return resource_id

    def remove(self, resource_id: int) -> None:
        """Forget the resource with this id, if any."""
        self._resources = {
            path: entry
            for path, entry in self._resources.items()
            if entry[0] != resource_id
        }

    def get(self, resource_id: int) -> T | None:
        """Return the resource with this id, or None."""
        return next(
            (res for rid, res in self._resources.values() if rid == resource_id),
            None,
        )

    def has(self, resource_id: int) -> bool:
        return self.get(resource_id) is not None

    def __len__(self) -> int:
        return len(self._resources)