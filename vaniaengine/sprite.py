"""A component that draws a region of a texture at its owner's position."""

from __future__ import annotations

from typing import Any

import pygame

from .component import Component, Drawable
from .resources import ResourceAllocator


class Sprite(Component, Drawable):
    """Draws part of a texture; a negative rect width or height mirrors it."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.allocator: ResourceAllocator[pygame.Surface] | None = None
        self.sort_order = 0
        self.texture: pygame.Surface | None = None
        self.texture_id = -1
        self.texture_rect: tuple[int, int, int, int] | None = None
        self.scale: tuple[float, float] = (1.0, 1.0)
        self.position: tuple[float, float] = (0.0, 0.0)

    def load(self, path: str) -> None:
        """Load a texture from a file through the allocator and use it."""
        if self.allocator is None:
            return
        self.load_id(self.allocator.add(path))

    def load_id(self, texture_id: int) -> None:
        """Use the allocator's texture with this id unless it is already in use."""
        if texture_id < 0 or texture_id == self.texture_id or self.allocator is None:
            return
        self.texture_id = texture_id
        self.texture = self.allocator.get(texture_id)

    def draw(self, window: Any) -> None:
        image = self._image()
        if image is not None:
            window.draw(image, self.position)

    def late_update(self, delta_time: float) -> None:
        """Follow the owner's position."""
        self.position = self.owner.transform.position

    def set_texture_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.texture_rect = (x, y, width, height)

    def set_scale(self, x: float, y: float) -> None:
        self.scale = (x, y)

    def _image(self) -> pygame.Surface | None:
        texture = self.texture
        if texture is None:
            return None
        if self.texture_rect is None:
            x, y, width, height = 0, 0, texture.get_width(), texture.get_height()
        else:
            x, y, width, height = self.texture_rect
        flip_x = width < 0
        flip_y = height < 0
        if flip_x:
            x, width = x + width, -width
        if flip_y:
            y, height = y + height, -height
        region = pygame.Rect(x, y, width, height).clip(texture.get_rect())
        if region.width == 0 or region.height == 0:
            return None
        image = texture.subsurface(region)

        scale_x, scale_y = self.scale
        flip_x ^= scale_x < 0
        flip_y ^= scale_y < 0
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        scale_x, scale_y = abs(scale_x), abs(scale_y)
        if (scale_x, scale_y) != (1, 1):
            size = (round(image.get_width() * scale_x), round(image.get_height() * scale_y))
            image = pygame.transform.scale(image, size)
        return image