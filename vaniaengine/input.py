"""Keyboard state tracked from one frame to the next."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Any

import pygame

from .bitmask import BitMask


class Key(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    EXIT = 5


_BINDINGS: dict[Key, tuple[int, ...]] = {
    Key.LEFT: (pygame.K_LEFT, pygame.K_a),
    Key.RIGHT: (pygame.K_RIGHT, pygame.K_d),
    Key.UP: (pygame.K_UP, pygame.K_w),
    Key.DOWN: (pygame.K_DOWN, pygame.K_s),
    Key.EXIT: (pygame.K_ESCAPE,),
}


class Input:
    """Samples the keyboard once per frame.

    ``read_keys`` returns an object indexed by key code giving whether that
    key is held; it defaults to ``pygame.key.get_pressed``.
    """

    def __init__(self, read_keys: Callable[[], Any] | None = None) -> None:
        self._read_keys = read_keys or pygame.key.get_pressed
        self._this_frame = BitMask()
        self._last_frame = BitMask()

    def update(self) -> None:
        """Take a new sample, keeping the previous one for edge detection."""
        self._last_frame.set_mask(self._this_frame)
        state = self._read_keys()
        for key, codes in _BINDINGS.items():
            self._this_frame.set_bit(key, any(state[code] for code in codes))

    def is_key_pressed(self, key: Key) -> bool:
        """Return True while the key is held."""
        return self._this_frame.get_bit(key)

    def is_key_down(self, key: Key) -> bool:
        """Return True on the frame the key went down."""
        return self._this_frame.get_bit(key) and not self._last_frame.get_bit(key)

    def is_key_up(self, key: Key) -> bool:
        """Return True on the frame the key was released."""
        return not self._this_frame.get_bit(key) and self._last_frame.get_bit(key)