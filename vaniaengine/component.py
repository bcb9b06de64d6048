"""Base component types attached to game objects."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, ClassVar


class Component:
    """A piece of behaviour owned by a game object."""

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def awake(self) -> None:
        """Called once when the owner is created."""

    def start(self) -> None:
        """Called once after every component has been woken."""

    def update(self, delta_time: float) -> None:
        """Called every frame."""

    def late_update(self, delta_time: float) -> None:
        """Called every frame after all updates."""


class Transform(Component):
    """Position of an object in the world."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.x = 0.0
        self.y = 0.0
        self.is_static = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def add_position(self, x: float, y: float) -> None:
        self.x += x
        self.y += y


class InstanceId(Component):
    """A number unique to each object created in this process."""

    _counter: ClassVar[itertools.count] = itertools.count()

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.id = next(InstanceId._counter)


class Drawable(ABC):
    """Something that can draw itself; lower sort orders draw first."""

    sort_order: int = 0

    @abstractmethod
    def draw(self, window: Any) -> None:
        """Draw onto the given window."""