"""Scenes and the state machine that switches between them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any


class Scene(ABC):
    """One screen of the game, such as a splash screen or a level.

    The default hooks keep simple bookkeeping that subclasses may rely on
    or replace: whether the scene is current, the seconds it has been
    updated for, how many input polls and frames it has seen, and the
    window it last drew to.
    """

    active: bool = False
    elapsed: float = 0.0
    input_polls: int = 0
    frames: int = 0
    last_window: Any = None

    @abstractmethod
    def on_create(self) -> None:
        """Called once when the scene is added."""

    @abstractmethod
    def on_destroy(self) -> None:
        """Called once when the scene is removed."""

    def on_activate(self) -> None:
        """Called each time the scene becomes current."""
        self.active = True

    def on_deactivate(self) -> None:
        """Called each time the scene stops being current."""
        self.active = False

    def process_input(self) -> None:
        """Read input for this frame."""
        self.input_polls += 1

    def update(self, delta_time: float) -> None:
        """Advance the scene by ``delta_time`` seconds."""
        self.elapsed += delta_time

    def late_update(self, delta_time: float) -> None:
        """Run after every update of the frame."""
        self.frames += 1

    def draw(self, window: Any) -> None:
        """Draw the scene onto the window."""
        self.last_window = window


class SceneStateMachine:
    """Holds scenes by id and forwards the game loop to the current one."""

    def __init__(self) -> None:
        self._scenes: dict[int, Scene] = {}
        self._current: Scene | None = None
        self._ids = itertools.count()

    @property
    def current(self) -> Scene | None:
        return self._current

    def __contains__(self, scene_id: object) -> bool:
        return scene_id in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)

    def process_input(self) -> None:
        if self._current is not None:
            self._current.process_input()

    def update(self, delta_time: float) -> None:
        if self._current is not None:
            self._current.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        if self._current is not None:
            self._current.late_update(delta_time)

    def draw(self, window: Any) -> None:
        if self._current is not None:
            self._current.draw(window)

    def add(self, scene: Scene) -> int:
        """Store a scene, create it, and return its id."""
        scene_id = next(self._ids)
        self._scenes[scene_id] = scene
        scene.on_create()
        return scene_id

    def switch_to(self, scene_id: int) -> None:
        """Make the scene with this id current; unknown ids are ignored."""
        scene = self._scenes.get(scene_id)
        if scene is None:
            return
        if self._current is not None:
            self._current.on_deactivate()
        self._current = scene
        scene.on_activate()

    def remove(self, scene_id: int) -> None:
        """Destroy and forget the scene with this id, if present."""
        scene = self._scenes.get(scene_id)
        if scene is None:
            return
        if self._current is scene:
            self._current = None
        scene.on_destroy()
        del self._scenes[scene_id]