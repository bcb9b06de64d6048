"""The top-level game: window, scenes and frame timing."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .game_scene import GameScene
from .input import Input
from .resources import ResourceAllocator
from .scene import SceneStateMachine
from .splash import SplashScreen

TITLE = "Metroidvania Stuffer"


@dataclass
class WorkingDirectory:
    """The directory prefix that resource file names are joined to."""

    path: str = "./"


class Game:
    """Owns the window and the scenes and drives one frame at a time."""

    def __init__(
        self,
        window: Any | None = None,
        working_dir: WorkingDirectory | None = None,
        texture_allocator: ResourceAllocator[Any] | None = None,
        input: Input | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if window is None:
            from .window import Window

            window = Window(TITLE)
        self.window = window
        self._clock = clock
        self._last_time = clock()
        self.delta_time = 0.0
        self.working_dir = working_dir if working_dir is not None else WorkingDirectory()
        self.texture_allocator = (
            texture_allocator if texture_allocator is not None else ResourceAllocator()
        )
        self.scenes = SceneStateMachine()

        self.splash_screen = SplashScreen(
            self.working_dir, self.scenes, self.window, self.texture_allocator
        )
        self.game_scene = GameScene(self.working_dir, self.texture_allocator, input)

        splash_id = self.scenes.add(self.splash_screen)
        game_id = self.scenes.add(self.game_scene)
        self.splash_screen.set_switch_scene(game_id)
        self.scenes.switch_to(splash_id)

        self.calculate_delta_time()

    def capture_input(self) -> None:
        self.scenes.process_input()

    def update(self) -> None:
        self.window.update()
        self.scenes.update(self.delta_time)

    def late_update(self) -> None:
        self.scenes.late_update(self.delta_time)

    def draw(self) -> None:
        self.window.begin_draw()
        self.scenes.draw(self.window)
        self.window.end_draw()

    def calculate_delta_time(self) -> None:
        """Measure the seconds since the previous call."""
        now = self._clock()
        self.delta_time = now - self._last_time
        self._last_time = now

    def is_running(self) -> bool:
        return self.window.is_open()