"""A scene that shows an image for a few seconds, then moves on."""

from __future__ import annotations

from typing import Any

from .resources import ResourceAllocator
from .scene import Scene, SceneStateMachine

SPLASH_IMAGE = "SplashTest.png"
SHOW_FOR_SECONDS = 3.0


class SplashScreen(Scene):
    """Shows the splash image, then switches to another scene."""

    def __init__(
        self,
        working_dir: Any,
        state_machine: SceneStateMachine,
        window: Any,
        texture_allocator: ResourceAllocator[Any],
    ) -> None:
        self.working_dir = working_dir
        self.state_machine = state_machine
        self.window = window
        self.texture_allocator = texture_allocator
        self.show_for_seconds = SHOW_FOR_SECONDS
        self.current_seconds = 0.0
        self.switch_to_state = 0
        self.texture: Any | None = None

    def on_create(self) -> None:
        try:
            texture_id = self.texture_allocator.add(self.working_dir.path + SPLASH_IMAGE)
        except OSError:
            return
        self.texture = self.texture_allocator.get(texture_id)

    def on_destroy(self) -> None:
        """Nothing to release."""

    def on_activate(self) -> None:
        """Restart the countdown each time the scene is shown."""
        self.current_seconds = 0.0

    def set_switch_scene(self, scene_id: int) -> None:
        """Set the id of the scene to show once the splash is over."""
        self.switch_to_state = scene_id

    def update(self, delta_time: float) -> None:
        self.current_seconds += delta_time
        if self.current_seconds >= self.show_for_seconds:
            self.state_machine.switch_to(self.switch_to_state)

    def draw(self, window: Any) -> None:
        if self.texture is not None:
            window.draw(self.texture, (0.0, 0.0))