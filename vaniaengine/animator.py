"""A component that plays animations on its owner's sprite."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .animation import Animation, FacingDirection
from .component import Component
from .sprite import Sprite


class AnimationState(Enum):
    NONE = "none"
    IDLE = "idle"
    WALK = "walk"


class Animator(Component):
    """Holds one animation per state and plays the current one."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self._sprite: Sprite | None = None
        self._animations: dict[AnimationState, Animation] = {}
        self._state = AnimationState.NONE
        self._current: Animation | None = None

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def current_animation(self) -> Animation | None:
        return self._current

    def awake(self) -> None:
        self._sprite = self.owner.get_component(Sprite)

    def update(self, delta_time: float) -> None:
        if self._current is None or self._state is AnimationState.NONE:
            return
        if self._current.update_frame(delta_time) and self._sprite is not None:
            frame = self._current.current_frame()
            self._sprite.load_id(frame.texture_id)
            self._sprite.set_texture_rect(frame.x, frame.y, frame.width, frame.height)

    def add_animation(self, state: AnimationState, animation: Animation) -> None:
        """Register an animation; the first one added becomes current."""
        self._animations.setdefault(state, animation)
        if self._state is AnimationState.NONE:
            self.set_animation_state(state)

    def set_animation_state(self, state: AnimationState) -> None:
        """Switch to the state's animation from its first frame."""
        if state == self._state:
            return
        animation = self._animations.get(state)
        if animation is None:
            return
        self._state = state
        self._current = animation
        animation.reset()

    def set_animation_direction(self, direction: FacingDirection) -> None:
        if self._current is not None and self._state is not AnimationState.NONE:
            self._current.face(direction)