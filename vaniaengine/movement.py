"""A component that moves its owner with the arrow or WASD keys."""

from __future__ import annotations

from typing import Any

from .animation import FacingDirection
from .animator import AnimationState, Animator
from .component import Component
from .input import Input, Key


class KeyboardMovement(Component):
    """Moves the owner at ``move_speed`` units per second while keys are held."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.move_speed = 300
        self.input: Input | None = None
        self._animator: Animator | None = None

    def awake(self) -> None:
        self._animator = self.owner.get_component(Animator)

    def update(self, delta_time: float) -> None:
        if self.input is None:
            return
        animator = self._animator

        x_move = 0
        if self.input.is_key_pressed(Key.LEFT):
            x_move = -self.move_speed
            if animator is not None:
                animator.set_animation_direction(FacingDirection.LEFT)
        elif self.input.is_key_pressed(Key.RIGHT):
            x_move = self.move_speed
            if animator is not None:
                animator.set_animation_direction(FacingDirection.RIGHT)

        y_move = 0
        if self.input.is_key_pressed(Key.UP):
            y_move = -self.move_speed
        elif self.input.is_key_pressed(Key.DOWN):
            y_move = self.move_speed

        self.owner.transform.add_position(x_move * delta_time, y_move * delta_time)

        if animator is not None:
            moving = x_move != 0 or y_move != 0
            animator.set_animation_state(
                AnimationState.WALK if moving else AnimationState.IDLE
            )