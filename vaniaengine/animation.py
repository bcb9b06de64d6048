"""Frame-based sprite animations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class FrameData:
    """One frame: a region of a texture and how long to show it."""

    texture_id: int
    x: int
    y: int
    width: int
    height: int
    display_time: float


class FacingDirection(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


class Animation:
    """A looping sequence of frames facing one direction."""

    def __init__(self, direction: FacingDirection) -> None:
        self._frames: list[FrameData] = []
        self._index = 0
        self._elapsed = 0.0
        self._direction = direction

    @property
    def direction(self) -> FacingDirection:
        return self._direction

    @property
    def frames(self) -> tuple[FrameData, ...]:
        return tuple(self._frames)

    def add_frame(
        self,
        texture_id: int,
        x: int,
        y: int,
        width: int,
        height: int,
        frame_time: float,
    ) -> None:
        """Append a frame to the end of the animation."""
        self._frames.append(FrameData(texture_id, x, y, width, height, frame_time))

    def current_frame(self) -> FrameData | None:
        """Return the frame being shown, or None if there are no frames."""
        if not self._frames:
            return None
        return self._frames[self._index]

    def update_frame(self, delta_time: float) -> bool:
        """Advance time; return True when the animation moved to a new frame."""
        if not self._frames:
            return False
        self._elapsed += delta_time
        if self._elapsed >= self._frames[self._index].display_time:
            self._elapsed = 0.0
            self._index = (self._index + 1) % len(self._frames)
            return True
        return False

    def reset(self) -> None:
        """Go back to the first frame."""
        self._elapsed = 0.0
        self._index = 0

    def face(self, direction: FacingDirection) -> None:
        """Turn the animation; frames are mirrored when the direction changes."""
        if direction == self._direction:
            return
        self._direction = direction
        for frame in self._frames:
            frame.x += frame.width
            frame.width = -frame.width