"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """A rectangle given by its top-left corner and its size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width * 0.5, self.top + self.height * 0.5)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap by a non-zero area.

        Negative widths and heights are allowed; rectangles that only share
        an edge do not intersect.
        """
        min_x1, max_x1 = sorted((self.left, self.right))
        min_y1, max_y1 = sorted((self.top, self.bottom))
        min_x2, max_x2 = sorted((other.left, other.right))
        min_y2, max_y2 = sorted((other.top, other.bottom))

        inter_left = max(min_x1, min_x2)
        inter_top = max(min_y1, min_y2)
        inter_right = min(max_x1, max_x2)
        inter_bottom = min(max_y1, max_y2)

        return inter_left < inter_right and inter_top < inter_bottom