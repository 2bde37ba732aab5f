"""Axis-aligned integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and its size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles share any area; touching edges do not count."""
        return not (
            self.bottom <= other.y
            or self.y >= other.bottom
            or self.right <= other.x
            or self.x >= other.right
        )

    def moved(self, dx: int, dy: int) -> Rect:
        """A copy shifted by the given offsets."""
        return Rect(self.x + dx, self.y + dy, self.w, self.h)