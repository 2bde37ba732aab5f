"""First-in first-out queue of pipe rectangles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from flapbird.geometry import Rect


@dataclass
class Pipe:
    """One pipe on screen and whether the bird has already scored on it."""

    rect: Rect
    counted: bool = False


class PipeQueue:
    """Pipes in the order they were added; new pipes join at the back."""

    def __init__(self, rects: Iterable[Rect] = ()) -> None:
        self._pipes: deque[Pipe] = deque(Pipe(rect) for rect in rects)

    def append(self, rect: Rect) -> Pipe:
        """Add a new, not yet counted pipe at the back and return it."""
        pipe = Pipe(rect)
        self._pipes.append(pipe)
        return pipe

    def popleft(self) -> Pipe:
        """Remove and return the front pipe."""
        if not self._pipes:
            raise IndexError("pop from an empty pipe queue")
        return self._pipes.popleft()

    def clear(self) -> None:
        self._pipes.clear()

    def __getitem__(self, index: int) -> Pipe:
        if not self._pipes:
            raise IndexError("pipe queue is empty")
        return self._pipes[index]

    def __len__(self) -> int:
        return len(self._pipes)

    def __iter__(self) -> Iterator[Pipe]:
        return iter(self._pipes)

    def describe(self) -> str:
        """The positions of all pipes as "[{x, y}, ...]"."""
        inner = ", ".join(f"{{{p.rect.x}, {p.rect.y}}}" for p in self._pipes)
        return f"[{inner}]"