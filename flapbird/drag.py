"""A square that can be clicked, dragged around and put back with escape."""

from __future__ import annotations

import argparse
from enum import Enum

import pygame

from flapbird.geometry import Rect
from flapbird.timing import WaitBudget

WIDTH = 1280
HEIGHT = 720
WAIT_STARTING_POINT = 300

WHITE = (0xFF, 0xFF, 0xFF)
GREEN = (0x00, 0xFF, 0x00)


class DragState(Enum):
    DEFAULT = 0
    CLICKED = 1
    DRAGGING = 2
    CANCELLED = 3


class Draggable:
    """A rectangle driven by pointer presses, motions, releases and escape.

    A cancelled drag puts the rectangle back where it was before the press;
    that happens on the next event after escape, whatever that event is.
    """

    def __init__(self, rect: Rect) -> None:
        self.rect = rect
        self.state = DragState.DEFAULT
        self.original = (rect.x, rect.y)
        self.pointer = (0, 0)

    def _settle(self) -> bool:
        if self.state is not DragState.CANCELLED:
            return False
        x, y = self.original
        self.rect = Rect(x, y, self.rect.w, self.rect.h)
        self.state = DragState.DEFAULT
        return True

    def _follow(self, x: int, y: int) -> None:
        old_x, old_y = self.pointer
        self.rect = self.rect.moved(x - old_x, y - old_y)
        self.pointer = (x, y)

    def _idle(self, x: int, y: int) -> None:
        if self._settle():
            return
        if self.state is DragState.DRAGGING:
            self._follow(x, y)

    def press(self, x: int, y: int) -> None:
        """A button press at the given point; grabs the rectangle when it is hit."""
        if self._settle():
            return
        if self.state is DragState.DEFAULT:
            self.pointer = (x, y)
            self.original = (self.rect.x, self.rect.y)
            inside = self.rect.x <= x <= self.rect.right and self.rect.y <= y <= self.rect.bottom
            if inside:
                self.state = DragState.CLICKED
        elif self.state is DragState.DRAGGING:
            self._follow(x, y)

    def motion(self, x: int, y: int) -> None:
        """The pointer moved to the given point."""
        if self._settle():
            return
        if self.state is DragState.CLICKED:
            self.state = DragState.DRAGGING
        elif self.state is DragState.DRAGGING:
            self._follow(x, y)

    def release(self) -> DragState | None:
        """The button was released; return the state the gesture ended from, if any."""
        if self._settle():
            return None
        if self.state in (DragState.CLICKED, DragState.DRAGGING):
            ended = self.state
            self.state = DragState.DEFAULT
            return ended
        return None

    def escape(self) -> bool:
        """The escape key was pressed; return whether a drag was cancelled."""
        if self._settle():
            return False
        if self.state is DragState.DRAGGING:
            self.state = DragState.CANCELLED
            return True
        return False


_MESSAGES = {DragState.CLICKED: "Clicked", DragState.DRAGGING: "Dragged"}


def main(argv: list[str] | None = None) -> int:
    """Show the draggable square in a window until it is closed."""
    parser = argparse.ArgumentParser(prog="flapbird-drag", description="Drag a square around.")
    parser.parse_args(argv)

    size = HEIGHT / 7.0
    square = Draggable(
        Rect(int(WIDTH / 2 - size / 2), int(HEIGHT / 2.0 - size / 2), int(size), int(size))
    )
    budget = WaitBudget(WAIT_STARTING_POINT)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("2.0")
        running = True
        while running:
            before = pygame.time.get_ticks()
            if budget.remaining > 0:
                event = pygame.event.wait(budget.remaining)
            else:
                event = pygame.event.poll()

            if event.type != pygame.NOEVENT:
                budget.spend(max(0, pygame.time.get_ticks() - before))
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    square.press(*event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    square.motion(*event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    ended = square.release()
                    if ended is not None:
                        print(_MESSAGES[ended])
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    if square.escape():
                        print("Cancelled")
                else:
                    square._idle(*pygame.mouse.get_pos())
            else:
                budget.expire()

            screen.fill(WHITE)
            rect = square.rect
            screen.fill(GREEN, pygame.Rect(rect.x, rect.y, rect.w, rect.h))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())