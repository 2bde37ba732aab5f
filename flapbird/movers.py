"""Squares moved by a timer, by the keyboard and by the mouse, and a race between them."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

import pygame

from flapbird.geometry import Rect
from flapbird.timing import WaitBudget

WIDTH = 1280
HEIGHT = 720

WHITE = (0xFF, 0xFF, 0xFF)
RED = (0xFF, 0x00, 0x00)
GREEN = (0x00, 0xFF, 0x00)
BLUE = (0x00, 0x00, 0xFF)

TIME_SPEED = 40
KEYBOARD_SPEED = 20

RACERS = ("Red", "Blue", "Green")


def steer(rect: Rect, key: str, speed: int, width: int, height: int) -> Rect:
    """Move the rectangle one step for a w/a/s/d key, keeping it on screen.

    At the left edge the "a" key puts the rectangle at the top of the window
    instead of moving it. Any other key leaves the rectangle where it is.
    """
    if key == "w":
        return rect.moved(0, -speed) if rect.y > 0 else replace(rect, y=0)
    if key == "a":
        return rect.moved(-speed, 0) if rect.x > 0 else replace(rect, y=0)
    if key == "d":
        limit = width - rect.w
        return rect.moved(speed, 0) if rect.x < limit else replace(rect, x=limit)
    if key == "s":
        limit = height - rect.h
        return rect.moved(0, speed) if rect.y < limit else replace(rect, y=limit)
    return rect


def bounce_vertical(rect: Rect, speed: int, height: int) -> tuple[Rect, int]:
    """Move the rectangle one step up or down, turning back when it is out of the window.

    Returns the moved rectangle and the speed to use for the next step.
    """
    if rect.y < 0 or rect.bottom > height:
        speed = -speed
        rect = rect.moved(0, speed)
    return rect.moved(0, speed), speed


def center_on(rect: Rect, x: int, y: int) -> Rect:
    """The rectangle moved so that its centre is at the given point."""
    return replace(rect, x=int(x - rect.w / 2), y=int(y - rect.h / 2))


@dataclass
class Race:
    """Three racers heading right towards a finish line."""

    finish_x: int
    stopped: set[int] = field(default_factory=set)
    winner: int | None = None

    @property
    def winner_name(self) -> str | None:
        return None if self.winner is None else RACERS[self.winner]

    def check_finish(self, rects: Iterable[Rect]) -> str | None:
        """Stop every racer that reached the line; return the winner's name when first decided."""
        rects = list(rects)
        if len(rects) != len(RACERS):
            raise ValueError(f"expected {len(RACERS)} racers, got {len(rects)}")
        new_winner = None
        for index, rect in enumerate(rects):
            if rect.right < self.finish_x:
                continue
            self.stopped.add(index)
            if self.winner is None:
                self.winner = index
                new_winner = RACERS[index]
        return new_winner

    def finished(self) -> bool:
        """Whether every racer has stopped at the line."""
        return len(self.stopped) == len(RACERS)


def _pg(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


def _next_event(budget: WaitBudget) -> pygame.event.Event:
    before = pygame.time.get_ticks()
    if budget.remaining > 0:
        event = pygame.event.wait(budget.remaining)
    else:
        event = pygame.event.poll()
    if event.type != pygame.NOEVENT:
        budget.spend(max(0, pygame.time.get_ticks() - before))
    return event


def _draw(screen: pygame.Surface, timed: Rect, keyed: Rect, mouse: Rect) -> None:
    screen.fill(WHITE)
    screen.fill(RED, _pg(timed))
    screen.fill(BLUE, _pg(keyed))
    screen.fill(GREEN, _pg(mouse))


def _run_chase(screen: pygame.Surface, wait_start: int) -> None:
    size = WIDTH / 7.0
    mid_y = HEIGHT / 2.0

    def square(column: int) -> Rect:
        return Rect(int(column * size), int(mid_y - size), int(size), int(size))

    timed, keyed, mouse = square(1), square(3), square(5)
    time_speed = TIME_SPEED
    budget = WaitBudget(wait_start)

    while True:
        event = _next_event(budget)
        if event.type != pygame.NOEVENT:
            if event.type == pygame.QUIT:
                break
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.key == pygame.K_ESCAPE:
                    break
                keyed = steer(keyed, pygame.key.name(event.key), KEYBOARD_SPEED, WIDTH, HEIGHT)
        else:
            budget.expire()
            timed, time_speed = bounce_vertical(timed, time_speed, HEIGHT)

        mouse = center_on(mouse, *pygame.mouse.get_pos())
        _draw(screen, timed, keyed, mouse)
        pygame.display.flip()


def _slide(rect: Rect, key: str, speed: int, width: int) -> Rect:
    if key == "a":
        return rect.moved(-speed, 0) if rect.x > 0 else replace(rect, x=0)
    if key == "d":
        limit = width - rect.w
        return rect.moved(speed, 0) if rect.x < limit else replace(rect, x=limit)
    return rect


def _run_race(screen: pygame.Surface) -> None:
    size = HEIGHT / 7.0
    side = int(size)
    timed = Rect(0, int(size), side, side)
    keyed = Rect(0, int(size * 3), side, side)
    mouse = Rect(0, int(size * 5), side, side)
    race = Race(int(WIDTH - size))
    budget = WaitBudget(300)

    while True:
        event = _next_event(budget)
        if event.type != pygame.NOEVENT:
            if event.type == pygame.QUIT:
                break
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.key == pygame.K_ESCAPE:
                    break
                speed = 0 if 1 in race.stopped else KEYBOARD_SPEED
                keyed = _slide(keyed, pygame.key.name(event.key), speed, WIDTH)
        else:
            budget.expire()
            if 0 not in race.stopped:
                timed = timed.moved(TIME_SPEED, 0)

        if 2 not in race.stopped:
            mouse_x, _ = pygame.mouse.get_pos()
            mouse = replace(mouse, x=int(mouse_x - size))

        _draw(screen, timed, keyed, mouse)
        pygame.draw.line(screen, RED, (race.finish_x, HEIGHT), (race.finish_x, 0))

        name = race.check_finish((timed, keyed, mouse))
        if name is not None:
            print(f"{name} wins!")

        pygame.display.flip()
        if race.finished():
            break


_MODES = {
    "time": ("1.5.1", lambda screen: _run_chase(screen, 300)),
    "budget": ("1.5.2", lambda screen: _run_chase(screen, 500)),
    "race": ("1.5.1", _run_race),
}


def main(argv: list[str] | None = None) -> int:
    """Show the moving squares in a window until it is closed."""
    parser = argparse.ArgumentParser(prog="flapbird-movers", description="Move squares around.")
    parser.add_argument("mode", nargs="?", choices=tuple(_MODES), default="time")
    args = parser.parse_args(argv)

    title, run = _MODES[args.mode]
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(title)
        run(screen)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())