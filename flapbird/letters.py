"""Coloured letter blocks that fade in and then scatter across the window."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace

import pygame

from flapbird.geometry import Rect

WIDTH = 1280
HEIGHT = 720
OPAQUE = 0xFF

WHITE = (0xFF, 0xFF, 0xFF)
BLUE = (0x00, 0x86, 0xF8)
RED = (0xFF, 0x41, 0x31)
YELLOW = (0xFF, 0xBD, 0x00)
GREEN = (0x00, 0xAA, 0x4B)

KEYBOARD_SPEED = 20
WAIT_STARTING_POINT = 500
MAX_RECTS = 10

Color = tuple[int, int, int]

# (column, blocks above the middle line, height in blocks, colour)
_LETTER_SPECS = (
    (2, 1, 2, BLUE),
    (4, 1, 1, RED),
    (6, 1, 1, YELLOW),
    (8, 1, 2, BLUE),
    (10, 2, 2, GREEN),
    (12, 1, 1, RED),
)


@dataclass
class Letter:
    """One coloured block of the word."""

    rect: Rect
    color: Color


def make_letters(width: int, height: int) -> list[Letter]:
    """The six blocks of the word, laid out along the middle of the window."""
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    size = width / 15.0
    mid_y = height / 2.0
    return [
        Letter(
            Rect(int(column * size), int(mid_y - up * size), int(size), int(tall * size)),
            color,
        )
        for column, up, tall, color in _LETTER_SPECS
    ]


def _scatter(letters: Sequence[Letter], speed: int, height: int, width: int, margin: int) -> int:
    if len(letters) < 2:
        raise ValueError("at least two letters are needed")
    anchor = letters[1]
    floor = height // 2 - width / 15.0
    if anchor.rect.y >= height:
        anchor.rect = replace(anchor.rect, y=height - margin)
        speed = -speed
    elif anchor.rect.y <= floor:
        anchor.rect = replace(anchor.rect, y=int(floor - margin))
        speed = -speed

    for index, letter in enumerate(letters):
        if index == 0:
            letter.rect = letter.rect.moved(-speed, 0)
        elif index == 5:
            letter.rect = letter.rect.moved(speed, 0)
        elif index % 2 == 0:
            letter.rect = letter.rect.moved(0, -speed)
        else:
            letter.rect = letter.rect.moved(0, speed)
    return speed


def scatter_letters(letters: Sequence[Letter], speed: int, height: int, width: int) -> int:
    """Move the letters one step apart and return the speed for the next step.

    The second letter bounces between the middle of the window and its bottom
    edge; each bounce reverses the speed.
    """
    return _scatter(letters, speed, height, width, 0)


def scatter_moving_letters(letters: Sequence[Letter], speed: int, height: int, width: int) -> int:
    """Like :func:`scatter_letters`, but a bounce leaves the anchor one pixel inside."""
    return _scatter(letters, speed, height, width, 1)


class FadeIn:
    """Opacity that climbs by a fixed step until it is fully opaque."""

    def __init__(self, step: int) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self.step = step
        self.opacity = 0
        self.done = False

    def advance(self) -> int:
        """Take one step and return the new opacity."""
        if self.done:
            return self.opacity
        if self.opacity + self.step > OPAQUE:
            self.opacity = OPAQUE
            self.done = True
        else:
            self.opacity += self.step
        return self.opacity


class RectStack:
    """Coloured rectangles, newest first, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_RECTS) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[tuple[Rect, Color]] = deque()

    def push(self, rect: Rect, color: Color) -> bool:
        """Add a rectangle on top; return False when the stack is already full."""
        if len(self._items) >= self.capacity:
            return False
        self._items.appendleft((rect, color))
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[Rect, Color]]:
        return iter(self._items)


def _fill(screen: pygame.Surface, rect: Rect, color: Color, alpha: int = OPAQUE) -> None:
    if rect.w <= 0 or rect.h <= 0:
        return
    piece = pygame.Surface((rect.w, rect.h))
    piece.fill(color)
    piece.set_alpha(alpha)
    screen.blit(piece, (rect.x, rect.y))


def _draw_letters(screen: pygame.Surface, letters: Sequence[Letter], opacity: int) -> None:
    for letter in letters:
        _fill(screen, letter.rect, letter.color, opacity)


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def _run_fade(screen: pygame.Surface) -> None:
    letters = make_letters(WIDTH, HEIGHT)
    fade = FadeIn(30)
    speed = 20
    while not _quit_requested():
        if not fade.done:
            fade.advance()
            if fade.done:
                pygame.time.delay(2000)
        else:
            speed = scatter_letters(letters, speed, HEIGHT, WIDTH)
        screen.fill(WHITE)
        _draw_letters(screen, letters, fade.opacity)
        pygame.display.flip()
        pygame.time.delay(100)


def _run_clicks(screen: pygame.Surface) -> None:
    letters = make_letters(WIDTH, HEIGHT)
    size = int(WIDTH / 15.0)
    fade = FadeIn(5)
    speed = 5
    stack = RectStack(MAX_RECTS)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                print(f"left click x:{x} y:{y}")
                if event.button == 1:
                    print("Inserting new rectangle.")
                    color = (random.randrange(255), random.randrange(255), random.randrange(255))
                    stack.push(Rect(x, y, size, size), color)

        if not fade.done:
            fade.advance()
            if fade.done:
                pygame.time.delay(2000)
        else:
            speed = scatter_letters(letters, speed, HEIGHT, WIDTH)

        screen.fill(WHITE)
        _draw_letters(screen, letters, fade.opacity)
        for rect, color in stack:
            _fill(screen, rect, color)
        pygame.display.flip()
        pygame.time.delay(1000 // 60)


def _steer(letter: Letter, key: int) -> None:
    rect = letter.rect
    if key == pygame.K_w:
        rect = rect.moved(0, -KEYBOARD_SPEED) if rect.y > 0 else replace(rect, y=0)
    elif key == pygame.K_a:
        rect = rect.moved(-KEYBOARD_SPEED, 0) if rect.x > 0 else replace(rect, y=0)
    elif key == pygame.K_d:
        limit = WIDTH - rect.w
        rect = rect.moved(KEYBOARD_SPEED, 0) if rect.x < limit else replace(rect, x=limit)
    elif key == pygame.K_s:
        limit = HEIGHT - rect.h
        rect = rect.moved(0, KEYBOARD_SPEED) if rect.y < limit else replace(rect, y=limit)
    letter.rect = rect


def _run_keys(screen: pygame.Surface) -> None:
    letters = make_letters(WIDTH, HEIGHT)
    g, o, o_2, g_2, l, e = letters
    moving = [g, g_2, l, e]
    size = WIDTH / 15.0
    fade = FadeIn(5)
    speed = 20
    wait = WAIT_STARTING_POINT
    running = True
    while running:
        if not fade.done:
            pygame.event.pump()
            fade.advance()
            if not fade.done:
                pygame.time.delay(50)
                print(f"opacity: {fade.opacity}")
        else:
            before = pygame.time.get_ticks()
            event = pygame.event.wait(wait) if wait > 0 else pygame.event.poll()
            if event.type != pygame.NOEVENT:
                wait = max(0, wait - (pygame.time.get_ticks() - before))
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    mouse_x, mouse_y = event.pos
                    o.rect = replace(
                        o.rect, x=int(mouse_x - size / 2), y=int(mouse_y - size / 2)
                    )
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        _steer(o_2, event.key)
            else:
                wait = WAIT_STARTING_POINT
                speed = scatter_moving_letters(moving, speed, HEIGHT, WIDTH)

        screen.fill(WHITE)
        _draw_letters(screen, letters, fade.opacity)
        pygame.display.flip()


_MODES = {
    "fade": ("1.2.3", _run_fade),
    "clicks": ("1.4.1", _run_clicks),
    "keys": ("1.5.3", _run_keys),
}


def main(argv: list[str] | None = None) -> int:
    """Show the letter animation in a window until it is closed."""
    parser = argparse.ArgumentParser(prog="flapbird-letters", description="Animate letter blocks.")
    parser.add_argument("mode", nargs="?", choices=tuple(_MODES), default="fade")
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