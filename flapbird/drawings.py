"""Static drawings made of lines, points, rectangles, pies, ellipses and thick lines."""

from __future__ import annotations

import argparse
import math

import pygame

WIDTH = 500
HEIGHT = 500

WHITE = (0xFF, 0xFF, 0xFF)
GREEN = (0x00, 0xFF, 0x00)
RED = (0xFF, 0x00, 0x00)
BLUE = (0x00, 0x00, 0xFF)
PIE_COLOR = (0xCD, 0x00, 0xCD)
THICK_LINE_COLOR = (0xAA, 0xCC, 0x00)

Point = tuple[float, float]


def thick_line_polygon(x1: float, y1: float, x2: float, y2: float, width: float) -> list[Point]:
    """The four corners of a line segment drawn ``width`` pixels wide."""
    if width < 1:
        raise ValueError("width must be at least 1")
    half = width / 2
    dx = x2 - x1
    dy = y2 - y1
    length = math.hypot(dx, dy)
    if length == 0:
        return [
            (x1 - half, y1 - half),
            (x1 + half, y1 - half),
            (x1 + half, y1 + half),
            (x1 - half, y1 + half),
        ]
    px = -dy / length * half
    py = dx / length * half
    return [
        (x1 + px, y1 + py),
        (x1 - px, y1 - py),
        (x2 - px, y2 - py),
        (x2 + px, y2 + py),
    ]


def pie_polygon(cx: float, cy: float, radius: float, start: float, end: float) -> list[Point]:
    """Outline of a pie slice; angles in degrees, clockwise on screen from the x axis."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    if radius == 0:
        return [(cx, cy)]
    start %= 360
    end %= 360
    if end <= start:
        end += 360
    steps = max(math.ceil(end - start), 1)
    points: list[Point] = [(cx, cy)]
    for step in range(steps + 1):
        angle = math.radians(start + (end - start) * step / steps)
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def draw_shapes(surface: pygame.Surface) -> None:
    """A rectangle, a line and a block of points in different colours."""
    surface.fill(WHITE)
    rect = pygame.Rect(WIDTH // 4, HEIGHT // 4, int(WIDTH * 0.05), int(HEIGHT * 0.05))
    surface.fill(GREEN, rect)
    pygame.draw.line(surface, RED, (int(WIDTH * 0.7), int(HEIGHT * 0.2)), (WIDTH, HEIGHT))
    surface.fill(BLUE, pygame.Rect(0, 0, 100, 100))


def draw_gfx_shapes(surface: pygame.Surface) -> None:
    """A filled pie slice, an ellipse outline and a thick line."""
    surface.fill(WHITE)

    pie = pie_polygon(100, 300, 200, 30, 270)
    if len(pie) >= 3:
        pygame.draw.polygon(surface, PIE_COLOR, pie)

    cx, cy = int(WIDTH * 0.5), int(HEIGHT * 0.2)
    rx, ry = int(WIDTH * 0.65), int(HEIGHT * 0.65)
    pygame.draw.ellipse(surface, RED, pygame.Rect(cx - rx, cy - ry, 2 * rx, 2 * ry), 1)

    line = thick_line_polygon(int(WIDTH * 0.6), -30, -30, int(HEIGHT * 0.7), 30)
    pygame.draw.polygon(surface, THICK_LINE_COLOR, line)


def main(argv: list[str] | None = None) -> int:
    """Show one of the drawings in a window until it is closed."""
    parser = argparse.ArgumentParser(prog="flapbird-drawings", description="Show a drawing.")
    parser.add_argument("drawing", nargs="?", choices=("shapes", "gfx"), default="shapes")
    args = parser.parse_args(argv)

    draw = draw_shapes if args.drawing == "shapes" else draw_gfx_shapes
    title = "1.2.1" if args.drawing == "shapes" else "1.2.2"

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            draw(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())