import math

import pygame
import pytest

from flapbird.drawings import (
    BLUE,
    GREEN,
    PIE_COLOR,
    RED,
    THICK_LINE_COLOR,
    WHITE,
    draw_gfx_shapes,
    draw_shapes,
    pie_polygon,
    thick_line_polygon,
)


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((500, 500))


def test_thick_line_horizontal_corners():
    corners = thick_line_polygon(0, 0, 10, 0, 4)
    assert len(corners) == 4
    assert sorted(abs(y) for _, y in corners) == [2, 2, 2, 2]
    assert sorted(x for x, _ in corners) == [0, 0, 10, 10]


@pytest.mark.parametrize("line", [(300, -30, -30, 350), (0, 0, 7, 3), (5, 5, 5, 50)])
def test_thick_line_sides_are_width_apart(line):
    corners = thick_line_polygon(*line, 30)
    assert math.dist(corners[0], corners[1]) == pytest.approx(30)
    assert math.dist(corners[2], corners[3]) == pytest.approx(30)
    mid_start = ((corners[0][0] + corners[1][0]) / 2, (corners[0][1] + corners[1][1]) / 2)
    assert mid_start == pytest.approx((line[0], line[1]))


def test_thick_line_zero_length_is_square():
    corners = thick_line_polygon(10, 10, 10, 10, 6)
    assert math.dist(corners[0], corners[2]) == pytest.approx(math.hypot(6, 6))


def test_thick_line_rejects_thin_width():
    with pytest.raises(ValueError):
        thick_line_polygon(0, 0, 10, 10, 0)


def test_pie_points_on_circle():
    points = pie_polygon(100, 300, 200, 30, 270)
    assert points[0] == (100, 300)
    for point in points[1:]:
        assert math.dist(point, (100, 300)) == pytest.approx(200)


def test_pie_starts_and_ends_at_angles():
    points = pie_polygon(0, 0, 10, 0, 90)
    assert points[1] == pytest.approx((10, 0))
    assert points[-1] == pytest.approx((0, 10), abs=1e-9)


def test_pie_wraps_when_end_before_start():
    points = pie_polygon(0, 0, 10, 270, 90)
    assert points[1] == pytest.approx((0, -10), abs=1e-9)
    assert points[-1] == pytest.approx((0, 10), abs=1e-9)


def test_pie_zero_radius_and_negative_radius():
    assert pie_polygon(3, 4, 0, 0, 90) == [(3, 4)]
    with pytest.raises(ValueError):
        pie_polygon(0, 0, -1, 0, 90)


def test_draw_shapes(surface):
    draw_shapes(surface)
    assert _rgb(surface, (0, 0)) == BLUE
    assert _rgb(surface, (99, 99)) == BLUE
    assert _rgb(surface, (130, 130)) == GREEN
    assert _rgb(surface, (300, 450)) == WHITE
    row = [_rgb(surface, (x, 300)) for x in range(420, 431)]
    assert RED in row


def test_draw_gfx_shapes(surface):
    draw_gfx_shapes(surface)
    assert _rgb(surface, (100, 400)) == PIE_COLOR
    assert _rgb(surface, (135, 160)) == THICK_LINE_COLOR
    assert _rgb(surface, (490, 490)) == WHITE