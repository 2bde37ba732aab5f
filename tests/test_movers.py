import pytest

from flapbird.geometry import Rect
from flapbird.movers import RACERS, Race, bounce_vertical, center_on, steer

W, H = 1280, 720


def test_steer_up_moves_by_speed():
    rect = Rect(100, 100, 50, 50)
    assert steer(rect, "w", 20, W, H) == rect.moved(0, -20)


def test_steer_up_at_top_stays_at_top():
    rect = Rect(100, 0, 50, 50)
    assert steer(rect, "w", 20, W, H) == rect


def test_steer_left_moves_by_speed():
    rect = Rect(100, 100, 50, 50)
    assert steer(rect, "a", 20, W, H) == rect.moved(-20, 0)


def test_steer_left_at_edge_goes_to_top():
    rect = Rect(0, 300, 50, 50)
    result = steer(rect, "a", 20, W, H)
    assert result.x == rect.x
    assert result.y == 0


def test_steer_right_moves_and_clamps():
    rect = Rect(100, 100, 50, 50)
    assert steer(rect, "d", 20, W, H) == rect.moved(20, 0)
    at_limit = Rect(W - 50, 100, 50, 50)
    assert steer(at_limit, "d", 20, W, H).x == W - at_limit.w


def test_steer_down_moves_and_clamps():
    rect = Rect(100, 100, 50, 50)
    assert steer(rect, "s", 20, W, H) == rect.moved(0, 20)
    beyond = Rect(100, H, 50, 50)
    assert steer(beyond, "s", 20, W, H).y == H - beyond.h


def test_steer_other_key_leaves_rect():
    rect = Rect(10, 20, 30, 40)
    assert steer(rect, "q", 20, W, H) == rect


def test_bounce_inside_keeps_direction():
    rect = Rect(0, 100, 50, 50)
    moved, speed = bounce_vertical(rect, 40, H)
    assert speed == 40
    assert moved == rect.moved(0, 40)


def test_bounce_below_bottom_turns_up():
    rect = Rect(0, H - 10, 50, 50)
    moved, speed = bounce_vertical(rect, 40, H)
    assert speed == -40
    assert moved.y < rect.y


def test_bounce_above_top_turns_down():
    rect = Rect(0, -5, 50, 50)
    moved, speed = bounce_vertical(rect, -40, H)
    assert speed == 40
    assert moved.y == 75


def test_center_on_puts_centre_at_point():
    rect = Rect(0, 0, 10, 20)
    result = center_on(rect, 50, 70)
    assert result.x + result.w // 2 == 50
    assert result.y + result.h // 2 == 70
    assert (result.w, result.h) == (rect.w, rect.h)


def test_race_nobody_finished():
    race = Race(100)
    rects = [Rect(0, 0, 10, 10)] * 3
    assert race.check_finish(rects) is None
    assert race.winner is None
    assert not race.finished()


def test_race_first_to_line_wins_once():
    race = Race(100)
    assert race.check_finish([Rect(0, 0, 10, 10), Rect(90, 0, 10, 10), Rect(0, 0, 10, 10)]) == "Blue"
    assert race.winner_name == "Blue"
    assert race.check_finish([Rect(95, 0, 10, 10), Rect(90, 0, 10, 10), Rect(0, 0, 10, 10)]) is None
    assert race.winner_name == "Blue"
    assert race.stopped == {0, 1}
    assert not race.finished()


def test_race_finishes_when_all_stop():
    race = Race(100)
    assert race.check_finish([Rect(100, 0, 10, 10)] * 3) == RACERS[0]
    assert race.finished()


def test_race_needs_three_racers():
    with pytest.raises(ValueError):
        Race(100).check_finish([Rect(0, 0, 1, 1)])