import random

import pygame
import pytest

from flapbird.app import (
    draw_city_and_grass,
    draw_game,
    draw_game_over,
    draw_menu,
    draw_pipes,
    draw_score,
    load_sprites,
    render,
)
from flapbird.game import (
    GRASS_COLOR,
    SKY_COLOR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    FlappyGame,
    State,
    score_digits,
)
from flapbird.geometry import Rect

SPRITE_COLOR = (255, 0, 0)


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def _center(rect):
    return (rect.x + rect.w // 2, rect.y + rect.h // 2)


@pytest.fixture
def sprites():
    sheet = pygame.Surface((200, 173))
    sheet.fill(SPRITE_COLOR)
    return sheet


@pytest.fixture
def screen():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((0, 0, 0))
    return surface


@pytest.fixture
def game(sprites):
    return FlappyGame(sprites.get_height(), random.Random(1))


def test_load_sprites_round_trip(tmp_path, sprites):
    path = tmp_path / "sheet.png"
    pygame.image.save(sprites, str(path))
    loaded = load_sprites(path)
    assert loaded.get_size() == sprites.get_size()
    assert _rgb(loaded, (10, 10)) == SPRITE_COLOR


def test_load_sprites_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sprites(tmp_path / "missing.png")


def test_city_and_grass(screen, sprites):
    draw_city_and_grass(screen, sprites)
    assert _rgb(screen, (10, WINDOW_HEIGHT - 20)) == GRASS_COLOR
    assert _rgb(screen, (10, WINDOW_HEIGHT * 3 // 5 + 5)) == SPRITE_COLOR
    assert _rgb(screen, (WINDOW_WIDTH - 5, WINDOW_HEIGHT * 3 // 5 + 5)) == SPRITE_COLOR
    assert _rgb(screen, (10, 10)) == (0, 0, 0)


def test_draw_pipes(screen, sprites, game):
    game.pipes.clear()
    game.pipes.append(Rect(300, 300, 50, 50))
    game.pipes.append(Rect(600, 300, 50, 50))
    draw_pipes(screen, sprites, game.pipes)
    assert _rgb(screen, (320, 320)) == SPRITE_COLOR
    assert _rgb(screen, (620, 320)) == SPRITE_COLOR
    assert _rgb(screen, (450, 320)) == (0, 0, 0)


@pytest.mark.parametrize("score", [5, 42, 317])
def test_draw_score_covers_digit_rects(screen, sprites, score):
    draw_score(screen, sprites, score, False)
    for _, dest in score_digits(score, False):
        assert _rgb(screen, _center(dest)) == SPRITE_COLOR


def test_draw_menu(screen, sprites, game):
    draw_menu(screen, sprites, game)
    assert _rgb(screen, _center(game.layout.logo)) == SPRITE_COLOR
    assert _rgb(screen, _center(game.layout.play_button)) == SPRITE_COLOR
    assert _rgb(screen, (5, 5)) == SKY_COLOR


def test_draw_game_over(screen, sprites, game):
    draw_game_over(screen, sprites, game)
    assert _rgb(screen, _center(game.layout.retry)) == SPRITE_COLOR
    assert _rgb(screen, _center(game.layout.menu)) == SPRITE_COLOR
    assert _rgb(screen, (game.layout.game_over.x + 5, game.layout.game_over.y + 5)) == SPRITE_COLOR
    assert _rgb(screen, (5, 5)) == SKY_COLOR


def test_draw_game_draws_bird_and_scores(screen, sprites, game):
    game.state = State.FALLING
    game.pipes.clear()
    game.pipes.append(Rect(0, WINDOW_HEIGHT - 10, 10, 10))
    draw_game(screen, sprites, game)
    assert game.score == 1
    assert all(pipe.counted for pipe in game.pipes)
    assert _rgb(screen, _center(game.bird)) == SPRITE_COLOR


def test_draw_game_no_score_before_pipes(screen, sprites, game):
    game.state = State.FLAPPING
    draw_game(screen, sprites, game)
    assert game.score == 0


def test_render_switches_on_state(screen, sprites, game):
    point = (game.layout.game_over.x + 5, game.layout.game_over.y + 5)
    game.state = State.MENU
    render(screen, sprites, game)
    assert not game.layout.logo.contains(*point)
    assert _rgb(screen, point) == SKY_COLOR

    game.state = State.GAME_OVER
    render(screen, sprites, game)
    assert _rgb(screen, point) == SPRITE_COLOR