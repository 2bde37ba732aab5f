"""Drawing and the window loop of the flappy bird game."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from flapbird.game import (
    GAME_OVER_FRAME,
    GRASS_COLOR,
    LOGO_FRAME,
    MENU_FRAME,
    PLAY_BUTTON_FRAME,
    RETRY_FRAME,
    SKY_COLOR,
    WAIT_STARTING_POINT,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    FlappyGame,
    State,
    score_digits,
)
from flapbird.geometry import Rect
from flapbird.timing import WaitBudget

DEFAULT_SPRITES = "assets/textures.png"

CITY_FRAME = Rect(52, 0, 144, 39)
TOP_PIPE_FRAME = Rect(0, 13, 26, 160)
BOTTOM_PIPE_FRAME = Rect(26, 13, 26, 160)


def load_sprites(path: str | Path) -> pygame.Surface:
    """Load the sprite sheet image."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"sprite sheet not found: {path}")
    image = pygame.image.load(str(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _blit(surface: pygame.Surface, sprites: pygame.Surface, frame: Rect, dest: Rect) -> None:
    """Copy a sprite frame onto the surface, scaled to fill ``dest``."""
    if dest.w <= 0 or dest.h <= 0:
        return
    source = sprites.get_rect().clip(pygame.Rect(frame.x, frame.y, frame.w, frame.h))
    if source.width <= 0 or source.height <= 0:
        return
    piece = pygame.transform.scale(sprites.subsurface(source), (dest.w, dest.h))
    surface.blit(piece, (dest.x, dest.y))


def _clear(surface: pygame.Surface) -> None:
    surface.fill(SKY_COLOR)


def draw_city_and_grass(surface: pygame.Surface, sprites: pygame.Surface) -> None:
    """Tile the city skyline and the grass strip across the window."""
    band = WINDOW_HEIGHT // 5
    city = Rect(0, band * 3, (CITY_FRAME.w * band) // CITY_FRAME.h, band)
    leaves = Rect(0, band * 4, WINDOW_WIDTH, WINDOW_HEIGHT)
    while True:
        surface.fill(GRASS_COLOR, pygame.Rect(leaves.x, leaves.y, leaves.w, leaves.h))
        _blit(surface, sprites, CITY_FRAME, city)
        city = city.moved(city.w, 0)
        leaves = leaves.moved(leaves.w, 0)
        if city.x >= WINDOW_WIDTH:
            break


def draw_pipes(surface: pygame.Surface, sprites: pygame.Surface, pipes) -> None:
    """Draw the pipes; even positions are top pipes, odd ones bottom pipes."""
    for index, pipe in enumerate(pipes):
        frame = TOP_PIPE_FRAME if index % 2 == 0 else BOTTOM_PIPE_FRAME
        _blit(surface, sprites, frame, pipe.rect)


def draw_score(surface: pygame.Surface, sprites: pygame.Surface, score: int, middle: bool) -> None:
    """Draw the score at the top of the window, or in its middle."""
    for frame, dest in score_digits(score, middle):
        _blit(surface, sprites, frame, dest)


def draw_game(surface: pygame.Surface, sprites: pygame.Surface, game: FlappyGame) -> None:
    """Draw a running round and count any pipe the bird has passed."""
    _clear(surface)
    draw_city_and_grass(surface, sprites)
    draw_pipes(surface, sprites, game.pipes)
    _blit(surface, sprites, game.bird_frame, game.bird)
    game.update_score()
    draw_score(surface, sprites, game.score, False)


def draw_menu(surface: pygame.Surface, sprites: pygame.Surface, game: FlappyGame) -> None:
    """Draw the start menu with the logo and the play button."""
    _clear(surface)
    draw_city_and_grass(surface, sprites)
    _blit(surface, sprites, LOGO_FRAME, game.layout.logo)
    _blit(surface, sprites, PLAY_BUTTON_FRAME, game.layout.play_button)


def draw_game_over(surface: pygame.Surface, sprites: pygame.Surface, game: FlappyGame) -> None:
    """Draw the game-over screen with the score and the retry and menu buttons."""
    _clear(surface)
    draw_city_and_grass(surface, sprites)
    draw_score(surface, sprites, game.score, True)
    _blit(surface, sprites, GAME_OVER_FRAME, game.layout.game_over)
    _blit(surface, sprites, RETRY_FRAME, game.layout.retry)
    _blit(surface, sprites, MENU_FRAME, game.layout.menu)


def render(surface: pygame.Surface, sprites: pygame.Surface, game: FlappyGame) -> None:
    """Draw whichever screen belongs to the game's current state."""
    if game.state is State.MENU:
        draw_menu(surface, sprites, game)
    elif game.state in (State.FALLING, State.FLAPPING):
        draw_game(surface, sprites, game)
    else:
        draw_game_over(surface, sprites, game)


def _next_event(budget: WaitBudget) -> pygame.event.Event:
    if budget.remaining > 0:
        return pygame.event.wait(budget.remaining)
    return pygame.event.poll()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="flapbird", description="Play flappy bird.")
    parser.add_argument("--sprites", default=DEFAULT_SPRITES, help="path of the sprite sheet")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        sprites = load_sprites(args.sprites)
        game = FlappyGame(sprites.get_height())
        budget = WaitBudget(WAIT_STARTING_POINT)

        running = True
        while running:
            before = pygame.time.get_ticks()
            event = _next_event(budget)
            if event.type != pygame.NOEVENT:
                budget.spend(max(0, pygame.time.get_ticks() - before))
                if event.type == pygame.QUIT:
                    running = False
                    continue
                if event.type == pygame.MOUSEBUTTONUP:
                    game.handle_click(*event.pos)
                else:
                    game.handle_event(None)
            else:
                budget.expire()
                game.tick()

            render(screen, sprites, game)
            pygame.display.flip()

        print(f"Score: {game.score}")
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())