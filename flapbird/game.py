"""Flappy bird game state: layout, pipes, physics, scoring and the state machine."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum

from flapbird.geometry import Rect
from flapbird.pipes import Pipe, PipeQueue

WINDOW_TITLE = "FlappyBird"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WAIT_STARTING_POINT = 30
PIPE_GAP = 100
PIPE_SIZE = 5
PIPE_SPEED = 10

BIRD_WIDTH = 17
BIRD_HEIGHT = 12
BIRD_STARTING_POINT = 0
BIRD_ENDING_POINT = 51
GRAVITY = 8
FLAP_HEIGHT = 70
FRAMES_PER_WING_BEAT = 5

GRASS_COLOR = (0x17, 0xA1, 0x19)
SKY_COLOR = (0x13, 0x87, 0x92)

LOGO_FRAME = Rect(52, 57, 89, 23)
PLAY_BUTTON_FRAME = Rect(52, 92, 52, 29)
GAME_OVER_FRAME = Rect(52, 121, 96, 21)
MENU_FRAME = Rect(104, 92, 40, 14)
RETRY_FRAME = Rect(104, 106, 40, 14)

DIGIT_WIDTH = 12
DIGIT_HEIGHT = 18
DIGIT_SCALE = 4


class State(Enum):
    MENU = 0
    FALLING = 1
    FLAPPING = 2
    GAME_OVER = 3


@dataclass(frozen=True)
class Layout:
    """Where the menu and game-over widgets are drawn on screen."""

    logo: Rect
    play_button: Rect
    game_over: Rect
    menu: Rect
    retry: Rect


def build_layout() -> Layout:
    """Place the logo, play button and game-over widgets in the window."""
    logo_w = LOGO_FRAME.w * 4
    logo_h = LOGO_FRAME.h * 4
    play_w = PLAY_BUTTON_FRAME.w * 2
    play_h = PLAY_BUTTON_FRAME.h * 2

    block_height = play_h + logo_h + 100
    top = WINDOW_HEIGHT // 2 - block_height // 2

    logo = Rect(WINDOW_WIDTH // 2 - logo_w // 2, top, logo_w, logo_h)
    play_button = Rect(WINDOW_WIDTH // 2 - play_w // 2, top + logo_h + 100, play_w, play_h)

    game_over = Rect(
        WINDOW_WIDTH // 2 - GAME_OVER_FRAME.w * 5 // 2,
        WINDOW_HEIGHT // 2 - GAME_OVER_FRAME.y - 100,
        GAME_OVER_FRAME.w * 5,
        GAME_OVER_FRAME.h * 5,
    )
    menu = Rect(
        WINDOW_WIDTH // 2 - MENU_FRAME.x * 2,
        WINDOW_HEIGHT // 2 - MENU_FRAME.h + 100,
        MENU_FRAME.w * 5,
        MENU_FRAME.h * 5,
    )
    retry = Rect(
        WINDOW_WIDTH // 2 + 15,
        WINDOW_HEIGHT // 2 - RETRY_FRAME.h + 100,
        RETRY_FRAME.w * 5,
        RETRY_FRAME.h * 5,
    )
    return Layout(logo, play_button, game_over, menu, retry)


def make_pipe_pair(sprites_height: int, gap_top: int, x: int) -> tuple[Rect, Rect]:
    """A top and a bottom pipe at ``x`` around a gap centred on ``gap_top``."""
    height = PIPE_SIZE * (sprites_height - BIRD_HEIGHT)
    width = PIPE_SIZE * 26
    top = Rect(x, gap_top - PIPE_GAP - height, width, height)
    bottom = Rect(x, gap_top + PIPE_GAP, width, height)
    return top, bottom


def check_collision(bird: Rect, pipes) -> bool:
    """Whether the bird overlaps any of the pipes."""
    return any(bird.overlaps(pipe.rect) for pipe in pipes)


def score_digits(score: int, middle: bool) -> list[tuple[Rect, Rect]]:
    """The (sprite frame, screen rect) pairs that draw the score, ones digit first."""
    ones = score % 10
    tens = (score % 100 - ones) // 10
    hundreds = (score % 1000 - score % 100) // 100

    def frame(digit: int) -> Rect:
        return Rect(52 + 14 * digit, 39, DIGIT_WIDTH, DIGIT_HEIGHT)

    half_width = DIGIT_WIDTH * DIGIT_SCALE // 2
    y = 10
    if middle:
        y = WINDOW_HEIGHT // 2 - y * DIGIT_SCALE // 2 - 30

    base = Rect(
        WINDOW_WIDTH // 2 - half_width, y, DIGIT_WIDTH * DIGIT_SCALE, DIGIT_HEIGHT * DIGIT_SCALE
    )
    ones_rect = tens_rect = hundreds_rect = base
    show_tens = show_hundreds = False

    if 9 < score <= 99:
        ones_rect = ones_rect.moved(half_width, 0)
        tens_rect = tens_rect.moved(-(half_width - 1), 0)
        show_tens = True
    if 99 < score <= 999:
        ones_rect = ones_rect.moved(half_width * 2, 0)
        hundreds_rect = hundreds_rect.moved(-half_width * 2, 0)
        show_tens = show_hundreds = True

    pieces = [(frame(ones), ones_rect)]
    if show_tens:
        pieces.append((frame(tens), tens_rect))
    if show_hundreds:
        pieces.append((frame(hundreds), hundreds_rect))
    return pieces


class FlappyGame:
    """The whole game world and its state machine, free of any drawing."""

    def __init__(self, sprites_height: int, rng: random.Random | None = None) -> None:
        self.sprites_height = sprites_height
        self.rng = rng if rng is not None else random.Random()
        self.layout = build_layout()
        self.state = State.MENU

        self.bird = Rect(WINDOW_WIDTH // 5 - 85, 0, 85, 60)
        self.bird_frame = Rect(BIRD_STARTING_POINT, 0, BIRD_WIDTH, BIRD_HEIGHT)
        self.gravity = -GRAVITY
        self.critical_y = WINDOW_HEIGHT
        self.frametime = 0
        self.score = 0
        self.hit_wall = False

        gap_top = self._random_gap()
        second_x = WINDOW_WIDTH + WINDOW_WIDTH // 2 + PIPE_SIZE * 13
        self._initial_pipes = (
            *make_pipe_pair(sprites_height, gap_top, WINDOW_WIDTH),
            *make_pipe_pair(sprites_height, gap_top, second_x),
        )
        self.pipes = PipeQueue(self._initial_pipes)

    def _random_gap(self) -> int:
        return self.rng.randrange(WINDOW_HEIGHT - PIPE_GAP - 50)

    def reset(self) -> None:
        """Start a new round: score, bird and pipes back to their starting places."""
        self.score = 0
        self.hit_wall = False
        self.gravity = -GRAVITY
        self.bird = replace(
            self.bird, x=WINDOW_WIDTH // 8, y=WINDOW_HEIGHT // 2 - self.bird.h // 2
        )
        self.critical_y = self.bird.y
        self.pipes.clear()
        for rect in self._initial_pipes:
            self.pipes.append(rect)

    def _flap(self) -> None:
        self.state = State.FLAPPING
        self.gravity = -GRAVITY
        self.critical_y = self.bird.y - FLAP_HEIGHT

    def handle_event(self, click: tuple[int, int] | None = None) -> None:
        """React to an input event; ``click`` is the pointer position of a button release."""
        if self.state is State.MENU:
            if click is not None and self.layout.play_button.contains(*click):
                self.state = State.FALLING
                self.reset()

        elif self.state is State.FALLING:
            if self.gravity < 0:
                self.gravity = GRAVITY
            if click is not None:
                self._flap()

        elif self.state is State.FLAPPING:
            if self.gravity > 0:
                self.gravity = -GRAVITY
            self.hit_wall = check_collision(self.bird, self.pipes)
            if self.hit_wall:
                self.state = State.GAME_OVER
            elif click is not None:
                self._flap()
            if self.critical_y >= self.bird.y:
                self.state = State.FALLING

        elif self.state is State.GAME_OVER:
            if click is not None:
                if self.layout.menu.contains(*click):
                    self.state = State.MENU
                elif self.layout.retry.contains(*click):
                    self.reset()
                    self.state = State.FALLING

    def handle_click(self, x: int, y: int) -> None:
        """React to a mouse button release at the given position."""
        self.handle_event((x, y))

    def tick(self) -> None:
        """Advance the world by one frame while a round is running."""
        if self.state not in (State.FALLING, State.FLAPPING):
            return

        self.move_pipes_left()
        self.recycle_pipes()

        self.frametime += 1
        if self.frametime == FRAMES_PER_WING_BEAT:
            self.frametime = 0
            next_x = self.bird_frame.x + BIRD_WIDTH
            if next_x >= BIRD_ENDING_POINT:
                next_x = BIRD_STARTING_POINT
            self.bird_frame = replace(self.bird_frame, x=next_x)

        if self.critical_y >= self.bird.y:
            self.state = State.FALLING
            self.gravity = GRAVITY
            self.critical_y = -100
        self.bird = self.bird.moved(0, self.gravity)

        self.hit_wall = check_collision(self.bird, self.pipes)
        if self.hit_wall:
            self.state = State.GAME_OVER

    def move_pipes_left(self) -> None:
        for pipe in self.pipes:
            pipe.rect = pipe.rect.moved(-PIPE_SPEED, 0)

    def recycle_pipes(self) -> bool:
        """Replace the front pair once it has left the screen; report whether it did."""
        front = self.pipes[0].rect
        if front.right >= 0:
            return False
        self.pipes.popleft()
        self.pipes.popleft()
        for rect in make_pipe_pair(self.sprites_height, self._random_gap(), WINDOW_WIDTH):
            self.pipes.append(rect)
        return True

    def update_score(self) -> bool:
        """Count pipes the bird has passed; at most one point per call."""
        passed_one = False
        for pipe in self.pipes:
            if not pipe.counted and self.bird.right >= pipe.rect.right:
                pipe.counted = True
                passed_one = True
        if passed_one:
            self.score += 1
        return passed_one


__all__ = [
    "FlappyGame",
    "Layout",
    "Pipe",
    "State",
    "build_layout",
    "check_collision",
    "make_pipe_pair",
    "score_digits",
]