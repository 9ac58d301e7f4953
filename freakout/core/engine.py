from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

import pygame

from freakout.core.profile import BRICK_CELL, Profile, load_profile
from freakout.core.snapshot import GameState, RoundResult, Snapshot

logger = logging.getLogger(__name__)


# -----------------------------
# Layout constants
# -----------------------------
PADDLE_W, PADDLE_H = 80, 10
PADDLE_BOTTOM_GAP = 30        # paddle top = surface height - this
BALL_SIZE = 20
BALL_BOTTOM_GAP = 50          # ball top = surface height - this

BRICK_ORIGIN = (20, 50)       # first column x, first row y
BRICK_ROWS_END_Y = 150        # rows start while y < this
BRICK_RIGHT_MARGIN = 60       # columns start while x < width - this

BRICK_POINTS = 10

START_PROMPT = "Press SPACE to start\nUse LEFT and RIGHT to move"


class Key(Enum):
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    START = 3


@dataclass
class InputState:
    left_held: bool = False
    right_held: bool = False


class GameEngine:
    """
    Breakout simulation. One instance per session; the high score lives on the
    instance and survives resets.

    The engine only advances when tick() is called. A scheduler object with
    start()/stop() may be attached; the engine starts it when a round begins
    and stops it when the round ends.
    """

    def __init__(self, surface_width: int, surface_height: int,
                 profile: Optional[Profile] = None, scheduler=None):
        self.profile = profile or load_profile()
        self.scheduler = scheduler
        self.high_score = 0
        self.frame = 0
        # Held keys follow key-up events only; resets leave them alone
        self.input = InputState()
        self._round_listeners: List[Callable[[RoundResult], None]] = []
        self.initialize(surface_width, surface_height)

    # ------------- setup -------------
    def initialize(self, surface_width: int, surface_height: int) -> None:
        self.width = int(surface_width)
        self.height = int(surface_height)
        w, h = self.width, self.height

        self.paddle = pygame.Rect(w // 2 - PADDLE_W // 2, h - PADDLE_BOTTOM_GAP, PADDLE_W, PADDLE_H)
        self.ball = pygame.Rect(w // 2 - BALL_SIZE // 2, h - BALL_BOTTOM_GAP, BALL_SIZE, BALL_SIZE)
        self.vx = self.profile.ball_speed
        self.vy = -self.profile.ball_speed

        self.score = 0
        self.state = GameState.NOT_STARTED
        self.message = ""
        self.last_result: Optional[RoundResult] = None

        self.bricks: List[pygame.Rect] = self._build_bricks(w, h)
        self.frame += 1

    def _build_bricks(self, w: int, h: int) -> List[pygame.Rect]:
        if w <= 0 or h <= 0:
            logger.error("invalid surface size %sx%s; brick field left empty", w, h)
            return []

        bw, bh = self.profile.brick_size
        step_x, step_y = BRICK_CELL
        x0, y0 = BRICK_ORIGIN

        columns = list(range(x0, w - BRICK_RIGHT_MARGIN, step_x))
        if not columns:
            # Too narrow for the regular grid: one centered column
            bw = min(bw, w)
            columns = [(w - bw) // 2]

        # Rows stay above the ball's start position
        ball_top = h - BALL_BOTTOM_GAP
        rows = [y for y in range(y0, BRICK_ROWS_END_Y, step_y) if y + bh <= ball_top]
        if not rows and ball_top > 0:
            # Too short for the regular grid: one row centered in the space above the ball
            bh = min(bh, ball_top)
            rows = [(ball_top - bh) // 2]

        bricks = []
        for y in rows:
            for x in columns:
                bricks.append(pygame.Rect(x, y, bw, bh))
        return bricks

    def reset(self) -> None:
        self.initialize(self.width, self.height)

    @property
    def velocity(self):
        return self.vx, self.vy

    # ------------- scheduler -------------
    def start(self) -> None:
        if self.scheduler is not None:
            self.scheduler.start()

    def stop(self) -> None:
        if self.scheduler is not None:
            self.scheduler.stop()

    def add_round_listener(self, callback: Callable[[RoundResult], None]) -> None:
        self._round_listeners.append(callback)

    # ------------- input -------------
    def on_key_down(self, key) -> None:
        if key is Key.MOVE_LEFT:
            self.input.left_held = True
        elif key is Key.MOVE_RIGHT:
            self.input.right_held = True
        elif key is Key.START:
            self._start_round()

    def on_key_up(self, key) -> None:
        if key is Key.MOVE_LEFT:
            self.input.left_held = False
        elif key is Key.MOVE_RIGHT:
            self.input.right_held = False

    def _start_round(self) -> None:
        if self.state is GameState.PLAYING:
            logger.debug("start ignored, round already in progress")
            return
        if self.state is GameState.GAME_OVER:
            self.reset()
        self.state = GameState.PLAYING
        self.start()
        logger.info("round started (profile=%s)", self.profile.name)

    # ------------- simulation -------------
    def tick(self) -> None:
        if self.state is not GameState.PLAYING:
            return

        # Bounds are checked before the move; a step may overshoot the edge once
        speed = self.profile.paddle_speed
        if self.input.left_held and self.paddle.left > 0:
            self.paddle.x -= speed
        if self.input.right_held and self.paddle.right < self.width:
            self.paddle.x += speed

        self.ball.x += self.vx
        self.ball.y += self.vy

        if self.ball.left < 0 or self.ball.right > self.width:
            self.vx = -self.vx
        if self.ball.top < 0:
            self.vy = -self.vy

        if self.ball.colliderect(self.paddle):
            self.vy = -self.vy

        # Newest brick first, at most one per tick
        for i in range(len(self.bricks) - 1, -1, -1):
            if self.ball.colliderect(self.bricks[i]):
                del self.bricks[i]
                self.vy = -self.vy
                self.score += BRICK_POINTS
                break

        fell = self.ball.bottom > self.height
        cleared = self.profile.ends_on_clear and not self.bricks
        if fell or cleared:
            self._end_round(cleared=cleared and not fell)

        self.frame += 1

    def _end_round(self, cleared: bool) -> None:
        self.state = GameState.GAME_OVER
        self.stop()
        self.high_score = max(self.high_score, self.score)

        title = "YOU WIN!" if cleared else "GAME OVER!"
        self.message = f"{title}\nYour score: {self.score}"
        result = RoundResult(score=self.score, high_score=self.high_score,
                             cleared=cleared, message=self.message)
        self.last_result = result
        logger.info("round over: score=%s high=%s cleared=%s",
                    self.score, self.high_score, cleared)

        for callback in list(self._round_listeners):
            callback(result)

    # ------------- rendering -------------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            surface_size=(self.width, self.height),
            paddle=tuple(self.paddle),
            ball=tuple(self.ball),
            bricks=tuple(tuple(b) for b in self.bricks),
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            message=self.message,
            start_prompt=START_PROMPT,
            frame=self.frame,
        )
