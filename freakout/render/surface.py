from __future__ import annotations
import pygame

from freakout.core.snapshot import GameState, Snapshot
from freakout.render.shapes import draw_text, draw_text_centered

BG_COLOR = (0, 0, 0)
PADDLE_COLOR = (0, 255, 255)
BALL_COLOR = (255, 255, 255)
BRICK_COLOR = (188, 143, 143)
HUD_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 255, 0)
PROMPT_COLOR = (255, 255, 255)

HUD_SIZE = 24
OVERLAY_SIZE = 48
HIGH_SCORE_RIGHT_INSET = 150
PROMPT_OFFSET_Y = 100


def draw_snapshot(surface: pygame.Surface, snap: Snapshot, show_game_over: bool = True) -> None:
    """
    Render one frame. Only reads the snapshot.

    show_game_over=False leaves the round message to the host (dialog presentation).
    """
    w, h = snap.surface_size
    surface.fill(BG_COLOR)

    pygame.draw.rect(surface, PADDLE_COLOR, snap.paddle)
    pygame.draw.ellipse(surface, BALL_COLOR, snap.ball)
    for brick in snap.bricks:
        pygame.draw.rect(surface, BRICK_COLOR, brick)

    draw_text(surface, f"Score: {snap.score}", (10, 10), HUD_COLOR, size=HUD_SIZE)
    draw_text(surface, f"High Score: {snap.high_score}",
              (w - HIGH_SCORE_RIGHT_INSET, 10), HUD_COLOR, size=HUD_SIZE)

    if snap.state is GameState.PLAYING:
        return

    center = (w // 2, h // 2)
    prompt_center = (w // 2, h // 2 + PROMPT_OFFSET_Y)
    if snap.state is GameState.GAME_OVER and show_game_over and snap.message:
        draw_text_centered(surface, snap.message, center, GAME_OVER_COLOR, size=OVERLAY_SIZE)
    draw_text_centered(surface, snap.start_prompt, prompt_center, PROMPT_COLOR, size=OVERLAY_SIZE)
