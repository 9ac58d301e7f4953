from __future__ import annotations
from typing import Optional

import pygame
from freakout.api import Game
from freakout.app.context import Context
from freakout.core import FixedStepScheduler, GameEngine, Key, RoundResult, profile_from_manifest
from freakout.core.profile import DIALOG
from freakout.input.keyboard import translate
from freakout.render.shapes import draw_text_centered
from freakout.render.surface import draw_snapshot


# -----------------------------
# Dialog look
# -----------------------------
DIALOG_SIZE = (420, 180)
DIALOG_BG = (30, 30, 40)
DIALOG_BORDER = (230, 230, 230)
DIALOG_TEXT = (255, 255, 0)
DIALOG_HINT = "Press ENTER to close"


class Freakout(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        w, h = ctx.screen_size

        self.profile = profile_from_manifest(manifest, ctx.cfg.profile)
        self.engine = GameEngine(w, h, self.profile)
        self.scheduler = FixedStepScheduler(self.engine.tick, interval_ms=ctx.cfg.tick_ms)
        self.engine.scheduler = self.scheduler
        self.engine.add_round_listener(self._on_round_end)

        self.dialog: Optional[str] = None
        self._canvas = pygame.Surface((w, h))
        self._drawn_frame = -1
        self._drawn_dialog: Optional[str] = None

    def _on_round_end(self, result: RoundResult) -> None:
        if self.profile.game_over_presentation == DIALOG:
            self.dialog = result.message

    def on_event(self, event: pygame.event.Event) -> None:
        mapped = translate(event)
        if mapped is None:
            return
        key, down = mapped

        if not down:
            self.engine.on_key_up(key)
            return

        # Modal: the start key only dismisses the dialog
        if self.dialog is not None:
            if key is Key.START:
                self.dialog = None
            return
        self.engine.on_key_down(key)

    def on_update(self, dt_ms: float) -> None:
        self.scheduler.advance(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        snap = self.engine.snapshot()
        # Re-render only when the engine produced a new frame
        if snap.frame != self._drawn_frame or self.dialog != self._drawn_dialog:
            draw_snapshot(self._canvas, snap,
                          show_game_over=self.profile.game_over_presentation != DIALOG)
            if self.dialog is not None:
                self._draw_dialog(self._canvas, self.dialog)
            self._drawn_frame = snap.frame
            self._drawn_dialog = self.dialog
        surface.blit(self._canvas, (0, 0))

    def _draw_dialog(self, surface: pygame.Surface, text: str) -> None:
        w, h = self.ctx.screen_size
        box = pygame.Rect(0, 0, *DIALOG_SIZE)
        box.center = (w // 2, h // 2)
        pygame.draw.rect(surface, DIALOG_BG, box)
        pygame.draw.rect(surface, DIALOG_BORDER, box, width=2)
        draw_text_centered(surface, text, (box.centerx, box.centery - 16), DIALOG_TEXT, size=40)
        draw_text_centered(surface, DIALOG_HINT, (box.centerx, box.bottom - 24), DIALOG_BORDER, size=22)

    def on_unload(self) -> None:
        self.scheduler.stop()


def get_game():
    return Freakout()
