from __future__ import annotations
from typing import Optional, Tuple

import pygame

from freakout.core.engine import Key

KEYMAP = {
    pygame.K_LEFT: Key.MOVE_LEFT,
    pygame.K_a: Key.MOVE_LEFT,
    pygame.K_RIGHT: Key.MOVE_RIGHT,
    pygame.K_d: Key.MOVE_RIGHT,
    pygame.K_SPACE: Key.START,
    pygame.K_RETURN: Key.START,
}


def translate(event: pygame.event.Event) -> Optional[Tuple[Key, bool]]:
    """
    Map a pygame key event to (logical key, is_down).
    Returns None for non-key events and keys the game does not use.
    """
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    key = KEYMAP.get(event.key)
    if key is None:
        return None
    return key, event.type == pygame.KEYDOWN
