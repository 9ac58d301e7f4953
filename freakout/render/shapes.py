import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    """Draw possibly multi-line text with the block centered on `center`."""
    font = pygame.font.SysFont(None, size)
    lines = [font.render(line, True, color) for line in text.split("\n")]
    line_h = font.get_linesize()
    top = center[1] - (line_h * len(lines)) // 2
    for i, img in enumerate(lines):
        rect = img.get_rect(midtop=(center[0], top + i * line_h))
        surface.blit(img, rect)
