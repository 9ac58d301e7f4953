from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Tuple
from freakout.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    cfg: EngineConfig
    screen_size: Tuple[int, int]
