from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# (x, y, w, h)
RectTuple = Tuple[int, int, int, int]


class GameState(Enum):
    NOT_STARTED = 1
    PLAYING = 2
    GAME_OVER = 3


@dataclass(frozen=True)
class RoundResult:
    score: int
    high_score: int
    cleared: bool     # True when the round ended because every brick was destroyed
    message: str


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the engine handed to the renderer."""
    surface_size: Tuple[int, int]
    paddle: RectTuple
    ball: RectTuple
    bricks: Tuple[RectTuple, ...]
    score: int
    high_score: int
    state: GameState
    message: str
    start_prompt: str
    frame: int
