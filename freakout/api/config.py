from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    tick_ms: int = 20
    profile: Optional[str] = None    # None: use the manifest's options.profile
    debug: bool = False
