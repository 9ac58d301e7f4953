import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

from freakout.core import GameEngine, load_profile

SURFACE = (1043, 424)


class RecordingScheduler:
    def __init__(self):
        self.running = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.starts += 1
        self.running = True

    def stop(self):
        self.stops += 1
        self.running = False


@pytest.fixture
def scheduler():
    return RecordingScheduler()


@pytest.fixture
def make_engine(scheduler):
    def _make(profile="classic", size=SURFACE, **overrides):
        return GameEngine(size[0], size[1], load_profile(profile, overrides), scheduler=scheduler)
    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()
