from .engine import GameEngine, InputState, Key
from .profile import Profile, ProfileError, load_profile, profile_from_manifest
from .scheduler import FixedStepScheduler
from .snapshot import GameState, RoundResult, Snapshot

__all__ = [
    "GameEngine", "InputState", "Key",
    "Profile", "ProfileError", "load_profile", "profile_from_manifest",
    "FixedStepScheduler",
    "GameState", "RoundResult", "Snapshot",
]
