from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple


# Grid cell every brick must fit inside (column step, row step)
BRICK_CELL = (60, 30)

LOSE_ONLY = "lose_only"
LOSE_OR_CLEAR = "lose_or_clear"
END_CONDITIONS = (LOSE_ONLY, LOSE_OR_CLEAR)

OVERLAY = "overlay"
DIALOG = "dialog"
PRESENTATIONS = (OVERLAY, DIALOG)


class ProfileError(ValueError):
    pass


@dataclass(frozen=True)
class Profile:
    name: str
    paddle_speed: int               # px per tick
    ball_speed: int                 # px per tick on each axis
    brick_size: Tuple[int, int]     # (w, h)
    end_condition: str = LOSE_OR_CLEAR
    game_over_presentation: str = OVERLAY

    @property
    def ends_on_clear(self) -> bool:
        return self.end_condition == LOSE_OR_CLEAR


BUILTIN_PROFILES: Dict[str, Profile] = {
    "classic": Profile(
        name="classic",
        paddle_speed=12,
        ball_speed=7,
        brick_size=(55, 22),
        end_condition=LOSE_OR_CLEAR,
        game_over_presentation=OVERLAY,
    ),
    "arcade": Profile(
        name="arcade",
        paddle_speed=10,
        ball_speed=8,
        brick_size=(50, 20),
        end_condition=LOSE_ONLY,
        game_over_presentation=DIALOG,
    ),
}

DEFAULT_PROFILE = "classic"


def validate_profile(profile: Profile) -> Profile:
    if profile.paddle_speed <= 0:
        raise ProfileError(f"{profile.name}: paddle_speed must be positive")
    if profile.ball_speed <= 0:
        raise ProfileError(f"{profile.name}: ball_speed must be positive")

    bw, bh = profile.brick_size
    cw, ch = BRICK_CELL
    if not (0 < bw <= cw and 0 < bh <= ch):
        raise ProfileError(
            f"{profile.name}: brick_size {bw}x{bh} must fit a {cw}x{ch} cell")

    if profile.end_condition not in END_CONDITIONS:
        raise ProfileError(
            f"{profile.name}: unknown end_condition {profile.end_condition!r}")
    if profile.game_over_presentation not in PRESENTATIONS:
        raise ProfileError(
            f"{profile.name}: unknown game_over_presentation "
            f"{profile.game_over_presentation!r}")
    return profile


def load_profile(name: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Profile:
    """
    Build a profile from the built-in defaults merged with manifest overrides, e.g.:

        profiles:
          classic:
            paddle_speed: 14
            brick_size: [50, 20]

    Unknown names are accepted only when the overrides define every field.
    """
    name = name or DEFAULT_PROFILE
    overrides = dict(overrides or {})

    known = {f.name for f in fields(Profile)} - {"name"}
    unknown = set(overrides) - known
    if unknown:
        raise ProfileError(f"{name}: unknown profile keys {sorted(unknown)}")

    if "brick_size" in overrides:
        size = overrides["brick_size"]
        try:
            bw, bh = size
            overrides["brick_size"] = (int(bw), int(bh))
        except (TypeError, ValueError):
            raise ProfileError(f"{name}: brick_size must be a [w, h] pair") from None
    for key in ("paddle_speed", "ball_speed"):
        if key in overrides:
            try:
                overrides[key] = int(overrides[key])
            except (TypeError, ValueError):
                raise ProfileError(f"{name}: {key} must be an integer") from None

    base = BUILTIN_PROFILES.get(name)
    if base is None:
        missing = known - set(overrides)
        if missing:
            raise ProfileError(f"unknown profile {name!r}")
        return validate_profile(Profile(name=name, **overrides))

    return validate_profile(replace(base, **overrides))


def profile_from_manifest(manifest: dict, name: Optional[str] = None) -> Profile:
    """Pick the profile named on the command line, else the manifest's options.profile."""
    manifest = manifest or {}
    name = name or manifest.get("options", {}).get("profile") or DEFAULT_PROFILE
    overrides = (manifest.get("profiles") or {}).get(name)
    return load_profile(name, overrides)
