import argparse
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from freakout.api.config import EngineConfig
from freakout.app.loop import run_game


def parse_screen(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from None
    return w, h


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Freakout Launcher")
    parser.add_argument("--game", default="freakout", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default="1043x424", help="Screen size WxH, e.g. 1043x424")
    parser.add_argument("--profile", default=None, help="Rule profile from the manifest (classic, arcade, ...)")
    parser.add_argument("--fps", type=int, default=60, help="Render frame rate cap")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    cfg = EngineConfig(
        screen_size=args.screen,
        fps=args.fps,
        profile=args.profile,
        debug=args.debug,
    )
    return run_game(args.game, cfg)


if __name__ == "__main__":
    sys.exit(main())
