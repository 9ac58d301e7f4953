from __future__ import annotations
import logging
import sys
import pygame
import yaml

from freakout.api.config import EngineConfig
from freakout.app.context import Context
from freakout.app.loader import game_root_for, load_game_manifest, load_game_module
from freakout.core.profile import ProfileError

BG_COLOR = (0, 0, 0)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(cfg: EngineConfig) -> int:
    """Route freakout logs to stderr; DEBUG when cfg.debug is set. Returns the level used."""
    level = logging.DEBUG if cfg.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("freakout").setLevel(level)
    return level


def run_game(game_id: str, cfg: EngineConfig) -> int:
    """Open the window, load games/<game_id> and run it until closed. Returns an exit code."""
    configure_logging(cfg)
    pygame.init()
    try:
        screen = pygame.display.set_mode(cfg.screen_size)
    except pygame.error as e:
        print(f"ERROR: could not open display: {e}", file=sys.stderr)
        pygame.quit()
        return 1
    clock = pygame.time.Clock()

    # load game
    try:
        game_root = game_root_for(game_id)
        manifest = load_game_manifest(game_root)
        module = load_game_module(game_root)
    except (FileNotFoundError, AttributeError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: could not load game {game_id!r}: {e}".replace("\n", " "), file=sys.stderr)
        pygame.quit()
        return 2
    game = module.get_game()
    pygame.display.set_caption(manifest.get("name", game_id))

    ctx = Context(
        screen=screen,
        cfg=cfg,
        screen_size=cfg.screen_size,
    )

    try:
        game.on_load(ctx, manifest)
    except ProfileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        pygame.quit()
        return 2

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.on_event(event)

            screen.fill(BG_COLOR)
            game.on_update(dt)
            game.on_draw(screen)
            pygame.display.flip()
    finally:
        game.on_unload()
        pygame.quit()
    return 0
