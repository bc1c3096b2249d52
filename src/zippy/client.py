#!/usr/bin/env python3
"""
client.py

Single-player client: drives the engine from the pygame frame clock, routes
input, plays event sounds and renders snapshots.
"""

import argparse
import logging
from typing import Optional

import pygame

from .assets import load_assets
from .audio import AudioPlayer
from .config import SIMPLE_PAUSE_CONFIG, GameConfig
from .constants import (
    ASSET_DIR, BASE_HEIGHT, BASE_WIDTH, DB_FILE, RENDER_FPS, WINDOW_TITLE
)
from .data_models import GameEvent, GameSnapshot, Viewport
from .game_engine import GameEngine
from .input_adapter import Intent, dispatch, translate
from .renderer import Renderer
from .score_db import ScoreDatabase

logger = logging.getLogger(__name__)


class SpawnTimer:
    """Fixed-interval trigger that is independent of the frame rate."""

    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms
        self.elapsed_ms = 0.0

    def advance(self, delta_ms: float) -> int:
        """Returns how many intervals elapsed during delta_ms."""
        self.elapsed_ms += delta_ms
        fired = 0
        while self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            fired += 1
        return fired


def log_run_end(snapshot: GameSnapshot):
    logger.debug("Run ended: %s", snapshot.to_render_state())


class ZippyClient:
    def __init__(self, config: Optional[GameConfig] = None,
                 db_file: str = DB_FILE, asset_dir: str = ASSET_DIR):
        self.config = config or GameConfig()
        self.db_file = db_file
        self.asset_dir = asset_dir
        self.viewport = Viewport(BASE_WIDTH, BASE_HEIGHT)

    def run(self):
        """The main client execution loop."""
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)

        screen = pygame.display.set_mode((int(self.viewport.width), int(self.viewport.height)))
        pygame.display.set_caption(WINDOW_TITLE)

        # Assets must be loaded before the first tick
        assets = load_assets(self.asset_dir)
        store = ScoreDatabase(self.db_file)
        engine = GameEngine(self.viewport, self.config, store=store)
        renderer = Renderer(screen, self.config, assets)
        audio = AudioPlayer(assets.sounds)
        spawn_timer = SpawnTimer(self.config.spawn_interval_ms)
        clock = pygame.time.Clock()

        logger.info("Starting with high score %d", engine.high_score)
        running = True
        try:
            while running:
                delta_ms = clock.tick(RENDER_FPS)

                for event in pygame.event.get():
                    intent = translate(event)
                    if intent is None:
                        continue
                    if intent is Intent.QUIT:
                        running = False
                    elif intent is Intent.TOGGLE_MUTE:
                        audio.toggle_mute()
                    else:
                        audio.play(dispatch(intent, engine))

                for _ in range(spawn_timer.advance(delta_ms)):
                    engine.maybe_spawn()

                events = engine.tick(delta_ms / 1000.0)
                if GameEvent.GAME_OVER in events:
                    log_run_end(engine.snapshot())
                audio.play(events)
                renderer.draw(engine.snapshot())
                pygame.display.flip()
        finally:
            store.close()
            pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="zippy", description="Zippy Bird")
    parser.add_argument("--db-file", default=DB_FILE, help="SQLite file for the high score")
    parser.add_argument("--assets", default=ASSET_DIR, help="Directory with sprites and sounds")
    parser.add_argument("--simple-pause", action="store_true",
                        help="Resume immediately instead of counting down")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = SIMPLE_PAUSE_CONFIG if args.simple_pause else GameConfig()
    ZippyClient(config, db_file=args.db_file, asset_dir=args.assets).run()


if __name__ == "__main__":
    main()
