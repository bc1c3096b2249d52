"""
game_engine.py: The single-player simulation core.

GameEngine owns the bird, the pipes, the score and the run state. It is the
only writer of that state; renderers read snapshots and input adapters call
the public entry points. Every entry point returns the GameEvents it emitted
so sounds can be played by whoever drives the engine.
"""

import logging
import random
from typing import List, Optional

from .config import GameConfig, ScaledGeometry
from .data_models import (
    Bird, BirdView, GameEvent, GameSnapshot, Pipe, PipeView, RunState, Viewport
)
from .physics_core import PhysicsCore
from .spawner import PipeSpawner

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Frame-driven simulation. The driver calls tick() once per rendered frame
    and maybe_spawn() on a separate fixed interval.
    """

    def __init__(self, viewport: Viewport, config: Optional[GameConfig] = None,
                 store=None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.physics = PhysicsCore(self.config)
        self.spawner = PipeSpawner(self.config, rng)
        self.store = store

        self.viewport = viewport
        self.geometry: ScaledGeometry = self.config.geometry(viewport)

        self.state = RunState.NOT_STARTED
        self.bird = Bird()
        self.pipes: List[Pipe] = []
        self.score = 0
        self.high_score = store.get_high_score() if store is not None else 0
        self.game_over_signalled = False

        self.pause_countdown = 0
        self._countdown_elapsed = 0.0

        self._place_bird()

    # ---------- Input entry points ----------

    def on_flap(self) -> List[GameEvent]:
        """Flap intent. Restarts after a game over, starts a new run, or flaps."""
        if self.state is RunState.GAME_OVER:
            self.reset()
            return []
        if self.state is RunState.PAUSED:
            # Inert while paused, including during the resume countdown.
            return []
        if self.state is RunState.NOT_STARTED:
            self.state = RunState.RUNNING
            logger.info("Run started")

        self.physics.flap(self.bird)
        return [GameEvent.FLAP]

    def on_toggle_pause(self) -> List[GameEvent]:
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
            logger.info("Paused")
        elif self.state is RunState.PAUSED:
            if self.pause_countdown > 0:
                self._cancel_countdown()
                logger.info("Resume countdown cancelled")
            elif self.config.pause_countdown_steps == 0:
                self.state = RunState.RUNNING
                logger.info("Resumed")
            else:
                self.pause_countdown = self.config.pause_countdown_steps
                self._countdown_elapsed = 0.0
                logger.info("Resuming in %d", self.pause_countdown)
        return []

    def reset(self) -> List[GameEvent]:
        """Returns to NOT_STARTED, saving the score if it beats the high score."""
        if self.score > self.high_score:
            self._record_high_score()

        self.pipes = []
        self.score = 0
        self.bird = Bird()
        self._place_bird()
        self.game_over_signalled = False
        self._cancel_countdown()
        self.state = RunState.NOT_STARTED
        logger.info("Game reset")
        return []

    # ---------- Driver entry points ----------

    def tick(self, dt: float = 0.0, viewport: Optional[Viewport] = None) -> List[GameEvent]:
        """
        Advances the simulation by one frame. dt (seconds) only drives the
        resume countdown; physics constants are per tick.
        """
        if viewport is not None and viewport != self.viewport:
            self.resize(viewport)

        if self.state is RunState.PAUSED:
            self._advance_countdown(dt)
            return []
        if self.state is not RunState.RUNNING:
            return []

        events: List[GameEvent] = []

        # 1. Bird physics and ground
        self.physics.apply_gravity_and_movement(self.bird)
        ground_y = self.physics.ground_line(self.viewport, self.geometry)
        if self.physics.hits_ground(self.bird, ground_y):
            self.physics.clamp_to_ground(self.bird, ground_y)
            self._end_run(events, "hit the ground")

        if self.state is not RunState.RUNNING:
            return events

        # 2. Pipes: move, score, collide
        for pipe in self.pipes:
            self.physics.move_pipe(pipe)

            if not pipe.passed and self.physics.has_passed(self.bird, pipe):
                pipe.passed = True
                self.score += 1
                events.append(GameEvent.SCORE)

            if self.physics.check_collision(self.bird, pipe):
                self._end_run(events, "hit a pipe")

        # 3. Retire pipes that left the screen
        self.pipes = [p for p in self.pipes if not self.physics.is_off_screen(p)]
        return events

    def maybe_spawn(self, viewport: Optional[Viewport] = None) -> Optional[Pipe]:
        """Called on the spawn interval. Returns the new pipe, if any."""
        if viewport is not None and viewport != self.viewport:
            self.resize(viewport)
        if self.state is not RunState.RUNNING:
            return None
        if not self.spawner.can_spawn(self.pipes, self.viewport):
            logger.debug("Spawn skipped, last pipe too close")
            return None

        pipe = self.spawner.spawn(self.viewport, self.geometry)
        self.pipes.append(pipe)
        return pipe

    def resize(self, viewport: Viewport):
        """Rescales the bird for a new viewport. Existing pipes keep their place."""
        self.viewport = viewport
        self.geometry = self.config.geometry(viewport)
        self.bird.x = self.geometry.bird_x
        self.bird.width = self.geometry.bird_size
        self.bird.height = self.geometry.bird_size

    # ---------- Read access ----------

    def snapshot(self) -> GameSnapshot:
        bird = self.bird
        return GameSnapshot(
            bird=BirdView(bird.x, bird.y, bird.width, bird.height, bird.velocity),
            pipes=tuple(PipeView(p.x, p.gap_y, p.gap_height, p.width) for p in self.pipes),
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            pause_countdown=self.pause_countdown,
        )

    # ---------- Internals ----------

    def _place_bird(self):
        self.bird.x = self.geometry.bird_x
        self.bird.y = self.config.bird_start_y
        self.bird.velocity = 0.0
        self.bird.width = self.geometry.bird_size
        self.bird.height = self.geometry.bird_size

    def _end_run(self, events: List[GameEvent], reason: str):
        """Transitions to GAME_OVER. Emits the signal at most once per run."""
        self.state = RunState.GAME_OVER
        if self.game_over_signalled:
            return
        self.game_over_signalled = True
        events.append(GameEvent.GAME_OVER)
        logger.info("Game over (%s), score %d", reason, self.score)
        if self.score > self.high_score:
            self._record_high_score()

    def _record_high_score(self):
        self.high_score = self.score
        logger.info("New high score: %d", self.high_score)
        if self.store is not None:
            self.store.update_high_score(self.high_score)

    def _advance_countdown(self, dt: float):
        if self.pause_countdown <= 0:
            return
        self._countdown_elapsed += dt
        step = self.config.countdown_step_seconds
        while self.pause_countdown > 0 and self._countdown_elapsed >= step:
            self._countdown_elapsed -= step
            self.pause_countdown -= 1
        if self.pause_countdown == 0:
            self._countdown_elapsed = 0.0
            self.state = RunState.RUNNING
            logger.info("Resumed")

    def _cancel_countdown(self):
        self.pause_countdown = 0
        self._countdown_elapsed = 0.0
