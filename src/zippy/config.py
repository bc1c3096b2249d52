"""
config.py: Tunable game rules and viewport scaling.

Every rule that differs between game variants (resume countdown length,
physics constants, pipe sizes) is a field here instead of a code path.
"""

from dataclasses import dataclass

from .constants import (
    BASE_WIDTH, BASE_HEIGHT, GRAVITY, FLAP_SPEED, PIPE_SPEED,
    PIPE_SPAWN_INTERVAL_MS, BIRD_SIZE, BIRD_START_X, BIRD_START_Y,
    PIPE_WIDTH, PIPE_GAP, MIN_PIPE_DISTANCE, MIN_PIPE_HEIGHT, GROUND_HEIGHT,
    PAUSE_COUNTDOWN_STEPS, PAUSE_COUNTDOWN_STEP_SECONDS
)
from .data_models import Viewport


@dataclass(frozen=True)
class ScaledGeometry:
    """Sizes for one viewport, derived from the reference resolution."""
    scale_x: float
    scale_y: float
    bird_x: float
    bird_size: float
    pipe_width: float
    gap_height: float
    ground_height: float


@dataclass(frozen=True)
class GameConfig:
    gravity: float = GRAVITY
    flap_speed: float = FLAP_SPEED
    pipe_speed: float = PIPE_SPEED
    spawn_interval_ms: int = PIPE_SPAWN_INTERVAL_MS
    bird_size: float = BIRD_SIZE
    bird_start_x: float = BIRD_START_X
    bird_start_y: float = BIRD_START_Y
    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    min_pipe_distance: float = MIN_PIPE_DISTANCE
    min_top_clearance: float = MIN_PIPE_HEIGHT
    min_bottom_clearance: float = MIN_PIPE_HEIGHT
    ground_height: float = GROUND_HEIGHT
    pause_countdown_steps: int = PAUSE_COUNTDOWN_STEPS
    countdown_step_seconds: float = PAUSE_COUNTDOWN_STEP_SECONDS
    base_width: float = BASE_WIDTH
    base_height: float = BASE_HEIGHT

    def __post_init__(self):
        for name in ("bird_size", "pipe_width", "pipe_gap", "spawn_interval_ms",
                     "countdown_step_seconds", "base_width", "base_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.pause_countdown_steps < 0:
            raise ValueError("pause_countdown_steps cannot be negative")
        if self.flap_speed >= 0:
            raise ValueError("flap_speed must be negative (upward)")

    def geometry(self, viewport: Viewport) -> ScaledGeometry:
        """Scales sizes from the reference resolution to the given viewport."""
        scale_x = viewport.width / self.base_width
        scale_y = viewport.height / self.base_height
        scale = min(scale_x, scale_y)
        return ScaledGeometry(
            scale_x=scale_x,
            scale_y=scale_y,
            bird_x=self.bird_start_x * scale_x,
            bird_size=self.bird_size * scale,
            pipe_width=self.pipe_width * scale,
            gap_height=self.pipe_gap * scale_y,
            ground_height=self.ground_height * scale_y,
        )


# Variant where unpausing resumes play immediately.
SIMPLE_PAUSE_CONFIG = GameConfig(pause_countdown_steps=0)
