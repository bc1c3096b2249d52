"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .constants import BIRD_SIZE, BIRD_START_X, BIRD_START_Y


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    """One-shot side-effect signals published for the audio collaborator."""
    FLAP = "flap"
    SCORE = "score"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Viewport:
    """Current drawable area in pixels."""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport must have a positive size, got {self.width}x{self.height}")


@dataclass
class Bird:
    """The player-controlled avatar. x is fixed during a run."""
    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    velocity: float = 0.0
    width: float = BIRD_SIZE
    height: float = BIRD_SIZE

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Pipe:
    """A gated pipe pair. gap_y is the top edge of the opening."""
    x: float
    gap_y: float
    gap_height: float
    width: float
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap_height


@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    width: float
    height: float
    velocity: float


@dataclass(frozen=True)
class PipeView:
    x: float
    gap_y: float
    gap_height: float
    width: float


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the simulation handed to the renderer."""
    bird: BirdView
    pipes: Tuple[PipeView, ...] = field(default_factory=tuple)
    score: int = 0
    high_score: int = 0
    state: RunState = RunState.NOT_STARTED
    pause_countdown: int = 0

    def to_render_state(self):
        """Flattens the snapshot into a dict with rounded floats for logging."""
        return {
            "bird": {
                "x": round(self.bird.x, 2),
                "y": round(self.bird.y, 2),
                "w": round(self.bird.width, 2),
                "h": round(self.bird.height, 2),
                "v": round(self.bird.velocity, 2),
            },
            "pipes": [
                {"x": round(p.x, 2), "gap_y": round(p.gap_y, 2), "gap_h": round(p.gap_height, 2)}
                for p in self.pipes
            ],
            "score": self.score,
            "high_score": self.high_score,
            "state": self.state.value,
            "countdown": self.pause_countdown,
        }
