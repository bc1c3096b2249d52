"""
spawner.py: Decides when and where new pipes enter the world.
"""

import logging
import math
import random
from typing import List, Optional, Tuple

from .config import GameConfig, ScaledGeometry
from .data_models import Pipe, Viewport

logger = logging.getLogger(__name__)


class PipeSpawner:
    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()

    def can_spawn(self, pipes: List[Pipe], viewport: Viewport) -> bool:
        """Enforces the minimum horizontal spacing from the newest pipe."""
        if not pipes:
            return True
        last_pipe = pipes[-1]
        return last_pipe.x <= viewport.width - self.config.min_pipe_distance

    def gap_bounds(self, viewport: Viewport, gap_height: float) -> Tuple[int, int]:
        """Inclusive range of valid gap offsets (top edge of the gap)."""
        low = math.ceil(self.config.min_top_clearance)
        high = math.floor(viewport.height - gap_height - self.config.min_bottom_clearance)
        return low, high

    def spawn(self, viewport: Viewport, geometry: ScaledGeometry) -> Pipe:
        """Generates a new pipe at the right edge of the viewport."""
        low, high = self.gap_bounds(viewport, geometry.gap_height)
        if high < low:
            logger.warning(
                "Viewport %sx%s too small for gap %.1f, placing gap at %d",
                viewport.width, viewport.height, geometry.gap_height, low)
            gap_y = low
        else:
            gap_y = self.rng.randint(low, high)

        pipe = Pipe(
            x=float(viewport.width),
            gap_y=float(gap_y),
            gap_height=geometry.gap_height,
            width=geometry.pipe_width,
        )
        logger.debug("Spawned pipe at x=%.1f gap_y=%.1f", pipe.x, pipe.gap_y)
        return pipe
