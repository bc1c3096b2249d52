"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from .config import GameConfig, ScaledGeometry
from .data_models import Bird, Pipe, Viewport


class PhysicsCore:
    """
    Per-tick physics shared by the engine. Operates on one tick at a time;
    all constants are in pixels per tick.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, bird: Bird):
        """Accumulates gravity into velocity, then integrates position.

        Velocity is not capped.
        """
        bird.velocity += self.config.gravity
        bird.y += bird.velocity

    def flap(self, bird: Bird):
        bird.velocity = self.config.flap_speed

    def move_pipe(self, pipe: Pipe):
        pipe.x -= self.config.pipe_speed

    @staticmethod
    def ground_line(viewport: Viewport, geometry: ScaledGeometry) -> float:
        """Y coordinate of the top of the ground band."""
        return viewport.height - geometry.ground_height

    @staticmethod
    def hits_ground(bird: Bird, ground_y: float) -> bool:
        return bird.bottom >= ground_y

    @staticmethod
    def clamp_to_ground(bird: Bird, ground_y: float):
        bird.y = ground_y - bird.height
        bird.velocity = 0.0

    @staticmethod
    def has_passed(bird: Bird, pipe: Pipe) -> bool:
        """True once the bird's x is beyond the pipe's trailing edge."""
        return bird.x > pipe.x + pipe.width

    @staticmethod
    def check_collision(bird: Bird, pipe: Pipe) -> bool:
        """Axis-aligned box test between the bird and one pipe pair."""
        overlaps_x = bird.x + bird.width > pipe.x and bird.x < pipe.x + pipe.width
        if not overlaps_x:
            return False
        return bird.y < pipe.gap_y or bird.bottom > pipe.gap_bottom

    @staticmethod
    def is_off_screen(pipe: Pipe) -> bool:
        return pipe.x + pipe.width <= 0
