"""
Zippy Bird: a frame-driven Flappy Bird simulation core with a pygame client.
"""

from .config import GameConfig
from .data_models import GameEvent, GameSnapshot, RunState, Viewport
from .game_engine import GameEngine
from .score_db import ScoreDatabase

__all__ = [
    "GameConfig", "GameEngine", "GameEvent", "GameSnapshot",
    "RunState", "ScoreDatabase", "Viewport",
]
