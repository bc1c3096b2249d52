import os
import random

# Headless pygame for renderer/input/asset tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from zippy.config import GameConfig
from zippy.data_models import RunState, Viewport
from zippy.game_engine import GameEngine
from zippy.score_db import ScoreDatabase


@pytest.fixture
def viewport():
    return Viewport(360, 640)


@pytest.fixture
def store():
    db = ScoreDatabase(":memory:")
    yield db
    db.close()


@pytest.fixture
def engine(viewport, store):
    return GameEngine(viewport, GameConfig(), store=store, rng=random.Random(1234))


@pytest.fixture
def floating_engine(viewport, store):
    """Engine without gravity so the bird holds its height while pipes move."""
    eng = GameEngine(viewport, GameConfig(gravity=0.0), store=store, rng=random.Random(42))
    eng.state = RunState.RUNNING
    return eng
