import pygame
import pytest

from zippy.assets import Assets
from zippy.config import GameConfig
from zippy.data_models import BirdView, GameSnapshot, PipeView, RunState
from zippy.renderer import (
    BIRD_COLOR, GROUND_COLOR, PIPE_COLOR, SKY_COLOR, Renderer, bird_rotation
)


@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((360, 640))


def color_at(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def snapshot(state=RunState.RUNNING, pipes=(), countdown=0):
    return GameSnapshot(
        bird=BirdView(60, 240, 50, 50, 0),
        pipes=tuple(pipes),
        score=1,
        high_score=4,
        state=state,
        pause_countdown=countdown,
    )


def test_flat_color_fallback_without_assets(surface):
    renderer = Renderer(surface, GameConfig(), Assets())
    renderer.draw(snapshot(pipes=[PipeView(200, 200, 200, 80)]))

    assert color_at(surface, (5, 200)) == SKY_COLOR
    assert color_at(surface, (5, 600)) == GROUND_COLOR
    assert color_at(surface, (70, 250)) == BIRD_COLOR
    assert color_at(surface, (210, 150)) == PIPE_COLOR
    assert color_at(surface, (210, 300)) == SKY_COLOR
    assert color_at(surface, (210, 450)) == PIPE_COLOR


@pytest.mark.parametrize("state, countdown", [
    (RunState.NOT_STARTED, 0),
    (RunState.RUNNING, 0),
    (RunState.PAUSED, 0),
    (RunState.PAUSED, 3),
    (RunState.GAME_OVER, 0),
])
def test_every_state_draws(surface, state, countdown):
    Renderer(surface, GameConfig()).draw(snapshot(state, countdown=countdown))


def test_sprites_are_used_when_loaded(surface):
    sprite = pygame.Surface((10, 10))
    sprite.fill((1, 2, 3))
    assets = Assets(images={"bird": sprite, "pipe": sprite, "background": sprite, "ground": sprite})
    Renderer(surface, GameConfig(), assets).draw(snapshot(pipes=[PipeView(200, 200, 200, 80)]))
    assert color_at(surface, (5, 200)) == (1, 2, 3)
    assert color_at(surface, (210, 450)) == (1, 2, 3)


def test_renderer_does_not_mutate_snapshot(surface, engine):
    engine.on_flap()
    before = engine.snapshot()
    Renderer(surface, GameConfig()).draw(before)
    assert engine.snapshot() == before


@pytest.mark.parametrize("velocity, angle", [(0, 0), (5, 15), (20, 30), (-8, -24), (-15, -30)])
def test_bird_rotation_clamped(velocity, angle):
    assert bird_rotation(velocity) == angle
