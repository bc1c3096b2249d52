import pygame
import pytest

from zippy.data_models import GameEvent, RunState
from zippy.input_adapter import Intent, dispatch, translate


@pytest.mark.parametrize("event, intent", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), Intent.FLAP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p), Intent.TOGGLE_PAUSE),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_m), Intent.TOGGLE_MUTE),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), Intent.QUIT),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), None),
    (pygame.event.Event(pygame.QUIT), Intent.QUIT),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)), Intent.FLAP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5), touch=True), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2, pos=(5, 5)), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(5, 5)), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(5, 5)), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=(5, 5)), None),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5), Intent.FLAP),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1)), None),
])
def test_translate(event, intent):
    assert translate(event) is intent


def test_dispatch_forwards_to_engine(engine):
    assert dispatch(Intent.FLAP, engine) == [GameEvent.FLAP]
    assert engine.state is RunState.RUNNING
    dispatch(Intent.TOGGLE_PAUSE, engine)
    assert engine.state is RunState.PAUSED
    assert dispatch(Intent.TOGGLE_MUTE, engine) == []
    assert dispatch(Intent.QUIT, engine) == []


def test_wheel_scroll_does_not_restart_after_game_over(engine):
    engine.on_flap()
    engine._end_run([], "test")
    wheel = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(5, 5))
    intent = translate(wheel)
    if intent is not None:
        dispatch(intent, engine)
    assert intent is None
    assert engine.state is RunState.GAME_OVER
