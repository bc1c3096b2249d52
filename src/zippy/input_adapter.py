"""
input_adapter.py: Translates raw pygame events into game intents.
"""

from enum import Enum
from typing import List, Optional

import pygame

from .data_models import GameEvent


class Intent(Enum):
    FLAP = "flap"
    TOGGLE_PAUSE = "toggle_pause"
    TOGGLE_MUTE = "toggle_mute"
    QUIT = "quit"


def translate(event: pygame.event.Event) -> Optional[Intent]:
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return Intent.QUIT
        if event.key == pygame.K_SPACE:
            return Intent.FLAP
        if event.key == pygame.K_p:
            return Intent.TOGGLE_PAUSE
        if event.key == pygame.K_m:
            return Intent.TOGGLE_MUTE
        return None
    if event.type == pygame.FINGERDOWN:
        return Intent.FLAP
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL also emits a synthetic mouse click for every touch
        if getattr(event, "touch", False):
            return None
        # Primary button only; wheel scrolls arrive as buttons 4/5
        if getattr(event, "button", None) != 1:
            return None
        return Intent.FLAP
    return None


def dispatch(intent: Intent, engine) -> List[GameEvent]:
    """Forwards engine-level intents. Client-level intents are left to the caller."""
    if intent is Intent.FLAP:
        return engine.on_flap()
    if intent is Intent.TOGGLE_PAUSE:
        return engine.on_toggle_pause()
    return []
