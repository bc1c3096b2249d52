"""
audio.py: Plays sounds for the events returned by the engine.
"""

import logging
from typing import Dict, Iterable

import pygame

from .data_models import GameEvent

logger = logging.getLogger(__name__)

EVENT_SOUNDS = {
    GameEvent.FLAP: "jump",
    GameEvent.SCORE: "score",
    GameEvent.GAME_OVER: "game_over",
}


class AudioPlayer:
    def __init__(self, sounds: Dict[str, object]):
        self.sounds = sounds
        self.muted = False

    def toggle_mute(self):
        self.muted = not self.muted
        logger.info("Sound %s", "muted" if self.muted else "unmuted")

    def play(self, events: Iterable[GameEvent]):
        if self.muted:
            return
        for event in events:
            sound = self.sounds.get(EVENT_SOUNDS.get(event))
            if sound is None:
                continue
            try:
                # Restart from the beginning if it is still playing
                sound.stop()
                sound.play()
            except pygame.error as e:
                logger.warning("Could not play %s sound: %s", event.value, e)
