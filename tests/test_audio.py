import logging

import pygame

from zippy.audio import AudioPlayer
from zippy.data_models import GameEvent


class FakeSound:
    def __init__(self, fail=False):
        self.plays = 0
        self.stops = 0
        self.fail = fail

    def stop(self):
        self.stops += 1

    def play(self):
        if self.fail:
            raise pygame.error("device gone")
        self.plays += 1


def test_events_map_to_sounds():
    sounds = {"jump": FakeSound(), "score": FakeSound(), "game_over": FakeSound()}
    player = AudioPlayer(sounds)
    player.play([GameEvent.FLAP, GameEvent.SCORE, GameEvent.FLAP])
    assert sounds["jump"].plays == 2
    assert sounds["jump"].stops == 2
    assert sounds["score"].plays == 1
    assert sounds["game_over"].plays == 0


def test_missing_sounds_are_silent():
    player = AudioPlayer({"jump": None})
    player.play([GameEvent.FLAP, GameEvent.GAME_OVER])


def test_mute():
    sound = FakeSound()
    player = AudioPlayer({"score": sound})
    player.toggle_mute()
    player.play([GameEvent.SCORE])
    assert sound.plays == 0
    player.toggle_mute()
    player.play([GameEvent.SCORE])
    assert sound.plays == 1


def test_playback_errors_are_logged(caplog):
    player = AudioPlayer({"game_over": FakeSound(fail=True)})
    with caplog.at_level(logging.WARNING, logger="zippy.audio"):
        player.play([GameEvent.GAME_OVER])
    assert "device gone" in caplog.text
