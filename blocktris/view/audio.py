# blocktris/view/audio.py
from __future__ import annotations

import logging
import os

import arcade

from blocktris.core.sound import SoundEvent

logger = logging.getLogger(__name__)

MUSIC_FILE = "bgm.wav"


class SoundPlayer:
    """
    Tocador de efeitos e música de fundo via arcade.

    Tocar som nunca derruba o jogo: arquivo ausente, backend de áudio
    indisponível ou erro de reprodução só vão pro log (debug).
    """

    def __init__(self, sound_dir: str, muted: bool = False, volume: float = 0.8):
        self.sound_dir = sound_dir
        self.muted = muted
        self.volume = volume
        self._cache: dict[str, arcade.Sound | None] = {}
        self._music_player = None

    def _load(self, filename: str) -> arcade.Sound | None:
        if filename in self._cache:
            return self._cache[filename]
        path = os.path.join(self.sound_dir, filename)
        try:
            sound = arcade.load_sound(path)
        except Exception as e:
            logger.debug("não foi possível carregar %s: %s", path, e)
            sound = None
        self._cache[filename] = sound
        return sound

    def play(self, event: SoundEvent) -> None:
        if self.muted:
            return
        sound = self._load(f"{event.value}.wav")
        if sound is None:
            return
        try:
            arcade.play_sound(sound, volume=self.volume)
        except Exception as e:
            logger.debug("falha ao tocar %s: %s", event.value, e)

    # ----- música de fundo -----
    def start_music(self) -> None:
        self.stop_music()
        if self.muted:
            return
        music = self._load(MUSIC_FILE)
        if music is None:
            return
        try:
            self._music_player = arcade.play_sound(music, volume=self.volume * 0.5, loop=True)
        except Exception as e:
            logger.debug("falha ao tocar música: %s", e)

    def pause_music(self) -> None:
        if self._music_player is None:
            return
        try:
            self._music_player.pause()
        except Exception as e:
            logger.debug("falha ao pausar música: %s", e)

    def resume_music(self) -> None:
        if self.muted:
            return
        if self._music_player is None:
            self.start_music()
            return
        try:
            self._music_player.play()
        except Exception as e:
            logger.debug("falha ao retomar música: %s", e)

    def stop_music(self) -> None:
        if self._music_player is None:
            return
        try:
            arcade.stop_sound(self._music_player)
        except Exception as e:
            logger.debug("falha ao parar música: %s", e)
        self._music_player = None
