"""pygame-backed alert player with completion notification."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable

import pygame

logger = logging.getLogger(__name__)

_mixer_lock = threading.Lock()
_POLL_INTERVAL_SEC = 0.05
DEFAULT_FALLBACK_SEC = 3.0


def _ensure_mixer() -> None:
    with _mixer_lock:
        if not pygame.mixer.get_init():
            pygame.mixer.init()


class PygameAlertPlayer:
    """Plays one sound file; the volume is fixed when playback starts.

    When the sound cannot be played, completion is still reported, after
    ``fallback_sec``, so the alert stays on screen for a cue-sized interval.
    """

    def __init__(
        self,
        sound_path: str | Path,
        fallback_sec: float = DEFAULT_FALLBACK_SEC,
    ) -> None:
        self._path = Path(sound_path)
        self._fallback_sec = fallback_sec
        self._sound: pygame.mixer.Sound | None = None
        self._load_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def play(self, volume: float, on_complete: Callable[[], None]) -> None:
        try:
            sound = self._load()
            sound.set_volume(volume)
            channel = sound.play()
        except (pygame.error, OSError):
            logger.exception("Cannot play alert sound %s", self._path)
            self._complete_later(on_complete)
            return

        if channel is None:
            logger.warning("No free mixer channel for %s", self._path)
            self._complete_later(on_complete)
            return

        watcher = threading.Thread(
            target=self._wait_for_end,
            args=(channel, sound, on_complete),
            daemon=True,
        )
        watcher.start()

    def _complete_later(self, on_complete: Callable[[], None]) -> None:
        timer = threading.Timer(self._fallback_sec, on_complete)
        timer.daemon = True
        timer.start()

    def _load(self) -> pygame.mixer.Sound:
        with self._load_lock:
            if self._sound is None:
                _ensure_mixer()
                self._sound = pygame.mixer.Sound(str(self._path))
            return self._sound

    @staticmethod
    def _wait_for_end(
        channel: pygame.mixer.Channel,
        sound: pygame.mixer.Sound,
        on_complete: Callable[[], None],
    ) -> None:
        while channel.get_busy() and channel.get_sound() is sound:
            time.sleep(_POLL_INTERVAL_SEC)
        on_complete()
