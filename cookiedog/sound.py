"""Background music and sound effects."""

from __future__ import annotations

import os

import pygame


class SoundManager:
    """Plays music and effects through the pygame mixer."""

    def __init__(self) -> None:
        self._ready = False
        self._effects: dict[str, pygame.mixer.Sound] = {}

    def __enter__(self) -> SoundManager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def init(self) -> None:
        """Start the audio engine; raise RuntimeError if it cannot start."""
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise RuntimeError(f"audio engine failed to start: {exc}") from exc
        self._ready = True

    def _require_ready(self) -> None:
        if not self._ready:
            raise RuntimeError("sound manager is not initialised")

    def play_music(self, file_path: str | os.PathLike) -> bool:
        """Start playing ``file_path`` as music; return whether playback started."""
        self._require_ready()
        try:
            pygame.mixer.music.load(os.fspath(file_path))
            pygame.mixer.music.play()
        except (pygame.error, OSError):
            return False
        return True

    def play_sound_effect(self, file_path: str | os.PathLike) -> pygame.mixer.Channel | None:
        """Play ``file_path`` once; return its channel, or None if it could not play."""
        self._require_ready()
        key = os.fspath(file_path)
        sound = self._effects.get(key)
        if sound is None:
            try:
                sound = pygame.mixer.Sound(key)
            except (pygame.error, OSError):
                return None
            self._effects[key] = sound
        return sound.play()

    def close(self) -> None:
        """Stop the audio engine."""
        if self._ready:
            self._effects.clear()
            pygame.mixer.quit()
            self._ready = False