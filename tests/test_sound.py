import struct
import wave

import pygame
import pytest

from cookiedog.sound import SoundManager


def write_wav(path, seconds=1.0, rate=22050):
    frames = int(rate * seconds)
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(rate)
        out.writeframes(struct.pack("<h", 0) * frames)
    return path


@pytest.fixture
def manager(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    sound = SoundManager()
    sound.init()
    yield sound
    sound.close()


def test_play_before_init_raises(tmp_path):
    sound = SoundManager()
    with pytest.raises(RuntimeError):
        sound.play_sound_effect(write_wav(tmp_path / "eat.wav"))


def test_music_before_init_raises(tmp_path):
    sound = SoundManager()
    with pytest.raises(RuntimeError):
        sound.play_music(write_wav(tmp_path / "bg.wav"))


def test_play_sound_effect_plays_file(manager, tmp_path):
    channel = manager.play_sound_effect(write_wav(tmp_path / "eat.wav", seconds=1.0))
    playing = channel.get_sound()
    assert playing is not None
    assert playing.get_length() == pytest.approx(1.0, abs=0.05)


def test_missing_effect_gives_none(manager, tmp_path):
    assert manager.play_sound_effect(tmp_path / "missing.wav") is None


def test_play_music_starts_playback(manager, tmp_path):
    assert manager.play_music(write_wav(tmp_path / "bg.wav", seconds=2.0)) is True
    assert pygame.mixer.music.get_busy()


def test_missing_music_reports_failure(manager, tmp_path):
    assert manager.play_music(tmp_path / "missing.ogg") is False


def test_close_stops_engine(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    sound = SoundManager()
    sound.init()
    sound.close()
    assert pygame.mixer.get_init() is None
    with pytest.raises(RuntimeError):
        sound.play_sound_effect(write_wav(tmp_path / "eat.wav"))


def test_context_manager_closes(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    clip = write_wav(tmp_path / "eat.wav", seconds=0.5)
    with SoundManager() as sound:
        sound.init()
        channel = sound.play_sound_effect(clip)
        assert channel.get_sound().get_length() == pytest.approx(0.5, abs=0.05)
    assert pygame.mixer.get_init() is None
    with pytest.raises(RuntimeError):
        sound.play_sound_effect(clip)