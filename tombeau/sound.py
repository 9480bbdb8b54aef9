"""Music and sound effects of the game."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import pygame

from .errors import ErrorCode, GameError

SOUND_DIR = Path("Annexe/sons")


class SoundKind(IntEnum):
    """Whether a sound is streamed music or a fully loaded effect."""

    UNKNOWN = 0
    MUSIC = 1
    EFFECT = 2


class _MusicState:
    paused = False


_music = _MusicState()


def sound_path(name: str) -> Path:
    """Return the path of a sound file, relative to the game's root."""
    return SOUND_DIR / name


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise GameError(ErrorCode.INIT, f"initialisation du son : {exc}") from exc


def toggle_pause() -> bool:
    """Pause the music if it plays, resume it if paused; return whether it is paused."""
    if not pygame.mixer.get_init():
        raise GameError(ErrorCode.SOUND, "le son n'est pas initialisé")
    if _music.paused:
        pygame.mixer.music.unpause()
        _music.paused = False
    else:
        pygame.mixer.music.pause()
        _music.paused = True
    return _music.paused


class Sound:
    """A piece of music or a sound effect loaded from the sounds folder."""

    def __init__(self, kind: SoundKind, name: str, root: str | Path = ".") -> None:
        try:
            kind = SoundKind(kind)
        except ValueError:
            raise GameError(ErrorCode.ARGUMENT, "Le type renseigné est inconnu") from None
        if kind is SoundKind.UNKNOWN:
            raise GameError(
                ErrorCode.ARGUMENT,
                "Je ne sais pas si mon son est une musique ou un effet sonore.",
            )
        if not name:
            raise GameError(ErrorCode.ARGUMENT, "il n'y à pas de son à charger")
        self.kind = kind
        self.path = Path(root) / sound_path(name)
        what = "La musique" if kind is SoundKind.MUSIC else "L'effet sonore"
        if not self.path.is_file():
            raise GameError(ErrorCode.SOUND, f"{what} ('{self.path}') ne peut pas être chargé")
        _ensure_mixer()
        self._effect: pygame.mixer.Sound | None = None
        try:
            if kind is SoundKind.EFFECT:
                self._effect = pygame.mixer.Sound(str(self.path))
            else:
                pygame.mixer.music.load(str(self.path))
        except pygame.error as exc:
            raise GameError(
                ErrorCode.SOUND, f"{what} ('{self.path}') ne peut pas être chargé : {exc}"
            ) from exc

    def play(self, repeats: int = 0) -> None:
        """Play the sound; an effect loops ``repeats`` extra times, music plays ``repeats`` times."""
        try:
            if self.kind is SoundKind.EFFECT:
                if self._effect is None:
                    raise GameError(ErrorCode.SOUND, "L'effet sonore a été libéré")
                if self._effect.play(loops=repeats) is None:
                    raise GameError(ErrorCode.SOUND, "Le son waves ne peut pas être joué")
            else:
                loops = -1 if repeats < 0 else max(repeats - 1, 0)
                pygame.mixer.music.load(str(self.path))
                pygame.mixer.music.play(loops)
                _music.paused = False
        except pygame.error as exc:
            raise GameError(ErrorCode.SOUND, f"Problème à la lecture du son : {exc}") from exc

    def describe(self) -> str:
        """Return a one-line description of the sound."""
        if self.kind is SoundKind.MUSIC:
            return "son{La musique se charge petit à petit}"
        return "son{L'effet sonore est enitièrement chargé}"

    def close(self) -> None:
        """Release what the sound holds."""
        if self.kind is SoundKind.EFFECT:
            self._effect = None
        elif pygame.mixer.get_init():
            pygame.mixer.music.stop()
            _music.paused = False