"""Fonts used to turn text into images."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pygame

from .errors import ErrorCode, GameError

FONT_DIR = Path("Annexe/font")
DEFAULT_FONT = "Roboto/Roboto-Thin.ttf"
DEFAULT_SIZE = 18

Color = tuple[int, int, int, int]


def font_path(name: str | None = None) -> Path:
    """Return the path of a font file, relative to the game's root."""
    return FONT_DIR / (name or DEFAULT_FONT)


def _to_color(color: Sequence[int] | None) -> Color:
    if color is None:
        return (0, 0, 0, 0)
    values = tuple(int(c) for c in color)
    if len(values) == 3:
        values = (*values, 255)
    if len(values) != 4 or any(not 0 <= c <= 255 for c in values):
        raise GameError(ErrorCode.COLOR, f"couleur invalide : {color!r}")
    return values  # type: ignore[return-value]


class Font:
    """A font face of a given size, with the colour it writes in."""

    def __init__(
        self,
        name: str | None = None,
        size: int = 0,
        color: Sequence[int] | None = None,
        root: str | Path = ".",
    ) -> None:
        self.size = size or DEFAULT_SIZE
        self.path = Path(root) / font_path(name)
        if not self.path.is_file():
            raise GameError(ErrorCode.FILE, f"de l'ouverture de la police '{self.path}'")
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font: pygame.font.Font | None = pygame.font.Font(str(self.path), self.size)
        except (pygame.error, OSError) as exc:
            raise GameError(ErrorCode.FILE, f"de l'ouverture de la police '{self.path}' : {exc}") from exc
        self.color = _to_color(color)

    @property
    def _face(self) -> pygame.font.Font:
        if self._font is None:
            raise GameError(ErrorCode.ARGUMENT, "Pas de police d'écriture de renseigné.")
        return self._font

    def set_color(self, color: Sequence[int]) -> None:
        """Change the colour the font writes in."""
        self.color = _to_color(color)

    def _wrap(self, text: str, max_width: int) -> list[str]:
        face = self._face
        lines: list[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if current and face.size(candidate)[0] > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def render(self, text: str, max_width: int = 0) -> pygame.Surface:
        """Render ``text``; wrap it to ``max_width`` pixels when that is positive."""
        if text is None:
            raise GameError(ErrorCode.ARGUMENT, "Pas de texte à écrire.")
        face = self._face
        rgb = self.color[:3]
        try:
            if max_width <= 0:
                return face.render(text, False, rgb)
            lines = [face.render(line, True, rgb) for line in self._wrap(text, max_width)]
            step = face.get_linesize()
            width = max(max(line.get_width() for line in lines), 1)
            surface = pygame.Surface((width, step * len(lines)), pygame.SRCALPHA)
            for row, line in enumerate(lines):
                surface.blit(line, (0, row * step))
            return surface
        except pygame.error as exc:
            raise GameError(ErrorCode.COLOR, f"Création de la surface de texte : {exc}") from exc

    def describe(self) -> str:
        """Return a one-line description of the font's colour."""
        r, g, b, a = self.color
        return f"police{{r={r};g={g};b={b};a={a}}}"

    def close(self) -> None:
        """Release the font face."""
        self._font = None