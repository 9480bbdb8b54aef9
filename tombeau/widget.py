"""Rectangles and the base widget drawn on a window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ErrorCode, GameError


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: int, y: int) -> bool:
        """Return whether the point lies inside the rectangle."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def scaled(self, width_ratio: float, height_ratio: float) -> Rect:
        """Return the rectangle scaled by the given ratios, truncated to ints."""
        return Rect(
            int(self.x * width_ratio),
            int(self.y * height_ratio),
            int(self.w * width_ratio),
            int(self.h * height_ratio),
        )


class Widget:
    """Something drawn with a renderer from a source area to a destination area."""

    def __init__(self, renderer: Any, source: Rect | None = None, dest: Rect | None = None) -> None:
        if renderer is None:
            raise GameError(ErrorCode.ARGUMENT, "Pas de renderer à renseigné")
        self.renderer = renderer
        self._source: Rect | None = None
        self._dest: Rect | None = None
        self.set_source(source)
        self.set_dest(dest)

    @property
    def source(self) -> Rect | None:
        return self._source

    @property
    def dest(self) -> Rect | None:
        return self._dest

    @staticmethod
    def _copy(rect: Rect | None) -> Rect | None:
        if rect is None:
            return None
        return Rect(rect.x, rect.y, rect.w, rect.h)

    def set_source(self, rect: Rect | None) -> None:
        """Replace the source area; ``None`` means the whole image."""
        self._source = self._copy(rect)

    def set_dest(self, rect: Rect | None) -> None:
        """Replace the destination area; ``None`` means the whole window."""
        self._dest = self._copy(rect)

    def rescale_dest(self, width_ratio: float, height_ratio: float) -> None:
        """Scale the destination area after the window was resized."""
        if self._dest is None:
            raise GameError(ErrorCode.FETCH, "Le widget n'à pas de zone de dessin à modifier")
        self._dest = self._dest.scaled(width_ratio, height_ratio)

    def hover(self, x: int, y: int) -> bool:
        """Return whether the cursor is over the widget."""
        if self._dest is None:
            return True
        return self._dest.contains(x, y)