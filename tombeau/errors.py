"""Error codes and the exception raised throughout the game."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Kinds of failure a game operation can report."""

    OK = 0
    INIT = 1
    MEMORY = 2
    ARGUMENT = 3
    FETCH = 4
    COLOR = 5
    SOUND = 6
    DISPLAY = 7
    FILE = 8
    OTHER = 9

    def describe(self) -> str:
        """Return a human-readable description of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.OK: "La fonction à réussi",
    ErrorCode.INIT: "Erreur lors de initialisation d'une librairie",
    ErrorCode.MEMORY: "La fonction à échouer à cause d'un manque d'espace mémoire",
    ErrorCode.ARGUMENT: "Mauvais arguments passé en paramètre",
    ErrorCode.FETCH: "Erreur lors d'une demande de donnée",
    ErrorCode.COLOR: "Erreur lors d'un changement de couleur",
    ErrorCode.SOUND: "Erreur lors de la gestion du son",
    ErrorCode.DISPLAY: "Erreur lors d'un affichage",
    ErrorCode.FILE: "Erreur lors de la gestion d'un fichier",
    ErrorCode.OTHER: "La fonction à échouer pour une erreur inconnu",
}


class GameError(Exception):
    """An error carrying an :class:`ErrorCode` and a message."""

    def __init__(self, code: ErrorCode = ErrorCode.OTHER, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message
        text = self.code.describe()
        if message:
            text = f"{text} : {message}"
        super().__init__(text)