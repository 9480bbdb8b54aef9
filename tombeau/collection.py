"""An ordered list of game objects that releases what it drops."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .errors import ErrorCode, GameError


def _release(obj: Any) -> None:
    close = getattr(obj, "close", None)
    if callable(close):
        close()


def _describe(obj: Any) -> str:
    describe = getattr(obj, "describe", None)
    if callable(describe):
        return describe()
    return str(obj)


class ObjectList:
    """Ordered container of objects, compared by identity.

    Objects removed or cleared from the list are released by calling their
    ``close`` method when they have one.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __getitem__(self, pos: int) -> Any:
        """Return the object at ``pos``; ``None`` when the list is empty."""
        if pos < 0:
            raise GameError(ErrorCode.ARGUMENT, "pos est hors liste (<0)")
        if not self._items:
            return None
        if pos >= len(self._items):
            raise GameError(ErrorCode.ARGUMENT, "pos est hors liste (>nbElem)")
        return self._items[pos]

    def append(self, obj: Any) -> None:
        """Add ``obj`` at the end of the list."""
        if obj is None:
            raise GameError(ErrorCode.ARGUMENT, "L'objet à ajouter n'éxiste pas")
        self._items.append(obj)

    def index_of(self, obj: Any) -> int:
        """Return the position of ``obj`` (by identity), or -1 if absent."""
        if obj is None:
            raise GameError(ErrorCode.ARGUMENT, "L'objet à chercher n'éxiste pas")
        return next((i for i, item in enumerate(self._items) if item is obj), -1)

    def remove_at(self, pos: int) -> Any:
        """Remove, release and return the object at ``pos``."""
        if pos < 0:
            raise GameError(ErrorCode.ARGUMENT, "pos est hors liste (<0)")
        if not self._items:
            raise GameError(ErrorCode.ARGUMENT, "La liste est déjà vide.")
        if pos >= len(self._items):
            raise GameError(ErrorCode.ARGUMENT, "pos est hors liste (>nbElem)")
        obj = self._items.pop(pos)
        _release(obj)
        return obj

    def remove(self, obj: Any) -> bool:
        """Remove and release ``obj``; return whether it was present."""
        pos = self.index_of(obj)
        if pos == -1:
            return False
        self.remove_at(pos)
        return True

    def clear(self) -> None:
        """Release every object and empty the list."""
        items, self._items = self._items, []
        for obj in items:
            _release(obj)

    def describe(self) -> str:
        """Return a one-line description of the list and its contents."""
        if not self._items:
            return "liste{vide}"
        body = "\t".join(_describe(obj) for obj in self._items)
        return f"liste{{{len(self._items)} elem =>{body}<=}}"