"""Reading chapter scripts: lines, labels and the small inline codes they hold."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterator, TextIO

from .character import Item, Stat
from .errors import ErrorCode, GameError

END_MARK = "=FIN="
PAUSE_MARK = "==="

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MODIFIER_LETTERS = {
    "F": Stat.STRENGTH,
    "I": Stat.INTELLIGENCE,
    "P": Stat.HP,
    "D": Stat.ARMOUR,
    "C": Stat.CRITICAL,
    "A": Stat.AGILITY,
}

_STAT_CHANGES = {
    "P": "hp",
    "O": "gold",
}


class Progress(IntEnum):
    """How far the reading of a chapter has gone."""

    END = 0
    NEW = 1
    CONTINUE = 2
    QUESTION = 3


def _leading_int(text: str) -> int:
    """Read an integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class ScriptReader:
    """Line reader over a chapter script.

    Blank lines are skipped and leading whitespace is dropped. A line ending
    with a backslash is joined with the line that follows it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _raw_line(self) -> str | None:
        for line in self._stream:
            line = line.rstrip("\r\n").lstrip()
            if line:
                return line
        return None

    def next_line(self) -> str | None:
        """Return the next logical line, or ``None`` at the end of the script."""
        line = self._raw_line()
        if line is None:
            return None
        while line.endswith("\\"):
            following = self._raw_line()
            if following is None:
                return None
            line = line[:-1] + following
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line

    def skip_to_label(self, label: str) -> bool:
        """Move past the line ``:label``; return False if the chapter ends first."""
        while (line := self._raw_line()) is not None:
            if line.startswith(":"):
                if line[1:] == label:
                    return True
            elif line == END_MARK:
                break
        return False

    def skip_lines(self, count: int) -> bool:
        """Skip up to ``count`` lines; return False if the end mark was met."""
        for _ in range(count):
            line = self._raw_line()
            if line is None:
                break
            if line == END_MARK:
                return False
        return True


def parse_inventory(spec: str) -> tuple[int, list[Item] | None]:
    """Parse ``N{name(Xv)(Yv)}{...}`` into the number of picks and the offered items.

    A negative number means the choice is made among the player's own items,
    and no item list is returned.
    """
    count = _leading_int(spec)
    brace = spec.find("{")
    rest = spec[brace:] if brace != -1 else ""
    if count < 0:
        return count, None
    items: list[Item] = []
    while rest.startswith("{"):
        rest = rest[1:]
        paren = rest.find("(")
        name = rest if paren == -1 else rest[:paren]
        if not name:
            raise GameError(ErrorCode.FILE, "Le nom d'un objet est manquant")
        item = Item(name)
        rest = "" if paren == -1 else rest[paren:]
        while rest.startswith("("):
            letter = rest[1:2]
            rest = rest[2:]
            value = _leading_int(rest)
            close = rest.find(")")
            rest = "" if close == -1 else rest[close + 1:]
            item.add_modifier(_MODIFIER_LETTERS.get(letter, Stat.UNKNOWN), value)
        if not rest.startswith("}"):
            raise GameError(
                ErrorCode.FILE, "La liste de modificateur de l'objet est incomplete"
            )
        items.append(item)
        rest = rest[1:]
    return count, items


def parse_trial_jump(text: str, succeeded: bool) -> str:
    """Return the label to jump to after a trial written ``...>success|failure``."""
    arrow = text.find(">")
    if arrow == -1:
        raise GameError(ErrorCode.FILE, "L'épreuve n'indique pas où aller")
    rest = text[arrow:]
    if not succeeded:
        bar = rest.find("|")
        if bar == -1:
            raise GameError(ErrorCode.FILE, "L'épreuve n'indique pas où aller en cas d'échec")
        rest = rest[bar:]
    rest = rest[1:]
    return rest.split("|", 1)[0]


def parse_stat_change(text: str) -> tuple[str, int]:
    """Parse ``Pn`` (hit points) or ``On`` (gold) into the attribute name and amount."""
    code = text[:1]
    attribute = _STAT_CHANGES.get(code)
    if attribute is None:
        raise GameError(ErrorCode.FILE, f"code inconnue : '{code}'")
    return attribute, _leading_int(text[1:])