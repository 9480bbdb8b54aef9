"""Characters, items and the player who carries them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from .collection import ObjectList
from .errors import ErrorCode, GameError

STAT_MAX_HP = 30
STAT_MAX_ARMOUR = 5
STAT_MAX_CRITICAL = STAT_MAX_ARMOUR
STAT_MAX_STRENGTH = 10
STAT_MAX_AGILITY = STAT_MAX_STRENGTH
STAT_MAX_INTELLIGENCE = STAT_MAX_STRENGTH
GOLD_MAX = 0xFF


def stat_norm(value: int, maximum: int) -> int:
    """Clamp a statistic between 1 and ``maximum``."""
    return min(max(value, 1), maximum)


class Stat(IntEnum):
    """The statistic an item modifier acts on."""

    UNKNOWN = 0
    STRENGTH = 1
    INTELLIGENCE = 2
    HP = 3
    ARMOUR = 4
    CRITICAL = 5
    AGILITY = 6

    def label(self) -> str:
        """Return the display name of the statistic."""
        return _LABELS[self]


_LABELS = {
    Stat.UNKNOWN: "inconnu",
    Stat.STRENGTH: "force",
    Stat.INTELLIGENCE: "intelligence",
    Stat.HP: "PV",
    Stat.ARMOUR: "armure",
    Stat.CRITICAL: "critique",
    Stat.AGILITY: "agilite",
}

_ATTRIBUTES = {
    Stat.STRENGTH: "strength",
    Stat.INTELLIGENCE: "intelligence",
    Stat.HP: "hp",
    Stat.ARMOUR: "armour",
    Stat.CRITICAL: "critical",
    Stat.AGILITY: "agility",
}

_MAXIMA = {
    Stat.STRENGTH: STAT_MAX_STRENGTH,
    Stat.INTELLIGENCE: STAT_MAX_INTELLIGENCE,
    Stat.HP: STAT_MAX_HP,
    Stat.ARMOUR: STAT_MAX_ARMOUR,
    Stat.CRITICAL: STAT_MAX_CRITICAL,
    Stat.AGILITY: STAT_MAX_AGILITY,
}


@dataclass(frozen=True)
class Modifier:
    """A change of one statistic by a fixed amount."""

    stat: Stat
    value: int

    def describe(self) -> str:
        return f"{self.stat.label()}{self.value:+d}"


@dataclass(eq=False)
class Item:
    """A named object granting statistic modifiers."""

    name: str
    modifiers: list[Modifier] = field(default_factory=list)

    def add_modifier(self, stat: Stat, value: int) -> None:
        """Attach a modifier to the item."""
        self.modifiers.append(Modifier(Stat(stat), int(value)))

    def describe(self) -> str:
        mods = ",".join(m.describe() for m in self.modifiers)
        return f"item{{{self.name}({mods})}}"

    def _write(self, stream: TextIO) -> None:
        stream.write(f"{self.name}\n{len(self.modifiers)}\n")
        for mod in self.modifiers:
            stream.write(f"{int(mod.stat)} {mod.value}\n")


@dataclass(eq=False)
class Character:
    """Statistics and name shared by every character of the game."""

    strength: int = 0
    intelligence: int = 0
    hp: int = 0
    armour: int = 0
    critical: int = 0
    agility: int = 0
    name: str = ""

    def assign(self, strength: int, intelligence: int, hp: int, armour: int,
               critical: int, agility: int, name: str) -> None:
        """Set every statistic and the name at once."""
        self.strength = strength
        self.intelligence = intelligence
        self.hp = hp
        self.armour = armour
        self.critical = critical
        self.agility = agility
        self.name = name

    def _stat_lines(self) -> list[str]:
        return [f" - {stat.label()} : {getattr(self, attr)}" for stat, attr in _ATTRIBUTES.items()]

    def describe(self, kind: str = "personnage") -> str:
        """Return a multi-line description of the character."""
        return "\n".join([f"{kind} {self.name} :", *self._stat_lines()]) + "\n"


class Player(Character):
    """The main character, with an inventory and some gold."""

    def __init__(self) -> None:
        super().__init__()
        self.items = ObjectList()
        self.gold = 10
        self.assign(2, 2, 10, 2, 2, 2, "steevee")

    def _apply(self, item: Item, sign: int) -> None:
        if not item.modifiers:
            raise GameError(ErrorCode.ARGUMENT, "L'objet n'a pas de modificateur")
        mod = item.modifiers[0]
        attr = _ATTRIBUTES.get(mod.stat)
        if attr is None:
            raise GameError(ErrorCode.OTHER, "ce type de stat est inconnu")
        setattr(self, attr, getattr(self, attr) + sign * mod.value)

    def add_item(self, item: Item) -> None:
        """Apply the item's first modifier and put it in the inventory."""
        self._apply(item, 1)
        self.items.append(item)

    def remove_item(self, item: Item) -> bool:
        """Undo the item's first modifier and take it out of the inventory."""
        self._apply(item, -1)
        return self.items.remove(item)

    def remove_item_at(self, pos: int) -> Item:
        """Take the item at ``pos`` out of the inventory."""
        return self.items.remove_at(pos)

    def stat(self, stat: Stat) -> int:
        """Return a statistic clamped to its allowed range, 0 if unknown."""
        attr = _ATTRIBUTES.get(Stat(stat))
        if attr is None:
            return 0
        return stat_norm(getattr(self, attr), _MAXIMA[Stat(stat)])

    def inventory_text(self) -> str:
        """Return a description of the inventory."""
        if not len(self.items):
            return "Inventaire vide.\n"
        return f"Le joueur {self.name} à comme inventaire :\n{self.items.describe()}"

    def describe(self, kind: str = "joueur") -> str:
        gold = f" - Or : {stat_norm(self.gold, GOLD_MAX)}\n"
        return super().describe(kind) + gold + self.inventory_text()

    def save(self, stream: TextIO) -> None:
        """Write the player and the inventory to a text stream."""
        if stream is None:
            raise GameError(ErrorCode.OTHER, "Impossible d'ouvrir le fichier '.save.txt'")
        stream.write(f"{self.name}\n")
        stream.write(
            f"{self.strength} {self.intelligence} {self.hp} "
            f"{self.armour} {self.critical} {self.agility}\n"
        )
        stream.write(f"{len(self.items)}\n\n")
        for item in self.items:
            item._write(stream)

    @classmethod
    def load(cls, stream: TextIO) -> Player:
        """Read a player written by :meth:`save`."""
        lines = iter([line.strip() for line in stream.read().splitlines() if line.strip()])

        def take(what: str) -> str:
            try:
                return next(lines)
            except StopIteration:
                raise GameError(ErrorCode.FETCH, f"lecture {what} impossible") from None

        def ints(what: str, count: int) -> list[int]:
            parts = take(what).split()
            try:
                values = [int(p) for p in parts]
            except ValueError:
                raise GameError(ErrorCode.FETCH, f"lecture {what} impossible") from None
            if len(values) != count:
                raise GameError(ErrorCode.FETCH, f"lecture {what} impossible")
            return values

        player = cls()
        name = take("du nom du joueur")
        stats = ints("des stats du joueur", 6)
        player.assign(*stats, name)
        (count,) = ints("de la progression du joueur", 1)
        for _ in range(count):
            item = Item(take("du nom d'un item"))
            (nmods,) = ints("des modificateurs d'un item", 1)
            for _ in range(nmods):
                code, value = ints("d'un modificateur", 2)
                try:
                    stat = Stat(code)
                except ValueError:
                    raise GameError(ErrorCode.FETCH, "modificateur inconnu") from None
                item.add_modifier(stat, value)
            player.items.append(item)
        return player