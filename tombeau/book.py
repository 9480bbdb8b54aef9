"""The book the story is read in: chapters, pages and the save file."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

from .character import Item, Player
from .errors import ErrorCode, GameError
from .script import (
    END_MARK,
    PAUSE_MARK,
    Progress,
    ScriptReader,
    parse_inventory,
    parse_stat_change,
    parse_trial_jump,
)
from .widget import Rect

logger = logging.getLogger(__name__)

DEFAULT_CHAPTER = "intro"
DEFAULT_STORY = "Origine"
TEXT_DIR = Path("Annexe/texte")
SAVE_NAME = ".save.txt"
QUESTION_CODES = "POVE"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

InventoryHandler = Callable[["Book", "list[Item]", int], None]
QuestionHandler = Callable[["Book", str], "tuple[str, str]"]
TrialHandler = Callable[["Book", str], bool]


def page_zones(width: int, height: int) -> tuple[Rect, Rect]:
    """Return the left and right page areas of a window of the given size."""
    left = Rect(
        (width * 171) // 1000,
        (height * 125) // 1000,
        (width * 311) // 1000,
        (height * 765) // 1000,
    )
    right = Rect(
        (width * 511) // 1000,
        (height * 127) // 1000,
        (width * 301) // 1000,
        (height * 750) // 1000,
    )
    return left, right


@dataclass(eq=False)
class Page:
    """One page of the book: lines of text, or an illustration."""

    side: int
    lines: list[str] = field(default_factory=list)
    image: str | None = None


class Book:
    """Reads a story chapter by chapter and lays its text out on pages.

    Interactive lines of a script are handed to hooks that the caller sets:
    ``on_inventory(book, items, count)`` for item choices,
    ``on_question(book, text)`` returning ``(code, action)`` for questions and
    ``on_trial(book, text)`` returning whether the player succeeded.
    """

    lines_per_page = 20

    def __init__(self, story: str | None = None, root: str | Path = ".",
                 player: Player | None = None) -> None:
        self.story = story or DEFAULT_STORY
        self.root = Path(root)
        self.player = player if player is not None else Player()
        self.pages: list[Page] = []
        self.index = 0
        self.progress = Progress.NEW
        self.chapters: list[str] = []
        self.quit_requested = False
        self.on_inventory: InventoryHandler | None = None
        self.on_question: QuestionHandler | None = None
        self.on_trial: TrialHandler | None = None
        self._stream: TextIO | None = None
        self._reader: ScriptReader | None = None
        self._line = 0
        self.new_chapter(None)

    # Files

    def chapter_path(self, chapter: str) -> Path:
        """Return the path of a chapter script of this story."""
        return self.root / TEXT_DIR / self.story / f"{chapter}.txt"

    def save_path(self) -> Path:
        """Return the path of this story's save file."""
        return self.root / TEXT_DIR / self.story / SAVE_NAME

    def _close_chapter(self) -> None:
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._reader = None
        self.pages = []
        self._line = 0
        self.index = 0

    def _open_chapter(self, chapter: str) -> None:
        path = self.chapter_path(chapter)
        try:
            self._stream = path.open("r", encoding="utf-8")
        except OSError as exc:
            raise GameError(ErrorCode.FILE, f"de l'ouverture du fichier '{path}'") from exc
        self._reader = ScriptReader(self._stream)

    def new_chapter(self, chapter: str | None = None) -> None:
        """Drop the current chapter and start reading ``chapter``."""
        chapter = chapter or DEFAULT_CHAPTER
        self._close_chapter()
        self._open_chapter(chapter)
        self.chapters.append(chapter)
        try:
            self.save()
        except GameError as exc:
            logger.error("de la sauvegarde du livre : %s", exc)
        self.progress = Progress.NEW

    def save(self) -> None:
        """Write the chapters read so far and the player to the save file."""
        path = self.save_path()
        try:
            with path.open("w", encoding="utf-8") as stream:
                for chapter in self.chapters:
                    stream.write(f"{chapter}\n")
                stream.write(f"{PAUSE_MARK}\n")
                self.player.save(stream)
        except OSError as exc:
            raise GameError(ErrorCode.FILE, f"Impossible d'ouvrir le fichier '{path}'") from exc

    @classmethod
    def load(cls, story: str | None = None, root: str | Path = ".") -> Book:
        """Resume a story from its save file."""
        story = story or DEFAULT_STORY
        path = Path(root) / TEXT_DIR / story / SAVE_NAME
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise GameError(ErrorCode.FILE, f"Impossible d'ouvrir le fichier '{path}'") from exc
        chapters: list[str] = []
        lines = text.splitlines()
        rest_at = len(lines)
        for pos, line in enumerate(lines):
            if line.strip() == PAUSE_MARK:
                rest_at = pos + 1
                break
            if line.strip():
                chapters.append(line.strip())
        player = Player.load(io.StringIO("\n".join(lines[rest_at:])))
        book = cls(story, root, player)
        if chapters:
            book._close_chapter()
            book._open_chapter(chapters[-1])
            book.chapters = chapters
            book.progress = Progress.NEW
        return book

    def close(self) -> None:
        """Close the chapter being read."""
        self._close_chapter()

    def __enter__(self) -> Book:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def describe(self) -> str:
        return "livre{}"

    # Pages

    def _add_page(self, page: Page) -> None:
        self.pages.append(page)
        self._line = 0
        self.index += 1

    def _start_page(self) -> None:
        self._add_page(Page(self.index % 2))

    def _drop_last_page(self) -> None:
        if self.index < 1 or not self.pages:
            raise GameError(ErrorCode.ARGUMENT, "La liste est déjà vide.")
        del self.pages[self.index - 1]
        self.index -= 1
        self.progress = Progress.NEW

    def previous_page(self) -> None:
        """Go back to the previous pair of pages."""
        if self.index <= 2:
            raise GameError(ErrorCode.FETCH, "Il n'y à pas de page précédente")
        self.index -= (self.index % 2 == 0) + 1

    # Script actions

    def _require_reader(self) -> ScriptReader:
        if self._reader is None:
            raise GameError(ErrorCode.FILE, "Il n'y à pas de fichier à lire")
        return self._reader

    def _jump(self, label: str) -> None:
        found = self._require_reader().skip_to_label(label)
        self.progress = Progress.CONTINUE if found else Progress.END

    def _inventory(self, spec: str) -> None:
        count, items = parse_inventory(spec)
        if self.on_inventory is None:
            raise GameError(ErrorCode.OTHER, "Aucun choix d'objet n'est disponible")
        offered = list(self.player.items) if items is None else items
        self.on_inventory(self, offered, count)
        self.progress = Progress.CONTINUE

    def _trial(self, text: str) -> None:
        if self.on_trial is None:
            raise GameError(ErrorCode.OTHER, "Aucune épreuve n'est disponible")
        succeeded = bool(self.on_trial(self, text))
        self._jump(parse_trial_jump(text, succeeded))
        self.progress = Progress.CONTINUE

    def _question(self, text: str) -> bool:
        """Ask a question; return whether writing goes on."""
        if self.on_question is None:
            raise GameError(ErrorCode.OTHER, "Aucune question ne peut être posée")
        code, action = self.on_question(self, text)
        action = action or ""
        if code == "?":
            self.progress = Progress.END
            self.quit_requested = True
            return False
        if code == "P":
            match = _LEADING_INT.match(action[1:])
            count = int(match.group(1)) if match else 0
            if not self._require_reader().skip_lines(count):
                self.progress = Progress.END
                return False
            self.progress = Progress.CONTINUE
            return True
        if code == "O":
            self.new_chapter(action[1:])
            return False
        if code == "V":
            self._jump(action)
            self.progress = Progress.CONTINUE
            return True
        if code == "E":
            self._trial(action[1:])
            return False
        raise GameError(ErrorCode.ARGUMENT, f"Le code d'action '{code}' est inconnue")

    def next_page(self) -> None:
        """Show the next page, reading the script further when needed."""
        self._require_reader()
        count = len(self.pages)
        if self.index < count - 1:
            self.index += 2
            return
        if self.index < count:
            self.index += 1
            return
        if self.progress is Progress.END:
            raise GameError(ErrorCode.ARGUMENT, "Il n'y à pas de nouvelle page pour ce chapitre")
        new_page = False
        if self.progress is Progress.NEW or not self.pages:
            self._start_page()
            new_page = True
        self.progress = Progress.NEW
        page = self.pages[self.index - 1]

        more = True
        while more and self._line < self.lines_per_page:
            more = False
            line = self._require_reader().next_line()
            if line is None:
                self.progress = Progress.END
                return
            head = line[0]
            if head in ":#":
                self.progress = Progress.CONTINUE
                more = True
            elif head == ">":
                self._jump(line[1:])
            elif head == "\\":
                self.new_chapter(line[1:])
            elif head == "=":
                if line == PAUSE_MARK:
                    self.progress = Progress.CONTINUE
                    return
                if line == END_MARK:
                    self.progress = Progress.END
                    return
            elif head == "+":
                self._inventory(line[1:])
            elif head == "~":
                self._trial(line[1:])
            elif head == "?":
                more = self._question(line[1:])
            elif head == "!":
                if new_page:
                    self._drop_last_page()
                self._add_page(Page(self.index % 2, image=line[1:]))
                self.progress = Progress.NEW
            elif head == "^":
                attribute, amount = parse_stat_change(line[1:])
                setattr(self.player, attribute, getattr(self.player, attribute) + amount)
            else:
                page.lines.append(line)
                self._line += 1
                more = True