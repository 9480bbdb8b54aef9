# tombeau

`tombeau` is the engine behind a gamebook adventure: the story is written as
plain-text chapter scripts, the reader turns pages two at a time, and a player
character with statistics and an inventory is carried from chapter to chapter
and saved alongside the story.

## What is in the package

- `tombeau.errors` — `ErrorCode`, the list of failure kinds (each with a
  `describe()` text), and `GameError`, the exception raised throughout the
  package. A `GameError` carries its `code` and `message`.
- `tombeau.collection` — `ObjectList`, an ordered list of game objects
  compared by identity. `append`, `index_of`, `remove_at`, `remove` and
  `clear`; objects taken out of the list have their `close()` called when they
  have one. Indexing an empty list returns `None`; an out-of-range position
  raises `GameError`.
- `tombeau.widget` — `Rect` (`contains`, `scaled`) and `Widget`, with source
  and destination areas, `hover` hit testing and `rescale_dest` after a window
  resize.
- `tombeau.character` — `Stat`, `Modifier`, `Item`, `Character` and `Player`,
  plus `stat_norm` for clamping a statistic between 1 and a maximum.
- `tombeau.font` — `Font`, which loads a font file with pygame and renders
  text, wrapped to a pixel width when one is given; `font_path` locates a font
  under `Annexe/font/` (default `Roboto/Roboto-Thin.ttf`, size 18).
- `tombeau.sound` — `Sound` and `SoundKind` for music and sound effects
  loaded from `Annexe/sons/`; `toggle_pause` pauses or resumes the music and
  returns whether it is now paused.
- `tombeau.script` — `ScriptReader`, `Progress` and the parsers for the
  special script lines: `parse_inventory`, `parse_trial_jump` and
  `parse_stat_change`.
- `tombeau.book` — `Book`, which ties it all together: chapters, page
  navigation and saving; `page_zones` gives the left and right page areas for
  a window size.

## The player

A new `Player` is called `steevee` and starts with strength, intelligence,
armour, critical and agility at 2, 10 hit points, 10 gold and an empty
inventory. `add_item` applies the item's first modifier to the player's
statistics and stores the item; `remove_item` takes the modifier away again.
`Player.stat` reports a statistic clamped between 1 and its maximum (30 for
hit points, 5 for armour and critical, 10 for the rest).

```python
import io

from tombeau.character import Item, Player, Stat

player = Player()
sword = Item("epee")
sword.add_modifier(Stat.STRENGTH, 3)
player.add_item(sword)
print(player.stat(Stat.STRENGTH))  # 5

buffer = io.StringIO()
player.save(buffer)
buffer.seek(0)
restored = Player.load(buffer)
```

## Story files

A story lives in `Annexe/texte/<story>/`, one `<chapter>.txt` file per
chapter; the first chapter is `intro` and the default story is `Origine`.
Progress is written to `.save.txt` in the same directory each time a chapter
starts, or when `Book.save` is called: the list of chapters visited, a `===`
line, then the player.

Inside a chapter, blank lines are skipped and a trailing `\` joins a line
with the next one. Each line is plain text unless it starts with one of these:

| Start   | Meaning                                           |
|---------|---------------------------------------------------|
| `:`     | a label, target of jumps                          |
| `#`     | a comment                                         |
| `>`     | jump to a label                                   |
| `\`     | move on to another chapter                        |
| `===`   | end of the current page                           |
| `=FIN=` | end of the chapter                                |
| `+`     | offer items to the player                         |
| `~`     | a trial of the player's abilities                 |
| `?`     | a question with choices                           |
| `!`     | an illustration                                   |
| `^`     | change hit points (`P`) or gold (`O`)             |

An item offer reads `+N{name(Xv)(Yv)}{...}`, where `X` is one of `F`, `I`,
`P`, `D`, `C`, `A`; a negative `N` makes the choice among the player's own
items. A trial ends with `>success|failure`, the labels to jump to.

## Reading a book

`Book` opens the story's first chapter when it is created (the chapter file
must exist) and `Book.load` resumes from the save file. `next_page` reads the
script until a page holds `lines_per_page` lines or a page break is met;
`previous_page` goes back, and raises `GameError` when there is nothing
before. Pages read so far are kept in `book.pages`, each with its text
`lines` or an `image` name.

Interactive lines are handed to hooks that the caller sets on the book:

- `on_inventory(book, items, count)` for `+` lines;
- `on_trial(book, text)`, returning whether the player succeeded, for `~`
  lines;
- `on_question(book, text)`, returning a `(code, action)` pair for `?` lines,
  where the code is one of `P`, `O`, `V`, `E`, or `?` to quit.

```python
from tombeau.book import Book

with Book.load("Origine", ".") as book:
    book.on_trial = lambda book, text: True
    book.next_page()
    for page in book.pages:
        print(page.lines)
    book.save()
```

## What the package does not do

There is no game window, menu or event loop, and no command to start a game:
`Book` only lays text out into `Page` objects and leaves drawing them, and
asking the player questions, to the caller through the hooks above. There is
no combat or non-player character logic beyond the shared `Character`
statistics.

## Tests

The test suite uses pytest; install the package with its `test` extra to get
it.