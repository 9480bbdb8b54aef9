from pathlib import Path

import pytest

from tombeau.book import Book, page_zones
from tombeau.character import Item, Player
from tombeau.errors import ErrorCode, GameError
from tombeau.script import Progress
from tombeau.widget import Rect


def make_story(root: Path, chapters: dict[str, str], story: str = "Origine") -> Path:
    folder = root / "Annexe" / "texte" / story
    folder.mkdir(parents=True, exist_ok=True)
    for name, text in chapters.items():
        (folder / f"{name}.txt").write_text(text, encoding="utf-8")
    return root


def test_page_zones_from_layout_constants():
    left, right = page_zones(1000, 1000)
    assert left == Rect(171, 125, 311, 765)
    assert right == Rect(511, 127, 301, 750)


def test_missing_chapter_raises_file_error(tmp_path):
    make_story(tmp_path, {})
    with pytest.raises(GameError) as info:
        Book("Origine", tmp_path)
    assert info.value.code is ErrorCode.FILE


def test_init_writes_save_file(tmp_path):
    make_story(tmp_path, {"intro": "hello\n"})
    book = Book(None, tmp_path)
    lines = book.save_path().read_text(encoding="utf-8").splitlines()
    assert lines[:3] == ["intro", "===", "steevee"]
    assert book.chapters == ["intro"]
    book.close()


def test_text_lines_fill_page(tmp_path):
    make_story(tmp_path, {"intro": "first\n# comment\nsecond\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        assert [p.lines for p in book.pages] == [["first", "second"]]
        assert book.index == 1
        assert book.progress is Progress.END


def test_end_mark_forbids_new_page(tmp_path):
    make_story(tmp_path, {"intro": "only\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        with pytest.raises(GameError) as info:
            book.next_page()
        assert info.value.code is ErrorCode.ARGUMENT


def test_pause_continues_same_page(tmp_path):
    make_story(tmp_path, {"intro": "a\n===\nb\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        assert book.progress is Progress.CONTINUE
        assert book.pages[0].lines == ["a"]
        book.next_page()
        assert len(book.pages) == 1
        assert book.pages[0].lines == ["a", "b"]


def test_label_jump_skips_lines(tmp_path):
    make_story(tmp_path, {"intro": ">target\nhidden\n:target\nshown\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        book.next_page()
        all_lines = [line for page in book.pages for line in page.lines]
        assert all_lines == ["shown"]


def test_overflow_and_navigation(tmp_path):
    text = "".join(f"line{n}\n" for n in range(6)) + "=FIN=\n"
    make_story(tmp_path, {"intro": text})
    with Book("Origine", tmp_path) as book:
        book.lines_per_page = 2
        for _ in range(3):
            book.next_page()
        assert len(book.pages) == 3
        assert book.index == 3
        assert [p.side for p in book.pages] == [0, 1, 0]
        book.previous_page()
        assert book.index == 2
        book.next_page()
        assert book.index == 3
        assert len(book.pages) == 3


def test_previous_page_at_start_raises(tmp_path):
    make_story(tmp_path, {"intro": "x\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        with pytest.raises(GameError) as info:
            book.previous_page()
        assert info.value.code is ErrorCode.FETCH


def test_chapter_change(tmp_path):
    make_story(tmp_path, {"intro": "\\other\n", "other": "there\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        assert book.chapters == ["intro", "other"]
        assert book.pages == []
        book.next_page()
        assert book.pages[0].lines == ["there"]


def test_gold_change(tmp_path):
    make_story(tmp_path, {"intro": "^O5\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        before = book.player.gold
        book.next_page()
        assert book.player.gold == before + 5


def test_unknown_stat_change_raises(tmp_path):
    make_story(tmp_path, {"intro": "^X1\n"})
    with Book("Origine", tmp_path) as book:
        with pytest.raises(GameError) as info:
            book.next_page()
        assert info.value.code is ErrorCode.FILE


def test_image_replaces_blank_page(tmp_path):
    make_story(tmp_path, {"intro": "!map.png\ntext\n=FIN=\n"})
    with Book("Origine", tmp_path) as book:
        book.next_page()
        assert len(book.pages) == 1
        assert book.pages[0].image == "map.png"
        book.next_page()
        assert len(book.pages) == 2
        assert book.pages[1].lines == ["text"]


def test_question_jump(tmp_path):
    make_story(tmp_path, {"intro": "?Which way\nhidden\n:there\nvisible\n=FIN=\n"})
    asked = []

    def ask(book, text):
        asked.append(text)
        return "V", "there"

    with Book("Origine", tmp_path) as book:
        book.on_question = ask
        book.next_page()
        assert asked == ["Which way"]
        assert book.pages[0].lines == ["visible"]


def test_question_quit(tmp_path):
    make_story(tmp_path, {"intro": "?Stop\nmore\n"})
    with Book("Origine", tmp_path) as book:
        book.on_question = lambda b, t: ("?", "")
        book.next_page()
        assert book.quit_requested is True
        assert book.progress is Progress.END


def test_unknown_question_code_raises(tmp_path):
    make_story(tmp_path, {"intro": "?Hmm\n"})
    with Book("Origine", tmp_path) as book:
        book.on_question = lambda b, t: ("Z", "")
        with pytest.raises(GameError) as info:
            book.next_page()
        assert info.value.code is ErrorCode.ARGUMENT


@pytest.mark.parametrize("succeeded, expected", [(True, "won"), (False, "lost")])
def test_trial_branches(tmp_path, succeeded, expected):
    script = "~force>win|lose\n:lose\nlost\n=FIN=\n:win\nwon\n=FIN=\n"
    make_story(tmp_path, {"intro": script})
    with Book("Origine", tmp_path) as book:
        book.on_trial = lambda b, text: succeeded
        book.next_page()
        book.next_page()
        assert book.pages[0].lines == [expected]


def test_missing_trial_handler_raises(tmp_path):
    make_story(tmp_path, {"intro": "~force>a|b\n"})
    with Book("Origine", tmp_path) as book:
        with pytest.raises(GameError) as info:
            book.next_page()
        assert info.value.code is ErrorCode.OTHER


def test_inventory_handler_receives_items(tmp_path):
    make_story(tmp_path, {"intro": "+1{Sword(F2)}\n"})
    seen = []

    def choose(book, items, count):
        seen.append(([i.name for i in items], count))

    with Book("Origine", tmp_path) as book:
        book.on_inventory = choose
        book.next_page()
        assert seen == [(["Sword"], 1)]
        assert book.progress is Progress.CONTINUE


def test_save_and_load_round_trip(tmp_path):
    make_story(tmp_path, {"intro": "\\next\n", "next": "hello\n=FIN=\n"})
    book = Book("Origine", tmp_path)
    sword = Item("Sword")
    sword.add_modifier(1, 2)
    book.player.add_item(sword)
    book.player.name = "hero"
    book.next_page()
    book.save()
    strength = book.player.strength
    book.close()

    loaded = Book.load("Origine", tmp_path)
    assert loaded.chapters == ["intro", "next"]
    assert loaded.player.name == "hero"
    assert loaded.player.strength == strength
    assert [i.name for i in loaded.player.items] == ["Sword"]
    loaded.next_page()
    assert loaded.pages[0].lines == ["hello"]
    loaded.close()


def test_load_without_save_raises(tmp_path):
    make_story(tmp_path, {"intro": "x\n"}, story="Other")
    with pytest.raises(GameError) as info:
        Book.load("Missing", tmp_path)
    assert info.value.code is ErrorCode.FILE


def test_given_player_is_kept(tmp_path):
    make_story(tmp_path, {"intro": "x\n"})
    player = Player()
    player.name = "hero"
    with Book("Origine", tmp_path, player) as book:
        assert book.player is player
        assert "hero" in book.save_path().read_text(encoding="utf-8")