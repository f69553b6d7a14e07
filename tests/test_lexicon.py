import random
from pathlib import Path

import pytest

from searchwordle.datasets import Lexicon, LoadError, load_lexicon, default_paths


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def lists(tmp_path: Path):
    ans = tmp_path / "allowed_answers.txt"
    gue = tmp_path / "allowed_guesses.txt"
    _write(ans, ["crane", "abbey", "speed"])
    _write(gue, ["slate", "erase", "babes"])
    return ans, gue


def test_load_unions_answers_into_guesses(lists):
    lex = load_lexicon(*lists)
    assert lex.answers == ("crane", "abbey", "speed")
    assert set(lex.answers) <= lex.guesses
    assert lex.is_valid_guess("slate")
    assert lex.is_valid_guess("crane")
    assert not lex.is_valid_guess("zzzzz")


def test_load_strips_crlf_and_blank_lines(tmp_path: Path):
    ans = tmp_path / "a.txt"
    gue = tmp_path / "g.txt"
    ans.write_bytes(b"crane\r\n\r\nabbey\r\n")
    gue.write_bytes(b"slate\n\n")
    lex = load_lexicon(ans, gue)
    assert lex.answers == ("crane", "abbey")
    assert lex.guesses == {"crane", "abbey", "slate"}


def test_missing_file_raises_load_error(lists, tmp_path: Path):
    with pytest.raises(LoadError, match="not found"):
        load_lexicon(tmp_path / "missing.txt", lists[1])
    with pytest.raises(LoadError, match="not found"):
        load_lexicon(lists[0], tmp_path / "missing.txt")


def test_undecodable_file_raises_load_error(lists, tmp_path: Path):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"crane\n\xff\xfe\xfa\n")
    with pytest.raises(LoadError, match="UTF-8"):
        load_lexicon(bad, lists[1])


def test_empty_answers_raises_load_error(lists, tmp_path: Path):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n", encoding="utf-8")
    with pytest.raises(LoadError, match="empty"):
        load_lexicon(empty, lists[1])


def test_lengths_not_checked_unless_strict(tmp_path: Path):
    ans = tmp_path / "a.txt"
    gue = tmp_path / "g.txt"
    _write(ans, ["crane"])
    _write(gue, ["cranes", "ox"])

    lex = load_lexicon(ans, gue)
    assert lex.is_valid_guess("cranes")

    with pytest.raises(LoadError, match="failed validation"):
        load_lexicon(ans, gue, strict=True)


def test_pick_secret_is_an_answer_and_seedable(lists):
    lex = load_lexicon(*lists)
    picks = [lex.pick_secret(random.Random(7)) for _ in range(3)]
    assert len(set(picks)) == 1
    rng = random.Random(1)
    for _ in range(50):
        w = lex.pick_secret(rng)
        assert w in lex.answers
        assert lex.is_valid_guess(w)


def test_pick_secret_without_rng():
    lex = Lexicon.from_words(["crane"])
    assert lex.pick_secret() == "crane"


def test_bundled_lists_load_strict():
    lex = load_lexicon(*default_paths(), strict=True)
    assert len(lex.answers) > 100
    assert all(len(w) == 5 for w in lex.guesses)


def test_uppercase_lists_are_lowercased(tmp_path: Path):
    from searchwordle.game import GameSession

    ans = tmp_path / "a.txt"
    gue = tmp_path / "g.txt"
    _write(ans, ["CRANE"])
    _write(gue, ["SLATE"])

    lex = load_lexicon(ans, gue)
    assert lex.answers == ("crane",)
    assert lex.is_valid_guess("slate")
    game = GameSession.new(lex, random.Random(0))
    assert game.play("CRANE") == ["CRANE | CORRECT! ✅"]


def test_wrong_length_answers_are_never_drawn():
    lex = Lexicon.from_words(["cranes", "Abbey"], ["slate"])
    assert lex.answers == ("abbey",)
    assert lex.is_valid_guess("cranes")
    rng = random.Random(2)
    assert {lex.pick_secret(rng) for _ in range(20)} == {"abbey"}


@pytest.mark.parametrize("answers", [[], ["cranes", "ox"]])
def test_from_words_needs_a_drawable_answer(answers):
    with pytest.raises(LoadError, match="5-letter answers"):
        Lexicon.from_words(answers, ["slate"])


def test_only_wrong_length_answers_fail_to_load(tmp_path: Path):
    ans = tmp_path / "a.txt"
    gue = tmp_path / "g.txt"
    _write(ans, ["cranes"])
    _write(gue, ["slate"])
    with pytest.raises(LoadError):
        load_lexicon(ans, gue)
