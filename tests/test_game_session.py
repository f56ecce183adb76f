import random
from pathlib import Path

import pytest
from packages.game import GameConfig, GameSession, TurnStatus, generate_base_string
from packages.highscores import HighScoreEntry, HighScoreTable

POOL = "eatpotato"
WORDS = frozenset({"pot", "toad", "tap", "teapot", "peep"})


def _session(**kw):
    return GameSession(POOL, WORDS, **kw)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_end_to_end_example():
    s = _session()
    assert s.submit_word("pot") == 3

    r = s.play_turn("pot")
    assert r.status is TurnStatus.ACCEPTED and r.score == 3
    assert r.high_score.accepted is True
    assert s.table.entry_at(0) == HighScoreEntry("pot", 3)

    r = s.play_turn("zzz")
    assert r.status is TurnStatus.INVALID and r.score == 0
    assert r.high_score is None
    assert s.table.entries() == (HighScoreEntry("pot", 3),)


def test_submit_word_does_not_touch_table():
    s = _session()
    assert s.submit_word("teapot") == 6
    assert len(s.table) == 0


@pytest.mark.parametrize("raw", ["", "   ", "\n"])
def test_empty_input_scores_zero_and_leaves_table_alone(raw):
    s = _session()
    r = s.play_turn(raw)
    assert r.status is TurnStatus.EMPTY
    assert r.score == 0
    assert len(s.table) == 0
    assert s.submit_word("") == 0
    assert s.finished is False


def test_play_turn_normalizes_input():
    s = _session()
    r = s.play_turn("  TeaPot \n")
    assert r.word == "teapot"
    assert r.score == 6


def test_overused_letter_and_missing_letter_score_zero():
    s = _session()
    assert s.submit_word("peep") == 0   # two 'e', pool has one
    assert s.submit_word("toad") == 0   # no 'd' in the pool


def test_duplicate_submission_still_scores_but_is_not_listed_twice():
    s = _session()
    s.play_turn("pot")
    r = s.play_turn("pot")
    assert r.status is TurnStatus.ACCEPTED and r.score == 3
    assert r.high_score.accepted is False
    assert len(s.table) == 1


def test_quit_command_finishes_session():
    s = _session()
    r = s.play_turn("QUIT!")
    assert r.status is TurnStatus.QUIT and r.score == 0
    assert s.finished is True
    assert len(s.table) == 0


def test_custom_quit_command_and_table():
    table = HighScoreTable(max_length=3)
    s = _session(table=table, quit_command="exit")
    assert s.submit_word("quit!") == 0
    assert s.finished is False
    assert s.submit_word("exit") == 0
    assert s.finished is True
    assert s.table is table


def test_bad_base_string_rejected():
    with pytest.raises(ValueError):
        GameSession("EatPotato", WORDS)
    with pytest.raises(ValueError):
        GameSession("", WORDS)


def test_create_from_file_with_fixed_base(tmp_path: Path):
    words = tmp_path / "wordlist.txt"
    _write(words, ["pot", "tap", "toad"])
    s = GameSession.create(words, base_string=POOL)
    assert s.pool == POOL
    assert s.dictionary == frozenset({"pot", "tap", "toad"})
    assert s.submit_word("tap") == 3


def test_create_seeded_pool_is_reproducible(tmp_path: Path):
    words = tmp_path / "wordlist.txt"
    _write(words, ["pot"])
    a = GameSession.create(words, seed=42)
    b = GameSession.create(words, seed=42)
    assert a.pool == b.pool
    assert len(a.pool) == 10 and a.pool.isalpha() and a.pool.islower()


def test_create_uses_config(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["pot"])
    cfg = GameConfig(words_file=str(words), base_string_length=6, high_scores_length=4)
    s = GameSession.create(seed=1, config=cfg)
    assert len(s.pool) == 6
    assert s.table.max_length == 4


def test_create_fails_on_missing_or_empty_dictionary(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        GameSession.create(tmp_path / "nope.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        GameSession.create(empty)


@pytest.mark.parametrize("kw", [
    {"base_string_length": 0},
    {"high_scores_length": 1},
    {"quit_command": ""},
])
def test_game_config_rejects_bad_values(kw):
    with pytest.raises(ValueError):
        GameConfig(**kw)


def test_generate_base_string_allows_any_letters():
    pool = generate_base_string(10, random.Random(3))
    assert len(pool) == 10
    assert set(pool) <= set("abcdefghijklmnopqrstuvwxyz")
    with pytest.raises(ValueError):
        generate_base_string(0)
