import pytest
from packages.engine import (
    is_valid, score_word, all_letters_in_pool, in_dictionary, letter_usage_ok,
)

POOL = "eatpotato"   # e a t p o t a t o -> e1 a2 t3 p1 o2
WORDS = {"pot", "toad", "tap", "tot", "otto", "peep", "teapot", "potato", "papa"}


# --- words whose letters are a sub-multiset of the pool ---
@pytest.mark.parametrize("word", ["pot", "tap", "tot", "otto", "teapot", "potato"])
def test_is_valid_accepts_buildable_dictionary_words(word):
    assert is_valid(word, POOL, WORDS) is True
    assert score_word(word) == len(word)


# --- too many copies of a letter ---
@pytest.mark.parametrize("word", ["peep", "papa"])
def test_is_valid_rejects_overused_letters(word):
    # every letter is in the pool and the word is in the dictionary...
    assert all_letters_in_pool(word, POOL)
    assert in_dictionary(word, WORDS)
    # ...but the counts don't fit
    assert letter_usage_ok(word, POOL) is False
    assert is_valid(word, POOL, WORDS) is False


def test_is_valid_rejects_letters_outside_pool():
    # 'd' is not in the pool even though "toad" is a word
    assert all_letters_in_pool("toad", POOL) is False
    assert is_valid("toad", POOL, WORDS) is False


def test_is_valid_rejects_non_words():
    # buildable from the pool, but not in the dictionary
    assert letter_usage_ok("opt", POOL) is True
    assert is_valid("opt", POOL, WORDS) is False


def test_dictionary_match_is_exact():
    assert in_dictionary("Pot", WORDS) is False
    assert is_valid("pot", POOL, {"Pot"}) is False


def test_empty_pool_and_empty_word():
    assert all_letters_in_pool("a", "") is False
    assert letter_usage_ok("a", "") is False
    # the empty word is trivially buildable but never a dictionary entry
    assert letter_usage_ok("", POOL) is True
    assert is_valid("", POOL, WORDS) is False


def test_letter_usage_counts_each_letter_independently():
    assert letter_usage_ok("aat", "taa") is True
    assert letter_usage_ok("aaat", "taa") is False


@pytest.mark.parametrize("word,expected", [("a", 1), ("pot", 3), ("teapot", 6), ("", 0)])
def test_score_word_is_length(word, expected):
    assert score_word(word) == expected
