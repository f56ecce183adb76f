"""
Submission validation against a letter pool and a dictionary.

This module answers the question: "Is this word an acceptable submission?"
A word is valid iff ALL of:
  - every character of the word is present in the pool
  - the word is in the dictionary
  - no character is used more often than the pool contains it

The first check is implied by the third; it runs first as a plain presence
scan, ahead of the dictionary lookup and the letter counting.

Inputs are assumed lowercase with no whitespace; the caller normalizes.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import AbstractSet

log = logging.getLogger(__name__)


def all_letters_in_pool(word: str, pool: str) -> bool:
    """Return True if every character of `word` occurs somewhere in `pool`."""
    for ch in word:
        if ch not in pool:
            return False
    return True


def in_dictionary(word: str, dictionary: AbstractSet[str]) -> bool:
    """Exact, case-sensitive membership test."""
    return word in dictionary


def letter_usage_ok(word: str, pool: str) -> bool:
    """
    Return True if `word` is a sub-multiset of `pool`.

    Examples:
      letter_usage_ok("pot", "eatpotato")  -> True
      letter_usage_ok("peep", "eatpotato") -> False   (two 'e', pool has one)
    """
    available = Counter(pool)
    for ch, count in Counter(word).items():
        if count > available[ch]:
            return False
    return True


def is_valid(word: str, pool: str, dictionary: AbstractSet[str]) -> bool:
    """
    Return True if `word` can be built from `pool` and is in `dictionary`.

    Args:
      word       : lowercase submission
      pool       : the base string for this game
      dictionary : set of accepted lowercase words

    Checks short-circuit in order: pool presence, dictionary, letter usage.
    """
    if not all_letters_in_pool(word, pool):
        log.debug("%r rejected: uses letters outside %r", word, pool)
        return False
    if not in_dictionary(word, dictionary):
        log.debug("%r rejected: not in dictionary", word)
        return False
    if not letter_usage_ok(word, pool):
        log.debug("%r rejected: uses a letter more often than %r allows", word, pool)
        return False
    return True
