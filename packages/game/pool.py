"""
Base string (letter pool) generation.

Letters are drawn from a shuffled stock of 100 copies of the alphabet, so a
letter may repeat in the pool but is never more likely than the others.
"""

from __future__ import annotations

import random
from string import ascii_lowercase

from .config import BASE_STRING_LENGTH

_STOCK = ascii_lowercase * 100


def generate_base_string(length: int = BASE_STRING_LENGTH,
                         rng: random.Random | None = None) -> str:
    """
    Return `length` random lowercase letters (repeats allowed).
    Pass a seeded `rng` to make the pool reproducible.
    """
    if not 1 <= length <= len(_STOCK):
        raise ValueError(f"length must be between 1 and {len(_STOCK)}; got {length}")
    rng = rng or random.Random()
    return "".join(rng.sample(_STOCK, length))


def check_base_string(pool: str) -> str:
    """Reject a caller-supplied pool that is not lowercase a–z."""
    if not pool or not (pool.isascii() and pool.isalpha() and pool.islower()):
        raise ValueError(f"base string must be lowercase letters a-z; got {pool!r}")
    return pool
