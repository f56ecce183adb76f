"""
Scoring for accepted submissions.

One point per character. There are no bonuses for rare letters, for using
up the whole pool, or for word-length tiers.
"""


def score_word(word: str) -> int:
    """
    Points awarded for a valid `word`.

    Examples:
      score_word("pot")  -> 3
      score_word("toad") -> 4
    """
    return len(word)
