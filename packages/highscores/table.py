"""
Bounded, ranked high-score table.

Rules (applied per insertion):
  1) A word already in the table is rejected; nothing changes.
  2) The (word, score) pair is added.
  3) Entries are re-ranked by score, highest first. The sort is stable, so
     among equal scores the earlier submission ranks higher.
  4) The table is cut down to `max_length - 1` entries.
  5) If the new score equals the score now at position `max_length - 2`
     (the last kept slot), the word is set again.

Entries are kept in an insertion-ordered dict keyed by word. Step 5 is a
no-op when the word survived step 4. When the word was cut in step 4 (it tied
the last kept entry but was submitted later) it is appended again, so the
table can hold `max_length` entries until the next insertion trims it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

log = logging.getLogger(__name__)

# Nominal size of the high score list.
HIGH_SCORES_ALLOWED_LENGTH = 10


@dataclass(frozen=True)
class HighScoreEntry:
    """One row of the table."""
    word: str
    score: int


@dataclass(frozen=True)
class InsertResult:
    """Outcome of `HighScoreTable.try_insert`."""
    accepted: bool                          # False only for duplicate words
    snapshot: Tuple[HighScoreEntry, ...]    # table contents after the call


class HighScoreTable:
    def __init__(self, max_length: int = HIGH_SCORES_ALLOWED_LENGTH):
        if max_length < 2:
            raise ValueError(f"max_length must be at least 2; got {max_length}")
        self.max_length = int(max_length)
        self._scores: Dict[str, int] = {}

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, word: object) -> bool:
        return word in self._scores

    def __iter__(self) -> Iterator[HighScoreEntry]:
        return iter(self.entries())

    def entries(self) -> Tuple[HighScoreEntry, ...]:
        """Immutable snapshot, position 0 first."""
        return tuple(HighScoreEntry(w, s) for w, s in self._scores.items())

    def entry_at(self, position: int) -> Optional[HighScoreEntry]:
        """
        Entry at `position` (0 = best score), or None if there is none.
        Negative positions never wrap around; they return None.
        """
        if position < 0 or position >= len(self._scores):
            return None
        word = list(self._scores)[position]
        return HighScoreEntry(word, self._scores[word])

    def word_at(self, position: int) -> Optional[str]:
        entry = self.entry_at(position)
        return entry.word if entry else None

    def score_at(self, position: int) -> Optional[int]:
        entry = self.entry_at(position)
        return entry.score if entry else None

    # ---- mutation ----

    def try_insert(self, word: str, score: int) -> InsertResult:
        """
        Add `word` with `score` following the ranking and eviction rules in
        the module docstring. Duplicate words are a normal rejection.
        """
        if word in self._scores:
            log.info("high score rejected: %r already listed", word)
            return InsertResult(accepted=False, snapshot=self.entries())

        self._scores[word] = score

        ranked = sorted(self._scores.items(), key=lambda kv: kv[1], reverse=True)
        self._scores = dict(ranked[: self.max_length - 1])

        # Explicit index of the last kept slot; a shorter table yields None.
        if score == self.score_at(self.max_length - 2):
            self._scores.setdefault(word, score)

        if word in self._scores:
            log.info("high score added: %r (%d) -> %d entries", word, score, len(self._scores))
        else:
            log.info("high score %r (%d) did not make the table", word, score)
        return InsertResult(accepted=True, snapshot=self.entries())
