"""
Game session: one base string, one dictionary, one high score table.

- GameSession.submit_word: the scoring boundary (word -> points, 0 if rejected).
- GameSession.play_turn:   one loop iteration (normalize input, score it,
                           offer accepted words to the high score table).

The session owns all game state; nothing is module-global, so tests and the
CLI can run any number of independent games side by side.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Optional, Tuple

from packages.datasets import load_dictionary
from packages.engine import is_valid, score_word
from packages.highscores import HighScoreTable, InsertResult

from .config import GameConfig, QUIT_COMMAND
from .pool import generate_base_string, check_base_string

log = logging.getLogger(__name__)


class TurnStatus(str, enum.Enum):
    QUIT = "quit"           # sentinel read; the game is over
    EMPTY = "empty"         # submitted too early
    INVALID = "invalid"     # not buildable from the pool or not a word
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class TurnResult:
    word: str
    status: TurnStatus
    score: int
    high_score: Optional[InsertResult] = None   # set only for accepted words


class GameSession:
    def __init__(self, pool: str, dictionary: AbstractSet[str], *,
                 table: HighScoreTable | None = None,
                 quit_command: str = QUIT_COMMAND):
        self.pool = check_base_string(pool)
        self.dictionary = dictionary
        self.table = table if table is not None else HighScoreTable()
        self.quit_command = quit_command
        self.finished = False

    @classmethod
    def create(cls, words_path: Path | str | None = None, *,
               seed: int | None = None,
               base_string: str | None = None,
               config: GameConfig | None = None) -> "GameSession":
        """
        Build a session from a dictionary file.

        Raises FileNotFoundError / ValueError if the dictionary is missing or
        empty. `base_string` fixes the pool; otherwise one is generated with
        an RNG seeded by `seed`.
        """
        config = config or GameConfig()
        dictionary = load_dictionary(words_path or config.words_file)
        if base_string is None:
            base_string = generate_base_string(config.base_string_length, random.Random(seed))
        return cls(
            base_string,
            dictionary,
            table=HighScoreTable(config.high_scores_length),
            quit_command=config.quit_command,
        )

    def _judge(self, word: str) -> Tuple[TurnStatus, int]:
        if word == self.quit_command:
            self.finished = True
            return TurnStatus.QUIT, 0
        if not word:
            return TurnStatus.EMPTY, 0
        if is_valid(word, self.pool, self.dictionary):
            return TurnStatus.ACCEPTED, score_word(word)
        return TurnStatus.INVALID, 0

    def submit_word(self, word: str) -> int:
        """
        Score a submission: its length if it is valid, 0 otherwise.

        `word` is expected lowercase with no whitespace. The quit command
        scores 0 and marks the session finished. The high score table is
        never touched here; see `play_turn`.
        """
        return self._judge(word)[1]

    def play_turn(self, raw: str) -> TurnResult:
        """Normalize one line of input, score it and record accepted words."""
        word = raw.strip().lower()
        status, points = self._judge(word)
        if status is not TurnStatus.ACCEPTED:
            log.debug("turn %r -> %s", word, status.value)
            return TurnResult(word, status, 0)

        log.info("accepted %r for %d points", word, points)
        return TurnResult(word, status, points, self.table.try_insert(word, points))
