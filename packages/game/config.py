from __future__ import annotations

from dataclasses import dataclass

from packages.datasets.wordlist import WORDS_FILE
from packages.highscores.table import HIGH_SCORES_ALLOWED_LENGTH

# Length of the base string generated at the start of each game.
BASE_STRING_LENGTH = 10

# Input that ends the game instead of being scored.
QUIT_COMMAND = "quit!"


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game. Defaults mirror the module constants."""
    words_file: str = WORDS_FILE
    base_string_length: int = BASE_STRING_LENGTH
    high_scores_length: int = HIGH_SCORES_ALLOWED_LENGTH
    quit_command: str = QUIT_COMMAND

    def __post_init__(self) -> None:
        if self.base_string_length < 1:
            raise ValueError(f"base_string_length must be positive; got {self.base_string_length}")
        if self.high_scores_length < 2:
            raise ValueError(f"high_scores_length must be at least 2; got {self.high_scores_length}")
        if not self.quit_command:
            raise ValueError("quit_command must be a non-empty string")
