from .table import HighScoreTable, HighScoreEntry, InsertResult, HIGH_SCORES_ALLOWED_LENGTH

__all__ = ["HighScoreTable", "HighScoreEntry", "InsertResult", "HIGH_SCORES_ALLOWED_LENGTH"]
