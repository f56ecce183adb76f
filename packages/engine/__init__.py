from .scoring import score_word
from .validation import is_valid, all_letters_in_pool, in_dictionary, letter_usage_ok

__all__ = ["score_word", "is_valid", "all_letters_in_pool", "in_dictionary", "letter_usage_ok"]
