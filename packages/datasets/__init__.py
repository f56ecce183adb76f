from .wordlist import load_dictionary, validate_wordlist, pretty_summary, WORDS_FILE
from .io import read_lines, write_lines, unique_preserve_order

__all__ = ["load_dictionary", "validate_wordlist", "pretty_summary", "WORDS_FILE"]
