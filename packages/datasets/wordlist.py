"""
Dictionary loading and word list diagnostics.

What this module does:
- Load the game dictionary (one lowercase word per line) into a frozenset.
  A missing or empty file is a fatal startup error.
- Validate a word list file: lowercase a–z only, one word per line, no
  duplicates. Return a machine-readable dict (for manifests) and provide a
  pretty one-line summary.

Typical use:
    from packages.datasets import load_dictionary, validate_wordlist, pretty_summary
    rep = validate_wordlist("wordlist.txt")
    print(pretty_summary(rep))
    words = load_dictionary("wordlist.txt")
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

from .io import read_lines

log = logging.getLogger(__name__)

# Default dictionary file, relative to the working directory.
WORDS_FILE = "wordlist.txt"


@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _split_valid(lines: List[str]) -> Tuple[List[str], int]:
    """
    Separate well-formed words from bad lines.

    Rules:
      - one token per line, surrounding whitespace ignored
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID
    """
    valid: List[str] = []
    invalid = 0
    for raw in lines:
        w = raw.strip()
        if w and w.isascii() and w.isalpha() and w.islower():
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def load_dictionary(path: Path | str = WORDS_FILE) -> FrozenSet[str]:
    """
    Load the dictionary used to accept submissions.

    Raises:
      FileNotFoundError if `path` does not exist.
      ValueError if the file is empty or holds no words.

    Lines are stripped; blank lines are skipped. Words are kept as written,
    so a capitalized entry can never match a lowercase submission.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"The file {p} does not exist")
    if p.stat().st_size == 0:
        raise ValueError(f"The word list {p} is empty")

    words = frozenset(w.strip() for w in read_lines(p) if w.strip())
    if not words:
        raise ValueError(f"The word list {p} contains no words")

    log.info("loaded %d words from %s", len(words), p)
    return words


def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) with counts,
        SHA-256, invalid/duplicate diagnostics, a strict `passed` flag
        (non-empty, no invalid lines, no duplicates) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _split_valid(read_lines(p))
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        wordlist.txt | words=3000 (uniq=3000, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
