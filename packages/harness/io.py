"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      one row per turn of a replayed game.
- write_manifest: dump a JSON manifest with config, hashes and the final table.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["turn", "word", "status", "score", "high_score_accepted", "table_size"]


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize replay rows (as returned by `play_script`) to CSV.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in rows:
            row = dict(r)
            # Empty cell rather than "None" for turns that never reached the table
            if row.get("high_score_accepted") is None:
                row["high_score_accepted"] = ""
            w.writerow({k: row.get(k, "") for k in CSV_FIELDS})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a replay run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, guesses, seed, base, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - base_string, high_scores, num_turns
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
