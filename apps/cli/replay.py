# apps/cli/replay.py
"""
Replay a file of guesses against one game and record the outcome.

This script:
  1) Validates the word list (prints counts + SHA) and builds a session with
     a fixed (--base) or seeded (--seed) base string.
  2) Plays every guess in --guesses, one per line, with a progress bar.
  3) Writes:
       - CSV:  one row per turn (word, status, score, high score outcome)
       - JSON: manifest with config, word list hash, base string, final table
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, read_lines
from packages.datasets.wordlist import WORDS_FILE
from packages.game import GameConfig, GameSession
from packages.harness import play_script, write_csv, write_manifest
from packages.harness.io import timestamp_id, git_commit_or_unknown
from packages.highscores import HIGH_SCORES_ALLOWED_LENGTH

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def main(argv=None) -> int:
    """
    Parse CLI args, build the session, replay the guesses and write outputs.
    """
    ap = argparse.ArgumentParser(description="Replay a list of guesses against one game")
    ap.add_argument("--words", default=WORDS_FILE, help="dictionary file")
    ap.add_argument("--guesses", required=True, help="file with one guess per line")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for the base string")
    ap.add_argument("--base", help="fixed base string (overrides --seed)")
    ap.add_argument("--high-scores", type=int, default=HIGH_SCORES_ALLOWED_LENGTH,
                    help="nominal size of the high score list")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    # 1) Word list summary, then the session (fatal if the list is unusable)
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    try:
        config = GameConfig(words_file=args.words, high_scores_length=args.high_scores)
        session = GameSession.create(seed=args.seed, base_string=args.base, config=config)
        guesses = read_lines(args.guesses)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # 2) Replay
    iterator = tqdm(guesses, ncols=80, desc="Replaying", unit="guess", disable=args.no_progress)
    rows = play_script(session, iterator)

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "base_string": session.pool,
        "num_turns": len(rows),
        "total_score": sum(r["score"] for r in rows),
        "high_scores": [asdict(e) for e in session.table],
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
