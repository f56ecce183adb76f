# apps/cli/play.py
"""
Interactive entry point: play one game in the terminal.

This script:
  1) Checks the word list (prints counts + SHA) and loads it; a missing or
     empty list ends the program with exit status 1.
  2) Generates (or takes from --base) the base string and prints it.
  3) Loops: read a guess, score it, update the high scores, print feedback,
     until the quit command is typed or stdin runs out.

Usage:
    python -m apps.cli.play --words wordlist.txt
    python -m apps.cli.play --words wordlist.txt --seed 7 --log-level INFO
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from packages.datasets import validate_wordlist, pretty_summary
from packages.game import GameConfig, GameSession, TurnResult, TurnStatus
from packages.game.config import BASE_STRING_LENGTH
from packages.datasets.wordlist import WORDS_FILE
from packages.highscores import HIGH_SCORES_ALLOWED_LENGTH

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Make words from the letters of a random base string")
    ap.add_argument("--words", default=WORDS_FILE, help="dictionary file, one lowercase word per line")
    ap.add_argument("--seed", type=int, help="RNG seed for the base string (for reproducibility)")
    ap.add_argument("--base", help="use this base string instead of a random one")
    ap.add_argument("--length", type=int, default=BASE_STRING_LENGTH,
                    help="length of a generated base string")
    ap.add_argument("--high-scores", type=int, default=HIGH_SCORES_ALLOWED_LENGTH,
                    help="nominal size of the high score list")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="diagnostics written to stderr")
    return ap


def start_session(args: argparse.Namespace) -> GameSession:
    """Validate the word list, print its summary and build the session."""
    print(pretty_summary(validate_wordlist(args.words)))
    config = GameConfig(
        words_file=args.words,
        base_string_length=args.length,
        high_scores_length=args.high_scores,
    )
    return GameSession.create(seed=args.seed, base_string=args.base, config=config)


def describe(result: TurnResult, session: GameSession) -> List[str]:
    """Feedback lines for one turn."""
    w = result.word
    if result.status is TurnStatus.QUIT:
        return ["Good bye, thank you for playing!"]
    if result.status is TurnStatus.EMPTY:
        return ["Looks like you submitted too early - try again?"]
    if result.status is TurnStatus.INVALID:
        return [f"Unlucky - '{w}' is not a valid word!"]

    lines = [f"Good guess! '{w}' scores you {result.score} points!"]
    if not result.high_score.accepted:
        lines.append(f"'{w}' is already in the list of high scores so it can't be added this time.")
    elif w in session.table:
        lines.append(f"'{w}' is a unique answer and has been added to the high scores!")
    else:
        lines.append(f"'{w}' did not score high enough for the high score list.")
    return lines


def format_table(session: GameSession) -> str:
    rows = [f"{i + 1:>3}. {e.word:<15} {e.score:>3}" for i, e in enumerate(session.table)]
    return "\n".join(["High scores:"] + (rows or ["  (none yet)"]))


def run_loop(session: GameSession) -> None:
    """Prompt for guesses until the session is finished."""
    while not session.finished:
        try:
            raw = input("\nPlease enter your guess: ")
        except EOFError:
            raw = session.quit_command
        result = session.play_turn(raw)
        for line in describe(result, session):
            print(line)
        if result.status is TurnStatus.ACCEPTED:
            print(format_table(session))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        session = start_session(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"\nThe base string is:\n\n    {session.pool}\n")
    print(f"Type '{session.quit_command}' to stop.")
    run_loop(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
