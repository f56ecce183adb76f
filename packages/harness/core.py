"""
Replay harness core.

- play_script: feed a fixed sequence of guesses through a GameSession and
  collect one result row per turn.

UI-agnostic: the replay CLI, tests and notebooks all drive games through
this instead of the interactive prompt loop.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from packages.game import GameSession, TurnStatus


def play_script(session: GameSession, guesses: Iterable[str]) -> List[Dict]:
    """
    Play `guesses` in order until they run out or the quit command is read.

    Returns:
        list of dicts with keys:
            turn (int), word (str), status (str), score (int),
            high_score_accepted (bool | None), table_size (int)
    """
    rows: List[Dict] = []
    for turn, raw in enumerate(guesses, start=1):
        if session.finished:
            break
        r = session.play_turn(raw)
        rows.append({
            "turn": turn,
            "word": r.word,
            "status": r.status.value,
            "score": r.score,
            "high_score_accepted": None if r.high_score is None else r.high_score.accepted,
            "table_size": len(session.table),
        })
        if r.status is TurnStatus.QUIT:
            break
    return rows
