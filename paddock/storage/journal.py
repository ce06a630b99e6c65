"""Append-only JSONL journal of accepted placements and registered outcomes.

One file per day under data/journal/{YYYY-MM-DD}.jsonl, one JSON object per line.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from paddock.betting.models import Outcome, PlayerName, Wager
from paddock.storage.state import get_data_dir

logger = logging.getLogger(__name__)


class JournalEntry(BaseModel):
    """A single journal line."""

    event: Literal["placement", "outcome"]
    player: PlayerName | None = None
    wager: Wager
    reward: int | None = None
    recorded_at: datetime


def _journal_path(journal_dir: Path | None, recorded_at: datetime) -> Path:
    journal_dir = journal_dir or get_data_dir() / "journal"
    journal_dir.mkdir(parents=True, exist_ok=True)
    return journal_dir / f"{recorded_at.strftime('%Y-%m-%d')}.jsonl"


def _append(entry: JournalEntry, journal_dir: Path | None) -> Path:
    journal_path = _journal_path(journal_dir, entry.recorded_at)

    try:
        with open(journal_path, "a", encoding="utf-8") as f:
            f.write(entry.model_dump_json() + "\n")

        logger.debug(f"Journaled {entry.event} to {journal_path}")
        return journal_path

    except Exception as e:
        logger.error(f"Failed to journal {entry.event}: {e}")
        raise


def log_placement(player: PlayerName, wager: Wager, journal_dir: Path | None = None) -> Path:
    """Record an accepted placement."""
    entry = JournalEntry(
        event="placement",
        player=player,
        wager=wager,
        recorded_at=datetime.now(timezone.utc),
    )
    return _append(entry, journal_dir)


def log_outcome(outcome: Outcome, journal_dir: Path | None = None) -> Path:
    """Record a registered outcome."""
    entry = JournalEntry(
        event="outcome",
        wager=outcome.wager,
        reward=outcome.reward,
        recorded_at=datetime.now(timezone.utc),
    )
    return _append(entry, journal_dir)


def read_journal(journal_path: Path) -> list[JournalEntry]:
    """Read every entry of a journal file, oldest first."""
    entries = []
    with open(journal_path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                entries.append(JournalEntry.model_validate_json(line))
    return entries
