"""Storage layer for Paddock - file-based session persistence.

This package provides:
- State management (load/save a betting session from data/session.yaml)
- Journal (append placements and outcomes to data/journal/{date}.jsonl)

State is validated through Pydantic models and written atomically to prevent corruption.
"""

# State management
from .state import (
    Placement,
    SessionState,
    load_state,
    save_state,
    get_data_dir,
)

# Journal
from .journal import (
    JournalEntry,
    log_placement,
    log_outcome,
    read_journal,
)

__all__ = [
    # State management
    "Placement",
    "SessionState",
    "load_state",
    "save_state",
    "get_data_dir",
    # Journal
    "JournalEntry",
    "log_placement",
    "log_outcome",
    "read_journal",
]
