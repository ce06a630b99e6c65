"""Betting core: wager types, the ledger and outcome scoring."""

from .exceptions import ConflictingWagerError, PaddockError, WagerParseError
from .models import (
    WAGER_TYPES,
    DoesNotFinish,
    DriverOfTheDay,
    FastestLap,
    FinishPosition,
    GridPosition,
    Outcome,
    Player,
    PlayerName,
    Wager,
    WillHaveSafetyCar,
    parse_wager,
)
from .ledger import Ledger
from .scoring import OutcomeBook, Standing, rank_standings

__all__ = [
    "PaddockError",
    "ConflictingWagerError",
    "WagerParseError",
    "WAGER_TYPES",
    "GridPosition",
    "FinishPosition",
    "DoesNotFinish",
    "FastestLap",
    "DriverOfTheDay",
    "WillHaveSafetyCar",
    "Wager",
    "Outcome",
    "Player",
    "PlayerName",
    "parse_wager",
    "Ledger",
    "OutcomeBook",
    "Standing",
    "rank_standings",
]
