from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paddock.betting.models import Wager


class PaddockError(Exception):
    """Base exception for betting errors."""

    pass


class ConflictingWagerError(PaddockError):
    """Wager clashes with one the player already placed in the same category."""

    def __init__(self, wager: Wager, player: str):
        super().__init__(
            f"{player} already placed a wager in this category (rejected: {wager.describe()})"
        )
        self.wager = wager
        self.player = player


class WagerParseError(PaddockError, ValueError):
    """Wager token could not be parsed."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid wager '{token}': {reason}")
        self.token = token
        self.reason = reason
