"""Per-player wager book with admission rules.

The ledger is the only place wagers are stored. A wager is admitted only if it
does not clash with any wager the same player already holds:

- FinishPosition: one position per driver and one driver per position
- DoesNotFinish: one per driver
- FastestLap, DriverOfTheDay, WillHaveSafetyCar: one per player, whatever the payload

A rejected wager leaves the ledger untouched.
"""

import logging
from collections.abc import Iterator

from paddock.betting.exceptions import ConflictingWagerError
from paddock.betting.models import PlayerName, Wager

logger = logging.getLogger(__name__)


class Ledger:
    """Placed wagers indexed by player name, in placement order."""

    def __init__(self) -> None:
        self._placed: dict[PlayerName, list[Wager]] = {}

    def __len__(self) -> int:
        return sum(len(wagers) for wagers in self._placed.values())

    def __contains__(self, player: object) -> bool:
        return player in self._placed

    def place(self, wager: Wager, player: PlayerName) -> Wager:
        """Place a wager for a player.

        Returns:
            The accepted wager, unchanged.

        Raises:
            ValueError: If the player name is empty.
            ConflictingWagerError: If the wager clashes with one the player already holds.
        """
        if not player:
            raise ValueError("Player name must not be empty")

        if not self.is_admissible(wager, player):
            logger.warning(f"Rejected wager for {player}: {wager.describe()}")
            raise ConflictingWagerError(wager, player)

        self._placed.setdefault(player, []).append(wager)
        logger.info(f"Placed wager for {player}: {wager.describe()}")
        return wager

    def is_admissible(self, wager: Wager, player: PlayerName) -> bool:
        """Check the admission rules without placing anything."""
        return not any(wager.clashes_with(existing) for existing in self._placed.get(player, ()))

    def wagers_for(self, player: PlayerName) -> list[Wager]:
        return list(self._placed.get(player, ()))

    def players(self) -> list[PlayerName]:
        return list(self._placed)

    def placements(self) -> Iterator[tuple[PlayerName, Wager]]:
        """Yield every (player, wager) pair, each player's wagers in placement order."""
        for player, wagers in self._placed.items():
            for wager in wagers:
                yield player, wager

    def holds(self, player: PlayerName, wager: Wager) -> bool:
        return wager in self._placed.get(player, ())
