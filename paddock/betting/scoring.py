"""Outcome book and payout scoring.

Outcomes are append-only facts about the race. Scores are never stored: every
call to ``results`` recomputes them from the ledger and the outcome log.
"""

import logging

from pydantic import BaseModel

from paddock.betting.ledger import Ledger
from paddock.betting.models import Outcome, Player, PlayerName

logger = logging.getLogger(__name__)


class Standing(BaseModel):
    """One row of the race leaderboard."""

    rank: int
    player: PlayerName
    reward: int
    multiplier: int
    total: int


class OutcomeBook:
    """Realized outcomes, in registration order."""

    def __init__(self) -> None:
        self._outcomes: list[Outcome] = []

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self):
        return iter(list(self._outcomes))

    def register(self, outcome: Outcome) -> None:
        """Record an outcome. No check is made that anyone wagered on it."""
        self._outcomes.append(outcome)
        logger.info(f"Registered outcome: {outcome.wager.describe()} pays {outcome.reward}")

    def outcomes(self) -> list[Outcome]:
        return list(self._outcomes)

    def results(self, ledger: Ledger) -> dict[PlayerName, int]:
        """Total reward per player over every matching outcome.

        Players without any matching outcome are left out of the mapping.
        """
        totals: dict[PlayerName, int] = {}
        for outcome in self._outcomes:
            for player in ledger.players():
                if ledger.holds(player, outcome.wager):
                    totals[player] = totals.get(player, 0) + outcome.reward

        logger.debug(
            f"Scored {len(self._outcomes)} outcomes against {len(ledger)} wagers: {totals}"
        )
        return totals


def rank_standings(results: dict[PlayerName, int], players: list[Player]) -> list[Standing]:
    """Apply multipliers and rank players by total, highest first.

    Every listed player gets a row, including those with no reward. Players
    with equal totals share a rank and the next distinct total takes the
    following rank.
    """
    rows = sorted(
        (
            (results.get(player.name, 0) * player.multiplier, player.name, player)
            for player in players
        ),
        key=lambda row: (-row[0], row[1]),
    )

    standings: list[Standing] = []
    rank = 0
    previous_total: int | None = None
    for total, name, player in rows:
        if total != previous_total:
            rank += 1
            previous_total = total
        standings.append(
            Standing(
                rank=rank,
                player=name,
                reward=results.get(name, 0),
                multiplier=player.multiplier,
                total=total,
            )
        )
    return standings
