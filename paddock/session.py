"""A single race's betting window: ledger, outcome book and players."""

import logging

from paddock.betting.ledger import Ledger
from paddock.betting.models import Outcome, Player, PlayerName, Wager
from paddock.betting.scoring import OutcomeBook, Standing, rank_standings
from paddock.roster import Race
from paddock.storage.state import Placement, SessionState

logger = logging.getLogger(__name__)


class BettingSession:
    """Owns the wagers and outcomes for one race.

    Not thread-safe. Placements, outcome registration and scoring must be
    serialized by the caller if the session is ever shared.
    """

    def __init__(self, race: Race) -> None:
        self.race = race
        self.ledger = Ledger()
        self.outcome_book = OutcomeBook()
        self._players: dict[PlayerName, Player] = {}

    def add_player(self, name: PlayerName, multiplier: int = 1) -> Player:
        """Register a player, or update the multiplier of a known one."""
        player = Player(name=name, multiplier=multiplier)
        self._players[name] = player
        logger.info(f"Registered player {name} (x{multiplier})")
        return player

    def get_player(self, name: PlayerName) -> Player | None:
        return self._players.get(name)

    def players(self) -> list[Player]:
        return list(self._players.values())

    def place(self, wager: Wager, player: PlayerName) -> Wager:
        """Place a wager, registering the player on first use.

        Raises:
            ConflictingWagerError: If the wager clashes with one the player already holds.
        """
        placed = self.ledger.place(wager, player)
        if player not in self._players:
            self.add_player(player)
        return placed

    def register_outcome(self, outcome: Outcome | Wager, reward: int | None = None) -> Outcome:
        """Record what happened in the race.

        Accepts either a complete Outcome, or a wager together with its reward.
        """
        if isinstance(outcome, Outcome):
            if reward is not None:
                raise ValueError("reward is already part of the outcome")
        else:
            if reward is None:
                raise ValueError("reward is required when registering a wager as outcome")
            outcome = Outcome(wager=outcome, reward=reward)

        self.outcome_book.register(outcome)
        return outcome

    def results(self) -> dict[PlayerName, int]:
        """Raw reward per player. Players with nothing to collect are absent."""
        return self.outcome_book.results(self.ledger)

    def standings(self) -> list[Standing]:
        """Leaderboard of every registered player, multipliers applied."""
        return rank_standings(self.results(), self.players())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_state(self) -> SessionState:
        return SessionState(
            race=self.race,
            players=self.players(),
            placements=[
                Placement(player=player, wager=wager)
                for player, wager in self.ledger.placements()
            ],
            outcomes=self.outcome_book.outcomes(),
        )

    @classmethod
    def from_state(cls, state: SessionState) -> "BettingSession":
        """Rebuild a session, replaying every placement through the ledger.

        Raises:
            ConflictingWagerError: If the stored placements break the admission rules.
        """
        session = cls(state.race)
        for player in state.players:
            session.add_player(player.name, player.multiplier)
        for placement in state.placements:
            session.place(placement.wager, placement.player)
        for outcome in state.outcomes:
            session.register_outcome(outcome)

        logger.info(
            f"Restored session for {state.race.label}: "
            f"{len(session.ledger)} wagers, {len(session.outcome_book)} outcomes"
        )
        return session
