"""Unit tests for outcome scoring and standings."""

from paddock.betting import (
    DoesNotFinish,
    FastestLap,
    FinishPosition,
    Ledger,
    Outcome,
    OutcomeBook,
    Player,
    WillHaveSafetyCar,
    rank_standings,
)
from paddock.roster import Driver


def test_outcome_without_wagers_scores_nothing():
    ledger = Ledger()
    book = OutcomeBook()
    book.register(Outcome(wager=FastestLap(driver=Driver.LEC), reward=2500))

    assert len(book) == 1
    assert book.results(ledger) == {}


def test_matching_player_collects_reward():
    ledger = Ledger()
    ledger.place(FastestLap(driver=Driver.LEC), "demi")
    ledger.place(FastestLap(driver=Driver.HAM), "michiel")

    book = OutcomeBook()
    book.register(Outcome(wager=FastestLap(driver=Driver.LEC), reward=2500))

    results = book.results(ledger)
    assert results["demi"] == 2500
    # No matching outcome, no entry
    assert "michiel" not in results


def test_rewards_are_additive():
    ledger = Ledger()
    ledger.place(DoesNotFinish(driver=Driver.ALB), "demi")
    ledger.place(DoesNotFinish(driver=Driver.PER), "demi")

    book = OutcomeBook()
    book.register(Outcome(wager=DoesNotFinish(driver=Driver.ALB), reward=1000))
    book.register(Outcome(wager=DoesNotFinish(driver=Driver.PER), reward=750))

    assert book.results(ledger) == {"demi": 1750}


def test_finish_position_must_match_exactly():
    ledger = Ledger()
    ledger.place(FinishPosition(driver=Driver.VER, position=2), "demi")

    book = OutcomeBook()
    book.register(Outcome(wager=FinishPosition(driver=Driver.VER, position=1), reward=1000))

    assert book.results(ledger) == {}


def test_results_are_idempotent_and_pure():
    ledger = Ledger()
    ledger.place(WillHaveSafetyCar(value=True), "demi")
    book = OutcomeBook()
    book.register(Outcome(wager=WillHaveSafetyCar(value=True), reward=500))

    first = book.results(ledger)
    second = book.results(ledger)

    assert first == second == {"demi": 500}
    assert len(ledger) == 1
    assert len(book) == 1


def test_results_follow_new_outcomes():
    ledger = Ledger()
    ledger.place(WillHaveSafetyCar(value=True), "demi")
    book = OutcomeBook()

    assert book.results(ledger) == {}
    book.register(Outcome(wager=WillHaveSafetyCar(value=True), reward=500))
    assert book.results(ledger) == {"demi": 500}


def test_outcomes_returns_a_copy():
    book = OutcomeBook()
    book.register(Outcome(wager=FastestLap(driver=Driver.LEC), reward=2500))

    book.outcomes().clear()
    assert len(book.outcomes()) == 1


def test_rank_standings_applies_multipliers():
    players = [Player(name="demi"), Player(name="michiel", multiplier=3), Player(name="nuyts")]
    standings = rank_standings({"demi": 2000, "michiel": 1000}, players)

    assert [(s.rank, s.player, s.total) for s in standings] == [
        (1, "michiel", 3000),
        (2, "demi", 2000),
        (3, "nuyts", 0),
    ]
    assert standings[0].reward == 1000
    assert standings[0].multiplier == 3


def test_rank_standings_ties_share_rank():
    players = [Player(name="michiel"), Player(name="demi"), Player(name="nuyts")]
    standings = rank_standings({"demi": 1000, "michiel": 1000}, players)

    assert [(s.rank, s.player) for s in standings] == [
        (1, "demi"),
        (1, "michiel"),
        (2, "nuyts"),
    ]
