"""Unit tests for wager value types and token parsing."""

from typing import get_args

import pytest
from pydantic import ValidationError

from paddock.betting import (
    WAGER_TYPES,
    DoesNotFinish,
    DriverOfTheDay,
    FastestLap,
    FinishPosition,
    GridPosition,
    Outcome,
    Player,
    Wager,
    WagerParseError,
    WillHaveSafetyCar,
    parse_wager,
)
from paddock.roster import Driver

SAMPLES = [
    FinishPosition(driver=Driver.VER, position=1),
    DoesNotFinish(driver=Driver.HAM),
    FastestLap(driver=Driver.LEC),
    DriverOfTheDay(driver=Driver.NOR),
    WillHaveSafetyCar(value=True),
]


@pytest.mark.parametrize("value", [1, 10, 20])
def test_grid_position_accepts_range(value):
    assert GridPosition(value).value == value
    assert int(GridPosition(value)) == value


@pytest.mark.parametrize("value", [0, 21, -3])
def test_grid_position_rejects_out_of_range(value):
    with pytest.raises(ValidationError):
        GridPosition(value)


def test_grid_position_out_of_range_is_a_value_error():
    with pytest.raises(ValueError):
        FinishPosition(driver=Driver.VER, position=21)


def test_grid_positions_compare_by_number():
    assert GridPosition(3) == GridPosition(3)
    assert GridPosition(3) != GridPosition(4)
    assert len({GridPosition(3), GridPosition(3), GridPosition(4)}) == 2


def test_wagers_compare_structurally():
    assert FinishPosition(driver=Driver.VER, position=1) == FinishPosition(
        driver=Driver.VER, position=GridPosition(1)
    )
    assert FastestLap(driver=Driver.LEC) != FastestLap(driver=Driver.HAM)
    # Same payload, different category
    assert FastestLap(driver=Driver.LEC) != DriverOfTheDay(driver=Driver.LEC)
    assert hash(DoesNotFinish(driver=Driver.ALB)) == hash(DoesNotFinish(driver=Driver.ALB))


def test_wagers_are_immutable():
    wager = FastestLap(driver=Driver.LEC)
    with pytest.raises(ValidationError):
        wager.driver = Driver.HAM


def test_every_wager_type_has_a_distinct_kind():
    kinds = [wager_type.model_fields["kind"].default for wager_type in WAGER_TYPES]
    assert len(set(kinds)) == len(WAGER_TYPES)
    assert {type(sample) for sample in SAMPLES} == set(WAGER_TYPES)
    assert get_args(get_args(Wager)[0]) == WAGER_TYPES


@pytest.mark.parametrize("wager_type", WAGER_TYPES, ids=lambda t: t.__name__)
def test_every_wager_type_implements_the_wager_interface(wager_type):
    assert wager_type.__abstractmethods__ == frozenset()


@pytest.mark.parametrize("wager", SAMPLES, ids=lambda w: w.kind)
def test_every_wager_clashes_with_itself(wager):
    assert wager.clashes_with(wager)


@pytest.mark.parametrize("wager", SAMPLES, ids=lambda w: w.kind)
def test_wager_token_parses_back(wager):
    assert parse_wager(wager.to_token()) == wager


def test_outcome_reward_must_not_be_negative():
    with pytest.raises(ValidationError):
        Outcome(wager=FastestLap(driver=Driver.LEC), reward=-1)


@pytest.mark.parametrize("reward", [True, 2.0, "5"])
def test_outcome_reward_must_be_a_whole_number(reward):
    with pytest.raises(ValidationError):
        Outcome(wager=FastestLap(driver=Driver.LEC), reward=reward)


def test_outcome_parses_wager_by_kind():
    outcome = Outcome.model_validate(
        {"wager": {"kind": "finish_position", "driver": "VER", "position": 1}, "reward": 1000}
    )
    assert outcome.wager == FinishPosition(driver=Driver.VER, position=1)


def test_player_defaults():
    player = Player(name="demi")
    assert player.multiplier == 1

    with pytest.raises(ValidationError):
        Player(name="")
    with pytest.raises(ValidationError):
        Player(name="demi", multiplier=0)


def test_parse_wager_variants():
    assert parse_wager("finish:ver:3") == FinishPosition(driver=Driver.VER, position=3)
    assert parse_wager("DNF:HAM") == DoesNotFinish(driver=Driver.HAM)
    assert parse_wager("fl:LEC") == FastestLap(driver=Driver.LEC)
    assert parse_wager("driver-of-the-day:NOR") == DriverOfTheDay(driver=Driver.NOR)
    assert parse_wager("sc:false") == WillHaveSafetyCar(value=False)


@pytest.mark.parametrize(
    "token",
    [
        "podium:VER",
        "finish:VER",
        "finish:VER:21",
        "finish:VER:first",
        "dnf:XXX",
        "dnf:",
        "safety-car:maybe",
        "fastest-lap:LEC:1",
    ],
)
def test_parse_wager_rejects_malformed(token):
    with pytest.raises(WagerParseError) as excinfo:
        parse_wager(token)
    assert excinfo.value.token == token
