"""Value types for wagers, outcomes and players.

Every wager is a frozen Pydantic model tagged with a ``kind`` literal, so the
``Wager`` union round-trips through YAML/JSON and compares structurally.
Each variant also knows which of a player's existing wagers it clashes with;
the ledger relies on that to enforce admission rules.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from paddock.betting.exceptions import WagerParseError
from paddock.roster import Driver

PlayerName = str

MIN_GRID_POSITION = 1
MAX_GRID_POSITION = 20


class GridPosition(RootModel[Annotated[int, Field(ge=MIN_GRID_POSITION, le=MAX_GRID_POSITION)]]):
    """Finishing position on the race grid, always from 1 up to 20."""

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> int:
        return self.root

    def __int__(self) -> int:
        return self.root


class _WagerBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def clashes_with(self, other: Wager) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...

    @abstractmethod
    def to_token(self) -> str: ...


class FinishPosition(_WagerBase):
    """At which position a driver finishes the race."""

    kind: Literal["finish_position"] = "finish_position"
    driver: Driver
    position: GridPosition

    def clashes_with(self, other: Wager) -> bool:
        # One position per driver and one driver per position.
        return isinstance(other, FinishPosition) and (
            other.driver == self.driver or other.position == self.position
        )

    def describe(self) -> str:
        return f"{self.driver.value} finishes P{self.position.value}"

    def to_token(self) -> str:
        return f"finish:{self.driver.value}:{self.position.value}"


class DoesNotFinish(_WagerBase):
    """Which driver does not finish the race."""

    kind: Literal["does_not_finish"] = "does_not_finish"
    driver: Driver

    def clashes_with(self, other: Wager) -> bool:
        return other == self

    def describe(self) -> str:
        return f"{self.driver.value} does not finish"

    def to_token(self) -> str:
        return f"dnf:{self.driver.value}"


class FastestLap(_WagerBase):
    """Which driver sets the fastest lap of the race."""

    kind: Literal["fastest_lap"] = "fastest_lap"
    driver: Driver

    def clashes_with(self, other: Wager) -> bool:
        return isinstance(other, FastestLap)

    def describe(self) -> str:
        return f"{self.driver.value} sets the fastest lap"

    def to_token(self) -> str:
        return f"fastest-lap:{self.driver.value}"


class DriverOfTheDay(_WagerBase):
    """Which driver gets voted driver of the day."""

    kind: Literal["driver_of_the_day"] = "driver_of_the_day"
    driver: Driver

    def clashes_with(self, other: Wager) -> bool:
        return isinstance(other, DriverOfTheDay)

    def describe(self) -> str:
        return f"{self.driver.value} is driver of the day"

    def to_token(self) -> str:
        return f"dotd:{self.driver.value}"


class WillHaveSafetyCar(_WagerBase):
    """Whether the safety car comes out during the race."""

    kind: Literal["safety_car"] = "safety_car"
    value: bool

    def clashes_with(self, other: Wager) -> bool:
        return isinstance(other, WillHaveSafetyCar)

    def describe(self) -> str:
        return "safety car deployed" if self.value else "no safety car"

    def to_token(self) -> str:
        return f"safety-car:{'yes' if self.value else 'no'}"


WAGER_TYPES = (FinishPosition, DoesNotFinish, FastestLap, DriverOfTheDay, WillHaveSafetyCar)

Wager = Annotated[
    Union[WAGER_TYPES],
    Field(discriminator="kind"),
]


class Outcome(BaseModel):
    """Something that actually happened in the race, and what it pays."""

    model_config = ConfigDict(frozen=True)

    wager: Wager
    reward: int = Field(ge=0, strict=True)


class Player(BaseModel):
    """A participant and the bonus multiplier applied to their standing."""

    name: PlayerName = Field(min_length=1)
    multiplier: int = Field(default=1, ge=1)


# ============================================================================
# Token parsing
# ============================================================================

_TOKEN_KINDS = {
    "finish": "finish_position",
    "finish-position": "finish_position",
    "dnf": "does_not_finish",
    "does-not-finish": "does_not_finish",
    "fastest-lap": "fastest_lap",
    "fl": "fastest_lap",
    "dotd": "driver_of_the_day",
    "driver-of-the-day": "driver_of_the_day",
    "safety-car": "safety_car",
    "sc": "safety_car",
}

_BOOL_TOKENS = {"yes": True, "true": True, "y": True, "no": False, "false": False, "n": False}


def _parse_driver(token: str, code: str) -> Driver:
    try:
        return Driver(code.upper())
    except ValueError:
        raise WagerParseError(token, f"unknown driver '{code}'") from None


def parse_wager(token: str) -> Wager:
    """Parse a wager token such as ``finish:VER:1``, ``dnf:HAM`` or ``safety-car:yes``.

    Raises:
        WagerParseError: If the token is malformed.
    """
    parts = [part.strip() for part in token.strip().split(":")]
    kind = _TOKEN_KINDS.get(parts[0].lower())
    if kind is None:
        raise WagerParseError(token, f"unknown wager type '{parts[0]}'")

    args = parts[1:]
    expected = 2 if kind == "finish_position" else 1
    if len(args) != expected or not all(args):
        raise WagerParseError(token, f"expected {expected} value(s) after '{parts[0]}'")

    if kind == "safety_car":
        flag = _BOOL_TOKENS.get(args[0].lower())
        if flag is None:
            raise WagerParseError(token, f"expected yes or no, got '{args[0]}'")
        return WillHaveSafetyCar(value=flag)

    driver = _parse_driver(token, args[0])

    if kind == "finish_position":
        try:
            position = GridPosition(int(args[1]))
        except ValueError:
            raise WagerParseError(
                token,
                f"grid position must be an integer from {MIN_GRID_POSITION} to {MAX_GRID_POSITION}",
            ) from None
        return FinishPosition(driver=driver, position=position)
    if kind == "does_not_finish":
        return DoesNotFinish(driver=driver)
    if kind == "fastest_lap":
        return FastestLap(driver=driver)
    return DriverOfTheDay(driver=driver)
