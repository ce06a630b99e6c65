"""Static reference data: drivers, constructor teams and race locations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Driver(str, Enum):
    """Drivers of the current season, by their three-letter timing code."""

    VER = "VER"
    PER = "PER"
    LEC = "LEC"
    SAI = "SAI"
    HAM = "HAM"
    RUS = "RUS"
    ALO = "ALO"
    OCO = "OCO"
    NOR = "NOR"
    RIC = "RIC"
    BOT = "BOT"
    ZHO = "ZHO"
    STR = "STR"
    VET = "VET"
    MSC = "MSC"
    MAG = "MAG"
    GAS = "GAS"
    TSU = "TSU"
    LAT = "LAT"
    ALB = "ALB"

    @property
    def team(self) -> Team:
        for team in Team:
            if self in team.drivers:
                return team
        raise LookupError(f"Driver {self.value} has no team")


class Team(str, Enum):
    """Constructor teams. Each team fields exactly two drivers."""

    RED_BULL = "Red Bull"
    MERCEDES = "Mercedes"
    FERRARI = "Ferrari"
    ALPINE = "Alpine"
    MCLAREN = "McLaren"
    ALFA_ROMEO = "Alfa Romeo"
    ASTON_MARTIN = "Aston Martin"
    HAAS = "Haas"
    ALPHA_TAURI = "AlphaTauri"
    WILLIAMS = "Williams"

    @property
    def drivers(self) -> tuple[Driver, Driver]:
        return _TEAM_DRIVERS[self]


_TEAM_DRIVERS: dict[Team, tuple[Driver, Driver]] = {
    Team.RED_BULL: (Driver.VER, Driver.PER),
    Team.MERCEDES: (Driver.HAM, Driver.RUS),
    Team.FERRARI: (Driver.SAI, Driver.LEC),
    Team.ALPINE: (Driver.ALO, Driver.OCO),
    Team.MCLAREN: (Driver.NOR, Driver.RIC),
    Team.ALFA_ROMEO: (Driver.BOT, Driver.ZHO),
    Team.ASTON_MARTIN: (Driver.STR, Driver.VET),
    Team.HAAS: (Driver.MSC, Driver.MAG),
    Team.ALPHA_TAURI: (Driver.GAS, Driver.TSU),
    Team.WILLIAMS: (Driver.LAT, Driver.ALB),
}


class Location(str, Enum):
    """Host country of a Grand Prix."""

    SPAIN = "Spain"
    BAHRAIN = "Bahrain"
    SAUDI_ARABIA = "Saudi Arabia"
    AUSTRALIA = "Australia"
    ITALY = "Italy"
    MONACO = "Monaco"
    AZERBAIJAN = "Azerbaijan"
    CANADA = "Canada"
    UK = "UK"
    AUSTRIA = "Austria"
    FRANCE = "France"
    HUNGARY = "Hungary"
    SINGAPORE = "Singapore"
    JAPAN = "Japan"
    MEXICO = "Mexico"
    BRAZIL = "Brazil"
    ABU_DHABI = "Abu Dhabi"
    USA = "USA"
    BELGIUM = "Belgium"
    NETHERLANDS = "Netherlands"


class Race(BaseModel):
    """A single Grand Prix: where and in which season."""

    model_config = ConfigDict(frozen=True)

    location: Location
    season: int = Field(ge=1950)

    @property
    def label(self) -> str:
        return f"{self.season} {self.location.value} Grand Prix"


def full_roster() -> dict[str, tuple[Driver, Driver]]:
    """Map every team display name to its driver pair."""
    return {team.value: team.drivers for team in Team}
