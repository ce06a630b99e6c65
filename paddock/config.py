"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paddock.roster import Location, Race

logger = logging.getLogger(__name__)


class RaceConfig(BaseModel):
    """Race a new session is opened for."""

    location: Location = Location.BELGIUM
    season: int = Field(default=2022, ge=1950)

    def to_race(self) -> Race:
        return Race(location=self.location, season=self.season)


class RewardConfig(BaseModel):
    """Default reward per wager kind, used when an outcome is declared without one."""

    finish_position: int = Field(default=1000, ge=0)
    does_not_finish: int = Field(default=1000, ge=0)
    fastest_lap: int = Field(default=2500, ge=0)
    driver_of_the_day: int = Field(default=5000, ge=0)
    safety_car: int = Field(default=500, ge=0)

    def for_kind(self, kind: str) -> int:
        return getattr(self, kind)


class JournalConfig(BaseModel):
    """Append-only journal of placements and outcomes."""

    enabled: bool = True


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # API Keys
    logfire_token: str = ""

    # Nested configuration sections
    race: RaceConfig = Field(default_factory=RaceConfig)
    rewards: RewardConfig = Field(default_factory=RewardConfig)
    journal: JournalConfig = Field(default_factory=JournalConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    @property
    def state_path(self) -> Path:
        return self.data_dir / "session.yaml"

    @property
    def journal_dir(self) -> Path:
        return self.data_dir / "journal"

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.warning(
                f"Config file not found: {config_path}. "
                "Using defaults. Run 'python -m paddock init' to create it."
            )
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["race", "rewards", "journal"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    yaml_section = yaml_config[section_name] or {}

                    section_dict = section.model_dump()
                    section_dict.update(yaml_section)

                    new_section = section.__class__(**section_dict)
                    setattr(self, section_name, new_section)

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
