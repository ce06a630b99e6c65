"""Session state persistence with atomic writes to data/session.yaml."""

import logging
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from paddock.betting.models import Outcome, Player, PlayerName, Wager
from paddock.config import get_settings
from paddock.roster import Race

logger = logging.getLogger(__name__)


# ============================================================================
# Pydantic Models
# ============================================================================


class Placement(BaseModel):
    """A wager as placed by a player."""

    player: PlayerName
    wager: Wager


class SessionState(BaseModel):
    """Complete betting session - matches data/session.yaml schema."""

    last_updated: datetime | None = None
    race: Race
    players: list[Player] = Field(default_factory=list)
    placements: list[Placement] = Field(default_factory=list)
    outcomes: list[Outcome] = Field(default_factory=list)


# ============================================================================
# Helper Functions
# ============================================================================


def get_data_dir() -> Path:
    """Get the data directory path from settings."""
    settings = get_settings()
    data_dir = settings.data_dir

    if not data_dir.exists():
        raise FileNotFoundError(
            f"Data directory not found: {data_dir}. "
            "Run 'python -m paddock init' to create it."
        )

    return data_dir


def _get_state_path() -> Path:
    """Get the path to session.yaml."""
    return get_data_dir() / "session.yaml"


# ============================================================================
# Public API
# ============================================================================


def load_state(state_path: Path | None = None) -> SessionState | None:
    """Load session state from data/session.yaml.

    Returns:
        The stored state, or None if no session has been saved yet.
    """
    state_path = state_path or _get_state_path()

    if not state_path.exists():
        logger.info(f"State file not found: {state_path}")
        return None

    try:
        with open(state_path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)

        if not raw_data:
            logger.warning(f"Empty state file: {state_path}")
            return None

        state = SessionState.model_validate(raw_data)
        logger.debug(f"Loaded state from {state_path}")
        return state

    except yaml.YAMLError as e:
        logger.error(f"Corrupted YAML in state file: {e}")
        raise
    except Exception as e:
        logger.error(f"Failed to load state: {e}")
        raise


def save_state(state: SessionState, state_path: Path | None = None) -> Path:
    """Atomically save session state to data/session.yaml.

    Writes to a temporary file in the same directory and renames it over the
    target, so a crash mid-write leaves the previous file intact.
    """
    state_path = state_path or _get_state_path()

    state.last_updated = datetime.now(timezone.utc)
    state_dict = state.model_dump(mode="json")

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=state_path.parent,
            delete=False,
            suffix=".yaml",
            encoding="utf-8",
        ) as temp_file:
            yaml.dump(
                state_dict,
                temp_file,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
            temp_path = Path(temp_file.name)

        shutil.move(str(temp_path), str(state_path))
        logger.debug(f"Saved state to {state_path}")
        return state_path

    except Exception as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        logger.error(f"Failed to save state: {e}")
        raise
