"""Logfire cloud observability initialization."""

import logging

import logfire

from paddock import __version__
from paddock.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire and bridge standard logging into it.

    Must be called once at startup, before any session is loaded.

    Instruments:
    - Pydantic model validation (wagers, outcomes, session state)
    - Python logging (ledger placements, rejections, storage writes)

    Args:
        settings: Application settings containing the Logfire token

    Returns:
        True if Logfire was configured, False if it was skipped or failed.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="paddock",
            service_version=__version__,
            environment=settings.race.to_race().label,
        )

        logfire.instrument_pydantic()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
