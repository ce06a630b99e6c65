"""Paddock CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv(Path.cwd() / ".env")

from paddock import __version__
from paddock.betting import PaddockError, parse_wager
from paddock.config import Settings, get_settings
from paddock.session import BettingSession
from paddock.storage import load_state, log_outcome, log_placement, save_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Paddock Configuration
# Race and reward settings for the betting session.
# Secrets such as the Logfire token belong in .env, not here.

race:
  location: {location}
  season: {season}

rewards:
  finish_position: 1000
  does_not_finish: 1000
  fastest_lap: 2500
  driver_of_the_day: 5000
  safety_car: 500

journal:
  enabled: true
"""


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from paddock.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _load_session(settings: Settings) -> BettingSession | None:
    state = load_state(settings.state_path)
    if state is None:
        print(f"\n❌ No session found at {settings.state_path}")
        print("Run 'python -m paddock init' to open one.\n")
        return None
    return BettingSession.from_state(state)


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize the data directory, configuration and an empty session."""
    settings = get_settings()
    data_dir = settings.data_dir

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        settings.journal_dir.mkdir(exist_ok=True)
        logger.info(f"Created data directory: {data_dir}")

        config_path = data_dir / "config.yaml"
        if not config_path.exists():
            config_path.write_text(
                CONFIG_TEMPLATE.format(
                    location=settings.race.location.value,
                    season=settings.race.season,
                ),
                encoding="utf-8",
            )
            logger.info(f"Created config template: {config_path}")
        else:
            logger.info(f"Config file already exists: {config_path}")

        if settings.state_path.exists() and not args.force:
            logger.info(f"Session already exists: {settings.state_path}")
        else:
            session = BettingSession(settings.race.to_race())
            save_state(session.to_state(), settings.state_path)
            logger.info(f"Opened session for {session.race.label}")

        print(f"\n✓ Data directory initialized at {data_dir}")
        print("\nNext steps:")
        print("1. Review data/config.yaml (race and default rewards)")
        print("2. Place wagers: python -m paddock place <player> finish:VER:1 safety-car:yes")
        print("3. Declare outcomes: python -m paddock outcome finish:VER:1")
        print("4. Read payouts: python -m paddock results\n")

        return 0

    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Paddock Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}\n")

        print("Race:")
        print(f"  Location: {settings.race.location.value}")
        print(f"  Season: {settings.race.season}\n")

        print("Default Rewards:")
        for kind, reward in settings.rewards.model_dump().items():
            print(f"  {kind}: {reward:,}")
        print()

        print(f"Journal: {'enabled' if settings.journal.enabled else 'disabled'}")
        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_status(args: argparse.Namespace) -> int:
    """Display current session status."""
    try:
        session = _load_session(get_settings())
        if session is None:
            return 1

        print(f"\n=== {session.race.label} ===\n")
        print(f"Players: {len(session.players())}")
        print(f"Wagers placed: {len(session.ledger)}")
        print(f"Outcomes declared: {len(session.outcome_book)}")
        for outcome in session.outcome_book:
            print(f"  • {outcome.wager.describe()} ({outcome.reward:,})")
        print()

        return 0

    except Exception as e:
        logger.error(f"Failed to read status: {e}")
        print(f"\n❌ Failed to read status: {e}\n")
        return 1


def cmd_player(args: argparse.Namespace) -> int:
    """Register a player or change their multiplier."""
    settings = get_settings()

    try:
        session = _load_session(settings)
        if session is None:
            return 1

        player = session.add_player(args.name, args.multiplier)
        save_state(session.to_state(), settings.state_path)

        print(f"✓ {player.name} registered with multiplier x{player.multiplier}")
        return 0

    except ValidationError as e:
        print(f"\n❌ Invalid player: {e.errors()[0]['msg']}\n")
        return 1
    except Exception as e:
        logger.error(f"Failed to register player: {e}")
        print(f"\n❌ Failed to register player: {e}\n")
        return 1


def cmd_place(args: argparse.Namespace) -> int:
    """Place one or more wagers for a player."""
    settings = get_settings()

    try:
        session = _load_session(settings)
        if session is None:
            return 1

        wagers = [parse_wager(token) for token in args.wagers]

        accepted = []
        rejected = 0
        for wager in wagers:
            try:
                session.place(wager, args.player)
                accepted.append(wager)
                print(f"✓ {args.player}: {wager.describe()}")
            except PaddockError as e:
                rejected += 1
                print(f"✗ {e}")

        if accepted:
            save_state(session.to_state(), settings.state_path)
            if settings.journal.enabled:
                try:
                    for wager in accepted:
                        log_placement(args.player, wager, settings.journal_dir)
                except Exception as e:
                    logger.error(f"Failed to journal placements for {args.player}: {e}")
                    print(f"⚠ Wagers saved, but the journal was not updated: {e}")

        return 1 if rejected else 0

    except PaddockError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Failed to place wagers: {e}", exc_info=True)
        print(f"\n❌ Failed to place wagers: {e}\n")
        return 1


def cmd_outcome(args: argparse.Namespace) -> int:
    """Declare something that happened in the race."""
    settings = get_settings()

    try:
        session = _load_session(settings)
        if session is None:
            return 1

        wager = parse_wager(args.wager)
        reward = args.reward if args.reward is not None else settings.rewards.for_kind(wager.kind)
        outcome = session.register_outcome(wager, reward)

        save_state(session.to_state(), settings.state_path)
        if settings.journal.enabled:
            try:
                log_outcome(outcome, settings.journal_dir)
            except Exception as e:
                logger.error(f"Failed to journal outcome: {e}")
                print(f"⚠ Outcome saved, but the journal was not updated: {e}")

        print(f"✓ Outcome declared: {wager.describe()} pays {reward:,}")
        return 0

    except (PaddockError, ValidationError) as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Failed to declare outcome: {e}", exc_info=True)
        print(f"\n❌ Failed to declare outcome: {e}\n")
        return 1


def cmd_results(args: argparse.Namespace) -> int:
    """Display raw rewards per player."""
    try:
        session = _load_session(get_settings())
        if session is None:
            return 1

        results = session.results()

        print(f"\n=== Results: {session.race.label} ===\n")
        if not results:
            print("  (No winning wagers yet)")
        for player, reward in sorted(results.items(), key=lambda item: (-item[1], item[0])):
            print(f"  {player}: {reward:,}")
        print()

        return 0

    except Exception as e:
        logger.error(f"Failed to compute results: {e}")
        print(f"\n❌ Failed to compute results: {e}\n")
        return 1


def cmd_standings(args: argparse.Namespace) -> int:
    """Display the leaderboard with multipliers applied."""
    try:
        session = _load_session(get_settings())
        if session is None:
            return 1

        print(f"\n=== Standings: {session.race.label} ===\n")
        for standing in session.standings():
            print(
                f"  {standing.rank}. {standing.player}: {standing.total:,} "
                f"({standing.reward:,} x{standing.multiplier})"
            )
        print()

        return 0

    except Exception as e:
        logger.error(f"Failed to compute standings: {e}")
        print(f"\n❌ Failed to compute standings: {e}\n")
        return 1


def cmd_wagers(args: argparse.Namespace) -> int:
    """List placed wagers, for one player or everyone."""
    try:
        session = _load_session(get_settings())
        if session is None:
            return 1

        players = [args.player] if args.player else session.ledger.players()
        for player in players:
            wagers = session.ledger.wagers_for(player)
            print(f"{player} ({len(wagers)}):")
            for wager in wagers:
                print(f"  • {wager.to_token():<20} {wager.describe()}")

        return 0

    except Exception as e:
        logger.error(f"Failed to list wagers: {e}")
        print(f"\n❌ Failed to list wagers: {e}\n")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Paddock: wager ledger and payouts for Formula One races",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Paddock {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser(
        "init",
        help="Initialize data directory, configuration and an empty session",
    )
    parser_init.add_argument(
        "--force",
        action="store_true",
        help="Replace an existing session with an empty one",
    )
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_status = subparsers.add_parser(
        "status",
        help="Display current session status",
    )
    parser_status.set_defaults(func=cmd_status)

    parser_player = subparsers.add_parser(
        "player",
        help="Register a player or change their multiplier",
    )
    parser_player.add_argument("name", help="Player name")
    parser_player.add_argument(
        "--multiplier",
        type=int,
        default=1,
        help="Standing multiplier (x1, x3, x5, ...)",
    )
    parser_player.set_defaults(func=cmd_player)

    parser_place = subparsers.add_parser(
        "place",
        help="Place wagers for a player",
    )
    parser_place.add_argument("player", help="Player name")
    parser_place.add_argument(
        "wagers",
        nargs="+",
        help="Wager tokens, e.g. finish:VER:1 dnf:HAM fastest-lap:LEC dotd:LEC safety-car:yes",
    )
    parser_place.set_defaults(func=cmd_place)

    parser_outcome = subparsers.add_parser(
        "outcome",
        help="Declare a race outcome",
    )
    parser_outcome.add_argument("wager", help="Wager token that came true")
    parser_outcome.add_argument(
        "--reward",
        type=int,
        default=None,
        help="Reward paid to matching wagers (default: configured reward for the wager type)",
    )
    parser_outcome.set_defaults(func=cmd_outcome)

    parser_results = subparsers.add_parser(
        "results",
        help="Display rewards per player",
    )
    parser_results.set_defaults(func=cmd_results)

    parser_standings = subparsers.add_parser(
        "standings",
        help="Display the leaderboard with multipliers applied",
    )
    parser_standings.set_defaults(func=cmd_standings)

    parser_wagers = subparsers.add_parser(
        "wagers",
        help="List placed wagers",
    )
    parser_wagers.add_argument("player", nargs="?", help="Only this player's wagers")
    parser_wagers.set_defaults(func=cmd_wagers)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    _init_logfire()

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
