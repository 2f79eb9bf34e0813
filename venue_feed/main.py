"""Command-line entry point: rank a venue snapshot and print the feed."""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from venue_feed.config.environment import EnvironmentConfig
from venue_feed.config.exceptions import ConfigurationError
from venue_feed.config.loader import load_config
from venue_feed.config.models import AppConfig
from venue_feed.feed import FeedResult, FeedService, load_snapshot
from venue_feed.feed.exceptions import SnapshotError
from venue_feed.logging import get_logger
from venue_feed.logging.config import configure_logging
from venue_feed.utils.timestamps import format_timestamp, parse_iso_datetime

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > LOG_LEVEL environment variable > config file > INFO.

    Args:
        config_path: Path to configuration file, or None for the default lookup
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig); env_config.log_level is always set

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    return app_config, env_config


def _iso_datetime(value: str) -> datetime:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="venue-feed",
        description="Rank the people checked in at a venue for one viewer",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        required=True,
        help="YAML/JSON file with the viewer and the venue's candidates",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Session seed (overrides the snapshot, FEED_SEED and config)",
    )
    parser.add_argument(
        "--now",
        type=_iso_datetime,
        default=None,
        help="Reference time for recency scoring, ISO-8601 (default: snapshot or current time)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the score breakdown of every entry",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def render_feed(result: FeedResult, explain: bool = False) -> List[str]:
    """Render a feed result as printable lines."""
    lines = [
        f"Venue {result.venue_id}: {result.eligible_count} of "
        f"{result.total_candidates} here now (as of {format_timestamp(result.generated_at)})"
    ]

    if result.is_empty:
        lines.append("  Nobody matching your preferences is here right now.")
        return lines

    for rank, entry in enumerate(result.entries, 1):
        candidate = entry.candidate
        lines.append(f"  {rank}. {candidate.name} ({candidate.id})")
        if explain:
            breakdown = entry.breakdown.as_dict()
            shared = ", ".join(breakdown["shared_keywords"]) or "-"
            lines.append(
                f"     score={breakdown['composite']:.4f} "
                f"similarity={breakdown['similarity']:.4f} "
                f"recency={breakdown['recency']:.4f} shared=[{shared}]"
            )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the venue feed CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        request = load_snapshot(args.snapshot)
        if args.seed:
            request.seed = args.seed
        if args.now is not None:
            request.now = args.now

        service = FeedService(app_config.feed, fallback_seed=env_config.feed_seed)
        result = service.build_feed(request)

        for line in render_feed(result, explain=args.explain):
            print(line)
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            "Configuration error",
            extra={"event": "config.error", "error_type": type(e).__name__},
        )
        return 1
    except SnapshotError as e:
        print(f"Snapshot Error: {e}", file=sys.stderr)
        logger.error(
            "Snapshot error",
            extra={"event": "snapshot.error", "error_type": type(e).__name__},
        )
        return 1
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error while building feed",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
