"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check raw configuration for settings that are valid but worth flagging.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    feed = config_dict.get("feed", {})
    if isinstance(feed, dict):
        if feed.get("mutual_preference") is True:
            warning_messages.append(
                "feed.mutual_preference is enabled: candidates whose preference "
                "excludes the viewer will be hidden"
            )

        if feed.get("respect_blocks") is False:
            warning_messages.append(
                "feed.respect_blocks is disabled: blocked users will appear in feeds"
            )

        seed = feed.get("default_seed")
        if isinstance(seed, str) and not seed.strip():
            warning_messages.append("feed.default_seed is blank and will be ignored")

    logging_section = config_dict.get("logging", {})
    if isinstance(logging_section, dict):
        level = logging_section.get("level")
        if isinstance(level, str) and level.strip().upper() == "DEBUG":
            warning_messages.append(
                "logging.level is DEBUG: one record is emitted per filtered candidate"
            )

    unknown = set(config_dict) - {"logging", "feed"}
    for key in sorted(unknown):
        warning_messages.append(f"Unknown configuration section '{key}' is ignored")

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
