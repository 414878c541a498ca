"""
Centralized logging configuration.

bootstrap_logging() configures logging from a logging.ini file using Python's
native INI format, with a LOG_LEVEL environment override.
"""

import configparser
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Loggers that follow LOG_LEVEL even when logging.ini sets them explicitly
PACKAGE_LOGGERS = ['signing_gate']

_FALLBACK_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _find_logging_config(search_root: Optional[Path] = None) -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the search root, then in its config/ subdirectory.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    root = search_root or Path('.')
    for candidate in (root / 'logging.ini', root / 'config' / 'logging.ini'):
        if candidate.exists():
            return candidate
    return None


def _resolve_log_level() -> str:
    """
    Read LOG_LEVEL, defaulting to INFO.

    Also exports the value so logging.ini can reference it.
    """
    level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{level}', using INFO", file=sys.stderr)
        level = 'INFO'
    os.environ['LOG_LEVEL'] = level
    return level


def _apply_level(level: str) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)
    for logger_name in PACKAGE_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def bootstrap_logging(name: Optional[str] = None, search_root: Optional[Path] = None) -> None:
    """
    Bootstrap logging configuration for the application.

    Loads logging.ini with logging.config.fileConfig() when one is found and
    falls back to a basic stderr configuration otherwise. LOG_LEVEL is applied
    last so it always wins.

    Args:
        name: Optional logger name to report the configuration on
        search_root: Directory to look for logging.ini in (defaults to cwd)
    """
    level = _resolve_log_level()
    config_path = _find_logging_config(search_root)

    if config_path is None:
        logging.basicConfig(level=level, format=_FALLBACK_FORMAT, stream=sys.stderr)
        _apply_level(level)
        return

    try:
        logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
    except (OSError, KeyError, ValueError, configparser.Error) as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        logging.basicConfig(level=level, format=_FALLBACK_FORMAT, stream=sys.stderr)

    _apply_level(level)
    logging.getLogger(name).debug(f"Logging configured from {config_path}")


def auto_bootstrap_logging():
    """
    Decorator that bootstraps logging when applied.

    Usage:
        from signing_gate.build.config.logging import auto_bootstrap_logging
        auto_bootstrap_logging()(None)
    """
    def decorator(obj):
        bootstrap_logging()
        return obj
    return decorator
