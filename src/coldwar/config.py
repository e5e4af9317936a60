"""Runtime configuration for Cold War Terminal.

Settings come from environment variables with module-level defaults. Game
balance constants are not configured here; they live in coldwar.parameters.
"""

import logging
import os

from coldwar.parameters import DEFAULT_MAX_TURNS

# Default configuration (can be overridden via environment variables)
DEFAULT_TRACE_DIR = "traces"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_FALSE_VALUES = ("0", "false", "no", "off")


def get_max_turns() -> int:
    """Get the turn cap from COLDWAR_MAX_TURNS.

    Raises:
        ValueError: If the variable is set but is not a positive integer
    """
    raw = os.environ.get("COLDWAR_MAX_TURNS")
    if not raw:
        return DEFAULT_MAX_TURNS
    value = int(raw)
    if value < 1:
        raise ValueError(f"COLDWAR_MAX_TURNS must be positive, got {value}")
    return value


def get_seed() -> int | None:
    """Get the random seed from COLDWAR_SEED (None means OS entropy)."""
    raw = os.environ.get("COLDWAR_SEED")
    return int(raw) if raw else None


def get_trace_dir() -> str:
    """Get the trace output directory from COLDWAR_TRACE_DIR."""
    return os.environ.get("COLDWAR_TRACE_DIR", DEFAULT_TRACE_DIR)


def is_trace_enabled() -> bool:
    """Whether per-game JSON traces are written (COLDWAR_TRACE_ENABLED)."""
    return os.environ.get("COLDWAR_TRACE_ENABLED", "1").strip().lower() not in _FALSE_VALUES


def get_log_level() -> int:
    """Get the log level from COLDWAR_LOG_LEVEL (name or number)."""
    raw = os.environ.get("COLDWAR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def get_log_file() -> str | None:
    """Get the log file path from COLDWAR_LOG_FILE (None logs to stderr)."""
    return os.environ.get("COLDWAR_LOG_FILE") or None


def configure_logging(level: int | None = None, filename: str | None = None) -> None:
    """Install the root logging handler for the application entry points.

    The Textual UI owns the terminal, so the CLI should pass a file target
    (or set COLDWAR_LOG_FILE) when it wants log output.

    Args:
        level: Log level (default: COLDWAR_LOG_LEVEL)
        filename: Log file (default: COLDWAR_LOG_FILE, else stderr)
    """
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        filename=filename or get_log_file(),
        format=LOG_FORMAT,
    )
