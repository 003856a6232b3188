"""Logging utilities for mazeflood runs.

Provides color-coded diagnostics on stderr so stdout only ever carries the
rendered report.
"""

import os
import sys
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Deterministic steps (parse, flood, render)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


_verbose = Config.LOG_LEVEL.upper() == "DEBUG"


def set_verbose(enabled: bool) -> None:
    """Turn step-by-step diagnostics on or off (errors are always shown)."""
    global _verbose
    _verbose = enabled


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if MAZEFLOOD_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("MAZEFLOOD_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _emit(message: str, color: Color) -> None:
    print(colored(message, color), file=sys.stderr)


def log_deterministic(message: str) -> None:
    """Log a pipeline step (blue)."""
    if _verbose:
        _emit(f"{EMOJI_DETERMINISTIC} {message}", Color.BLUE)


def log_error(message: str) -> None:
    """Log an error (red). Always shown."""
    _emit(f"{EMOJI_ERROR} {message}", Color.RED)


def log_success(message: str) -> None:
    """Log a success (green)."""
    if _verbose:
        _emit(f"{EMOJI_SUCCESS} {message}", Color.GREEN)


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if _verbose:
        _emit(f"{EMOJI_INFO} {message}", Color.CYAN)


# Markers for message types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"  # Pipeline step
EMOJI_ERROR = "[!]"          # Error
EMOJI_SUCCESS = "[✓]"        # Success
EMOJI_INFO = "[i]"           # Information
