"""
Logging utilities for console output.

Standard output carries the CSV table, so every message here goes to stderr.

Provides:
- Log levels (DEBUG, INFO, WARN, ERROR)
- Verbose mode for debug output
- Colored output (when supported)
"""

import sys
from datetime import datetime
from typing import Optional
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels for filtering output."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


# Module-level configuration
_log_level = LogLevel.INFO
_use_color = True
_show_timestamp = False

# ANSI color codes
_COLORS = {
    'reset': '\033[0m',
    'red': '\033[91m',
    'yellow': '\033[93m',
    'green': '\033[92m',
    'gray': '\033[90m',
}


def set_verbosity(verbose: bool) -> None:
    """Set verbosity level for logging.

    When verbose=True, DEBUG level messages are shown.
    When verbose=False, only INFO and above are shown.
    """
    global _log_level
    _log_level = LogLevel.DEBUG if verbose else LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the minimum log level to display."""
    global _log_level
    _log_level = level


def set_use_color(use_color: bool) -> None:
    """Enable or disable colored output."""
    global _use_color
    _use_color = use_color


def set_show_timestamp(show: bool) -> None:
    """Enable or disable timestamps in log output."""
    global _show_timestamp
    _show_timestamp = show


def _supports_color() -> bool:
    """Check if stderr supports color output."""
    if not _use_color:
        return False
    if not hasattr(sys.stderr, 'isatty') or not sys.stderr.isatty():
        return False
    # Windows cmd doesn't support ANSI by default
    if sys.platform == 'win32':
        return False
    return True


def _colorize(text: str, color: str) -> str:
    """Apply color to text if supported."""
    if _supports_color() and color in _COLORS:
        return f"{_COLORS[color]}{text}{_COLORS['reset']}"
    return text


def _format_message(msg: str, level: str, color: Optional[str] = None) -> str:
    """Format a log message with optional timestamp and level prefix."""
    parts = []

    if _show_timestamp:
        timestamp = datetime.now().strftime('%H:%M:%S')
        parts.append(_colorize(f"[{timestamp}]", 'gray'))

    if level:
        level_str = f"[{level}]"
        if color:
            level_str = _colorize(level_str, color)
        parts.append(level_str)

    parts.append(msg)

    return ' '.join(parts)


def _emit(line: str) -> None:
    print(line, file=sys.stderr)


def debug(msg: str) -> None:
    """Print debug message (only if verbose mode enabled)."""
    if _log_level <= LogLevel.DEBUG:
        _emit(_format_message(msg, 'DEBUG', 'gray'))


def info(msg: str) -> None:
    """Print info message."""
    if _log_level <= LogLevel.INFO:
        _emit(_format_message(msg, '') if _show_timestamp else msg)


def warn(msg: str) -> None:
    """Print warning message."""
    if _log_level <= LogLevel.WARN:
        _emit(_format_message(msg, 'WARN', 'yellow'))


def error(msg: str) -> None:
    """Print error message."""
    if _log_level <= LogLevel.ERROR:
        _emit(_format_message(msg, 'ERROR', 'red'))


def success(msg: str) -> None:
    """Print success message (always shown)."""
    _emit(_colorize(msg, 'green'))
