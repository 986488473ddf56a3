"""Terminal output helpers -- ANSI colors and timestamped log lines.

Library modules log through the standard ``logging`` module; these helpers
only format what the CLI prints and what ``--log`` writes.
"""

import sys
from datetime import datetime

# ---------------------------------------------------------------------------
# ANSI color codes
# ---------------------------------------------------------------------------

_RESET = '\033[0m'
_DIM = '\033[2m'

_GREEN = '\033[32m'
_YELLOW = '\033[33m'
_CYAN = '\033[36m'

_BOLD_RED = '\033[1;31m'
_BOLD_CYAN = '\033[1;36m'
_BOLD_WHITE = '\033[1;37m'


def _is_tty():
    """Check if stdout is a terminal (not piped)."""
    try:
        return sys.stdout.isatty()
    except AttributeError:
        return False


# Module-level flag -- set once at import time
_USE_COLOR = _is_tty()


def set_color_enabled(enabled: bool):
    """Override automatic color detection."""
    global _USE_COLOR
    _USE_COLOR = enabled


def _c(code: str, text: str) -> str:
    if _USE_COLOR:
        return f'{code}{text}{_RESET}'
    return text


# ---------------------------------------------------------------------------
# CLI formatting helpers
# ---------------------------------------------------------------------------

def cli_header(text: str) -> str:
    """Bold cyan, one per file."""
    return _c(_BOLD_CYAN, text)


def cli_success(text: str) -> str:
    return _c(_GREEN, text)


def cli_warning(text: str) -> str:
    """Yellow, for decoder warnings."""
    return _c(_YELLOW, text)


def cli_error(text: str) -> str:
    return _c(_BOLD_RED, text)


def cli_info(text: str) -> str:
    return _c(_CYAN, text)


def cli_dim(text: str) -> str:
    """Dim text for units and IFD names."""
    return _c(_DIM, text)


def cli_bold(text: str) -> str:
    return _c(_BOLD_WHITE, text)


def cli_entry(tag: str, readable: str, kind: str = '', unit: str = '') -> str:
    """One indented dump line: optional dim IFD name, bold tag, value and
    optional dim unit."""
    prefix = f'{cli_dim(kind + ":")} ' if kind else ''
    suffix = f' {cli_dim("[" + unit + "]")}' if unit else ''
    return f'  {prefix}{cli_bold(tag)}: {readable}{suffix}'


# ---------------------------------------------------------------------------
# Log file formatting (always plain text with timestamps and levels)
# ---------------------------------------------------------------------------

def _timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log_info(msg: str) -> str:
    """Format a log file INFO line."""
    return f'[{_timestamp()}] [INFO]  {msg}'


def log_warn(msg: str) -> str:
    return f'[{_timestamp()}] [WARN]  {msg}'


def log_error(msg: str) -> str:
    return f'[{_timestamp()}] [ERROR] {msg}'
