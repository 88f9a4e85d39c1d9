"""Configuration constants, source-file extensions, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The diagnostic source tag, the end-of-line range
policy, API limits and the extensions the CLI scans are plain data —
not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment with defaults. The
_env_bool() and _env_int() helpers give a clear error on bad values.

RULES:
- DIAGNOSTIC_SOURCE is the fixed ``source`` tag on every diagnostic
- EXACT_LINE_END=false keeps the unbounded end-of-line sentinel
- SOURCE_EXTENSIONS lists the file suffixes picked up from directories
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    RULES:
    - Accepts 1/true/yes/on and 0/false/no/off (case-insensitive)
    - Missing or empty variable returns the default
    - Anything else raises ValueError naming the variable
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(
        "{} must be a boolean (true/false), got {!r}".format(name, raw)
    )


def _env_int(name: str, default: int) -> int:
    """Read a positive integer environment variable."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}".format(name, raw)
        ) from None
    if value <= 0:
        raise ValueError("{} must be positive, got {}".format(name, value))
    return value


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

DIAGNOSTIC_SOURCE = os.getenv("LEGV8_DIAGNOSTIC_SOURCE", "compiler")
"""Tag placed in the ``source`` field of every diagnostic."""

END_OF_LINE_SENTINEL = 2**32 - 1
"""Largest LSP character offset; marks "through the end of the line"."""

EXACT_LINE_END = _env_bool("LEGV8_EXACT_LINE_END", False)
"""Replace the sentinel with the real line length in "Expected end of line." ranges."""

# ---------------------------------------------------------------------------
# Source files
# ---------------------------------------------------------------------------

SOURCE_EXTENSIONS: set[str] = {".s", ".asm", ".legv8", ".lv8"}
"""Assembly file extensions (lowercase, with dot) collected from directories.

Suffixes are lowercased before the lookup, so ``.S`` files match ``.s``.
"""

DEFAULT_FORMAT = os.getenv("LEGV8_DEFAULT_FORMAT", "text")

# ---------------------------------------------------------------------------
# HTTP API defaults
# ---------------------------------------------------------------------------

API_HOST = os.getenv("LEGV8_API_HOST", "127.0.0.1")
API_PORT = _env_int("LEGV8_API_PORT", 8000)
MAX_SOURCE_CHARS = _env_int("LEGV8_MAX_SOURCE_CHARS", 1_000_000)
