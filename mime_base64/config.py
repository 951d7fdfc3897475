"""Configuration constants, exit codes, and .env loading.

WHY: Centralizes the codec's fixed geometry (block sizes, line length,
separator) and the CLI's exit codes so they are easy to find and are not
buried in logic. The few tunable values can be overridden from the
environment without touching code.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values. load_blocks_per_line() validates the optional
override and raises a clear error when it is malformed.

RULES:
- BLOCK_SIZE / SYMBOLS_PER_BLOCK are fixed by Base64 (3 bytes → 4 chars)
- Default line length is 19 blocks = 76 characters (RFC 2045)
- Line separator is always CRLF
- Exit codes: 0 success, 1 usage, 2 open failure, 3 close failure,
  4 read failure, 5 output write failure
- All overrides come from the environment, never hardcoded paths
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the working directory (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Codec geometry
# ---------------------------------------------------------------------------

BLOCK_SIZE = 3
"""Raw bytes consumed per block (24 bits)."""

SYMBOLS_PER_BLOCK = 4
"""Output characters produced per block, padding included."""

DEFAULT_BLOCKS_PER_LINE = 19

MAX_LINE_CHARS = DEFAULT_BLOCKS_PER_LINE * SYMBOLS_PER_BLOCK
"""76 characters per line, the MIME maximum."""

LINE_SEPARATOR = b"\r\n"

# ---------------------------------------------------------------------------
# Process exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2
EXIT_CLOSE_FAILED = 3
EXIT_READ_FAILED = 4
EXIT_WRITE_FAILED = 5

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

_LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_log_level() -> int:
    """Resolve MIME_BASE64_LOG_LEVEL to a logging level number.

    RULES:
    - Accepts the standard level names, case-insensitive
    - Empty means WARNING
    - Raises ValueError for anything else
    """
    name = os.getenv("MIME_BASE64_LOG_LEVEL", "").strip().upper() or "WARNING"
    if name not in _LOG_LEVEL_NAMES:
        raise ValueError(
            "MIME_BASE64_LOG_LEVEL must be one of {}, got '{}'".format(
                ", ".join(_LOG_LEVEL_NAMES), name
            )
        )
    return getattr(logging, name)


def load_blocks_per_line() -> int:
    """Load the number of blocks per output line from the environment.

    WHY: Some consumers (PEM-style 64-char lines, legacy tools) want a
    different wrap width than MIME's 76 characters.

    HOW: Reads MIME_BASE64_BLOCKS_PER_LINE (populated by python-dotenv),
    falling back to DEFAULT_BLOCKS_PER_LINE when unset or blank.

    RULES:
    - Raises ValueError if the value is not an integer or is < 1
    - Unset or empty means the MIME default (19)
    """
    raw = os.getenv("MIME_BASE64_BLOCKS_PER_LINE", "").strip()
    if not raw:
        return DEFAULT_BLOCKS_PER_LINE
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "MIME_BASE64_BLOCKS_PER_LINE must be an integer, got '{}'".format(raw)
        ) from None
    if value < 1:
        raise ValueError(
            "MIME_BASE64_BLOCKS_PER_LINE must be at least 1, got {}".format(value)
        )
    return value
