"""Shared test fixtures for the mime_base64 test suite.

WHY: Several test modules need the same way of putting a payload on
disk for the CLI and the same clean environment. Known-answer vectors
live in vectors.py.

HOW: pytest fixtures for file creation and environment isolation.

RULES:
- All file I/O goes through tmp_path.
- The blocks-per-line override is always cleared unless a test sets it.
"""

from typing import Callable

import pytest


@pytest.fixture(autouse=True)
def _clear_env_overrides(monkeypatch):
    """Keep a developer's .env or shell from changing line lengths."""
    monkeypatch.delenv("MIME_BASE64_BLOCKS_PER_LINE", raising=False)
    monkeypatch.delenv("MIME_BASE64_LOG_LEVEL", raising=False)


@pytest.fixture
def payload_file(tmp_path) -> Callable[[bytes], str]:
    """Factory writing bytes to a temp file and returning its path."""

    def _write(data: bytes, name: str = "payload.bin") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write


@pytest.fixture
def binary_payload() -> bytes:
    """All 256 byte values twice, 512 bytes (not a multiple of 3 or 57)."""
    return bytes(range(256)) * 2
