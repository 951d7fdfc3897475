"""Result dataclass for a completed stream encode.

WHY: Callers (the CLI's verbose summary, tests) want to know how much
was read and written without re-measuring the sink.

HOW: encode_stream() fills one EncodeStats as it goes and returns it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EncodeStats:
    """Counters for one encode_stream() run.

    Attributes:
        bytes_read: Raw bytes consumed from the source.
        blocks: Output blocks written (each exactly 4 characters).
        lines: Line separators written.
        chars_written: Total bytes written to the sink, separators included.
    """

    bytes_read: int = 0
    blocks: int = 0
    lines: int = 0
    chars_written: int = 0
