"""Stream driver: chunk a byte source into blocks and write wrapped lines.

WHY: Inputs can be arbitrarily large files or pipes. The driver keeps
memory flat by holding only one 3-byte input block and one 4-character
output block at a time, writing each block to the sink as soon as it is
encoded.

HOW: Reads up to 3 bytes per iteration (re-reading on short reads so
padding can only appear at the very end), hands each block to
encode_block(), writes the ASCII result, and writes a line separator
after every ``blocks_per_line`` blocks. At end of stream, a partially
filled line is terminated once.

RULES:
- A 0-byte read means end of stream and is never encoded
- No delimiter between blocks within a line
- Separator after every full line of blocks_per_line blocks
- A separator is only written after a line that holds at least one block:
  empty input → empty output; 57 bytes → 76 chars + one CRLF
- Only the source read position and the sink are touched
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from mime_base64.config import BLOCK_SIZE, DEFAULT_BLOCKS_PER_LINE, LINE_SEPARATOR
from mime_base64.core.block import check_blocks_per_line, encode_block
from mime_base64.core.models import EncodeStats

logger = logging.getLogger(__name__)


def _read_block(source: BinaryIO) -> bytes:
    """Read up to BLOCK_SIZE bytes, topping up short non-final reads.

    Raw files, pipes and sockets may return fewer bytes than asked for
    before the end of stream. Only an empty read ends the block early.
    """
    block = source.read(BLOCK_SIZE)
    while block and len(block) < BLOCK_SIZE:
        more = source.read(BLOCK_SIZE - len(block))
        if not more:
            break
        block += more
    return block


def encode_stream(
    source: BinaryIO,
    sink: BinaryIO,
    blocks_per_line: int = DEFAULT_BLOCKS_PER_LINE,
    line_separator: bytes = LINE_SEPARATOR,
) -> EncodeStats:
    """Encode everything readable from ``source`` as MIME Base64 into ``sink``.

    Args:
        source: Binary stream supporting ``read(n)``.
        sink: Binary sink supporting ``write(bytes)``.
        blocks_per_line: Blocks per output line (19 → 76 characters).
        line_separator: Bytes written after each line.

    Returns:
        EncodeStats with the byte, block, and line counts.

    Raises:
        ValueError: If blocks_per_line is not a positive integer.
    """
    check_blocks_per_line(blocks_per_line)

    stats = EncodeStats()
    in_line = 0

    while True:
        block = _read_block(source)
        if not block:
            break

        encoded = encode_block(block).encode("ascii")
        sink.write(encoded)
        stats.bytes_read += len(block)
        stats.blocks += 1
        stats.chars_written += len(encoded)
        in_line += 1

        if in_line == blocks_per_line:
            sink.write(line_separator)
            stats.lines += 1
            stats.chars_written += len(line_separator)
            in_line = 0
            logger.debug("Line %d complete (%d bytes read)", stats.lines, stats.bytes_read)

    # Terminate a partially filled last line
    if in_line:
        sink.write(line_separator)
        stats.lines += 1
        stats.chars_written += len(line_separator)

    logger.debug(
        "Encoded %d bytes into %d blocks on %d lines (%d bytes written)",
        stats.bytes_read, stats.blocks, stats.lines, stats.chars_written,
    )
    return stats


def encode_bytes(
    data: bytes,
    blocks_per_line: int = DEFAULT_BLOCKS_PER_LINE,
    line_separator: bytes = LINE_SEPARATOR,
) -> str:
    """Encode an in-memory byte string and return the wrapped text.

    Convenience wrapper around encode_stream() for callers that already
    hold the whole payload.
    """
    sink = io.BytesIO()
    encode_stream(io.BytesIO(data), sink, blocks_per_line, line_separator)
    return sink.getvalue().decode("ascii")
