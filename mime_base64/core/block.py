"""Single-block transform: 1-3 raw bytes → 4 Base64 characters.

WHY: Base64 works on the least common multiple of 8-bit input and 6-bit
output, i.e. 24 bits. Handling whole 24-bit blocks means no leftover bits
have to be carried between calls, so every block is an independent pure
function of its input.

HOW: The input bytes are packed big-endian into a 24-bit integer with
shifts and ORs (never by reinterpreting memory, so host byte order does
not matter). The field is then sliced into 6-bit groups from the most
significant end, each looked up in the alphabet. Short blocks are padded
with "=" up to 4 characters.

RULES:
- len(block) must be 1, 2, or 3; anything else is a caller bug
- Output is always exactly 4 characters
- 3 bytes → 4 symbols; 2 bytes → 3 symbols + "="; 1 byte → 2 symbols + "=="
"""

from __future__ import annotations

from mime_base64.config import BLOCK_SIZE, DEFAULT_BLOCKS_PER_LINE, LINE_SEPARATOR, SYMBOLS_PER_BLOCK
from mime_base64.core.alphabet import PAD, SYMBOL_BITS, SYMBOL_MASK, symbol


def symbols_for(len_in: int) -> int:
    """Number of meaningful symbols for a block of ``len_in`` bytes.

    ceil(8 * len_in / 6): 2 for one byte, 3 for two, 4 for three.
    """
    return (8 * len_in + SYMBOL_BITS - 1) // SYMBOL_BITS


def check_blocks_per_line(blocks_per_line: int) -> None:
    """Raise ValueError unless blocks_per_line is a positive integer."""
    if isinstance(blocks_per_line, bool) or not isinstance(blocks_per_line, int) or blocks_per_line < 1:
        raise ValueError("blocks_per_line must be a positive integer, got {!r}".format(blocks_per_line))


def encode_block(block: bytes) -> str:
    """Encode one block of 1-3 bytes into 4 Base64 characters.

    The caller must pass 1, 2, or 3 bytes. This is checked with ``assert``
    only; encode_stream() never builds any other block. Under ``python -O``
    a wrong-sized block is not detected, so callers outside the driver
    should use encode_bytes() instead.

    Args:
        block: The raw bytes of this block.

    Returns:
        A 4-character string of alphabet symbols followed by any padding.
    """
    len_in = len(block)
    assert 1 <= len_in <= BLOCK_SIZE, "block length must be 1..3, got {}".format(len_in)

    # Stage 1: pack big-endian into 24 bits, missing bytes stay zero
    field = 0
    for i, byte in enumerate(block):
        field |= byte << (8 * (BLOCK_SIZE - 1 - i))

    # Stage 2: slice 6-bit groups from the top
    len_out = symbols_for(len_in)
    chars = []
    for i in range(len_out):
        shift = SYMBOL_BITS * (SYMBOLS_PER_BLOCK - 1 - i)
        chars.append(symbol((field >> shift) & SYMBOL_MASK))

    # Stage 3: pad short blocks
    chars.append(PAD * (SYMBOLS_PER_BLOCK - len_out))

    return "".join(chars)


def encoded_size(
    n_bytes: int,
    blocks_per_line: int = DEFAULT_BLOCKS_PER_LINE,
    line_separator_len: int = len(LINE_SEPARATOR),
) -> int:
    """Exact number of bytes encode_stream() writes for ``n_bytes`` of input.

    WHY: Lets callers size buffers or report progress before encoding.

    RULES:
    - Every started block costs 4 characters
    - Every started line costs one separator (no separator for empty input)
    - Raises ValueError for a blocks_per_line that encode_stream() rejects
    """
    check_blocks_per_line(blocks_per_line)
    if n_bytes <= 0:
        return 0
    blocks = -(-n_bytes // BLOCK_SIZE)
    lines = -(-blocks // blocks_per_line)
    return blocks * SYMBOLS_PER_BLOCK + lines * line_separator_len
