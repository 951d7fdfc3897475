"""MIME Base64 encoder — streaming RFC 2045 byte-to-text codec.

WHY: Binary payloads (attachments, images, key material) must travel
through text-only channels such as mail bodies. MIME mandates Base64
with CRLF line breaks every 76 characters; this package produces exactly
that from any readable byte stream without loading it into memory.

HOW: Two layers — a pure single-block transform (3 bytes → 4 symbols)
and a stream driver that chunks input, writes blocks to a sink, and
inserts line breaks. The CLI is a thin wrapper around the driver.

RULES:
- Encoding only; decoding is out of scope
- Output alphabet is the canonical MIME alphabet with "=" padding
- Non-empty output always ends with exactly one CRLF; empty input
  produces empty output
"""

from mime_base64.core.block import encode_block, encoded_size
from mime_base64.core.models import EncodeStats
from mime_base64.core.stream import encode_bytes, encode_stream

__version__ = "1.1.0"

__all__ = [
    "encode_block",
    "encode_bytes",
    "encode_stream",
    "encoded_size",
    "EncodeStats",
]
