"""The MIME Base64 symbol table.

WHY: Every 6-bit value 0..63 maps to exactly one printable character.
The mapping is fixed by RFC 2045 and must never change at runtime.

HOW: ALPHABET is a plain ``str`` constant, so it is immutable by
construction and indexable in O(1).

RULES:
- ALPHABET[i] is the canonical character for 6-bit value i
- Order: A-Z, a-z, 0-9, "+", "/"
- PAD ("=") is not part of the alphabet
"""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

PAD = "="

SYMBOL_BITS = 6
SYMBOL_MASK = 0x3F


def symbol(value: int) -> str:
    """Return the alphabet character for a 6-bit value."""
    return ALPHABET[value & SYMBOL_MASK]
