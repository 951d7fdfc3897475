"""Unit tests for the alphabet and the single-block transform.

WHY: Every output character comes from encode_block(). A wrong shift or
mask here corrupts every payload, and a wrong padding count breaks every
decoder downstream.

HOW: Known-answer vectors, padding counts for each input length over a
spread of byte values, and the encoded_size() arithmetic.

RULES:
- Vectors come from vectors.KNOWN_VECTORS.
- encode_block() must always return exactly 4 characters.
"""

import pytest

from mime_base64.core.alphabet import ALPHABET, PAD, symbol
from mime_base64.core.block import encode_block, encoded_size, symbols_for

from vectors import KNOWN_VECTORS


class TestAlphabet:
    """The symbol table matches RFC 2045."""

    def test_has_64_unique_symbols(self):
        assert len(ALPHABET) == 64
        assert len(set(ALPHABET)) == 64

    def test_canonical_order(self):
        assert ALPHABET[0] == "A"
        assert ALPHABET[25] == "Z"
        assert ALPHABET[26] == "a"
        assert ALPHABET[51] == "z"
        assert ALPHABET[52] == "0"
        assert ALPHABET[61] == "9"
        assert ALPHABET[62] == "+"
        assert ALPHABET[63] == "/"

    def test_pad_not_in_alphabet(self):
        assert PAD == "="
        assert PAD not in ALPHABET

    def test_symbol_masks_to_six_bits(self):
        assert symbol(0x40 | 1) == "B"


class TestEncodeBlock:
    """encode_block() produces 4 characters with the right padding."""

    @pytest.mark.parametrize("raw,expected", sorted(KNOWN_VECTORS.items()))
    def test_known_vectors(self, raw, expected):
        assert encode_block(raw) == expected

    def test_three_bytes_have_no_padding(self):
        for start in range(0, 256, 17):
            block = bytes([start, (start * 7) % 256, (start * 13) % 256])
            out = encode_block(block)
            assert len(out) == 4
            assert PAD not in out

    def test_two_bytes_have_one_pad(self):
        for start in range(0, 256, 17):
            out = encode_block(bytes([start, 255 - start]))
            assert len(out) == 4
            assert out.count(PAD) == 1
            assert out.endswith(PAD)

    def test_one_byte_has_two_pads(self):
        for value in range(256):
            out = encode_block(bytes([value]))
            assert len(out) == 4
            assert out.endswith(PAD * 2)
            assert PAD not in out[:2]

    def test_first_byte_is_most_significant(self):
        """Byte order is big-endian regardless of host order."""
        assert encode_block(b"\x01\x00\x00") == "AQAA"
        assert encode_block(b"\x00\x00\x01") == "AAAB"

    def test_accepts_bytearray(self):
        assert encode_block(bytearray(b"Man")) == "TWFu"

    @pytest.mark.parametrize("bad", [b"", b"Many"])
    def test_invalid_length_is_an_assertion(self, bad):
        with pytest.raises(AssertionError):
            encode_block(bad)


class TestSizes:
    """symbols_for() and encoded_size() arithmetic."""

    @pytest.mark.parametrize("len_in,expected", [(1, 2), (2, 3), (3, 4)])
    def test_symbols_for(self, len_in, expected):
        assert symbols_for(len_in) == expected

    def test_empty_input_has_no_output(self):
        assert encoded_size(0) == 0

    def test_one_full_line(self):
        assert encoded_size(57) == 76 + 2

    def test_line_and_a_block(self):
        assert encoded_size(60) == 76 + 2 + 4 + 2

    def test_partial_block_counts_as_full(self):
        assert encoded_size(1) == 4 + 2
        assert encoded_size(58) == 76 + 2 + 4 + 2

    def test_custom_line_length(self):
        # 16 blocks per line = 64 characters, LF only
        assert encoded_size(48 * 2, blocks_per_line=16, line_separator_len=1) == 128 + 2

    @pytest.mark.parametrize("bad", [0, -1, 1.5, None, True])
    def test_rejects_invalid_blocks_per_line(self, bad):
        """Same validation as encode_stream(), not a ZeroDivisionError."""
        with pytest.raises(ValueError, match="blocks_per_line"):
            encoded_size(3, blocks_per_line=bad)
