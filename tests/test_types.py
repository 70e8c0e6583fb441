"""Tests for toxid.protocol.types module."""

from __future__ import annotations

from toxid.protocol.types import (
    ADDRESS_HEX_CHARS,
    ADDRESS_HEX_CHARS_PQ,
    ADDRESS_SIZE,
    ADDRESS_SIZE_PQ,
    CLASSICAL_LAYOUT,
    PQ_LAYOUT,
    AddressVariant,
    hex_upper,
    layout_for_size,
)


class TestConstants:
    def test_classical_size(self):
        assert ADDRESS_SIZE == 38
        assert ADDRESS_HEX_CHARS == 76

    def test_pq_size(self):
        assert ADDRESS_SIZE_PQ == 46
        assert ADDRESS_HEX_CHARS_PQ == 92


class TestAddressVariant:
    def test_classical_equals_string(self):
        assert AddressVariant.CLASSICAL == "classical"

    def test_post_quantum_equals_string(self):
        assert AddressVariant.POST_QUANTUM == "post-quantum"


class TestLayouts:
    def test_classical_offsets(self):
        assert CLASSICAL_LAYOUT.public_key == slice(0, 32)
        assert CLASSICAL_LAYOUT.nospam == slice(32, 36)
        assert CLASSICAL_LAYOUT.checksum == slice(36, 38)
        assert CLASSICAL_LAYOUT.mlkem_commitment is None
        assert CLASSICAL_LAYOUT.payload_size == 36

    def test_pq_offsets(self):
        assert PQ_LAYOUT.public_key == slice(0, 32)
        assert PQ_LAYOUT.mlkem_commitment == slice(32, 40)
        assert PQ_LAYOUT.nospam == slice(40, 44)
        assert PQ_LAYOUT.checksum == slice(44, 46)
        assert PQ_LAYOUT.payload_size == 44

    def test_num_hex_chars(self):
        assert CLASSICAL_LAYOUT.num_hex_chars == 76
        assert PQ_LAYOUT.num_hex_chars == 92

    def test_layout_for_size(self):
        assert layout_for_size(38) is CLASSICAL_LAYOUT
        assert layout_for_size(46) is PQ_LAYOUT

    def test_layout_for_other_sizes(self):
        for size in (0, 32, 37, 39, 45, 47):
            assert layout_for_size(size) is None


class TestHexUpper:
    def test_zero_padded_upper_case(self):
        assert hex_upper(b"\x00\x0a\xff") == "000AFF"

    def test_empty(self):
        assert hex_upper(b"") == ""
