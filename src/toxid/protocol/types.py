"""Core types, constants, and layout tables for toxid addresses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Field sizes in bytes
PUBLIC_KEY_SIZE = 32
NOSPAM_SIZE = 4
CHECKSUM_SIZE = 2
MLKEM_COMMITMENT_SIZE = 8

# Total address sizes in bytes
ADDRESS_SIZE = PUBLIC_KEY_SIZE + NOSPAM_SIZE + CHECKSUM_SIZE  # 38
ADDRESS_SIZE_PQ = ADDRESS_SIZE + MLKEM_COMMITMENT_SIZE  # 46

# Hex lengths (two characters per byte)
PUBLIC_KEY_HEX_CHARS = PUBLIC_KEY_SIZE * 2
ADDRESS_HEX_CHARS = ADDRESS_SIZE * 2
ADDRESS_HEX_CHARS_PQ = ADDRESS_SIZE_PQ * 2


class AddressVariant(str, Enum):
    """The two address layouts.

    Using ``str, Enum`` so that ``AddressVariant.CLASSICAL == "classical"`` is True.
    """

    CLASSICAL = "classical"
    POST_QUANTUM = "post-quantum"


@dataclass(frozen=True)
class AddressLayout:
    """Byte offsets of every field for one address variant."""

    variant: AddressVariant
    size: int
    public_key: slice
    nospam: slice
    checksum: slice
    mlkem_commitment: slice | None = None

    @property
    def payload_size(self) -> int:
        """Number of leading bytes covered by the checksum."""
        return self.size - CHECKSUM_SIZE

    @property
    def num_hex_chars(self) -> int:
        return self.size * 2


# [PK:32][NoSpam:4][Checksum:2]
CLASSICAL_LAYOUT = AddressLayout(
    variant=AddressVariant.CLASSICAL,
    size=ADDRESS_SIZE,
    public_key=slice(0, PUBLIC_KEY_SIZE),
    nospam=slice(PUBLIC_KEY_SIZE, PUBLIC_KEY_SIZE + NOSPAM_SIZE),
    checksum=slice(ADDRESS_SIZE - CHECKSUM_SIZE, ADDRESS_SIZE),
)

# [PK:32][MLKEMCommitment:8][NoSpam:4][Checksum:2]
PQ_LAYOUT = AddressLayout(
    variant=AddressVariant.POST_QUANTUM,
    size=ADDRESS_SIZE_PQ,
    public_key=slice(0, PUBLIC_KEY_SIZE),
    mlkem_commitment=slice(PUBLIC_KEY_SIZE, PUBLIC_KEY_SIZE + MLKEM_COMMITMENT_SIZE),
    nospam=slice(
        PUBLIC_KEY_SIZE + MLKEM_COMMITMENT_SIZE,
        PUBLIC_KEY_SIZE + MLKEM_COMMITMENT_SIZE + NOSPAM_SIZE,
    ),
    checksum=slice(ADDRESS_SIZE_PQ - CHECKSUM_SIZE, ADDRESS_SIZE_PQ),
)

_LAYOUTS_BY_SIZE = {
    CLASSICAL_LAYOUT.size: CLASSICAL_LAYOUT,
    PQ_LAYOUT.size: PQ_LAYOUT,
}


def layout_for_size(size: int) -> AddressLayout | None:
    """Return the layout for a 38- or 46-byte buffer, ``None`` for any other size."""
    return _LAYOUTS_BY_SIZE.get(size)


def hex_upper(data: bytes) -> str:
    """Render *data* as upper-case hex, two characters per byte."""
    return data.hex().upper()
