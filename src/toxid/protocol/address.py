"""toxid address parsing, validation, and field access.

An address is a 38-byte (classical) or 46-byte (post-quantum) blob, usually
exchanged as 76 or 92 hex characters::

    | C7719C6808C14B77348004956D1D98046CE09A34370E7608150EAD74C3815D30 | C8BA3AB9 | BEB9 |
    |            Public Key (32 bytes, 64 chars)                      | NoSpam   | Checksum

    | Public Key (32) | ML-KEM Commitment (8) | NoSpam (4) | Checksum (2) |

Construction comes in two tiers:

- ``Address.from_text`` / ``from_bytes`` / ``from_buffer`` take untrusted
  input and never raise for a malformed value; they return the empty address.
- ``parse_address`` and ``Address(raw)`` are for input the caller already
  knows is address-shaped and raise :class:`InvalidAddressError` otherwise.

A checksum mismatch is not a construction failure: the address is built and
``is_valid()`` reports False.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from toxid.protocol.checksum import checksum_ok, compute_checksum
from toxid.protocol.errors import InvalidAddressError
from toxid.protocol.public_key import PublicKey
from toxid.protocol.types import (
    ADDRESS_HEX_CHARS,
    ADDRESS_HEX_CHARS_PQ,
    ADDRESS_SIZE_PQ,
    CLASSICAL_LAYOUT,
    MLKEM_COMMITMENT_SIZE,
    NOSPAM_SIZE,
    PQ_LAYOUT,
    AddressLayout,
    AddressVariant,
    hex_upper,
    layout_for_size,
)

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview

# A hex run of the exact length, not embedded in a longer token.
_ADDRESS_RE = re.compile(rf"(^|\s)[A-Fa-f0-9]{{{ADDRESS_HEX_CHARS}}}($|\s)")
_ADDRESS_RE_PQ = re.compile(rf"(^|\s)[A-Fa-f0-9]{{{ADDRESS_HEX_CHARS_PQ}}}($|\s)")

# Used to pull addresses out of free text; longest variant first.
_ADDRESS_SCAN_RE = re.compile(
    rf"(?<!\S)([A-Fa-f0-9]{{{ADDRESS_HEX_CHARS_PQ}}}|[A-Fa-f0-9]{{{ADDRESS_HEX_CHARS}}})(?!\S)"
)


# ---------------------------------------------------------------------------
# Shape checks
# ---------------------------------------------------------------------------

def looks_like_classical(value: str) -> bool:
    """Return True if *value* is shaped like a 38-byte address (76 hex chars)."""
    return (
        isinstance(value, str)
        and len(value) == ADDRESS_HEX_CHARS
        and _ADDRESS_RE.search(value) is not None
    )


def looks_like_pq(value: str) -> bool:
    """Return True if *value* is shaped like a 46-byte address (92 hex chars)."""
    return (
        isinstance(value, str)
        and len(value) == ADDRESS_HEX_CHARS_PQ
        and _ADDRESS_RE_PQ.search(value) is not None
    )


def looks_like_address(value: str) -> bool:
    """Return True if *value* can be an address of either variant.

    Doesn't validate the checksum.
    """
    return looks_like_classical(value) or looks_like_pq(value)


def is_valid_address(value: str) -> bool:
    """Return True if *value* is address-shaped and its checksum matches."""
    return looks_like_address(value) and Address.from_text(value).is_valid()


def _to_bytes(data: BytesLike) -> bytes:
    # memoryview() rejects ints, which bytes() would turn into zero-filled buffers
    return memoryview(data).tobytes()


# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Address:
    """An immutable classical or post-quantum address.

    ``Address()`` is the empty (invalid) address.  Two addresses are equal
    iff their public keys are equal; NoSpam, checksum and ML-KEM commitment
    are ignored so that the same peer compares equal across NoSpam changes.
    """

    raw: bytes = b""

    def __post_init__(self) -> None:
        try:
            raw = _to_bytes(self.raw)
        except TypeError as exc:
            raise InvalidAddressError(
                f"Address must be built from bytes, got {type(self.raw).__name__}"
            ) from exc
        if raw and layout_for_size(len(raw)) is None:
            logger.debug("Strict address construction given %d bytes", len(raw))
            raise InvalidAddressError(
                f"Address must be {CLASSICAL_LAYOUT.size} or {PQ_LAYOUT.size} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "raw", raw)

    # -- construction from untrusted input ---------------------------------

    @classmethod
    def from_text(cls, value: str) -> Address:
        """Decode a 76- or 92-char hex string.

        Returns the empty address if *value* is not address-shaped.
        """
        if not looks_like_address(value):
            logger.debug("Rejected non-address text: %.100r", value)
            return cls()
        return cls(bytes.fromhex(value))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> Address:
        """Copy a raw 38- or 46-byte buffer.

        The buffer's hex form goes through the same shape check as
        :meth:`from_text`; anything else yields the empty address.
        """
        raw = _to_bytes(data)
        if layout_for_size(len(raw)) is None or not looks_like_address(hex_upper(raw)):
            logger.debug("Rejected address buffer of %d bytes", len(raw))
            return cls()
        return cls(raw)

    @classmethod
    def from_buffer(cls, buffer: BytesLike, length: int) -> Address:
        """Copy the first *length* bytes out of *buffer*, then behave as :meth:`from_bytes`.

        For callers that receive addresses from a lower-level library as
        memory plus a count.  *length* must not exceed the buffer.
        """
        view = memoryview(buffer).cast("B")
        if length < 0 or length > view.nbytes:
            raise ValueError(
                f"Declared length {length} does not fit a buffer of {view.nbytes} bytes"
            )
        return cls.from_bytes(view[:length])

    @classmethod
    def build(
        cls,
        public_key: PublicKey | BytesLike,
        nospam: BytesLike,
        mlkem_commitment: BytesLike | None = None,
    ) -> Address:
        """Assemble an address from its parts and compute the checksum.

        With *mlkem_commitment* the result is a post-quantum address,
        otherwise a classical one.

        Raises:
            InvalidAddressError: If *nospam* or *mlkem_commitment* has the wrong size.
            InvalidPublicKeyError: If *public_key* is not 32 bytes.
        """
        if not isinstance(public_key, PublicKey):
            public_key = PublicKey.from_bytes(public_key)
        nospam = _to_bytes(nospam)
        if len(nospam) != NOSPAM_SIZE:
            raise InvalidAddressError(f"NoSpam must be {NOSPAM_SIZE} bytes, got {len(nospam)}")

        layout = CLASSICAL_LAYOUT if mlkem_commitment is None else PQ_LAYOUT
        buf = bytearray(layout.size)
        buf[layout.public_key] = public_key.key
        buf[layout.nospam] = nospam
        if layout.mlkem_commitment is not None:
            commitment = _to_bytes(mlkem_commitment)
            if len(commitment) != MLKEM_COMMITMENT_SIZE:
                raise InvalidAddressError(
                    f"ML-KEM commitment must be {MLKEM_COMMITMENT_SIZE} bytes, got {len(commitment)}"
                )
            buf[layout.mlkem_commitment] = commitment
        buf[layout.checksum] = compute_checksum(bytes(buf[: layout.payload_size]))
        return cls(bytes(buf))

    # -- views ---------------------------------------------------------------

    @property
    def layout(self) -> AddressLayout | None:
        return layout_for_size(len(self.raw))

    @property
    def size(self) -> int:
        """38 for classical, 46 for post-quantum, 0 for the empty address."""
        return len(self.raw)

    @property
    def variant(self) -> AddressVariant | None:
        layout = self.layout
        return layout.variant if layout is not None else None

    @property
    def is_post_quantum(self) -> bool:
        return len(self.raw) == ADDRESS_SIZE_PQ

    @property
    def public_key(self) -> PublicKey:
        """The identity key; all zeros for the empty address."""
        layout = self.layout
        if layout is None:
            return PublicKey.zero()
        return PublicKey(self.raw[layout.public_key])

    @property
    def nospam(self) -> bytes:
        layout = self.layout
        if layout is None:
            return b""
        return self.raw[layout.nospam]

    @property
    def nospam_hex(self) -> str:
        """NoSpam as 8 upper-case hex chars, or ``""`` for the empty address."""
        return hex_upper(self.nospam)

    @property
    def checksum(self) -> bytes:
        layout = self.layout
        if layout is None:
            return b""
        return self.raw[layout.checksum]

    @property
    def mlkem_commitment(self) -> bytes | None:
        """The 8-byte ML-KEM commitment of a post-quantum address, ``None`` for classical."""
        layout = self.layout
        if layout is None or layout.mlkem_commitment is None:
            return None
        return self.raw[layout.mlkem_commitment]

    def is_valid(self) -> bool:
        """Check the checksum.  The empty address is never valid."""
        return checksum_ok(self.raw)

    def get_bytes(self) -> bytes | None:
        """Return the raw buffer if the address is valid, else ``None``."""
        if self.is_valid():
            return self.raw
        return None

    def to_text(self) -> str:
        """Upper-case hex form; ``""`` for the empty address."""
        return hex_upper(self.raw)

    def cleared(self) -> Address:
        """Return the empty address.  This instance is left unchanged."""
        return type(self)()

    # -- dunder --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.public_key == other.public_key

    def __hash__(self) -> int:
        return hash(self.public_key)

    def __len__(self) -> int:
        return len(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Address({self.to_text()!r})"


# ---------------------------------------------------------------------------
# Strict parsing and text scanning
# ---------------------------------------------------------------------------

def parse_address(value: str | BytesLike) -> Address:
    """Build an address from input the caller has already shape-checked.

    Accepts hex text or a raw buffer.  Does not check the checksum.

    Raises:
        InvalidAddressError: If *value* is not address-shaped.
    """
    if isinstance(value, str):
        if not looks_like_address(value):
            logger.debug("parse_address given non-address text of length %d", len(value))
            raise InvalidAddressError(f"Invalid address: {value!r}")
        return Address(bytes.fromhex(value))
    return Address(value)


def find_addresses(text: str) -> list[Address]:
    """Return every whitespace-delimited address in *text*, in order.

    Hex runs inside longer tokens are skipped.  Checksums are not enforced;
    filter with :meth:`Address.is_valid`.
    """
    return [Address.from_text(m.group(1)) for m in _ADDRESS_SCAN_RE.finditer(text)]
