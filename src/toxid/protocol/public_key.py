"""Bare 32-byte public keys.

A :class:`PublicKey` is the canonical peer identity: two addresses belong to
the same peer iff their public keys match.  It is also usable on its own when
no NoSpam or checksum is available.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import nacl.public

from toxid.protocol.errors import InvalidPublicKeyError
from toxid.protocol.types import PUBLIC_KEY_HEX_CHARS, PUBLIC_KEY_SIZE, hex_upper

_PUBLIC_KEY_RE = re.compile(rf"[A-Fa-f0-9]{{{PUBLIC_KEY_HEX_CHARS}}}")


def is_public_key(value: str) -> bool:
    """Return True if *value* is exactly 64 hex characters."""
    return isinstance(value, str) and _PUBLIC_KEY_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class PublicKey:
    """A fixed 32-byte public key, compared by content."""

    key: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.key, (bytes, bytearray, memoryview)):
            raise InvalidPublicKeyError(
                f"Public key must be bytes, got {type(self.key).__name__}"
            )
        key = bytes(self.key)
        if len(key) != PUBLIC_KEY_SIZE:
            raise InvalidPublicKeyError(
                f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(key)}"
            )
        object.__setattr__(self, "key", key)

    @classmethod
    def zero(cls) -> PublicKey:
        """Return the all-zero key used as the public key of an empty address."""
        return cls(bytes(PUBLIC_KEY_SIZE))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> PublicKey:
        return cls(bytes(data))

    @classmethod
    def from_hex(cls, value: str) -> PublicKey:
        """Parse a 64-character hex string.

        Raises:
            InvalidPublicKeyError: If *value* is not exactly 64 hex characters.
        """
        if not is_public_key(value):
            raise InvalidPublicKeyError(f"Invalid public key: {value!r}")
        return cls(bytes.fromhex(value))

    @classmethod
    def from_nacl(cls, key: nacl.public.PublicKey) -> PublicKey:
        """Wrap a PyNaCl Curve25519 public key."""
        return cls(key.encode())

    def to_nacl(self) -> nacl.public.PublicKey:
        """Return this key as a PyNaCl Curve25519 public key for the crypto layer."""
        return nacl.public.PublicKey(self.key)

    @property
    def is_zero(self) -> bool:
        return self.key == bytes(PUBLIC_KEY_SIZE)

    def to_hex(self) -> str:
        return hex_upper(self.key)

    def __bytes__(self) -> bytes:
        return self.key

    def __str__(self) -> str:
        return self.to_hex()
