"""Address checksum: a two-slot XOR fold over the payload bytes.

This is an integrity guard against typos and corrupted copies, not a MAC.
The byte ordering must match every other implementation of the protocol.
"""

from __future__ import annotations

from toxid.protocol.types import CHECKSUM_SIZE, layout_for_size


def compute_checksum(payload: bytes) -> bytes:
    """Fold *payload* into ``CHECKSUM_SIZE`` bytes.

    Byte ``i`` of the payload is XORed into accumulator slot ``i % 2``.
    """
    acc = bytearray(CHECKSUM_SIZE)
    for i, byte in enumerate(payload):
        acc[i % CHECKSUM_SIZE] ^= byte
    return bytes(acc)


def checksum_ok(raw: bytes) -> bool:
    """Return True if *raw* is 38 or 46 bytes and its trailing checksum matches.

    Any other length is rejected without computing anything.
    """
    layout = layout_for_size(len(raw))
    if layout is None:
        return False
    payload = raw[: layout.payload_size]
    return compute_checksum(payload) == bytes(raw[layout.checksum])
