"""toxid protocol -- peer address codec and validator.

Public API re-exports for ``toxid.protocol``.
"""

from toxid.protocol.types import (
    PUBLIC_KEY_SIZE,
    NOSPAM_SIZE,
    CHECKSUM_SIZE,
    MLKEM_COMMITMENT_SIZE,
    ADDRESS_SIZE,
    ADDRESS_SIZE_PQ,
    ADDRESS_HEX_CHARS,
    ADDRESS_HEX_CHARS_PQ,
    AddressVariant,
    AddressLayout,
    layout_for_size,
)

from toxid.protocol.errors import (
    ToxIdError,
    InvalidAddressError,
    InvalidPublicKeyError,
)

from toxid.protocol.public_key import PublicKey, is_public_key

from toxid.protocol.checksum import compute_checksum, checksum_ok

from toxid.protocol.address import (
    Address,
    parse_address,
    find_addresses,
    looks_like_classical,
    looks_like_pq,
    looks_like_address,
    is_valid_address,
)

from toxid.protocol.status import (
    Status,
    IdentityStatus,
    is_online,
    status_title,
    is_pq_protected,
    identity_status_title,
    identity_status_description,
)

__all__ = [
    # Types
    "PUBLIC_KEY_SIZE",
    "NOSPAM_SIZE",
    "CHECKSUM_SIZE",
    "MLKEM_COMMITMENT_SIZE",
    "ADDRESS_SIZE",
    "ADDRESS_SIZE_PQ",
    "ADDRESS_HEX_CHARS",
    "ADDRESS_HEX_CHARS_PQ",
    "AddressVariant",
    "AddressLayout",
    "layout_for_size",
    # Errors
    "ToxIdError",
    "InvalidAddressError",
    "InvalidPublicKeyError",
    # Public key
    "PublicKey",
    "is_public_key",
    # Checksum
    "compute_checksum",
    "checksum_ok",
    # Address
    "Address",
    "parse_address",
    "find_addresses",
    "looks_like_classical",
    "looks_like_pq",
    "looks_like_address",
    "is_valid_address",
    # Status
    "Status",
    "IdentityStatus",
    "is_online",
    "status_title",
    "is_pq_protected",
    "identity_status_title",
    "identity_status_description",
]
