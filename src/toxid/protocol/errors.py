"""toxid exception hierarchy.

All protocol-specific exceptions inherit from :class:`ToxIdError`.

Malformed user input never raises: the total constructors return the empty
address instead.  These exceptions are reserved for the strict entry points,
where a bad value means the caller broke its own contract.
"""

from __future__ import annotations


class ToxIdError(Exception):
    """Base exception for all toxid errors."""


class InvalidAddressError(ToxIdError):
    """Raised when a value passed to a strict address constructor is not address-shaped."""


class InvalidPublicKeyError(ToxIdError):
    """Raised when a bare public key has the wrong length or charset."""
