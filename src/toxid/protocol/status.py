"""Peer status signals reported by the connection layer.

These enumerations are produced elsewhere (by the live peer session); this
module only names their values and offers display helpers.  An address
contributes the facts a session uses to pick an :class:`IdentityStatus`:
``Address.is_post_quantum`` and ``Address.mlkem_commitment``.
"""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Peer presence."""

    ONLINE = 0
    AWAY = 1
    BUSY = 2
    OFFLINE = 3
    BLOCKED = 4


class IdentityStatus(IntEnum):
    """Post-quantum identity verification level of a connection."""

    UNKNOWN = 0  # not connected, or status unknown
    CLASSICAL = 1  # X25519 only
    PQ_UNVERIFIED = 2  # hybrid session, ML-KEM commitment not yet checked
    PQ_VERIFIED = 3  # hybrid session with a matching ML-KEM commitment


_STATUS_TITLES = {
    Status.ONLINE: "online",
    Status.AWAY: "away",
    Status.BUSY: "busy",
    Status.OFFLINE: "offline",
    Status.BLOCKED: "blocked",
}

_IDENTITY_TITLES = {
    IdentityStatus.UNKNOWN: "Unknown",
    IdentityStatus.CLASSICAL: "Classical",
    IdentityStatus.PQ_UNVERIFIED: "PQ Unverified",
    IdentityStatus.PQ_VERIFIED: "PQ Verified",
}

_IDENTITY_DESCRIPTIONS = {
    IdentityStatus.UNKNOWN: "Not connected",
    IdentityStatus.CLASSICAL: "Classical encryption (X25519) - not quantum-resistant",
    IdentityStatus.PQ_UNVERIFIED: "Post-quantum encryption active, but identity not verified",
    IdentityStatus.PQ_VERIFIED: (
        "Post-quantum encryption with verified identity - fully quantum-resistant"
    ),
}


def is_online(status: Status) -> bool:
    """Return True for any status in which the peer can be reached."""
    return status not in (Status.OFFLINE, Status.BLOCKED)


def status_title(status: Status) -> str:
    return _STATUS_TITLES[Status(status)]


def is_pq_protected(status: IdentityStatus) -> bool:
    """Return True for any hybrid post-quantum session, verified or not."""
    return status in (IdentityStatus.PQ_UNVERIFIED, IdentityStatus.PQ_VERIFIED)


def identity_status_title(status: IdentityStatus) -> str:
    return _IDENTITY_TITLES[IdentityStatus(status)]


def identity_status_description(status: IdentityStatus) -> str:
    return _IDENTITY_DESCRIPTIONS[IdentityStatus(status)]
