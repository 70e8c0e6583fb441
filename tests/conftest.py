"""Shared test fixtures for toxid tests."""

from __future__ import annotations

import pytest
from nacl.public import PrivateKey

from toxid.protocol.address import Address

from tests.vectors import CLASSICAL_HEX, PQ_HEX


@pytest.fixture()
def classical_address() -> Address:
    return Address.from_text(CLASSICAL_HEX)


@pytest.fixture()
def pq_address() -> Address:
    return Address.from_text(PQ_HEX)


@pytest.fixture()
def nacl_keypair():
    """Return a Curve25519 (private_key, public_key) tuple."""
    sk = PrivateKey.generate()
    return sk, sk.public_key
