"""toxid -- peer address codec and validator.

Top-level convenience re-exports::

    from toxid import Address, PublicKey
    from toxid.protocol import find_addresses, is_valid_address
"""

__version__ = "0.1.0"

from toxid.protocol.address import Address, parse_address
from toxid.protocol.public_key import PublicKey

__all__ = ["__version__", "Address", "PublicKey", "parse_address"]
