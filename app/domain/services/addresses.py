from __future__ import annotations

import re

from app.domain.entities.coin_stats import TokenPair
from app.domain.exceptions import InvalidAddressError


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")


def normalize_address(value: str, *, field_name: str = "address") -> str:
    address = str(value or "").strip().lower()
    if not _ADDRESS_RE.match(address):
        raise InvalidAddressError(f"{field_name} must be a 0x-prefixed 20-byte hex address.")
    return address


def is_zero_address(value: str) -> bool:
    return normalize_address(value) == ZERO_ADDRESS


def canonical_order(address_a: str, address_b: str) -> TokenPair:
    """Sort two addresses the way the V3 factory expects (token0 < token1).

    The factory keys pools by the sorted pair, so querying with the reverse
    order returns the zero address instead of failing.
    """
    a = normalize_address(address_a, field_name="token_a")
    b = normalize_address(address_b, field_name="token_b")
    if a == b:
        raise InvalidAddressError("token pair must contain two distinct addresses.")
    if a < b:
        return TokenPair(token0=a, token1=b)
    return TokenPair(token0=b, token1=a)
