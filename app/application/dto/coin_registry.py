from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoinLookupResult:
    address: str
    total_supply: int


@dataclass(frozen=True)
class CoinMetaResult:
    total_supply: int
    holder_count: int
