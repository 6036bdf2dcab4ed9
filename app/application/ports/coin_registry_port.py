from __future__ import annotations

from typing import Protocol

from app.application.dto.coin_registry import CoinLookupResult, CoinMetaResult


class CoinRegistryPort(Protocol):
    def find_coin_by_symbol(self, *, symbol: str) -> CoinLookupResult | None:
        ...

    def get_coin_meta(self, *, address: str) -> CoinMetaResult | None:
        ...
