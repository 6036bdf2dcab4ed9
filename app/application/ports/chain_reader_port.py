from __future__ import annotations

from typing import Protocol

from app.domain.entities.coin_stats import Slot0


class ChainReaderPort(Protocol):
    def read_pool_address(
        self,
        *,
        factory_address: str,
        token0: str,
        token1: str,
        fee_tier: int,
    ) -> str:
        ...

    def read_slot0(self, *, pool_address: str) -> Slot0:
        ...

    def read_liquidity(self, *, pool_address: str) -> int:
        ...
