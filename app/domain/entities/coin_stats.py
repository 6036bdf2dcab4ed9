from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TokenPair:
    token0: str
    token1: str


@dataclass(frozen=True)
class Slot0:
    sqrt_price_x96: int
    tick: int
    observation_index: int
    observation_cardinality: int
    observation_cardinality_next: int
    fee_protocol: int
    unlocked: bool


@dataclass(frozen=True)
class PoolState:
    sqrt_price_x96: int
    liquidity: int


@dataclass(frozen=True)
class CoinMeta:
    total_supply: int
    holder_count: int


@dataclass(frozen=True)
class CoinStats:
    price: Decimal
    volume_24h: Decimal
    liquidity: Decimal
    holder_count: int
    market_cap: Decimal
