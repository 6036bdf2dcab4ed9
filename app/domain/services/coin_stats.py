from __future__ import annotations

from decimal import Decimal, localcontext

from app.domain.entities.coin_stats import CoinMeta, CoinStats, PoolState
from app.domain.services.univ3_math import (
    WIDE_PRECISION,
    sqrt_price_x96_to_price,
    to_human_units,
)


COIN_DECIMALS = 18
REFERENCE_DECIMALS = 18
# Placeholder: there is no volume source, 24h volume is shown as 10% of liquidity.
ESTIMATED_VOLUME_TO_LIQUIDITY_RATIO = Decimal("0.1")


def compute_stats(pool: PoolState, meta: CoinMeta) -> CoinStats:
    """Turn raw pool/coin reads into display stats denominated in the reference asset.

    The reference asset is assumed to be token0 of the pool. Liquidity is the
    pool's raw ``liquidity`` in 18-decimal units times the price, which is a rough
    display figure and not the pool TVL. ``volume_24h`` is an estimate derived
    from liquidity, never a measured volume.
    """
    if pool.liquidity < 0 or meta.total_supply < 0:
        raise ValueError("liquidity and total_supply must be non-negative.")

    with localcontext() as ctx:
        ctx.prec = WIDE_PRECISION
        price = sqrt_price_x96_to_price(
            pool.sqrt_price_x96,
            token0_decimals=REFERENCE_DECIMALS,
            token1_decimals=COIN_DECIMALS,
        )
        liquidity = to_human_units(pool.liquidity, COIN_DECIMALS) * price
        market_cap = price * to_human_units(meta.total_supply, COIN_DECIMALS)

    # Round once to the caller's context so volume stays an exact multiple of liquidity.
    price = +price
    liquidity = +liquidity
    market_cap = +market_cap
    volume_24h = liquidity * ESTIMATED_VOLUME_TO_LIQUIDITY_RATIO

    return CoinStats(
        price=price,
        volume_24h=volume_24h,
        liquidity=liquidity,
        holder_count=meta.holder_count,
        market_cap=market_cap,
    )
