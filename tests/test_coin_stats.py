from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.entities.coin_stats import CoinMeta, PoolState
from app.domain.services.coin_stats import compute_stats


ONE_COIN = 10**18


def test_price_one_fixture():
    stats = compute_stats(
        PoolState(sqrt_price_x96=2**96, liquidity=ONE_COIN),
        CoinMeta(total_supply=2 * ONE_COIN, holder_count=12),
    )

    assert stats.price == Decimal("1")
    assert stats.market_cap == Decimal("2")
    assert stats.liquidity == Decimal("1")
    assert stats.volume_24h == Decimal("0.1")
    assert stats.holder_count == 12


def test_compute_stats_is_pure():
    pool = PoolState(sqrt_price_x96=3 * 2**95 + 12345, liquidity=987654321 * ONE_COIN + 17)
    meta = CoinMeta(total_supply=10**27, holder_count=5)

    first = compute_stats(pool, meta)
    second = compute_stats(pool, meta)

    assert first == second
    assert str(first.price) == str(second.price)


def test_zero_liquidity_yields_zero_liquidity_and_volume():
    stats = compute_stats(
        PoolState(sqrt_price_x96=5 * 2**96, liquidity=0),
        CoinMeta(total_supply=ONE_COIN, holder_count=1),
    )

    assert stats.price == Decimal("25")
    assert stats.liquidity == 0
    assert stats.volume_24h == 0


def test_zero_supply_yields_zero_market_cap():
    stats = compute_stats(
        PoolState(sqrt_price_x96=2**96, liquidity=ONE_COIN),
        CoinMeta(total_supply=0, holder_count=0),
    )

    assert stats.market_cap == 0


def test_uninitialized_pool_price_is_zero():
    stats = compute_stats(
        PoolState(sqrt_price_x96=0, liquidity=ONE_COIN),
        CoinMeta(total_supply=ONE_COIN, holder_count=0),
    )

    assert stats.price == 0
    assert stats.liquidity == 0
    assert stats.market_cap == 0


@pytest.mark.parametrize(
    "sqrt_price_x96,liquidity",
    [
        (2**96, 1),
        (79228162514264337593543950336 // 7, 123456789012345678901234567),
        (2**150 + 3, 2**127),
        (1461446703485210103287273052203988822378723970341, 340282366920938463463374607431768211455),
    ],
)
def test_volume_is_exactly_a_tenth_of_liquidity(sqrt_price_x96: int, liquidity: int):
    stats = compute_stats(
        PoolState(sqrt_price_x96=sqrt_price_x96, liquidity=liquidity),
        CoinMeta(total_supply=ONE_COIN, holder_count=0),
    )

    assert stats.volume_24h == stats.liquidity * Decimal("0.1")


def test_negative_inputs_are_rejected():
    with pytest.raises(ValueError):
        compute_stats(
            PoolState(sqrt_price_x96=2**96, liquidity=-1),
            CoinMeta(total_supply=ONE_COIN, holder_count=0),
        )
