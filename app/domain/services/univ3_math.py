from __future__ import annotations

from decimal import Decimal, localcontext


Q96 = Decimal(2**96)
# Enough significant digits to square a uint160 without rounding.
WIDE_PRECISION = 78
DEFAULT_TOKEN_DECIMALS = 18


def sqrt_price_x96_to_sqrt_price(sqrt_price_x96: int) -> Decimal:
    if sqrt_price_x96 < 0:
        raise ValueError("Invalid sqrt_price_x96.")
    with localcontext() as ctx:
        ctx.prec = WIDE_PRECISION
        return Decimal(sqrt_price_x96) / Q96


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    token0_decimals: int,
    token1_decimals: int,
) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = WIDE_PRECISION
        sqrt_price = sqrt_price_x96_to_sqrt_price(sqrt_price_x96)
        raw_price = sqrt_price * sqrt_price
        decimal_adjust = Decimal(10) ** (token0_decimals - token1_decimals)
        return raw_price * decimal_adjust


def to_human_units(raw_amount: int, decimals: int = DEFAULT_TOKEN_DECIMALS) -> Decimal:
    if raw_amount < 0:
        raise ValueError("raw_amount must be non-negative.")
    with localcontext() as ctx:
        ctx.prec = WIDE_PRECISION
        return Decimal(raw_amount) / (Decimal(10) ** decimals)
