from __future__ import annotations

from pydantic import BaseModel, Field


class CoinStatsResponse(BaseModel):
    symbol: str
    price: str = Field(..., description="Reference asset per coin.")
    volume_24h: str = Field(..., description="Estimated as a fixed share of liquidity.")
    volume_is_estimate: bool = True
    liquidity: str = Field(..., description="Approximate liquidity in reference asset terms.")
    holder_count: int
    market_cap: str
