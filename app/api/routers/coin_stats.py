from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_resolve_coin_stats_use_case
from app.api.errors import resolution_message, resolution_status_code
from app.api.schemas.coin_stats import CoinStatsResponse
from app.application.dto.coin_stats import ResolveCoinStatsInput
from app.application.use_cases.resolve_coin_stats import ResolveCoinStatsUseCase
from app.domain.entities.resolution import ResolutionError

router = APIRouter()


@router.get("/v1/coins/{symbol}/stats", response_model=CoinStatsResponse)
def get_coin_stats(
    symbol: str,
    use_case: ResolveCoinStatsUseCase = Depends(get_resolve_coin_stats_use_case),
):
    normalized = symbol.strip().upper()
    if not normalized:
        raise HTTPException(status_code=400, detail="symbol is required.")

    result = use_case.execute(ResolveCoinStatsInput(symbol=normalized))
    if isinstance(result, ResolutionError):
        raise HTTPException(
            status_code=resolution_status_code(result),
            detail=resolution_message(result),
        )

    return CoinStatsResponse(
        symbol=normalized,
        price=str(result.price),
        volume_24h=str(result.volume_24h),
        liquidity=str(result.liquidity),
        holder_count=result.holder_count,
        market_cap=str(result.market_cap),
    )
