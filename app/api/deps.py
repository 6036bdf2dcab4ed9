from __future__ import annotations

from app.application.use_cases.resolve_coin_stats import ResolveCoinStatsUseCase
from app.infrastructure.clients.coin_subgraph_client import (
    CoinSubgraphClient,
    CoinSubgraphClientSettings,
)
from app.infrastructure.clients.evm_rpc_client import EvmRpcClient, EvmRpcClientSettings
from app.shared.config import get_settings


def get_resolve_coin_stats_use_case() -> ResolveCoinStatsUseCase:
    settings = get_settings()
    return ResolveCoinStatsUseCase(
        coin_registry=CoinSubgraphClient(
            CoinSubgraphClientSettings(
                subgraph_url=settings.pipeline.subgraph_url,
                timeout_seconds=settings.subgraph_timeout_seconds,
            )
        ),
        chain_reader=EvmRpcClient(
            EvmRpcClientSettings(
                rpc_url=settings.pipeline.rpc_url,
                timeout_seconds=settings.rpc_timeout_seconds,
            )
        ),
        config=settings.pipeline,
    )
