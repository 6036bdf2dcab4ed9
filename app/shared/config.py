from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from app.domain.services.addresses import normalize_address


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class PipelineConfig:
    rpc_url: str
    subgraph_url: str
    factory_address: str
    reference_asset_address: str
    fee_tier: int


@dataclass(frozen=True)
class Settings:
    pipeline: PipelineConfig
    rpc_timeout_seconds: float
    subgraph_timeout_seconds: float
    log_level: str


MAX_UINT24 = 2**24 - 1


def _fee_tier(name: str, default: str) -> int:
    value = int(_env(name, default))
    if not 0 < value <= MAX_UINT24:
        raise ValueError(f"{name} must be a positive uint24, got {value}.")
    return value


def get_settings() -> Settings:
    pipeline = PipelineConfig(
        rpc_url=_env("RPC_URL", "https://rpc.base.org"),
        subgraph_url=_env("SUBGRAPH_URL", "https://api.zora.co/graphql"),
        factory_address=normalize_address(
            _env("UNISWAP_V3_FACTORY_ADDRESS", "0x1F98431c8aD98523631AE4a59f267346ea31F984"),
            field_name="UNISWAP_V3_FACTORY_ADDRESS",
        ),
        reference_asset_address=normalize_address(
            _env("REFERENCE_ASSET_ADDRESS", "0x4200000000000000000000000000000000000006"),
            field_name="REFERENCE_ASSET_ADDRESS",
        ),
        fee_tier=_fee_tier("POOL_FEE_TIER", "3000"),
    )
    return Settings(
        pipeline=pipeline,
        rpc_timeout_seconds=float(_env("RPC_TIMEOUT_SECONDS", "10")),
        subgraph_timeout_seconds=float(_env("SUBGRAPH_TIMEOUT_SECONDS", "10")),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
