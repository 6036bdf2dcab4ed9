from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

from app.application.dto.coin_stats import ResolveCoinStatsInput
from app.application.ports.chain_reader_port import ChainReaderPort
from app.application.ports.coin_registry_port import CoinRegistryPort
from app.application.use_cases.pool_locator import PoolLocator
from app.domain.entities.coin_stats import CoinMeta, CoinStats, PoolState
from app.domain.entities.resolution import ResolutionError, ResolutionErrorKind
from app.domain.exceptions import ChainReadFault, InvalidAddressError, UpstreamFault
from app.domain.services.addresses import normalize_address
from app.domain.services.coin_stats import compute_stats
from app.shared.config import PipelineConfig


logger = logging.getLogger(__name__)


class ResolveCoinStatsUseCase:
    """Symbol -> coin address -> pool -> on-chain reads -> stats, in a single pass.

    Every step either yields its value or ends the resolution with one
    ``ResolutionError``. Nothing is retried or cached between calls.
    """

    def __init__(
        self,
        *,
        coin_registry: CoinRegistryPort,
        chain_reader: ChainReaderPort,
        config: PipelineConfig,
    ):
        self._coin_registry = coin_registry
        self._chain_reader = chain_reader
        self._config = config
        self._pool_locator = PoolLocator(
            chain_reader=chain_reader,
            factory_address=config.factory_address,
        )

    def execute(self, command: ResolveCoinStatsInput) -> CoinStats | ResolutionError:
        symbol = command.symbol.strip().upper()
        logger.info("resolve_coin_stats: resolve_started symbol=%s", symbol)
        try:
            return self._resolve(symbol)
        except ChainReadFault as exc:
            logger.warning("resolve_coin_stats: chain_read_failed symbol=%s error=%s", symbol, exc)
            return ResolutionError(kind=ResolutionErrorKind.CHAIN_READ, symbol=symbol, detail=str(exc))
        except (UpstreamFault, InvalidAddressError) as exc:
            logger.warning("resolve_coin_stats: upstream_failed symbol=%s error=%s", symbol, exc)
            return ResolutionError(kind=ResolutionErrorKind.UPSTREAM, symbol=symbol, detail=str(exc))

    def _resolve(self, symbol: str) -> CoinStats | ResolutionError:
        coin = self._coin_registry.find_coin_by_symbol(symbol=symbol)
        if coin is None:
            logger.info("resolve_coin_stats: symbol_not_found symbol=%s", symbol)
            return ResolutionError(kind=ResolutionErrorKind.SYMBOL_NOT_FOUND, symbol=symbol)
        coin_address = normalize_address(coin.address, field_name="coin_address")

        meta = self._coin_registry.get_coin_meta(address=coin_address)
        if meta is None:
            logger.warning(
                "resolve_coin_stats: upstream_failed symbol=%s coin=%s error=missing_coin_meta",
                symbol,
                coin_address,
            )
            return ResolutionError(
                kind=ResolutionErrorKind.UPSTREAM,
                symbol=symbol,
                detail="Coin metadata missing for resolved address.",
            )

        pool_address = self._pool_locator.locate(
            token_address=coin_address,
            reference_address=self._config.reference_asset_address,
            fee_tier=self._config.fee_tier,
        )
        if pool_address is None:
            logger.info(
                "resolve_coin_stats: pool_not_found symbol=%s coin=%s fee_tier=%s",
                symbol,
                coin_address,
                self._config.fee_tier,
            )
            return ResolutionError(kind=ResolutionErrorKind.POOL_NOT_FOUND, symbol=symbol)

        pool_state = self._read_pool_state(pool_address)
        stats = compute_stats(
            pool_state,
            CoinMeta(total_supply=meta.total_supply, holder_count=meta.holder_count),
        )
        logger.info(
            "resolve_coin_stats: resolved symbol=%s coin=%s pool=%s price=%s",
            symbol,
            coin_address,
            pool_address,
            stats.price,
        )
        return stats

    def _read_pool_state(self, pool_address: str) -> PoolState:
        # slot0 and liquidity are independent reads; both must succeed.
        with ThreadPoolExecutor(max_workers=2) as executor:
            slot0_future = executor.submit(self._chain_reader.read_slot0, pool_address=pool_address)
            liquidity_future = executor.submit(
                self._chain_reader.read_liquidity,
                pool_address=pool_address,
            )
            slot0 = slot0_future.result()
            liquidity = liquidity_future.result()
        return PoolState(sqrt_price_x96=slot0.sqrt_price_x96, liquidity=liquidity)
