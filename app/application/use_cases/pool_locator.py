from __future__ import annotations

from app.application.ports.chain_reader_port import ChainReaderPort
from app.domain.services.addresses import canonical_order, is_zero_address, normalize_address


class PoolLocator:
    def __init__(self, *, chain_reader: ChainReaderPort, factory_address: str):
        self._chain_reader = chain_reader
        self._factory_address = normalize_address(factory_address, field_name="factory_address")

    def locate(self, *, token_address: str, reference_address: str, fee_tier: int) -> str | None:
        """Return the pool address for the pair at ``fee_tier``, or None if no pool exists."""
        token = normalize_address(token_address, field_name="token_address")
        reference = normalize_address(reference_address, field_name="reference_address")
        # A token never pairs with itself.
        if token == reference:
            return None
        pair = canonical_order(token, reference)
        pool_address = self._chain_reader.read_pool_address(
            factory_address=self._factory_address,
            token0=pair.token0,
            token1=pair.token1,
            fee_tier=fee_tier,
        )
        pool_address = normalize_address(pool_address, field_name="pool_address")
        if is_zero_address(pool_address):
            return None
        return pool_address
