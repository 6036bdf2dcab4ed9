from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx
from pydantic import BaseModel, Field, ValidationError

from app.application.dto.coin_registry import CoinLookupResult, CoinMetaResult
from app.domain.exceptions import InvalidAddressError, UpstreamFault
from app.domain.services.addresses import normalize_address


logger = logging.getLogger(__name__)


class SubgraphError(UpstreamFault):
    pass


COIN_BY_SYMBOL_QUERY = """
query GetCoinBySymbol($symbol: String!) {
  coins(where: { symbol: $symbol }, first: 1) {
    address
    totalSupply
  }
}
"""

COIN_META_QUERY = """
query GetCoinData($address: String!) {
  coins(where: { address: $address }) {
    totalSupply
    holderCount
  }
}
"""


class _CoinLookupRow(BaseModel):
    address: str
    total_supply: int = Field(alias="totalSupply", ge=0)


class _CoinLookupData(BaseModel):
    coins: list[_CoinLookupRow]


class _CoinMetaRow(BaseModel):
    total_supply: int = Field(alias="totalSupply", ge=0)
    holder_count: int | None = Field(None, alias="holderCount", ge=0)


class _CoinMetaData(BaseModel):
    coins: list[_CoinMetaRow]


@dataclass(frozen=True)
class CoinSubgraphClientSettings:
    subgraph_url: str
    timeout_seconds: float


class CoinSubgraphClient:
    def __init__(self, settings: CoinSubgraphClientSettings):
        self._settings = settings

    def find_coin_by_symbol(self, *, symbol: str) -> CoinLookupResult | None:
        payload = self._post_graphql(
            query=COIN_BY_SYMBOL_QUERY,
            variables={"symbol": symbol.strip().upper()},
        )
        data = self._parse(_CoinLookupData, payload, query_name="GetCoinBySymbol")
        if not data.coins:
            return None
        row = data.coins[0]
        try:
            address = normalize_address(row.address, field_name="coin.address")
        except InvalidAddressError as exc:
            raise SubgraphError(f"Subgraph returned an invalid coin address: {row.address!r}") from exc
        return CoinLookupResult(address=address, total_supply=row.total_supply)

    def get_coin_meta(self, *, address: str) -> CoinMetaResult | None:
        payload = self._post_graphql(
            query=COIN_META_QUERY,
            variables={"address": address.strip().lower()},
        )
        data = self._parse(_CoinMetaData, payload, query_name="GetCoinData")
        if not data.coins:
            return None
        row = data.coins[0]
        return CoinMetaResult(
            total_supply=row.total_supply,
            holder_count=row.holder_count or 0,
        )

    def _parse(self, model: type[BaseModel], payload: dict, *, query_name: str):
        try:
            return model.model_validate(payload.get("data"))
        except ValidationError as exc:
            raise SubgraphError(f"Unexpected {query_name} response shape: {exc}") from exc

    def _post_graphql(self, *, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                response = client.post(
                    self._settings.subgraph_url,
                    json={"query": query, "variables": variables},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise SubgraphError(f"GraphQL request failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise SubgraphError("GraphQL response is not a JSON object.")
        errors = payload.get("errors") or []
        if errors:
            message = " | ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors
            )
            logger.warning("coin_subgraph_client: graphql_error error=%s", message)
            raise SubgraphError(message)
        return payload
