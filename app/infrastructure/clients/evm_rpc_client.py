from __future__ import annotations

from dataclasses import dataclass
from itertools import count
import logging

import httpx

from app.domain.entities.coin_stats import Slot0
from app.domain.exceptions import ChainReadFault
from app.domain.services.addresses import normalize_address


logger = logging.getLogger(__name__)


# Function selectors (first 4 bytes of keccak256 of the signature).
GET_POOL_SELECTOR = "0x1698ee82"  # getPool(address,address,uint24)
SLOT0_SELECTOR = "0x3850c7bd"  # slot0()
LIQUIDITY_SELECTOR = "0x1a686502"  # liquidity()

_WORD_HEX = 64
_SLOT0_WORDS = 7


class ChainRpcError(ChainReadFault):
    pass


def _encode_address(address: str) -> str:
    return normalize_address(address)[2:].rjust(_WORD_HEX, "0")


def _encode_uint(value: int) -> str:
    if value < 0:
        raise ValueError("uint values must be non-negative.")
    return format(value, "x").rjust(_WORD_HEX, "0")


def encode_get_pool_call(token0: str, token1: str, fee_tier: int) -> str:
    return GET_POOL_SELECTOR + _encode_address(token0) + _encode_address(token1) + _encode_uint(fee_tier)


def _split_words(result_hex: str, *, expected_words: int, method: str) -> list[int]:
    if not isinstance(result_hex, str) or not result_hex.startswith("0x"):
        raise ChainRpcError(f"{method} returned a non-hex result.")
    body = result_hex[2:]
    if len(body) < expected_words * _WORD_HEX:
        raise ChainRpcError(
            f"{method} returned {len(body) // 2} bytes, expected at least {expected_words * 32}."
        )
    try:
        return [
            int(body[i * _WORD_HEX : (i + 1) * _WORD_HEX], 16)
            for i in range(expected_words)
        ]
    except ValueError as exc:
        raise ChainRpcError(f"{method} returned malformed hex.") from exc


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def decode_address(result_hex: str) -> str:
    (word,) = _split_words(result_hex, expected_words=1, method="getPool")
    if word >= 1 << 160:
        raise ChainRpcError("getPool returned a value wider than an address.")
    return "0x" + format(word, "040x")


def decode_slot0(result_hex: str) -> Slot0:
    words = _split_words(result_hex, expected_words=_SLOT0_WORDS, method="slot0")
    if words[0] >= 1 << 160:
        raise ChainRpcError("slot0 returned a sqrtPriceX96 wider than uint160.")
    return Slot0(
        sqrt_price_x96=words[0],
        tick=_to_signed(words[1], 24),
        observation_index=words[2] & 0xFFFF,
        observation_cardinality=words[3] & 0xFFFF,
        observation_cardinality_next=words[4] & 0xFFFF,
        fee_protocol=words[5] & 0xFF,
        unlocked=bool(words[6]),
    )


def decode_liquidity(result_hex: str) -> int:
    (word,) = _split_words(result_hex, expected_words=1, method="liquidity")
    if word >= 1 << 128:
        raise ChainRpcError("liquidity returned a value wider than uint128.")
    return word


@dataclass(frozen=True)
class EvmRpcClientSettings:
    rpc_url: str
    timeout_seconds: float


class EvmRpcClient:
    """Read-only contract calls against a single JSON-RPC endpoint."""

    def __init__(self, settings: EvmRpcClientSettings):
        self._settings = settings
        self._ids = count(1)

    def read_pool_address(
        self,
        *,
        factory_address: str,
        token0: str,
        token1: str,
        fee_tier: int,
    ) -> str:
        result = self._eth_call(
            to=factory_address,
            data=encode_get_pool_call(token0, token1, fee_tier),
            method="getPool",
        )
        return decode_address(result)

    def read_slot0(self, *, pool_address: str) -> Slot0:
        result = self._eth_call(to=pool_address, data=SLOT0_SELECTOR, method="slot0")
        return decode_slot0(result)

    def read_liquidity(self, *, pool_address: str) -> int:
        result = self._eth_call(to=pool_address, data=LIQUIDITY_SELECTOR, method="liquidity")
        return decode_liquidity(result)

    def _eth_call(self, *, to: str, data: str, method: str) -> str:
        target = normalize_address(to)
        payload = self._post(
            {
                "jsonrpc": "2.0",
                "id": next(self._ids),
                "method": "eth_call",
                "params": [{"to": target, "data": data}, "latest"],
            }
        )
        if "error" in payload:
            error = payload.get("error") or {}
            message = error.get("message", error) if isinstance(error, dict) else error
            logger.warning(
                "evm_rpc_client: rpc_error method=%s to=%s error=%s",
                method,
                target,
                message,
            )
            raise ChainRpcError(f"{method} call failed: {message}")
        result = payload.get("result")
        if result is None:
            raise ChainRpcError(f"{method} call returned no result.")
        return result

    def _post(self, body: dict) -> dict:
        try:
            with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                response = client.post(self._settings.rpc_url, json=body)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "evm_rpc_client: rpc_error method=%s error=%s",
                body.get("method"),
                exc,
            )
            raise ChainRpcError(f"RPC request failed: {exc}") from exc
        if not isinstance(payload, dict):
            raise ChainRpcError("RPC response is not a JSON object.")
        return payload
