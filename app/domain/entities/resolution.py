from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResolutionErrorKind(str, Enum):
    SYMBOL_NOT_FOUND = "symbol_not_found"
    POOL_NOT_FOUND = "pool_not_found"
    CHAIN_READ = "chain_read_error"
    UPSTREAM = "upstream_error"


@dataclass(frozen=True)
class ResolutionError:
    kind: ResolutionErrorKind
    symbol: str
    detail: str = ""
