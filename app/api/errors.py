from __future__ import annotations

from app.domain.entities.resolution import ResolutionError, ResolutionErrorKind


_STATUS_BY_KIND = {
    ResolutionErrorKind.SYMBOL_NOT_FOUND: 404,
    ResolutionErrorKind.POOL_NOT_FOUND: 404,
    ResolutionErrorKind.CHAIN_READ: 502,
    ResolutionErrorKind.UPSTREAM: 502,
}


def resolution_status_code(error: ResolutionError) -> int:
    return _STATUS_BY_KIND.get(error.kind, 500)


def resolution_message(error: ResolutionError) -> str:
    # error.detail stays in the logs; UPSTREAM only gets a generic notice.
    if error.kind == ResolutionErrorKind.SYMBOL_NOT_FOUND:
        return f'Coin "{error.symbol}" not found'
    if error.kind == ResolutionErrorKind.POOL_NOT_FOUND:
        return f'No liquidity pool found for "{error.symbol}"'
    if error.kind == ResolutionErrorKind.CHAIN_READ:
        return f'Could not read on-chain data for "{error.symbol}"'
    return "Data source unavailable, please try again later"
