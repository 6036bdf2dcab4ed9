from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from app.api.deps import get_resolve_coin_stats_use_case
from app.api.errors import resolution_message, resolution_status_code
from app.api.frame_documents import error_frame, stats_frame, stats_lines, welcome_frame
from app.api.schemas.frame import FrameActionRequest
from app.application.dto.coin_stats import ResolveCoinStatsInput
from app.application.use_cases.resolve_coin_stats import ResolveCoinStatsUseCase
from app.domain.entities.resolution import ResolutionError
from app.infrastructure.rendering.card_renderer import (
    render_error_card,
    render_stats_card,
    render_welcome_card,
)

router = APIRouter()

logger = logging.getLogger(__name__)


def _base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


def _png(content: bytes) -> Response:
    return Response(content=content, media_type="image/png")


@router.get("/", response_class=HTMLResponse)
def initial_frame(request: Request):
    return HTMLResponse(welcome_frame(_base_url(request)))


@router.get("/welcome-image")
def welcome_image():
    return _png(render_welcome_card())


@router.post("/stats", response_class=HTMLResponse)
def stats(
    request: Request,
    body: FrameActionRequest,
    use_case: ResolveCoinStatsUseCase = Depends(get_resolve_coin_stats_use_case),
):
    base_url = _base_url(request)
    raw_symbol = body.untrusted_data.input_text if body.untrusted_data else None
    symbol = (raw_symbol or "").strip()
    if not symbol:
        return HTMLResponse(error_frame(base_url, "No symbol provided"), status_code=400)

    result = use_case.execute(ResolveCoinStatsInput(symbol=symbol))
    if isinstance(result, ResolutionError):
        return HTMLResponse(
            error_frame(base_url, resolution_message(result)),
            status_code=resolution_status_code(result),
        )
    return HTMLResponse(stats_frame(base_url, symbol.upper()))


@router.get("/image/{symbol}")
def stats_image(
    symbol: str,
    use_case: ResolveCoinStatsUseCase = Depends(get_resolve_coin_stats_use_case),
):
    if not symbol.strip():
        return PlainTextResponse("No symbol provided", status_code=400)

    result = use_case.execute(ResolveCoinStatsInput(symbol=symbol))
    if isinstance(result, ResolutionError):
        return PlainTextResponse(resolution_message(result), status_code=resolution_status_code(result))
    return _png(render_stats_card(symbol.strip().upper(), stats_lines(result)))


@router.get("/error-image")
def error_image(message: str | None = None):
    text = (message or "").strip() or "Unknown error"
    logger.debug("frames: error_image message=%s", text)
    return _png(render_error_card(text))
