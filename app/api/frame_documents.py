from __future__ import annotations

from decimal import Decimal
from html import escape
from urllib.parse import quote

from app.domain.entities.coin_stats import CoinStats


def _meta(prop: str, content: str) -> str:
    return f'    <meta property="{escape(prop)}" content="{escape(content)}" />'


def render_frame_html(
    *,
    image_url: str,
    button: str,
    post_url: str,
    input_text: str | None = None,
    og_image: bool = True,
) -> str:
    tags = []
    if og_image:
        tags.append(_meta("og:image", image_url))
    tags.append(_meta("fc:frame", "vNext"))
    tags.append(_meta("fc:frame:image", image_url))
    if input_text:
        tags.append(_meta("fc:frame:input:text", input_text))
    tags.append(_meta("fc:frame:button:1", button))
    tags.append(_meta("fc:frame:post_url", post_url))
    head = "\n".join(tags)
    return f"<html>\n  <head>\n{head}\n  </head>\n</html>\n"


def welcome_frame(base_url: str) -> str:
    return render_frame_html(
        image_url=f"{base_url}/welcome-image",
        button="Get Stats",
        post_url=f"{base_url}/stats",
        input_text="Enter coin symbol",
        og_image=False,
    )


def stats_frame(base_url: str, symbol: str) -> str:
    return render_frame_html(
        image_url=f"{base_url}/image/{quote(symbol, safe='')}",
        button="Back",
        post_url=f"{base_url}/",
    )


def error_frame(base_url: str, message: str) -> str:
    return render_frame_html(
        image_url=f"{base_url}/error-image?message={quote(message, safe='')}",
        button="Try Again",
        post_url=f"{base_url}/",
    )


def _grouped(value: Decimal) -> str:
    return f"{value:,.2f}"


def stats_lines(stats: CoinStats) -> list[str]:
    return [
        f"Price: {stats.price:.4f}",
        f"24h Volume (est.): {_grouped(stats.volume_24h)}",
        f"Liquidity: {_grouped(stats.liquidity)}",
        f"Holders: {stats.holder_count:,}",
        f"Market Cap: {_grouped(stats.market_cap)}",
    ]
