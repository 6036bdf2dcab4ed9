from __future__ import annotations

import io

import matplotlib

matplotlib.use("Agg")  # headless
import matplotlib.pyplot as plt  # noqa: E402


CARD_WIDTH_PX = 600
CARD_HEIGHT_PX = 400
_DPI = 100


def render_card_png(
    *,
    title: str,
    lines: list[str],
    background: str = "#ffffff",
    foreground: str = "#000000",
    centered: bool = False,
    title_size: int = 28,
    body_size: int = 20,
) -> bytes:
    """Rasterize a title plus text lines into a 600x400 PNG card."""
    fig = plt.figure(figsize=(CARD_WIDTH_PX / _DPI, CARD_HEIGHT_PX / _DPI), dpi=_DPI)
    try:
        fig.patch.set_facecolor(background)
        x = 0.5 if centered else 0.05
        align = "center" if centered else "left"
        y = 0.62 if centered else 0.88
        fig.text(x, y, title, ha=align, va="center", color=foreground, fontsize=title_size, weight="bold")

        step = 0.13
        y -= 0.16 if centered else 0.17
        for line in lines:
            fig.text(x, y, line, ha=align, va="center", color=foreground, fontsize=body_size * 0.75)
            y -= step

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=_DPI, facecolor=background)
        return buf.getvalue()
    finally:
        plt.close(fig)


def render_welcome_card() -> bytes:
    return render_card_png(
        title="CoinPulse",
        lines=["Enter a Zora coin symbol to view real-time stats"],
        background="#1a1a1a",
        foreground="#ffffff",
        centered=True,
        body_size=24,
    )


def render_error_card(message: str) -> bytes:
    return render_card_png(
        title="Error",
        lines=[message],
        background="#ffcccc",
        foreground="#000000",
        centered=True,
    )


def render_stats_card(symbol: str, lines: list[str]) -> bytes:
    return render_card_png(title=f"CoinPulse: {symbol}", lines=lines)
