"""Display formatting for company figures."""
import html
from typing import Any, Optional, Tuple

POSITIVE = "positive"
NEGATIVE = "negative"
NOT_AVAILABLE = "N/A"

_UNITS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
)


def _abbreviate(value: float, prefix: str) -> str:
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    for threshold, suffix in _UNITS:
        if magnitude >= threshold:
            return f"{sign}{prefix}{magnitude / threshold:.2f}{suffix}"
    return f"{sign}{prefix}{magnitude:,.0f}"


def format_market_cap(value: Optional[float]) -> str:
    """Abbreviate an absolute USD market cap, e.g. 2.8e12 -> "$2.80T"."""
    if value is None:
        return NOT_AVAILABLE
    return _abbreviate(value, "$")


def format_shares(value: Optional[float]) -> str:
    """Abbreviate an absolute share count, e.g. 15.2e9 -> "15.20B"."""
    if value is None:
        return NOT_AVAILABLE
    return _abbreviate(value, "")


def format_price(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"${value:.2f}"


def format_change(change: Optional[float], percent: Optional[float]) -> Tuple[str, Optional[str]]:
    """Render an absolute and percent change with an explicit sign.

    Returns the text and a style name: POSITIVE for a non-negative change,
    NEGATIVE otherwise, None when there is nothing to show.
    """
    if change is None:
        return NOT_AVAILABLE, None
    sign = "+" if change >= 0 else "-"
    style = POSITIVE if change >= 0 else NEGATIVE
    text = f"{sign}${abs(change):.2f}"
    if percent is not None:
        text += f" ({sign}{abs(percent):.2f}%)"
    return text, style


def html_text(value: Any) -> str:
    """Escaped text for HTML markup; blank values show as N/A."""
    if value is None or value == "":
        return NOT_AVAILABLE
    return html.escape(str(value))
