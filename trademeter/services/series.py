"""Normalize provider-specific price histories into chart-ready series.

Three payload shapes are understood:

* Alpha Vantage ``TIME_SERIES_DAILY``: a date-keyed map of OHLCV dicts.
* Finnhub ``/stock/candle``: parallel ``t`` (unix seconds) and ``c`` arrays
  plus an ``s`` status flag.
* Yahoo ``chart``: ``chart.result[0]`` with a ``timestamp`` array and closes
  nested under ``indicators.quote[0].close``.

Each normalizer returns a HistoricalSeries of at most MAX_POINTS points in
ascending date order, or None. A partially usable payload is never turned
into a series with mismatched labels and prices.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging

from trademeter.domain.entities import HistoricalSeries

logger = logging.getLogger(__name__)

MAX_POINTS = 30
DAILY_SERIES_KEY = "Time Series (Daily)"
DAILY_CLOSE_KEY = "4. close"


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _label(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d")


def _build(points: List[Tuple[Any, str, float]]) -> Optional[HistoricalSeries]:
    """Sort (key, label, price) triples, keep the newest MAX_POINTS, oldest first."""
    if not points:
        return None
    points = sorted(points, key=lambda p: p[0])[-MAX_POINTS:]
    return HistoricalSeries(
        labels=[label for _, label, _ in points],
        prices=[price for _, _, price in points],
    )


def normalize_daily_time_series(payload: Any) -> Optional[HistoricalSeries]:
    """Alpha Vantage date-keyed daily map -> series."""
    if not isinstance(payload, dict):
        return None
    series = payload.get(DAILY_SERIES_KEY)
    if not isinstance(series, dict) or not series:
        logger.warning(f"Daily series missing from payload (keys: {list(payload.keys())})")
        return None

    points = []
    for date_str, row in series.items():
        if not isinstance(row, dict):
            return None
        close = _to_float(row.get(DAILY_CLOSE_KEY))
        if close is None:
            return None
        try:
            day = datetime.strptime(date_str, "%Y-%m-%d").date()
        except (TypeError, ValueError):
            return None
        points.append((day, day.isoformat(), close))
    return _build(points)


def normalize_candles(payload: Any) -> Optional[HistoricalSeries]:
    """Finnhub parallel timestamp/close arrays -> series."""
    if not isinstance(payload, dict) or payload.get("s") != "ok":
        return None
    timestamps = payload.get("t")
    closes = payload.get("c")
    if not isinstance(timestamps, list) or not isinstance(closes, list):
        return None
    if len(timestamps) != len(closes):
        logger.warning(f"Candle arrays misaligned: {len(timestamps)} timestamps, {len(closes)} closes")
        return None

    points = []
    for ts, raw_close in zip(timestamps, closes):
        close = _to_float(raw_close)
        if close is None or not isinstance(ts, (int, float)) or isinstance(ts, bool):
            return None
        points.append((ts, _label(int(ts)), close))
    return _build(points)


def normalize_chart_result(payload: Any) -> Optional[HistoricalSeries]:
    """Yahoo nested chart result -> series.

    Yahoo reports null closes for halted or partial sessions; those points are
    dropped together with their timestamps.
    """
    if not isinstance(payload, dict):
        return None
    chart = payload.get("chart")
    if not isinstance(chart, dict) or chart.get("error"):
        return None
    results = chart.get("result")
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        return None
    result: Dict[str, Any] = results[0]

    timestamps = result.get("timestamp")
    try:
        closes = result["indicators"]["quote"][0]["close"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(timestamps, list) or not isinstance(closes, list):
        return None
    if len(timestamps) != len(closes):
        return None

    points = []
    for ts, raw_close in zip(timestamps, closes):
        if raw_close is None:
            continue
        close = _to_float(raw_close)
        if close is None or not isinstance(ts, (int, float)) or isinstance(ts, bool):
            return None
        points.append((ts, _label(int(ts)), close))
    return _build(points)
