"""Finnhub provider: /stock/profile2, /quote and /stock/candle."""
from typing import Callable, Optional
import logging
import time

import httpx

from trademeter.domain.entities import CompanyProfile, Quote, HistoricalSeries
from trademeter.infrastructure.providers.base import HttpMarketDataProvider, to_float, to_text
from trademeter.services.series import normalize_candles

logger = logging.getLogger(__name__)

BASE_URL = "https://finnhub.io/api/v1"
MILLION = 1_000_000
CANDLE_LOOKBACK_DAYS = 60


def _millions(value) -> Optional[float]:
    number = to_float(value)
    return number * MILLION if number is not None else None


class FinnhubProvider(HttpMarketDataProvider):
    """Profile, real-time quote and daily candles from Finnhub.

    ``marketCapitalization`` and ``shareOutstanding`` are documented in
    millions and are scaled to absolute units here. Unknown symbols return
    an empty profile object.
    """

    name = "finnhub"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(http_client)
        self._api_key = api_key
        self._clock = clock

    def check_configured(self) -> None:
        self._require(self._api_key, "FINNHUB_API_KEY")

    async def _call(self, path: str, **params):
        params["token"] = self._api_key
        return await self._get_json(f"{BASE_URL}{path}", params=params)

    async def fetch_profile(self, symbol: str) -> Optional[CompanyProfile]:
        data = await self._call("/stock/profile2", symbol=symbol)
        if not isinstance(data, dict):
            return None
        name = to_text(data.get("name"))
        if not name:
            return None
        return CompanyProfile(
            name=name,
            ticker=to_text(data.get("ticker")) or symbol,
            exchange=to_text(data.get("exchange")),
            ipo=to_text(data.get("ipo")),
            market_cap=_millions(data.get("marketCapitalization")),
            shares_outstanding=_millions(data.get("shareOutstanding")),
            industry=to_text(data.get("finnhubIndustry")),
            country=to_text(data.get("country")),
            logo=to_text(data.get("logo")),
            weburl=to_text(data.get("weburl")),
        )

    async def fetch_quote(self, symbol: str) -> Optional[Quote]:
        data = await self._call("/quote", symbol=symbol)
        if not isinstance(data, dict):
            return None
        current = to_float(data.get("c"))
        # Unknown symbols come back as an all-zero quote
        if not current and not to_float(data.get("pc")):
            return None
        return Quote(
            current=current,
            open=to_float(data.get("o")),
            high=to_float(data.get("h")),
            low=to_float(data.get("l")),
            previous_close=to_float(data.get("pc")),
            change=to_float(data.get("d")),
            percent_change=to_float(data.get("dp")),
        )

    async def fetch_historical_series(self, symbol: str) -> Optional[HistoricalSeries]:
        now = int(self._clock())
        data = await self._call(
            "/stock/candle",
            symbol=symbol,
            resolution="D",
            **{"from": now - CANDLE_LOOKBACK_DAYS * 86400, "to": now},
        )
        return normalize_candles(data)
