"""Alpha Vantage provider: OVERVIEW, GLOBAL_QUOTE and TIME_SERIES_DAILY."""
from typing import Optional
import logging

import httpx

from trademeter.domain.entities import CompanyProfile, Quote, HistoricalSeries
from trademeter.infrastructure.providers.base import HttpMarketDataProvider, to_float, to_text
from trademeter.services.series import normalize_daily_time_series

logger = logging.getLogger(__name__)

BASE_URL = "https://www.alphavantage.co/query"


class AlphaVantageProvider(HttpMarketDataProvider):
    """Fundamentals, quote and daily closes from Alpha Vantage.

    ``MarketCapitalization`` is reported in absolute USD. Rate-limited or
    unknown symbols come back as HTTP 200 with a ``Note``/``Information``
    body and no ``Name``, which is treated as not found.
    """

    name = "alpha_vantage"

    def __init__(self, http_client: httpx.AsyncClient, api_key: str):
        super().__init__(http_client)
        self._api_key = api_key

    def check_configured(self) -> None:
        self._require(self._api_key, "ALPHA_VANTAGE_API_KEY")

    async def _query(self, function: str, symbol: str, **extra) -> dict:
        params = {"function": function, "symbol": symbol, "apikey": self._api_key, **extra}
        data = await self._get_json(BASE_URL, params=params)
        if not isinstance(data, dict):
            return {}
        for key in ("Note", "Information", "Error Message"):
            if key in data:
                logger.warning(f"Alpha Vantage {function} for {symbol}: {data[key]}")
        return data

    async def fetch_profile(self, symbol: str) -> Optional[CompanyProfile]:
        data = await self._query("OVERVIEW", symbol)
        name = to_text(data.get("Name"))
        if not name:
            return None
        return CompanyProfile(
            name=name,
            ticker=to_text(data.get("Symbol")) or symbol,
            exchange=to_text(data.get("Exchange")),
            market_cap=to_float(data.get("MarketCapitalization")),
            shares_outstanding=to_float(data.get("SharesOutstanding")),
            industry=to_text(data.get("Industry")),
            country=to_text(data.get("Country")),
            weburl=to_text(data.get("OfficialSite")),
            description=to_text(data.get("Description")),
            sector=to_text(data.get("Sector")),
            week_52_high=to_float(data.get("52WeekHigh")),
            week_52_low=to_float(data.get("52WeekLow")),
            dividend_yield=to_float(data.get("DividendYield")),
            eps=to_float(data.get("EPS")),
            pe_ratio=to_float(data.get("PERatio")),
        )

    async def fetch_quote(self, symbol: str) -> Optional[Quote]:
        data = await self._query("GLOBAL_QUOTE", symbol)
        quote = data.get("Global Quote")
        if not isinstance(quote, dict) or not quote:
            return None
        return Quote(
            current=to_float(quote.get("05. price")),
            open=to_float(quote.get("02. open")),
            high=to_float(quote.get("03. high")),
            low=to_float(quote.get("04. low")),
            previous_close=to_float(quote.get("08. previous close")),
            change=to_float(quote.get("09. change")),
            percent_change=to_float(quote.get("10. change percent")),
        )

    async def fetch_historical_series(self, symbol: str) -> Optional[HistoricalSeries]:
        data = await self._query("TIME_SERIES_DAILY", symbol, outputsize="compact")
        return normalize_daily_time_series(data)
