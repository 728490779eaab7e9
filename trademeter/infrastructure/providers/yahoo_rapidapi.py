"""Finnhub profile/quote with Yahoo chart history through RapidAPI."""
from typing import Callable, Optional
import logging
import time

import httpx

from trademeter.domain.entities import HistoricalSeries
from trademeter.infrastructure.providers.finnhub import FinnhubProvider
from trademeter.services.series import normalize_chart_result

logger = logging.getLogger(__name__)

CHART_PATH = "/stock/v3/get-chart"
CHART_INTERVAL = "1d"
CHART_RANGE = "3mo"


class YahooRapidApiProvider(FinnhubProvider):
    """Finnhub for profile and quote, Yahoo chart passthrough for history.

    Needs two credentials: the Finnhub token and a RapidAPI key.
    """

    name = "yahoo_rapidapi"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        rapidapi_key: str,
        rapidapi_host: str,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(http_client, api_key, clock=clock)
        self._rapidapi_key = rapidapi_key
        self._rapidapi_host = rapidapi_host

    def check_configured(self) -> None:
        super().check_configured()
        self._require(self._rapidapi_key, "RAPIDAPI_KEY")
        self._require(self._rapidapi_host, "RAPIDAPI_HOST")

    async def fetch_historical_series(self, symbol: str) -> Optional[HistoricalSeries]:
        data = await self._get_json(
            f"https://{self._rapidapi_host}{CHART_PATH}",
            params={"symbol": symbol, "interval": CHART_INTERVAL, "range": CHART_RANGE, "region": "US"},
            headers={
                "X-RapidAPI-Key": self._rapidapi_key,
                "X-RapidAPI-Host": self._rapidapi_host,
            },
        )
        return normalize_chart_result(data)
