"""Select a market data provider by name."""
import logging

import httpx

from trademeter.config import provider_config
from trademeter.domain.interfaces import MarketDataProvider
from trademeter.domain.exceptions import ConfigurationError
from trademeter.infrastructure.providers.alpha_vantage import AlphaVantageProvider
from trademeter.infrastructure.providers.finnhub import FinnhubProvider
from trademeter.infrastructure.providers.yahoo_rapidapi import YahooRapidApiProvider

logger = logging.getLogger(__name__)

PROVIDERS = ("alpha_vantage", "finnhub", "yahoo_rapidapi")


def build_provider(name: str, http_client: httpx.AsyncClient, config=provider_config) -> MarketDataProvider:
    """Construct the provider named by MARKET_DATA_PROVIDER.

    Credentials are not checked here; a missing key surfaces per request as
    a configuration-error view so the app still starts.
    """
    key = (name or "").strip().lower()
    if key == "alpha_vantage":
        provider = AlphaVantageProvider(http_client, config.ALPHA_VANTAGE_API_KEY)
    elif key == "finnhub":
        provider = FinnhubProvider(http_client, config.FINNHUB_API_KEY)
    elif key == "yahoo_rapidapi":
        provider = YahooRapidApiProvider(
            http_client,
            config.FINNHUB_API_KEY,
            config.RAPIDAPI_KEY,
            config.RAPIDAPI_HOST,
        )
    else:
        raise ConfigurationError(
            f"Unknown MARKET_DATA_PROVIDER {name!r}; expected one of {', '.join(PROVIDERS)}",
            setting="MARKET_DATA_PROVIDER",
        )
    logger.info(f"Using market data provider: {provider.name}")
    return provider
