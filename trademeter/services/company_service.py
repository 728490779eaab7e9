"""Company data aggregation business logic."""
import asyncio
import logging

from trademeter.domain.interfaces import MarketDataProvider
from trademeter.domain.entities import CompanyView, ViewState
from trademeter.domain.exceptions import CompanyNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Company data not found"
FAILED_MESSAGE = "Failed to load company data."


class CompanyService:
    """Fetch profile, quote and price history for one ticker.

    The three requests run concurrently and the outcome is folded into a
    single terminal CompanyView. The profile decides the state; quote and
    series failures only blank out their own fields.
    """

    def __init__(self, provider: MarketDataProvider):
        self._provider = provider

    @property
    def provider_name(self) -> str:
        return self._provider.name

    async def get_company(self, ticker: str) -> CompanyView:
        symbol = (ticker or "").strip().upper()
        if not symbol:
            return CompanyView(
                state=ViewState.NOT_FOUND, ticker=symbol, message=NOT_FOUND_MESSAGE
            )

        try:
            self._provider.check_configured()
        except ConfigurationError as e:
            logger.error(f"Provider {self._provider.name} not configured: {e.message}")
            return CompanyView(state=ViewState.CONFIG_ERROR, ticker=symbol, message=e.message)

        profile, quote, series = await asyncio.gather(
            self._provider.fetch_profile(symbol),
            self._provider.fetch_quote(symbol),
            self._provider.fetch_historical_series(symbol),
            return_exceptions=True,
        )

        if isinstance(profile, ConfigurationError):
            return CompanyView(state=ViewState.CONFIG_ERROR, ticker=symbol, message=profile.message)
        if profile is None or isinstance(profile, CompanyNotFoundError):
            logger.info(f"No company data for {symbol}")
            return CompanyView(state=ViewState.NOT_FOUND, ticker=symbol, message=NOT_FOUND_MESSAGE)
        if isinstance(profile, BaseException):
            logger.error(f"Error fetching profile for {symbol}: {profile}")
            return CompanyView(state=ViewState.ERROR, ticker=symbol, message=FAILED_MESSAGE)

        if isinstance(quote, BaseException):
            logger.warning(f"Quote unavailable for {symbol}: {quote}")
            quote = None
        if isinstance(series, BaseException):
            logger.warning(f"Price history unavailable for {symbol}: {series}")
            series = None

        return CompanyView(
            state=ViewState.READY,
            ticker=symbol,
            profile=profile,
            quote=quote,
            series=series,
        )
