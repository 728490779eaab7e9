"""Domain exceptions - one class per failure kind the UI distinguishes."""
from typing import Optional


class TradeMeterError(Exception):
    """Base exception for all Trade Meter errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(TradeMeterError):
    """A required credential or setting is missing."""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message)
        self.setting = setting


class CompanyNotFoundError(TradeMeterError):
    """Upstream reports no matching company."""

    def __init__(self, ticker: str):
        super().__init__(f"Company data not found for {ticker}")
        self.ticker = ticker


class ProviderRequestError(TradeMeterError):
    """Network or HTTP failure talking to a market data provider."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class BackendQueryError(TradeMeterError):
    """Table query or insert against the hosted backend failed."""


class SearchFailedError(TradeMeterError):
    """Company search could not be completed."""

    def __init__(self, message: str = "Something went wrong. Please try again."):
        super().__init__(message)


class AuthenticationError(TradeMeterError):
    """Hosted auth service rejected a sign-in or sign-up.

    The message is the service's own text and is shown to the user as-is.
    """
