"""Service interfaces (Ports) - abstraction for external collaborators."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from trademeter.domain.entities import CompanyProfile, Quote, HistoricalSeries


class BackendService(ABC):
    """Interface for the hosted auth/database service."""

    @abstractmethod
    def query(
        self, table: str, columns: str, column: str, pattern: str, limit: int
    ) -> List[Dict[str, Any]]:
        """Case-insensitive LIKE filter on one column with a row limit."""
        pass

    @abstractmethod
    def insert(self, table: str, rows: List[Dict[str, Any]]) -> None:
        """Insert rows into a table."""
        pass

    @abstractmethod
    def sign_in(self, email: str, password: str) -> None:
        """Sign in with email and password; raises AuthenticationError on rejection."""
        pass

    @abstractmethod
    def sign_up(self, email: str, password: str) -> Optional[str]:
        """Create an account; returns the new user id if one was issued."""
        pass


class MarketDataProvider(ABC):
    """Interface for an external financial data provider.

    Every implementation returns the same normalized shapes, so the
    aggregation logic never sees provider payloads.
    """

    name: str = "abstract"

    @abstractmethod
    def check_configured(self) -> None:
        """Raise ConfigurationError if a required credential is missing."""
        pass

    @abstractmethod
    async def fetch_profile(self, symbol: str) -> Optional[CompanyProfile]:
        """Company profile, or None if the provider knows no such company."""
        pass

    @abstractmethod
    async def fetch_quote(self, symbol: str) -> Optional[Quote]:
        """Real-time quote, or None if unavailable."""
        pass

    @abstractmethod
    async def fetch_historical_series(self, symbol: str) -> Optional[HistoricalSeries]:
        """Recent daily closes, or None if unavailable."""
        pass
