"""Pytest configuration and fixtures."""
from typing import Any, Dict, List, Optional

import pytest

from trademeter.domain.entities import CompanyProfile, Quote, HistoricalSeries
from trademeter.domain.interfaces import BackendService, MarketDataProvider


class FakeBackend(BackendService):
    """In-memory hosted backend that records every call."""

    def __init__(self):
        self.rows: Dict[str, List[Dict[str, Any]]] = {"ticker": [], "name": []}
        self.queries: List[tuple] = []
        self.inserts: List[tuple] = []
        self.sign_ins: List[tuple] = []
        self.sign_ups: List[tuple] = []
        self.query_error: Optional[Exception] = None
        self.insert_error: Optional[Exception] = None
        self.sign_in_error: Optional[Exception] = None
        self.sign_up_error: Optional[Exception] = None
        self.new_user_id: Optional[str] = "user-123"

    def query(self, table, columns, column, pattern, limit):
        self.queries.append((table, columns, column, pattern, limit))
        if self.query_error:
            raise self.query_error
        return list(self.rows.get(column, []))

    def insert(self, table, rows):
        self.inserts.append((table, rows))
        if self.insert_error:
            raise self.insert_error

    def sign_in(self, email, password):
        self.sign_ins.append((email, password))
        if self.sign_in_error:
            raise self.sign_in_error

    def sign_up(self, email, password):
        self.sign_ups.append((email, password))
        if self.sign_up_error:
            raise self.sign_up_error
        return self.new_user_id


class FakeProvider(MarketDataProvider):
    """Provider returning (or raising) canned values."""

    name = "fake"

    def __init__(self, profile=None, quote=None, series=None, config_error=None):
        self.profile = profile
        self.quote = quote
        self.series = series
        self.config_error = config_error
        self.calls: List[str] = []

    def check_configured(self):
        if self.config_error:
            raise self.config_error

    async def _resolve(self, value):
        if isinstance(value, BaseException):
            raise value
        return value

    async def fetch_profile(self, symbol):
        self.calls.append(f"profile:{symbol}")
        return await self._resolve(self.profile)

    async def fetch_quote(self, symbol):
        self.calls.append(f"quote:{symbol}")
        return await self._resolve(self.quote)

    async def fetch_historical_series(self, symbol):
        self.calls.append(f"series:{symbol}")
        return await self._resolve(self.series)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def apple_profile():
    return CompanyProfile(
        name="Apple Inc",
        ticker="AAPL",
        exchange="NASDAQ",
        ipo="1980-12-12",
        market_cap=2.8e12,
        shares_outstanding=15.2e9,
        industry="Technology",
        country="US",
    )


@pytest.fixture
def apple_quote():
    return Quote(
        current=190.5, open=189.0, high=191.2, low=188.4,
        previous_close=189.27, change=1.23, percent_change=0.45,
    )


@pytest.fixture
def apple_series():
    return HistoricalSeries(
        labels=["2024-01-02", "2024-01-03", "2024-01-04"],
        prices=[185.64, 184.25, 181.91],
    )


@pytest.fixture
def make_provider():
    return FakeProvider
