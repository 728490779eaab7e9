"""Tests for company search."""
import pytest

from trademeter.domain.exceptions import BackendQueryError, ConfigurationError, SearchFailedError
from trademeter.services.search_service import SearchService


def test_ticker_match_skips_name_fallback(backend):
    """A ticker hit never triggers the name query."""
    backend.rows["ticker"] = [{"ticker": "AAPL", "name": "Apple Inc"}]
    backend.rows["name"] = [{"ticker": "APLE", "name": "Apple Hospitality"}]

    results = SearchService(backend).search("aapl")

    assert [r.ticker for r in results] == ["AAPL"]
    assert len(backend.queries) == 1
    assert backend.queries[0] == ("companies", "ticker, name", "ticker", "%aapl%", 10)


def test_falls_back_to_name_when_no_ticker_match(backend):
    """Zero ticker rows plus a name hit returns the name hits."""
    backend.rows["name"] = [
        {"ticker": "AAPL", "name": "Apple Inc"},
        {"ticker": "APLE", "name": "Apple Hospitality"},
    ]

    results = SearchService(backend).search("apple")

    assert [r.ticker for r in results] == ["AAPL", "APLE"]
    assert [q[2] for q in backend.queries] == ["ticker", "name"]
    assert all(q[4] == 10 for q in backend.queries)


def test_both_miss_returns_empty(backend):
    assert SearchService(backend).search("zzzz") == []
    assert len(backend.queries) == 2


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_issues_no_request(backend, query):
    assert SearchService(backend).search(query) == []
    assert backend.queries == []


def test_query_failure_is_generic(backend):
    backend.query_error = BackendQueryError("relation does not exist")

    with pytest.raises(SearchFailedError) as exc_info:
        SearchService(backend).search("aapl")

    assert exc_info.value.message == "Something went wrong. Please try again."
    assert len(backend.queries) == 1


def test_configuration_error_propagates(backend):
    backend.query_error = ConfigurationError("Missing SUPABASE_URL", setting="SUPABASE_URL")

    with pytest.raises(ConfigurationError):
        SearchService(backend).search("aapl")


def test_malformed_row_is_generic_failure(backend):
    backend.rows["ticker"] = [{"ticker": "AAPL"}]

    with pytest.raises(SearchFailedError):
        SearchService(backend).search("aapl")
