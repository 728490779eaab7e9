"""Company search business logic."""
from typing import List
import logging

from trademeter.domain.interfaces import BackendService
from trademeter.domain.entities import SearchResult
from trademeter.domain.exceptions import ConfigurationError, SearchFailedError

logger = logging.getLogger(__name__)

COMPANIES_TABLE = "companies"
RESULT_COLUMNS = "ticker, name"
RESULT_LIMIT = 10


class SearchService:
    """Ticker-first company search with a name-match fallback."""

    def __init__(self, backend: BackendService):
        self._backend = backend

    def search(self, query: str) -> List[SearchResult]:
        """Search by ticker, then by name if no ticker matched.

        Blank queries return an empty list without touching the backend.
        """
        query = (query or "").strip()
        if not query:
            return []

        pattern = f"%{query}%"
        logger.info(f"Searching for: {query}")
        try:
            rows = self._query("ticker", pattern)
            if not rows:
                rows = self._query("name", pattern)
            return [SearchResult(ticker=row["ticker"], name=row["name"]) for row in rows]
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Search error for {query!r}: {e}")
            raise SearchFailedError() from e

    def _query(self, column: str, pattern: str) -> list:
        return self._backend.query(
            COMPANIES_TABLE, RESULT_COLUMNS, column, pattern, RESULT_LIMIT
        ) or []
