"""Shared HTTP plumbing for market data providers."""
from typing import Any, Dict, Optional
import logging

import httpx

from trademeter.domain.interfaces import MarketDataProvider
from trademeter.domain.exceptions import ConfigurationError, ProviderRequestError

logger = logging.getLogger(__name__)


def to_float(value: Any) -> Optional[float]:
    """Parse a provider number; "None", "-", "" and nulls become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().rstrip("%")
        if value in ("", "-", "None", "N/A"):
            return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if text in ("", "None", "-"):
        return None
    return text


class HttpMarketDataProvider(MarketDataProvider):
    """Base for providers that speak JSON over an injected httpx.AsyncClient."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    def _require(self, value: str, setting: str) -> None:
        if not value:
            raise ConfigurationError(
                f"Missing {setting}: set it in the environment to use {self.name}",
                setting=setting,
            )

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        try:
            response = await self._http.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"{self.name} returned {e.response.status_code} for {url}")
            raise ProviderRequestError(self.name, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"{self.name} request to {url} failed: {e}")
            raise ProviderRequestError(self.name, str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.error(f"{self.name} sent invalid JSON from {url}: {e}")
            raise ProviderRequestError(self.name, "invalid JSON response") from e
