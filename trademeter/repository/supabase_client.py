"""Supabase connection management and BackendService implementation."""
from typing import Any, Dict, List, Optional
import logging

import httpx
from postgrest.exceptions import APIError
from supabase import AuthError, Client, ClientOptions, create_client

from trademeter.config import supabase_config
from trademeter.domain.interfaces import BackendService
from trademeter.domain.exceptions import (
    AuthenticationError, BackendQueryError, ConfigurationError
)

logger = logging.getLogger(__name__)


class SupabaseConnection:
    """Process-wide Supabase client, created once on first use.

    The shared client only ever carries the anonymous key. Auth flows and
    writes get their own short-lived client from ``session_client`` so a
    signed-in user's token never reaches other requests.
    """

    def __init__(self, url: str = None, key: str = None):
        self.url = url or supabase_config.URL
        self.key = key or supabase_config.KEY
        self._client: Optional[Client] = None

    def _check_settings(self) -> None:
        if not self.url:
            raise ConfigurationError("Missing SUPABASE_URL", setting="SUPABASE_URL")
        if not self.key:
            raise ConfigurationError("Missing SUPABASE_KEY", setting="SUPABASE_KEY")

    def connect(self) -> None:
        """Create the client if it does not exist yet."""
        if self._client is not None:
            return
        self._check_settings()
        try:
            self._client = create_client(self.url, self.key)
            logger.info(f"Connected to Supabase at {self.url}")
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            raise

    def disconnect(self) -> None:
        if self._client:
            self._client = None
            logger.info("Released Supabase client")

    @property
    def client(self) -> Client:
        """Underlying client, connecting lazily."""
        if self._client is None:
            self.connect()
        return self._client

    def session_client(self) -> Client:
        """New client for a single call; dropped once the call returns."""
        self._check_settings()
        return create_client(
            self.url,
            self.key,
            options=ClientOptions(persist_session=False, auto_refresh_token=False),
        )


class SupabaseBackend(BackendService):
    """Supabase implementation of the hosted backend interface."""

    def __init__(self, connection: SupabaseConnection):
        self._conn = connection

    def query(
        self, table: str, columns: str, column: str, pattern: str, limit: int
    ) -> List[Dict[str, Any]]:
        try:
            response = (
                self._conn.client.table(table)
                .select(columns)
                .ilike(column, pattern)
                .limit(limit)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Query on {table}.{column} failed: {e}")
            raise BackendQueryError(f"Query on {table} failed: {e}") from e
        return response.data or []

    def insert(self, table: str, rows: List[Dict[str, Any]]) -> None:
        try:
            self._conn.session_client().table(table).insert(rows).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Insert into {table} failed: {e}")
            raise BackendQueryError(f"Insert into {table} failed: {e}") from e
        logger.info(f"Inserted {len(rows)} rows into {table}")

    def sign_in(self, email: str, password: str) -> None:
        try:
            self._conn.session_client().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            raise AuthenticationError(e.message) from e

    def sign_up(self, email: str, password: str) -> Optional[str]:
        try:
            response = self._conn.session_client().auth.sign_up(
                {"email": email, "password": password}
            )
        except AuthError as e:
            raise AuthenticationError(e.message) from e
        user = response.user
        return str(user.id) if user else None
