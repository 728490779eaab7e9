"""FastAPI dependency injection setup."""
from typing import Optional

from trademeter.domain.interfaces import BackendService, MarketDataProvider
from trademeter.services.search_service import SearchService
from trademeter.services.company_service import CompanyService
from trademeter.services.auth_service import AuthService


# Application state (set during lifespan)
_search_service: Optional[SearchService] = None
_company_service: Optional[CompanyService] = None
_auth_service: Optional[AuthService] = None


def init_services(backend: BackendService, provider: MarketDataProvider) -> None:
    """Initialize all services with their collaborators."""
    global _search_service, _company_service, _auth_service

    _search_service = SearchService(backend)
    _company_service = CompanyService(provider)
    _auth_service = AuthService(backend)


def get_search_service() -> SearchService:
    """Get search service dependency."""
    if _search_service is None:
        raise RuntimeError("Services not initialized")
    return _search_service


def get_company_service() -> CompanyService:
    """Get company service dependency."""
    if _company_service is None:
        raise RuntimeError("Services not initialized")
    return _company_service


def get_auth_service() -> AuthService:
    """Get auth service dependency."""
    if _auth_service is None:
        raise RuntimeError("Services not initialized")
    return _auth_service
