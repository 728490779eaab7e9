"""API request/response schemas (DTOs)."""
from typing import List, Optional
from pydantic import BaseModel

from trademeter.domain.entities import (
    CompanyProfile, Quote, HistoricalSeries, SearchResult, ViewState
)


# Request models
class LoginRequest(BaseModel):
    """Login form submission."""
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Registration form submission."""
    first_name: str = ""
    last_name: str = ""
    email: str
    password: str
    confirm_password: str


# Response models
class SearchResponse(BaseModel):
    """Company search results."""
    query: str
    results: List[SearchResult]
    count: int


class QuoteDisplay(BaseModel):
    """Quote fields pre-formatted for display."""
    current: str
    open: str
    high: str
    low: str
    previous_close: str
    change: str
    change_style: Optional[str] = None


class ProfileDisplay(BaseModel):
    """Profile figures pre-formatted for display."""
    market_cap: str
    shares_outstanding: str
    week_52_high: str
    week_52_low: str


class CompanyViewResponse(BaseModel):
    """Company detail view, raw data plus display strings."""
    state: ViewState
    ticker: str
    message: Optional[str] = None
    profile: Optional[CompanyProfile] = None
    quote: Optional[Quote] = None
    series: Optional[HistoricalSeries] = None
    profile_display: Optional[ProfileDisplay] = None
    quote_display: Optional[QuoteDisplay] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    provider: Optional[str] = None
