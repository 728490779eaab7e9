"""Domain entities - core business objects."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, model_validator


class CompanyProfile(BaseModel):
    """Static descriptive and fundamental data about a company.

    ``market_cap`` is absolute USD and ``shares_outstanding`` an absolute
    share count, whatever unit the upstream provider reports in.
    """
    name: str
    ticker: str
    exchange: Optional[str] = None
    ipo: Optional[str] = None
    market_cap: Optional[float] = None
    shares_outstanding: Optional[float] = None
    industry: Optional[str] = None
    country: Optional[str] = None
    logo: Optional[str] = None
    weburl: Optional[str] = None
    description: Optional[str] = None
    sector: Optional[str] = None
    week_52_high: Optional[float] = None
    week_52_low: Optional[float] = None
    dividend_yield: Optional[float] = None
    eps: Optional[float] = None
    pe_ratio: Optional[float] = None


class Quote(BaseModel):
    """Snapshot of current trading price fields."""
    current: Optional[float] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    previous_close: Optional[float] = None
    change: Optional[float] = None
    percent_change: Optional[float] = None


class HistoricalSeries(BaseModel):
    """Chart-ready closing prices, oldest first."""
    labels: List[str]
    prices: List[float]

    @model_validator(mode="after")
    def _check_aligned(self) -> "HistoricalSeries":
        if len(self.labels) != len(self.prices):
            raise ValueError(
                f"labels ({len(self.labels)}) and prices ({len(self.prices)}) differ in length"
            )
        return self

    def __len__(self) -> int:
        return len(self.prices)


class SearchResult(BaseModel):
    """Company search hit."""
    ticker: str
    name: str


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
    NOT_FOUND = "not_found"
    CONFIG_ERROR = "config_error"


class CompanyView(BaseModel):
    """Result of aggregating one company's data.

    Only READY carries a profile; quote and series may still be None when
    their requests failed.
    """
    state: ViewState
    ticker: str
    profile: Optional[CompanyProfile] = None
    quote: Optional[Quote] = None
    series: Optional[HistoricalSeries] = None
    message: Optional[str] = None


class AuthStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class AuthOutcome(BaseModel):
    """User-facing result of a login or registration attempt."""
    status: AuthStatus
    message: str
    redirect_to: Optional[str] = None
