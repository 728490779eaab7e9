"""Company detail endpoint."""
from fastapi import APIRouter, Depends
import logging

from trademeter.api.schemas import CompanyViewResponse, ProfileDisplay, QuoteDisplay
from trademeter.api.dependencies import get_company_service
from trademeter.domain.entities import CompanyView, ViewState
from trademeter.services.company_service import CompanyService, FAILED_MESSAGE
from trademeter.services.formatting import (
    format_change, format_market_cap, format_price, format_shares
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["companies"])


def to_response(view: CompanyView) -> CompanyViewResponse:
    """Attach display strings to a company view."""
    response = CompanyViewResponse(**view.model_dump())
    if view.profile:
        response.profile_display = ProfileDisplay(
            market_cap=format_market_cap(view.profile.market_cap),
            shares_outstanding=format_shares(view.profile.shares_outstanding),
            week_52_high=format_price(view.profile.week_52_high),
            week_52_low=format_price(view.profile.week_52_low),
        )
    if view.quote:
        change, style = format_change(view.quote.change, view.quote.percent_change)
        response.quote_display = QuoteDisplay(
            current=format_price(view.quote.current),
            open=format_price(view.quote.open),
            high=format_price(view.quote.high),
            low=format_price(view.quote.low),
            previous_close=format_price(view.quote.previous_close),
            change=change,
            change_style=style,
        )
    return response


@router.get("/companies/{ticker}", response_model=CompanyViewResponse)
async def get_company(
    ticker: str,
    service: CompanyService = Depends(get_company_service)
) -> CompanyViewResponse:
    """Get profile, quote and recent closes for a ticker.

    Always answers 200; not-found and failures are carried in ``state``.
    """
    try:
        view = await service.get_company(ticker)
    except Exception as e:
        logger.error(f"Error aggregating company {ticker}: {e}")
        view = CompanyView(state=ViewState.ERROR, ticker=ticker.upper(), message=FAILED_MESSAGE)
    return to_response(view)
