"""Company search endpoint."""
from fastapi import APIRouter, Depends, HTTPException
import logging

from trademeter.api.schemas import SearchResponse
from trademeter.api.dependencies import get_search_service
from trademeter.domain.exceptions import ConfigurationError, SearchFailedError
from trademeter.services.search_service import SearchService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search_companies(
    q: str = "",
    service: SearchService = Depends(get_search_service)
) -> SearchResponse:
    """Search companies by ticker, falling back to name."""
    try:
        results = service.search(q)
        return SearchResponse(query=q, results=results, count=len(results))
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except SearchFailedError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected search failure for {q!r}: {e}")
        raise HTTPException(status_code=500, detail=SearchFailedError().message)
