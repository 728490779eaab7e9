"""Health check endpoint."""
from datetime import datetime
from typing import Optional
from fastapi import APIRouter

from trademeter.api.schemas import HealthResponse

router = APIRouter()

# Set by main.py
provider_name: Optional[str] = None


def set_health_dependencies(name: str) -> None:
    """Set dependencies for health endpoint."""
    global provider_name
    provider_name = name


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        provider=provider_name,
    )
