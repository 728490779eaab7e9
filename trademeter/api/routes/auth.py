"""Login and registration endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
import logging

from trademeter.api.schemas import LoginRequest, RegisterRequest
from trademeter.api.dependencies import get_auth_service
from trademeter.domain.entities import AuthOutcome, AuthStatus
from trademeter.domain.exceptions import ConfigurationError
from trademeter.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=AuthOutcome)
def login(
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Sign in with email and password."""
    try:
        outcome = service.login(body.email, body.password)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except Exception as e:
        logger.error(f"Login error for {body.email}: {e}")
        raise HTTPException(status_code=500, detail="Login failed. Please try again.")

    status_code = 401 if outcome.status == AuthStatus.FAILED else 200
    return JSONResponse(status_code=status_code, content=outcome.model_dump(mode="json"))


@router.post("/register", response_model=AuthOutcome, status_code=201)
def register(
    body: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Create an account and its profile row."""
    try:
        outcome = service.register(
            body.first_name,
            body.last_name,
            body.email,
            body.password,
            body.confirm_password,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except Exception as e:
        logger.error(f"Registration error for {body.email}: {e}")
        raise HTTPException(status_code=500, detail="Registration failed. Please try again.")

    status_code = 400 if outcome.status == AuthStatus.FAILED else 201
    return JSONResponse(status_code=status_code, content=outcome.model_dump(mode="json"))
