"""FastAPI application - minimal setup with dependency injection."""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trademeter.config import app_config, provider_config
from trademeter.api.dependencies import init_services
from trademeter.api.routes import auth, companies, health, search
from trademeter.infrastructure.providers.factory import build_provider
from trademeter.repository.supabase_client import SupabaseBackend, SupabaseConnection

logging.basicConfig(
    level=app_config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    # Supabase client is created lazily on first query or auth call
    connection = SupabaseConnection()
    http_client = httpx.AsyncClient(timeout=app_config.HTTP_TIMEOUT)

    provider = build_provider(provider_config.MARKET_DATA_PROVIDER, http_client)
    init_services(SupabaseBackend(connection), provider)
    health.set_health_dependencies(provider.name)

    logger.info("Application started")
    yield

    # Shutdown
    logger.info("Shutting down...")
    await http_client.aclose()
    connection.disconnect()
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Trade Meter AI API",
    description="Company search, market data and account API for Trade Meter AI",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health.router)
app.include_router(search.router)
app.include_router(companies.router)
app.include_router(auth.router)
