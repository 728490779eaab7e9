"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


class SupabaseConfig:
    """Hosted auth/database connection configuration."""
    URL: str = os.getenv("SUPABASE_URL", "")
    KEY: str = os.getenv("SUPABASE_KEY", "")


class ProviderConfig:
    """Market data provider selection and credentials."""
    MARKET_DATA_PROVIDER: str = os.getenv("MARKET_DATA_PROVIDER", "finnhub")
    ALPHA_VANTAGE_API_KEY: str = os.getenv("ALPHA_VANTAGE_API_KEY", "")
    FINNHUB_API_KEY: str = os.getenv("FINNHUB_API_KEY", "")
    RAPIDAPI_KEY: str = os.getenv("RAPIDAPI_KEY", "")
    RAPIDAPI_HOST: str = os.getenv("RAPIDAPI_HOST", "apidojo-yahoo-finance-v1.p.rapidapi.com")


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://localhost:8000")
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))


# Singleton instances
supabase_config = SupabaseConfig()
provider_config = ProviderConfig()
app_config = AppConfig()
