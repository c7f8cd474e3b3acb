from pydantic_settings import BaseSettings
from pathlib import Path

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


class Settings(BaseSettings):
    CATALOG_PATH: str = str(DEFAULT_CATALOG_PATH)

    REDIS_URL: str = "redis://localhost:6379/0"

    RATE_LIMIT: int = 100
    RATE_LIMIT_WINDOW: int = 600  # 10 minutes

    PRICE_CACHE_TTL: int = 60   # 60 seconds

    MIN_BOOKING_HOURS: float = 1.0
    MIN_DURATION_HOURS: float = 0.25  # 15 minutes
    MAX_DURATION_HOURS: float = 31 * 24  # 31 days

    API_TITLE: str = "Car Share Pricing Service"
    API_DESCRIPTION: str = "Rental quotes across car sharing providers with tiered rates and free distance"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
