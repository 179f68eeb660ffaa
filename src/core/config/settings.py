# src/core/config/settings.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

from src.core.models.transaction import MIN_VALUE_PRECISION

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    """
    # General App Settings
    APP_NAME: str = "Portfolio Ledger API"
    APP_VERSION: str = "0.1.0"
    DEBUG_MODE: bool = False

    # API Specific Settings
    API_V1_STR: str = "/api/v1"

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Decimal context precision, applied at application startup. Values need at least MIN_VALUE_PRECISION digits
    DECIMAL_PRECISION: int = Field(default=28, ge=MIN_VALUE_PRECISION)

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
