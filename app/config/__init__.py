"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ======================
    # Holdings data source
    # ======================
    HOLDINGS_SOURCE: Literal["http", "static"] = "http"
    HOLDINGS_API_URL: str = "http://localhost:8080/holdings"
    HOLDINGS_API_TOKEN: Optional[str] = None
    HOLDINGS_FETCH_TIMEOUT_SECONDS: float = 10.0
    HOLDINGS_FIXTURE_PATH: Optional[str] = None

    # ======================
    # Presentation
    # ======================
    CURRENCY_SYMBOL: str = "₹"

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
