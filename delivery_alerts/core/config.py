"""Application configuration."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Endpoints
    orders_api_url: str = "https://orders-api.com/orders"
    alert_api_url: str = "https://alert-api.com/alerts"
    update_api_url: str = "https://update-api.com/update"
    request_timeout: float = 10.0

    # Diagnostics
    log_file: str = "Log.txt"
    log_level: str = "INFO"

    # In-memory orders API (used instead of live endpoints)
    use_in_memory_api: bool = False
    seed_orders_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="DELIVERY_ALERTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
