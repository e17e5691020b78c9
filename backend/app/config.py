"""Configuration settings for the application."""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Transaction Dashboard API"
    debug: bool = False
    log_level: str = "INFO"
    database_path: str = "transactions.db"
    port: int = 5000

    # Seed source for /initialize
    seed_url: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    http_timeout: float = 30.0

    # Query defaults
    default_month: str = "March"
    default_per_page: int = 10

    # When enabled, /barchart and /piechart fall back to January for an
    # unknown month name instead of answering 400.
    legacy_chart_month_fallback: bool = False

    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
