"""Configuration settings for the dashboard frontend."""
from pydantic_settings import BaseSettings


class DashboardSettings(BaseSettings):
    """Dashboard settings, read from DASHBOARD_* environment variables."""

    api_url: str = "http://localhost:5000"
    timeout: float = 30.0
    per_page: int = 10
    default_month: str = "March"
    # Use the single /dashboard endpoint instead of four separate requests
    bundled: bool = False

    server_name: str = "0.0.0.0"
    server_port: int = 8003

    class Config:
        env_file = ".env"
        env_prefix = "DASHBOARD_"
        case_sensitive = False
        extra = "ignore"


settings = DashboardSettings()
