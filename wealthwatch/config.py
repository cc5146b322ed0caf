"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./wealthwatch.db"

    # Service
    service_name: str = "wealthwatch"
    log_level: str = "INFO"

    # Default reporting horizons (months)
    summary_months: int = 12
    pattern_months: int = 6
    cash_flow_months: int = 12

    # Recent activity feed
    recent_transactions_days: int = 30
    recent_transactions_limit: int = 10


settings = Settings()
