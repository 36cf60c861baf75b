"""Application settings and configuration."""

from decimal import Decimal
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables (TRADESIM_*)."""

    model_config = SettingsConfigDict(
        env_prefix="TRADESIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "TradeSim"
    app_version: str = "0.1.0"

    # Database
    database_url: str = "sqlite:///./tradesim.db"

    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8001

    # Accounts
    starting_balance: Decimal = Decimal("100000")
    bcrypt_rounds: int = 12

    # Sessions
    session_cookie_name: str = "tradesim_session"
    session_ttl_seconds: int = 24 * 60 * 60
    cookie_secure: bool = False

    # Price simulator
    simulator_enabled: bool = True
    seed_on_startup: bool = True
    price_update_interval_seconds: float = 60
    max_price_change_pct: Decimal = Decimal("3")
    min_price: Decimal = Decimal("0.01")

    # Trading
    enforce_market_price: bool = False

    # Query defaults
    default_history_limit: int = 100
    default_transactions_limit: int = 10
    default_leaderboard_limit: int = 10


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
