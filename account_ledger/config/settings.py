"""
Configuration Management for Account Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every tunable of the ledger (starting balance, comparison tolerance,
logging) is validated once at startup instead of being scattered
through the business code.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"console", "json"}


class LedgerSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from LEDGER_* environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    
    # Balance rules
    initial_balance: Decimal = Field(
        default=Decimal("1000.00"),
        ge=0,
        description="Balance a new store starts with"
    )
    balance_epsilon: Decimal = Field(
        default=Decimal("1e-9"),
        ge=0,
        description="Tolerance used when comparing a debit against the balance"
    )
    
    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for structured log output"
    )
    log_format: str = Field(
        default="console",
        description="Log renderer: 'console' or 'json'"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(_LOG_LEVELS)}")
        return level
    
    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"Unsupported log format: {v}. Allowed: {sorted(_LOG_FORMATS)}")
        return fmt


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
