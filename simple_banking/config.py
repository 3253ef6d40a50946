"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BankingConfig(BaseSettings):
    """Ledger and demo configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANKING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Ledger configuration
    currency: str = "USD"
    account_id_start: int = 1000001
    default_statement_days: int = 30
    default_annual_rate: str = "0.02"  # Decimal as string
    days_in_year: int = 365

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8090


# Global configuration instance
config = BankingConfig()


def get_config() -> BankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankingConfig:
    """Reload configuration from environment"""
    global config
    config = BankingConfig()
    return config
