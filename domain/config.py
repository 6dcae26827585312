"""
Configuration module for the transaction history CLI.

All configuration values are loaded from environment variables with sensible defaults.
The CLI loads a local .env file (python-dotenv) before the first lookup.
"""
import os
from dataclasses import dataclass


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.getenv(key, default))


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.getenv(key, default)


@dataclass
class BankAPIConfig:
    """Bank API endpoint, credentials and HTTP timeouts."""

    base_url: str = _get_str("BANK_API_URL", "https://api.comdirect.de/api")
    # Session handling lives outside this tool; a valid bearer token is expected here
    access_token: str = _get_str("BANK_ACCESS_TOKEN", "")
    connect_timeout: float = _get_float("BANK_CONNECT_TIMEOUT", 2.0)
    read_timeout: float = _get_float("BANK_READ_TIMEOUT", 10.0)


@dataclass
class FetchConfig:
    """Paging defaults for the transaction fetcher."""

    page_size: int = _get_int("TXN_PAGE_SIZE", 20)
    # Upper bound for a single page request, in seconds (0 disables it)
    page_timeout: float = _get_float("TXN_PAGE_TIMEOUT", 30.0)


@dataclass
class LoggingConfig:
    level: str = _get_str("LOG_LEVEL", "WARNING")


# Global config instances (lazy loaded)
_bank_config = None
_fetch_config = None
_logging_config = None


def get_bank_config() -> BankAPIConfig:
    """Get bank API configuration."""
    global _bank_config
    if _bank_config is None:
        _bank_config = BankAPIConfig()
    return _bank_config


def get_fetch_config() -> FetchConfig:
    """Get fetcher configuration."""
    global _fetch_config
    if _fetch_config is None:
        _fetch_config = FetchConfig()
    return _fetch_config


def get_logging_config() -> LoggingConfig:
    """Get logging configuration."""
    global _logging_config
    if _logging_config is None:
        _logging_config = LoggingConfig()
    return _logging_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _bank_config, _fetch_config, _logging_config
    _bank_config = BankAPIConfig(
        base_url=_get_str("BANK_API_URL", "https://api.comdirect.de/api"),
        access_token=_get_str("BANK_ACCESS_TOKEN", ""),
        connect_timeout=_get_float("BANK_CONNECT_TIMEOUT", 2.0),
        read_timeout=_get_float("BANK_READ_TIMEOUT", 10.0),
    )
    _fetch_config = FetchConfig(
        page_size=_get_int("TXN_PAGE_SIZE", 20),
        page_timeout=_get_float("TXN_PAGE_TIMEOUT", 30.0),
    )
    _logging_config = LoggingConfig(level=_get_str("LOG_LEVEL", "WARNING"))
