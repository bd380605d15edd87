"""Core configuration and logging for agent-websearch."""

from .config import AppConfig, LoggingConfig, SearchProviderConfig, WebSearchConfig
from .logger import get_logger, log_exception, setup_logging

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SearchProviderConfig",
    "WebSearchConfig",
    "get_logger",
    "log_exception",
    "setup_logging",
]
