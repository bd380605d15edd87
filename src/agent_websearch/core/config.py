"""Configuration management for agent-websearch.

This module provides configuration models and loading functionality using Pydantic
for validation and type safety.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DOTENV_LOADED = False


def _load_env_once() -> None:
    """Load environment variables from a .env file exactly once."""

    global _DOTENV_LOADED
    if not _DOTENV_LOADED:
        load_dotenv()
        _DOTENV_LOADED = True


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in configuration data."""

    if isinstance(data, str):
        return os.path.expandvars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    return data


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    log_file: str | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(default=10485760, description="Max log file size (10MB)")
    backup_count: int = Field(default=5, description="Number of backup files")

    @field_validator("level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


class SearchProviderConfig(BaseModel):
    """Configuration for a single search provider entry.

    Attributes:
        type: Provider implementation key, resolved against the factories
            passed to ``build_search_service``
        enabled: Whether this provider is registered at startup
        api_key: API key for the provider (if required)
        options: Provider-specific options
    """

    type: str = Field(..., description="Provider implementation key")
    enabled: bool = Field(default=True, description="Register this provider at startup")
    api_key: str | None = Field(
        default=None,
        description="API key for the provider (if required)",
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific options",
    )

    @field_validator("type")
    @classmethod
    def normalise_type(cls, value: str) -> str:
        provider_type = value.strip().lower()
        if not provider_type:
            raise ValueError("Provider type cannot be empty")
        return provider_type


class WebSearchConfig(BaseModel):
    """Configuration for web search.

    Attributes:
        default_provider: Provider applied as the initial selection of new contexts
        providers: Provider configurations keyed by registry name
        auto_activate_first: Make the first registered provider the default
            when no default has been configured
    """

    default_provider: str | None = Field(
        default=None,
        description="Initial active provider for new execution contexts",
    )
    providers: dict[str, SearchProviderConfig] = Field(
        default_factory=dict,
        description="Provider configurations keyed by name",
    )
    auto_activate_first: bool = Field(
        default=False,
        description="Use the first registered provider as default when none is set",
    )

    def get_provider_config(self, name: str) -> SearchProviderConfig | None:
        """Get a provider configuration by name."""

        return self.providers.get(name)

    def enabled_providers(self) -> dict[str, SearchProviderConfig]:
        """Get enabled provider configurations in declaration order."""

        return {name: entry for name, entry in self.providers.items() if entry.enabled}


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="AGENT_WEBSEARCH_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    websearch: WebSearchConfig = Field(
        default_factory=WebSearchConfig, description="Web search configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> AppConfig:
        """Load configuration from a YAML file."""

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in config file: {exc}") from exc

        if not config_data:
            config_data = {}

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    @classmethod
    def from_json(cls, path: str | Path) -> AppConfig:
        """Load configuration from a JSON file."""

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in config file: {exc}") from exc

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""

        return self.model_dump()
