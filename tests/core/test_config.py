"""Tests for configuration models and loading.

Tests cover:
- LoggingConfig
- SearchProviderConfig
- WebSearchConfig
- AppConfig YAML/JSON loading and environment expansion
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from agent_websearch.core.config import (
    AppConfig,
    LoggingConfig,
    SearchProviderConfig,
    WebSearchConfig,
)

# ==============================================================================
# LoggingConfig Tests
# ==============================================================================


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self):
        """Test default values."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.log_file is None
        assert config.max_bytes == 10485760
        assert config.backup_count == 5

    def test_level_normalised(self):
        """Test log levels are upper-cased."""
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_invalid_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


# ==============================================================================
# Search Config Tests
# ==============================================================================


class TestSearchProviderConfig:
    """Tests for SearchProviderConfig."""

    def test_default_values(self):
        """Test default values."""
        config = SearchProviderConfig(type="serper")
        assert config.enabled is True
        assert config.api_key is None
        assert config.options == {}

    def test_type_normalised(self):
        """Test provider type is stripped and lower-cased."""
        assert SearchProviderConfig(type="  Serper ").type == "serper"

    def test_empty_type(self):
        """Test an empty provider type is rejected."""
        with pytest.raises(ValidationError):
            SearchProviderConfig(type="   ")


class TestWebSearchConfig:
    """Tests for WebSearchConfig."""

    def test_default_values(self):
        """Test default values."""
        config = WebSearchConfig()
        assert config.default_provider is None
        assert config.providers == {}
        assert config.auto_activate_first is False

    def test_enabled_providers_keep_order(self):
        """Test enabled providers are returned in declaration order."""
        config = WebSearchConfig(
            providers={
                "b": {"type": "serper"},
                "a": {"type": "serper", "enabled": False},
                "c": {"type": "scraperapi"},
            }
        )

        assert list(config.enabled_providers()) == ["b", "c"]
        assert config.get_provider_config("a").enabled is False
        assert config.get_provider_config("missing") is None


# ==============================================================================
# AppConfig Loading Tests
# ==============================================================================


class TestAppConfigLoading:
    """Tests for AppConfig file loading."""

    def test_from_yaml(self, tmp_path, monkeypatch):
        """Test loading YAML with environment expansion."""
        monkeypatch.setenv("TEST_SERPER_KEY", "secret-key")
        path = tmp_path / "config.yaml"
        path.write_text(
            "websearch:\n"
            "  default_provider: serper\n"
            "  providers:\n"
            "    serper:\n"
            "      type: serper\n"
            "      api_key: ${TEST_SERPER_KEY}\n"
            "    scraper:\n"
            "      type: scraperapi\n"
            "      options:\n"
            "        render: true\n"
            "logging:\n"
            "  level: debug\n",
            encoding="utf-8",
        )

        config = AppConfig.from_yaml(path)

        assert config.websearch.default_provider == "serper"
        assert list(config.websearch.providers) == ["serper", "scraper"]
        assert config.websearch.providers["serper"].api_key == "secret-key"
        assert config.websearch.providers["scraper"].options == {"render": True}
        assert config.logging.level == "DEBUG"

    def test_from_yaml_empty_file(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        config = AppConfig.from_yaml(path)

        assert config.websearch.providers == {}

    def test_from_yaml_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(tmp_path / "nope.yaml")

    def test_from_yaml_invalid(self, tmp_path):
        """Test malformed YAML raises ValueError."""
        path = tmp_path / "bad.yaml"
        path.write_text("websearch: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.from_yaml(path)

    def test_from_json(self, tmp_path):
        """Test loading JSON."""
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "websearch": {
                        "default_provider": "serper",
                        "auto_activate_first": True,
                        "providers": {"serper": {"type": "serper"}},
                    }
                }
            ),
            encoding="utf-8",
        )

        config = AppConfig.from_json(path)

        assert config.websearch.auto_activate_first is True
        assert config.websearch.providers["serper"].type == "serper"

    def test_from_json_invalid(self, tmp_path):
        """Test malformed JSON raises ValueError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            AppConfig.from_json(path)

    def test_to_dict(self):
        """Test converting to a dictionary."""
        data = AppConfig().to_dict()
        assert data["websearch"]["providers"] == {}
        assert data["logging"]["level"] == "INFO"
