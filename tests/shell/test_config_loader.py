"""Tests for the Configuration Loader module.

Tests configuration loading from YAML files and environment variables.
"""

import os
from unittest.mock import patch

import pytest
import yaml

from src.core.config import Config, DEFAULT_GEOCODE_BASE_URL
from src.shell.config_loader import (
    _resolve_value,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)


class TestResolveValue:
    """Tests for _resolve_value function."""

    def test_returns_non_string_unchanged(self):
        """Non-string values are returned unchanged."""
        assert _resolve_value(123) == 123
        assert _resolve_value(None) is None

    def test_returns_plain_string_unchanged(self):
        assert _resolve_value("https://example.com") == "https://example.com"

    def test_resolves_env_var_placeholder(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert _resolve_value("${TEST_VAR}") == "test_value"

    def test_returns_placeholder_if_env_var_not_set(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _resolve_value("${UNDEFINED_VAR}") == "${UNDEFINED_VAR}"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict function."""

    def test_empty_dict_gives_defaults(self):
        assert load_config_from_dict({}) == Config()

    def test_parses_all_sections(self):
        config = load_config_from_dict({
            "geocode": {
                "base_url": "https://zips.example.com/us",
                "timeout_seconds": 3,
            },
            "search": {
                "default_radius_miles": 50,
                "max_radius_miles": 200,
                "entry_fee_max": 500,
                "fargo_no_ceiling": 850,
                "page_size": 10,
            },
            "tournaments_path": "exports/tournaments.json",
        })

        assert config.geocode_base_url == "https://zips.example.com/us"
        assert config.geocode_timeout_seconds == 3.0
        assert config.default_search_radius_miles == 50.0
        assert config.max_search_radius_miles == 200.0
        assert config.entry_fee_max == 500.0
        assert config.fargo_no_ceiling == 850
        assert config.page_size == 10
        assert config.tournaments_path == "exports/tournaments.json"

    def test_resolves_placeholders(self):
        with patch.dict(os.environ, {"DATA_FILE": "/srv/tournaments.yaml"}):
            config = load_config_from_dict({"tournaments_path": "${DATA_FILE}"})
        assert config.tournaments_path == "/srv/tournaments.yaml"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_loads_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"search": {"default_radius_miles": 10}}))

        config = load_config(path)

        assert config.default_search_radius_miles == 10.0
        assert config.geocode_base_url == DEFAULT_GEOCODE_BASE_URL

    def test_uses_config_path_env(self, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text(yaml.safe_dump({"search": {"page_size": 5}}))

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}):
            config = load_config()

        assert config.page_size == 5

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search: [unclosed")

        with pytest.raises(yaml.YAMLError):
            load_config(path)


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            assert load_config_from_env() == Config()

    def test_reads_env_vars(self):
        env = {
            "GEOCODE_BASE_URL": "https://zips.example.com/us",
            "GEOCODE_TIMEOUT": "2.5",
            "DEFAULT_RADIUS": "15",
            "TOURNAMENTS_PATH": "/data/t.json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()

        assert config.geocode_base_url == "https://zips.example.com/us"
        assert config.geocode_timeout_seconds == 2.5
        assert config.default_search_radius_miles == 15.0
        assert config.tournaments_path == "/data/t.json"

    def test_reads_search_limits(self):
        env = {
            "MAX_RADIUS": "250",
            "ENTRY_FEE_MAX": "400",
            "FARGO_NO_CEILING": "800",
            "PAGE_SIZE": "50",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()

        assert config.max_search_radius_miles == 250.0
        assert config.entry_fee_max == 400.0
        assert config.fargo_no_ceiling == 800
        assert config.page_size == 50
