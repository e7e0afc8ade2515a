"""
Unit tests for config_module.py.

Tests cover:
- .env loading of geocoder credentials and overriding existing variables
- get_config with present keys, missing keys, and defaults
- validate_config passing and failing scenarios
"""

import os
import logging
import pytest

from gmapsgeo.config.config_module import load_config, get_config, validate_config, ConfigError


class TestLoadConfig:
    """Test cases for load_config function."""

    def test_load_config_existing_file(self, tmp_path, caplog, monkeypatch):
        """Test loading geocoder credentials from an existing .env file."""
        monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_GEOCODER_AUTH", raising=False)

        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_MAPS_API_KEY=K1\nGOOGLE_GEOCODER_AUTH=token\n")

        with caplog.at_level(logging.INFO):
            loaded = load_config(str(env_file))

        assert loaded is True
        assert os.getenv("GOOGLE_MAPS_API_KEY") == "K1"
        assert os.getenv("GOOGLE_GEOCODER_AUTH") == "token"
        assert f"Loaded configuration from {str(env_file)}" in caplog.text

        os.environ.pop("GOOGLE_MAPS_API_KEY", None)
        os.environ.pop("GOOGLE_GEOCODER_AUTH", None)

    def test_load_config_nonexistent_file(self, caplog):
        """Test loading configuration when .env file doesn't exist."""
        nonexistent_file = "/path/that/does/not/exist/.env"

        with caplog.at_level(logging.WARNING):
            loaded = load_config(nonexistent_file)

        assert loaded is False
        assert f"Configuration file {nonexistent_file} not found" in caplog.text

    def test_load_config_override_existing_env(self, tmp_path, monkeypatch):
        """Test that .env file values override existing environment variables."""
        monkeypatch.setenv("GOOGLE_MAPS_CHANNEL", "original")

        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_MAPS_CHANNEL=web\n")

        load_config(str(env_file))

        assert os.getenv("GOOGLE_MAPS_CHANNEL") == "web"

    def test_load_config_default_path(self, tmp_path, monkeypatch):
        """Test loading configuration with default .env path."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GOOGLE_GEOCODE_URL", raising=False)

        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_GEOCODE_URL=http://localhost:8080/geocode/json\n")

        load_config()

        assert os.getenv("GOOGLE_GEOCODE_URL") == "http://localhost:8080/geocode/json"
        os.environ.pop("GOOGLE_GEOCODE_URL", None)


class TestGetConfig:
    """Test cases for get_config function."""

    def setup_method(self):
        """Set up test environment variables."""
        os.environ["EXISTING_KEY"] = "existing_value"
        os.environ["EMPTY_KEY"] = ""

    def teardown_method(self):
        """Clean up test environment variables."""
        for key in ["EXISTING_KEY", "EMPTY_KEY"]:
            if key in os.environ:
                del os.environ[key]

    def test_get_config_existing_key(self):
        """Test getting value for existing environment variable."""
        assert get_config("EXISTING_KEY") == "existing_value"

    def test_get_config_existing_key_ignores_default(self):
        """A set variable wins over the default."""
        assert get_config("EXISTING_KEY", "fallback") == "existing_value"

    def test_get_config_missing_key_with_default(self):
        """Test getting value for missing key with default."""
        assert get_config("MISSING_KEY", "default_value") == "default_value"

    def test_get_config_missing_key_no_default(self):
        """Test getting value for missing key without default."""
        assert get_config("MISSING_KEY") is None

    def test_get_config_empty_key(self):
        """An empty variable is returned as-is rather than replaced by the default."""
        assert get_config("EMPTY_KEY", "default") == ""


class TestValidateConfig:
    """Test cases for validate_config function."""

    def setup_method(self):
        """Set up test environment variables."""
        os.environ["VALID_KEY1"] = "value1"
        os.environ["VALID_KEY2"] = "value2"
        os.environ["EMPTY_KEY"] = ""
        os.environ["WHITESPACE_KEY"] = "   "

    def teardown_method(self):
        """Clean up test environment variables."""
        for key in ["VALID_KEY1", "VALID_KEY2", "EMPTY_KEY", "WHITESPACE_KEY"]:
            if key in os.environ:
                del os.environ[key]

    def test_validate_config_all_present(self, caplog):
        """Test validation when all required keys are present."""
        with caplog.at_level(logging.INFO):
            validate_config(["VALID_KEY1", "VALID_KEY2"])

        assert "Configuration validation passed" in caplog.text

    def test_validate_config_returns_values(self):
        """Validated keys are returned with their values."""
        assert validate_config(["VALID_KEY1", "VALID_KEY2"]) == {
            "VALID_KEY1": "value1",
            "VALID_KEY2": "value2",
        }

    def test_validate_config_missing_keys(self, caplog):
        """Test validation when some keys are missing."""
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["VALID_KEY1", "MISSING_KEY1", "MISSING_KEY2"])

        assert "Configuration validation failed" in str(exc_info.value)
        assert "Missing keys: MISSING_KEY1, MISSING_KEY2" in str(exc_info.value)
        assert "Configuration validation failed" in caplog.text

    def test_validate_config_empty_keys(self):
        """Test validation when some keys are empty."""
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["VALID_KEY1", "EMPTY_KEY"])

        assert "Empty keys: EMPTY_KEY" in str(exc_info.value)

    def test_validate_config_whitespace_key(self):
        """Test validation treats whitespace-only values as empty."""
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["WHITESPACE_KEY"])

        assert "Empty keys: WHITESPACE_KEY" in str(exc_info.value)

    def test_validate_config_missing_and_empty(self):
        """Test validation when both missing and empty keys exist."""
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["VALID_KEY1", "MISSING_KEY", "EMPTY_KEY"])

        error_msg = str(exc_info.value)
        assert "Missing keys: MISSING_KEY" in error_msg
        assert "Empty keys: EMPTY_KEY" in error_msg


class TestConfigError:
    """Test cases for ConfigError exception."""

    def test_config_error_inheritance(self):
        assert issubclass(ConfigError, Exception)

    def test_config_error_message(self):
        error = ConfigError("Test configuration error")
        assert str(error) == "Test configuration error"
