# tests/unit/config/test_settings.py — v2
"""Tests for config/settings.py — typed Settings, validation and key files."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sonaveeb.config.settings import (
    DEFAULT_BASE_URL,
    ConfigurationError,
    Settings,
    default_key_files,
    load_settings,
    resolve_api_key,
)

_ENV_VARS = (
    "EKILEX_API_KEY", "EKILEX_BASE_URL", "REQUEST_TIMEOUT", "MAX_RETRIES",
    "SOURCE_LANGUAGE", "TRANSLATION_LANGUAGE", "CACHE_ENABLED", "CACHE_PATH",
    "XDG_CACHE_HOME", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_api(self):
        s = Settings(_env_file=None)
        assert s.ekilex_api_key == ""
        assert s.ekilex_base_url == DEFAULT_BASE_URL
        assert s.request_timeout == 10.0
        assert s.max_retries == 2

    def test_languages(self):
        s = Settings(_env_file=None)
        assert s.source_language == "est"
        assert s.translation_language == "eng"

    def test_cache(self):
        s = Settings(_env_file=None)
        assert s.cache_enabled is True
        assert s.cache_path is None
        assert s.xdg_cache_home is None

    def test_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "WARNING"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsFromEnv:
    def test_api_key(self, monkeypatch):
        monkeypatch.setenv("EKILEX_API_KEY", "secret")
        assert Settings(_env_file=None).ekilex_api_key == "secret"

    def test_xdg_cache_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        assert Settings(_env_file=None).xdg_cache_home == tmp_path

    def test_cache_disabled(self, monkeypatch):
        monkeypatch.setenv("CACHE_ENABLED", "false")
        assert Settings(_env_file=None).cache_enabled is False

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("EKILEX_API_KEY=from-dotenv\nMAX_RETRIES=0\n")
        s = Settings(_env_file=env_file)
        assert s.ekilex_api_key == "from-dotenv"
        assert s.max_retries == 0


class TestSettingsValidation:
    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout=0)

    def test_retries_non_negative(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_retries=-1)

    def test_language_normalized(self):
        s = Settings(_env_file=None, translation_language=" RUS ")
        assert s.translation_language == "rus"

    def test_empty_language(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, source_language="  ")

    def test_same_languages(self):
        with pytest.raises(ConfigurationError, match="must differ"):
            Settings(_env_file=None, source_language="est", translation_language="est")

    def test_base_url_trailing_slash(self):
        s = Settings(_env_file=None, ekilex_base_url="https://example.test/api/")
        assert s.ekilex_base_url == "https://example.test/api"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="TRACE")


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, max_retries=5)
        assert s.max_retries == 5


class TestResolveApiKey:
    def test_settings_key_wins(self, tmp_path):
        key_file = tmp_path / "config"
        key_file.write_text("from-file\n")
        s = Settings(_env_file=None, ekilex_api_key="from-env")
        assert resolve_api_key(s, [key_file]) == "from-env"

    def test_first_line_of_first_existing_file(self, tmp_path):
        second = tmp_path / "second"
        second.write_text("  key-two  \nignored\n")
        s = Settings(_env_file=None)
        assert resolve_api_key(s, [tmp_path / "missing", second]) == "key-two"

    def test_empty_file_skipped(self, tmp_path):
        empty = tmp_path / "empty"
        empty.write_text("\n")
        other = tmp_path / "other"
        other.write_text("k\n")
        assert resolve_api_key(Settings(_env_file=None), [empty, other]) == "k"

    def test_nothing_found(self, tmp_path):
        assert resolve_api_key(Settings(_env_file=None), [tmp_path / "none"]) == ""

    def test_default_key_files(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert default_key_files() == [
            Path("config"),
            tmp_path / ".config" / "sonaveeb" / "config",
        ]
