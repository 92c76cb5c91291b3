# src/config/settings.py — v2
"""Typed configuration loaded from the environment and .env via pydantic-settings.

Single source of truth for deployment-specific settings. The Ekilex API key
may also come from a plain-text key file (see resolve_api_key).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Sequence

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "sonaveeb"
DEFAULT_BASE_URL = "https://ekilex.ee/api"


class ConfigurationError(Exception):
    """Raised when configuration is missing or internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    # === Ekilex API ===
    ekilex_api_key: str = ""
    ekilex_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0
    max_retries: int = 2

    # === Languages ===
    source_language: str = "est"
    translation_language: str = "eng"

    # === Cache ===
    cache_enabled: bool = True
    cache_path: Path | None = None
    xdg_cache_home: Path | None = None

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None

    # --- Validators ---

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout must be > 0")
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_retries must be >= 0")
        return v

    @field_validator("source_language", "translation_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("language code must not be empty")
        return v

    @field_validator("ekilex_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        if self.source_language == self.translation_language:
            raise ConfigurationError(
                "SOURCE_LANGUAGE and TRANSLATION_LANGUAGE must differ"
            )
        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment and .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]


def default_key_files() -> list[Path]:
    """Key file locations, in lookup order: ./config, then the user config dir."""
    paths = [Path("config")]
    try:
        paths.append(Path.home() / ".config" / APP_NAME / "config")
    except RuntimeError:
        pass
    return paths


def _read_first_line(path: Path) -> str:
    try:
        with path.open(encoding="utf-8") as fh:
            return fh.readline().strip()
    except OSError:
        return ""


def resolve_api_key(
    settings: Settings, search_paths: Sequence[Path] | None = None
) -> str:
    """Return the configured API key, falling back to the first line of a key file.

    Returns an empty string when no key is found anywhere.
    """
    if settings.ekilex_api_key:
        return settings.ekilex_api_key
    for path in search_paths if search_paths is not None else default_key_files():
        key = _read_first_line(path)
        if key:
            return key
    return ""
