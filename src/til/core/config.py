"""Application configuration.

Settings come from, in order of precedence:
    - environment variables (TIL_* prefix)
    - a TOML or JSON config file
    - defaults

``load_config()`` never raises; a broken file yields defaults plus an error
message in :class:`ConfigLoadResult`.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from til.core.errors import ConfigError

CONFIG_ENV_VAR = "TIL_CONFIG"


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TIL_", extra="ignore")

    notes_dir: Path | None = Field(
        default=None,
        description="Root directory for note files. Unset means ~/.til/notes.",
    )
    log_level: str = Field(default="INFO", description="Log level for til output.")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables win over config file entries.
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)


@dataclass
class ConfigLoadResult:
    path: Path | None
    file_loaded: bool
    env_overrides: set[str]
    error: str | None = None


def _resolve_config_path(config_path: Path | None, env_vars: Mapping[str, str]) -> Path | None:
    candidate = config_path or env_vars.get(CONFIG_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser()
    try:
        return Path.home() / ".til" / "config.toml"
    except RuntimeError:
        return None


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    parser = json.loads if path.suffix.lower() == ".json" else tomllib.loads
    try:
        data = parser(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Syntax error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root in {path} must be a mapping.")

    return data


def _detect_env_overrides(env_vars: Mapping[str, str]) -> set[str]:
    prefix = AppConfig.model_config.get("env_prefix", "")
    return {
        field for field in AppConfig.model_fields if f"{prefix}{field}".upper() in env_vars
    }


def load_config(config_path: Path | None = None) -> tuple[AppConfig, ConfigLoadResult]:
    """Load configuration, falling back to defaults when the file is invalid."""
    env_vars: Mapping[str, str] = os.environ
    resolved_path = _resolve_config_path(config_path, env_vars)

    error: str | None = None
    file_loaded = False
    file_data: dict[str, Any] = {}

    if resolved_path is not None:
        try:
            file_data = _read_config_file(resolved_path)
            file_loaded = resolved_path.exists()
        except ConfigError as exc:
            error = str(exc)

    try:
        config = AppConfig(**file_data)
    except ValidationError as exc:
        error = str(exc)
        config = AppConfig()

    return config, ConfigLoadResult(
        path=resolved_path,
        file_loaded=file_loaded,
        env_overrides=_detect_env_overrides(env_vars),
        error=error,
    )
