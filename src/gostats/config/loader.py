"""Configuration loading with pydantic-settings.

Sources, highest precedence first:
1. Direct kwargs to load_config()
2. Environment variables (GOSTATS__SECTION__KEY)
3. Repo config (.gostats.yaml in the config directory)
4. Global config (~/.config/gostats/config.yaml)
5. Built-in defaults
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from gostats.config.models import (
    CoverageConfig,
    GoStatsConfig,
    GoToolConfig,
    LoggingConfig,
)
from gostats.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/gostats/config.yaml").expanduser()
REPO_CONFIG_NAME = ".gostats.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML config file; a missing or empty file is an empty mapping."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_paths(config_dir: Path | None = None) -> list[Path]:
    """YAML files consulted by load_config, lowest precedence first."""
    return [GLOBAL_CONFIG_PATH, (config_dir or Path.cwd()) / REPO_CONFIG_NAME]


class _LayeredYamlSource(PydanticBaseSettingsSource):
    """YAML files merged key by key, later files overriding earlier ones."""

    def __init__(self, settings_cls: type[BaseSettings], paths: Sequence[Path]) -> None:
        super().__init__(settings_cls)
        data: dict[str, Any] = {}
        for path in paths:
            data = _deep_merge(data, _load_yaml(path))
        self._data = data

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


def _settings_class(paths: Sequence[Path]) -> type[BaseSettings]:
    """Bind the YAML layer to a fresh Settings class so concurrent loads never share paths."""

    class GoStatsSettings(BaseSettings):
        """Env vars: GOSTATS__LOGGING__LEVEL, GOSTATS__COVERAGE__TRIM_PREFIX, etc."""

        model_config = SettingsConfigDict(
            env_prefix="GOSTATS__",
            env_nested_delimiter="__",
            case_sensitive=False,
            extra="ignore",
        )

        logging: LoggingConfig = LoggingConfig()
        coverage: CoverageConfig = CoverageConfig()
        go: GoToolConfig = GoToolConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _LayeredYamlSource(settings_cls, paths))

    return GoStatsSettings


def load_config(config_dir: Path | None = None, **kwargs: Any) -> GoStatsConfig:
    """Resolve configuration from every source.

    Args:
        config_dir: Directory holding .gostats.yaml. Defaults to the
                    current working directory.
        **kwargs: Section overrides, e.g. ``go={"binary": "go1.22"}``.

    Raises:
        ConfigError: A YAML file is malformed or a value fails validation.
    """
    settings_cls = _settings_class(config_paths(config_dir))
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(location, first.get("input"), first["msg"]) from e
    return GoStatsConfig.model_validate(settings.model_dump())
