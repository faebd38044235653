"""Configuration models and loading logic."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_SETTINGS_FILE = Path("configs/openclaw_check.yaml")
SETTINGS_FILE_ENV = "OPENCLAW_CHECK_SETTINGS_FILE"

CONFIG_PATH_ENV = "OPENCLAW_CONFIG_PATH"
SRC_ENV = "OPENCLAW_SRC"


class DiscoveryConfig(BaseModel):
    """Where and how the filesystem resolver looks for the validator."""

    preferred_module: Path = Path("dist/config/validation.py")
    dist_dir: Path = Path("dist")
    candidate_prefix: str = "config-"
    candidate_suffix: str = ".py"
    symbol: str = Field(default="validateConfigObject", min_length=1)
    aggregator_marker: str = "./entry.py"
    on_load_error: Literal["abort", "skip"] = "abort"


class ResolverConfig(BaseModel):
    """Resolver strategy selection."""

    strategy: Literal["filesystem", "entry_point"] = "filesystem"
    entry_point_group: str = "openclaw.config_validators"
    entry_point_name: str = "validateConfigObject"


class LoggingConfig(BaseModel):
    """Console and optional file logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path | None = None


class CheckSettings(BaseSettings):
    """Top-level settings for a config check run."""

    _yaml_file_override: ClassVar[Path | None] = None

    config_path: Path | None = None
    src: Path | None = None
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="OPENCLAW_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("config_path", "src", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use YAML defaults while allowing env vars to override values."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


def find_project_root(start: Path | None = None) -> Path:
    """Locate the project root by traversing upward for the settings file."""

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / DEFAULT_SETTINGS_FILE).exists():
            return candidate
    return current


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or default."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = DEFAULT_SETTINGS_FILE

    if not chosen.is_absolute():
        chosen = (find_project_root() / chosen).resolve()
    return chosen


def load_settings(settings_file: Path | None = None) -> CheckSettings:
    """Load settings with YAML defaults and environment variable overrides."""

    CheckSettings._yaml_file_override = settings_file
    try:
        return CheckSettings()
    finally:
        CheckSettings._yaml_file_override = None
