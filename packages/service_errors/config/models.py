"""Typed configuration models for the service errors library."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = (
    Path.home() / ".config" / "service-errors" / "service-errors.yaml"
)

# YAML source path consulted when settings are instantiated.
CONFIG_PATH: ContextVar[Path] = ContextVar(
    "service_errors_config_path", default=DEFAULT_CONFIG_PATH
)

# Explicit environment mapping; ``None`` means the process environment.
ENVIRON: ContextVar[Mapping[str, str] | None] = ContextVar(
    "service_errors_environ", default=None
)


class MappingEnvSettingsSource(EnvSettingsSource):
    """Environment source that reads a supplied mapping instead of ``os.environ``."""

    def __init__(
        self, settings_cls: type[BaseSettings], *, environ: Mapping[str, str]
    ) -> None:
        self._environ = dict(environ)
        super().__init__(settings_cls)

    def _load_env_vars(self) -> Mapping[str, str | None]:
        loaded: dict[str, str | None] = {}
        for key, value in self._environ.items():
            if self.env_ignore_empty and value == "":
                continue
            if self.env_parse_none_str is not None and value == self.env_parse_none_str:
                value = None
            loaded[key if self.case_sensitive else key.lower()] = value
        return loaded


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "service-errors"
    environment: str = "dev"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


class TraceSettings(BaseModel):
    """Diagnostic trace capture settings.

    Capture runs on every error construction and detail attachment and costs
    time proportional to stack depth. ``limit`` caps the captured frames.
    """

    enabled: bool = True
    limit: int | None = Field(default=None, gt=0)


class ServiceErrorsSettings(BaseSettings):
    """Root settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_ERRORS_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    trace: TraceSettings = Field(default_factory=TraceSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        environ = ENVIRON.get()
        if environ is not None:
            env_settings = MappingEnvSettingsSource(settings_cls, environ=environ)
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )
