"""Tests for pydantic-settings-backed configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.service_errors.config import ServiceErrorsSettings, TraceSettings, load_settings
from packages.service_errors.config import models


def test_load_settings_uses_precedence_cascade(tmp_path: Path) -> None:
    """Init params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "service-errors.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: from-yaml",
                "trace:",
                "  limit: 5",
            ]
        ),
        encoding="utf-8",
    )

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        environ={
            "SERVICE_ERRORS_LOGGING__LEVEL": "ERROR",
            "SERVICE_ERRORS_TRACE__ENABLED": "false",
        },
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "from-yaml"
    assert settings.trace.enabled is False
    assert settings.trace.limit == 5


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "missing.yaml", environ={})

    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.logging.service == "service-errors"
    assert settings.trace.enabled is True
    assert settings.trace.limit is None


def test_load_settings_ignores_process_environment_when_environ_given(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An explicit environ mapping should replace the process environment as a source."""
    monkeypatch.setenv("SERVICE_ERRORS_LOGGING__LEVEL", "CRITICAL")

    settings = load_settings(config_path=tmp_path / "missing.yaml", environ={})

    assert settings.logging.level == "INFO"
    assert os.environ["SERVICE_ERRORS_LOGGING__LEVEL"] == "CRITICAL"


def test_load_settings_leaves_os_environ_untouched_during_load(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Other readers of os.environ should see it unchanged while settings load."""
    monkeypatch.setenv("SERVICE_ERRORS_LOGGING__LEVEL", "CRITICAL")
    monkeypatch.setenv("HOME", "/home/service")
    seen: dict[str, str | None] = {}
    real_source = models.YamlConfigSettingsSource

    def recording_source(*args: object, **kwargs: object) -> object:
        seen["home"] = os.environ.get("HOME")
        seen["level"] = os.environ.get("SERVICE_ERRORS_LOGGING__LEVEL")
        return real_source(*args, **kwargs)

    monkeypatch.setattr(models, "YamlConfigSettingsSource", recording_source)

    settings = load_settings(
        config_path=tmp_path / "missing.yaml",
        environ={"SERVICE_ERRORS_LOGGING__LEVEL": "ERROR"},
    )

    assert settings.logging.level == "ERROR"
    assert seen == {"home": "/home/service", "level": "CRITICAL"}


def test_load_settings_reads_process_environment_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an environ mapping the process environment should apply."""
    monkeypatch.setenv("SERVICE_ERRORS_TRACE__LIMIT", "3")

    settings = load_settings(config_path=tmp_path / "missing.yaml")

    assert settings.trace.limit == 3


def test_trace_limit_must_be_positive() -> None:
    """A non-positive trace limit should be rejected."""
    with pytest.raises(ValidationError):
        TraceSettings(limit=0)


def test_invalid_log_level_is_rejected() -> None:
    """Unknown log levels should fail validation."""
    with pytest.raises(ValidationError):
        ServiceErrorsSettings.model_validate({"logging": {"level": "LOUD"}})


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    """Lower-case level names from the environment should normalize to upper case."""
    settings = load_settings(
        config_path=tmp_path / "missing.yaml",
        environ={"SERVICE_ERRORS_LOGGING__LEVEL": "debug"},
    )

    assert settings.logging.level == "DEBUG"
    assert ServiceErrorsSettings.model_validate(
        {"logging": {"level": " Warning "}}
    ).logging.level == "WARNING"
