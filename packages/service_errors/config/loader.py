"""Settings loading with deterministic precedence.

The cascade is always:
1) Init params (``cli_params``)
2) Environment variables
3) ``~/.config/service-errors/service-errors.yaml``
4) Model defaults

Environment variable format:
- Prefix: ``SERVICE_ERRORS_``
- Nested keys: ``__`` separator
- Example: ``SERVICE_ERRORS_TRACE__ENABLED=false`` -> ``trace.enabled = False``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import CONFIG_PATH, ENVIRON, ServiceErrorsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> ServiceErrorsSettings:
    """Load settings by applying the standard precedence cascade.

    ``environ`` is read in place of the process environment when given;
    ``os.environ`` itself is never modified.
    """
    path_token = CONFIG_PATH.set(
        Path(config_path) if config_path is not None else CONFIG_PATH.get()
    )
    environ_token = ENVIRON.set(dict(environ) if environ is not None else None)
    try:
        return ServiceErrorsSettings(**dict(cli_params or {}))
    finally:
        ENVIRON.reset(environ_token)
        CONFIG_PATH.reset(path_token)
