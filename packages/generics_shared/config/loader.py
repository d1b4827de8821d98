"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI / init params
2) Environment variables
3) YAML config file (``~/.config/generics/generics.yaml`` by default)
4) Model defaults

Environment variable format:
- Prefix: ``GENERICS_``
- Nested keys: ``__`` separator
- Example: ``GENERICS_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import GenericsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> GenericsSettings:
    """Load settings, optionally reading YAML from ``config_path``.

    A missing YAML file is treated as empty.
    """
    init_values = dict(cli_params) if cli_params is not None else {}
    if config_path is None:
        return GenericsSettings(**init_values)

    class _PathSettings(GenericsSettings):
        model_config = SettingsConfigDict(yaml_file=Path(config_path))

    return _PathSettings(**init_values)
