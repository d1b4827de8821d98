"""Public API for shared configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    GenericsSettings,
    LoggingSettings,
    RenderSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "GenericsSettings",
    "LoggingSettings",
    "RenderSettings",
    "load_settings",
]
