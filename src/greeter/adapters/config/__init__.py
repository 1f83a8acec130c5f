"""Configuration adapter - models, loading, overrides, and display.

Contents:
    * :mod:`.models` - Validated ``[server]`` and ``[logging]`` sections
    * :mod:`.loader` - Layered loading with caching and profiles
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.display` - Configuration display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path, get_user_config_path
from .models import AppConfig, LoggingConfigModel, ServerConfigModel
from .overrides import apply_overrides

__all__ = [
    "AppConfig",
    "LoggingConfigModel",
    "ServerConfigModel",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "get_user_config_path",
]
