"""Config – engine settings and their loaders."""

from listquery.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsLoader,
)
from listquery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsLoader",
]
