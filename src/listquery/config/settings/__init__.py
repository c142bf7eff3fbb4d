"""Config settings – 12-factor env-based configuration."""
from listquery.config.settings.base import Settings
from listquery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from listquery.config.settings.query import QuerySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "QuerySettings", "Settings", "SettingsLoader"]
