"""Config – env-based export settings."""
from qc_export.config.errors import ConfigError, InvalidSettingValueError
from qc_export.config.settings import EnvSettingsLoader, ExportSettings, Settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "Settings",
]
