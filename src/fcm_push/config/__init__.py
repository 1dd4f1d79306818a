"""Config – 12-factor settings and loaders."""

from fcm_push.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FcmSettings,
    Settings,
    SettingsLoader,
)
from fcm_push.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FcmSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
