"""Config settings – 12-factor env-based configuration."""
from fcm_push.config.settings.base import LEGACY_SEND_URL, V1_SEND_URL_TEMPLATE, FcmSettings, Settings
from fcm_push.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FcmSettings",
    "LEGACY_SEND_URL",
    "Settings",
    "SettingsLoader",
    "V1_SEND_URL_TEMPLATE",
]
