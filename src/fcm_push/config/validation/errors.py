"""Config validation errors.

Values of settings that look like credentials (``FCM_API_KEY``, a private
key, a token) never appear in messages or ``detail``.
"""
from fcm_push.kernel.errors import ApplicationError

_SECRET_MARKERS = ("key", "secret", "token", "password")


def _is_secret(setting_name: str) -> bool:
    name = setting_name.lower()
    return any(marker in name for marker in _SECRET_MARKERS)


class ConfigError(ApplicationError):
    """Settings or credentials cannot be used to build a client."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting, env variable or credential field is blank."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = "'***'" if _is_secret(setting_name) else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
