"""Config errors raised while loading :class:`ExportSettings`."""
from qc_export.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be built from their source."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be coerced or fails validation."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
