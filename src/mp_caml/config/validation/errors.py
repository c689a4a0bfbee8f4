"""Config validation errors.

Each error names the environment variable that caused it (``env_key``) so a
failing deployment can be fixed without reading the settings class.
"""
from __future__ import annotations

from typing import Any

from mp_caml.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when compiler settings are invalid or could not be loaded."""

    default_code = "config_error"

    def __init__(self, message: str, *, env_key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.env_key = env_key
        if env_key is not None:
            self.detail.setdefault("env_key", env_key)


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Required variable {env_key} is not set", env_key=env_key)


class InvalidSettingValueError(ConfigError):
    """A variable is present but its value cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, env_key: str | None = None) -> None:
        where = env_key or setting_name
        super().__init__(f"{where}={value!r} is invalid: {reason}", env_key=env_key)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
