"""Config validation."""
from mp_caml.config.validation.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
