"""Config – settings loading and web-part property mapping."""
from mp_caml.config.query_settings import QuerySettingsMapper
from mp_caml.config.settings import (
    CompilerSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from mp_caml.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "CompilerSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettingsMapper",
    "Settings",
    "SettingsLoader",
]
