"""Config settings – 12-factor env-based configuration."""
from mp_caml.config.settings.base import Settings
from mp_caml.config.settings.compiler import CompilerSettings
from mp_caml.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["CompilerSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
