"""Config settings – Settings base class.

Every settings class reads ``CAML_<FIELD>`` variables unless it narrows
the namespace with its own ``_prefix`` (``CAML_PREVIEW_<FIELD>`` for
``_prefix = "CAML_PREVIEW"``).
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

ENV_PREFIX = "CAML"


@dataclasses.dataclass
class Settings:
    """Base class for settings loaded from ``CAML_*`` variables."""

    _prefix: ClassVar[str] = ENV_PREFIX

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*."""
        prefix = cls._prefix.strip("_").upper()
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        return {f.name: cls.env_key(f.name) for f in dataclasses.fields(cls)}

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation; raise ``InvalidSettingValueError``."""


__all__ = ["ENV_PREFIX", "Settings"]
