"""Config settings – CompilerSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_caml.application.caml import CompileContext
from mp_caml.config.settings.base import Settings
from mp_caml.config.validation import InvalidSettingValueError
from mp_caml.kernel.time import Clock
from mp_caml.observability.logging import JsonLoggerFactory

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class CompilerSettings(Settings):
    """Process-level settings, read from ``CAML_*`` variables.

    ``page_url`` stands in for the hosting page when queries are generated
    outside a browser (batch jobs, previews).
    """

    log_level: str = "INFO"
    json_logs: bool = True
    page_url: str = ""

    def _validate(self) -> None:
        if self.log_level.upper() not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level",
                self.log_level,
                f"expected one of {', '.join(_LEVELS)}",
                env_key=self.env_key("log_level"),
            )

    def configure_logging(self) -> None:
        JsonLoggerFactory.configure(getattr(logging, self.log_level.upper()), json=self.json_logs)

    def build_context(self, clock: Clock | None = None) -> CompileContext:
        return CompileContext.for_url(self.page_url, clock=clock)


__all__ = ["CompilerSettings"]
