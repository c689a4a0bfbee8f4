"""Root error class for the mp-caml error hierarchy.

Errors here describe bad *input* (a malformed property bag, an unusable
``CAML_*`` variable). Compiling a well-formed ``QuerySettings`` never
raises.
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, merged into structured log events.
        cause: Original exception that triggered this error.
    """

    default_code: str = "caml_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event, e.g. ``logger.warning(event, **err.log_fields())``."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        fields.update(self.detail)
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields


__all__ = ["BaseError"]
