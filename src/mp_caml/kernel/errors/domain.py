"""Domain errors – malformed query definitions."""

from __future__ import annotations

from typing import Any

from mp_caml.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query definition or property bag breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level failures, each a dict with a
    ``path`` (dotted location in the input) and a ``message``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @property
    def paths(self) -> list[str]:
        """Dotted input locations, in the order the problems were found."""
        return [e.get("path", "") for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
