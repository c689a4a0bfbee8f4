"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (mp_caml.config.validation)

The CAML compiler itself never raises; these errors surface only while raw
input is being turned into query value objects.
"""

from mp_caml.kernel.errors.application import ApplicationError
from mp_caml.kernel.errors.base import BaseError
from mp_caml.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
