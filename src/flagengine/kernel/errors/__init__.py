"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidArgumentError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError       (application.py)
    └── InfrastructureError    (infrastructure.py)
"""

from flagengine.kernel.errors.application import ApplicationError
from flagengine.kernel.errors.base import BaseError
from flagengine.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)
from flagengine.kernel.errors.infrastructure import InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidArgumentError",
    "NotFoundError",
    "ValidationError",
]
