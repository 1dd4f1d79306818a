"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── FormatError
    ├── ApplicationError         (application.py)
    │   ├── AuthError
    │   └── ConfigError          (fcm_push.config.validation)
    └── InfrastructureError      (infrastructure.py)
        ├── TransportError
        ├── SerializationError
        │   └── UnsupportedTargetError
        └── ParseError
"""

from fcm_push.kernel.errors.application import ApplicationError, AuthError
from fcm_push.kernel.errors.base import BaseError
from fcm_push.kernel.errors.domain import DomainError, FormatError
from fcm_push.kernel.errors.infrastructure import (
    InfrastructureError,
    ParseError,
    SerializationError,
    TransportError,
    UnsupportedTargetError,
)

__all__ = [
    "ApplicationError",
    "AuthError",
    "BaseError",
    "DomainError",
    "FormatError",
    "InfrastructureError",
    "ParseError",
    "SerializationError",
    "TransportError",
    "UnsupportedTargetError",
]
