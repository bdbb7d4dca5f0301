"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ExportError
    │       ├── NoDataFoundError
    │       └── EnrichmentError
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from qc_export.kernel.errors.application import (
    ApplicationError,
    EnrichmentError,
    ExportError,
    NoDataFoundError,
)
from qc_export.kernel.errors.base import BaseError
from qc_export.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "EnrichmentError",
    "ExportError",
    "ExternalServiceError",
    "InfrastructureError",
    "NoDataFoundError",
    "TimeoutError",
]
