"""Kernel value types."""
from qc_export.kernel.types.remote_data import (
    ErrorDetail,
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
)

__all__ = ["ErrorDetail", "Failure", "Loading", "NotAsked", "RemoteData", "Success"]
