"""Observability – change notification and structured logging."""
from qc_export.observability.observable import Observable, ObservableData, Subscription

__all__ = ["Observable", "ObservableData", "Subscription"]
