"""Application-layer errors raised around export construction."""

from __future__ import annotations

from typing import Any

from qc_export.kernel.errors.base import BaseError
from qc_export.kernel.types.remote_data import ErrorDetail


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ExportError(ApplicationError):
    """An export could not be produced.

    Carries the user-facing ``title`` shown next to the export controls;
    ``message`` doubles as the detail line.
    """

    default_code = "export_error"
    default_title = "Export failed"
    default_message = "Unable to create export"

    def __init__(
        self,
        message: str | None = None,
        *,
        title: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or self.default_message, **kwargs)
        self.title = title or self.default_title

    def to_error_detail(self) -> ErrorDetail:
        return ErrorDetail(title=self.title, detail=self.message)


class NoDataFoundError(ExportError):
    """The items source is not loaded or holds no records."""

    default_code = "no_data_found"
    default_title = "No data found"
    default_message = "No items were found with the provided filters"


class EnrichmentError(ExportError):
    """Record enrichment failed as a whole."""

    default_code = "enrichment_failed"
    default_title = "QC flags fetch failed"
    default_message = "Unable to fetch QC flags for export"


__all__ = [
    "ApplicationError",
    "EnrichmentError",
    "ExportError",
    "NoDataFoundError",
]
