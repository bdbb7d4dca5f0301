"""Wiring of export models from :class:`ExportSettings`."""
from __future__ import annotations

from typing import Hashable

from qc_export.adapters.http import HttpAnnotationSource, HttpxHttpClient
from qc_export.application.export import (
    EnrichedExportConfigModel,
    ExportConfigModel,
    ExportSinks,
    ItemsSource,
)
from qc_export.config import ExportSettings
from qc_export.observability.logging import JsonLoggerFactory


def build_export_model(
    settings: ExportSettings,
    items_source: ItemsSource | None = None,
    context_id: Hashable | None = None,
    client: HttpxHttpClient | None = None,
    *,
    configure_logging: bool = True,
) -> ExportConfigModel:
    """Build an export model writing to ``settings.output_dir``.

    With an HTTP client (given, or built from ``settings.api_base_url``) the
    model enriches records with QC flags; without one it exports the records
    as they are. A client built here is owned by the model and closed by
    :meth:`ExportConfigModel.aclose`; a client passed in stays the caller's.
    Unless *configure_logging* is false, root logging is set up as JSON at
    ``settings.log_level``.
    """
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)

    sinks = ExportSinks.to_directory(settings.output_dir)
    owned_client: HttpxHttpClient | None = None
    if client is None and settings.api_base_url:
        client = owned_client = HttpxHttpClient(settings.api_base_url, timeout=settings.http_timeout)
    if client is None:
        return ExportConfigModel(items_source, sinks=sinks)

    return EnrichedExportConfigModel(
        items_source,
        context_id,
        annotation_source=HttpAnnotationSource(client, settings.annotation_path),
        limit=settings.annotation_page_limit,
        max_concurrent=settings.annotation_concurrency,
        sinks=sinks,
        on_close=owned_client.aclose if owned_client is not None else None,
    )


__all__ = ["build_export_model"]
