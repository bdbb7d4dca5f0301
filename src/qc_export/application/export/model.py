"""Application export – export configuration view-models.

:class:`ExportConfigModel` owns the user's export configuration (selected
fields, selected format) and turns the current snapshot of an items source
into a CSV or JSON artifact. :class:`EnrichedExportConfigModel` plugs an
:class:`AnnotationEnricher` into the same pipeline so each record carries
the QC flags of a given data pass before it is formatted.
"""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Hashable, Iterable, Mapping, Sequence

from qc_export.application.export.enrichment import (
    DEFAULT_PAGE_LIMIT,
    AnnotationEnricher,
    AnnotationSource,
    IdentityEnricher,
    RecordEnricher,
)
from qc_export.application.export.fields import ExportFormat, FormatterRegistry, Record
from qc_export.application.export.flags import DEFAULT_SCHEMA, AnnotationSchema
from qc_export.application.export.formatting import format_records
from qc_export.application.export.sinks import ExportSinks
from qc_export.kernel.errors import EnrichmentError, ExportError, NoDataFoundError
from qc_export.kernel.types import Failure, RemoteData
from qc_export.observability.logging import get_logger
from qc_export.observability.observable import Listener, Observable, ObservableData, Subscription

__all__ = ["EnrichedExportConfigModel", "ExportConfigModel", "ItemsSource", "OnError"]

log = get_logger(__name__)

DEFAULT_OUTPUT_DIR = "exports"

ItemsSource = ObservableData[RemoteData[Sequence[Record]]]
OnError = Callable[[Failure], Any]


def _option_value(option: Any) -> str:
    if isinstance(option, str):
        return option
    if isinstance(option, Mapping):
        return str(option["value"])
    return str(option.value)


class ExportConfigModel:
    """Export configuration and creation for a source of records.

    Two notification channels are exposed: :attr:`changes` fires on every
    configuration change and when an export is skipped for lack of data;
    :attr:`visual_changes` fires only for changes that affect how the export
    controls are drawn (format and field selection).
    """

    def __init__(
        self,
        items_source: ItemsSource | None = None,
        *,
        sinks: ExportSinks | None = None,
        enricher: RecordEnricher | None = None,
        schema: AnnotationSchema = DEFAULT_SCHEMA,
        on_close: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        self._items_source: ItemsSource = (
            items_source if items_source is not None else ObservableData(RemoteData.not_asked())
        )
        self._selected_fields: list[str] = []
        self._selected_format = ExportFormat.JSON
        self._changes = Observable()
        self._visual_changes = Observable()
        self._sinks = sinks if sinks is not None else ExportSinks.to_directory(DEFAULT_OUTPUT_DIR)
        self._enricher: RecordEnricher = enricher if enricher is not None else IdentityEnricher()
        self._schema = schema
        self._on_close = on_close

    async def __aenter__(self) -> "ExportConfigModel":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release resources owned by the model (e.g. an HTTP client); idempotent."""
        on_close, self._on_close = self._on_close, None
        if on_close is not None:
            await on_close()

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    @property
    def changes(self) -> Observable:
        return self._changes

    @property
    def visual_changes(self) -> Observable:
        return self._visual_changes

    def subscribe(self, listener: Listener) -> Subscription:
        """Shortcut for ``changes.subscribe``."""
        return self._changes.subscribe(listener)

    def _notify_configuration_change(self) -> None:
        self._changes.notify()
        self._visual_changes.notify()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def items_source(self) -> ItemsSource:
        return self._items_source

    def set_items_source(self, items_source: ItemsSource) -> None:
        self._items_source = items_source

    @property
    def enricher(self) -> RecordEnricher:
        return self._enricher

    def get_selected_format(self) -> ExportFormat:
        return self._selected_format

    def set_selected_format(self, export_format: ExportFormat | str) -> None:
        self._selected_format = ExportFormat(export_format)
        self._notify_configuration_change()

    def get_selected_fields(self) -> list[str]:
        return list(self._selected_fields)

    def set_selected_fields(self, selection: Iterable[Any]) -> None:
        """Replace the selection with the ``value`` of each selected option."""
        self._selected_fields = [_option_value(option) for option in selection]
        self._notify_configuration_change()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    async def create_export(
        self,
        file_name: str,
        formatters: FormatterRegistry | None = None,
        on_error: OnError | None = None,
    ) -> list[dict[str, Any]] | None:
        """Build the export from the current items snapshot and hand it to a sink.

        Returns the rows handed to the sink, or ``None`` when the export was
        skipped (no data, or enrichment failed); the reason is then reported
        through *on_error*.
        """
        snapshot = self._items_source.get_current()
        records = list(snapshot.payload) if snapshot.is_success() else []
        if not records:
            log.info("export.skipped", reason="no_data", file_name=file_name)
            self._report(on_error, NoDataFoundError())
            self._changes.notify()
            return None

        selected_fields = list(self._selected_fields)
        export_format = self._selected_format

        try:
            records = await self._enricher.enrich(records)
        except Exception as exc:  # noqa: BLE001
            log.error("export.enrichment_failed", file_name=file_name, exc_info=exc)
            self._report(on_error, EnrichmentError(cause=exc))
            return None

        rows = format_records(records, selected_fields, formatters, self._schema)
        sink = self._sinks.for_format(export_format)
        result = sink(rows, f"{file_name}.{export_format.extension}", export_format.mime_type)
        if inspect.isawaitable(result):
            await result

        log.info(
            "export.created",
            file_name=file_name,
            format=export_format.value,
            rows=len(rows),
            columns=len(rows[0]) if rows else 0,
        )
        return rows

    @staticmethod
    def _report(on_error: OnError | None, error: ExportError) -> None:
        if on_error is not None:
            on_error(RemoteData.failure([error.to_error_detail()]))


class EnrichedExportConfigModel(ExportConfigModel):
    """Export model whose records are enriched with per-record QC flags.

    The data pass is the enrichment context: while it is unset (any falsy
    id) the model behaves exactly like :class:`ExportConfigModel`.
    """

    def __init__(
        self,
        items_source: ItemsSource | None = None,
        context_id: Hashable | None = None,
        *,
        annotation_source: AnnotationSource,
        limit: int = DEFAULT_PAGE_LIMIT,
        max_concurrent: int = 1,
        sinks: ExportSinks | None = None,
        schema: AnnotationSchema = DEFAULT_SCHEMA,
        on_close: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        self._annotation_enricher = AnnotationEnricher(
            annotation_source,
            context_id,
            limit=limit,
            max_concurrent=max_concurrent,
            schema=schema,
        )
        super().__init__(
            items_source,
            sinks=sinks,
            enricher=self._annotation_enricher,
            schema=schema,
            on_close=on_close,
        )

    @property
    def context_id(self) -> Hashable | None:
        return self._annotation_enricher.context_id

    def set_context_id(self, context_id: Hashable | None) -> None:
        self._annotation_enricher.set_context_id(context_id)
