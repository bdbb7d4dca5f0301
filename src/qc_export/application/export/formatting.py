"""Application export – shared record formatting routine."""
from __future__ import annotations

from typing import Any, Sequence

from qc_export.application.export.fields import FormatterRegistry, Record, project_fields
from qc_export.application.export.flags import (
    DEFAULT_SCHEMA,
    AnnotationSchema,
    annotation_columns,
    collect_categories,
)

__all__ = ["format_records"]


def format_records(
    records: Sequence[Record],
    selected_fields: Sequence[str],
    formatters: FormatterRegistry | None = None,
    schema: AnnotationSchema = DEFAULT_SCHEMA,
) -> list[dict[str, Any]]:
    """Turn records into flat rows.

    Row keys are the selected fields present on the record followed by one
    column per category discovered across the batch. A category column
    sharing a name with a selected field overwrites that field's value.
    """
    categories = collect_categories(records, schema)
    rows: list[dict[str, Any]] = []
    for record in records:
        row = project_fields(record, selected_fields, formatters)
        row.update(annotation_columns(record, categories, schema))
        rows.append(row)
    return rows
