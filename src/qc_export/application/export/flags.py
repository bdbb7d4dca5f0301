"""Application export – flattening of per-record annotations into columns.

Each record may carry a list of annotations (QC flags). Every distinct
category name (detector) found across the whole batch becomes one output
column; a record's cell for a category joins the rendered text of all its
annotations in that category with ``|``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from qc_export.application.export.fields import Record

__all__ = [
    "AnnotationSchema",
    "annotation_columns",
    "collect_categories",
    "render_annotation",
]

SEPARATOR = "|"


@dataclass(frozen=True)
class AnnotationSchema:
    """Keys used to read annotations off records."""

    annotations_key: str = "qcFlags"
    category_key: str = "detector"
    kind_key: str = "flagType"
    from_key: str = "from"
    to_key: str = "to"
    record_id_key: str = "runNumber"

    def annotations_of(self, record: Record) -> list[Any]:
        return list(record.get(self.annotations_key) or ())


DEFAULT_SCHEMA = AnnotationSchema()


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _name_of(ref: Any) -> Any:
    if ref is None:
        return None
    return _get(ref, "name")


def _display(value: Any) -> str:
    return "null" if value is None else str(value)


def category_name(annotation: Any, schema: AnnotationSchema = DEFAULT_SCHEMA) -> str | None:
    name = _name_of(_get(annotation, schema.category_key))
    return str(name) if name else None


def render_annotation(annotation: Any, schema: AnnotationSchema = DEFAULT_SCHEMA) -> str:
    """``"<kind> ( from: <from> to: <to> )"``, kind empty when unnamed."""
    kind = _name_of(_get(annotation, schema.kind_key))
    return (
        f"{'' if kind is None else kind} "
        f"( from: {_display(_get(annotation, schema.from_key))} "
        f"to: {_display(_get(annotation, schema.to_key))} )"
    )


def collect_categories(records: Iterable[Record], schema: AnnotationSchema = DEFAULT_SCHEMA) -> list[str]:
    """Distinct category names across all records, in discovery order."""
    seen: dict[str, None] = {}
    for record in records:
        for annotation in schema.annotations_of(record):
            name = category_name(annotation, schema)
            if name is not None:
                seen.setdefault(name, None)
    return list(seen)


def annotation_columns(
    record: Record,
    categories: Iterable[str],
    schema: AnnotationSchema = DEFAULT_SCHEMA,
) -> dict[str, str]:
    """One cell per category; empty string where the record has none."""
    grouped: dict[str, list[str]] = {}
    for annotation in schema.annotations_of(record):
        name = category_name(annotation, schema)
        if name is None:
            continue
        grouped.setdefault(name, []).append(render_annotation(annotation, schema))
    return {name: SEPARATOR.join(grouped.get(name, ())) for name in categories}
