"""Application export – ExportFormat, field projection and formatters."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

__all__ = [
    "ExportFormat",
    "FieldFormatter",
    "FormatterRegistry",
    "Record",
    "project_fields",
    "resolve_formatter",
]

Record = Mapping[str, Any]
FieldFormatter = Callable[[Any, Record], Any]
FormatterRegistry = Mapping[str, Any]


class ExportFormat(str, Enum):
    JSON = "JSON"
    CSV = "CSV"

    @classmethod
    def _missing_(cls, value: object) -> "ExportFormat | None":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None

    @property
    def extension(self) -> str:
        return self.value.lower()

    @property
    def mime_type(self) -> str:
        if self is ExportFormat.CSV:
            return "text/csv;charset=utf-8;"
        return "application/json"


def _identity(value: Any, record: Record) -> Any:  # noqa: ARG001
    return value


def resolve_formatter(registry: FormatterRegistry | None, key: str) -> FieldFormatter:
    """Return the formatter registered for *key*, or pass-through.

    An entry is either the formatter itself or a column configuration that
    carries one under ``export_format`` (attribute or mapping key).
    """
    if not registry:
        return _identity
    entry = registry.get(key)
    if entry is None:
        return _identity
    if isinstance(entry, Mapping):
        entry = entry.get("export_format")
    elif not callable(entry):
        entry = getattr(entry, "export_format", None)
    return entry if callable(entry) else _identity


def project_fields(
    record: Record,
    selected_fields: Sequence[str] | Iterable[str],
    formatters: FormatterRegistry | None = None,
) -> dict[str, Any]:
    """Pick *selected_fields* from *record* in selection order and format them.

    Keys absent from the record are dropped. Each formatter sees the raw
    value and the whole original record.
    """
    projected: dict[str, Any] = {}
    for key in selected_fields:
        if key in record and key not in projected:
            projected[key] = resolve_formatter(formatters, key)(record[key], record)
    return projected
