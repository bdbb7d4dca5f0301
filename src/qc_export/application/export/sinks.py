"""Application export – encoders and file sinks for CSV / JSON artifacts."""
from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Protocol, Sequence

from qc_export.application.export.fields import ExportFormat
from qc_export.observability.logging import get_logger

__all__ = [
    "ExportArtifact",
    "ExportSink",
    "ExportSinks",
    "FileSink",
    "encode_csv",
    "encode_json",
]

log = get_logger(__name__)

Rows = Sequence[Mapping[str, Any]]


class ExportSink(Protocol):
    """Materialises rows under a file name; may be sync or async."""

    def __call__(self, rows: Rows, filename: str, mime_type: str) -> Awaitable[None] | None: ...


def encode_csv(rows: Rows, *, delimiter: str = ",", bom: bool = False) -> bytes:
    """UTF-8 CSV; header is the union of row keys in first-seen order."""
    header: dict[str, None] = {}
    for row in rows:
        for key in row:
            header.setdefault(key, None)

    buf = io.StringIO()
    if bom:
        buf.write("\ufeff")  # BOM for Excel compatibility
    writer = csv.writer(buf, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL)
    writer.writerow(list(header))
    for row in rows:
        writer.writerow(["" if row.get(key) is None else row.get(key) for key in header])
    return buf.getvalue().encode("utf-8")


def encode_json(rows: Rows) -> bytes:
    return json.dumps([dict(row) for row in rows], default=str, ensure_ascii=False).encode("utf-8")


@dataclass(frozen=True)
class ExportArtifact:
    """A file written by a :class:`FileSink`."""

    path: Path
    mime_type: str
    size: int


class FileSink:
    """Writes the encoded rows to ``<directory>/<filename>``."""

    def __init__(self, directory: str | Path, encoder: Callable[[Rows], bytes]) -> None:
        self._directory = Path(directory)
        self._encoder = encoder
        self.last_artifact: ExportArtifact | None = None

    @property
    def directory(self) -> Path:
        return self._directory

    def __call__(self, rows: Rows, filename: str, mime_type: str) -> None:
        path = self._target(filename)
        content = self._encoder(rows)
        self._directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        self.last_artifact = ExportArtifact(path=path, mime_type=mime_type, size=len(content))
        log.debug("export.file_written", path=str(path), bytes=len(content))

    def _target(self, filename: str) -> Path:
        """Resolve *filename* inside the sink directory; bare names only."""
        bare = Path(filename).name == filename and "\\" not in filename
        if not bare or filename in ("", ".", ".."):
            raise ValueError(f"Export file name must be a bare file name, got {filename!r}")
        return self._directory / filename


@dataclass(frozen=True)
class ExportSinks:
    """CSV and JSON sinks, selected by :class:`ExportFormat`."""

    csv: ExportSink
    json: ExportSink

    @classmethod
    def to_directory(cls, directory: str | Path) -> "ExportSinks":
        return cls(csv=FileSink(directory, encode_csv), json=FileSink(directory, encode_json))

    def for_format(self, export_format: ExportFormat) -> ExportSink:
        return self.csv if export_format is ExportFormat.CSV else self.json
