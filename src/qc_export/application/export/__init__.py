"""Application export – export configuration, formatting and sinks."""
from qc_export.application.export.fields import ExportFormat, project_fields, resolve_formatter
from qc_export.application.export.flags import (
    AnnotationSchema,
    annotation_columns,
    collect_categories,
    render_annotation,
)
from qc_export.application.export.formatting import format_records
from qc_export.application.export.sinks import (
    ExportArtifact,
    ExportSink,
    ExportSinks,
    FileSink,
    encode_csv,
    encode_json,
)
from qc_export.application.export.enrichment import (
    AnnotationEnricher,
    AnnotationPage,
    AnnotationSource,
    IdentityEnricher,
    RecordEnricher,
)
from qc_export.application.export.model import (
    EnrichedExportConfigModel,
    ExportConfigModel,
    ItemsSource,
    OnError,
)

__all__ = [
    "AnnotationEnricher",
    "AnnotationPage",
    "AnnotationSchema",
    "AnnotationSource",
    "EnrichedExportConfigModel",
    "ExportArtifact",
    "ExportConfigModel",
    "ExportFormat",
    "ExportSink",
    "ExportSinks",
    "FileSink",
    "IdentityEnricher",
    "ItemsSource",
    "OnError",
    "RecordEnricher",
    "annotation_columns",
    "collect_categories",
    "encode_csv",
    "encode_json",
    "format_records",
    "project_fields",
    "render_annotation",
]
