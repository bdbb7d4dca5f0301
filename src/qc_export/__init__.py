"""
qc_export – export view-model for QC-annotated run records.

Import path convention::

    from qc_export.application.export import ExportConfigModel, ExportFormat
    from qc_export.kernel.types import RemoteData
    from qc_export.observability.observable import ObservableData
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
