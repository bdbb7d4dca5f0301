"""HTTP adapter – async HTTP client and remote QC flag source."""
from qc_export.adapters.http.client import HttpClient, HttpxHttpClient
from qc_export.adapters.http.annotation_source import HttpAnnotationSource

__all__ = ["HttpAnnotationSource", "HttpClient", "HttpxHttpClient"]
