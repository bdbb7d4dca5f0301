"""HTTP adapter – QC flags per data pass, read over the REST API."""
from __future__ import annotations

from typing import Any, Hashable

from qc_export.adapters.http.client import HttpxHttpClient
from qc_export.application.export.enrichment import AnnotationPage
from qc_export.kernel.errors import ExternalServiceError

DEFAULT_PATH = "/api/qcFlags/perDataPass"


class HttpAnnotationSource:
    """Reads one page of QC flags for a run within a data pass.

    Expects the paginated envelope ``{"data": [...], "meta": {"page":
    {"totalCount": n}}}``; ``meta`` is optional.
    """

    def __init__(self, client: HttpxHttpClient, path: str = DEFAULT_PATH) -> None:
        self._client = client
        self._path = path

    async def fetch(self, context_id: Hashable, record_id: Any, limit: int) -> AnnotationPage:
        params = {
            "dataPassId": context_id,
            "runNumber": record_id,
            "page[limit]": limit,
        }
        body = await self._client.get_json(self._path, params=params)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise ExternalServiceError(
                service=self._path, message=f"Unexpected response body from {self._path}"
            )
        page = (body.get("meta") or {}).get("page") or {}
        total_count = page.get("totalCount")
        return AnnotationPage(items=tuple(data), total_count=total_count)


__all__ = ["DEFAULT_PATH", "HttpAnnotationSource"]
