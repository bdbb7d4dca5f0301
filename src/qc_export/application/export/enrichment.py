"""Application export – record enrichment before formatting.

An enricher receives the records read from the items source and returns
the records to format. :class:`IdentityEnricher` hands them through;
:class:`AnnotationEnricher` replaces each record's annotations with the
ones fetched from an :class:`AnnotationSource` for the configured context
(data pass).
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Hashable, Protocol, Sequence

from qc_export.application.export.fields import Record
from qc_export.application.export.flags import DEFAULT_SCHEMA, AnnotationSchema
from qc_export.observability.logging import get_logger

__all__ = [
    "AnnotationEnricher",
    "AnnotationPage",
    "AnnotationSource",
    "IdentityEnricher",
    "RecordEnricher",
]

log = get_logger(__name__)

DEFAULT_PAGE_LIMIT = 1000


@dataclass(frozen=True)
class AnnotationPage:
    """One page of annotations returned by an :class:`AnnotationSource`."""

    items: Sequence[Any] = field(default_factory=tuple)
    total_count: int | None = None


class AnnotationSource(Protocol):
    async def fetch(self, context_id: Hashable, record_id: Any, limit: int) -> AnnotationPage: ...


class RecordEnricher(Protocol):
    async def enrich(self, records: Sequence[Record]) -> list[Record]: ...


class IdentityEnricher:
    """Returns the records unchanged."""

    async def enrich(self, records: Sequence[Record]) -> list[Record]:
        return list(records)


class AnnotationEnricher:
    """Fetches annotations per record and attaches them.

    Lookups run under a semaphore of ``max_concurrent`` slots (one by
    default, i.e. strictly one record after another in input order). A
    failed lookup, or a page that cannot be read, degrades to an empty
    annotation list for that record only; any other error aborts the whole
    batch. A falsy context id (``None``, ``""``, ``0``) counts as unset and
    leaves the records untouched.
    """

    def __init__(
        self,
        source: AnnotationSource,
        context_id: Hashable | None = None,
        *,
        limit: int = DEFAULT_PAGE_LIMIT,
        max_concurrent: int = 1,
        schema: AnnotationSchema = DEFAULT_SCHEMA,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._source = source
        self._context_id = context_id
        self._limit = limit
        self._max_concurrent = max_concurrent
        self._schema = schema

    @property
    def context_id(self) -> Hashable | None:
        return self._context_id

    def set_context_id(self, context_id: Hashable | None) -> None:
        self._context_id = context_id

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def max_concurrent(self) -> int:
        return self._max_concurrent

    async def enrich(self, records: Sequence[Record]) -> list[Record]:
        context_id = self._context_id
        if not context_id:
            return list(records)

        semaphore = asyncio.Semaphore(self._max_concurrent)
        key = self._schema.annotations_key
        id_key = self._schema.record_id_key

        async def _enrich_one(record: Record) -> Record:
            record_id = record.get(id_key)
            async with semaphore:
                annotations = await self._fetch(context_id, record_id)
            enriched = dict(record)
            enriched[key] = annotations
            return enriched

        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(_enrich_one(record)) for record in records]
        return [task.result() for task in tasks]

    async def _fetch(self, context_id: Hashable, record_id: Any) -> list[Any]:
        try:
            page = await self._source.fetch(context_id, record_id, self._limit)
            return list(page.items)
        except Exception as exc:  # noqa: BLE001
            log.warning(
                "export.annotations_fetch_failed",
                context_id=context_id,
                record_id=record_id,
                exc=repr(exc),
            )
            return []
