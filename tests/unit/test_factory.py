"""Unit tests for build_export_model wiring."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest
import respx
import structlog

from qc_export.application.export import EnrichedExportConfigModel, ExportConfigModel
from qc_export.adapters.http import HttpxHttpClient
from qc_export.config import ExportSettings
from qc_export import factory
from qc_export.factory import build_export_model
from qc_export.kernel.types import RemoteData
from qc_export.observability import ObservableData


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class RecordingClient:
    instances: list["RecordingClient"] = []

    def __init__(self, base_url: str, timeout: float) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.closed = False
        RecordingClient.instances.append(self)

    async def aclose(self) -> None:
        self.closed = True


def test_without_api_builds_plain_model(tmp_path: Path) -> None:
    model = build_export_model(ExportSettings(output_dir=str(tmp_path)))
    assert type(model) is ExportConfigModel


def test_with_api_builds_enriched_model(tmp_path: Path) -> None:
    settings = ExportSettings(output_dir=str(tmp_path), api_base_url="http://bk", annotation_concurrency=3)
    model = build_export_model(settings, context_id=9)
    assert isinstance(model, EnrichedExportConfigModel)
    assert model.context_id == 9
    assert model.enricher.max_concurrent == 3
    assert model.enricher.limit == 1000
    asyncio.run(model.aclose())


@respx.mock
def test_end_to_end_csv_export(tmp_path: Path) -> None:
    respx.get("http://bk/api/qcFlags/perDataPass").mock(
        return_value=httpx.Response(
            200,
            json={"data": [{"detector": {"name": "TPC"}, "flagType": {"name": "BAD"}, "from": 10, "to": 20}]},
        )
    )
    items = ObservableData(RemoteData.success([{"runNumber": 1, "fill": 4}]))

    async def run() -> None:
        async with HttpxHttpClient("http://bk") as client:
            model = build_export_model(
                ExportSettings(output_dir=str(tmp_path)),
                items,
                context_id=2,
                client=client,
                configure_logging=False,
            )
            model.set_selected_fields([SimpleNamespace(value="runNumber")])
            model.set_selected_format("CSV")
            await model.create_export("runs")

    asyncio.run(run())
    lines = (tmp_path / "runs.csv").read_text(encoding="utf-8").splitlines()
    assert lines == ["runNumber,TPC", "1,BAD ( from: 10 to: 20 )"]


def test_json_file_written(tmp_path: Path) -> None:
    items = ObservableData(RemoteData.success([{"runNumber": 1}]))
    model = build_export_model(ExportSettings(output_dir=str(tmp_path)), items, configure_logging=False)
    model.set_selected_fields(["runNumber"])
    asyncio.run(model.create_export("runs"))
    assert json.loads((tmp_path / "runs.json").read_text()) == [{"runNumber": 1}]


def test_log_level_applied(tmp_path: Path) -> None:
    build_export_model(ExportSettings(output_dir=str(tmp_path), log_level="WARNING"))
    assert logging.getLogger().level == logging.WARNING


def test_logging_left_alone_on_request(tmp_path: Path) -> None:
    root = logging.getLogger()
    handlers = list(root.handlers)
    build_export_model(ExportSettings(output_dir=str(tmp_path)), configure_logging=False)
    assert root.handlers == handlers


def test_owned_client_closed_with_model(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    RecordingClient.instances.clear()
    monkeypatch.setattr(factory, "HttpxHttpClient", RecordingClient)
    settings = ExportSettings(output_dir=str(tmp_path), api_base_url="http://bk", http_timeout=3.0)

    async def run() -> None:
        async with build_export_model(settings, context_id=1):
            pass

    asyncio.run(run())
    (client,) = RecordingClient.instances
    assert client.base_url == "http://bk"
    assert client.timeout == 3.0
    assert client.closed


def test_caller_client_not_closed(tmp_path: Path) -> None:
    client = RecordingClient("http://bk", 1.0)
    model = build_export_model(ExportSettings(output_dir=str(tmp_path)), client=client)  # type: ignore[arg-type]
    asyncio.run(model.aclose())
    assert isinstance(model, EnrichedExportConfigModel)
    assert not client.closed
