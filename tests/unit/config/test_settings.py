"""Unit tests for ExportSettings and EnvSettingsLoader."""

from __future__ import annotations

import pytest

from qc_export.config import (
    ConfigError,
    EnvSettingsLoader,
    ExportSettings,
    InvalidSettingValueError,
)


class TestExportSettings:
    def test_defaults(self) -> None:
        s = ExportSettings()
        assert s.output_dir == "exports"
        assert s.annotation_page_limit == 1000
        assert s.annotation_concurrency == 1
        assert s.annotation_path == "/api/qcFlags/perDataPass"
        assert s.api_base_url == ""

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExportSettings(log_level="chatty")

    def test_log_level_case_insensitive(self) -> None:
        assert ExportSettings(log_level="debug").log_level == "debug"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("annotation_page_limit", 0),
            ("annotation_concurrency", 0),
            ("http_timeout", 0.0),
        ],
    )
    def test_rejects_non_positive(self, field: str, value: object) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ExportSettings(**{field: value})
        assert exc_info.value.setting_name == field
        assert isinstance(exc_info.value, ConfigError)


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        env = {
            "QC_EXPORT_OUTPUT_DIR": "/tmp/out",
            "QC_EXPORT_API_BASE_URL": "http://bookkeeping",
            "QC_EXPORT_ANNOTATION_CONCURRENCY": "4",
            "QC_EXPORT_HTTP_TIMEOUT": "2.5",
        }
        s = EnvSettingsLoader(env).load(ExportSettings)
        assert s.output_dir == "/tmp/out"
        assert s.api_base_url == "http://bookkeeping"
        assert s.annotation_concurrency == 4
        assert s.http_timeout == 2.5
        assert s.annotation_page_limit == 1000

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QC_EXPORT_LOG_LEVEL", "DEBUG")
        assert EnvSettingsLoader().load(ExportSettings).log_level == "DEBUG"

    def test_uncoercible_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"QC_EXPORT_ANNOTATION_PAGE_LIMIT": "many"}).load(ExportSettings)

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"QC_EXPORT_ANNOTATION_CONCURRENCY": "0"}).load(ExportSettings)
