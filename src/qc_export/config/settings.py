"""Config – ExportSettings and EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, ClassVar, Mapping, TypeVar

from qc_export.config.errors import ConfigError, InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Runtime knobs for export creation and QC flag lookups."""

    _prefix: ClassVar[str] = "QC_EXPORT"

    output_dir: str = "exports"
    api_base_url: str = ""
    annotation_path: str = "/api/qcFlags/perDataPass"
    annotation_page_limit: int = 1000
    annotation_concurrency: int = 1
    http_timeout: float = 10.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.annotation_page_limit < 1:
            raise InvalidSettingValueError(
                "annotation_page_limit", self.annotation_page_limit, "must be >= 1"
            )
        if self.annotation_concurrency < 1:
            raise InvalidSettingValueError(
                "annotation_concurrency", self.annotation_concurrency, "must be >= 1"
            )
        if self.http_timeout <= 0:
            raise InvalidSettingValueError("http_timeout", self.http_timeout, "must be > 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


T = TypeVar("T", bound=Settings)


class EnvSettingsLoader:
    """Load settings from OS environment variables (``<PREFIX>_<FIELD>``)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        return value


__all__ = ["EnvSettingsLoader", "ExportSettings", "Settings"]
