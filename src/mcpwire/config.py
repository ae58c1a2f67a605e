"""Validator settings and their YAML loader.

Example ``mcpwire.yaml``::

    peer: server
    log_level: info
    telemetry:
      enabled: true
      otlp_endpoint: ${OTLP_ENDPOINT}
"""

from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError

from mcpwire.catalog import PeerRole
from mcpwire.errors import SettingsError


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    export_to_console: bool = False
    otlp_endpoint: str | None = None


class ValidatorSettings(BaseModel):
    """Top-level settings consumed by ``mcpwire validate``."""

    peer: PeerRole | None = None
    log_level: Literal["debug", "info", "warning", "error"] = "warning"
    telemetry: TelemetrySettings | None = None


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ValidatorSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ValidatorSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.  An empty file
        yields the defaults.

        Raises:
            SettingsError: On read errors, YAML parse errors, or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("Settings YAML must be a mapping")

        try:
            return ValidatorSettings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc
