"""Tests for the settings loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mcpwire.catalog import PeerRole
from mcpwire.config import SettingsLoader, ValidatorSettings
from mcpwire.errors import SettingsError
from mcpwire.validator import MessageValidator

if TYPE_CHECKING:
    from pathlib import Path


class TestSettingsLoader:
    def test_full_file(self, tmp_path: Path) -> None:
        f = tmp_path / "mcpwire.yaml"
        f.write_text(
            "peer: server\n"
            "log_level: info\n"
            "telemetry:\n"
            "  enabled: true\n"
            "  otlp_endpoint: http://collector:4317\n"
        )
        settings = SettingsLoader(f).load()

        assert settings.peer is PeerRole.SERVER
        assert settings.log_level == "info"
        assert settings.telemetry is not None
        assert settings.telemetry.enabled is True
        assert settings.telemetry.otlp_endpoint == "http://collector:4317"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert SettingsLoader(f).load() == ValidatorSettings()

    def test_env_var_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCPWIRE_PEER", "client")
        f = tmp_path / "env.yaml"
        f.write_text("peer: ${MCPWIRE_PEER}\n")
        assert SettingsLoader(f).load().peer is PeerRole.CLIENT

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsError, match="Cannot read"):
            SettingsLoader(tmp_path / "missing.yaml").load()

    def test_yaml_error(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("peer: [unclosed\n")
        with pytest.raises(SettingsError, match="YAML parse error"):
            SettingsLoader(f).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(SettingsError, match="must be a mapping"):
            SettingsLoader(f).load()

    def test_invalid_value(self, tmp_path: Path) -> None:
        f = tmp_path / "peer.yaml"
        f.write_text("peer: gateway\n")
        with pytest.raises(SettingsError):
            SettingsLoader(f).load()


class TestValidatorFromSettings:
    def test_peer_carried_over(self) -> None:
        validator = MessageValidator.from_settings(ValidatorSettings(peer=PeerRole.CLIENT))
        assert validator.peer is PeerRole.CLIENT
