"""Tests for OncoregSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from oncoreg.config.models import RecordConfig
from oncoreg.config.settings import OncoregSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = OncoregSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.record == RecordConfig()
        assert settings.record.fail_fast is False
        assert settings.record.require_avatar_id is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = OncoregSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "oncoreg.toml"
        toml.write_text("[record]\nfail_fast = true\n")
        settings = OncoregSettings.from_cli(start=tmp_path)
        assert settings.record.fail_fast is True
        assert settings.record.require_avatar_id is False
        assert settings.config_path == toml

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "oncoreg.toml").write_text("")
        settings = OncoregSettings.from_cli(start=tmp_path)
        assert settings.record == RecordConfig()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[record]\nrequire_avatar_id = true\n")
        settings = OncoregSettings.from_cli(config_path=str(custom))
        assert settings.record.require_avatar_id is True
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "oncoreg.toml").write_text("[record\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            OncoregSettings.from_cli(start=tmp_path)


class TestEnvAndFlags:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "oncoreg.toml").write_text("[record]\nfail_fast = false\n")
        monkeypatch.setenv("ONCOREG_RECORD__FAIL_FAST", "true")
        settings = OncoregSettings.from_cli(start=tmp_path)
        assert settings.record.fail_fast is True

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = OncoregSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "oncoreg.toml").write_text("quiet = true\n")
        settings = OncoregSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False
