"""Tests for StrvalSettings: CLI flags over env vars over defaults."""

import pytest

from strval.config.settings import StrvalSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STRVAL_VERBOSE", raising=False)
    monkeypatch.delenv("STRVAL_LOG_JSON", raising=False)


class TestStrvalSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = StrvalSettings.from_cli()
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = StrvalSettings.from_cli()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestEnvSource:
    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRVAL_LOG_JSON", "true")
        settings = StrvalSettings.from_cli()
        assert settings.log_json is True

    def test_unset_flags_do_not_mask_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRVAL_VERBOSE", "1")
        settings = StrvalSettings.from_cli(verbose=False)
        assert settings.verbose is True


class TestCliFlags:
    def test_cli_flags_override(self) -> None:
        settings = StrvalSettings.from_cli(verbose=True, log_json=True)
        assert settings.verbose is True
        assert settings.log_json is True
