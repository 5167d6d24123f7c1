from __future__ import annotations

import pytest

from perlver.config import load_settings


def test_defaults() -> None:
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.output == "text"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERLVER_LOG_LEVEL", "debug")
    monkeypatch.setenv("PERLVER_OUTPUT", " JSON ")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.output == "json"


def test_rejects_unknown_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERLVER_OUTPUT", "yaml")
    with pytest.raises(ValueError, match="PERLVER_OUTPUT"):
        load_settings()
