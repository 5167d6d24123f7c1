from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_perlver_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PERLVER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PERLVER_OUTPUT", raising=False)
