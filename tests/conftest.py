from __future__ import annotations

from pathlib import Path

import pytest

import frameviz.config as cfg


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # settings are cached module-global and read from cwd / env
    monkeypatch.delenv("FRAMEVIZ_INI", raising=False)
    monkeypatch.chdir(tmp_path)
    cfg._SETTINGS = None
    yield
    cfg._SETTINGS = None
