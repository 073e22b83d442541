from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wenyan.config.settings import AppSettings


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path: Path, monkeypatch) -> Path:
    app_data = tmp_path / "appdata"
    monkeypatch.setenv("APPDATA", str(app_data))
    yield app_data
    startup = logging.getLogger("wenyan.startup")
    for handler in list(startup.handlers):
        startup.removeHandler(handler)
        handler.close()


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(tmp_path / "settings.ini")
