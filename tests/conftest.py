from __future__ import annotations

import pytest

from habit_api import settings as settings_module


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.setenv("ANALYTICS_TIMEZONE", "UTC")
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()
