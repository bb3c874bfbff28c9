from __future__ import annotations

import pytest

from textpos.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    # Tests must not depend on the caller's environment.
    monkeypatch.delenv("TEXTPOS_CHECKED", raising=False)
    monkeypatch.delenv("TEXTPOS_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
