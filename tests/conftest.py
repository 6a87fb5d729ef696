import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Run every test against the default settings unless it sets its own."""
    monkeypatch.delenv("PINSCORE_TENTH_FRAME_BONUS", raising=False)
    monkeypatch.delenv("PINSCORE_LOG_LEVEL", raising=False)
    yield
