"""
Pytest configuration and shared fixtures for pnrparse tests.
"""

import os
from datetime import datetime, timezone

import pytest

# Fixed reference time so ages and inferred centuries are stable
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Reference time used for age and century inference."""
    return NOW


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PNR_* variables so settings use their defaults."""
    for key in list(os.environ):
        if key.startswith("PNR_"):
            monkeypatch.delenv(key)
    return monkeypatch
