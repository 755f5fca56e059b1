# tests/conftest.py
from __future__ import annotations

import pytest

from bulk_units.core.logging_utils import reset_debug_logger
from bulk_units.core.session import BulkSetupSession
from tests.utils import make_config


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("BULKUNITS_MAX_TOTAL_UNITS", "BULKUNITS_SHARED", "BULKUNITS_ROWS_PER_PAGE", "BULKUNITS_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    yield
    reset_debug_logger()


# -------- Session fixtures --------
@pytest.fixture
def confirmed_batches():
    """Collects every batch handed to on_confirm."""
    return []


@pytest.fixture
def session_factory(confirmed_batches):
    """
    Callable factory for sessions wired to confirmed_batches.

    Usage:
        s = session_factory()
        s = session_factory(existing=["101"], shared_occupancy=True, max_total_units=10)
    """

    def _factory(existing=(), **config_overrides):
        return BulkSetupSession(
            existing_identifiers=list(existing),
            on_confirm=confirmed_batches.append,
            config=make_config(**config_overrides),
        )

    return _factory
