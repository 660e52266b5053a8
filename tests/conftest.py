"""Shared test fixtures for Boop-Blur."""

from __future__ import annotations

import itertools

import pytest

from tests.helpers.factories import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"art-{next(counter):03d}"


@pytest.fixture
def store(tmp_path):
    """Fresh artifact store on a temporary database."""
    from boopblur.store import ArtifactStore

    s = ArtifactStore(tmp_path / "journal" / "boop-blur.db")
    yield s
    s.close()


@pytest.fixture
def settings_service(tmp_path):
    from boopblur.preferences import SettingsService

    return SettingsService(tmp_path / "settings.json")


@pytest.fixture
def trace_service(tmp_path):
    from boopblur.preferences import TraceService

    return TraceService(tmp_path / "trace.json")


@pytest.fixture
def journal(store, settings_service, trace_service, clock, id_factory):
    """Lifecycle controller wired to temp storage and a fixed clock."""
    from boopblur.lifecycle import ArtifactLifecycle

    return ArtifactLifecycle(
        store,
        settings=settings_service,
        trace=trace_service,
        clock=clock,
        id_factory=id_factory,
    )


@pytest.fixture(autouse=True)
def _isolate_globals(tmp_path, monkeypatch):
    """Keep cached config and the process-wide store out of the user's home."""
    from boopblur.config import reset_config
    from boopblur.store import reset_store

    monkeypatch.setenv("BOOPBLUR_STORAGE_DIR", str(tmp_path / "home-storage"))
    reset_config()
    reset_store()
    yield
    reset_store()
    reset_config()
