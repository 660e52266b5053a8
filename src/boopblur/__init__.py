"""Boop-Blur - a photo-of-the-day journal whose captures blur with age.

Usage:
    import asyncio
    from boopblur import ArtifactLifecycle, get_store

    journal = ArtifactLifecycle(get_store())
    asyncio.run(journal.load())
    journal.has_captured_today()
"""

from boopblur.core.decay import DecayTable, decay_state
from boopblur.core.models import Artifact, DeletionPolicy, VibePack
from boopblur.lifecycle import ArtifactLifecycle, CleanupReport
from boopblur.preferences import JournalSettings, SettingsService, Trace, TraceService
from boopblur.retention import resolve_policy, select_expired
from boopblur.store import ArtifactStore, get_store, reset_store

__all__ = [
    "Artifact",
    "ArtifactLifecycle",
    "ArtifactStore",
    "CleanupReport",
    "DecayTable",
    "DeletionPolicy",
    "JournalSettings",
    "SettingsService",
    "Trace",
    "TraceService",
    "VibePack",
    "decay_state",
    "get_store",
    "reset_store",
    "resolve_policy",
    "select_expired",
]

__version__ = "0.1.0"
