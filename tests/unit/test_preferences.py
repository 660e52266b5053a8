"""Tests for the settings and trace records."""

from __future__ import annotations

import json
import logging

import pytest

from boopblur.core.models import DeletionPolicy
from boopblur.preferences import JournalSettings, SettingsService, Trace, TraceService


class TestSettingsService:
    def test_defaults_when_absent(self, settings_service):
        settings = settings_service.load()
        assert settings.active_vibe_pack == "zen-but-dumb"
        assert settings.deletion_policy == "off"
        assert not settings_service.path.exists()

    def test_configured_defaults(self, tmp_path):
        service = SettingsService(
            tmp_path / "s.json",
            default_vibe_pack="tiny-wins",
            default_deletion_policy="keep-4-weeks",
        )
        assert service.settings.active_vibe_pack == "tiny-wins"
        assert service.settings.deletion_policy == "keep-4-weeks"

    def test_setters_persist_immediately(self, settings_service):
        settings_service.set_active_vibe_pack("weather-report")
        settings_service.set_deletion_policy(DeletionPolicy.DELETE_14_DAYS)

        on_disk = json.loads(settings_service.path.read_text())
        assert on_disk == {"activeVibePack": "weather-report", "deletionPolicy": "delete-14-days"}

        fresh = SettingsService(settings_service.path)
        assert fresh.settings.active_vibe_pack == "weather-report"
        assert fresh.settings.deletion_policy == "delete-14-days"

    def test_unknown_policy_is_stored_verbatim(self, settings_service):
        settings_service.set_deletion_policy("someday")
        assert SettingsService(settings_service.path).settings.deletion_policy == "someday"

    def test_reads_camel_case_record(self, settings_service):
        settings_service.path.write_text(
            json.dumps({"activeVibePack": "tiny-wins", "deletionPolicy": "keep-4-weeks"})
        )
        settings = settings_service.load()
        assert settings == JournalSettings(
            active_vibe_pack="tiny-wins", deletion_policy="keep-4-weeks"
        )

    def test_partial_record_fills_defaults(self, settings_service):
        settings_service.path.write_text(json.dumps({"activeVibePack": "tiny-wins"}))
        assert settings_service.load().deletion_policy == "off"

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[]", "null", '{"activeVibePack": 42}', ""],
    )
    def test_corrupt_record_falls_back_to_defaults(self, settings_service, content, caplog):
        settings_service.path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="boopblur.preferences"):
            settings = settings_service.load()
        assert settings == JournalSettings()
        assert "Ignoring unreadable" in caplog.text

    def test_reset(self, settings_service):
        settings_service.set_active_vibe_pack("tiny-wins")
        settings_service.reset()
        assert SettingsService(settings_service.path).settings == JournalSettings()


class TestTraceService:
    def test_defaults_when_absent(self, trace_service):
        assert trace_service.trace == Trace(total_boops=0, last_boop_ts=0)

    def test_record_boop_increments_and_persists(self, trace_service):
        trace_service.record_boop(at=1_000)
        trace_service.record_boop(at=2_000)

        on_disk = json.loads(trace_service.path.read_text())
        assert on_disk == {"totalBoops": 2, "lastBoopTs": 2_000}
        assert TraceService(trace_service.path).trace.total_boops == 2

    def test_record_boop_defaults_to_now(self, trace_service):
        trace = trace_service.record_boop()
        assert trace.last_boop_ts > 0

    def test_reset_to_zero(self, trace_service):
        trace_service.record_boop(at=5)
        trace_service.reset()
        assert TraceService(trace_service.path).trace == Trace()

    @pytest.mark.parametrize(
        "content",
        ["garbage", '{"totalBoops": -3, "lastBoopTs": 0}', '{"totalBoops": "many"}'],
    )
    def test_corrupt_record_falls_back_to_defaults(self, trace_service, content):
        trace_service.path.write_text(content)
        assert trace_service.load() == Trace()

    def test_counting_resumes_after_corruption(self, trace_service):
        trace_service.path.write_text("{{{")
        trace_service.record_boop(at=10)
        assert TraceService(trace_service.path).trace.total_boops == 1
