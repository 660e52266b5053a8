"""Tests for application config."""

from __future__ import annotations

from pathlib import Path

from boopblur.config import DEFAULT_DECAY_THRESHOLDS, AppConfig, get_config, reset_config
from boopblur.core.decay import DecayTable, decay_state


class TestAppConfig:
    def test_paths_under_storage_dir(self, tmp_path):
        config = AppConfig(storage_dir=tmp_path / "store")
        assert config.db_path == tmp_path / "store" / "boop-blur.db"
        assert config.settings_path == tmp_path / "store" / "settings.json"
        assert config.trace_path == tmp_path / "store" / "trace.json"
        assert config.logs_dir == tmp_path / "store" / "logs"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BOOPBLUR_STORAGE_DIR", str(tmp_path / "env"))
        monkeypatch.setenv("BOOPBLUR_DEFAULT_DELETION_POLICY", "keep-4-weeks")
        monkeypatch.setenv("BOOPBLUR_DECAY_THRESHOLDS", '{"fresh": 0, "stale": 2}')

        config = AppConfig()
        assert config.storage_dir == tmp_path / "env"
        assert config.default_deletion_policy == "keep-4-weeks"
        assert decay_state(5, DecayTable.from_mapping(config.decay_thresholds)) == "stale"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BOOPBLUR_STORAGE_DIR", raising=False)
        config = AppConfig()
        assert config.storage_dir == Path.home() / ".boopblur"
        assert config.default_vibe_pack == "zen-but-dumb"
        assert config.default_deletion_policy == "off"
        assert config.decay_thresholds == DEFAULT_DECAY_THRESHOLDS

    def test_tilde_expanded(self):
        config = AppConfig(storage_dir=Path("~/boops"))
        assert config.storage_dir == Path.home() / "boops"

    def test_ensure_storage_dir(self, tmp_path):
        config = AppConfig(storage_dir=tmp_path / "a" / "b")
        config.ensure_storage_dir()
        assert config.storage_dir.is_dir()

    def test_get_config_cached(self):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
