"""Tests for the vibe-pack catalog."""

from __future__ import annotations

from boopblur.config import DEFAULT_VIBE_PACK
from boopblur.core.models import VibePack
from boopblur.core.temporal import content_hash
from boopblur.vibes import get_pack, list_packs, spark_index_for_day, spark_line


class TestCatalog:
    def test_default_pack_exists(self):
        pack = get_pack(DEFAULT_VIBE_PACK)
        assert pack is not None
        assert pack.spark_lines

    def test_unknown_pack(self):
        assert get_pack("nope") is None

    def test_list_packs_ids_unique(self):
        ids = [p.id for p in list_packs()]
        assert len(ids) == len(set(ids))


class TestSparks:
    def test_index_is_stable_per_day(self):
        pack = get_pack(DEFAULT_VIBE_PACK)
        assert spark_index_for_day(pack, "2026-03-18") == spark_index_for_day(pack, "2026-03-18")
        assert spark_index_for_day(pack, "2026-03-18") == content_hash("2026-03-18") % len(
            pack.spark_lines
        )

    def test_index_in_range(self):
        pack = get_pack("weather-report")
        for day in range(1, 29):
            assert 0 <= spark_index_for_day(pack, f"2026-02-{day:02d}") < len(pack.spark_lines)

    def test_empty_pack(self):
        assert spark_index_for_day(VibePack(id="empty", name="Empty"), "2026-01-01") == 0

    def test_spark_line_resolves(self):
        pack = get_pack("tiny-wins")
        assert spark_line("tiny-wins", 1) == pack.spark_lines[1]

    def test_dangling_references_degrade(self):
        assert spark_line("gone-pack", 0) is None
        assert spark_line("tiny-wins", 999) is None
        assert spark_line("tiny-wins", -1) is None
