"""Vibe packs — the decorative one-liners ("sparks") shown with captures.

Artifacts reference a spark by pack id and index only. Nothing enforces
that the pack still exists, so lookups return None for dangling references.
"""

from __future__ import annotations

from boopblur.core.models import VibePack
from boopblur.core.temporal import content_hash

BUILTIN_PACKS: dict[str, VibePack] = {
    pack.id: pack
    for pack in (
        VibePack(
            id="zen-but-dumb",
            name="Zen, but dumb",
            spark_lines=(
                "Be the toast you wish to see in the world.",
                "This moment is fine. Probably.",
                "Breathe in. Breathe out. Blink occasionally.",
                "You are here. So is this photo.",
                "Inner peace, outer snacks.",
                "Nothing lasts. Especially this picture.",
                "Let it go. It's getting blurry anyway.",
            ),
        ),
        VibePack(
            id="tiny-wins",
            name="Tiny wins",
            spark_lines=(
                "You showed up. That counts.",
                "Proof you existed today.",
                "Small boop, big energy.",
                "Another square on the calendar.",
                "Future you says thanks.",
            ),
        ),
        VibePack(
            id="weather-report",
            name="Weather report",
            spark_lines=(
                "Outlook: mostly you.",
                "Light chance of memories.",
                "Visibility decreasing over the coming days.",
                "Scattered feelings, clearing by evening.",
            ),
        ),
    )
}


def get_pack(pack_id: str) -> VibePack | None:
    return BUILTIN_PACKS.get(pack_id)


def list_packs() -> list[VibePack]:
    return list(BUILTIN_PACKS.values())


def spark_index_for_day(pack: VibePack, iso_date: str) -> int:
    """Stable spark index for a calendar day: the same day picks the same line."""
    if not pack.spark_lines:
        return 0
    return content_hash(iso_date) % len(pack.spark_lines)


def spark_line(pack_id: str, index: int) -> str | None:
    """Resolve a spark reference, or None if the pack or index is gone."""
    pack = get_pack(pack_id)
    if pack is None or not 0 <= index < len(pack.spark_lines):
        return None
    return pack.spark_lines[index]
