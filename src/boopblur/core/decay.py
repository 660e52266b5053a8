"""Visual decay classification.

An artifact's age in days is mapped onto an ordered threshold table. The
state whose threshold is the greatest value <= age wins; ages below the
first threshold (future captures) get the first state.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from boopblur.config import DEFAULT_DECAY_THRESHOLDS


@dataclass(frozen=True)
class DecayTable:
    """Ascending ``(threshold_days, state)`` pairs."""

    thresholds: tuple[int, ...]
    states: tuple[str, ...]

    def __post_init__(self):
        if not self.thresholds:
            raise ValueError("decay table must have at least one threshold")
        if len(self.thresholds) != len(self.states):
            raise ValueError("decay table needs one state per threshold")
        for lower, upper in zip(self.thresholds, self.thresholds[1:]):
            if upper <= lower:
                raise ValueError(
                    f"decay thresholds must be strictly ascending, got {lower} then {upper}"
                )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, str]]) -> DecayTable:
        items = list(pairs)
        return cls(
            thresholds=tuple(t for t, _ in items),
            states=tuple(s for _, s in items),
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> DecayTable:
        """Build from a ``{state: threshold}`` mapping (config format)."""
        return cls.from_pairs((days, state) for state, days in mapping.items())


DEFAULT_DECAY_TABLE = DecayTable.from_mapping(DEFAULT_DECAY_THRESHOLDS)


def decay_state(age_days: int, table: DecayTable = DEFAULT_DECAY_TABLE) -> str:
    """Return the decay state for an age in days."""
    pos = bisect_right(table.thresholds, age_days) - 1
    return table.states[max(pos, 0)]
