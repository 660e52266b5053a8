"""Retention policy engine — decides which artifacts a policy expires.

Pure decisions over the artifact set; deleting is the caller's job. Ages are
compared with a strict ``>``, so an artifact exactly at the limit is kept.
Anything that isn't a known policy is treated as ``off``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from boopblur.core.models import Artifact, DeletionPolicy
from boopblur.core.temporal import age_days

logger = logging.getLogger(__name__)

POLICY_MAX_AGE_DAYS: dict[DeletionPolicy, int] = {
    DeletionPolicy.DELETE_14_DAYS: 14,
    DeletionPolicy.KEEP_4_WEEKS: 28,
}


def resolve_policy(value: str | DeletionPolicy | None) -> DeletionPolicy:
    """Map a configured value onto a policy, falling back to ``off``."""
    if isinstance(value, DeletionPolicy):
        return value
    try:
        return DeletionPolicy(value)
    except ValueError:
        logger.warning("Unrecognized deletion policy %r; treating it as 'off'", value)
        return DeletionPolicy.OFF


def max_age_days(policy: str | DeletionPolicy | None) -> int | None:
    """Oldest age in days a policy keeps, or None when nothing expires."""
    return POLICY_MAX_AGE_DAYS.get(resolve_policy(policy))


def select_expired(
    artifacts: Iterable[Artifact],
    policy: str | DeletionPolicy | None,
    now: int,
) -> list[str]:
    """Return ids of artifacts the policy deletes as of ``now`` (ms)."""
    limit = max_age_days(policy)
    if limit is None:
        return []
    return [a.id for a in artifacts if age_days(a.ts, now) > limit]
