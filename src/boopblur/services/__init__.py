"""Service layer for Boop-Blur storage operations.

- artifacts: Artifact CRUD against the artifact database
"""

from boopblur.services import artifacts

__all__ = [
    "artifacts",
]
