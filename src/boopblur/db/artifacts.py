"""Database model for captured artifacts.

One table, ``artifacts``, keyed by ``id`` with non-unique indices on the
temporal keys the journal queries by: ``iso_date``, ``week_key`` and ``ts``.
"""

from sqlalchemy import BigInteger, Index, Integer, LargeBinary, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from boopblur.core.models import PHOTO, Artifact


class ArtifactBase(DeclarativeBase):
    """Base class for artifact models."""


class ArtifactRow(ArtifactBase):
    """A persisted capture."""

    __tablename__ = "artifacts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    ts: Mapped[int] = mapped_column(BigInteger, nullable=False)
    iso_date: Mapped[str] = mapped_column(String(10), nullable=False)
    week_key: Mapped[str] = mapped_column(String(8), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default=PHOTO)
    blob: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    spark_pack_id: Mapped[str] = mapped_column(String(256), nullable=False)
    spark_index: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_artifacts_date", "iso_date"),
        Index("idx_artifacts_week", "week_key"),
        Index("idx_artifacts_ts", "ts"),
    )

    @classmethod
    def from_artifact(cls, artifact: Artifact) -> "ArtifactRow":
        return cls(
            id=artifact.id,
            ts=artifact.ts,
            iso_date=artifact.iso_date,
            week_key=artifact.week_key,
            type=artifact.type,
            blob=artifact.blob,
            spark_pack_id=artifact.spark_pack_id,
            spark_index=artifact.spark_index,
        )

    def to_artifact(self) -> Artifact:
        """Detach into an immutable Artifact."""
        return Artifact(
            id=self.id,
            ts=self.ts,
            iso_date=self.iso_date,
            week_key=self.week_key,
            type=self.type,
            blob=bytes(self.blob),
            spark_pack_id=self.spark_pack_id,
            spark_index=self.spark_index,
        )
