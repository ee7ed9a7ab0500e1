"""SQLAlchemy adapter – ORM rows for flags and their overrides.

One ``feature_flags`` row per flag, keyed by name (the primary key is the
storage-level uniqueness guarantee for flag names), and one
``flag_overrides`` row per ``(flag, kind, target)``.  Overrides are owned by
their flag: the relationship cascades deletes, and the foreign key carries
``ON DELETE CASCADE`` for deletes issued outside the ORM.
"""
from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from flagengine.application.feature_flags import FlagRecord, OverrideKind, OverrideRecord


class Base(DeclarativeBase):
    pass


class FlagRow(Base):
    __tablename__ = "feature_flags"

    name: Mapped[str] = mapped_column(String(256), primary_key=True)
    is_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)

    overrides: Mapped[list[OverrideRow]] = relationship(
        back_populates="flag",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OverrideRow.id",
    )

    @classmethod
    def from_record(cls, record: FlagRecord) -> FlagRow:
        row = cls(name=record.name, is_enabled=record.is_enabled, description=record.description)
        row.overrides = [
            OverrideRow(kind=o.kind.value, target_id=o.target_id, is_enabled=o.is_enabled)
            for o in record.overrides
        ]
        return row

    def to_record(self) -> FlagRecord:
        return FlagRecord(
            name=self.name,
            is_enabled=self.is_enabled,
            description=self.description,
            overrides=tuple(
                OverrideRecord(OverrideKind(o.kind), o.target_id, o.is_enabled)
                for o in self.overrides
            ),
        )

    def apply(self, record: FlagRecord) -> None:
        """Make this row (and its override rows) match *record*.

        Existing override rows are updated in place rather than deleted and
        re-inserted, so the unique ``(flag, kind, target)`` constraint is never
        transiently violated within a flush.
        """
        self.is_enabled = record.is_enabled
        self.description = record.description
        wanted = {(o.kind.value, o.target_id): o.is_enabled for o in record.overrides}
        for override in list(self.overrides):
            key = (override.kind, override.target_id)
            if key in wanted:
                override.is_enabled = wanted.pop(key)
            else:
                self.overrides.remove(override)
        for (kind, target_id), is_enabled in wanted.items():
            self.overrides.append(OverrideRow(kind=kind, target_id=target_id, is_enabled=is_enabled))


class OverrideRow(Base):
    __tablename__ = "flag_overrides"
    __table_args__ = (
        UniqueConstraint("flag_name", "kind", "target_id", name="uq_flag_overrides_target"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flag_name: Mapped[str] = mapped_column(
        String(256), ForeignKey("feature_flags.name", ondelete="CASCADE"), index=True
    )
    kind: Mapped[str] = mapped_column(String(16))
    target_id: Mapped[str] = mapped_column(String(256))
    is_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False)

    flag: Mapped[FlagRow] = relationship(back_populates="overrides")


__all__ = ["Base", "FlagRow", "OverrideRow"]
