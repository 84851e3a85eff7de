"""
TitleHolder Model

One championship reign. held_until IS NULL marks the open (current) reign.
"""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from universe_manager.database import Base
from universe_manager.models.types import ChangeMethod, TimestampMixin, enum_type, utcnow


class TitleHolder(Base, TimestampMixin):
    """
    TitleHolder (Reign)

    At most one open row per title, guarded by a partial unique index.
    Closed rows are history and are never updated again.
    """
    __tablename__ = "title_holders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_id = Column(
        Integer,
        ForeignKey("titles.id", ondelete="RESTRICT"),
        nullable=False
    )
    wrestler_id = Column(
        Integer,
        ForeignKey("wrestlers.id", ondelete="RESTRICT"),
        nullable=False
    )
    held_since = Column(DateTime, nullable=False, default=utcnow)
    held_until = Column(DateTime, nullable=True)
    event_name = Column(String(200))
    event_location = Column(String(200))
    change_method = Column(enum_type(ChangeMethod), nullable=True)

    __table_args__ = (
        Index("idx_title_holders_title_id", "title_id"),
        Index("idx_title_holders_wrestler_id", "wrestler_id"),
        Index(
            "uq_title_holders_open_reign",
            "title_id",
            unique=True,
            sqlite_where=held_until.is_(None),
            postgresql_where=held_until.is_(None),
        ),
    )

    # Relationships
    title = relationship("Title", back_populates="reigns")
    wrestler = relationship("Wrestler", back_populates="reigns")

    @property
    def is_open(self) -> bool:
        return self.held_until is None

    def __repr__(self):
        return (
            f"<TitleHolder(title_id={self.title_id}, wrestler_id={self.wrestler_id}, "
            f"held_until={self.held_until})>"
        )
