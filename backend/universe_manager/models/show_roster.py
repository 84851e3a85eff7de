"""
ShowRoster Model

Membership of a wrestler on a show's roster. Deactivated rows stay as
history; a wrestler has at most one active row.
"""
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from universe_manager.database import Base
from universe_manager.models.types import utcnow


class ShowRoster(Base):
    """ShowRoster (Exclusive Assignment)"""
    __tablename__ = "show_rosters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    show_id = Column(
        Integer,
        ForeignKey("shows.id", ondelete="RESTRICT"),
        nullable=False
    )
    wrestler_id = Column(
        Integer,
        ForeignKey("wrestlers.id", ondelete="RESTRICT"),
        nullable=False
    )
    assigned_at = Column(DateTime, default=utcnow)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("idx_show_rosters_show_active", "show_id", "is_active"),
        Index("idx_show_rosters_wrestler_active", "wrestler_id", "is_active"),
        Index(
            "uq_show_rosters_active_wrestler",
            "wrestler_id",
            unique=True,
            sqlite_where=is_active.is_(True),
            postgresql_where=is_active.is_(True),
        ),
    )

    # Relationships
    show = relationship("Show", back_populates="roster_entries")
    wrestler = relationship("Wrestler", back_populates="roster_entries")

    def __repr__(self):
        return (
            f"<ShowRoster(show_id={self.show_id}, wrestler_id={self.wrestler_id}, "
            f"is_active={self.is_active})>"
        )
