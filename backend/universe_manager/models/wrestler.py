"""
Wrestler Model

Identity and win/loss record of a performer
"""
from sqlalchemy import Column, String, Integer, Boolean
from sqlalchemy.orm import relationship

from universe_manager.database import Base
from universe_manager.models.types import Gender, TimestampMixin, enum_type


class Wrestler(Base, TimestampMixin):
    """
    Wrestler

    Never hard-deleted while any reign or roster row references it; the
    foreign keys are RESTRICT and the relationships below are passive so
    the ORM leaves the decision to the store.
    """
    __tablename__ = "wrestlers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    gender = Column(enum_type(Gender), nullable=False)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    is_user_created = Column(Boolean, default=False)

    # Relationships
    reigns = relationship(
        "TitleHolder",
        back_populates="wrestler",
        passive_deletes="all",
        lazy="dynamic"
    )
    roster_entries = relationship(
        "ShowRoster",
        back_populates="wrestler",
        passive_deletes="all",
        lazy="dynamic"
    )

    def __repr__(self):
        return f"<Wrestler(name={self.name}, gender={self.gender})>"
