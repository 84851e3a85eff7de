"""
Show Model

A wrestling program (e.g. Monday Night RAW) with its own roster
"""
from sqlalchemy import Column, String, Integer, Text
from sqlalchemy.orm import relationship

from universe_manager.database import Base
from universe_manager.models.types import TimestampMixin


class Show(Base, TimestampMixin):
    """
    Show (Brand)

    Examples: Monday Night RAW, Friday Night SmackDown
    """
    __tablename__ = "shows"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")

    # Relationships
    roster_entries = relationship(
        "ShowRoster",
        back_populates="show",
        passive_deletes="all",
        lazy="dynamic"
    )
    titles = relationship("Title", back_populates="show", lazy="dynamic")

    def __repr__(self):
        return f"<Show(name={self.name})>"
