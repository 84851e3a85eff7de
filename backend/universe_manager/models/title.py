"""
Title Model

A championship belt. Prestige tier is derived from the division once, at
creation time.
"""
from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from universe_manager.database import Base
from universe_manager.models.types import TitleGender, TitleType, TimestampMixin, enum_type

WORLD_TIER = 1
SECONDARY_TIER = 2
TAG_TEAM_TIER = 3
SPECIALTY_TIER = 4

_DIVISION_TIERS = {
    "World": WORLD_TIER,
    "WWE Championship": WORLD_TIER,
    "Women's World": WORLD_TIER,
    "WWE Women's Championship": WORLD_TIER,
    "Intercontinental": SECONDARY_TIER,
    "United States": SECONDARY_TIER,
    "Women's Intercontinental": SECONDARY_TIER,
    "Women's United States": SECONDARY_TIER,
    "World Tag Team": TAG_TEAM_TIER,
    "WWE Tag Team": TAG_TEAM_TIER,
    "Women's Tag Team": TAG_TEAM_TIER,
}


def prestige_tier_for_division(division: str) -> int:
    """Map a division name to its prestige tier (1 = World ... 4 = Specialty)"""
    return _DIVISION_TIERS.get(division, SPECIALTY_TIER)


class Title(Base, TimestampMixin):
    """
    Title (Championship)

    current_holder_id mirrors the open TitleHolder row and is written only
    by the title ledger, inside the same transaction as the reign change.
    """
    __tablename__ = "titles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    current_holder_id = Column(
        Integer,
        ForeignKey("wrestlers.id", ondelete="SET NULL"),
        nullable=True
    )
    title_type = Column(enum_type(TitleType), nullable=False, default=TitleType.SINGLES)
    division = Column(String(100), nullable=False)
    prestige_tier = Column(Integer, nullable=False)
    gender = Column(enum_type(TitleGender), nullable=False)
    show_id = Column(
        Integer,
        ForeignKey("shows.id", ondelete="SET NULL"),
        nullable=True
    )
    is_active = Column(Boolean, nullable=False, default=True)
    is_user_created = Column(Boolean, default=False)

    # Relationships
    show = relationship("Show", back_populates="titles")
    current_holder = relationship("Wrestler", foreign_keys=[current_holder_id])
    reigns = relationship(
        "TitleHolder",
        back_populates="title",
        passive_deletes="all",
        order_by="TitleHolder.held_since",
        lazy="dynamic"
    )

    def __repr__(self):
        return f"<Title(name={self.name}, division={self.division}, tier={self.prestige_tier})>"
