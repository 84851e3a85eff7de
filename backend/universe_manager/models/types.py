"""
Custom SQLAlchemy Types and Mixins

Closed enums for gender, title type and change method, the clock used for
all ledger timestamps, and common timestamp columns.
"""
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime
from sqlalchemy import Enum as SAEnum


def utcnow() -> datetime:
    """
    Naive UTC now.

    SQLite drops tzinfo on round-trip, so every timestamp the engine writes
    is naive UTC to keep held_since arithmetic consistent.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Gender(str, Enum):
    """Wrestler gender"""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class TitleGender(str, Enum):
    """Gender restriction of a title; Mixed admits any wrestler"""
    MALE = "Male"
    FEMALE = "Female"
    MIXED = "Mixed"

    def admits(self, gender: Gender) -> bool:
        return self is TitleGender.MIXED or self.value == Gender(gender).value


class TitleType(str, Enum):
    """Championship format"""
    SINGLES = "Singles"
    TAG_TEAM = "Tag Team"
    TRIPLE_TAG_TEAM = "Triple Tag Team"


class ChangeMethod(str, Enum):
    """How a reign started or ended"""
    WON = "Won"
    AWARDED = "Awarded"
    STRIPPED = "Stripped"
    VACATED = "Vacated"


def enum_type(enum_cls) -> SAEnum:
    """Store an enum by its value in a VARCHAR column with a CHECK constraint"""
    return SAEnum(
        enum_cls,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        name=f"{enum_cls.__name__.lower()}_enum",
    )


class TimestampMixin:
    """
    Mixin for common timestamp columns.

    Provides:
    - created_at: Auto-set on insert
    - updated_at: Auto-updated on update
    """
    created_at = Column(
        DateTime,
        default=utcnow,
        nullable=False
    )
    updated_at = Column(
        DateTime,
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )
