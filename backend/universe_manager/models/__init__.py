"""
SQLAlchemy ORM Models

Export all models for easy importing.
"""
from universe_manager.models.types import (
    ChangeMethod,
    Gender,
    TimestampMixin,
    TitleGender,
    TitleType,
    utcnow,
)
from universe_manager.models.wrestler import Wrestler
from universe_manager.models.show import Show
from universe_manager.models.title import Title, prestige_tier_for_division
from universe_manager.models.title_holder import TitleHolder
from universe_manager.models.show_roster import ShowRoster

__all__ = [
    "ChangeMethod",
    "Gender",
    "TimestampMixin",
    "TitleGender",
    "TitleType",
    "utcnow",
    "Wrestler",
    "Show",
    "Title",
    "prestige_tier_for_division",
    "TitleHolder",
    "ShowRoster",
]
