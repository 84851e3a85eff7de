"""
Show Schemas

Pydantic models for Show and roster endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShowBase(BaseModel):
    """Base show schema"""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""


class ShowCreate(ShowBase):
    """Show creation payload"""

    model_config = {"str_strip_whitespace": True}


class ShowResponse(ShowBase):
    """Show response schema"""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ShowRosterResponse(BaseModel):
    """Roster membership row"""
    id: int
    show_id: int
    wrestler_id: int
    assigned_at: Optional[datetime] = None
    is_active: bool

    model_config = {"from_attributes": True}


class RosterRemovalResponse(BaseModel):
    """Result of removing a wrestler from a show"""
    show_id: int
    wrestler_id: int
    changed: bool
